"""Review management service - CRUD operations for reviews."""

import logging
from typing import Any, Mapping, Optional
from uuid import UUID

from django.db import IntegrityError, transaction
from django.db.models import Count, QuerySet

from apps.accounts.models import User
from apps.accounts.roles import Capability, has_capability
from apps.albums.models import Album
from apps.albums.services import AlbumNotFoundError, recompute_album_rating
from apps.core.pagination import (
    ListSpec,
    PaginationRequest,
    PaginationResult,
    RangeFilter,
    paginate_queryset,
)
from apps.core.text import calculate_read_time
from apps.reviews.models import Review
from .exceptions import (
    DuplicateReviewError,
    InvalidRatingError,
    ReviewNotFoundError,
    UnauthorizedReviewActionError,
)

logger = logging.getLogger(__name__)

REVIEW_LIST_SPEC = ListSpec(
    sort_fields={
        'created_at': 'created_at',
        'updated_at': 'updated_at',
        'rating': 'rating',
        'likes': 'num_likes',
        'title': 'title',
        'read_time': 'read_time',
    },
    exact_fields={
        'album': 'album_id',
        'author': 'author_id',
        'rating': 'rating',
    },
    boolean_fields={
        'featured': 'featured',
        'verified': 'verified',
    },
    range_filters=(
        RangeFilter('rating', 'min_rating', 'max_rating'),
    ),
    search_fields=('title', 'content'),
)

CONTENT_FIELDS = ('title', 'content', 'pros', 'cons', 'highlights', 'lowlights', 'tags')
MODERATION_FIELDS = ('featured', 'verified')


def _validate_rating(rating: Any) -> None:
    if isinstance(rating, bool) or not isinstance(rating, int) or not (1 <= rating <= 5):
        raise InvalidRatingError("Rating must be an integer between 1 and 5")


def _active_reviews() -> QuerySet:
    return (
        Review.objects
        .filter(is_active=True)
        .select_related('author', 'album', 'album__artist')
        .annotate(
            num_likes=Count('liked_by', distinct=True),
            num_dislikes=Count('disliked_by', distinct=True),
        )
    )


@transaction.atomic
def create_review(
    *,
    author: User,
    album_id: UUID,
    rating: int,
    title: str,
    content: str,
    pros: Optional[list] = None,
    cons: Optional[list] = None,
    highlights: Optional[list] = None,
    lowlights: Optional[list] = None,
    tags: Optional[list] = None
) -> Review:
    """
    Create a new review for an album.

    This operation:
    1. Validates rating range
    2. Checks the album exists
    3. Checks for an existing active review (author, album)
    4. Creates the review with its read time
    5. Recomputes the album's aggregate rating

    Args:
        author: User writing the review
        album_id: UUID of the album being reviewed
        rating: Overall rating (1-5)
        title: Review headline
        content: Review body
        pros, cons, highlights, lowlights, tags: Optional lists of strings

    Returns:
        Created Review instance

    Raises:
        InvalidRatingError: If rating not in 1-5 range
        AlbumNotFoundError: If album doesn't exist
        DuplicateReviewError: If user already has an active review of this album
    """
    _validate_rating(rating)

    if not Album.objects.filter(id=album_id).exists():
        raise AlbumNotFoundError("Album not found")

    # One active review per user per album
    if Review.objects.filter(author=author, album_id=album_id, is_active=True).exists():
        raise DuplicateReviewError(
            "You have already reviewed this album. Please update your existing review instead."
        )

    try:
        with transaction.atomic():
            review = Review.objects.create(
                album_id=album_id,
                author=author,
                rating=rating,
                title=title,
                content=content,
                pros=pros or [],
                cons=cons or [],
                highlights=highlights or [],
                lowlights=lowlights or [],
                tags=tags or [],
                read_time=calculate_read_time(content),
            )
    except IntegrityError:
        # Database unique constraint caught duplicate
        raise DuplicateReviewError("You have already reviewed this album")

    recompute_album_rating(album_id=album_id)

    logger.info("Review %s created by %s for album %s", review.id, author.id, album_id)
    return review


def get_review_by_id(*, review_id: UUID) -> Review:
    """
    Retrieve an active review by ID.

    Raises:
        ReviewNotFoundError: If review doesn't exist or was deleted
    """
    try:
        return _active_reviews().get(id=review_id)
    except Review.DoesNotExist:
        raise ReviewNotFoundError("Review not found")


def _lock_active_review(review_id: UUID) -> Review:
    try:
        return (
            Review.objects
            .select_for_update()
            .get(id=review_id, is_active=True)
        )
    except Review.DoesNotExist:
        raise ReviewNotFoundError("Review not found")


@transaction.atomic
def update_review(
    *,
    review_id: UUID,
    user: User,
    rating: Optional[int] = None,
    **fields: Any
) -> Review:
    """
    Update an existing review.

    The author may edit their review; moderators (reviewer/admin roles) may
    edit any review and are the only ones who may set ``featured`` or
    ``verified``. Album and author cannot be changed. The album's aggregate
    rating is recomputed after every successful update.

    Args:
        review_id: UUID of review to update
        user: User making the update
        rating: New rating (1-5)
        **fields: Any of CONTENT_FIELDS or MODERATION_FIELDS

    Returns:
        Updated Review instance

    Raises:
        ReviewNotFoundError: If review doesn't exist
        UnauthorizedReviewActionError: If user may not make this change
        InvalidRatingError: If rating not in 1-5 range
    """
    review = _lock_active_review(review_id)

    is_moderator = has_capability(user, Capability.MODERATE_REVIEWS)

    # Check authorization
    if review.author_id != getattr(user, 'id', None) and not is_moderator:
        raise UnauthorizedReviewActionError("You can only update your own reviews")

    if any(fields.get(name) is not None for name in MODERATION_FIELDS) and not is_moderator:
        raise UnauthorizedReviewActionError("Only moderators can feature or verify reviews")

    if rating is not None:
        _validate_rating(rating)
        review.rating = rating

    for field_name in CONTENT_FIELDS + MODERATION_FIELDS:
        if fields.get(field_name) is not None:
            setattr(review, field_name, fields[field_name])

    if fields.get('content') is not None:
        review.read_time = calculate_read_time(review.content)

    review.save()

    recompute_album_rating(album_id=review.album_id)

    logger.info("Review %s updated by %s", review.id, user.id)
    return get_review_by_id(review_id=review.id)


@transaction.atomic
def delete_review(*, review_id: UUID, user: User, hard: bool = False) -> None:
    """
    Delete a review.

    By default the review is soft-deleted (flag flip) by its author or a
    moderator. ``hard=True`` removes the row and is reserved for admins.
    Either way the album's aggregate rating is recomputed.

    Raises:
        ReviewNotFoundError: If review doesn't exist
        UnauthorizedReviewActionError: If user may not delete this review
    """
    if hard:
        if not has_capability(user, Capability.HARD_DELETE_REVIEWS):
            raise UnauthorizedReviewActionError("Only admins can permanently delete reviews")
        try:
            review = Review.objects.select_for_update().get(id=review_id)
        except Review.DoesNotExist:
            raise ReviewNotFoundError("Review not found")

        album_id = review.album_id
        review.delete()
    else:
        review = _lock_active_review(review_id)

        if review.author_id != getattr(user, 'id', None) and not has_capability(user, Capability.MODERATE_REVIEWS):
            raise UnauthorizedReviewActionError("You can only delete your own reviews")

        album_id = review.album_id
        review.is_active = False
        review.save(update_fields=['is_active', 'updated_at'])

    recompute_album_rating(album_id=album_id)

    logger.info("Review %s %s-deleted by %s", review_id, 'hard' if hard else 'soft', user.id)


def list_reviews(
    *,
    filters: Mapping[str, Any],
    pagination: PaginationRequest
) -> PaginationResult:
    """
    Paginated listing of active reviews.

    Filters:
    - album / author: UUIDs
    - rating: exact rating; min_rating / max_rating: inclusive bounds
    - featured / verified: true/false
    - search: title, content (case-insensitive)
    """
    return paginate_queryset(
        _active_reviews(),
        spec=REVIEW_LIST_SPEC,
        filters=filters,
        pagination=pagination,
    )


def get_user_reviews(
    *,
    user: User,
    filters: Mapping[str, Any],
    pagination: PaginationRequest
) -> PaginationResult:
    """Paginated active reviews written by ``user``."""
    return paginate_queryset(
        _active_reviews().filter(author=user),
        spec=REVIEW_LIST_SPEC,
        filters=filters,
        pagination=pagination,
    )
