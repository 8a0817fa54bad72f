"""Likes and dislikes on reviews."""

import logging
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from apps.reviews.models import Review
from .exceptions import InvalidReactionError
from .review_management import _lock_active_review

logger = logging.getLogger(__name__)

LIKE = 'like'
DISLIKE = 'dislike'
REACTIONS = (LIKE, DISLIKE)


@transaction.atomic
def toggle_reaction(*, review_id: UUID, user: User, reaction: str) -> dict:
    """
    Toggle ``user``'s like or dislike on a review.

    Reacting the same way twice removes the reaction; switching from like to
    dislike (or back) moves it. A user is never in both sets.

    Returns:
        Dictionary with ``likes``, ``dislikes``, ``liked`` and ``disliked``

    Raises:
        InvalidReactionError: If reaction is not 'like' or 'dislike'
        ReviewNotFoundError: If review doesn't exist
    """
    if reaction not in REACTIONS:
        raise InvalidReactionError("Reaction must be 'like' or 'dislike'")

    review: Review = _lock_active_review(review_id)

    target, opposite = (
        (review.liked_by, review.disliked_by)
        if reaction == LIKE
        else (review.disliked_by, review.liked_by)
    )

    if target.filter(id=user.id).exists():
        target.remove(user)
    else:
        opposite.remove(user)
        target.add(user)

    logger.debug("User %s toggled %s on review %s", user.id, reaction, review_id)

    return {
        'review_id': review.id,
        'likes': review.liked_by.count(),
        'dislikes': review.disliked_by.count(),
        'liked': review.liked_by.filter(id=user.id).exists(),
        'disliked': review.disliked_by.filter(id=user.id).exists(),
    }
