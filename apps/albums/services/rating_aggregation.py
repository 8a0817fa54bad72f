"""Rating aggregation service with concurrency protection."""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import Count, Sum

from ..models import Album

logger = logging.getLogger(__name__)

RATING_PRECISION = Decimal('0.1')


def mean_rating(total: int, count: int) -> Decimal:
    """
    Arithmetic mean rounded half-up to one decimal place.

    An empty set averages to 0.0.
    """
    if not count:
        return Decimal('0.0')
    return (Decimal(total) / Decimal(count)).quantize(RATING_PRECISION, rounding=ROUND_HALF_UP)


@transaction.atomic
def recompute_album_rating(*, album_id: UUID) -> Optional[Album]:
    """
    Recalculate and store an album's aggregate rating from its active reviews.

    Uses select_for_update() so concurrent review writes for the same album
    serialize their recomputes. Only ``average_rating`` and ``total_reviews``
    are written; calling this twice in a row is a no-op the second time.

    Args:
        album_id: Album UUID

    Returns:
        Updated Album instance, or None if the album no longer exists
    """
    # Imported here: the reviews app depends on albums
    from apps.reviews.models import Review

    try:
        album = (
            Album.objects
            .select_for_update()
            .get(id=album_id)
        )
    except Album.DoesNotExist:
        logger.warning("Rating recompute skipped: referenced album %s missing", album_id)
        return None

    aggregates = Review.objects.filter(album_id=album_id, is_active=True).aggregate(
        total=Sum('rating'),
        count=Count('id'),
    )
    count = aggregates['count'] or 0

    album.average_rating = mean_rating(aggregates['total'] or 0, count)
    album.total_reviews = count
    album.save(update_fields=['average_rating', 'total_reviews'])

    logger.debug(
        "Album %s rating recomputed: %s over %d review(s)",
        album_id, album.average_rating, count,
    )
    return album


def get_top_rated_albums(*, limit: int = 10, min_reviews: int = 3):
    """
    Get top-rated albums with a minimum review count.

    Args:
        limit: Number of albums to return
        min_reviews: Minimum number of reviews required

    Returns:
        QuerySet of top-rated albums
    """
    return (
        Album.objects
        .select_related('artist')
        .filter(total_reviews__gte=min_reviews)
        .order_by('-average_rating', '-total_reviews', 'id')[:limit]
    )


def get_most_reviewed_albums(*, limit: int = 10):
    """Get albums with the most reviews."""
    return (
        Album.objects
        .select_related('artist')
        .order_by('-total_reviews', '-average_rating', 'id')[:limit]
    )
