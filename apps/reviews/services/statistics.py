"""Statistics service - Review aggregations."""

from django.db.models import Count
from uuid import UUID

from apps.albums.services import get_album_by_id
from apps.reviews.models import Review


def get_album_review_summary(*, album_id: UUID) -> dict:
    """
    Rating distribution of an album's active reviews.

    The distribution always lists every rating from 1 to 5, including
    ratings nobody gave.

    Returns:
        Dictionary with:
        - album_id
        - average_rating: stored aggregate (one decimal place)
        - total_reviews: stored aggregate
        - distribution: list of {rating, count} for ratings 1-5

    Raises:
        AlbumNotFoundError: If album doesn't exist
    """
    album = get_album_by_id(album_id=album_id)

    counts = dict(
        Review.objects
        .filter(album_id=album.id, is_active=True)
        .order_by()
        .values('rating')
        .annotate(count=Count('id'))
        .values_list('rating', 'count')
    )

    return {
        'album_id': album.id,
        'average_rating': album.average_rating,
        'total_reviews': album.total_reviews,
        'distribution': [
            {'rating': rating, 'count': counts.get(rating, 0)}
            for rating in range(1, 6)
        ],
    }
