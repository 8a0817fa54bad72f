"""Artist CRUD operations service."""

import logging
from typing import Any, Mapping, Optional
from uuid import UUID

from django.db import transaction

from apps.core.pagination import (
    ListSpec,
    PaginationRequest,
    PaginationResult,
    RangeFilter,
    paginate_queryset,
)
from ..models import Artist
from .exceptions import ArtistNotFoundError, InvalidArtistDataError

logger = logging.getLogger(__name__)

ARTIST_LIST_SPEC = ListSpec(
    sort_fields={
        'created_at': 'created_at',
        'updated_at': 'updated_at',
        'name': 'name',
        'stage_name': 'stage_name',
        'followers': 'followers',
        'monthly_listeners': 'monthly_listeners',
        'active_from': 'active_from',
    },
    exact_fields={'genre': 'genre'},
    boolean_fields={
        'featured': 'featured',
        'verified': 'verified',
        'active': 'active_to__isnull',
    },
    range_filters=(
        RangeFilter('followers', 'min_followers', 'max_followers'),
        RangeFilter('monthly_listeners', 'min_monthly_listeners', 'max_monthly_listeners'),
    ),
    search_fields=('name', 'stage_name', 'bio'),
)

EDITABLE_FIELDS = (
    'name', 'real_name', 'stage_name', 'bio', 'image', 'genre', 'hometown',
    'active_from', 'active_to', 'labels', 'social_media', 'featured',
    'verified', 'followers', 'monthly_listeners',
)


def _check_active_years(active_from: Optional[int], active_to: Optional[int]) -> None:
    if active_from is not None and active_to is not None and active_to < active_from:
        raise InvalidArtistDataError("active_to cannot be earlier than active_from")


@transaction.atomic
def create_artist(*, name: str, **fields: Any) -> Artist:
    """
    Create a new artist.

    Args:
        name: Artist name
        **fields: Any of EDITABLE_FIELDS

    Raises:
        InvalidArtistDataError: If active years are reversed
    """
    _check_active_years(fields.get('active_from'), fields.get('active_to'))

    data = {key: value for key, value in fields.items() if key in EDITABLE_FIELDS}
    artist = Artist.objects.create(name=name, **data)

    logger.info("Created artist %s (%s)", artist.id, artist.name)
    return artist


def get_artist_by_id(*, artist_id: UUID) -> Artist:
    """
    Raises:
        ArtistNotFoundError: If artist doesn't exist
    """
    try:
        return Artist.objects.get(id=artist_id)
    except Artist.DoesNotExist:
        raise ArtistNotFoundError(f"Artist {artist_id} not found")


@transaction.atomic
def update_artist(*, artist_id: UUID, data: Mapping[str, Any]) -> Artist:
    """
    Update an existing artist. Unknown fields are ignored.

    Raises:
        ArtistNotFoundError: If artist doesn't exist
        InvalidArtistDataError: If active years are reversed
    """
    try:
        artist = Artist.objects.select_for_update().get(id=artist_id)
    except Artist.DoesNotExist:
        raise ArtistNotFoundError(f"Artist {artist_id} not found")

    for field, value in data.items():
        if field in EDITABLE_FIELDS:
            setattr(artist, field, value)

    _check_active_years(artist.active_from, artist.active_to)

    artist.save()
    return artist


@transaction.atomic
def delete_artist(*, artist_id: UUID) -> None:
    """
    Permanently delete an artist together with their albums and reviews.

    Raises:
        ArtistNotFoundError: If artist doesn't exist
    """
    deleted, _ = Artist.objects.filter(id=artist_id).delete()
    if not deleted:
        raise ArtistNotFoundError(f"Artist {artist_id} not found")

    logger.info("Deleted artist %s", artist_id)


def list_artists(
    *,
    filters: Mapping[str, Any],
    pagination: PaginationRequest
) -> PaginationResult:
    """
    Paginated artist listing.

    Filters:
    - search: name, stage name, bio (case-insensitive)
    - genre: exact genre
    - featured / verified: true/false
    - active: true for artists with no end year
    - min_followers / max_followers, min_monthly_listeners / max_monthly_listeners
    """
    return paginate_queryset(
        Artist.objects.all(),
        spec=ARTIST_LIST_SPEC,
        filters=filters,
        pagination=pagination,
    )


def get_artist_albums(
    *,
    artist_id: UUID,
    filters: Mapping[str, Any],
    pagination: PaginationRequest
) -> PaginationResult:
    """
    Paginated albums of one artist, using the album allow-list.

    Raises:
        ArtistNotFoundError: If artist doesn't exist
    """
    from apps.albums.services import list_albums

    artist = get_artist_by_id(artist_id=artist_id)
    scoped = {key: filters.get(key) for key in filters}
    scoped['artist'] = str(artist.id)
    return list_albums(filters=scoped, pagination=pagination)
