"""Album CRUD operations service."""

import logging
from typing import Any, Mapping, Optional
from uuid import UUID

from django.db import transaction

from apps.artists.models import Artist
from apps.artists.services import ArtistNotFoundError
from apps.core.pagination import (
    ListSpec,
    PaginationRequest,
    PaginationResult,
    RangeFilter,
    paginate_queryset,
    parse_float,
    parse_iso_date,
)
from ..models import Album
from .exceptions import AlbumNotFoundError, InvalidAlbumDataError

logger = logging.getLogger(__name__)

ALBUM_LIST_SPEC = ListSpec(
    sort_fields={
        'created_at': 'created_at',
        'updated_at': 'updated_at',
        'title': 'title',
        'release_date': 'release_date',
        'average_rating': 'average_rating',
        'total_reviews': 'total_reviews',
    },
    exact_fields={
        'artist': 'artist_id',
        'genre': 'genre',
        'album_type': 'album_type',
    },
    boolean_fields={
        'featured': 'featured',
        'verified': 'verified',
    },
    range_filters=(
        RangeFilter('average_rating', 'min_rating', 'max_rating', cast=parse_float),
        RangeFilter('release_date', 'released_after', 'released_before', cast=parse_iso_date),
    ),
    search_fields=('title', 'description', 'label'),
)

# average_rating / total_reviews are owned by the rating aggregator
EDITABLE_FIELDS = (
    'title', 'album_type', 'release_date', 'genre', 'cover_art', 'description',
    'tracklist', 'total_duration', 'label', 'producers', 'featured', 'verified',
    'streaming_links',
)


def tracklist_duration(tracklist) -> int:
    """
    Sum of track durations in seconds.

    Raises:
        InvalidAlbumDataError: If a track has no usable duration
    """
    total = 0
    for position, track in enumerate(tracklist or [], start=1):
        try:
            duration = int(track['duration'])
        except (KeyError, TypeError, ValueError):
            raise InvalidAlbumDataError(f"Track {position} has no valid duration")
        if duration < 0:
            raise InvalidAlbumDataError(f"Track {position} has a negative duration")
        total += duration
    return total


def _get_artist(artist_id) -> Artist:
    try:
        return Artist.objects.get(id=getattr(artist_id, 'id', artist_id))
    except Artist.DoesNotExist:
        raise ArtistNotFoundError(f"Artist {artist_id} not found")


@transaction.atomic
def create_album(
    *,
    title: str,
    artist: Any,
    total_duration: Optional[int] = None,
    **fields: Any
) -> Album:
    """
    Create a new album.

    ``total_duration`` is derived from the track list when not supplied.
    Aggregate rating fields always start at zero.

    Args:
        title: Album title
        artist: Artist instance or UUID
        total_duration: Length in seconds
        **fields: Any of EDITABLE_FIELDS

    Raises:
        ArtistNotFoundError: If the artist doesn't exist
        InvalidAlbumDataError: If the track list is malformed
    """
    artist = _get_artist(artist)
    data = {key: value for key, value in fields.items() if key in EDITABLE_FIELDS}

    derived = tracklist_duration(data.get('tracklist'))
    data['total_duration'] = total_duration if total_duration is not None else derived

    album = Album.objects.create(title=title, artist=artist, **data)

    logger.info("Created album %s (%s)", album.id, album.title)
    return album


def get_album_by_id(*, album_id: UUID) -> Album:
    """
    Raises:
        AlbumNotFoundError: If album doesn't exist
    """
    try:
        return Album.objects.select_related('artist').get(id=album_id)
    except Album.DoesNotExist:
        raise AlbumNotFoundError(f"Album {album_id} not found")


@transaction.atomic
def update_album(*, album_id: UUID, data: Mapping[str, Any]) -> Album:
    """
    Update an existing album.

    Aggregate rating fields in ``data`` are ignored. A new track list without
    an explicit ``total_duration`` re-derives the duration.

    Raises:
        AlbumNotFoundError: If album doesn't exist
        ArtistNotFoundError: If a new artist doesn't exist
        InvalidAlbumDataError: If the track list is malformed
    """
    try:
        album = Album.objects.select_for_update().get(id=album_id)
    except Album.DoesNotExist:
        raise AlbumNotFoundError(f"Album {album_id} not found")

    for field, value in data.items():
        if field in EDITABLE_FIELDS:
            setattr(album, field, value)

    if 'artist' in data:
        album.artist = _get_artist(data['artist'])

    if 'tracklist' in data and 'total_duration' not in data:
        album.total_duration = tracklist_duration(album.tracklist)

    album.save()
    return album


@transaction.atomic
def delete_album(*, album_id: UUID) -> None:
    """
    Permanently delete an album and its reviews.

    Raises:
        AlbumNotFoundError: If album doesn't exist
    """
    deleted, _ = Album.objects.filter(id=album_id).delete()
    if not deleted:
        raise AlbumNotFoundError(f"Album {album_id} not found")

    logger.info("Deleted album %s", album_id)


def list_albums(
    *,
    filters: Mapping[str, Any],
    pagination: PaginationRequest
) -> PaginationResult:
    """
    Paginated album listing.

    Filters:
    - search: title, description, label (case-insensitive)
    - artist: artist UUID
    - genre / album_type: exact match
    - featured / verified: true/false
    - min_rating / max_rating: inclusive bounds on the average rating
    - released_after / released_before: inclusive ISO dates
    """
    return paginate_queryset(
        Album.objects.select_related('artist'),
        spec=ALBUM_LIST_SPEC,
        filters=filters,
        pagination=pagination,
    )
