"""Services for artist business logic."""

from .exceptions import (
    ArtistsServiceError,
    ArtistNotFoundError,
    InvalidArtistDataError,
)
from .artist_management import (
    ARTIST_LIST_SPEC,
    create_artist,
    get_artist_by_id,
    update_artist,
    delete_artist,
    list_artists,
    get_artist_albums,
)

__all__ = [
    # Exceptions
    'ArtistsServiceError',
    'ArtistNotFoundError',
    'InvalidArtistDataError',
    # Services
    'ARTIST_LIST_SPEC',
    'create_artist',
    'get_artist_by_id',
    'update_artist',
    'delete_artist',
    'list_artists',
    'get_artist_albums',
]
