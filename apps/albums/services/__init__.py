"""Services for album business logic."""

from .exceptions import (
    AlbumsServiceError,
    AlbumNotFoundError,
    InvalidAlbumDataError,
    SpotifyError,
    SpotifyNotConfiguredError,
    SpotifyAPIError,
    TrackNotFoundError,
)
from .album_management import (
    ALBUM_LIST_SPEC,
    tracklist_duration,
    create_album,
    get_album_by_id,
    update_album,
    delete_album,
    list_albums,
)
from .rating_aggregation import (
    mean_rating,
    recompute_album_rating,
    get_top_rated_albums,
    get_most_reviewed_albums,
)
from .spotify import SpotifyClient, get_spotify_client

__all__ = [
    # Exceptions
    'AlbumsServiceError',
    'AlbumNotFoundError',
    'InvalidAlbumDataError',
    'SpotifyError',
    'SpotifyNotConfiguredError',
    'SpotifyAPIError',
    'TrackNotFoundError',
    # Album management
    'ALBUM_LIST_SPEC',
    'tracklist_duration',
    'create_album',
    'get_album_by_id',
    'update_album',
    'delete_album',
    'list_albums',
    # Rating aggregation
    'mean_rating',
    'recompute_album_rating',
    'get_top_rated_albums',
    'get_most_reviewed_albums',
    # Spotify
    'SpotifyClient',
    'get_spotify_client',
]
