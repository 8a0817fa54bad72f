"""Domain-specific exceptions for album services."""

from rest_framework import status

from apps.core.exceptions import NotFoundError, ServiceError, ValidationFailedError


class AlbumsServiceError(ServiceError):
    """Base exception for album services."""
    pass


class AlbumNotFoundError(NotFoundError, AlbumsServiceError):
    """Raised when album does not exist."""
    default_code = 'album_not_found'


class InvalidAlbumDataError(ValidationFailedError, AlbumsServiceError):
    """Raised when album fields (e.g. the track list) are malformed."""
    default_code = 'invalid_album'


class SpotifyError(AlbumsServiceError):
    """Base exception for Spotify lookups."""
    pass


class SpotifyNotConfiguredError(SpotifyError):
    """Raised when Spotify credentials are missing from settings."""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = 'Spotify integration is not configured.'
    default_code = 'spotify_not_configured'


class SpotifyAPIError(SpotifyError):
    """Raised when Spotify cannot be reached or rejects the request."""
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = 'Failed to reach Spotify.'
    default_code = 'spotify_api_error'


class TrackNotFoundError(NotFoundError, SpotifyError):
    """Raised when Spotify has no matching track."""
    default_detail = 'No tracks found.'
    default_code = 'track_not_found'
