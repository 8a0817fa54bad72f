"""Domain-specific exceptions for artist services."""

from apps.core.exceptions import NotFoundError, ServiceError, ValidationFailedError


class ArtistsServiceError(ServiceError):
    """Base exception for artist services."""
    pass


class ArtistNotFoundError(NotFoundError, ArtistsServiceError):
    """Raised when artist does not exist."""
    default_code = 'artist_not_found'


class InvalidArtistDataError(ValidationFailedError, ArtistsServiceError):
    """Raised when artist fields are inconsistent."""
    default_code = 'invalid_artist'
