"""Domain exceptions for reviews app."""

from apps.core.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ServiceError,
    ValidationFailedError,
)


class ReviewsServiceError(ServiceError):
    """Base exception for all reviews service errors."""
    pass


class ReviewNotFoundError(NotFoundError, ReviewsServiceError):
    """Review does not exist or was deleted."""
    default_code = 'review_not_found'


class DuplicateReviewError(ConflictError, ReviewsServiceError):
    """User already has an active review of this album."""
    default_code = 'duplicate_review'


class InvalidRatingError(ValidationFailedError, ReviewsServiceError):
    """Rating must be between 1 and 5."""
    default_code = 'invalid_rating'


class InvalidReactionError(ValidationFailedError, ReviewsServiceError):
    """Reaction must be 'like' or 'dislike'."""
    default_code = 'invalid_reaction'


class UnauthorizedReviewActionError(ForbiddenError, ReviewsServiceError):
    """User cannot modify this review."""
    default_code = 'review_action_forbidden'
