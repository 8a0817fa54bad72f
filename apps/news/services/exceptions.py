"""Domain exceptions for news services."""

from apps.core.exceptions import ForbiddenError, NotFoundError, ServiceError


class NewsServiceError(ServiceError):
    """Base exception for news services."""
    pass


class NewsNotFoundError(NotFoundError, NewsServiceError):
    """Article does not exist or is not visible to the caller."""
    default_code = 'news_not_found'


class UnauthorizedNewsActionError(ForbiddenError, NewsServiceError):
    """User cannot modify this article."""
    default_code = 'news_action_forbidden'
