"""Services for news business logic."""

from .exceptions import (
    NewsServiceError,
    NewsNotFoundError,
    UnauthorizedNewsActionError,
)
from .news_management import (
    NEWS_LIST_SPEC,
    create_news,
    get_news_by_id,
    update_news,
    delete_news,
    list_news,
)

__all__ = [
    # Exceptions
    'NewsServiceError',
    'NewsNotFoundError',
    'UnauthorizedNewsActionError',
    # Services
    'NEWS_LIST_SPEC',
    'create_news',
    'get_news_by_id',
    'update_news',
    'delete_news',
    'list_news',
]
