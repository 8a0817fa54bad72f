"""News article CRUD operations service."""

import logging
from typing import Any, Mapping
from uuid import UUID

from django.db import transaction
from django.db.models import F, QuerySet

from apps.accounts.models import User
from apps.accounts.roles import Capability, has_capability
from apps.core.pagination import ListSpec, PaginationRequest, PaginationResult, paginate_queryset
from apps.core.text import calculate_read_time, unique_slug
from ..models import News
from .exceptions import NewsNotFoundError, UnauthorizedNewsActionError

logger = logging.getLogger(__name__)

NEWS_LIST_SPEC = ListSpec(
    sort_fields={
        'publish_date': 'publish_date',
        'created_at': 'created_at',
        'views': 'views',
        'likes': 'likes',
        'title': 'title',
    },
    exact_fields={'category': 'category'},
    boolean_fields={'featured': 'featured'},
    search_fields=('title', 'excerpt', 'content'),
    default_sort='publish_date',
)

EDITABLE_FIELDS = (
    'title', 'excerpt', 'content', 'category', 'tags', 'featured_image',
    'images', 'featured', 'published', 'publish_date', 'seo',
)


def _visible_news(viewer) -> QuerySet:
    queryset = News.objects.select_related('author')
    if not has_capability(viewer, Capability.PUBLISH_NEWS):
        queryset = queryset.filter(published=True)
    return queryset


@transaction.atomic
def create_news(*, author: User, title: str, content: str, slug: str = '', **fields: Any) -> News:
    """
    Create a news article.

    The slug is derived from the title when not supplied and made unique
    with a numeric suffix; read time is derived from the content.
    """
    data = {key: value for key, value in fields.items() if key in EDITABLE_FIELDS}

    article = News.objects.create(
        author=author,
        title=title,
        content=content,
        slug=unique_slug(slug or title, queryset=News.objects.all()),
        read_time=calculate_read_time(content),
        **data
    )

    logger.info("News %s (%s) created by %s", article.id, article.slug, author.id)
    return article


def get_news_by_id(*, news_id: UUID, viewer=None, count_view: bool = False) -> News:
    """
    Retrieve an article. Drafts are only visible to publishers.

    Args:
        news_id: Article UUID
        viewer: Requesting user (may be anonymous)
        count_view: Increment the view counter

    Raises:
        NewsNotFoundError: If article doesn't exist or isn't visible
    """
    try:
        article = _visible_news(viewer).get(id=news_id)
    except News.DoesNotExist:
        raise NewsNotFoundError("Article not found")

    if count_view:
        News.objects.filter(id=article.id).update(views=F('views') + 1)
        article.refresh_from_db(fields=['views'])

    return article


@transaction.atomic
def update_news(*, news_id: UUID, user: User, data: Mapping[str, Any]) -> News:
    """
    Update an article (its author or any admin).

    A new title does not change the slug unless ``slug`` is passed; changed
    content recomputes the read time.

    Raises:
        NewsNotFoundError: If article doesn't exist
        UnauthorizedNewsActionError: If user may not edit this article
    """
    try:
        article = News.objects.select_for_update().get(id=news_id)
    except News.DoesNotExist:
        raise NewsNotFoundError("Article not found")

    if article.author_id != user.id and not has_capability(user, Capability.EDIT_ANY_NEWS):
        raise UnauthorizedNewsActionError("You can only update your own articles")

    for field, value in data.items():
        if field in EDITABLE_FIELDS:
            setattr(article, field, value)

    new_slug = data.get('slug')
    if new_slug and new_slug != article.slug:
        article.slug = unique_slug(new_slug, queryset=News.objects.exclude(id=article.id))

    if 'content' in data:
        article.read_time = calculate_read_time(article.content)

    article.save()
    return article


@transaction.atomic
def delete_news(*, news_id: UUID, user: User) -> None:
    """
    Raises:
        NewsNotFoundError: If article doesn't exist
        UnauthorizedNewsActionError: If user may not delete this article
    """
    try:
        article = News.objects.select_for_update().get(id=news_id)
    except News.DoesNotExist:
        raise NewsNotFoundError("Article not found")

    if article.author_id != user.id and not has_capability(user, Capability.EDIT_ANY_NEWS):
        raise UnauthorizedNewsActionError("You can only delete your own articles")

    article.delete()
    logger.info("News %s deleted by %s", news_id, user.id)


def list_news(
    *,
    filters: Mapping[str, Any],
    pagination: PaginationRequest,
    viewer=None
) -> PaginationResult:
    """
    Paginated article listing, newest first by default.

    Filters:
    - category: exact category
    - featured: true/false
    - search: title, excerpt, content (case-insensitive)

    Drafts are included only for users who may publish news.
    """
    return paginate_queryset(
        _visible_news(viewer),
        spec=NEWS_LIST_SPEC,
        filters=filters,
        pagination=pagination,
    )
