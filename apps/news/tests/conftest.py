import datetime

import pytest
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.accounts.roles import Role
from apps.news.models import News, NewsCategory


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def reader(db):
    """Create and return a regular user."""
    return User.objects.create_user(
        email='reader@example.com',
        username='reader',
        password='TestPass123!',
    )


@pytest.fixture
def journalist(db):
    """Create and return a reviewer, who may publish news."""
    return User.objects.create_user(
        email='journalist@example.com',
        username='journalist',
        password='TestPass123!',
        role=Role.REVIEWER,
    )


@pytest.fixture
def other_journalist(db):
    return User.objects.create_user(
        email='journalist2@example.com',
        username='journalist2',
        password='TestPass123!',
        role=Role.REVIEWER,
    )


@pytest.fixture
def news_admin(db):
    """Create and return an admin."""
    return User.objects.create_user(
        email='editor@example.com',
        username='editor',
        password='TestPass123!',
        role=Role.ADMIN,
    )


@pytest.fixture
def reader_client(reader):
    return _client_for(reader)


@pytest.fixture
def journalist_client(journalist):
    return _client_for(journalist)


@pytest.fixture
def other_journalist_client(other_journalist):
    return _client_for(other_journalist)


@pytest.fixture
def news_admin_client(news_admin):
    return _client_for(news_admin)


@pytest.fixture
def article(journalist):
    """A published article by ``journalist``."""
    return News.objects.create(
        title='Kendrick announces new album',
        slug='kendrick-announces-new-album',
        excerpt='A surprise drop.',
        content='Details are scarce.',
        author=journalist,
        category=NewsCategory.ALBUM_RELEASES,
        published=True,
        publish_date=timezone.now() - datetime.timedelta(days=1),
    )


@pytest.fixture
def draft(journalist):
    """An unpublished article by ``journalist``."""
    return News.objects.create(
        title='Embargoed festival lineup',
        slug='embargoed-festival-lineup',
        excerpt='Not yet.',
        content='Secret.',
        author=journalist,
        category=NewsCategory.EVENTS,
        published=False,
    )
