import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.accounts.roles import Role


def _authenticate(client, user):
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return User.objects.create_user(
        email='testuser@example.com',
        username='testuser',
        password='TestPass123!',
        first_name='Test',
        last_name='User',
        is_verified=True,
    )


@pytest.fixture
def other_user(db):
    """Create and return another test user."""
    return User.objects.create_user(
        email='otheruser@example.com',
        username='otheruser',
        password='OtherPass123!',
    )


@pytest.fixture
def user_inactive(db):
    """Create and return an inactive user."""
    return User.objects.create_user(
        email='inactive@example.com',
        username='inactive',
        password='TestPass123!',
        is_active=False,
    )


@pytest.fixture
def reviewer(db):
    """Create and return a user with the reviewer role."""
    return User.objects.create_user(
        email='critic@example.com',
        username='critic',
        password='TestPass123!',
        role=Role.REVIEWER,
    )


@pytest.fixture
def admin_user(db):
    """Create and return a user with the admin role."""
    return User.objects.create_user(
        email='admin@example.com',
        username='siteadmin',
        password='TestPass123!',
        role=Role.ADMIN,
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an API client authenticated as ``user`` using JWT."""
    return _authenticate(api_client, user)


@pytest.fixture
def admin_client(api_client, admin_user):
    """Return an API client authenticated as an admin."""
    return _authenticate(api_client, admin_user)


@pytest.fixture
def other_client(other_user):
    """Return an API client authenticated as ``other_user``."""
    return _authenticate(APIClient(), other_user)
