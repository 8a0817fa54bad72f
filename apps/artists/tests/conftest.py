import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.accounts.roles import Role
from apps.albums.models import Album, AlbumType
from apps.artists.models import Artist, Genre


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
def listener(db):
    """Create and return a user without catalog rights."""
    return User.objects.create_user(
        email='listener@example.com',
        username='listener',
        password='TestPass123!',
    )


@pytest.fixture
def curator(db):
    """Create and return a reviewer, who may manage the catalog."""
    return User.objects.create_user(
        email='curator@example.com',
        username='curator',
        password='TestPass123!',
        role=Role.REVIEWER,
    )


@pytest.fixture
def catalog_admin(db):
    """Create and return an admin."""
    return User.objects.create_user(
        email='catalog_admin@example.com',
        username='catalogadmin',
        password='TestPass123!',
        role=Role.ADMIN,
    )


@pytest.fixture
def listener_client(listener):
    return _client_for(listener)


@pytest.fixture
def curator_client(curator):
    return _client_for(curator)


@pytest.fixture
def catalog_admin_client(catalog_admin):
    return _client_for(catalog_admin)


@pytest.fixture
def artist(db):
    """Create and return a test artist."""
    return Artist.objects.create(
        name='MF DOOM',
        real_name='Daniel Dumile',
        stage_name='DOOM',
        bio='Masked villain of the underground.',
        genre=Genre.HIP_HOP,
        hometown='Long Island',
        active_from=1988,
        active_to=2020,
        followers=900000,
        monthly_listeners=4000000,
    )


@pytest.fixture
def artists(db):
    """Create a small catalog of artists."""
    return [
        Artist.objects.create(name='Little Simz', genre=Genre.HIP_HOP, followers=500, active_from=2010),
        Artist.objects.create(name='Madlib', genre=Genre.HIP_HOP, followers=800, featured=True),
        Artist.objects.create(name='Skepta', genre=Genre.GRIME, followers=300),
    ]


@pytest.fixture
def artist_albums(artist):
    """Albums released by ``artist``."""
    return [
        Album.objects.create(title='Operation: Doomsday', artist=artist, album_type=AlbumType.ALBUM),
        Album.objects.create(title='Mm..Food', artist=artist, album_type=AlbumType.ALBUM),
        Album.objects.create(title='Special Herbs', artist=artist, album_type=AlbumType.MIXTAPE),
    ]
