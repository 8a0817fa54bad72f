import datetime
import itertools

import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.accounts.roles import Role
from apps.albums.models import Album, AlbumType
from apps.artists.models import Artist, Genre
from apps.reviews.models import Review


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
def album_user(db):
    """Create and return a regular user."""
    return User.objects.create_user(
        email='albumfan@example.com',
        username='albumfan',
        password='TestPass123!',
    )


@pytest.fixture
def album_curator(db):
    """Create and return a reviewer (catalog manager)."""
    return User.objects.create_user(
        email='albumcurator@example.com',
        username='albumcurator',
        password='TestPass123!',
        role=Role.REVIEWER,
    )


@pytest.fixture
def album_admin(db):
    """Create and return an admin."""
    return User.objects.create_user(
        email='albumadmin@example.com',
        username='albumadmin',
        password='TestPass123!',
        role=Role.ADMIN,
    )


@pytest.fixture
def album_auth_client(album_user):
    return _client_for(album_user)


@pytest.fixture
def album_curator_client(album_curator):
    return _client_for(album_curator)


@pytest.fixture
def album_admin_client(album_admin):
    return _client_for(album_admin)


@pytest.fixture
def album_artist(db):
    """Create and return a test artist."""
    return Artist.objects.create(name='Madvillain', genre=Genre.ALTERNATIVE_HIP_HOP)


@pytest.fixture
def album(album_artist):
    """Create and return a test album."""
    return Album.objects.create(
        title='Madvillainy',
        artist=album_artist,
        album_type=AlbumType.ALBUM,
        release_date=datetime.date(2004, 3, 23),
        label='Stones Throw',
        tracklist=[
            {'title': 'The Illest Villains', 'duration': 115},
            {'title': 'Accordion', 'duration': 119},
        ],
        total_duration=234,
    )


@pytest.fixture
def make_reviewers(db):
    """Factory creating ``n`` distinct review authors."""
    sequence = itertools.count()

    def _make(n):
        numbers = [next(sequence) for _ in range(n)]
        return [
            User.objects.create_user(
                email=f'voter{i}@example.com',
                username=f'voter{i}',
                password='TestPass123!',
            )
            for i in numbers
        ]
    return _make


@pytest.fixture
def add_reviews(make_reviewers):
    """Factory adding one active review per rating to an album."""
    def _add(album, ratings):
        authors = make_reviewers(len(ratings))
        return [
            Review.objects.create(
                album=album,
                author=author,
                rating=rating,
                title=f'Rated {rating}',
                content='Beats and rhymes.',
            )
            for author, rating in zip(authors, ratings)
        ]
    return _add
