import itertools

import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.accounts.roles import Role
from apps.albums.models import Album
from apps.albums.services import recompute_album_rating
from apps.artists.models import Artist
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
def review_user(db):
    """Create and return a test user for reviews."""
    return User.objects.create_user(
        email='reviewer@example.com',
        username='reviewwriter',
        password='TestPass123!',
    )


@pytest.fixture
def review_other_user(db):
    """Create and return another test user for reviews."""
    return User.objects.create_user(
        email='review_other@example.com',
        username='reviewother',
        password='TestPass123!',
    )


@pytest.fixture
def review_moderator(db):
    """Create and return a reviewer-role user, who may moderate reviews."""
    return User.objects.create_user(
        email='moderator@example.com',
        username='moderator',
        password='TestPass123!',
        role=Role.REVIEWER,
    )


@pytest.fixture
def review_admin(db):
    """Create and return an admin."""
    return User.objects.create_user(
        email='review_admin@example.com',
        username='reviewadmin',
        password='TestPass123!',
        role=Role.ADMIN,
    )


@pytest.fixture
def review_auth_client(review_user):
    """Return an API client authenticated as ``review_user``."""
    return _client_for(review_user)


@pytest.fixture
def review_other_client(review_other_user):
    return _client_for(review_other_user)


@pytest.fixture
def review_moderator_client(review_moderator):
    return _client_for(review_moderator)


@pytest.fixture
def review_admin_client(review_admin):
    return _client_for(review_admin)


@pytest.fixture
def reviewed_album(db):
    """Create and return an album to review."""
    artist = Artist.objects.create(name='OutKast')
    return Album.objects.create(title='Aquemini', artist=artist)


@pytest.fixture
def review(reviewed_album, review_user):
    """An active review by ``review_user`` with the album aggregate in sync."""
    review = Review.objects.create(
        album=reviewed_album,
        author=review_user,
        rating=4,
        title='Southern classic',
        content='Andre and Big Boi at their peak.',
    )
    recompute_album_rating(album_id=reviewed_album.id)
    return review


@pytest.fixture
def rated_reviews(reviewed_album):
    """Factory: one active review per rating, each by a different author."""
    sequence = itertools.count()

    def _create(ratings):
        reviews = []
        for rating in ratings:
            n = next(sequence)
            author = User.objects.create_user(
                email=f'critic{n}@example.com',
                username=f'critic{n}',
                password='TestPass123!',
            )
            reviews.append(Review.objects.create(
                album=reviewed_album,
                author=author,
                rating=rating,
                title=f'Review {n}',
                content='Rosa Parks still slaps.',
            ))
        recompute_album_rating(album_id=reviewed_album.id)
        return reviews
    return _create
