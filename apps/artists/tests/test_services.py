import pytest
from apps.artists.models import Artist
from apps.artists.services import (
    ArtistNotFoundError,
    InvalidArtistDataError,
    create_artist,
    delete_artist,
    update_artist,
)
from apps.albums.models import Album


@pytest.mark.django_db
class TestCreateArtist:

    def test_ignores_unknown_fields(self):
        artist = create_artist(name='Earl Sweatshirt', hometown='Chicago', average_rating=5)

        assert artist.hometown == 'Chicago'
        assert Artist.objects.count() == 1

    def test_open_ended_career_is_active(self):
        artist = create_artist(name='JPEGMAFIA', active_from=2007)

        assert artist.is_active is True

    def test_reversed_years(self):
        with pytest.raises(InvalidArtistDataError):
            create_artist(name='Backwards', active_from=2010, active_to=2000)

        assert Artist.objects.count() == 0


@pytest.mark.django_db
class TestUpdateArtist:

    def test_checks_merged_years(self, artist):
        with pytest.raises(InvalidArtistDataError):
            update_artist(artist_id=artist.id, data={'active_to': 1980})

        artist.refresh_from_db()
        assert artist.active_to == 2020

    def test_missing_artist(self, db):
        with pytest.raises(ArtistNotFoundError):
            update_artist(artist_id='00000000-0000-0000-0000-000000000000', data={'name': 'x'})


@pytest.mark.django_db
class TestDeleteArtist:

    def test_cascades_to_albums(self, artist, artist_albums):
        delete_artist(artist_id=artist.id)

        assert not Album.objects.filter(artist_id=artist.id).exists()

    def test_missing_artist(self, db):
        with pytest.raises(ArtistNotFoundError):
            delete_artist(artist_id='00000000-0000-0000-0000-000000000000')
