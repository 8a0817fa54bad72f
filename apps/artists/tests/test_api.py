import pytest
from django.urls import reverse
from rest_framework import status
from apps.artists.models import Artist


# =============================================================================
# Listing Tests
# =============================================================================

@pytest.mark.django_db
class TestArtistList:
    """Tests for GET /api/artists/"""

    def test_list_is_public(self, api_client, artists):
        response = api_client.get(reverse('artists:artist-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert len(response.data['data']) == 3
        assert response.data['pagination']['total'] == 3

    def test_sort_by_followers(self, api_client, artists):
        response = api_client.get(
            reverse('artists:artist-list'),
            {'sortBy': 'followers', 'sortOrder': 'asc'},
        )

        assert [a['name'] for a in response.data['data']] == ['Skepta', 'Little Simz', 'Madlib']

    def test_filter_by_genre_and_featured(self, api_client, artists):
        response = api_client.get(
            reverse('artists:artist-list'),
            {'genre': 'Hip-Hop', 'featured': 'true'},
        )

        assert [a['name'] for a in response.data['data']] == ['Madlib']

    def test_search(self, api_client, artists):
        response = api_client.get(reverse('artists:artist-list'), {'search': 'simz'})

        assert [a['name'] for a in response.data['data']] == ['Little Simz']

    def test_invalid_filter_value(self, api_client, artists):
        response = api_client.get(reverse('artists:artist-list'), {'min_followers': 'many'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['code'] == 'invalid_filter'


# =============================================================================
# Detail Tests
# =============================================================================

@pytest.mark.django_db
class TestArtistDetail:
    """Tests for GET /api/artists/{id}/"""

    def test_retrieve(self, api_client, artist):
        url = reverse('artists:artist-detail', kwargs={'pk': artist.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['name'] == 'MF DOOM'
        assert response.data['data']['is_active'] is False

    def test_retrieve_missing(self, api_client, db):
        url = reverse('artists:artist-detail', kwargs={'pk': '00000000-0000-0000-0000-000000000000'})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error']['code'] == 'artist_not_found'

    def test_malformed_id_is_not_routed(self, api_client, db):
        response = api_client.get('/api/artists/not-a-uuid/')

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Write Tests
# =============================================================================

@pytest.mark.django_db
class TestArtistWrites:
    """Tests for POST/PATCH/DELETE /api/artists/"""

    def test_create_requires_authentication(self, api_client):
        response = api_client.post(reverse('artists:artist-list'), {'name': 'Kendrick Lamar'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_create_forbidden_for_listener(self, listener_client):
        response = listener_client.post(reverse('artists:artist-list'), {'name': 'Kendrick Lamar'})

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not Artist.objects.filter(name='Kendrick Lamar').exists()

    def test_curator_creates_artist(self, curator_client):
        data = {
            'name': 'Kendrick Lamar',
            'genre': 'Conscious Rap',
            'hometown': 'Compton',
            'active_from': 2003,
            'labels': ['TDE', 'pgLang'],
        }
        response = curator_client.post(reverse('artists:artist-list'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['data']['name'] == 'Kendrick Lamar'
        assert response.data['data']['is_active'] is True
        assert Artist.objects.get(name='Kendrick Lamar').labels == ['TDE', 'pgLang']

    def test_create_rejects_reversed_years(self, curator_client):
        data = {'name': 'Time Traveller', 'active_from': 2020, 'active_to': 2010}
        response = curator_client.post(reverse('artists:artist-list'), data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error']['code'] == 'invalid_artist'

    def test_create_rejects_unknown_genre(self, curator_client):
        response = curator_client.post(reverse('artists:artist-list'), {'name': 'X', 'genre': 'Polka'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'genre' in response.data['error']['details']

    def test_partial_update(self, curator_client, artist):
        url = reverse('artists:artist-detail', kwargs={'pk': artist.id})
        response = curator_client.patch(url, {'verified': True, 'followers': 1000000})

        assert response.status_code == status.HTTP_200_OK
        artist.refresh_from_db()
        assert artist.verified is True
        assert artist.followers == 1000000
        assert artist.name == 'MF DOOM'

    def test_curator_cannot_delete(self, curator_client, artist):
        url = reverse('artists:artist-detail', kwargs={'pk': artist.id})
        response = curator_client.delete(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert Artist.objects.filter(id=artist.id).exists()

    def test_admin_deletes_artist(self, catalog_admin_client, artist):
        url = reverse('artists:artist-detail', kwargs={'pk': artist.id})
        response = catalog_admin_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Artist.objects.filter(id=artist.id).exists()


# =============================================================================
# Artist Albums Tests
# =============================================================================

@pytest.mark.django_db
class TestArtistAlbums:
    """Tests for GET /api/artists/{id}/albums/"""

    def test_lists_only_artist_albums(self, api_client, artist, artist_albums, artists):
        from apps.albums.models import Album
        Album.objects.create(title='Madvillainy', artist=artists[1])

        url = reverse('artists:artist-albums', kwargs={'pk': artist.id})
        response = api_client.get(url, {'sort_by': 'title', 'sort_order': 'asc'})

        assert response.status_code == status.HTTP_200_OK
        assert [a['title'] for a in response.data['data']] == [
            'Mm..Food',
            'Operation: Doomsday',
            'Special Herbs',
        ]
        assert response.data['pagination']['total'] == 3

    def test_album_filters_apply(self, api_client, artist, artist_albums):
        url = reverse('artists:artist-albums', kwargs={'pk': artist.id})
        response = api_client.get(url, {'album_type': 'mixtape'})

        assert [a['title'] for a in response.data['data']] == ['Special Herbs']

    def test_artist_filter_cannot_be_overridden(self, api_client, artist, artist_albums, artists):
        url = reverse('artists:artist-albums', kwargs={'pk': artist.id})
        response = api_client.get(url, {'artist': str(artists[0].id)})

        assert response.data['pagination']['total'] == 3

    def test_missing_artist(self, api_client, db):
        url = reverse('artists:artist-albums', kwargs={'pk': '00000000-0000-0000-0000-000000000000'})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
