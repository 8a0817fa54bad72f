"""
Spotify Web API lookups (client-credentials flow).

``get_spotify_client()`` builds a client from settings; the access token is
cached on that client until shortly before it expires.
"""

import logging
import time
from typing import Any, Optional

import requests
from django.conf import settings

from .exceptions import SpotifyAPIError, SpotifyNotConfiguredError, TrackNotFoundError

logger = logging.getLogger(__name__)

TOKEN_URL = 'https://accounts.spotify.com/api/token'
API_BASE_URL = 'https://api.spotify.com/v1'

# Refresh this many seconds before Spotify says the token expires
TOKEN_EXPIRY_MARGIN = 30


class SpotifyClient:
    """Thin wrapper around the two Spotify endpoints the API exposes."""

    def __init__(self, *, client_id: str, client_secret: str, timeout: float = 10, session=None):
        if not client_id or not client_secret:
            raise SpotifyNotConfiguredError()
        self.client_id = client_id
        self.client_secret = client_secret
        self.timeout = timeout
        self.session = session or requests.Session()
        self._token: Optional[str] = None
        self._token_expires_at = 0.0

    def _access_token(self) -> str:
        if self._token and time.monotonic() < self._token_expires_at:
            return self._token

        try:
            response = self.session.post(
                TOKEN_URL,
                data={'grant_type': 'client_credentials'},
                auth=(self.client_id, self.client_secret),
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.error("Spotify token request failed: %s", exc)
            raise SpotifyAPIError("Failed to get Spotify access token")

        self._token = payload['access_token']
        expires_in = int(payload.get('expires_in', 3600))
        self._token_expires_at = time.monotonic() + max(expires_in - TOKEN_EXPIRY_MARGIN, 0)
        return self._token

    def _get(self, path: str, params: Optional[dict] = None) -> requests.Response:
        response = self.session.get(
            f'{API_BASE_URL}{path}',
            headers={'Authorization': f'Bearer {self._access_token()}'},
            params=params,
            timeout=self.timeout,
        )
        return response

    def get_track(self, track_id: str) -> dict[str, Any]:
        """
        Fetch one track by Spotify id.

        Raises:
            TrackNotFoundError: If Spotify does not know the id
            SpotifyAPIError: On any other failure
        """
        try:
            response = self._get(f'/tracks/{track_id}')
            if response.status_code in (400, 404):
                raise TrackNotFoundError(f"Track {track_id} not found on Spotify")
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.error("Spotify track lookup failed for %s: %s", track_id, exc)
            raise SpotifyAPIError("Failed to fetch track from Spotify")

    def search_track(self, query: str) -> dict[str, Any]:
        """
        Return the best matching track for ``query``.

        Raises:
            TrackNotFoundError: If the search has no results
            SpotifyAPIError: On any other failure
        """
        try:
            response = self._get('/search', params={'q': query, 'type': 'track', 'limit': 1})
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.error("Spotify search failed for %r: %s", query, exc)
            raise SpotifyAPIError("Failed to search tracks on Spotify")

        items = (data.get('tracks') or {}).get('items') or []
        if not items:
            raise TrackNotFoundError(f"No tracks found for '{query}'")
        return items[0]


def get_spotify_client() -> SpotifyClient:
    """
    Build a client from the SPOTIFY_* settings.

    Each caller gets its own client, so the cached token lives only as long
    as that client does.

    Raises:
        SpotifyNotConfiguredError: If credentials are missing
    """
    return SpotifyClient(
        client_id=settings.SPOTIFY_CLIENT_ID,
        client_secret=settings.SPOTIFY_CLIENT_SECRET,
        timeout=settings.SPOTIFY_TIMEOUT,
    )
