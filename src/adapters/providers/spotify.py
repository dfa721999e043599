"""Provider: Spotify track search.

Flow:
- Client-credentials token (`accounts.spotify.com/api/token`).
- `GET /v1/search?type=track&limit=1` with the free-text query.

The token exchange is part of the transport; both requests are sequential and
share one client.
"""

from __future__ import annotations

from typing import Any

import httpx

from adapters.http_client import (
    build_async_client,
    describe_transport_error,
    json_object,
    raise_for_provider_status,
)
from core.config import AppSettings
from core.domain.models import Track
from core.errors import MissingCredentials, TransportError
from core.interfaces.providers import TrackProvider


def track_from_payload(item: dict[str, Any]) -> Track:
    """Normalize one item of `tracks.items`."""

    artists = [
        str(artist.get("name"))
        for artist in item.get("artists") or []
        if isinstance(artist, dict) and artist.get("name")
    ]
    album = item.get("album") if isinstance(item.get("album"), dict) else {}
    external_urls = item.get("external_urls") if isinstance(item.get("external_urls"), dict) else {}
    return Track(
        name=str(item.get("name") or ""),
        artists=artists,
        album=str(album.get("name") or ""),
        preview_url=item.get("preview_url") or None,
        track_url=str(external_urls.get("spotify") or ""),
    )


class SpotifySearchProvider(TrackProvider):
    _token_url = "https://accounts.spotify.com/api/token"
    _search_url = "https://api.spotify.com/v1/search"

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    async def _access_token(self, client: httpx.AsyncClient) -> str:
        client_id = self._settings.spotify_client_id
        client_secret = self._settings.spotify_client_secret
        if not client_id or not client_secret:
            raise MissingCredentials("Spotify")

        response = await client.post(
            self._token_url,
            data={"grant_type": "client_credentials"},
            auth=(client_id, client_secret),
        )
        raise_for_provider_status(response)
        token = json_object(response).get("access_token")
        if not isinstance(token, str) or not token:
            raise TransportError("Spotify token response has no access_token")
        return token

    async def search_track(self, query: str) -> Track | None:
        params = {"type": "track", "q": query, "limit": 1}
        try:
            async with build_async_client(self._settings) as client:
                token = await self._access_token(client)
                response = await client.get(
                    self._search_url,
                    params=params,
                    headers={"Authorization": f"Bearer {token}"},
                )
        except httpx.HTTPError as exc:
            raise TransportError(describe_transport_error(exc)) from exc

        raise_for_provider_status(response)
        tracks = json_object(response).get("tracks")
        items = tracks.get("items") if isinstance(tracks, dict) else None
        if not isinstance(items, list) or not items or not isinstance(items[0], dict):
            return None
        return track_from_payload(items[0])
