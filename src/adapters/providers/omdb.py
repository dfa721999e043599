"""Provider: OMDb movie lookup.

Notes:
- The request URL is built from a fixed template. Only the *first* space of
  the title becomes `+`; httpx percent-encodes whatever spaces remain.
- OMDb answers 200 with `{"Response": "False"}` for unknown titles; that
  payload has no ratings, so rendering reports it as not found.
"""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from adapters.http_client import build_async_client, describe_transport_error
from core.config import AppSettings
from core.domain.models import Movie
from core.errors import NotFound, ProviderHTTPError, TransportError
from core.interfaces.providers import MovieProvider


def build_movie_url(template: str, title: str, api_key: str) -> str:
    return template % (title.replace(" ", "+", 1), api_key)


class OmdbMovieProvider(MovieProvider):
    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    async def lookup(self, title: str) -> Movie:
        url = build_movie_url(
            self._settings.omdb_query_template,
            title,
            self._settings.omdb_api_key,
        )

        try:
            async with build_async_client(self._settings) as client:
                response = await client.get(url)
        except httpx.HTTPError as exc:
            raise TransportError(describe_transport_error(exc)) from exc

        if response.status_code != 200:
            raise ProviderHTTPError(response.status_code, response.reason_phrase or "HTTP error")

        try:
            data = response.json()
        except ValueError as exc:
            raise NotFound(f"invalid JSON for {title!r}") from exc
        if not isinstance(data, dict):
            raise NotFound(f"unexpected payload for {title!r}")
        try:
            return Movie.model_validate(data)
        except ValidationError as exc:
            raise NotFound(f"malformed record for {title!r}") from exc
