"""Provider: Twitter user timeline (v1.1, app-only bearer auth)."""

from __future__ import annotations

import httpx

from adapters.http_client import (
    build_async_client,
    describe_transport_error,
    raise_for_provider_status,
)
from core.config import AppSettings
from core.domain.models import Post
from core.errors import MissingCredentials, TransportError
from core.interfaces.providers import PostsProvider


class TwitterTimelineProvider(PostsProvider):
    _timeline_url = "https://api.twitter.com/1.1/statuses/user_timeline.json"

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    async def recent_posts(self) -> list[Post]:
        token = self._settings.twitter_bearer_token
        if not token:
            raise MissingCredentials("Twitter")

        params = {
            "screen_name": self._settings.twitter_screen_name,
            "count": self._settings.tweet_count,
        }
        headers = {"Authorization": f"Bearer {token}"}

        try:
            async with build_async_client(self._settings, extra_headers=headers) as client:
                response = await client.get(self._timeline_url, params=params)
        except httpx.HTTPError as exc:
            raise TransportError(describe_transport_error(exc)) from exc

        raise_for_provider_status(response)

        try:
            data = response.json()
        except ValueError as exc:
            raise TransportError(f"invalid JSON from Twitter: {exc}") from exc
        if not isinstance(data, list):
            raise TransportError("unexpected Twitter timeline payload")

        posts: list[Post] = []
        for item in data:
            if not isinstance(item, dict) or not item.get("created_at"):
                continue
            posts.append(
                Post(
                    text=str(item.get("text") or item.get("full_text") or ""),
                    created_at=str(item["created_at"]),
                )
            )
        return posts
