"""Provider contracts.

Why Protocol:
- Structural contract without inheritance, so tests can pass plain fakes.
- Each method performs exactly one logical outbound call and either returns
  normalized domain models or raises `TransportError` / `NotFound`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Movie, Post, Track


@runtime_checkable
class PostsProvider(Protocol):
    async def recent_posts(self) -> list[Post]:
        """Most recent posts of the configured account, newest first."""

        ...


@runtime_checkable
class TrackProvider(Protocol):
    async def search_track(self, query: str) -> Track | None:
        """Best match for `query`, or None when nothing matches."""

        ...


@runtime_checkable
class MovieProvider(Protocol):
    async def lookup(self, title: str) -> Movie:
        ...
