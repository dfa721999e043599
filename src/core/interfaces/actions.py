"""Contracts between the dispatcher and the layers around it."""

from __future__ import annotations

from typing import Any, Protocol


class ActivityLog(Protocol):
    def log(self, message: Any, *args: Any) -> str:
        """Write one block to the terminal and the log file; return it."""

        ...


class CommandActions(Protocol):
    """The three provider-backed actions.

    Each one renders its own result and recovers every `TransportError` /
    `NotFound` locally; none of them raises for provider failures.
    """

    async def show_posts(self) -> None:
        ...

    async def find_track(self, query: str) -> None:
        ...

    async def lookup_movie(self, title: str) -> None:
        ...
