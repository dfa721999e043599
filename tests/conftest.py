from __future__ import annotations

import io
from typing import Any

import pytest

from adapters.activity_log import ActivityLogger
from core.config import AppSettings


class RecordingLog:
    """ActivityLog fake keeping the interpolated messages."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def log(self, message: Any, *args: Any) -> str:
        text = str(message) % args if args else str(message)
        self.messages.append(text)
        return text


class RecordingActions:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str | None]] = []

    async def show_posts(self) -> None:
        self.calls.append(("show_posts", None))

    async def find_track(self, query: str) -> None:
        self.calls.append(("find_track", query))

    async def lookup_movie(self, title: str) -> None:
        self.calls.append(("lookup_movie", title))


class ScriptedPrompter:
    """Answers prompts from fixed scripts and records what was asked."""

    def __init__(
        self,
        *,
        selections: list[str] | None = None,
        texts: list[str] | None = None,
        confirms: list[bool] | None = None,
    ) -> None:
        self.selections = list(selections or [])
        self.texts = list(texts or [])
        self.confirms = list(confirms or [])
        self.asked: list[tuple[str, str]] = []

    def select(self, message, choices):
        self.asked.append(("select", message))
        return self.selections.pop(0)

    def text(self, message):
        self.asked.append(("text", message))
        return self.texts.pop(0)

    def confirm(self, message):
        self.asked.append(("confirm", message))
        return self.confirms.pop(0)


@pytest.fixture
def settings(tmp_path) -> AppSettings:
    return AppSettings(
        _env_file=None,
        log_path=tmp_path / "log.txt",
        task_file_path=tmp_path / "random.txt",
        color=False,
        twitter_bearer_token="twitter-token",
        spotify_client_id="spotify-id",
        spotify_client_secret="spotify-secret",
    )


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def activity_log(settings, stream) -> ActivityLogger:
    return ActivityLogger.from_settings(settings, stream=stream)


@pytest.fixture
def recording_log() -> RecordingLog:
    return RecordingLog()


@pytest.fixture
def recording_actions() -> RecordingActions:
    return RecordingActions()


@pytest.fixture
def movie_payload() -> dict:
    return {
        "Title": "Mr. Nobody",
        "Year": "2009",
        "Ratings": [
            {"Source": "Internet Movie Database", "Value": "7.8/10"},
            {"Source": "Rotten Tomatoes", "Value": "67%"},
            {"Source": "Metacritic", "Value": "63/100"},
        ],
        "Country": "Belgium, Germany, Canada, France",
        "Language": "English, Mohawk",
        "Plot": (
            "A boy stands on a station platform as a train is about to leave. "
            "Should he go with his mother or stay with his father? Infinite "
            "possibilities arise from this decision."
        ),
        "Actors": "Jared Leto, Sarah Polley, Diane Kruger",
        "Response": "True",
    }
