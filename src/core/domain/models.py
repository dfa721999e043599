"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Provider payloads are loose JSON; validating at the edge keeps the
  rendering code free of `.get()` chains.
- Models describe *what* a post/track/movie is, not *how* it is fetched.

All of them are transient: built from one response, rendered, discarded.
"""

from __future__ import annotations

from datetime import datetime, tzinfo

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.errors import RatingNotFound

TWITTER_DATE_FORMAT = "%a %b %d %H:%M:%S %z %Y"  # Thu Apr 12 22:29:39 +0000 2018
INVALID_DATE = "Invalid date"

IMDB_SOURCE = "Internet Movie Database"
ROTTEN_TOMATOES_SOURCE = "Rotten Tomatoes"


def _ordinal(day: int) -> str:
    if 10 <= day % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_post_timestamp(created_at: str, tz: tzinfo | None = None) -> str:
    """Reformat a Twitter timestamp for display.

    `Thu Apr 12 22:29:39 +0000 2018` -> `Thursday, April 12th 2018 at 10:29 PM`
    (in `tz`, or local time when `tz` is None). Anything that does not match
    the pattern renders as `Invalid date`.
    """

    try:
        moment = datetime.strptime(created_at, TWITTER_DATE_FORMAT).astimezone(tz)
    except ValueError:
        return INVALID_DATE
    hour = moment.hour % 12 or 12
    return (
        f"{moment:%A}, {moment:%B} {_ordinal(moment.day)} {moment.year} "
        f"at {hour}:{moment:%M} {'AM' if moment.hour < 12 else 'PM'}"
    )


class Post(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    text: str = Field(..., description="Post body as returned by the provider.")
    created_at: str = Field(
        ...,
        min_length=1,
        description="Provider-native timestamp (see TWITTER_DATE_FORMAT).",
    )

    def display_timestamp(self, tz: tzinfo | None = None) -> str:
        return format_post_timestamp(self.created_at, tz)


class Track(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(..., description="Track title.")
    artists: list[str] = Field(default_factory=list, description="Artist names, provider order.")
    album: str = Field(..., description="Album name.")
    preview_url: str | None = Field(default=None, description="30s preview, often missing.")
    track_url: str = Field(..., description="Full track URL on the music service.")


class Rating(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    source: str = Field(..., alias="Source")
    value: str = Field(..., alias="Value")


class Movie(BaseModel):
    """OMDb title record.

    Field aliases follow the OMDb JSON keys; missing text fields default to
    "N/A" the way OMDb itself reports unknown values.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    title: str = Field(default="N/A", alias="Title")
    year: str = Field(default="N/A", alias="Year")
    ratings: list[Rating] = Field(default_factory=list, alias="Ratings")
    country: str = Field(default="N/A", alias="Country")
    language: str = Field(default="N/A", alias="Language")
    plot: str = Field(default="N/A", alias="Plot")
    actors: str = Field(default="N/A", alias="Actors")

    def rating(self, source: str) -> str | None:
        """Value reported by `source` (exact match), or None."""

        for rating in self.ratings:
            if rating.source == source:
                return rating.value
        return None

    def require_rating(self, source: str) -> str:
        value = self.rating(source)
        if value is None:
            raise RatingNotFound(source)
        return value


class TaskLine(BaseModel):
    """One `command,parameter` line from the task file."""

    model_config = ConfigDict(frozen=True)

    command: str
    parameter: str | None = None
