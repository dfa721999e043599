"""Core configuration.

Why here:
- Centralizes credentials and fixed constants (pydantic-settings) without
  leaking environment lookups into the CLI or the adapters.
- The settings object is frozen and built once at startup; every adapter
  receives it explicitly.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "liri"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "liri"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "liri"
    return Path.home() / ".config" / "liri"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Static credentials and constants for the assistant.

    Why pydantic-settings:
    - `.env` + environment variables in one typed contract (replaces the old
      dotenv + keys module pair).
    - Frozen, so nothing mutates it after startup.
    """

    model_config = SettingsConfigDict(
        env_prefix="LIRI_",
        extra="ignore",
        case_sensitive=False,
        # Project `.env` first (dev), then the user-level one.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
        frozen=True,
    )

    # Twitter
    twitter_bearer_token: str | None = Field(
        default=None,
        description="App-only bearer token for the Twitter v1.1 API.",
    )
    twitter_screen_name: str = Field(
        default="bootcamp_marce",
        min_length=1,
        description="Account whose timeline `my-tweets` shows.",
    )
    tweet_count: int = Field(
        default=20,
        ge=1,
        le=200,
        description="How many recent posts to request.",
    )

    # Spotify
    spotify_client_id: str | None = Field(default=None, description="Spotify client id.")
    spotify_client_secret: str | None = Field(default=None, description="Spotify client secret.")

    # OMDb
    omdb_api_key: str = Field(
        default="trilogy",
        min_length=1,
        description="OMDb API key.",
    )
    omdb_query_template: str = Field(
        default="http://www.omdbapi.com/?t=%s&y=&plot=short&apikey=%s",
        min_length=8,
        description="Movie lookup URL; first %s is the title, second the key.",
    )

    http_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Per-request timeout (seconds). Matches the httpx default.",
    )
    user_agent: str = Field(
        default="liri/0.1 (+https://local)",
        min_length=1,
        description="User-Agent sent to the providers.",
    )

    # Local files / output
    log_path: Path = Field(
        default=Path("log.txt"),
        description="Append-only activity log.",
    )
    task_file_path: Path = Field(
        default=Path("random.txt"),
        description="One-line `command,parameter` file read by `do-what-it-says`.",
    )
    wrap_width: int = Field(
        default=72,
        ge=20,
        le=400,
        description="Column width for every logged block.",
    )
    color: bool = Field(
        default=True,
        description="Emit ANSI styles (also written to the log file).",
    )
    display_timezone: str | None = Field(
        default=None,
        description="IANA timezone for post timestamps; local time when unset.",
    )
