"""CLI entry point (typer).

Usage:
    liri <command> [parameter words...]

Commands: my-tweets, spotify-this-song, movie-this, do-what-it-says. Anything
else (or nothing) opens the interactive menu.
"""

from __future__ import annotations

import asyncio
from typing import List, Optional, TextIO
from zoneinfo import ZoneInfo

import typer
from rich.console import Console
from rich.text import Text

from adapters.activity_log import ActivityLogger
from adapters.providers import OmdbMovieProvider, SpotifySearchProvider, TwitterTimelineProvider
from cli.actions import ProviderActions
from cli.prompts import TerminalPrompter
from core.config import AppSettings
from core.errors import TaskFileError
from core.interfaces.prompter import Prompter
from core.services.dispatcher import Dispatcher
from core.services.session import Session

app = typer.Typer(
    add_completion=False,
    help="LIRI: recent tweets, Spotify tracks and OMDb movies from the terminal.",
)

_err_console = Console(stderr=True)


def build_session(
    settings: AppSettings,
    *,
    prompter: Prompter | None = None,
    stream: TextIO | None = None,
) -> Session:
    """Wire settings, providers, logger and prompts into a `Session`."""

    logger = ActivityLogger.from_settings(settings, stream=stream)
    tz = ZoneInfo(settings.display_timezone) if settings.display_timezone else None
    actions = ProviderActions(
        logger=logger,
        posts=TwitterTimelineProvider(settings),
        tracks=SpotifySearchProvider(settings),
        movies=OmdbMovieProvider(settings),
        width=settings.wrap_width,
        tz=tz,
    )
    dispatcher = Dispatcher(actions=actions, logger=logger, task_file=settings.task_file_path)
    return Session(dispatcher=dispatcher, prompter=prompter or TerminalPrompter())


def join_parameter(words: Optional[List[str]]) -> Optional[str]:
    return " ".join(words or []) or None


@app.command(context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False})
def main(
    command: Optional[str] = typer.Argument(
        None,
        help="my-tweets | spotify-this-song | movie-this | do-what-it-says",
    ),
    parameter: Optional[List[str]] = typer.Argument(
        None,
        help="Song or movie name (words are joined with spaces).",
    ),
) -> None:
    """Run one command, then keep offering the menu until you stop."""

    settings = AppSettings()
    session = build_session(settings)
    try:
        asyncio.run(session.run(command, join_parameter(parameter)))
    except TaskFileError as exc:
        _err_console.print(Text.assemble(("ERROR: ", "bold red"), str(exc)))
        raise typer.Exit(code=1)


def run() -> None:
    app()
