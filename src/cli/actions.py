"""Provider-backed command actions.

Each action makes one provider call, renders the outcome through the
activity log and swallows provider failures after reporting them. What each
failure looks like to the user:

- posts: nothing at all (the timeline is simply not shown);
- track: `Could not find song` / `Error occurred: <detail>`;
- movie: `<status> <detail>` for HTTP/transport failures, then
  `Could not find movie`.
"""

from __future__ import annotations

from datetime import tzinfo

from cli.ui_components import (
    build_movie_block,
    build_post_text,
    build_post_timestamp,
    build_separator,
    build_track_block,
)
from core.errors import NotFound, ProviderHTTPError, TransportError
from core.interfaces.actions import ActivityLog, CommandActions
from core.interfaces.providers import MovieProvider, PostsProvider, TrackProvider

SONG_NOT_FOUND = "Could not find song"
MOVIE_NOT_FOUND = "Could not find movie"


class ProviderActions(CommandActions):
    def __init__(
        self,
        *,
        logger: ActivityLog,
        posts: PostsProvider,
        tracks: TrackProvider,
        movies: MovieProvider,
        width: int = 72,
        tz: tzinfo | None = None,
    ) -> None:
        self._logger = logger
        self._posts = posts
        self._tracks = tracks
        self._movies = movies
        self._width = width
        self._tz = tz

    def _separator(self) -> None:
        self._logger.log(build_separator(self._width))

    async def show_posts(self) -> None:
        try:
            posts = await self._posts.recent_posts()
        except TransportError:
            return

        for post in posts:
            self._separator()
            self._logger.log(build_post_text(post))
            self._logger.log(build_post_timestamp(post, self._tz))
        self._separator()

    async def find_track(self, query: str) -> None:
        try:
            track = await self._tracks.search_track(query)
        except TransportError as exc:
            self._logger.log("Error occurred: " + exc.detail)
            return

        if track is None:
            self._logger.log(SONG_NOT_FOUND)
            return

        self._separator()
        self._logger.log(build_track_block(track))
        self._separator()

    async def lookup_movie(self, title: str) -> None:
        try:
            movie = await self._movies.lookup(title)
            # Rendered before any output: a missing rating prints only the
            # not-found line.
            block = build_movie_block(movie)
        except ProviderHTTPError as exc:
            self._logger.log("%s %s", exc.status_code, exc.detail)
            self._logger.log(MOVIE_NOT_FOUND)
            return
        except TransportError as exc:
            self._logger.log(exc.detail)
            self._logger.log(MOVIE_NOT_FOUND)
            return
        except NotFound:
            self._logger.log(MOVIE_NOT_FOUND)
            return

        self._separator()
        self._logger.log(block)
        self._separator()
