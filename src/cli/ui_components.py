"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic free of styling details.
- Every block is a `rich.text.Text`; the activity log decides how wide it is
  and whether the styles become ANSI codes.
"""

from __future__ import annotations

from datetime import tzinfo

from rich.text import Text

from core.domain.models import IMDB_SOURCE, ROTTEN_TOMATOES_SOURCE, Movie, Post, Track

WRAP_WIDTH = 72
NO_PREVIEW_PREFIX = "No preview available. Full track URL: "


def build_separator(width: int = WRAP_WIDTH) -> Text:
    return Text("*" * width, style="green")


def build_post_text(post: Post) -> Text:
    return Text(post.text, style="cyan")


def build_post_timestamp(post: Post, tz: tzinfo | None = None) -> Text:
    return Text(f"Tweeted on {post.display_timestamp(tz)}", style="dim")


def build_track_block(track: Track) -> Text:
    """`"Name" by Artist, Artist on the album "Album"` + blank line + link."""

    link = track.preview_url or (NO_PREVIEW_PREFIX + track.track_url)
    return Text.assemble(
        (f'"{track.name}"', "bold yellow"),
        (" by ", "dim"),
        (", ".join(track.artists), "bold yellow"),
        (" on the album ", "dim"),
        (f'"{track.album}"', "bold yellow"),
        "\n\n",
        (link, "cyan"),
    )


def build_movie_block(movie: Movie) -> Text:
    """Movie summary; raises `RatingNotFound` if a required rating is missing."""

    imdb = movie.require_rating(IMDB_SOURCE)
    tomatometer = movie.require_rating(ROTTEN_TOMATOES_SOURCE)

    return Text.assemble(
        (f'"{movie.title}" ', "bold yellow"),
        (f"({movie.year})", "dim"),
        ("\nIMDB Rating: ", "bold"),
        f"{imdb}\n",
        ("Tomatometer: ", "bold"),
        f"{tomatometer}\n",
        ("Country: ", "bold"),
        f"{movie.country}\n",
        ("Language: ", "bold"),
        f"{movie.language}\n\n",
        (f"{movie.plot}\n\n", "yellow"),
        ("Starring: ", "bold"),
        movie.actors,
    )
