"""Command names accepted on the command line, in the task file and in the menu."""

from __future__ import annotations

from enum import Enum


class Command(str, Enum):
    MY_TWEETS = "my-tweets"
    SPOTIFY_THIS_SONG = "spotify-this-song"
    MOVIE_THIS = "movie-this"
    DO_WHAT_IT_SAYS = "do-what-it-says"
    EXIT = "exit"

    @classmethod
    def parse(cls, name: str | None) -> "Command | None":
        """Return the dispatchable command called `name`, or None.

        `exit` is only meaningful as a menu choice, so it is not dispatchable.
        """

        if not name:
            return None
        try:
            command = cls(name)
        except ValueError:
            return None
        return None if command is cls.EXIT else command

    def needs_parameter(self) -> bool:
        return self in (Command.SPOTIFY_THIS_SONG, Command.MOVIE_THIS)

    def menu_label(self) -> str:
        return _MENU_LABELS[self]


_MENU_LABELS: dict[Command, str] = {
    Command.MY_TWEETS: "View my tweets",
    Command.SPOTIFY_THIS_SONG: "Find song on Spotify",
    Command.MOVIE_THIS: "Get movie information",
    Command.DO_WHAT_IT_SAYS: "Perform task from file",
    Command.EXIT: "exit",
}
