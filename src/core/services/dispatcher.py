"""Command dispatcher.

Maps a command name plus an optional parameter to one action and tells the
session what to do next (`Step`). Rendering and provider errors are the
actions' business; the dispatcher only routes and supplies defaults.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Callable

from core.domain.commands import Command
from core.domain.models import TaskLine
from core.interfaces.actions import ActivityLog, CommandActions
from core.task_file import read_task_file

DEFAULT_SONG = "Ace of Base The Sign"
DEFAULT_MOVIE = "Mr. Nobody"


class Step(str, Enum):
    """States of the interactive session."""

    DISPATCH = "dispatch"
    MENU = "menu"
    PARAMETER = "parameter"
    CONTINUE = "continue"
    DONE = "done"


class Dispatcher:
    def __init__(
        self,
        *,
        actions: CommandActions,
        logger: ActivityLog,
        task_file: Path,
        read_task: Callable[[Path], TaskLine] = read_task_file,
    ) -> None:
        self._actions = actions
        self._logger = logger
        self._task_file = task_file
        self._read_task = read_task

    async def dispatch(
        self,
        command: str | None,
        parameter: str | None = None,
        *,
        from_task_file: bool = False,
    ) -> Step:
        """Run `command` and return the next session step.

        Unknown or missing commands return `Step.MENU`; every action that ran
        returns `Step.CONTINUE`. `TaskFileError` propagates.
        """

        # Logged before validation, so unknown names show up too.
        if command:
            self._logger.log("Processing %s command", command)

        selected = Command.parse(command)
        if selected is Command.MY_TWEETS:
            await self._actions.show_posts()
        elif selected is Command.SPOTIFY_THIS_SONG:
            await self._actions.find_track(parameter or DEFAULT_SONG)
        elif selected is Command.MOVIE_THIS:
            await self._actions.lookup_movie(parameter or DEFAULT_MOVIE)
        elif selected is Command.DO_WHAT_IT_SAYS and not from_task_file:
            task = self._read_task(self._task_file)
            return await self.dispatch(task.command, task.parameter, from_task_file=True)
        else:
            return Step.MENU
        return Step.CONTINUE
