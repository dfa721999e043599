"""Interactive session state machine.

    DISPATCH --unknown--> MENU --track/movie--> PARAMETER --> DISPATCH
    DISPATCH --action---> CONTINUE --yes--> MENU
    MENU --tweets/file--> DISPATCH
    MENU --exit--> DONE,  CONTINUE --no--> DONE

Every prompt and every provider call is awaited before the next step, so at
most one action is ever in flight.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from core.domain.commands import Command
from core.interfaces.prompter import Prompter
from core.services.dispatcher import Dispatcher, Step

MENU_MESSAGE = "What would you like to do?"
CONTINUE_MESSAGE = "Would you like to continue?"
SONG_PROMPT = "Enter a song name:"
MOVIE_PROMPT = "Enter a movie name"

MENU_CHOICES: tuple[tuple[str, str], ...] = tuple(
    (command.menu_label(), command.value)
    for command in (
        Command.MY_TWEETS,
        Command.SPOTIFY_THIS_SONG,
        Command.MOVIE_THIS,
        Command.DO_WHAT_IT_SAYS,
        Command.EXIT,
    )
)


@dataclass
class SessionState:
    step: Step
    command: str | None = None
    parameter: str | None = None


class Session:
    def __init__(
        self,
        *,
        dispatcher: Dispatcher,
        prompter: Prompter,
        echo: Callable[[str], None] = print,
    ) -> None:
        self._dispatcher = dispatcher
        self._prompter = prompter
        self._echo = echo

    async def run(self, command: str | None = None, parameter: str | None = None) -> None:
        state = SessionState(Step.DISPATCH, command, parameter)
        while state.step is not Step.DONE:
            state = await self.advance(state)

    async def advance(self, state: SessionState) -> SessionState:
        if state.step is Step.DISPATCH:
            step = await self._dispatcher.dispatch(state.command, state.parameter)
            return SessionState(step)

        if state.step is Step.MENU:
            choice = self._prompter.select(MENU_MESSAGE, MENU_CHOICES)
            self._echo(choice)
            if choice == Command.EXIT.value:
                return SessionState(Step.DONE)
            selected = Command.parse(choice)
            if selected is not None and selected.needs_parameter():
                return SessionState(Step.PARAMETER, selected.value)
            return SessionState(Step.DISPATCH, choice)

        if state.step is Step.PARAMETER:
            message = SONG_PROMPT if state.command == Command.SPOTIFY_THIS_SONG.value else MOVIE_PROMPT
            answer = self._prompter.text(message)
            return SessionState(Step.DISPATCH, state.command, answer or None)

        if state.step is Step.CONTINUE:
            if self._prompter.confirm(CONTINUE_MESSAGE):
                return SessionState(Step.MENU)
            return SessionState(Step.DONE)

        return SessionState(Step.DONE)
