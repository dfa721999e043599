"""Interactive prompt contract used by the session state machine."""

from __future__ import annotations

from typing import Protocol, Sequence


class Prompter(Protocol):
    def select(self, message: str, choices: Sequence[tuple[str, str]]) -> str:
        """Ask for one of `choices` ((label, value) pairs); return the value."""

        ...

    def text(self, message: str) -> str:
        ...

    def confirm(self, message: str) -> bool:
        ...
