"""Terminal prompts (typer + Rich) behind the `Prompter` protocol."""

from __future__ import annotations

from typing import Sequence

import typer
from rich.console import Console
from rich.prompt import Prompt
from rich.text import Text

from core.interfaces.prompter import Prompter


class TerminalPrompter(Prompter):
    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def select(self, message: str, choices: Sequence[tuple[str, str]]) -> str:
        self._console.print(Text.assemble(("? ", "bold green"), (message, "bold")))
        for index, (label, _) in enumerate(choices, start=1):
            self._console.print(Text(f"  {index}) {label}"))
        picked = Prompt.ask(
            "Choice",
            choices=[str(i) for i in range(1, len(choices) + 1)],
            console=self._console,
        )
        return choices[int(picked) - 1][1]

    def text(self, message: str) -> str:
        # Empty answers are allowed; the dispatcher substitutes its default.
        return typer.prompt(message, default="", show_default=False).strip()

    def confirm(self, message: str) -> bool:
        return typer.confirm(message, default=True)
