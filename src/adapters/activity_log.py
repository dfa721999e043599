"""Activity log: terminal + append-only `log.txt`.

Each call renders one block with an off-screen Rich console (fixed width, ANSI
styles optional), then writes exactly the same string to stdout and to the
log file, each followed by a newline.
"""

from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Any, TextIO

from rich.console import Console
from rich.text import Text

from core.config import AppSettings


def format_message(message: Any, *args: Any) -> Text:
    """`%`-interpolate like `util.format`; extra values are space-joined."""

    if isinstance(message, Text):
        if not args:
            return message
        return Text.assemble(message, " ", " ".join(str(a) for a in args))
    if isinstance(message, str) and args:
        try:
            return Text(message % args)
        except (TypeError, ValueError):
            pass
    return Text(" ".join(str(part) for part in (message, *args)))


class ActivityLogger:
    def __init__(
        self,
        log_path: Path,
        *,
        width: int = 72,
        color: bool = True,
        stream: TextIO | None = None,
    ) -> None:
        self._log_path = Path(log_path)
        self._width = width
        self._color = color
        self._stream = stream

    @classmethod
    def from_settings(cls, settings: AppSettings, *, stream: TextIO | None = None) -> "ActivityLogger":
        return cls(
            settings.log_path,
            width=settings.wrap_width,
            color=settings.color,
            stream=stream,
        )

    def render(self, message: Any, *args: Any) -> str:
        """Wrap to the configured width; no trailing newline."""

        buffer = io.StringIO()
        console = Console(
            file=buffer,
            width=self._width,
            color_system="standard" if self._color else None,
            force_terminal=self._color,
            force_jupyter=False,
            no_color=not self._color,
            highlight=False,
            emoji=False,
            legacy_windows=False,
        )
        console.print(format_message(message, *args), soft_wrap=False)
        return buffer.getvalue().rstrip("\n")

    def log(self, message: Any, *args: Any) -> str:
        block = self.render(message, *args)

        stream = self._stream or sys.stdout
        stream.write(block + "\n")
        stream.flush()

        with self._log_path.open("a", encoding="utf-8") as fh:
            fh.write(block + "\n")
        return block
