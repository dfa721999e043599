"""Task file reader (`do-what-it-says`).

Format: a single line `command,parameter`. There is no quoting: the line is
split on commas, the first piece is the command and the second one the
parameter, so a parameter containing a comma is cut at that comma.
"""

from __future__ import annotations

from pathlib import Path

from core.domain.models import TaskLine
from core.errors import TaskFileError


def parse_task_line(text: str) -> TaskLine:
    lines = text.splitlines()
    line = lines[0] if lines else ""
    parts = line.split(",")
    parameter = parts[1] if len(parts) > 1 else None
    return TaskLine(command=parts[0].strip(), parameter=parameter)


def read_task_file(path: Path) -> TaskLine:
    """Read and parse the task file; any I/O failure is fatal."""

    try:
        raw = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TaskFileError(str(path), str(exc)) from exc
    return parse_task_line(raw)
