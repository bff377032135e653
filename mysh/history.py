"""In-memory command history with a fixed capacity."""

from __future__ import annotations

import re
import sys
from collections import deque
from typing import TextIO

MAX_HISTORY = 100

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class History:
    """The most recent commands, oldest first."""

    def __init__(self, capacity: int = MAX_HISTORY) -> None:
        self._commands: deque[str] = deque(maxlen=capacity)

    def add(self, cmd: str) -> None:
        """Record *cmd*, dropping the oldest entry when full."""
        self._commands.append(cmd)

    def entries(self, count: int | None = None) -> list[tuple[int, str]]:
        """Return the last *count* entries as (number, command) pairs."""
        numbered = list(enumerate(self._commands, start=1))
        if count is None:
            return numbered
        start = max(len(numbered) - count, 0)
        return numbered[start:]

    def show(self, args: list[str], out: TextIO | None = None) -> bool:
        """Print the history; an optional second word limits how many entries."""
        out = out if out is not None else sys.stdout
        count = _atoi(args[1]) if len(args) > 1 else None
        for number, cmd in self.entries(count):
            out.write(f"{number:5d}  {cmd}\n")
        return True

    def clear(self) -> None:
        self._commands.clear()

    def __len__(self) -> int:
        return len(self._commands)