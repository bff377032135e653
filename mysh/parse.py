"""Tokenising of command lines, pipelines and redirections."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field

MAX_ARGS = 64
MAX_CMDS = 10

_SEPARATORS = re.compile(r"[ \t\n\r]+")


class PipelineError(ValueError):
    """Raised when a pipeline cannot be split into commands."""


@dataclass
class Redirection:
    """Files named by redirection operators, in the order they appeared.

    Every output file is meant to be opened (and so created or truncated);
    the last input and the last output are the ones that take effect.
    """

    inputs: list[str] = field(default_factory=list)
    outputs: list[tuple[str, bool]] = field(default_factory=list)

    @property
    def stdin(self) -> str | None:
        return self.inputs[-1] if self.inputs else None

    @property
    def stdout(self) -> str | None:
        return self.outputs[-1][0] if self.outputs else None

    @property
    def append(self) -> bool:
        return self.outputs[-1][1] if self.outputs else False


def parse_input(line: str) -> list[str]:
    """Split *line* on blanks, keeping at most MAX_ARGS - 1 words."""
    words = [word for word in _SEPARATORS.split(line) if word]
    return words[: MAX_ARGS - 1]


def count_pipes(args: list[str]) -> int:
    return sum(1 for arg in args if arg == "|")


def has_pipeline(args: list[str]) -> bool:
    return "|" in args


def parse_pipeline(args: list[str]) -> list[list[str]]:
    """Split *args* at each ``|`` into separate commands."""
    commands: list[list[str]] = []
    current: list[str] = []
    for arg in args:
        if arg == "|":
            commands.append(current)
            current = []
            if len(commands) >= MAX_CMDS - 1:
                raise PipelineError("Error: Too many pipes")
        else:
            current.append(arg)
    commands.append(current)
    return commands


def parse_redirection(args: list[str]) -> tuple[list[str], Redirection]:
    """Return the command words before the first redirection and the redirections.

    An operator without a following file name is reported on stderr and
    left in place as an ordinary word.
    """
    redirection = Redirection()
    cut = len(args)
    for i, arg in enumerate(args):
        if arg not in ("<", ">", ">>"):
            continue
        target = args[i + 1] if i + 1 < len(args) else None
        if target is None:
            kind = "input" if arg == "<" else "output"
            print(f"Syntax error: no {kind} file", file=sys.stderr)
            continue
        if arg == "<":
            redirection.inputs.append(target)
        else:
            redirection.outputs.append((target, arg == ">>"))
        cut = min(cut, i)
    return list(args[:cut]), redirection