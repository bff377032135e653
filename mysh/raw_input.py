"""Line input with inline, trie-based command suggestions."""

from __future__ import annotations

import os
import sys
import termios
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from typing import IO, TextIO

from mysh.trie import Trie, build_command_trie

MAX_INPUT = 1024
PROMPT = "mysh> "
SUGGESTION_COLOUR = "\x1b[38;2;150;150;150m"
RESET = "\x1b[0m"
_BACKSPACE = ("\x7f", "\b")


def common_prefix(words: Iterable[str]) -> str:
    """Longest prefix shared by every word; empty for no words."""
    return os.path.commonprefix(list(words))


class LineEditor:
    """State of one input line as keystrokes arrive."""

    def __init__(self, trie: Trie, prompt: str = PROMPT, max_input: int = MAX_INPUT) -> None:
        self.trie = trie
        self.prompt = prompt
        self.max_input = max_input
        self.buffer = ""
        self.matches: list[str] = []
        self.done = False

    def _room(self) -> int:
        return max(self.max_input - 1 - len(self.buffer), 0)

    def feed(self, char: str) -> str:
        """Apply one keystroke and return what should be written to the terminal."""
        if char == "\n":
            self.done = True
            return "\n"
        listing = ""
        if char in _BACKSPACE:
            self.buffer = self.buffer[:-1]
        elif char == "\t":
            if len(self.matches) == 1:
                rest = self.matches[0][len(self.buffer):]
                self.buffer += rest[: self._room()]
            elif len(self.matches) > 1:
                listing = "\n" + "".join(f"  {match}\n" for match in self.matches)
        elif len(char) == 1 and char.isascii() and char.isprintable() and self._room() > 0:
            self.buffer += char
        self.matches = self.trie.find_suggestions(self.buffer)
        return listing + self.render()

    def suggestion(self) -> str:
        """The part of the matches' common prefix not yet typed."""
        if not self.matches:
            return ""
        prefix = common_prefix(self.matches)
        if len(self.buffer) < len(prefix):
            return prefix[len(self.buffer):]
        return ""

    def render(self) -> str:
        text = f"\r\x1b[K{self.prompt}{self.buffer}"
        suggestion = self.suggestion()
        if suggestion:
            text += f"{SUGGESTION_COLOUR}{suggestion}{RESET}"
        return text


@contextmanager
def raw_mode(fd: int | None) -> Iterator[None]:
    """Turn off line buffering and echo on *fd* while the block runs."""
    if fd is None or not os.isatty(fd):
        yield
        return
    old = termios.tcgetattr(fd)
    raw = termios.tcgetattr(fd)
    raw[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSAFLUSH, raw)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSAFLUSH, old)


def _char_reader(stream: IO) -> tuple[Callable[[], str], int | None]:
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        fd = None
    if fd is not None:
        descriptor = fd

        def read_fd() -> str:
            return os.read(descriptor, 1).decode("latin-1")

        return read_fd, fd

    source = getattr(stream, "buffer", stream)

    def read_stream() -> str:
        data = source.read(1)
        return data.decode("latin-1") if isinstance(data, bytes) else data

    return read_stream, None


def read_input_with_suggestions(
    trie: Trie | None = None,
    stdin: IO | None = None,
    stdout: TextIO | None = None,
) -> str | None:
    """Read one line, showing suggestions as it is typed.

    Returns None at end of input when nothing was typed.
    """
    trie = trie if trie is not None else build_command_trie()
    out = stdout if stdout is not None else sys.stdout
    read_char, fd = _char_reader(stdin if stdin is not None else sys.stdin)
    editor = LineEditor(trie)
    with raw_mode(fd):
        out.write(editor.prompt)
        out.flush()
        while not editor.done:
            char = read_char()
            if not char:
                return editor.buffer or None
            out.write(editor.feed(char))
            out.flush()
    return editor.buffer