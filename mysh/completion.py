"""Tab completion of command names and file names for the line editor."""

from __future__ import annotations

import os
import stat
import sys
from collections.abc import Callable
from types import ModuleType
from typing import TextIO

from mysh.trie import Trie, build_command_trie

WORD_BREAK_CHARACTERS = " \t\n\"\\'`@$><=;|&{("
SUGGESTION_COLOUR = "\x1b[38;2;150;150;150m"
RESET = "\x1b[0m"
QUERY_ITEMS = 100

READLINE_SETTINGS = (
    "tab: complete",
    "set colored-completion-prefix on",
    "set colored-stats on",
    "set bell-style none",
    "set completion-ignore-case off",
    f"set completion-query-items {QUERY_ITEMS}",
)


def _readline() -> ModuleType | None:
    try:
        import readline
    except ImportError:
        return None
    return readline


class Completer:
    """Completes the first word from the command trie and later words from files."""

    def __init__(
        self,
        trie: Trie | None = None,
        *,
        out: TextIO | None = None,
        color: bool | None = None,
        begidx: Callable[[], int] | None = None,
        line_buffer: Callable[[], str] | None = None,
        redisplay: Callable[[], None] | None = None,
    ) -> None:
        self.trie = trie if trie is not None else build_command_trie()
        self.out = out
        self.color = color
        rl = _readline()
        self._begidx = begidx or (rl.get_begidx if rl else (lambda: 0))
        self._line_buffer = line_buffer or (rl.get_line_buffer if rl else (lambda: ""))
        self._redisplay = redisplay or (rl.redisplay if rl else (lambda: None))
        self._matches: list[str] = []

    def command_matches(self, text: str) -> list[str]:
        return self.trie.find_suggestions(text)

    def file_matches(self, text: str) -> list[str]:
        """Entries of the directory named in *text* whose names start with *text*.

        Directories are marked with a trailing slash.
        """
        head, sep, _ = text.rpartition("/")
        directory = (head or "/") if sep else "."
        base = "" if text.startswith("/") else "."
        try:
            names = sorted(os.listdir(directory))
        except OSError:
            return []
        matches = []
        for name in (".", "..", *names):
            if not name.startswith(text):
                continue
            try:
                st = os.stat(f"{base}/{name}")
            except OSError:
                continue
            matches.append(f"{name}/" if stat.S_ISDIR(st.st_mode) else name)
        return matches

    def complete(self, text: str, state: int) -> str | None:
        """Completer in the form readline expects: one match per *state*."""
        if state == 0:
            if self._begidx() == 0:
                self._matches = self.command_matches(text)
            else:
                self._matches = self.file_matches(text)
        return self._matches[state] if state < len(self._matches) else None

    def _use_color(self) -> bool:
        if self.color is not None:
            return self.color
        return sys.stdout.isatty() and "TERM" in os.environ

    def display_matches(
        self, substitution: str, matches: list[str], longest_match_length: int
    ) -> None:
        """Show each match with the part not yet typed greyed out."""
        if not matches:
            return
        out = self.out if self.out is not None else sys.stdout
        line = self._line_buffer()
        use_color = self._use_color()
        for match in matches:
            common = len(os.path.commonprefix([line, match]))
            out.write("\r\x1b[K")
            out.write(match[:common])
            if use_color:
                out.write(f"{SUGGESTION_COLOUR}{match[common:]}{RESET}")
            else:
                out.write(f"{match[common:]}\n")
        out.flush()
        self._redisplay()


def init_readline(completer: Completer | None = None) -> Completer:
    """Install *completer* and the shell's settings in readline."""
    import readline

    if completer is None:
        completer = Completer()
    readline.set_completer(completer.complete)
    readline.set_completer_delims(WORD_BREAK_CHARACTERS)
    readline.set_completion_display_matches_hook(completer.display_matches)
    for setting in READLINE_SETTINGS:
        readline.parse_and_bind(setting)
    return completer