"""Prefix tree of command names used for completion and inline suggestions."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

ALPHABET_SIZE = 128

COMMANDS: tuple[tuple[str, str], ...] = (
    ("cd", "Change the current directory"),
    ("echo", "Display a line of text"),
    ("pwd", "Print working directory"),
    ("exit", "Exit the shell"),
    ("history", "Display command history"),
    ("touch", "Create empty file(s)"),
    ("mkdir", "Create directory(ies)"),
    ("cat", "Concatenate and display files"),
    ("head", "Display first part of files"),
    ("chmod", "Change file permissions"),
    ("ls", "List directory contents"),
    ("clear", "Clear the terminal screen"),
    ("help", "Display help information"),
)


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    word: str | None = None
    description: str | None = None


class Trie:
    """A trie over ASCII strings with an optional description per word."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, path: str, desc: str | None = None) -> None:
        """Add *path*; a given description replaces any earlier one."""
        if any(ord(ch) >= ALPHABET_SIZE for ch in path):
            raise ValueError(f"only ASCII characters are allowed: {path!r}")
        node = self._root
        for ch in path:
            node = node.children.setdefault(ch, _Node())
        node.word = path
        if desc is not None:
            node.description = desc

    def _find(self, prefix: str) -> _Node | None:
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    @staticmethod
    def _collect(node: _Node) -> Iterator[str]:
        if node.word is not None:
            yield node.word
        for ch in sorted(node.children):
            yield from Trie._collect(node.children[ch])

    def find_suggestions(self, prefix: str) -> list[str]:
        """Return every stored word starting with *prefix*, in character order."""
        node = self._find(prefix)
        if node is None:
            return []
        return list(self._collect(node))

    def description(self, word: str) -> str | None:
        """Return the description stored for *word*, if it is a stored word."""
        node = self._find(word)
        if node is None or node.word is None:
            return None
        return node.description

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self._find(word)
        return node is not None and node.word is not None


def build_command_trie() -> Trie:
    """Return a trie holding every command the shell knows about."""
    trie = Trie()
    for name, desc in COMMANDS:
        trie.insert(name, desc)
    return trie