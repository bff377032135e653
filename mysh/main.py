"""Interactive loop of the shell."""

from __future__ import annotations

import os
import sys

from mysh.builtins import Builtins
from mysh.completion import Completer, init_readline
from mysh.execute import execute_command
from mysh.history import History
from mysh.parse import parse_input
from mysh.raw_input import read_input_with_suggestions
from mysh.trie import build_command_trie


def main(argv: list[str] | None = None) -> int:
    """Read and run commands until end of input or ``exit``."""
    if not sys.stdout.isatty():
        print("Warning: Not running in a terminal", file=sys.stderr)
    elif "TERM" not in os.environ:
        print("Warning: TERM environment variable not set", file=sys.stderr)

    trie = build_command_trie()
    try:
        init_readline(Completer(trie))
    except ImportError:
        pass
    history = History()
    builtins = Builtins(history)

    while True:
        line = read_input_with_suggestions(trie)
        if line is None:
            break
        if not line:
            continue
        history.add(line)
        args = parse_input(line)
        if not args:
            continue
        if args[0] == "exit":
            break
        execute_command(args, builtins)

    history.clear()
    return 0


if __name__ == "__main__":
    sys.exit(main())