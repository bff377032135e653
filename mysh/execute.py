"""Running external commands and pipelines of them."""

from __future__ import annotations

import errno
import os
import subprocess
import sys
from collections.abc import Iterable
from contextlib import ExitStack

from mysh.builtins import Builtins
from mysh.parse import (
    PipelineError,
    Redirection,
    has_pipeline,
    parse_pipeline,
    parse_redirection,
)

EXIT_FAILURE = 1
_FILE_MODE = 0o644


def _report(prefix: str, exc: OSError) -> None:
    print(f"{prefix}: {exc.strerror or exc}", file=sys.stderr)


def _open_last(targets: Iterable[tuple[str, int]], stack: ExitStack) -> int | None:
    """Open every target in turn; the last one decides the descriptor used."""
    fd: int | None = None
    for path, flags in targets:
        try:
            fd = os.open(path, flags, _FILE_MODE)
        except OSError as exc:
            _report("open", exc)
            fd = None
        else:
            stack.callback(os.close, fd)
    return fd


def _redirect_fds(redirection: Redirection, stack: ExitStack) -> tuple[int | None, int | None]:
    in_fd = _open_last(((path, os.O_RDONLY) for path in redirection.inputs), stack)
    out_fd = _open_last(
        (
            (path, os.O_WRONLY | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC))
            for path, append in redirection.outputs
        ),
        stack,
    )
    return in_fd, out_fd


def _spawn(words: list[str], stdin: int | None, stdout: int | None) -> subprocess.Popen | None:
    """Start *words* as a program, or report why it could not be started."""
    if not words:
        print(f"execvp: {os.strerror(errno.ENOENT)}", file=sys.stderr)
        return None
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        return subprocess.Popen(words, stdin=stdin, stdout=stdout)
    except OSError as exc:
        _report("execvp", exc)
        return None


def _status(returncode: int) -> int:
    # A child killed by a signal has no exit status of its own.
    return returncode if returncode >= 0 else 0


def execute_single_command(args: list[str]) -> int:
    """Run one program with its redirections and return its exit status."""
    words, redirection = parse_redirection(args)
    with ExitStack() as stack:
        in_fd, out_fd = _redirect_fds(redirection, stack)
        proc = _spawn(words, in_fd, out_fd)
    if proc is None:
        return EXIT_FAILURE
    return _status(proc.wait())


def execute_pipeline(commands: list[list[str]]) -> int:
    """Run *commands* connected by pipes; return the last command's status."""
    if not commands:
        return 0
    pipes: list[tuple[int, int]] = []
    try:
        for _ in range(len(commands) - 1):
            pipes.append(os.pipe())
    except OSError as exc:
        for read_end, write_end in pipes:
            os.close(read_end)
            os.close(write_end)
        _report("pipe", exc)
        return -1

    last = len(commands) - 1
    procs: list[subprocess.Popen | None] = []
    try:
        for i, command in enumerate(commands):
            words, redirection = parse_redirection(command)
            with ExitStack() as stack:
                in_fd, out_fd = _redirect_fds(redirection, stack)
                stdin = in_fd if in_fd is not None else (pipes[i - 1][0] if i > 0 else None)
                stdout = out_fd if out_fd is not None else (pipes[i][1] if i < last else None)
                procs.append(_spawn(words, stdin, stdout))
    finally:
        for read_end, write_end in pipes:
            os.close(read_end)
            os.close(write_end)

    status = 0
    for proc in procs:
        status = _status(proc.wait()) if proc is not None else EXIT_FAILURE
    return status


def execute_command(args: list[str], builtins: Builtins | None = None) -> int:
    """Run a parsed command line: a builtin, a pipeline or a single program."""
    if not args:
        return 1
    builtins = builtins if builtins is not None else Builtins()
    if not has_pipeline(args):
        if builtins.handle(args):
            return 0
        return execute_single_command(args)
    try:
        commands = parse_pipeline(args)
    except PipelineError as exc:
        print(exc, file=sys.stderr)
        print("Invalid pipeline", file=sys.stderr)
        return -1
    return execute_pipeline(commands)