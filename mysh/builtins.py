"""Commands the shell runs itself instead of starting a program."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Callable
from typing import TextIO

from mysh.history import History

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_OCTAL = re.compile(r"\s*([+-]?)([0-7]+)")
_FGETS_LIMIT = 1023


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _octal(text: str) -> int:
    match = _LEADING_OCTAL.match(text)
    if not match:
        return 0
    value = int(match.group(2), 8)
    return -value if match.group(1) == "-" else value


class Builtins:
    """Built-in commands; each returns False only when the shell should stop."""

    def __init__(
        self,
        history: History | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.history_log = history if history is not None else History()
        self.stdin = stdin
        self.stdout = stdout
        self.stderr = stderr
        self._table: dict[str, Callable[[list[str]], bool]] = {
            "cd": self.cd,
            "pwd": self.pwd,
            "exit": self.exit,
            "help": self.help,
            "history": self.history,
            "touch": self.touch,
            "echo": self.echo,
            "mkdir": self.mkdir,
            "cat": self.cat,
            "head": self.head,
            "chmod": self.chmod,
        }

    @property
    def _in(self) -> TextIO:
        return self.stdin if self.stdin is not None else sys.stdin

    @property
    def _out(self) -> TextIO:
        return self.stdout if self.stdout is not None else sys.stdout

    @property
    def _err(self) -> TextIO:
        return self.stderr if self.stderr is not None else sys.stderr

    def _error(self, prefix: str, exc: OSError) -> None:
        self._err.write(f"{prefix}: {exc.strerror}\n")

    def names(self) -> list[str]:
        return list(self._table)

    def handle(self, args: list[str]) -> bool:
        """Run the builtin named by args[0]; False if there is none or it is exit."""
        func = self._table.get(args[0]) if args else None
        return func(args) if func is not None else False

    def cd(self, args: list[str]) -> bool:
        oldpwd = os.environ.get("PWD")
        try:
            cwd = os.getcwd()
        except OSError as exc:
            self._error("cd", exc)
            return True

        target = args[1] if len(args) > 1 else None
        if target is None:
            target = os.environ.get("HOME")
            if target is None:
                self._err.write("cd: No home directory\n")
                return True
        elif target == "-":
            target = os.environ.get("OLDPWD")
            if target is None:
                self._err.write("cd: No previous directory\n")
                return True
            self._out.write(f"{target}\n")

        if not target.startswith("/"):
            full_path = f"{cwd}/{target}"
            try:
                os.chdir(full_path)
            except OSError:
                pass
            else:
                self._set_oldpwd(oldpwd)
                os.environ["PWD"] = full_path
                return True

        try:
            os.chdir(target)
        except OSError as exc:
            self._err.write(f"cd: {target}: {exc.strerror}\n")
            return True
        self._set_oldpwd(oldpwd)
        try:
            os.environ["PWD"] = os.getcwd()
        except OSError:
            pass
        return True

    @staticmethod
    def _set_oldpwd(oldpwd: str | None) -> None:
        if oldpwd is not None:
            os.environ["OLDPWD"] = oldpwd

    def pwd(self, args: list[str]) -> bool:
        self._out.write(f"{os.getcwd()}\n")
        return True

    def exit(self, args: list[str]) -> bool:
        return False

    def help(self, args: list[str]) -> bool:
        self._out.write("Simple POSIX Shell\n")
        self._out.write(
            "Built-in commands: cd, pwd, exit, help,history ,touch ,head,tail,cat,mkdir,echo,chmod\n"
        )
        return True

    def history(self, args: list[str]) -> bool:
        return self.history_log.show(args, self._out)

    def touch(self, args: list[str]) -> bool:
        if len(args) < 2:
            self._err.write("touch: missing file operand\n")
            return True
        try:
            fd = os.open(args[1], os.O_CREAT | os.O_WRONLY, 0o644)
        except OSError as exc:
            self._error("touch", exc)
            return True
        os.close(fd)
        return True

    def echo(self, args: list[str]) -> bool:
        self._out.write("".join(f"{arg} " for arg in args[1:]) + "\n")
        return True

    def mkdir(self, args: list[str]) -> bool:
        if len(args) < 2:
            self._err.write("mkdir: missing operand\n")
            return True
        try:
            os.mkdir(args[1], 0o755)
        except OSError as exc:
            self._error("mkdir", exc)
        return True

    def cat(self, args: list[str]) -> bool:
        if len(args) < 2:
            for line in self._in:
                self._out.write(line)
            return True
        for path in args[1:]:
            try:
                with open(path, encoding="utf-8", errors="replace", newline="") as fp:
                    self._out.write(fp.read())
            except OSError as exc:
                self._error("cat", exc)
        return True

    def head(self, args: list[str]) -> bool:
        lines = 10
        if len(args) > 2 and args[1] == "-n":
            lines = _atoi(args[2])
            args = args[2:]
        path = args[1] if len(args) > 1 else "-"
        try:
            with open(path, encoding="utf-8", errors="replace", newline="") as fp:
                for _ in range(lines):
                    chunk = fp.readline(_FGETS_LIMIT)
                    if not chunk:
                        break
                    self._out.write(chunk)
        except OSError as exc:
            self._error("head", exc)
        return True

    def chmod(self, args: list[str]) -> bool:
        if len(args) < 3:
            self._err.write("Usage: chmod <mode> <file>\n")
            return True
        mode = _octal(args[1]) & 0o7777
        try:
            os.chmod(args[2], mode)
        except OSError as exc:
            self._error("chmod", exc)
        return True