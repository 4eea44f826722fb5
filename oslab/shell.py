"""A small interactive shell with a five-entry command history."""

from __future__ import annotations

import subprocess
import sys
from typing import Callable, Sequence, TextIO

ARGUMENT_SIZE = 16
COMMAND_READ_SIZE = 100
HISTORY_SIZE = 5
PROMPT = "osh> "
_NO_HISTORY = "No commands in history.\n"
_NOT_RECORDED = ("", "history", "!!")


class History:
    """Circular buffer of the most recent commands, numbered from 1."""

    def __init__(self, size: int = HISTORY_SIZE):
        if size < 1:
            raise ValueError("history size must be positive")
        self._slots: list[str | None] = [None] * size
        self._next = 0
        self._count = 0
        self.total = 0

    def __len__(self) -> int:
        return self._count

    def add(self, command: str) -> bool:
        """Record ``command`` unless it is empty, ``history`` or ``!!``."""
        if command in _NOT_RECORDED:
            return False
        self._slots[self._next] = command
        self._next = (self._next + 1) % len(self._slots)
        self._count = min(self._count + 1, len(self._slots))
        self.total += 1
        return True

    def last(self) -> str | None:
        """Return the most recent command, or None if there is none."""
        if not self._count:
            return None
        return self._slots[(self._next - 1) % len(self._slots)]

    def entries(self) -> list[tuple[int, str]]:
        """Return ``(number, command)`` pairs, most recent first."""
        size = len(self._slots)
        return [
            (self.total - back, self._slots[(self._next - 1 - back) % size])
            for back in range(self._count)
        ]

    def format(self) -> str:
        """Render the history the way the ``history`` command prints it."""
        if not self._count:
            return _NO_HISTORY
        return "".join(f"{number} {command}\n" for number, command in self.entries())


def parse_args(command: str) -> tuple[list[str], bool]:
    """Split ``command`` on spaces; return the arguments and whether it ends in ``&``."""
    tokens = [token for token in command.split(" ") if token][: ARGUMENT_SIZE - 1]
    if tokens and tokens[-1] == "&":
        return tokens[:-1], True
    return tokens, False


Launcher = Callable[[Sequence[str]], "subprocess.Popen"]


class Shell:
    """Reads commands, runs them as child processes and keeps a history."""

    def __init__(self, output: TextIO | None = None, launcher: Launcher | None = None):
        self.output = output if output is not None else sys.stdout
        self.history = History()
        self._launch = launcher if launcher is not None else subprocess.Popen
        self._background: list = []

    def _write(self, text: str) -> None:
        self.output.write(text)
        self.output.flush()

    def _reap(self) -> None:
        self._background = [proc for proc in self._background if proc.poll() is None]

    def execute(self, command: str) -> int | None:
        """Run ``command``; return its exit status, or None if it runs in the background or cannot start."""
        args, background = parse_args(command)
        if not args:
            return None
        try:
            process = self._launch(args)
        except (FileNotFoundError, PermissionError, NotADirectoryError):
            return None
        except OSError:
            self._write("Child not created successfully")
            return None
        if background:
            self._background.append(process)
            return None
        return process.wait()

    def handle(self, line: str) -> bool:
        """Act on one input line; return False once the shell should stop."""
        if line == "":
            return True
        if line == "exit":
            return False
        if line == "history":
            self._write(self.history.format())
            return True
        if line == "!!":
            last = self.history.last()
            if last is None:
                self._write(_NO_HISTORY)
                return True
            self._write(f"{last}\n")
            self.history.add(last)
            self.execute(last)
            return True
        self.history.add(line)
        self.execute(line)
        return True

    def run(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        """Prompt and handle lines until ``exit`` or end of input."""
        stdin = stdin if stdin is not None else sys.stdin
        if stdout is not None:
            self.output = stdout
        while True:
            self._reap()
            self._write(PROMPT)
            line = stdin.readline(COMMAND_READ_SIZE - 1)
            if not line:
                break
            if line.endswith("\n"):
                line = line[:-1]
            if not self.handle(line):
                break


def main(argv=None) -> int:
    """Start the interactive shell on standard input and output."""
    Shell().run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())