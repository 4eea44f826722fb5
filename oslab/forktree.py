"""Build a fixed tree of processes with fork, each reporting its process id."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Callable, Iterator


@dataclass(frozen=True)
class Node:
    """One process in the tree and the children it creates, in order."""

    name: str
    children: tuple["Node", ...] = ()


def process_tree() -> Node:
    """Return the tree: P1 creates P2; P2 creates P9, P3, P5; P3 creates P7, P4; P4 creates P6; P5 creates P8."""
    p4 = Node("P4", (Node("P6"),))
    p3 = Node("P3", (Node("P7"), p4))
    p5 = Node("P5", (Node("P8"),))
    p2 = Node("P2", (Node("P9"), p3, p5))
    return Node("P1", (p2,))


def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and its descendants in creation order (pre-order)."""
    yield node
    for child in node.children:
        yield from walk(child)


def _spawn(node: Node, report: int) -> None:
    os.write(report, f"{node.name} {os.getpid()}\n".encode())
    for child in node.children:
        pid = os.fork()
        if pid == 0:
            status = 1
            try:
                _spawn(child, report)
                status = 0
            finally:
                os._exit(status)
        os.waitpid(pid, 0)


def run_tree(write: Callable[[str], object] = print) -> list[tuple[str, int]]:
    """Create the process tree; each process reports its pid, which is passed to ``write``.

    The current process plays the root. Returns ``(name, pid)`` in creation
    order. Raises OSError if fork is unavailable or fails.
    """
    if not hasattr(os, "fork"):
        raise OSError("fork is not available on this platform")
    read_end, write_end = os.pipe()
    try:
        try:
            _spawn(process_tree(), write_end)
        finally:
            os.close(write_end)
        with os.fdopen(read_end, "r") as reader:
            read_end = None
            data = reader.read()
    finally:
        if read_end is not None:
            os.close(read_end)
    results = []
    for line in data.splitlines():
        name, pid = line.split()
        results.append((name, int(pid)))
        write(pid)
    return results


def main(argv=None) -> int:
    """Build the process tree and print every pid in creation order."""
    try:
        run_tree(lambda text: print(text, flush=True))
    except OSError:
        print("Fork failed", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())