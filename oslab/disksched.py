"""Disk scheduling algorithms: FCFS, SSTF, SCAN, C-SCAN, LOOK and C-LOOK."""

from __future__ import annotations

import re
import sys
from array import array
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

MAX_REQUESTS = 1000
DISK_SIZE = 300
REQUEST_FILE = "request.bin"


class Direction(str, Enum):
    """Initial direction of travel of the disk head."""

    LEFT = "LEFT"
    RIGHT = "RIGHT"


@dataclass(frozen=True)
class Schedule:
    """Result of one scheduling run.

    ``tracks`` are the serviced tracks in order (boundary tracks included where
    the algorithm visits them), ``total`` the head movement, and ``start`` the
    head position shown before the sequence, if the algorithm shows it.
    """

    tracks: tuple[int, ...]
    total: int
    start: int | None = None


def _travel(head: int, tracks: Iterable[int]) -> int:
    total = 0
    for track in tracks:
        total += abs(head - track)
        head = track
    return total


def read_requests(path) -> list[int]:
    """Read up to 1000 native ints from a binary file; partial trailing bytes are ignored."""
    itemsize = array("i").itemsize
    with open(path, "rb") as handle:
        data = handle.read(MAX_REQUESTS * itemsize)
    values = array("i")
    values.frombytes(data[: len(data) - len(data) % itemsize])
    return values.tolist()


def fcfs(requests: Sequence[int], head: int) -> Schedule:
    """Service requests in arrival order."""
    tracks = tuple(requests)
    return Schedule(tracks, _travel(head, tracks))


def sstf(requests: Sequence[int], head: int) -> Schedule:
    """Always service the pending request closest to the head (earliest wins ties)."""
    pending = list(requests)
    order: list[int] = []
    total = 0
    while pending:
        index = min(range(len(pending)), key=lambda i: abs(head - pending[i]))
        track = pending.pop(index)
        total += abs(head - track)
        head = track
        order.append(track)
    return Schedule(tuple(order), total)


def scan(requests: Sequence[int], head: int, direction, disk_size: int) -> Schedule:
    """Sweep to the disk edge in one direction, then reverse."""
    direction = Direction(direction)
    left = sorted(r for r in requests if r < head)
    right = sorted(r for r in requests if r >= head)
    if direction is Direction.LEFT:
        left = sorted(left + [0])
        order = left[::-1] + right
        start = head
    else:
        right = sorted(right + [disk_size - 1])
        order = right + left[::-1]
        start = None
    return Schedule(tuple(order), _travel(head, order), start)


def cscan(requests: Sequence[int], head: int, direction, disk_size: int) -> Schedule:
    """Sweep to one edge, jump to the other edge and continue the same way."""
    direction = Direction(direction)
    left = sorted([0] + [r for r in requests if r < head])
    right = sorted([disk_size - 1] + [r for r in requests if r > head])
    jump = abs(disk_size - 1)
    if direction is Direction.RIGHT:
        total = _travel(head, right) + jump + _travel(0, left)
        order = right + left
    else:
        first, second = left[::-1], right[::-1]
        total = _travel(head, first) + jump + _travel(disk_size - 1, second)
        order = first + second
    return Schedule(tuple(order), total, head)


def look(requests: Sequence[int], head: int, direction) -> Schedule:
    """Like SCAN, but turn at the last request instead of the disk edge."""
    direction = Direction(direction)
    left = sorted(r for r in requests if r < head)
    right = sorted(r for r in requests if r >= head)
    if direction is Direction.LEFT:
        order = left[::-1] + right
        start = head
    else:
        order = right + left[::-1]
        start = None
    return Schedule(tuple(order), _travel(head, order), start)


def clook(requests: Sequence[int], head: int, direction) -> Schedule:
    """Like C-SCAN, but jump only as far as the outermost pending request."""
    direction = Direction(direction)
    left = sorted(r for r in requests if r < head)
    right = sorted(r for r in requests if r > head)
    if direction is Direction.RIGHT:
        order = right + left
    else:
        order = left[::-1] + right[::-1]
    return Schedule(tuple(order), _travel(head, order), head)


def _render(schedule: Schedule, label: str = "") -> str:
    prefix = "" if schedule.start is None else f"{schedule.start} "
    body = "".join(f"{track} " for track in schedule.tracks)
    return f"{prefix}{body}\n\n{label}Total head movements: {schedule.total}\n"


def format_report(requests: Sequence[int], head: int, direction) -> str:
    """Return the full report of every algorithm for the given requests."""
    direction = Direction(direction)
    requests = list(requests)
    parts = [
        f"Total requests: {len(requests)}\n",
        f"Initial head position: {head}\n",
        f"Direction of Head: {direction.value}\n",
        "\nFCFS DISK SCHEDULING ALGORITHM:\n\n",
        _render(fcfs(requests, head)),
        "\nSSTF DISK SCHEDULING ALGORITHM:\n\n",
        _render(sstf(requests, head)) if requests else "No requests to process.\n",
        "\nSCAN DISK SCHEDULING ALGORITHM:\n\n",
        _render(scan(requests, head, direction, DISK_SIZE), "SCAN - "),
        "\nC-SCAN DISK SCHEDULING ALGORITHM:\n\n",
        _render(cscan(requests, head, direction, DISK_SIZE), "C-SCAN - "),
        "\nLOOK DISK SCHEDULING ALGORITHM:\n\n",
        _render(look(requests, head, direction), "LOOK - "),
        "\nC-LOOK DISK SCHEDULING ALGORITHM:\n\n",
        _render(clook(requests, head, direction), "C-LOOK - "),
    ]
    return "".join(parts)


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv=None) -> int:
    """Run every algorithm on ``request.bin`` in the current directory."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Usage: ./assignment5 <initial_head_position> <direction>")
        return 1
    head = _atoi(args[0])
    if not 0 <= head <= DISK_SIZE - 1:
        print(f"Initial head position must be between 0 and {DISK_SIZE - 1}.")
        return 1
    try:
        direction = Direction(args[1])
    except ValueError:
        print("Direction must be either 'LEFT' or 'RIGHT'.")
        return 1
    try:
        requests = read_requests(REQUEST_FILE)
    except OSError as exc:
        print(f"Error opening file: {exc.strerror or exc}", file=sys.stderr)
        return 1
    sys.stdout.write(format_report(requests, head, direction))
    return 0


if __name__ == "__main__":
    sys.exit(main())