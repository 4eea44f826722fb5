"""Sum a list by splitting it among worker threads."""

from __future__ import annotations

import sys
import threading
from typing import Iterable

DEFAULT_VALUES = tuple(range(1, 21))
NUM_THREADS = 2


def parallel_sum(values: Iterable[int], workers: int = NUM_THREADS) -> int:
    """Sum ``values`` with ``workers`` threads, each over a contiguous slice."""
    if workers < 1:
        raise ValueError("there must be at least one worker")
    items = list(values)
    total = 0
    lock = threading.Lock()

    def work(chunk: list[int]) -> None:
        nonlocal total
        local = sum(chunk)
        with lock:
            total += local

    size = len(items)
    bounds = [size * i // workers for i in range(workers + 1)]
    threads = [threading.Thread(target=work, args=(items[start:end],))
               for start, end in zip(bounds, bounds[1:])]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return total


def main(argv=None) -> int:
    """Print the threaded sum of 1..20, or of the integers given."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = [int(arg) for arg in args] if args else DEFAULT_VALUES
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(parallel_sum(values))
    return 0


if __name__ == "__main__":
    sys.exit(main())