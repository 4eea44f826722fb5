"""Sum the first ten native ints stored in a binary file."""

from __future__ import annotations

import struct
import sys

INT_COUNT = 10
DEFAULT_FILE = "numbers.bin"


def read_ints(path, count=INT_COUNT) -> list[int]:
    """Read ``count`` native-order 32-bit ints from the start of ``path``."""
    layout = struct.Struct(f"={count}i")
    with open(path, "rb") as handle:
        data = handle.read(layout.size)
    if len(data) < layout.size:
        raise ValueError(f"{path}: expected {layout.size} bytes, found {len(data)}")
    return list(layout.unpack(data))


def _wrap_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def main(argv=None) -> int:
    """Print the sum of the ints in ``numbers.bin`` (or the given path)."""
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else DEFAULT_FILE
    try:
        values = read_ints(path)
    except OSError as exc:
        print(f"Error opening file: {exc.strerror or exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error reading file: {exc}", file=sys.stderr)
        return 1
    print(f"Sum of numbers: {_wrap_int32(sum(values))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())