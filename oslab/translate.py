"""Translate logical addresses to physical ones through a fixed eight-page table."""

from __future__ import annotations

import re
import sys
from typing import Iterable, Iterator, Sequence

OFFSET_BITS = 12
PAGE_SIZE = 1 << OFFSET_BITS
OFFSET_MASK = PAGE_SIZE - 1
DEFAULT_PAGE_TABLE = (6, 4, 3, 7, 0, 1, 2, 5)
DEFAULT_FILE = "labaddr.txt"


class InvalidPageError(ValueError):
    """Raised when an address refers to a page outside the page table."""

    def __init__(self, page: int):
        super().__init__(f"Invalid page number: {page}")
        self.page = page


def _parse_address(text: str) -> int:
    """Read a leading integer the way atoi does and view it as unsigned 32-bit."""
    match = re.match(r"\s*([+-]?\d+)", text)
    value = int(match.group(1)) if match else 0
    return value & 0xFFFFFFFF


def translate(address: int, page_table: Sequence[int] = DEFAULT_PAGE_TABLE) -> tuple[int, int, int]:
    """Return ``(page, offset, physical)`` for ``address``.

    Raises InvalidPageError if the page is not covered by ``page_table``.
    """
    page = address >> OFFSET_BITS
    offset = address & OFFSET_MASK
    if page >= len(page_table):
        raise InvalidPageError(page)
    physical = (page_table[page] << OFFSET_BITS) | offset
    return page, offset, physical


def translate_lines(
    lines: Iterable[str], page_table: Sequence[int] = DEFAULT_PAGE_TABLE
) -> Iterator[str | InvalidPageError]:
    """Yield a report line per address, or the InvalidPageError for a bad one."""
    for line in lines:
        address = _parse_address(line)
        try:
            page, offset, physical = translate(address, page_table)
        except InvalidPageError as exc:
            yield exc
            continue
        yield (
            f"Virtual addr is {address}: Page# = {page} & Offset = {offset}. "
            f"Physical addr = {physical}."
        )


def main(argv=None) -> int:
    """Translate every address in ``labaddr.txt`` (or the given path)."""
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else DEFAULT_FILE
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as handle:
            for item in translate_lines(handle):
                if isinstance(item, InvalidPageError):
                    print(item, file=sys.stderr)
                else:
                    print(item)
    except OSError:
        print("Error opening file.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())