"""Virtual memory manager with a TLB, a page table and FIFO frame replacement."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Iterator

from .translate import InvalidPageError, _parse_address

OFFSET_BITS = 8
PAGE_SIZE = 1 << OFFSET_BITS
OFFSET_MASK = PAGE_SIZE - 1
PAGES = 256
FRAME_COUNT = 128
TLB_SIZE = 16
LOGICAL_ADDRESS_SIZE = PAGES * PAGE_SIZE
BACKING_STORE_FILE = "BACKING_STORE.bin"
ADDRESS_FILE = "addresses.txt"


class TLB:
    """Fixed-size translation look-aside buffer replaced in FIFO order."""

    def __init__(self, size: int = TLB_SIZE):
        self._entries: list[tuple[int, int] | None] = [None] * size
        self._next = 0

    def lookup(self, page: int) -> int | None:
        """Return the frame cached for ``page``, or None on a miss."""
        for entry in self._entries:
            if entry is not None and entry[0] == page:
                return entry[1]
        return None

    def add(self, page: int, frame: int) -> None:
        """Insert a mapping over the oldest entry."""
        self._entries[self._next] = (page, frame)
        self._next = (self._next + 1) % len(self._entries)

    def update(self, page: int, frame: int) -> None:
        """Change the frame of an existing entry for ``page``, if there is one."""
        for index, entry in enumerate(self._entries):
            if entry is not None and entry[0] == page:
                self._entries[index] = (page, frame)
                return


@dataclass(frozen=True)
class Translation:
    """Outcome of translating one logical address."""

    address: int
    page: int
    offset: int
    frame: int
    physical: int
    value: int
    tlb_hit: bool
    page_fault: bool


class VirtualMemory:
    """Demand-paged memory backed by a byte string of pages."""

    def __init__(self, backing_store: bytes, frames: int = FRAME_COUNT, tlb_size: int = TLB_SIZE):
        self._store = bytes(backing_store)
        self._memory = bytearray(frames * PAGE_SIZE)
        self._frames = frames
        self._page_table: list[int | None] = [None] * PAGES
        self._frame_page: list[int | None] = [None] * frames
        self._next_frame = 0
        self.tlb = TLB(tlb_size)
        self.total = 0
        self.tlb_hits = 0
        self.page_faults = 0

    def _load(self, page: int) -> int:
        frame = self._next_frame
        old_page = self._frame_page[frame]
        if old_page is not None:
            self._page_table[old_page] = None
        self._frame_page[frame] = page
        start = page * PAGE_SIZE
        data = self._store[start:start + PAGE_SIZE].ljust(PAGE_SIZE, b"\0")
        self._memory[frame * PAGE_SIZE:(frame + 1) * PAGE_SIZE] = data
        self._page_table[page] = frame
        self.tlb.update(page, frame)
        self._next_frame = (frame + 1) % self._frames
        return frame

    def read(self, frame: int, offset: int) -> int:
        """Return the signed byte at ``offset`` in ``frame``."""
        byte = self._memory[frame * PAGE_SIZE + offset]
        return byte - 256 if byte > 127 else byte

    def translate(self, address: int) -> Translation:
        """Translate ``address``; raises InvalidPageError for pages past the table."""
        page = address >> OFFSET_BITS
        offset = address & OFFSET_MASK
        if page >= PAGES:
            raise InvalidPageError(page)
        self.total += 1
        fault = False
        frame = self.tlb.lookup(page)
        hit = frame is not None
        if hit:
            self.tlb_hits += 1
        else:
            frame = self._page_table[page]
            if frame is None:
                frame = self._load(page)
                self.page_faults += 1
                fault = True
            self.tlb.add(page, frame)
        physical = (frame << OFFSET_BITS) | offset
        return Translation(address, page, offset, frame, physical,
                           self.read(frame, offset), hit, fault)


def run(lines: Iterable[str], backing_store: bytes) -> Iterator[str | InvalidPageError]:
    """Yield report lines for each address, then the statistics.

    An address with an invalid page yields its InvalidPageError instead.
    """
    memory = VirtualMemory(backing_store)
    for line in lines:
        address = _parse_address(line)
        yield f"Logical address being translated: {address}"
        try:
            result = memory.translate(address)
        except InvalidPageError as exc:
            yield exc
            continue
        yield f"The corresponding physical address is: {result.physical}"
        yield f"The signed byte value at {result.physical} is {result.value}"
    yield f"Total Addresses = {memory.total}"
    yield f"Page Faults = {memory.page_faults}"
    yield f"TLB Hits = {memory.tlb_hits}"


def main(argv=None) -> int:
    """Translate ``addresses.txt`` against ``BACKING_STORE.bin`` (or given paths)."""
    args = sys.argv[1:] if argv is None else list(argv)
    store_path = args[0] if len(args) > 0 else BACKING_STORE_FILE
    address_path = args[1] if len(args) > 1 else ADDRESS_FILE
    try:
        with open(store_path, "rb") as handle:
            store = handle.read(LOGICAL_ADDRESS_SIZE)
    except OSError as exc:
        print(f"Error opening {store_path}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    try:
        handle = open(address_path, "r", encoding="utf-8", errors="replace")
    except OSError:
        print(f"Error opening {address_path}.", file=sys.stderr)
        return 1
    with handle:
        for item in run(handle, store):
            if isinstance(item, InvalidPageError):
                print(item, file=sys.stderr)
            else:
                print(item)
    return 0


if __name__ == "__main__":
    sys.exit(main())