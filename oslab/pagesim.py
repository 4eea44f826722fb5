"""Demand-paging simulator with a TLB and FIFO page replacement."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Iterator

from .translate import _parse_address

PAGE_MASK = 0xFF00
OFFSET_MASK = 0x00FF
SHIFT = 8
PAGE_TABLE_SIZE = 256
FRAME_SIZE = 256
NUM_FRAMES = 128
TLB_SIZE = 16
STORE_SIZE = PAGE_TABLE_SIZE * FRAME_SIZE
BACKING_STORE_FILE = "../BACKING_STORE.bin"
ADDRESS_FILE = "../addresses.txt"


class TLB:
    """Fixed-size translation look-aside buffer filled in FIFO order."""

    def __init__(self, size: int = TLB_SIZE):
        if size < 1:
            raise ValueError("TLB size must be positive")
        self._entries: list[tuple[int, int] | None] = [None] * size
        self._next = 0

    def lookup(self, page: int) -> int | None:
        """Return the frame cached for ``page``, or None on a miss."""
        for entry in self._entries:
            if entry is not None and entry[0] == page:
                return entry[1]
        return None

    def add(self, page: int, frame: int) -> None:
        """Store a mapping over the oldest slot."""
        self._entries[self._next] = (page, frame)
        self._next = (self._next + 1) % len(self._entries)

    def replace(self, old_page: int, new_page: int, frame: int) -> None:
        """Overwrite the first entry for ``old_page``, then add the new mapping."""
        for index, entry in enumerate(self._entries):
            if entry is not None and entry[0] == old_page:
                self._entries[index] = (new_page, frame)
                break
        self.add(new_page, frame)


@dataclass(frozen=True)
class Access:
    """Outcome of one memory access."""

    address: int
    page: int
    offset: int
    frame: int
    physical: int
    value: int
    tlb_hit: bool
    page_fault: bool


class Pager:
    """Physical memory of a fixed number of frames loaded from a backing store."""

    def __init__(self, backing_store: bytes, frames: int = NUM_FRAMES, tlb_size: int = TLB_SIZE):
        if frames < 1:
            raise ValueError("frame count must be positive")
        self._store = bytes(backing_store[:STORE_SIZE]).ljust(STORE_SIZE, b"\0")
        self._frames = frames
        self._memory = bytearray(frames * FRAME_SIZE)
        self._page_table: list[int | None] = [None] * PAGE_TABLE_SIZE
        self._page_order: list[int] = []
        self._replace_index = 0
        self.tlb = TLB(tlb_size)
        self.total = 0
        self.page_faults = 0
        self.tlb_hits = 0

    def _copy(self, page: int, frame: int) -> None:
        start = page * FRAME_SIZE
        self._memory[frame * FRAME_SIZE:(frame + 1) * FRAME_SIZE] = self._store[start:start + FRAME_SIZE]

    def _fault(self, page: int) -> int:
        self.page_faults += 1
        if len(self._page_order) < self._frames:
            frame = len(self._page_order)
            self._copy(page, frame)
            self._page_table[page] = frame
            self._page_order.append(page)
            self.tlb.add(page, frame)
            return frame
        frame = self._replace_index
        replaced = self._page_order[frame]
        self._page_table[replaced] = None
        self._copy(page, frame)
        self._page_table[page] = frame
        self._page_order[frame] = page
        self.tlb.replace(replaced, page, frame)
        self._replace_index = (frame + 1) % self._frames
        return frame

    def access(self, address: int) -> Access:
        """Translate a 16-bit logical address and read the signed byte there."""
        address &= 0xFFFF
        page = (address & PAGE_MASK) >> SHIFT
        offset = address & OFFSET_MASK
        self.total += 1
        fault = False
        frame = self.tlb.lookup(page)
        hit = frame is not None
        if hit:
            self.tlb_hits += 1
        else:
            frame = self._page_table[page]
            if frame is not None:
                self.tlb.add(page, frame)
            else:
                frame = self._fault(page)
                fault = True
        byte = self._memory[frame * FRAME_SIZE + offset]
        value = byte - 256 if byte > 127 else byte
        physical = (frame << SHIFT) | offset
        return Access(address, page, offset, frame, physical, value, hit, fault)


def run(lines: Iterable[str], backing_store: bytes) -> Iterator[str]:
    """Yield one report line per address, then the statistics."""
    pager = Pager(backing_store)
    for line in lines:
        result = pager.access(_parse_address(line))
        yield (
            f"Virtual address: {result.address} "
            f"Physical address = {result.physical} "
            f"Value={result.value}"
        )
    yield f"Number of Translated Addresses = {pager.total}"
    yield f"Page Faults = {pager.page_faults}"
    yield f"TLB Hits = {pager.tlb_hits}"


def main(argv=None) -> int:
    """Simulate ``../addresses.txt`` against ``../BACKING_STORE.bin`` (or given paths)."""
    args = sys.argv[1:] if argv is None else list(argv)
    store_path = args[0] if len(args) > 0 else BACKING_STORE_FILE
    address_path = args[1] if len(args) > 1 else ADDRESS_FILE
    try:
        with open(store_path, "rb") as handle:
            store = handle.read(STORE_SIZE)
    except OSError as exc:
        print(f"Error opening {store_path}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    try:
        handle = open(address_path, "r", encoding="utf-8", errors="replace")
    except OSError as exc:
        print(f"Error opening {address_path}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    with handle:
        for line in run(handle, store):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())