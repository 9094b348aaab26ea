"""Stack-style physical frame allocator with releasable frame handles."""

from __future__ import annotations

import functools
from collections import deque

from .address import PAGE_SIZE, PhysicalMemory, PhysPageNum


@functools.total_ordering
class FrameTracker:
    """Ownership of one zero-filled physical frame."""

    __slots__ = ("ppn", "_allocator", "_released")

    def __init__(self, ppn, allocator: FrameAllocator):
        self.ppn = PhysPageNum(ppn)
        self._allocator = allocator
        self._released = False
        allocator.memory.page(self.ppn)[:] = bytes(PAGE_SIZE)

    def release(self) -> None:
        """Give the frame back to its allocator; later calls do nothing."""
        if not self._released:
            self._released = True
            self._allocator.dealloc(self.ppn)

    def __enter__(self) -> FrameTracker:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __eq__(self, other):
        if not isinstance(other, FrameTracker):
            return NotImplemented
        return self.ppn == other.ppn

    def __lt__(self, other):
        if not isinstance(other, FrameTracker):
            return NotImplemented
        return self.ppn < other.ppn

    def __hash__(self):
        return hash(int(self.ppn))

    def __repr__(self) -> str:
        return f"FrameTracker({self.ppn!r})"


class FrameAllocator:
    """Hands out frames in [start_ppn, end_ppn), reusing released ones first."""

    def __init__(self, start_ppn, end_ppn, memory: PhysicalMemory):
        self.curr_ppn = PhysPageNum(start_ppn)
        self.end_ppn = PhysPageNum(end_ppn)
        self.recycled: deque[PhysPageNum] = deque()
        self.memory = memory

    def alloc(self) -> FrameTracker:
        """Allocate a zeroed frame; raises MemoryError when none is left."""
        if self.recycled:
            ppn = self.recycled.pop()
        elif self.curr_ppn < self.end_ppn:
            ppn = self.curr_ppn
            self.curr_ppn = PhysPageNum(self.curr_ppn + 1)
        else:
            raise MemoryError("no physical frames left")
        return FrameTracker(ppn, self)

    def dealloc(self, ppn) -> None:
        """Return a frame; raises ValueError if it is not allocated."""
        ppn = PhysPageNum(ppn)
        if ppn >= self.curr_ppn or ppn in self.recycled:
            raise ValueError(f"{ppn!r} is not allocated!")
        self.recycled.append(ppn)