"""Address spaces: a page table together with the segments mapped into it."""

from __future__ import annotations

from .address import PAGE_SIZE, PhysPageNum, VirtPageNum
from .frame_allocator import FrameAllocator
from .page_table import PageTable, PTEFlags
from .segment import MemorySegment


class MemorySet:
    """An address space whose segments own their frames."""

    def __init__(self, frames: FrameAllocator):
        self.allocator = frames
        self.page_table = PageTable(frames)
        self.segments: list[MemorySegment] = []

    def insert_segment(self, vpn_range: range, flags, data=None) -> None:
        """Allocate frames for ``vpn_range``, fill them from ``data`` and map them."""
        flags = PTEFlags(flags)
        segment = MemorySegment(vpn_range, flags, self.allocator)
        try:
            if data is not None:
                segment.copy_data(data)
            for vpn, frame in segment.data_frames.items():
                self.page_table.map(vpn, frame.ppn, flags)
        except MemoryError:
            segment.release()
            raise
        self.segments.append(segment)

    def remove_segment(self, start_vpn) -> None:
        """Unmap and free the segment starting at ``start_vpn``.

        Raises KeyError if no segment starts there.
        """
        start = int(start_vpn)
        segment = next(
            (seg for seg in self.segments if seg.vpn_range.start == start), None
        )
        if segment is None:
            raise KeyError(f"no segment starts at {VirtPageNum(start)!r}")
        for vpn in segment.vpn_range:
            self.page_table.unmap(vpn)
        self.segments.remove(segment)
        segment.release()

    def translate(self, vpn) -> PhysPageNum | None:
        """The physical page a virtual page maps to, or None."""
        return self.page_table.translate(vpn)

    def get_size(self) -> int:
        """Total number of bytes covered by all segments."""
        return sum(len(segment.vpn_range) * PAGE_SIZE for segment in self.segments)

    def satp_token(self) -> int:
        """The token identifying this address space's page table."""
        return self.page_table.satp_token()

    def clone(self) -> MemorySet:
        """A new address space with copies of every segment and its contents."""
        memory = self.allocator.memory
        copy = MemorySet(self.allocator)
        for segment in self.segments:
            data = b"".join(
                bytes(memory.page(self.translate(vpn))) for vpn in segment.vpn_range
            )
            copy.insert_segment(segment.vpn_range, segment.flags, data)
        return copy

    def __repr__(self) -> str:
        ranges = ", ".join(
            f"{seg.vpn_range.start:#x}..{seg.vpn_range.stop:#x}" for seg in self.segments
        )
        return f"MemorySet(page_table={self.page_table!r}, segments=[{ranges}])"