"""A contiguous range of virtual pages backed by its own frames."""

from __future__ import annotations

from .address import PAGE_SIZE, VirtPageNum
from .frame_allocator import FrameAllocator, FrameTracker
from .page_table import PTEFlags


class MemorySegment:
    """Virtual pages in ``vpn_range``, each with a freshly allocated frame."""

    def __init__(self, vpn_range: range, flags, frames: FrameAllocator):
        self.vpn_range = range(int(vpn_range.start), int(vpn_range.stop))
        self.flags = PTEFlags(flags)
        self._memory = frames.memory
        self.data_frames: dict[VirtPageNum, FrameTracker] = {}
        try:
            for vpn in self.vpn_range:
                self.data_frames[VirtPageNum(vpn)] = frames.alloc()
        except MemoryError:
            self.release()
            raise

    def copy_data(self, data) -> None:
        """Copy bytes into the segment page by page from its start."""
        data = bytes(data)
        for frame, start in zip(self.data_frames.values(), range(0, len(data), PAGE_SIZE)):
            chunk = data[start:start + PAGE_SIZE]
            self._memory.page(frame.ppn)[:len(chunk)] = chunk

    def release(self) -> None:
        """Give every frame back to the allocator."""
        for frame in self.data_frames.values():
            frame.release()
        self.data_frames.clear()