"""Access to user-space memory through a user page table."""

from __future__ import annotations

from collections.abc import Iterator

from .address import PAGE_SIZE, PhysPageNum, VirtAddr, VirtPageNum
from .frame_allocator import FrameAllocator
from .page_table import PageTable

_OFFSET_MASK = PAGE_SIZE - 1


class UserBuffer:
    """A user-space byte range, split into live per-page views."""

    def __init__(self, segments: list[memoryview]):
        self.segments = segments

    def __len__(self) -> int:
        return sum(len(segment) for segment in self.segments)

    def __iter__(self) -> Iterator[int]:
        for segment in self.segments:
            yield from segment

    def write(self, data) -> int:
        """Copy bytes into the buffer from its start; returns the count copied."""
        data = memoryview(bytes(data))
        written = 0
        for segment in self.segments:
            if written >= len(data):
                break
            chunk = data[written:written + len(segment)]
            segment[:len(chunk)] = chunk
            written += len(chunk)
        return written

    def read(self) -> bytes:
        """The whole buffer contents."""
        return b"".join(segment.tobytes() for segment in self.segments)

    def __repr__(self) -> str:
        return f"UserBuffer(lengths={[len(segment) for segment in self.segments]})"


def _translate(table: PageTable, vpn: VirtPageNum) -> PhysPageNum:
    ppn = table.translate(vpn)
    if ppn is None:
        raise ValueError(f"user space address {int(vpn.addr()):#x} not mapped")
    return ppn


def get_user_buffer(frames: FrameAllocator, token: int, ptr: int, length: int) -> UserBuffer:
    """Views of ``length`` user bytes at ``ptr``; raises ValueError if unmapped."""
    if length < 0:
        raise ValueError(f"negative buffer length: {length}")
    table = PageTable.from_token(token, frames)
    memory = frames.memory
    segments = []
    current = int(ptr)
    end = current + length
    while current < end:
        start_va = VirtAddr(current)
        vpn = start_va.vpn()
        ppn = _translate(table, vpn)
        stop = min(end, int(VirtPageNum(vpn + 1).addr()))
        stop_offset = (stop & _OFFSET_MASK) or PAGE_SIZE
        segments.append(memoryview(memory.page(ppn))[start_va.page_offset():stop_offset])
        current = stop
    return UserBuffer(segments)


def get_user_string(frames: FrameAllocator, token: int, ptr: int) -> str:
    """The NUL-terminated user string at ``ptr``, one character per byte."""
    table = PageTable.from_token(token, frames)
    memory = frames.memory
    pieces = []
    va = int(ptr)
    while True:
        vpn = VirtAddr(va).vpn()
        page = memory.page(_translate(table, vpn))
        offset = va & _OFFSET_MASK
        nul = page.find(0, offset)
        if nul != -1:
            pieces.append(bytes(page[offset:nul]))
            break
        pieces.append(bytes(page[offset:]))
        va = int(VirtPageNum(vpn + 1).addr())
    return b"".join(pieces).decode("latin-1")


def get_user_value(frames: FrameAllocator, token: int, ptr: int, size: int = 8) -> int:
    """Read an unsigned little-endian integer of ``size`` bytes from user space."""
    buffer = get_user_buffer(frames, token, ptr, size)
    return int.from_bytes(buffer.read(), "little")


def put_user_value(frames: FrameAllocator, token: int, ptr: int, value: int, size: int = 8) -> None:
    """Write an integer as ``size`` little-endian bytes into user space."""
    raw = int(value).to_bytes(size, "little", signed=value < 0)
    get_user_buffer(frames, token, ptr, size).write(raw)