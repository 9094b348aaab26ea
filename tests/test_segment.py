import pytest

from rustedos.address import PAGE_SIZE, PhysicalMemory, PhysPageNum, VirtPageNum
from rustedos.frame_allocator import FrameAllocator
from rustedos.page_table import PTEFlags
from rustedos.segment import MemorySegment


@pytest.fixture
def frames():
    return FrameAllocator(PhysPageNum(0x80000), PhysPageNum(0x80008), PhysicalMemory())


def test_memory_segment(frames):
    seg = MemorySegment(range(VirtPageNum(0), VirtPageNum(1)), PTEFlags.R | PTEFlags.W, frames)
    data = bytearray(PAGE_SIZE)
    data[::2] = b"\xff" * (PAGE_SIZE // 2)
    seg.copy_data(data)
    page = frames.memory.page(seg.data_frames[VirtPageNum(0)].ppn)
    assert bytes(page) == b"\xff\x00" * (PAGE_SIZE // 2)


def test_copy_partial_second_page(frames):
    seg = MemorySegment(range(3, 5), PTEFlags.R, frames)
    seg.copy_data(b"a" * PAGE_SIZE + b"bc")
    first = frames.memory.page(seg.data_frames[VirtPageNum(3)].ppn)
    second = frames.memory.page(seg.data_frames[VirtPageNum(4)].ppn)
    assert bytes(first) == b"a" * PAGE_SIZE
    assert second[:3] == b"bc\x00"


def test_data_beyond_segment_is_ignored(frames):
    seg = MemorySegment(range(0, 1), PTEFlags.R, frames)
    seg.copy_data(b"z" * (PAGE_SIZE * 2))
    assert list(seg.data_frames) == [VirtPageNum(0)]
    assert frames.curr_ppn == PhysPageNum(0x80001)


def test_one_frame_per_page(frames):
    seg = MemorySegment(range(10, 14), PTEFlags.R | PTEFlags.U, frames)
    assert list(seg.data_frames) == [VirtPageNum(v) for v in range(10, 14)]
    assert len({f.ppn for f in seg.data_frames.values()}) == 4
    assert seg.flags == PTEFlags.R | PTEFlags.U


def test_release_returns_frames(frames):
    seg = MemorySegment(range(0, 3), PTEFlags.R, frames)
    seg.release()
    assert len(frames.recycled) == 3
    assert seg.data_frames == {}


def test_allocation_failure_frees_partial(frames):
    with pytest.raises(MemoryError):
        MemorySegment(range(0, 9), PTEFlags.R, frames)
    assert len(frames.recycled) == 8