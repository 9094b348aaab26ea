"""Three-level SV39 page tables stored in simulated physical memory."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass

from .address import PTE_PER_PAGE, PhysPageNum, VirtPageNum
from .frame_allocator import FrameAllocator

_PPN_SHIFT = 10
_TOKEN_PPN_MASK = (1 << 44) - 1
_SV39_MODE = 8 << 60


class PTEFlags(enum.IntFlag):
    """Page-table entry flag bits."""

    V = 1 << 0
    R = 1 << 1
    W = 1 << 2
    X = 1 << 3
    U = 1 << 4


@dataclass(frozen=True)
class PageTableEntry:
    """One 64-bit page-table entry."""

    bits: int = 0

    @classmethod
    def from_parts(cls, ppn, flags) -> PageTableEntry:
        return cls((int(ppn) << _PPN_SHIFT) | int(flags))

    def ppn(self) -> PhysPageNum:
        return PhysPageNum(self.bits >> _PPN_SHIFT)

    def flags(self) -> PTEFlags:
        return PTEFlags(self.bits & 0xFF)

    def valid(self) -> bool:
        return bool(self.bits & PTEFlags.V)


class PageTable:
    """A page table whose interior frames it owns."""

    def __init__(self, frames: FrameAllocator):
        self._allocator = frames
        self._memory = frames.memory
        root = frames.alloc()
        self.root_ppn = root.ppn
        self.frames = [root]

    @classmethod
    def from_token(cls, token: int, frames: FrameAllocator) -> PageTable:
        """View the table behind a satp token without owning its frames."""
        table = cls.__new__(cls)
        table._allocator = frames
        table._memory = frames.memory
        table.root_ppn = PhysPageNum(token & _TOKEN_PPN_MASK)
        table.frames = []
        return table

    def _entry(self, ppn, index: int) -> PageTableEntry:
        offset = index * 8
        raw = self._memory.page(ppn)[offset:offset + 8]
        return PageTableEntry(int.from_bytes(raw, "little"))

    def _set_entry(self, ppn, index: int, entry: PageTableEntry) -> None:
        offset = index * 8
        self._memory.page(ppn)[offset:offset + 8] = entry.bits.to_bytes(8, "little")

    def _find_pte(self, vpn) -> tuple[PhysPageNum, int] | None:
        *upper, leaf = VirtPageNum(vpn).indices()
        ppn = self.root_ppn
        for index in upper:
            entry = self._entry(ppn, index)
            if not entry.valid():
                return None
            ppn = entry.ppn()
        if not self._entry(ppn, leaf).valid():
            return None
        return ppn, leaf

    def _create_pte(self, vpn) -> tuple[PhysPageNum, int]:
        *upper, leaf = VirtPageNum(vpn).indices()
        ppn = self.root_ppn
        for index in upper:
            entry = self._entry(ppn, index)
            if not entry.valid():
                frame = self._allocator.alloc()
                self.frames.append(frame)
                entry = PageTableEntry.from_parts(frame.ppn, PTEFlags.V)
                self._set_entry(ppn, index, entry)
            ppn = entry.ppn()
        return ppn, leaf

    def map(self, vpn, ppn, flags) -> None:
        """Map a virtual page onto a physical page with the given flags."""
        location = self._create_pte(vpn)
        self._set_entry(*location, PageTableEntry.from_parts(ppn, PTEFlags(flags) | PTEFlags.V))

    def unmap(self, vpn) -> None:
        """Remove a mapping; raises KeyError if the page is not mapped."""
        location = self._find_pte(vpn)
        if location is None:
            raise KeyError(f"{VirtPageNum(vpn)!r} is not mapped")
        self._set_entry(*location, PageTableEntry())

    def translate(self, vpn) -> PhysPageNum | None:
        """The physical page a virtual page maps to, or None."""
        location = self._find_pte(vpn)
        if location is None:
            return None
        return self._entry(*location).ppn()

    def satp_token(self) -> int:
        return _SV39_MODE | int(self.root_ppn)

    def _non_identical(self) -> list[tuple[VirtPageNum, PhysPageNum, PTEFlags]]:
        stack = [(0, self.root_ppn)]
        content = []
        while stack:
            base, ppn = stack.pop()
            page = self._memory.page(ppn)
            for i, (bits,) in enumerate(struct.iter_unpack("<Q", page)):
                entry = PageTableEntry(bits)
                vpn = (base << 9) + i
                flags = entry.flags()
                if flags == PTEFlags.V:
                    stack.append((vpn, entry.ppn()))
                elif flags and vpn != entry.ppn():
                    content.append((VirtPageNum(vpn), entry.ppn(), flags))
        return content

    def __repr__(self) -> str:
        return (
            f"PageTable(root_ppn={self.root_ppn!r}, frames={self.frames!r}, "
            f"non_identical={self._non_identical()!r})"
        )


assert PTE_PER_PAGE == 512