"""Buddy-system allocator over an address range."""

from __future__ import annotations

from .linked_list import LinkedList

WORD_SIZE = 8
DEFAULT_ORDER = 32


def _trailing_zeros(num: int) -> int:
    return (num & -num).bit_length() - 1


def _next_power_of_two(num: int) -> int:
    return 1 if num <= 1 else 1 << (num - 1).bit_length()


def prev_power_of_two(num: int) -> int:
    """The largest power of two not greater than ``num``."""
    if num <= 0:
        raise ValueError(f"no power of two below {num}")
    return 1 << (num.bit_length() - 1)


def get_size(size: int, align: int = WORD_SIZE) -> int:
    """Block size actually used for a request: block size equals its alignment."""
    return max(_next_power_of_two(size), align, WORD_SIZE)


class BuddySystemAllocator:
    """Buddy allocator with one free list per power-of-two block order."""

    def __init__(self, start_addr: int, size: int, order: int = DEFAULT_ORDER):
        self.order = order
        self.free_list = [LinkedList() for _ in range(order)]
        self.total = 0
        self.allocated = 0
        self.add(start_addr, start_addr + size)

    def add(self, start_addr: int, end_addr: int) -> None:
        """Hand the range [start_addr, end_addr) to the allocator (word aligned)."""
        blocks = []
        curr_addr = start_addr
        while curr_addr + WORD_SIZE <= end_addr:
            largest = prev_power_of_two(end_addr - curr_addr)
            lowbit = curr_addr & -curr_addr
            # Take the largest block that keeps the block aligned to its size.
            size = min(lowbit, largest) if lowbit else largest
            block_order = _trailing_zeros(size)
            if block_order >= self.order:
                raise ValueError(f"block of {size:#x} bytes exceeds allocator order")
            blocks.append((block_order, curr_addr))
            curr_addr += size
        for block_order, addr in blocks:
            self.free_list[block_order].push(addr)
            self.total += 1 << block_order

    def alloc(self, size: int, align: int = WORD_SIZE) -> int:
        """Allocate a block; raises MemoryError when no block is big enough."""
        size = get_size(size, align)
        order = _trailing_zeros(size)
        for curr_order in range(order, self.order):
            if self.free_list[curr_order].is_empty():
                continue
            for splitting in range(curr_order, order, -1):
                first = self.free_list[splitting].pop()
                second = first + (1 << (splitting - 1))
                self.free_list[splitting - 1].push(first)
                self.free_list[splitting - 1].push(second)
            self.allocated += size
            return self.free_list[order].pop()
        raise MemoryError(f"cannot allocate {size} bytes")

    def dealloc(self, addr: int, size: int, align: int = WORD_SIZE) -> None:
        """Free a block, merging it with free buddies as far up as possible."""
        size = get_size(size, align)
        order = _trailing_zeros(size)
        curr_addr = addr
        for curr_order in range(order, self.order):
            super_addr = curr_addr & ~(1 << curr_order)
            buddy_addr = curr_addr ^ (1 << curr_order)
            free = self.free_list[curr_order]
            if buddy_addr in free:
                free.remove(buddy_addr)
                curr_addr = super_addr
            else:
                free.push(curr_addr)
                self.allocated -= size
                return

    def __repr__(self) -> str:
        return (
            f"BuddySystemAllocator(total={self.total:#x}, "
            f"allocated={self.allocated:#x}, free_list={self.free_list!r})"
        )