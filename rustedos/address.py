"""Physical and virtual addresses, page numbers and a simulated physical memory."""

from __future__ import annotations

PAGE_SIZE_BITS = 12
PAGE_SIZE = 1 << PAGE_SIZE_BITS
PTE_PER_PAGE = PAGE_SIZE // 8
_INDEX_BITS = PAGE_SIZE_BITS - 3
_INDEX_MASK = PTE_PER_PAGE - 1


class _Unsigned(int):
    """A non-negative machine word with a descriptive hexadecimal repr."""

    __slots__ = ()

    def __new__(cls, value=0):
        number = super().__new__(cls, value)
        if number < 0:
            raise ValueError(f"{cls.__name__} cannot be negative: {value}")
        return number

    def __repr__(self) -> str:
        return f"{type(self).__name__}: {int(self):#x}"

    __str__ = int.__repr__


class PhysAddr(_Unsigned):
    """A physical address."""

    __slots__ = ()

    def ppn(self) -> PhysPageNum:
        """The physical page holding this address."""
        return PhysPageNum(self // PAGE_SIZE)


class VirtAddr(_Unsigned):
    """A virtual address."""

    __slots__ = ()

    def vpn(self) -> VirtPageNum:
        """The virtual page holding this address."""
        return VirtPageNum(self // PAGE_SIZE)

    def page_offset(self) -> int:
        """Offset of this address inside its page."""
        return self & (PAGE_SIZE - 1)


class PhysPageNum(_Unsigned):
    """A physical page number."""

    __slots__ = ()

    def addr(self) -> PhysAddr:
        """The address of the first byte of this page."""
        return PhysAddr(self << PAGE_SIZE_BITS)


class VirtPageNum(_Unsigned):
    """A virtual page number."""

    __slots__ = ()

    def addr(self) -> VirtAddr:
        """The address of the first byte of this page."""
        return VirtAddr(self << PAGE_SIZE_BITS)

    def indices(self) -> tuple[int, int, int]:
        """The three page-table indices, outermost level first."""
        vpn = int(self)
        low = vpn & _INDEX_MASK
        vpn >>= _INDEX_BITS
        mid = vpn & _INDEX_MASK
        vpn >>= _INDEX_BITS
        return vpn & _INDEX_MASK, mid, low


class PhysicalMemory:
    """Page-granular physical memory; pages are zero-filled on first touch."""

    def __init__(self):
        self._pages: dict[int, bytearray] = {}

    def page(self, ppn) -> bytearray:
        """The live byte array backing a physical page."""
        key = int(ppn)
        page = self._pages.get(key)
        if page is None:
            page = self._pages[key] = bytearray(PAGE_SIZE)
        return page

    def read(self, addr, size: int) -> bytes:
        """Read ``size`` bytes starting at a physical address."""
        out = bytearray()
        addr = PhysAddr(addr)
        while size > 0:
            offset = addr & (PAGE_SIZE - 1)
            chunk = min(size, PAGE_SIZE - offset)
            out += self.page(addr.ppn())[offset:offset + chunk]
            addr = PhysAddr(addr + chunk)
            size -= chunk
        return bytes(out)

    def write(self, addr, data) -> None:
        """Write bytes starting at a physical address."""
        view = memoryview(bytes(data))
        addr = PhysAddr(addr)
        while view:
            offset = addr & (PAGE_SIZE - 1)
            chunk = min(len(view), PAGE_SIZE - offset)
            self.page(addr.ppn())[offset:offset + chunk] = view[:chunk]
            addr = PhysAddr(addr + chunk)
            view = view[chunk:]