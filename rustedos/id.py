"""Recycling identifier allocation and process-id handles."""

from __future__ import annotations


class RecycleAllocator:
    """Hands out increasing ids, reusing the most recently freed one first."""

    def __init__(self):
        self.current = 0
        self.recycled: list[int] = []

    def alloc(self) -> int:
        """Allocate an id."""
        if self.recycled:
            return self.recycled.pop()
        self.current += 1
        return self.current - 1

    def dealloc(self, id_: int) -> None:
        """Free an id; raises ValueError if it was never handed out or is already free."""
        id_ = int(id_)
        if not 0 <= id_ < self.current:
            raise ValueError(f"id {id_} has not been allocated!")
        if id_ in self.recycled:
            raise ValueError(f"id {id_} has been deallocated!")
        self.recycled.append(id_)


class PidHandle:
    """Ownership of one process id; releasing it returns the id to its allocator."""

    __slots__ = ("pid", "_allocator", "_released")

    def __init__(self, pid: int, allocator: RecycleAllocator):
        self.pid = pid
        self._allocator = allocator
        self._released = False

    def release(self) -> None:
        """Give the id back; later calls do nothing."""
        if not self._released:
            self._released = True
            self._allocator.dealloc(self.pid)

    def __enter__(self) -> PidHandle:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __int__(self) -> int:
        return self.pid

    def __repr__(self) -> str:
        return f"PidHandle({self.pid})"


def pid_alloc(allocator: RecycleAllocator) -> PidHandle:
    """Allocate a process id from ``allocator`` as a releasable handle."""
    return PidHandle(allocator.alloc(), allocator)