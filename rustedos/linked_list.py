"""A last-in first-out free list of block addresses."""

from __future__ import annotations

from collections.abc import Iterator


class LinkedList:
    """Free list of addresses; the most recently pushed address is the head."""

    __slots__ = ("_items",)

    def __init__(self):
        # The head of the list is the last element of this Python list.
        self._items: list[int] = []

    def is_empty(self) -> bool:
        """Whether the list holds no address."""
        return not self._items

    def push(self, item) -> None:
        """Put an address at the head of the list."""
        self._items.append(int(item))

    def pop(self) -> int:
        """Take the address at the head; raises IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty LinkedList")
        return self._items.pop()

    def remove(self, item) -> None:
        """Remove every node holding ``item``; raises ValueError if there is none."""
        item = int(item)
        kept = [value for value in self._items if value != item]
        if len(kept) == len(self._items):
            raise ValueError(f"{item:#x} is not in the list")
        self._items = kept

    def __contains__(self, item) -> bool:
        return int(item) in self._items

    def __iter__(self) -> Iterator[int]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return "[" + ", ".join(f"{value:#x}" for value in self) + "]"