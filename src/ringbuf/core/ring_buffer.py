"""Fixed-capacity ring buffer.

Provides a bounded FIFO container that overwrites its oldest element when
an item is added to a full buffer. Memory use is fixed at construction.
"""

from collections.abc import Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """Bounded FIFO queue with overwrite-on-full semantics.

    Items are removed in the order they were added. When the buffer is
    full, adding a new item silently discards the oldest one.

    Not thread-safe. Callers sharing a buffer between threads must guard
    it with their own lock.

    Args:
        capacity: Number of slots. Must be a positive int.

    Raises:
        TypeError: If capacity is not an int.
        ValueError: If capacity is less than 1.
    """

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError("capacity must be an int")
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._storage: list[T | None] = [None] * capacity
        self._capacity = capacity
        self._front = 0  # next to remove
        self._end = 0  # last added
        # front == end holds for both one item and none
        self._empty = True

    @classmethod
    def from_sequence(cls, items: Iterable[T]) -> "RingBuffer[T]":
        """Create a full buffer holding items in their original order.

        The capacity equals the number of items.
        """
        materialized = list(items)
        buffer: RingBuffer[T] = cls(len(materialized))
        buffer.add_sequence(materialized)
        return buffer

    @property
    def capacity(self) -> int:
        """Maximum number of items the buffer holds."""
        return self._capacity

    def size(self) -> int:
        """Return the number of items currently held."""
        if self._empty:
            return 0
        if self._end >= self._front:
            return self._end - self._front + 1
        return self._capacity - self._front + self._end + 1

    def is_empty(self) -> bool:
        """Return True if the buffer holds no items."""
        return self._empty

    def is_full(self) -> bool:
        """Return True if the next add will overwrite the oldest item."""
        return self.size() == self._capacity

    def add(self, item: T) -> None:
        """Append an item, discarding the oldest one if the buffer is full."""
        if self._empty:
            self._empty = False
            self._front = 0
            self._end = 0
        else:
            self._end = self._advance(self._end)
            if self._end == self._front:
                self._front = self._advance(self._front)
        self._storage[self._end] = item

    def add_sequence(self, items: Iterable[T]) -> None:
        """Append items in order, as if add() were called for each."""
        for item in items:
            self.add(item)

    def peek(self) -> T | None:
        """Return the oldest item without removing it, or None if empty."""
        if self._empty:
            return None
        return self._storage[self._front]

    def remove(self) -> T | None:
        """Remove and return the oldest item, or None if empty."""
        if self._empty:
            return None
        item = self._storage[self._front]
        self._storage[self._front] = None
        if self._front == self._end:
            self._empty = True
        else:
            self._front = self._advance(self._front)
        return item

    def _advance(self, index: int) -> int:
        return (index + 1) % self._capacity

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, size={self.size()})"
