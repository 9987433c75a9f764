"""Port interface for bounded queues.

Adapters depend on this protocol rather than on RingBuffer directly, so any
container with the same surface can stand in for it.
"""

from collections.abc import Iterable
from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class BoundedQueuePort(Protocol[T]):
    """Port for fixed-capacity FIFO queues.

    Implementations keep at most ``capacity`` items. What happens on a full
    add is up to the implementation; RingBuffer overwrites the oldest item.
    """

    @property
    def capacity(self) -> int:
        """Maximum number of items held."""
        ...

    def size(self) -> int:
        """Return the number of items currently held."""
        ...

    def is_empty(self) -> bool:
        """Return True if no items are held."""
        ...

    def add(self, item: T) -> None:
        """Append an item."""
        ...

    def add_sequence(self, items: Iterable[T]) -> None:
        """Append items in order."""
        ...

    def peek(self) -> T | None:
        """Return the oldest item without removing it.

        Returns:
            The oldest item, or None when the queue is empty.
        """
        ...

    def remove(self) -> T | None:
        """Remove and return the oldest item.

        Returns:
            The oldest item, or None when the queue is empty.
        """
        ...
