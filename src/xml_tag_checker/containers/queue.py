"""First-in-first-out queue backed by ``LinkedSequence``."""

from typing import Any, Generic, Iterator, List, Optional, TypeVar

from .exceptions import EmptyQueueError, InvalidArgumentError
from .linked import LinkedSequence

E = TypeVar("E")


class Queue(Generic[E]):
    """Unbounded queue: enqueue at the tail, dequeue from the head."""

    def __init__(self) -> None:
        self._data: LinkedSequence[E] = LinkedSequence()

    def enqueue(self, value: E) -> None:
        """Append ``value`` at the tail."""
        if value is None:
            raise InvalidArgumentError("Cannot enqueue None into queue")
        self._data.add(value)

    def dequeue(self) -> E:
        """Remove and return the head element.

        Raises:
            EmptyQueueError: If the queue is empty
        """
        if self._data.is_empty():
            raise EmptyQueueError()
        return self._data.remove_first()

    def peek(self) -> E:
        """Return the head element without removing it.

        Raises:
            EmptyQueueError: If the queue is empty
        """
        if self._data.is_empty():
            raise EmptyQueueError()
        return self._data.get(0)

    def dequeue_all(self) -> None:
        """Remove every element."""
        self._data.clear()

    def drain(self) -> Iterator[E]:
        """Dequeue and yield elements until the queue is empty."""
        while not self._data.is_empty():
            yield self._data.remove_first()

    def is_empty(self) -> bool:
        return self._data.is_empty()

    def size(self) -> int:
        return self._data.size()

    def is_full(self) -> bool:
        """Always False: the queue has no fixed capacity."""
        return False

    def contains(self, value: E) -> bool:
        if value is None:
            raise InvalidArgumentError("Cannot search for None in queue")
        return self._data.contains(value)

    def search(self, value: E) -> int:
        """Return the 1-based position of ``value`` from the head, or -1 if absent."""
        if value is None:
            raise InvalidArgumentError("Cannot search for None in queue")
        position = self._data.index_of(value)
        return position + 1 if position >= 0 else -1

    def to_array(self) -> List[E]:
        """Return a snapshot of the elements from head to tail."""
        return self._data.to_array()

    def iterator(self) -> Iterator[E]:
        """Iterate from head to tail."""
        return self._data.iterator()

    def equals(self, other: Optional["Queue[E]"]) -> bool:
        """Return True if ``other`` has the same elements in the same order."""
        if self is other:
            return True
        if other is None or self.size() != other.size():
            return False
        return all(a == b for a, b in zip(self.iterator(), other.iterator()))

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[E]:
        return self.iterator()

    def __contains__(self, value: Any) -> bool:
        return value is not None and self.contains(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Queue):
            return NotImplemented
        return self.equals(other)

    def __repr__(self) -> str:
        return f"Queue(head->{self.to_array()!r})"
