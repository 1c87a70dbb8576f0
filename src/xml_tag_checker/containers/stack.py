"""Last-in-first-out stack backed by ``ArraySequence``."""

from typing import Any, Generic, Iterator, List, Optional, TypeVar

from .exceptions import EmptyStackError, InvalidArgumentError
from .sequence import ArraySequence

E = TypeVar("E")


class Stack(Generic[E]):
    """Unbounded stack; the top is the last element of the backing sequence."""

    def __init__(self) -> None:
        self._data: ArraySequence[E] = ArraySequence()

    def push(self, value: E) -> None:
        """Push ``value`` onto the top of the stack."""
        if value is None:
            raise InvalidArgumentError("Cannot push None onto stack")
        self._data.add(value)

    def pop(self) -> E:
        """Remove and return the top element.

        Raises:
            EmptyStackError: If the stack is empty
        """
        if self._data.is_empty():
            raise EmptyStackError()
        return self._data.remove_at(self._data.size() - 1)

    def peek(self) -> E:
        """Return the top element without removing it.

        Raises:
            EmptyStackError: If the stack is empty
        """
        if self._data.is_empty():
            raise EmptyStackError()
        return self._data.get(self._data.size() - 1)

    def clear(self) -> None:
        self._data.clear()

    def is_empty(self) -> bool:
        return self._data.is_empty()

    def size(self) -> int:
        return self._data.size()

    def stack_overflow(self) -> bool:
        """Always False: the stack has no fixed capacity."""
        return False

    def contains(self, value: E) -> bool:
        return self._data.contains(value)

    def search(self, value: E) -> int:
        """Return the 1-based distance of ``value`` from the top, or -1 if absent.

        The top element is at distance 1; with duplicates the occurrence
        nearest the top wins.
        """
        if value is None:
            raise InvalidArgumentError("Cannot search for None in stack")
        n = self._data.size()
        for i in range(n - 1, -1, -1):
            if value == self._data.get(i):
                return n - i
        return -1

    def to_array(self) -> List[E]:
        """Return a snapshot of the elements from top to bottom."""
        return list(self.iterator())

    def iterator(self) -> Iterator[E]:
        """Iterate from top to bottom."""
        index = self._data.size() - 1
        while index >= 0:
            yield self._data.get(index)
            index -= 1

    def equals(self, other: Optional["Stack[E]"]) -> bool:
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
        if not isinstance(other, Stack):
            return NotImplemented
        return self.equals(other)

    def __repr__(self) -> str:
        return f"Stack(top->{self.to_array()!r})"
