"""Growable array-backed sequence.

``ArraySequence`` manages its own fixed-size buffer and grows it by doubling,
so appends are amortized O(1). Slots in ``[size, capacity)`` are always reset
to ``None`` so removed elements are not kept alive by the buffer.
"""

from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar

from .exceptions import InvalidArgumentError, OutOfRangeError

E = TypeVar("E")

DEFAULT_CAPACITY = 10
GROWTH_FACTOR = 2


class ArraySequence(Generic[E]):
    """Indexable sequence with explicit capacity management."""

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY) -> None:
        """Create an empty sequence.

        Args:
            initial_capacity: Number of slots allocated up front (must be > 0)
        """
        if initial_capacity <= 0:
            raise ValueError("initial_capacity must be > 0")
        self._data: List[Optional[E]] = [None] * initial_capacity
        self._size = 0

    @property
    def capacity(self) -> int:
        """Number of slots currently allocated."""
        return len(self._data)

    def size(self) -> int:
        """Return the number of stored elements."""
        return self._size

    def is_empty(self) -> bool:
        """Return True when the sequence holds no elements."""
        return self._size == 0

    def clear(self) -> None:
        """Remove every element, keeping the allocated capacity."""
        for i in range(self._size):
            self._data[i] = None
        self._size = 0

    def _ensure_capacity(self, min_capacity: int) -> None:
        if min_capacity <= len(self._data):
            return
        new_capacity = max(len(self._data) * GROWTH_FACTOR, min_capacity)
        buffer: List[Optional[E]] = [None] * new_capacity
        for i in range(self._size):
            buffer[i] = self._data[i]
        self._data = buffer

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self._size:
            raise OutOfRangeError(index, self._size)

    def get(self, index: int) -> E:
        """Return the element at ``index``.

        Raises:
            OutOfRangeError: If ``index`` is not in ``[0, size)``
        """
        self._check_index(index)
        return self._data[index]  # type: ignore[return-value]

    def set(self, index: int, value: E) -> E:
        """Replace the element at ``index`` and return the previous one.

        Raises:
            InvalidArgumentError: If ``value`` is None
            OutOfRangeError: If ``index`` is not in ``[0, size)``
        """
        if value is None:
            raise InvalidArgumentError()
        self._check_index(index)
        old = self._data[index]
        self._data[index] = value
        return old  # type: ignore[return-value]

    def add(self, value: E) -> bool:
        """Append ``value`` at the end."""
        if value is None:
            raise InvalidArgumentError()
        self._ensure_capacity(self._size + 1)
        self._data[self._size] = value
        self._size += 1
        return True

    def insert(self, index: int, value: E) -> bool:
        """Insert ``value`` at ``index``, shifting later elements right.

        ``index == size`` appends.

        Raises:
            InvalidArgumentError: If ``value`` is None
            OutOfRangeError: If ``index`` is not in ``[0, size]``
        """
        if value is None:
            raise InvalidArgumentError()
        if index < 0 or index > self._size:
            raise OutOfRangeError(index, self._size)

        self._ensure_capacity(self._size + 1)
        for i in range(self._size, index, -1):
            self._data[i] = self._data[i - 1]
        self._data[index] = value
        self._size += 1
        return True

    def add_all(self, values: Iterable[E]) -> bool:
        """Append every element of ``values`` in order.

        Returns:
            True if at least one element was appended
        """
        if values is None:
            raise InvalidArgumentError("Cannot add elements from None")
        added = False
        for value in values:
            self.add(value)
            added = True
        return added

    def remove_at(self, index: int) -> E:
        """Remove and return the element at ``index``, shifting later elements left."""
        self._check_index(index)
        removed = self._data[index]
        for i in range(index, self._size - 1):
            self._data[i] = self._data[i + 1]
        self._size -= 1
        self._data[self._size] = None
        return removed  # type: ignore[return-value]

    def remove(self, value: E) -> Optional[E]:
        """Remove the first element equal to ``value``.

        Returns:
            The removed element, or None when no element matched
        """
        if value is None:
            raise InvalidArgumentError()
        for i in range(self._size):
            if value == self._data[i]:
                return self.remove_at(i)
        return None

    def index_of(self, value: E) -> int:
        """Return the position of the first element equal to ``value``, or -1."""
        if value is None:
            raise InvalidArgumentError()
        for i in range(self._size):
            if value == self._data[i]:
                return i
        return -1

    def contains(self, value: E) -> bool:
        """Return True if an element equal to ``value`` is stored."""
        return self.index_of(value) >= 0

    def to_array(self) -> List[E]:
        """Return a snapshot of the elements in index order."""
        return [self._data[i] for i in range(self._size)]  # type: ignore[misc]

    def iterator(self) -> Iterator[E]:
        """Iterate front to back. Mutating while iterating is undefined."""
        cursor = 0
        while cursor < self._size:
            yield self._data[cursor]  # type: ignore[misc]
            cursor += 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[E]:
        return self.iterator()

    def __contains__(self, value: Any) -> bool:
        return value is not None and self.contains(value)

    def __getitem__(self, index: int) -> E:
        return self.get(index)

    def __setitem__(self, index: int, value: E) -> None:
        self.set(index, value)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ArraySequence):
            return NotImplemented
        if self._size != other._size:
            return False
        return all(a == b for a, b in zip(self, other))

    def __repr__(self) -> str:
        return f"ArraySequence({self.to_array()!r})"
