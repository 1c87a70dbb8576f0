"""Doubly-linked sequence.

Each node owns its successor through ``next``; the back link is a
``weakref.ref`` so the ownership graph stays acyclic and the chain is freed
as soon as the head is dropped.
"""

import weakref
from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar

from .exceptions import InvalidArgumentError, OutOfRangeError

E = TypeVar("E")


class _Node(Generic[E]):
    __slots__ = ("element", "next", "_prev", "__weakref__")

    def __init__(self, element: E) -> None:
        self.element = element
        self.next: Optional["_Node[E]"] = None
        self._prev: Optional["weakref.ReferenceType[_Node[E]]"] = None

    @property
    def prev(self) -> Optional["_Node[E]"]:
        return self._prev() if self._prev is not None else None

    @prev.setter
    def prev(self, node: Optional["_Node[E]"]) -> None:
        self._prev = weakref.ref(node) if node is not None else None


class LinkedSequence(Generic[E]):
    """Sequence backed by a doubly-linked node chain.

    Head and tail operations are O(1). Positional access walks from whichever
    end is nearer to the requested index.
    """

    def __init__(self) -> None:
        self._head: Optional[_Node[E]] = None
        self._tail: Optional[_Node[E]] = None
        self._size = 0

    def size(self) -> int:
        """Return the number of stored elements."""
        return self._size

    def is_empty(self) -> bool:
        """Return True when the sequence holds no elements."""
        return self._size == 0

    def clear(self) -> None:
        """Drop every node."""
        self._head = None
        self._tail = None
        self._size = 0

    def _node_at(self, index: int) -> _Node[E]:
        if index < 0 or index >= self._size:
            raise OutOfRangeError(index, self._size)
        if index < self._size // 2:
            current = self._head
            for _ in range(index):
                current = current.next  # type: ignore[union-attr]
        else:
            current = self._tail
            for _ in range(self._size - 1, index, -1):
                current = current.prev  # type: ignore[union-attr]
        return current  # type: ignore[return-value]

    def _unlink(self, node: _Node[E]) -> E:
        previous = node.prev
        following = node.next
        if previous is None:
            self._head = following
        else:
            previous.next = following
        if following is None:
            self._tail = previous
        else:
            following.prev = previous
        node.next = None
        node.prev = None
        self._size -= 1
        return node.element

    def add_first(self, value: E) -> None:
        """Insert ``value`` before the current head."""
        if value is None:
            raise InvalidArgumentError()
        node = _Node(value)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        self._size += 1

    def add(self, value: E) -> bool:
        """Append ``value`` after the current tail."""
        if value is None:
            raise InvalidArgumentError()
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1
        return True

    def insert(self, index: int, value: E) -> bool:
        """Insert ``value`` at ``index`` (``index == size`` appends)."""
        if value is None:
            raise InvalidArgumentError()
        if index < 0 or index > self._size:
            raise OutOfRangeError(index, self._size)

        if index == 0:
            self.add_first(value)
        elif index == self._size:
            self.add(value)
        else:
            current = self._node_at(index)
            previous = current.prev
            node = _Node(value)
            node.prev = previous
            node.next = current
            previous.next = node  # type: ignore[union-attr]
            current.prev = node
            self._size += 1
        return True

    def add_all(self, values: Iterable[E]) -> bool:
        """Append every element of ``values`` in order."""
        if values is None:
            raise InvalidArgumentError("Cannot add elements from None")
        added = False
        for value in values:
            self.add(value)
            added = True
        return added

    def get(self, index: int) -> E:
        """Return the element at ``index``."""
        return self._node_at(index).element

    def set(self, index: int, value: E) -> E:
        """Replace the element at ``index`` and return the previous one."""
        if value is None:
            raise InvalidArgumentError()
        node = self._node_at(index)
        old = node.element
        node.element = value
        return old

    def remove_first(self) -> E:
        """Remove and return the head element."""
        if self._head is None:
            raise OutOfRangeError(0, 0)
        return self._unlink(self._head)

    def remove_last(self) -> E:
        """Remove and return the tail element."""
        if self._tail is None:
            raise OutOfRangeError(0, 0)
        return self._unlink(self._tail)

    def remove_at(self, index: int) -> E:
        """Remove and return the element at ``index``."""
        return self._unlink(self._node_at(index))

    def remove(self, value: E) -> Optional[E]:
        """Remove the first element equal to ``value``, or return None if absent."""
        if value is None:
            raise InvalidArgumentError()
        current = self._head
        while current is not None:
            if value == current.element:
                return self._unlink(current)
            current = current.next
        return None

    def index_of(self, value: E) -> int:
        """Return the position of the first element equal to ``value``, or -1."""
        if value is None:
            raise InvalidArgumentError()
        current = self._head
        position = 0
        while current is not None:
            if value == current.element:
                return position
            current = current.next
            position += 1
        return -1

    def contains(self, value: E) -> bool:
        """Return True if an element equal to ``value`` is stored."""
        return self.index_of(value) >= 0

    def to_array(self) -> List[E]:
        """Return a snapshot of the elements from head to tail."""
        return list(self.iterator())

    def iterator(self) -> Iterator[E]:
        """Iterate head to tail."""
        current = self._head
        while current is not None:
            yield current.element
            current = current.next

    def reversed(self) -> Iterator[E]:
        """Iterate tail to head."""
        current = self._tail
        while current is not None:
            yield current.element
            current = current.prev

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[E]:
        return self.iterator()

    def __reversed__(self) -> Iterator[E]:
        return self.reversed()

    def __contains__(self, value: Any) -> bool:
        return value is not None and self.contains(value)

    def __getitem__(self, index: int) -> E:
        return self.get(index)

    def __setitem__(self, index: int, value: E) -> None:
        self.set(index, value)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, LinkedSequence):
            return NotImplemented
        if self._size != other._size:
            return False
        return all(a == b for a, b in zip(self, other))

    def __repr__(self) -> str:
        return f"LinkedSequence({self.to_array()!r})"
