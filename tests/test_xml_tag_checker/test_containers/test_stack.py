"""Tests for the array-backed stack."""

import pytest

from xml_tag_checker.containers import (
    EmptyContainerError,
    EmptyStackError,
    InvalidArgumentError,
    Stack,
)


def _stack(*values):
    stack = Stack()
    for value in values:
        stack.push(value)
    return stack


class TestStackOrder:
    """Test LIFO behaviour."""

    def test_pop_reverses_push_order(self):
        """Test pushes come back in reverse order."""
        stack = _stack(1, 2, 3, 4)
        assert [stack.pop() for _ in range(4)] == [4, 3, 2, 1]
        assert stack.is_empty()

    def test_interleaved_push_pop(self):
        """Test interleaved pushes and pops keep LIFO order."""
        stack = _stack("a", "b")
        assert stack.pop() == "b"
        stack.push("c")
        stack.push("d")
        assert stack.pop() == "d"
        assert stack.pop() == "c"
        assert stack.pop() == "a"

    def test_peek_does_not_remove(self):
        """Test peek returns the top and leaves it in place."""
        stack = _stack("a", "b")
        assert stack.peek() == "b"
        assert stack.size() == 2

    def test_grows_past_initial_capacity(self):
        """Test the stack has no capacity ceiling."""
        stack = _stack(*range(100))
        assert stack.size() == 100
        assert stack.stack_overflow() is False
        assert stack.peek() == 99


class TestStackErrors:
    """Test failure conditions."""

    def test_pop_empty(self):
        """Test pop on an empty stack raises EmptyStackError."""
        with pytest.raises(EmptyStackError):
            Stack().pop()

    def test_peek_empty(self):
        """Test peek on an empty stack raises EmptyStackError."""
        with pytest.raises(EmptyStackError, match="Stack is empty"):
            Stack().peek()

    def test_empty_error_is_lookup_error(self):
        """Test the empty error fits the builtin hierarchy."""
        assert issubclass(EmptyStackError, EmptyContainerError)
        assert issubclass(EmptyStackError, LookupError)

    def test_push_none(self):
        """Test pushing None is rejected."""
        stack = Stack()
        with pytest.raises(InvalidArgumentError, match="Cannot push None"):
            stack.push(None)
        assert stack.is_empty()


class TestStackSearch:
    """Test search and membership."""

    def test_search_distance_from_top(self):
        """Test search returns 1 for the top and counts downwards."""
        stack = _stack("a", "b", "c")
        assert stack.search("c") == 1
        assert stack.search("b") == 2
        assert stack.search("a") == 3

    def test_search_absent(self):
        """Test search returns -1 for absent values and on an empty stack."""
        assert _stack("a").search("z") == -1
        assert Stack().search("z") == -1

    def test_search_duplicates_nearest_top(self):
        """Test search reports the occurrence nearest the top."""
        stack = _stack("x", "y", "x", "y")
        assert stack.search("x") == 2
        assert stack.search("y") == 1

    def test_contains(self):
        """Test contains finds elements at any depth."""
        stack = _stack("a", "b")
        assert stack.contains("a")
        assert "b" in stack
        assert "c" not in stack


class TestStackSnapshots:
    """Test snapshots, iteration and equality."""

    def test_to_array_top_to_bottom(self):
        """Test the snapshot lists the top first."""
        assert _stack(1, 2, 3).to_array() == [3, 2, 1]

    def test_iterator_top_to_bottom(self):
        """Test iteration starts at the top."""
        assert list(_stack(1, 2, 3)) == [3, 2, 1]

    def test_round_trip(self):
        """Test pushing the reversed snapshot rebuilds an equal stack."""
        original = _stack("a", "b", "c")
        rebuilt = Stack()
        for value in reversed(original.to_array()):
            rebuilt.push(value)
        assert rebuilt.equals(original)
        assert rebuilt == original

    def test_equals(self):
        """Test equality needs the same size and order."""
        assert _stack(1, 2).equals(_stack(1, 2))
        assert not _stack(1, 2).equals(_stack(2, 1))
        assert not _stack(1, 2).equals(_stack(1, 2, 3))
        assert not _stack(1).equals(None)

    def test_clear(self):
        """Test clear empties the stack."""
        stack = _stack(1, 2)
        stack.clear()
        assert stack.is_empty()
        assert len(stack) == 0
