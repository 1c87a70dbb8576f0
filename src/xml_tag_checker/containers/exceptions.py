"""Exception types raised by the linear containers.

All container failures are local and synchronous: they are raised to the
caller immediately and never retried or swallowed inside the containers.
"""

from typing import Optional


class ContainerError(Exception):
    """Base class for container errors."""


class InvalidArgumentError(ContainerError, ValueError):
    """Raised when ``None`` is passed where an element is required."""

    def __init__(self, message: str = "Containers cannot hold None values") -> None:
        super().__init__(message)


class OutOfRangeError(ContainerError, IndexError):
    """Raised when an index falls outside the valid bounds of a container."""

    def __init__(self, index: int, size: int, message: Optional[str] = None) -> None:
        super().__init__(message or f"Index {index} out of range for size {size}")
        self.index = index
        self.size = size


class EmptyContainerError(ContainerError, LookupError):
    """Raised when an element is requested from an empty container."""


class EmptyStackError(EmptyContainerError):
    """Raised by pop/peek on an empty stack."""

    def __init__(self, message: str = "Stack is empty") -> None:
        super().__init__(message)


class EmptyQueueError(EmptyContainerError):
    """Raised by dequeue/peek on an empty queue."""

    def __init__(self, message: str = "Queue is empty") -> None:
        super().__init__(message)
