"""Linear containers used by the tag matcher.

This module provides a growable array sequence, a doubly-linked sequence,
and the stack and queue built on top of them, together with the errors they
raise.
"""

from .exceptions import (
    ContainerError,
    EmptyContainerError,
    EmptyQueueError,
    EmptyStackError,
    InvalidArgumentError,
    OutOfRangeError,
)
from .linked import LinkedSequence
from .queue import Queue
from .sequence import ArraySequence
from .stack import Stack

__all__ = [
    "ArraySequence",
    "LinkedSequence",
    "Stack",
    "Queue",
    "ContainerError",
    "EmptyContainerError",
    "EmptyQueueError",
    "EmptyStackError",
    "InvalidArgumentError",
    "OutOfRangeError",
]
