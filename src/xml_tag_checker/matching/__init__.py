"""Tag matching engine and its benchmarks."""

from .matcher import TagMatcher

__all__ = [
    "TagMatcher",
]
