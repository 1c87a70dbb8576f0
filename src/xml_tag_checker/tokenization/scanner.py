"""Tag scanner for line-oriented markup checking.

A tag is ``<``, an optional ``/`` closing marker, a name of one or more
characters other than whitespace, ``>`` and ``/``, an optional ``/``
self-closing marker, then ``>``. Attributes are not part of the grammar, so
``<a href="x">`` produces no token.
"""

import re
from dataclasses import dataclass
from typing import Iterator

TAG_PATTERN = re.compile(r"<(/?)([^\s>/]+)(/?)>")

DECLARATION_START = "<?"
DECLARATION_END = "?>"


@dataclass(frozen=True)
class TagToken:
    """One tag found on a line."""

    name: str
    is_closing: bool = False
    is_self_closing: bool = False
    column: int = 1

    def __post_init__(self) -> None:
        """Validate token values."""
        if not self.name:
            raise ValueError("Tag name cannot be empty")
        if self.column < 1:
            raise ValueError("Column number must be >= 1")

    @property
    def is_opening(self) -> bool:
        return not self.is_closing and not self.is_self_closing


def scan_tags(line: str) -> Iterator[TagToken]:
    """Yield the tags on ``line`` from left to right, without overlap."""
    for match in TAG_PATTERN.finditer(line):
        yield TagToken(
            name=match.group(2),
            is_closing=match.group(1) == "/",
            is_self_closing=match.group(3) == "/",
            column=match.start() + 1,
        )


def is_declaration_line(line: str) -> bool:
    """Return True if the stripped line is a ``<? ... ?>`` declaration."""
    stripped = line.strip()
    return stripped.startswith(DECLARATION_START) and stripped.endswith(DECLARATION_END)
