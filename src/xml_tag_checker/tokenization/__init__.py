"""Tag tokenization for line-oriented checking."""

from .scanner import TAG_PATTERN, TagToken, is_declaration_line, scan_tags

__all__ = [
    "TAG_PATTERN",
    "TagToken",
    "is_declaration_line",
    "scan_tags",
]
