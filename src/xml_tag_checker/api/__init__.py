"""Public checking API.

Level 1 entry points - check_string(), check_lines(), check_file() - wrap a
configured TagMatcher and return a ValidationReport.
"""

from .checker import (
    check_file,
    check_lines,
    check_numbered_lines,
    check_string,
    iter_numbered_lines,
)

__all__ = [
    "check_file",
    "check_lines",
    "check_numbered_lines",
    "check_string",
    "iter_numbered_lines",
]
