"""XML Tag Checker.

Line-oriented structural checking for tag markup: reports every mismatched,
unclosed or stray closing tag with its line number.

Progressive API Disclosure:
- Level 1: Simple functions - check_string(), check_lines(), check_file()
- Level 2: Configured matcher - TagMatcher class with CheckerConfig
- Level 3: Building blocks - ArraySequence, LinkedSequence, Stack, Queue
"""

__version__ = "0.1.0"
__author__ = "XML Tag Checker Team"

# Progressive API disclosure - Level 1: Simple functions
from .api import check_file, check_lines, check_string

# Level 3: Containers the matcher is built on
from .containers import ArraySequence, LinkedSequence, Queue, Stack

# Level 2: Configured matcher
from .matching import TagMatcher

# Configuration and result objects for all API levels
from .shared import (
    SUCCESS_MESSAGE,
    CheckerConfig,
    Diagnostic,
    DiagnosticKind,
    ValidationReport,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple checking functions
    "check_file",
    "check_lines",
    "check_string",

    # Level 2: Matcher and configuration
    "TagMatcher",
    "CheckerConfig",

    # Level 3: Containers
    "ArraySequence",
    "LinkedSequence",
    "Stack",
    "Queue",

    # Result objects
    "SUCCESS_MESSAGE",
    "Diagnostic",
    "DiagnosticKind",
    "ValidationReport",
]
