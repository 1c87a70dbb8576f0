"""Result objects and diagnostic types for tag checking.

Structural faults in a document are ordinary results, not exceptions: the
matcher records each one as a ``Diagnostic`` and returns them, in their final
reporting order, inside a ``ValidationReport``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

SUCCESS_MESSAGE = "XML document is constructed correctly."


class DiagnosticKind(Enum):
    """Kinds of structural faults reported by the matcher."""

    INTERIOR_MISMATCH = "interior_mismatch"  # left open inside a later closing tag
    STRAY_CLOSING = "stray_closing"          # closing tag with no open counterpart
    UNCLOSED_AT_EOF = "unclosed_at_eof"      # still open at end of input


def format_line_error(line: int, tag: str) -> str:
    """Build the message for a fault found on ``line``.

    Args:
        line: 1-based line number
        tag: Tag name, prefixed with ``/`` for closing tags
    """
    return f"Error at line {line} <{tag}> is not constructed correctly."


def format_eof_error(tag: str) -> str:
    """Build the message for a tag left open at end of input."""
    return f"Error at EOF: <{tag}> is not constructed correctly."


@dataclass(frozen=True)
class Diagnostic:
    """Single structural fault with its position."""

    kind: DiagnosticKind
    tag: str
    message: str
    line: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate diagnostic entry."""
        if not self.message:
            raise ValueError("Diagnostic message cannot be empty")
        if not self.tag:
            raise ValueError("Diagnostic tag cannot be empty")
        if self.line is not None and self.line < 1:
            raise ValueError("Line number must be >= 1")

    @classmethod
    def interior_mismatch(cls, line: int, tag: str) -> "Diagnostic":
        return cls(DiagnosticKind.INTERIOR_MISMATCH, tag, format_line_error(line, tag), line)

    @classmethod
    def stray_closing(cls, line: int, tag: str) -> "Diagnostic":
        return cls(DiagnosticKind.STRAY_CLOSING, tag, format_line_error(line, "/" + tag), line)

    @classmethod
    def unclosed_at_eof(cls, tag: str) -> "Diagnostic":
        return cls(DiagnosticKind.UNCLOSED_AT_EOF, tag, format_eof_error(tag))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "tag": self.tag,
            "line": self.line,
            "message": self.message,
        }

    def __str__(self) -> str:
        return self.message


@dataclass
class ValidationMetrics:
    """Counters collected while checking one document."""

    lines_processed: int = 0
    tags_scanned: int = 0
    tags_skipped: int = 0
    max_depth: int = 0
    processing_time_ms: float = 0.0

    @property
    def lines_per_second(self) -> float:
        """Calculate lines processed per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.lines_processed * 1000.0) / self.processing_time_ms

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lines_processed": self.lines_processed,
            "tags_scanned": self.tags_scanned,
            "tags_skipped": self.tags_skipped,
            "max_depth": self.max_depth,
            "processing_time_ms": self.processing_time_ms,
        }


@dataclass
class ValidationReport:
    """Outcome of checking one document.

    ``diagnostics`` is already in reporting order: interior mismatches and
    unclosed-at-EOF faults in discovery order, followed by stray closing tags
    in discovery order.
    """

    diagnostics: List[Diagnostic] = field(default_factory=list)
    metrics: ValidationMetrics = field(default_factory=ValidationMetrics)
    source: Optional[str] = None
    correlation_id: Optional[str] = None

    @property
    def is_well_formed(self) -> bool:
        return not self.diagnostics

    @property
    def error_count(self) -> int:
        return len(self.diagnostics)

    @property
    def messages(self) -> List[str]:
        """Diagnostic messages in reporting order."""
        return [diagnostic.message for diagnostic in self.diagnostics]

    def get_diagnostics_by_kind(self, kind: DiagnosticKind) -> List[Diagnostic]:
        """Get diagnostics of a specific kind, preserving order."""
        return [diagnostic for diagnostic in self.diagnostics if diagnostic.kind == kind]

    def output_lines(self) -> List[str]:
        """Lines to print: the success message, or every diagnostic message."""
        if self.is_well_formed:
            return [SUCCESS_MESSAGE]
        return self.messages

    def render(self) -> str:
        return "\n".join(self.output_lines())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "well_formed": self.is_well_formed,
            "error_count": self.error_count,
            "diagnostics": [diagnostic.to_dict() for diagnostic in self.diagnostics],
            "metrics": self.metrics.to_dict(),
        }

    def __str__(self) -> str:
        return self.render()
