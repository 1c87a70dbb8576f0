"""Tag matching engine.

``TagMatcher`` walks a document line by line, keeps the names of open tags on
a ``Stack`` and records faults on two ``Queue`` instances:

* the interior queue collects tags that were left open inside a later closing
  tag, and tags still open at end of input;
* the stray queue collects closing tags that match nothing currently open.

When a closing tag does not match the top of the stack but does match a tag
deeper down, every tag above that match is popped and reported, then the
match itself is popped. A closing tag with no open counterpart leaves the
stack untouched. The final report lists the interior queue before the stray
queue, each in discovery order.
"""

import logging
import time
from typing import Iterable, List, Optional, Tuple

from xml_tag_checker.containers import Queue, Stack
from xml_tag_checker.shared import (
    CheckerConfig,
    Diagnostic,
    ValidationMetrics,
    ValidationReport,
    get_logger,
)
from xml_tag_checker.tokenization import TagToken, is_declaration_line, scan_tags

MS_PER_SECOND = 1000

NumberedLine = Tuple[int, str]


class TagMatcher:
    """Checks tag nesting for one document at a time.

    The matcher can be driven incrementally with ``process_line`` and
    ``finish``, or in one call with ``check`` / ``check_lines``. Each document
    gets a fresh stack and fresh queues; an instance must not be fed from
    more than one thread at a time.
    """

    def __init__(
        self,
        config: Optional[CheckerConfig] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize the matcher.

        Args:
            config: Checker configuration (defaults to ``CheckerConfig()``)
            correlation_id: Optional correlation ID, overriding the config's
        """
        self.config = config or CheckerConfig()
        self.correlation_id = correlation_id or self.config.correlation_id
        self.logger = get_logger(__name__, self.correlation_id, "tag_matcher")
        self.reset()

    def reset(self) -> None:
        """Discard any partial document state and start a new document."""
        self._open_tags: Stack[str] = Stack()
        self._errors: Queue[Diagnostic] = Queue()
        self._extras: Queue[Diagnostic] = Queue()
        self._metrics = ValidationMetrics()
        self._started_at = time.time()

    @property
    def depth(self) -> int:
        """Number of currently open tags."""
        return self._open_tags.size()

    def open_tags(self) -> List[str]:
        """Names of currently open tags, innermost first."""
        return self._open_tags.to_array()

    def process_line(self, line_number: int, line: str) -> None:
        """Scan one line and update the open-tag stack and fault queues.

        Args:
            line_number: 1-based line number used in diagnostics
            line: Line text without its terminator
        """
        if line_number < 1:
            raise ValueError("Line number must be >= 1")

        self._metrics.lines_processed += 1
        skip_line = self.config.skip_declarations and is_declaration_line(line)

        for token in scan_tags(line):
            self._metrics.tags_scanned += 1
            if skip_line or (self.config.skip_self_closing and token.is_self_closing):
                self._metrics.tags_skipped += 1
                continue

            if token.is_closing:
                self._close_tag(line_number, token)
            else:
                self._open_tags.push(token.name)
                if self._open_tags.size() > self._metrics.max_depth:
                    self._metrics.max_depth = self._open_tags.size()

    def _close_tag(self, line_number: int, token: TagToken) -> None:
        name = token.name
        if not self._open_tags.is_empty() and self._open_tags.peek() == name:
            self._open_tags.pop()
            return

        if self._open_tags.search(name) > 0:
            popped = self._open_tags.pop()
            while popped != name:
                self._record(self._errors, Diagnostic.interior_mismatch(line_number, popped))
                popped = self._open_tags.pop()
        else:
            self._record(
                self._extras,
                Diagnostic.stray_closing(line_number, name),
                column=token.column,
            )

    def _record(
        self,
        queue: "Queue[Diagnostic]",
        diagnostic: Diagnostic,
        column: Optional[int] = None
    ) -> None:
        queue.enqueue(diagnostic)
        if self.logger.is_enabled_for(logging.DEBUG):
            self.logger.debug(
                "Structural fault recorded",
                extra={
                    "kind": diagnostic.kind.value,
                    "tag": diagnostic.tag,
                    "line": diagnostic.line,
                    "column": column,
                },
            )

    def finish(self, source: Optional[str] = None) -> ValidationReport:
        """Close out the current document and return its report.

        Every tag still open is reported as unclosed, innermost first. The
        matcher is reset afterwards, ready for the next document.
        """
        while not self._open_tags.is_empty():
            self._record(self._errors, Diagnostic.unclosed_at_eof(self._open_tags.pop()))

        diagnostics = list(self._errors.drain())
        diagnostics.extend(self._extras.drain())

        metrics = self._metrics
        metrics.processing_time_ms = (time.time() - self._started_at) * MS_PER_SECOND
        report = ValidationReport(
            diagnostics=diagnostics,
            metrics=metrics,
            source=source,
            correlation_id=self.correlation_id,
        )

        self.logger.info(
            "Document check completed",
            extra={
                "source": source,
                "well_formed": report.is_well_formed,
                "error_count": report.error_count,
                "lines_processed": metrics.lines_processed,
                "processing_time_ms": metrics.processing_time_ms,
            },
        )

        self.reset()
        return report

    def check(
        self,
        numbered_lines: Iterable[NumberedLine],
        source: Optional[str] = None
    ) -> ValidationReport:
        """Check a whole document given as ``(line_number, line)`` pairs.

        Lines are pulled lazily, so a generator over a file is consumed one
        line at a time.
        """
        self.reset()
        for line_number, line in numbered_lines:
            self.process_line(line_number, line)
        return self.finish(source)

    def check_lines(
        self,
        lines: Iterable[str],
        source: Optional[str] = None
    ) -> ValidationReport:
        """Check a document given as plain lines, numbering them from 1."""
        return self.check(enumerate(lines, start=1), source)
