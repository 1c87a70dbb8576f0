"""Document checking API.

Module-level functions that feed lines from strings, iterables or files into
a ``TagMatcher`` and return its ``ValidationReport``. File errors are not
turned into diagnostics; they propagate to the caller.
"""

import io
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple, Union

from xml_tag_checker.matching import TagMatcher
from xml_tag_checker.shared import CheckerConfig, ValidationReport, get_logger

PathLike = Union[str, Path]


def iter_numbered_lines(
    path: PathLike,
    encoding: str = "utf-8",
    errors: str = "strict"
) -> Iterator[Tuple[int, str]]:
    """Lazily yield ``(line_number, line)`` pairs from a text file.

    Line terminators are stripped; numbering starts at 1. The file is closed
    when the iterator is exhausted or closed.

    Raises:
        OSError: If the file cannot be opened or read
        UnicodeDecodeError: If decoding fails and ``errors`` is ``"strict"``
    """
    with open(path, "r", encoding=encoding, errors=errors, newline=None) as handle:
        for line_number, line in enumerate(handle, start=1):
            yield line_number, line.rstrip("\r\n")


def check_numbered_lines(
    numbered_lines: Iterable[Tuple[int, str]],
    config: Optional[CheckerConfig] = None,
    source: Optional[str] = None
) -> ValidationReport:
    """Check ``(line_number, line)`` pairs supplied by the caller."""
    return TagMatcher(config).check(numbered_lines, source)


def check_lines(
    lines: Iterable[str],
    config: Optional[CheckerConfig] = None,
    source: Optional[str] = None
) -> ValidationReport:
    """Check plain lines, numbered from 1.

    Examples:
        >>> check_lines(["<a>", "<b>text</b>", "</a>"]).render()
        'XML document is constructed correctly.'
        >>> check_lines(["</z>"]).messages
        ['Error at line 1 </z> is not constructed correctly.']
    """
    return TagMatcher(config).check_lines(lines, source)


def check_string(
    text: str,
    config: Optional[CheckerConfig] = None,
    source: Optional[str] = None
) -> ValidationReport:
    """Check a whole document held in memory.

    Lines break on LF, CRLF and CR only, the same as for files.
    """
    lines = (line.rstrip("\r\n") for line in io.StringIO(text, newline=None))
    return check_lines(lines, config, source)


def check_file(path: PathLike, config: Optional[CheckerConfig] = None) -> ValidationReport:
    """Check a file line by line.

    Raises:
        OSError: If the file cannot be opened or read
        UnicodeDecodeError: If the file is not valid in the configured encoding
    """
    config = config or CheckerConfig()
    logger = get_logger(__name__, config.correlation_id, "check_file")
    logger.debug("Checking file", extra={"path": str(path), "encoding": config.encoding})

    try:
        return check_numbered_lines(
            iter_numbered_lines(path, config.encoding, config.decode_errors),
            config,
            source=str(path),
        )
    except (OSError, UnicodeDecodeError):
        logger.debug("Failed to read file", extra={"path": str(path)})
        raise
