"""Read a source file as logical lines with backslash continuations merged."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from when_present.config import WHEN_PRESENT_ENCODING, WHEN_PRESENT_ENCODING_ERRORS
from when_present.exceptions import SourceReadError

logger = logging.getLogger(__name__)

CONTINUATION = "\\"


@dataclass(frozen=True)
class LogicalLine:
    """One or more physical lines joined by trailing backslashes.

    Attributes:
        number: 1-based physical line number where the logical line begins.
        text: Merged text. Continued lines keep their backslash and are joined
            with a newline, so the text reads exactly as in the file.
        physical_lines: How many physical lines were consumed.
    """

    number: int
    text: str
    physical_lines: int = 1


def iter_logical_lines(physical_lines: Iterable[str]) -> Iterator[LogicalLine]:
    """Merge backslash-continued physical lines into logical lines.

    Line terminators are stripped from each physical line. A line whose last
    character is a backslash absorbs the following physical line; the line
    number of the next logical line advances by the number of physical lines
    consumed, not by one.

    Args:
        physical_lines: Physical lines, with or without trailing newlines.

    Yields:
        LogicalLine records in file order.
    """
    lines = iter(physical_lines)
    number = 1
    for raw in lines:
        text = raw.rstrip("\r\n")
        consumed = 1
        while text.endswith(CONTINUATION):
            following = next(lines, None)
            if following is None:
                break
            text = text + "\n" + following.rstrip("\r\n")
            consumed += 1
        yield LogicalLine(number=number, text=text, physical_lines=consumed)
        number += consumed


@contextmanager
def open_source(path: str | Path) -> Iterator[Iterator[LogicalLine]]:
    """Open ``path`` and yield an iterator over its logical lines.

    Only a line feed ends a physical line; a lone carriage return stays in
    the text.
    The file handle is closed when the ``with`` block exits, including when
    the consumer raises part way through.

    Raises:
        SourceReadError: If the file cannot be opened or decoded.
    """
    try:
        handle = open(
            path,
            encoding=WHEN_PRESENT_ENCODING,
            errors=WHEN_PRESENT_ENCODING_ERRORS,
            newline="\n",
        )
    except (OSError, LookupError) as exc:
        raise SourceReadError(str(path)) from exc

    logger.debug("Reading %s", path)
    with handle:
        try:
            yield iter_logical_lines(handle)
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceReadError(str(path), f'Failed to read file "{path}": {exc}') from exc
