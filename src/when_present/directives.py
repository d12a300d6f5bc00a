"""Classify logical lines as conditional-compilation directives."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Final

# Only these count as blanks; a form feed or newline is not skipped.
WHITESPACE: Final[str] = " \t\v"

_KEYWORD_CHARS: Final[frozenset[str]] = frozenset(string.ascii_letters)


class DirectiveKind(str, Enum):
    """Directives that affect conditional nesting."""

    IF = "if"
    IFDEF = "ifdef"
    IFNDEF = "ifndef"
    ELIF = "elif"
    ELSE = "else"
    ENDIF = "endif"

    @property
    def opens(self) -> bool:
        return self in (DirectiveKind.IF, DirectiveKind.IFDEF, DirectiveKind.IFNDEF)

    @property
    def continues(self) -> bool:
        return self in (DirectiveKind.ELIF, DirectiveKind.ELSE)

    @property
    def closes(self) -> bool:
        return self is DirectiveKind.ENDIF


_KINDS_BY_KEYWORD: Final[dict[str, DirectiveKind]] = {kind.value: kind for kind in DirectiveKind}


@dataclass(frozen=True)
class Directive:
    """A structural directive found on a logical line.

    Attributes:
        kind: Which directive keyword the line carries.
        text: The full logical line, verbatim.
    """

    kind: DirectiveKind
    text: str


def directive_keyword(text: str) -> str | None:
    """Return the keyword following ``#`` on a line, or None.

    The first non-blank character must be ``#``; blanks may separate it from
    the keyword. The keyword is the run of ASCII letters that follows, so
    ``#if(X)`` yields ``"if"`` and ``#  endif // X`` yields ``"endif"``.
    Returns an empty string for a bare ``#`` followed only by non-letters.
    """
    pos = _skip_blanks(text, 0)
    if pos >= len(text) or text[pos] != "#":
        return None

    pos = _skip_blanks(text, pos + 1)
    if pos >= len(text):
        return None

    end = pos
    while end < len(text) and text[end] in _KEYWORD_CHARS:
        end += 1
    return text[pos:end]


def classify_line(text: str) -> Directive | None:
    """Classify a logical line.

    Args:
        text: The logical line text.

    Returns:
        A Directive for if/ifdef/ifndef/elif/else/endif lines, or None for
        everything else. Directives that do not affect nesting (define,
        include, pragma, ...) and malformed ones are treated as ordinary lines.
    """
    keyword = directive_keyword(text)
    if not keyword:
        return None
    kind = _KINDS_BY_KEYWORD.get(keyword)
    if kind is None:
        return None
    return Directive(kind=kind, text=text)


def _skip_blanks(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in WHITESPACE:
        pos += 1
    return pos
