"""Custom exceptions for when-present."""

from __future__ import annotations


class WhenPresentError(Exception):
    """Base exception for when-present operations."""


class UsageError(WhenPresentError):
    """Invalid command-line arguments."""


class SourceReadError(WhenPresentError):
    """The source file could not be opened or read."""

    def __init__(self, path: str, message: str | None = None) -> None:
        self.path = path
        super().__init__(message or f'Failed to open file "{path}"')


class DirectiveError(WhenPresentError):
    """Conditional directives in the source are not properly nested.

    Attributes:
        line: Physical line number at which the problem was detected.
        path: Source file path, when known.
    """

    def __init__(self, message: str, *, line: int, path: str | None = None) -> None:
        self.line = line
        self.path = path
        super().__init__(message)

    def __str__(self) -> str:
        location = f"{self.path}:{self.line}" if self.path else f"line {self.line}"
        return f"{location}: {self.args[0]}"


class UnmatchedElseError(DirectiveError):
    """An '#elif' or '#else' appeared outside of any conditional."""

    def __init__(self, *, line: int, keyword: str = "else", path: str | None = None) -> None:
        self.keyword = keyword
        super().__init__(f"Encountered {keyword} outside of a conditional", line=line, path=path)


class UnmatchedEndifError(DirectiveError):
    """An '#endif' appeared with no open conditional."""

    def __init__(self, *, line: int, path: str | None = None) -> None:
        super().__init__("Encountered '#endif' with no matching conditional", line=line, path=path)


class UnterminatedConditionalError(DirectiveError):
    """End of input was reached while a conditional was still open."""

    def __init__(
        self, *, line: int, open_lines: list[int], path: str | None = None
    ) -> None:
        self.open_lines = list(open_lines)
        super().__init__(
            "Reached end of file with an active conditional block", line=line, path=path
        )
