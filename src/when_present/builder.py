"""Build the conditional tree of a source file in one forward pass."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from when_present.directives import Directive, classify_line
from when_present.exceptions import (
    UnmatchedElseError,
    UnmatchedEndifError,
    UnterminatedConditionalError,
)
from when_present.line_source import LogicalLine, open_source
from when_present.schemas import Block, Conditional, Forest

logger = logging.getLogger(__name__)


class ConditionalTreeBuilder:
    """Track open conditionals while directive lines are fed in order.

    The stack holds the conditional open at each nesting depth, innermost
    last. A new #if attaches to the last block of the innermost open
    conditional, i.e. whichever branch is currently open.
    """

    def __init__(self, path: str | None = None) -> None:
        self.path = path
        self._conditionals: list[Conditional] = []
        self._stack: list[Conditional] = []
        self._last_line = 0

    @property
    def depth(self) -> int:
        return len(self._stack)

    def feed(self, line: LogicalLine) -> None:
        """Consume one logical line."""
        self._last_line = line.number + line.physical_lines - 1
        directive = classify_line(line.text)
        if directive is not None:
            self.add_directive(directive, line.number)

    def add_directive(self, directive: Directive, line: int) -> None:
        """Apply a classified directive found at physical line ``line``.

        Raises:
            UnmatchedElseError: For #elif/#else with no open conditional.
            UnmatchedEndifError: For #endif with no open conditional.
        """
        self._last_line = max(self._last_line, line)
        if directive.kind.opens:
            self._open(directive, line)
        elif directive.kind.continues:
            self._continue(directive, line)
        elif directive.kind.closes:
            self._close(line)

    def finish(self) -> Forest:
        """Return the finished forest.

        Raises:
            UnterminatedConditionalError: If any conditional is still open.
        """
        if self._stack:
            raise UnterminatedConditionalError(
                line=self._last_line,
                open_lines=[conditional.begin_line for conditional in self._stack],
                path=self.path,
            )
        return Forest(conditionals=self._conditionals, path=self.path)

    def _open(self, directive: Directive, line: int) -> None:
        conditional = Conditional(
            begin_line=line,
            blocks=[Block(begin_line=line, condition_text=directive.text)],
        )
        if self._stack:
            self._stack[-1].last_block.nested.append(conditional)
        else:
            self._conditionals.append(conditional)
        self._stack.append(conditional)
        logger.debug("Opened conditional at line %d (depth %d)", line, self.depth)

    def _continue(self, directive: Directive, line: int) -> None:
        if not self._stack:
            raise UnmatchedElseError(line=line, keyword=directive.kind.value, path=self.path)
        conditional = self._stack[-1]
        conditional.last_block.end_line = line
        conditional.blocks.append(Block(begin_line=line, condition_text=directive.text))

    def _close(self, line: int) -> None:
        if not self._stack:
            raise UnmatchedEndifError(line=line, path=self.path)
        conditional = self._stack.pop()
        conditional.end_line = line
        conditional.last_block.end_line = line
        logger.debug(
            "Closed conditional %d-%d with %d block(s)",
            conditional.begin_line,
            line,
            len(conditional.blocks),
        )


def build_forest(lines: Iterable[LogicalLine], *, path: str | None = None) -> Forest:
    """Build the conditional forest from logical lines.

    Args:
        lines: Logical lines in file order.
        path: Source path, used only in error messages.

    Returns:
        The top-level conditionals, each holding its nested conditionals.

    Raises:
        DirectiveError: If the directives are not properly nested.
    """
    builder = ConditionalTreeBuilder(path=path)
    for line in lines:
        builder.feed(line)
    return builder.finish()


def build_forest_from_file(path: str | Path) -> Forest:
    """Read ``path`` and build its conditional forest.

    Raises:
        SourceReadError: If the file cannot be read.
        DirectiveError: If the directives are not properly nested.
    """
    with open_source(path) as lines:
        return build_forest(lines, path=str(path))
