"""when-present: report the conditional directives a source line depends on."""

from when_present.builder import ConditionalTreeBuilder, build_forest, build_forest_from_file
from when_present.directives import Directive, DirectiveKind, classify_line
from when_present.exceptions import (
    DirectiveError,
    SourceReadError,
    UnmatchedElseError,
    UnmatchedEndifError,
    UnterminatedConditionalError,
    UsageError,
    WhenPresentError,
)
from when_present.line_source import LogicalLine, iter_logical_lines, open_source
from when_present.query import report_lines, trace_line
from when_present.schemas import Block, Conditional, Forest, LineReport, Requirement, TraceEntry

__all__ = [
    "Block",
    "Conditional",
    "ConditionalTreeBuilder",
    "Directive",
    "DirectiveError",
    "DirectiveKind",
    "Forest",
    "LineReport",
    "LogicalLine",
    "Requirement",
    "SourceReadError",
    "TraceEntry",
    "UnmatchedElseError",
    "UnmatchedEndifError",
    "UnterminatedConditionalError",
    "UsageError",
    "WhenPresentError",
    "build_forest",
    "build_forest_from_file",
    "classify_line",
    "iter_logical_lines",
    "open_source",
    "report_lines",
    "trace_line",
]
