"""Work out which branches must be taken for a line to be compiled."""

from __future__ import annotations

from typing import Iterable, Sequence

from when_present.schemas import Conditional, Forest, LineReport, Requirement, TraceEntry


def trace_line(forest: Forest, line: int) -> list[TraceEntry]:
    """Trace the branch decisions that lead to ``line``.

    Entries are ordered outermost conditional first and, within one
    conditional, in branch order: every branch before the one holding the
    line must be skipped (FALSE), then that branch must be taken (TRUE).
    Later branches are never reported.

    A line sitting on a conditional's #endif lies in no branch, so every
    branch of that conditional is reported FALSE and none TRUE.

    Args:
        forest: A forest produced by ``build_forest``.
        line: 1-based physical line number.

    Returns:
        The trace, empty when the line is outside every conditional.
    """
    return _trace(forest.conditionals, line)


def _trace(conditionals: Sequence[Conditional], line: int) -> list[TraceEntry]:
    entries: list[TraceEntry] = []
    conditional = next((c for c in conditionals if c.contains(line)), None)
    if conditional is None:
        return entries

    for block in conditional.blocks:
        if block.contains(line):
            entries.append(
                TraceEntry(
                    line=block.begin_line,
                    requirement=Requirement.TRUE,
                    condition_text=block.condition_text,
                )
            )
            entries.extend(_trace(block.nested, line))
            break
        entries.append(
            TraceEntry(
                line=block.begin_line,
                requirement=Requirement.FALSE,
                condition_text=block.condition_text,
            )
        )
    return entries


def report_lines(forest: Forest, lines: Iterable[int]) -> list[LineReport]:
    """Trace each requested line, preserving request order."""
    return [LineReport(line=line, entries=trace_line(forest, line)) for line in lines]
