"""Format reachability traces and conditional trees for display."""

from __future__ import annotations

from typing import Iterable

from pydantic import TypeAdapter

from when_present.schemas import Conditional, Forest, LineReport, Requirement, TraceEntry

_REPORTS_ADAPTER = TypeAdapter(list[LineReport])


def format_entry(entry: TraceEntry) -> str:
    """Render one trace entry, aligning TRUE and FALSE entries."""
    if entry.requirement is Requirement.TRUE:
        return f"REQUIRES TRUE ({entry.line:4d}):  {entry.condition_text}"
    return f"REQUIRES FALSE ({entry.line:4d}): {entry.condition_text}"


def format_report(report: LineReport) -> str:
    """Render the header, the entries and a trailing blank line."""
    lines = [f"Requirements for line {report.line} being included in the translation unit:"]
    lines.extend(format_entry(entry) for entry in report.entries)
    lines.append("")
    return "\n".join(lines) + "\n"


def format_reports(reports: Iterable[LineReport], *, output_format: str = "text") -> str:
    """Render all reports as text or as a JSON array."""
    if output_format == "json":
        return _REPORTS_ADAPTER.dump_json(list(reports), indent=2).decode("utf-8") + "\n"
    return "".join(format_report(report) for report in reports)


def format_forest(forest: Forest) -> str:
    """Render an indented outline of every conditional and its branches."""
    body = _render_conditionals(forest.conditionals, indent=1)
    return "Conditionals:\n" + (body + "\n" if body else "") + "\n"


def _render_conditionals(conditionals: list[Conditional], indent: int) -> str:
    lines: list[str] = []
    for conditional in conditionals:
        lines.append(" " * (indent * 4) + f"[{conditional.begin_line}-{conditional.end_line}]")
        for block in conditional.blocks:
            condition = " ".join(block.condition_text.split())
            lines.append(
                " " * ((indent + 1) * 4) + f"{block.begin_line}-{block.end_line}: {condition}"
            )
            if block.nested:
                lines.append(_render_conditionals(block.nested, indent + 2))
    return "\n".join(lines)
