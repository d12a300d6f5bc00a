"""Reachability trace models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Requirement(str, Enum):
    """What a branch's condition must evaluate to for a line to be compiled."""

    TRUE = "true"
    FALSE = "false"


class TraceEntry(BaseModel):
    """One step in the chain of preprocessor decisions.

    Attributes:
        line: Line of the directive that opens the branch.
        requirement: Whether that branch must be taken or skipped.
        condition_text: The directive text, verbatim.
    """

    model_config = ConfigDict(frozen=True)

    line: int
    requirement: Requirement
    condition_text: str


class LineReport(BaseModel):
    """All requirements for a single target line."""

    line: int = Field(..., ge=1)
    entries: list[TraceEntry] = Field(default_factory=list)
