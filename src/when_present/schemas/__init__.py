"""Shared schemas for when-present."""

from when_present.schemas.trace import LineReport, Requirement, TraceEntry
from when_present.schemas.tree import Block, Conditional, Forest

__all__ = ["Block", "Conditional", "Forest", "LineReport", "Requirement", "TraceEntry"]
