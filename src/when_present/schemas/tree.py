"""Conditional tree models."""

from __future__ import annotations

from typing import Iterator

from pydantic import BaseModel, Field


class Block(BaseModel):
    """One branch of a conditional: an #if, #elif or #else arm.

    ``end_line`` is the line of the directive that closes the branch (the next
    arm or the #endif). It is an exclusive bound, so that directive line
    belongs to the next branch or to none. It stays None only while the
    branch is still open during a build.
    """

    begin_line: int = Field(..., ge=1)
    end_line: int | None = None
    condition_text: str
    nested: list["Conditional"] = Field(default_factory=list)

    def contains(self, line: int) -> bool:
        """Whether ``line`` lies in ``[begin_line, end_line)``."""
        return self.end_line is not None and self.begin_line <= line < self.end_line


class Conditional(BaseModel):
    """A whole #if ... #endif group."""

    begin_line: int = Field(..., ge=1)
    end_line: int | None = None
    blocks: list[Block] = Field(default_factory=list)

    def contains(self, line: int) -> bool:
        """Whether ``line`` lies in ``[begin_line, end_line]``."""
        return self.end_line is not None and self.begin_line <= line <= self.end_line

    @property
    def last_block(self) -> Block:
        return self.blocks[-1]


Block.model_rebuild()


class Forest(BaseModel):
    """Top-level conditionals of one source file, in source order."""

    conditionals: list[Conditional] = Field(default_factory=list)
    path: str | None = None

    def iter_conditionals(self) -> Iterator[Conditional]:
        """Yield every conditional, depth first in source order."""
        stack = list(reversed(self.conditionals))
        while stack:
            conditional = stack.pop()
            yield conditional
            for block in reversed(conditional.blocks):
                stack.extend(reversed(block.nested))

