"""Command result types."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from warpdir.points.types import BackReference, WarpTarget

MessageLevel = Literal["success", "info", "warning", "error"]


class StatusMessage(BaseModel):
    level: MessageLevel
    text: str


class CommandResult(BaseModel):
    """Outcome of one invocation: status lines, body lines, and an optional warp target."""

    exit_code: int = 0
    preamble: list[str] = Field(default_factory=list)
    messages: list[StatusMessage] = Field(default_factory=list)
    lines: list[str] = Field(default_factory=list)
    target: WarpTarget | BackReference | None = None

    @classmethod
    def success(cls, text: str) -> CommandResult:
        return cls(messages=[StatusMessage(level="success", text=text)])

    @classmethod
    def failure(cls, text: str, level: MessageLevel = "error") -> CommandResult:
        return cls(exit_code=1, messages=[StatusMessage(level=level, text=text)])

    @property
    def ok(self) -> bool:
        return self.exit_code == 0
