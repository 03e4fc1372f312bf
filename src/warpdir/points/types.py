"""Warp point domain types."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class WarpPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    path: str


class WarpTarget(BaseModel):
    """A directory the shell wrapper should change into."""

    model_config = ConfigDict(frozen=True)

    path: str

    def instruction(self) -> str:
        return self.path


class BackReference(BaseModel):
    """Go back ``steps`` entries in the shell's own directory history."""

    model_config = ConfigDict(frozen=True)

    steps: int = Field(ge=1)

    def instruction(self) -> str:
        return f"-{self.steps}"
