"""Barrel re-export of all domain types."""

from warpdir.cli.types import CommandResult, StatusMessage
from warpdir.points.types import BackReference, WarpPoint, WarpTarget

__all__ = [
    "BackReference",
    "CommandResult",
    "StatusMessage",
    "WarpPoint",
    "WarpTarget",
]
