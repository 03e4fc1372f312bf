"""Error kinds raised by the warp point store, validator and resolver."""

from __future__ import annotations

from typing import Any, Literal

Level = Literal["warning", "error"]


class WarpError(Exception):
    """Expected failure that is reported to the user and sets exit code 1."""

    level: Level = "error"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidNameError(WarpError):
    def __init__(self, name: str, reason: str, message: str) -> None:
        super().__init__(message, {"point": name, "reason": reason})
        self.name = name
        self.reason = reason


class AlreadyExistsError(WarpError):
    level: Level = "warning"

    def __init__(self, name: str) -> None:
        super().__init__(f"Warp point '{name}' already exists. Use 'add!' to overwrite.", {"point": name})
        self.name = name


class NotFoundError(WarpError):
    def __init__(self, name: str, message: str | None = None) -> None:
        super().__init__(message or f"Warp point '{name}' was not found", {"point": name})
        self.name = name


class StoreIOError(WarpError):
    """The backing file could not be created, read or rewritten."""


class StoreLockedError(StoreIOError):
    pass


class NoOpWarpWarning(WarpError):
    level: Level = "warning"

    def __init__(self) -> None:
        super().__init__("Warping to current directory?")


class MalformedLineError(ValueError):
    """A backing file line that does not decode to exactly one name and one path."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"{reason}: {line!r}")
        self.line = line
        self.reason = reason


class NoWorkingDirectoryError(WarpError):
    def __init__(self) -> None:
        super().__init__("Current directory no longer exists and $PWD is not set")
