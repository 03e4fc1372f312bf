"""Command dispatcher and base handler."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from warpdir.cli.types import CommandResult
from warpdir.infrastructure.config import current_directory
from warpdir.infrastructure.logger import logger
from warpdir.points.errors import NoWorkingDirectoryError, WarpError

if TYPE_CHECKING:
    from warpdir.points.store import WarpStore


class UnknownOptionError(Exception):
    """A dash-prefixed word that is not a known command flag."""

    def __init__(self, option: str) -> None:
        super().__init__(f"Unknown option '{option}'")
        self.option = option


@dataclass
class HandlerContext:
    store: WarpStore
    cwd: str | None = None

    def working_directory(self) -> str:
        """The directory to record or match against, looked up on first use."""
        if self.cwd is None:
            self.cwd = current_directory()
        if self.cwd is None:
            raise NoWorkingDirectoryError()
        return self.cwd


class CommandHandler(ABC):
    """Base class for command handlers."""

    @property
    @abstractmethod
    def aliases(self) -> tuple[str, ...]: ...

    def validate(self, argument: str) -> Any:
        return argument

    @abstractmethod
    def execute(self, payload: Any, context: HandlerContext) -> CommandResult: ...

    def handle(self, argument: str, context: HandlerContext) -> CommandResult:
        validated = self.validate(argument)
        return self.execute(validated, context)


class CommandDispatcher:
    """Routes a command word to its handler.

    A word that matches no alias and does not start with ``-`` goes to the
    fallback handler (the warp request).
    """

    def __init__(self, handlers: list[CommandHandler], fallback: CommandHandler) -> None:
        self._handlers: dict[str, CommandHandler] = {alias: h for h in handlers for alias in h.aliases}
        self._fallback = fallback

    def handler_for(self, command: str) -> CommandHandler:
        handler = self._handlers.get(command)
        if handler is not None:
            return handler
        if command.startswith("-"):
            raise UnknownOptionError(command)
        return self._fallback

    def dispatch(self, command: str, argument: str, context: HandlerContext) -> CommandResult:
        handler = self._handlers.get(command)
        if handler is None:
            # Bare words are warp requests; the word itself is the point.
            handler, argument = self.handler_for(command), command
        try:
            return handler.handle(argument, context)
        except WarpError as err:
            logger.debug(err.message, command=command, **err.details)
            return CommandResult.failure(err.message, level=err.level)
