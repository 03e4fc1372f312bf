"""Handlers for each wd command."""

from __future__ import annotations

from warpdir.cli.dispatcher import CommandDispatcher, CommandHandler, HandlerContext
from warpdir.cli.formatter import format_points, usage_lines
from warpdir.cli.types import CommandResult, StatusMessage
from warpdir.points.resolver import WarpResolver
from warpdir.points.store import abbreviate_home
from warpdir.points.validator import validate_point_name


class AddHandler(CommandHandler):
    overwrite = False

    @property
    def aliases(self) -> tuple[str, ...]:
        return ("add", "-a", "--add")

    def validate(self, argument: str) -> str:
        validate_point_name(argument)
        return argument

    def execute(self, payload: str, context: HandlerContext) -> CommandResult:
        context.store.add(payload, context.working_directory(), overwrite=self.overwrite)
        return CommandResult.success("Warp point added")


class ForceAddHandler(AddHandler):
    overwrite = True

    @property
    def aliases(self) -> tuple[str, ...]:
        return ("add!", "-a!", "--add!")


class RemoveHandler(CommandHandler):
    @property
    def aliases(self) -> tuple[str, ...]:
        return ("rm", "-r", "--rm", "--remove")

    def execute(self, payload: str, context: HandlerContext) -> CommandResult:
        context.store.remove(payload)
        return CommandResult.success("Warp point removed")


class ListHandler(CommandHandler):
    @property
    def aliases(self) -> tuple[str, ...]:
        return ("ls", "-l", "--ls", "--list")

    def execute(self, payload: str, context: HandlerContext) -> CommandResult:
        return CommandResult(
            messages=[StatusMessage(level="info", text="All warp points:")],
            lines=format_points(context.store.list_points()),
        )


class ShowHandler(CommandHandler):
    @property
    def aliases(self) -> tuple[str, ...]:
        return ("show", "-s", "--show")

    def execute(self, payload: str, context: HandlerContext) -> CommandResult:
        cwd = context.working_directory()
        here = [(p.name, abbreviate_home(p.path)) for p in context.store.entries() if p.path == cwd]
        return CommandResult(
            messages=[StatusMessage(level="info", text="Warp points to current directory:")],
            lines=format_points(here),
        )


class HelpHandler(CommandHandler):
    @property
    def aliases(self) -> tuple[str, ...]:
        return ("help", "-h", "--help")

    def execute(self, payload: str, context: HandlerContext) -> CommandResult:
        return CommandResult(lines=usage_lines())


class WarpHandler(CommandHandler):
    """Fallback for bare words: resolve the word as a warp point."""

    @property
    def aliases(self) -> tuple[str, ...]:
        return ()

    def execute(self, payload: str, context: HandlerContext) -> CommandResult:
        target = WarpResolver(context.store.points).resolve(payload)
        return CommandResult(target=target)


def build_dispatcher() -> CommandDispatcher:
    handlers: list[CommandHandler] = [
        AddHandler(),
        ForceAddHandler(),
        RemoveHandler(),
        ListHandler(),
        ShowHandler(),
        HelpHandler(),
    ]
    return CommandDispatcher(handlers, fallback=WarpHandler())
