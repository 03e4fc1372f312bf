"""Single-pass invocation lifecycle: options, store, dispatch, render."""

from __future__ import annotations

import sys
from typing import IO

from warpdir.cli.dispatcher import HandlerContext, UnknownOptionError
from warpdir.cli.formatter import render_result, usage_lines, version_line
from warpdir.cli.handlers import build_dispatcher
from warpdir.cli.options import Invocation, OptionsError, parse_invocation
from warpdir.cli.types import CommandResult
from warpdir.infrastructure.config import CONFIG_PATH
from warpdir.infrastructure.logger import logger
from warpdir.points.errors import StoreIOError
from warpdir.points.store import WarpStore


def execute(argv: list[str], cwd: str | None = None) -> tuple[CommandResult, bool]:
    """Run one invocation and return its result plus the quiet flag.

    Nothing is printed here; ``run_invocation`` renders the result.
    """
    try:
        invocation = parse_invocation(argv)
    except OptionsError as err:
        logger.debug("Global option parsing failed", error=str(err))
        return CommandResult(lines=usage_lines()), False

    result = _run_command(invocation, cwd)
    if invocation.version:
        result = result.model_copy(update={"preamble": [version_line(), *result.preamble]})
    return result, invocation.quiet


def _run_command(invocation: Invocation, cwd: str | None) -> CommandResult:
    store = WarpStore(invocation.config or CONFIG_PATH)
    try:
        store.load()
    except StoreIOError as err:
        return CommandResult.failure(err.message)

    if invocation.command is None:
        return CommandResult(lines=usage_lines())

    dispatcher = build_dispatcher()
    try:
        dispatcher.handler_for(invocation.command)
    except UnknownOptionError as err:
        logger.debug("Unknown option", option=err.option)
        return CommandResult(lines=usage_lines())

    # Checked before any command so a read-only file fails with one clear message.
    if not store.writable():
        return CommandResult.failure(f"'{store.path}' is not writeable.")

    context = HandlerContext(store=store, cwd=cwd)
    return dispatcher.dispatch(invocation.command, invocation.argument, context)


def run_invocation(argv: list[str], out: IO[str] | None = None, err: IO[str] | None = None) -> int:
    """Execute ``argv``, print the outcome, and return the exit code."""
    result, quiet = execute(argv)
    render_result(result, quiet=quiet, out=out or sys.stdout, err=err or sys.stderr)
    return result.exit_code
