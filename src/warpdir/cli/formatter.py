"""User-facing text: usage, point tables, and result rendering."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

from warpdir.infrastructure.config import VERSION

if TYPE_CHECKING:
    from collections.abc import Iterable

    from warpdir.cli.types import CommandResult, StatusMessage

USAGE = """\
Usage: wd [command] <point>

Commands:
\tadd\tAdds the current working directory to your warp points
\tadd!\tOverwrites existing warp point
\trm\tRemoves the given warp point
\tshow\tOutputs warp points to current directory
\tls\tOutputs all stored warp points
\thelp\tShow this extremely helpful text

Options:
\t-c, --config <file>\tUse <file> instead of ~/.warprc
\t-q, --quiet\t\tSuppress status messages
\t-v, --version\t\tPrint version"""

NAME_WIDTH = 20


def usage_lines() -> list[str]:
    return USAGE.splitlines()


def version_line() -> str:
    return f"wd version {VERSION}"


def format_points(points: Iterable[tuple[str, str]]) -> list[str]:
    """Right-align names in a fixed column followed by their paths."""
    return [f"{name:>{NAME_WIDTH}}  ->  {path}" for name, path in points]


def format_message(message: StatusMessage) -> str:
    return f" * {message.text}"


def render_result(result: CommandResult, *, quiet: bool, out: IO[str], err: IO[str]) -> None:
    """Write a result to the terminal.

    ``out`` only ever receives the warp instruction so the shell wrapper can
    capture it; everything meant for a human goes to ``err``.
    """
    for line in result.preamble:
        print(line, file=err)
    if not quiet:
        for message in result.messages:
            print(format_message(message), file=err)
    for line in result.lines:
        print(line, file=err)
    if result.target is not None and result.ok:
        print(result.target.instruction(), file=out)
