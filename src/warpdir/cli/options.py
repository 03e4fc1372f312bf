"""Global option parsing.

``-c/--config``, ``-q/--quiet`` and ``-v/--version`` are accepted anywhere on
the command line and removed before the command itself is looked at.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path


class OptionsError(Exception):
    """The global options could not be parsed."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise OptionsError(message)


@dataclass
class Invocation:
    config: Path | None = None
    quiet: bool = False
    version: bool = False
    args: list[str] = field(default_factory=list)

    @property
    def command(self) -> str | None:
        return self.args[0] if self.args else None

    @property
    def argument(self) -> str:
        """The command's operand; empty when none was given."""
        return self.args[1] if len(self.args) > 1 else ""


def _build_parser() -> _Parser:
    parser = _Parser(prog="wd", add_help=False, allow_abbrev=False)
    parser.add_argument("-c", "--config", type=str, default=None)
    parser.add_argument("-q", "--quiet", action="store_true")
    parser.add_argument("-v", "--version", action="store_true")
    return parser


def parse_invocation(argv: list[str]) -> Invocation:
    """Split ``argv`` into global options and the remaining command words.

    Raises OptionsError when a global option is malformed, e.g. ``-c``
    without a path.
    """
    namespace, rest = _build_parser().parse_known_args(argv)
    config = Path(namespace.config).expanduser() if namespace.config else None
    return Invocation(config=config, quiet=namespace.quiet, version=namespace.version, args=rest)
