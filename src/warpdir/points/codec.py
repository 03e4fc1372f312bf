"""Backing file line encoding.

Each warp point is stored as ``name:path`` with both fields shell-quoted, so
names and paths holding spaces or quote characters round-trip. Names never
contain a colon, so the first colon on a line always separates the fields and
paths are free to contain colons. Lines written with ``printf "%q:%q"``
decode the same way.
"""

from __future__ import annotations

import shlex

from warpdir.points.errors import MalformedLineError
from warpdir.points.types import WarpPoint

SEPARATOR = ":"


def encode_line(name: str, path: str) -> str:
    """Serialize a warp point to a single line, without the trailing newline."""
    return f"{shlex.quote(name)}{SEPARATOR}{shlex.quote(path)}"


def decode_line(line: str) -> WarpPoint:
    """Parse one backing file line. Raises MalformedLineError."""
    raw = line.rstrip("\r\n")
    name_field, sep, path_field = raw.partition(SEPARATOR)
    if not sep:
        raise MalformedLineError(line, "missing separator")

    return WarpPoint(name=_unquote(name_field, line), path=_unquote(path_field, line))


def decode_name(line: str) -> str | None:
    """Return the key of a line, or None when the line cannot be decoded."""
    try:
        return decode_line(line).name
    except MalformedLineError:
        return None


def _unquote(field: str, line: str) -> str:
    try:
        tokens = shlex.split(field)
    except ValueError as err:
        raise MalformedLineError(line, str(err)) from err
    if len(tokens) != 1 or not tokens[0]:
        raise MalformedLineError(line, f"expected one token, got {len(tokens)}")
    return tokens[0]
