"""Warp point name rules."""

from __future__ import annotations

import re

from warpdir.points.errors import InvalidNameError

DOTS_ONLY = re.compile(r"\.+")
_WHITESPACE = re.compile(r"\s")


def validate_point_name(name: str) -> None:
    """Raise InvalidNameError if ``name`` cannot be stored as a warp point.

    Rules are checked in order and the first violation is reported. The colon
    is the field separator of the backing file, so it can never be part of a
    name.
    """
    if DOTS_ONLY.fullmatch(name):
        raise InvalidNameError(name, "dots-only", "Warp point cannot be just dots")
    if _WHITESPACE.search(name):
        raise InvalidNameError(name, "whitespace", "Warp point should not contain whitespace")
    if ":" in name:
        raise InvalidNameError(name, "colon", "Warp point cannot contain colons")
    if name == "":
        raise InvalidNameError(name, "empty", "Warp point cannot be empty")
