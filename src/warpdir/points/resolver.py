"""Turn a requested warp point into a directory or a history back-reference."""

from __future__ import annotations

from collections.abc import Mapping

from warpdir.points.errors import NoOpWarpWarning, NotFoundError
from warpdir.points.types import BackReference, WarpTarget
from warpdir.points.validator import DOTS_ONLY


class WarpResolver:
    """Read-only lookups against a loaded warp point mapping."""

    def __init__(self, points: Mapping[str, str]) -> None:
        self._points = points

    def resolve(self, point: str) -> WarpTarget | BackReference:
        """Resolve ``point``.

        A run of dots is a back-reference: ``..`` goes back one entry in the
        shell's directory history, ``...`` two, and so on. A single dot would
        go nowhere and raises NoOpWarpWarning.
        """
        if DOTS_ONLY.fullmatch(point):
            steps = len(point) - 1
            if steps < 1:
                raise NoOpWarpWarning()
            return BackReference(steps=steps)

        path = self._points.get(point)
        if path is None:
            raise NotFoundError(point, f"Unknown warp point '{point}'")
        return WarpTarget(path=path)
