"""Warp point persistence in a flat ``name:path`` text file."""

from __future__ import annotations

import contextlib
import os
from pathlib import Path
from typing import TYPE_CHECKING

from warpdir.infrastructure.config import LOCK_ENABLED, HOME_DIR, lock_path_for, tmp_path_for
from warpdir.infrastructure.logger import logger
from warpdir.points.codec import decode_line, decode_name, encode_line
from warpdir.points.errors import AlreadyExistsError, MalformedLineError, NotFoundError, StoreIOError
from warpdir.points.lock import acquire_lock
from warpdir.points.types import WarpPoint

if TYPE_CHECKING:
    from collections.abc import Iterator


def abbreviate_home(path: str, home: Path | str | None = None) -> str:
    """Replace a leading home directory with ``~`` for display."""
    home_str = str(home if home is not None else HOME_DIR).rstrip("/")
    if not home_str:
        return path
    if path == home_str:
        return "~"
    if path.startswith(home_str + "/"):
        return "~" + path[len(home_str) :]
    return path


class WarpStore:
    """Owns the backing file for the duration of one invocation.

    The mapping is loaded from disk once and refreshed after each write; the
    file stays the single source of truth. Separate processes writing at the
    same time can lose an update (last rename wins) unless the advisory lock
    is enabled.
    """

    def __init__(self, path: Path, *, use_lock: bool = LOCK_ENABLED) -> None:
        self._path = path
        self._use_lock = use_lock
        self._points: dict[str, str] | None = None

    @property
    def path(self) -> Path:
        return self._path

    @property
    def points(self) -> dict[str, str]:
        """The loaded mapping, loading it on first access."""
        if self._points is None:
            self.load()
        assert self._points is not None
        return self._points

    def ensure_exists(self) -> None:
        """Create an empty backing file if there is none."""
        if self._path.exists():
            return
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.touch()
        except OSError as err:
            raise StoreIOError(
                f"Could not create '{self._path}': {err.strerror or err}", {"path": str(self._path)}
            ) from err
        logger.debug("Created warp file", path=str(self._path))

    def load(self) -> dict[str, str]:
        """Read the backing file into a fresh name -> path mapping."""
        self.ensure_exists()

        points: dict[str, str] = {}
        skipped = 0
        for line in self._read_lines():
            if not line.strip():
                continue
            try:
                point = decode_line(line)
            except MalformedLineError as err:
                skipped += 1
                logger.debug("Skipping malformed warp line", path=str(self._path), reason=err.reason)
                continue
            points[point.name] = point.path

        self._points = points
        logger.debug("Loaded warp points", path=str(self._path), count=len(points), skipped=skipped)
        return points

    def entries(self) -> list[WarpPoint]:
        return [WarpPoint(name=name, path=path) for name, path in self.points.items()]

    def list_points(self, home: Path | str | None = None) -> list[tuple[str, str]]:
        """Entries in file order with the home directory shown as ``~``."""
        return [(name, abbreviate_home(path, home)) for name, path in self.points.items()]

    def writable(self) -> bool:
        if self._path.exists():
            return os.access(self._path, os.W_OK)
        return os.access(self._path.parent, os.W_OK)

    def add(self, name: str, path: str, overwrite: bool = False) -> WarpPoint:
        """Store ``name -> path`` at the end of the file.

        An existing entry for ``name`` is replaced when ``overwrite`` is set,
        otherwise AlreadyExistsError is raised and nothing is written.
        """
        if name in self.points and not overwrite:
            raise AlreadyExistsError(name)

        with self._locked():
            lines = [line for line in self._read_lines() if line.strip() and decode_name(line) != name]
            lines.append(encode_line(name, path))
            self._rewrite(lines)

        self.load()
        logger.debug("Added warp point", point=name, path=path, overwrite=overwrite)
        return WarpPoint(name=name, path=path)

    def remove(self, name: str) -> WarpPoint:
        """Drop every line for ``name``. Raises NotFoundError if it is not stored."""
        if name not in self.points:
            raise NotFoundError(name)
        removed = WarpPoint(name=name, path=self.points[name])

        with self._locked():
            lines = [line for line in self._read_lines() if line.strip() and decode_name(line) != name]
            self._rewrite(lines)

        self.load()
        logger.debug("Removed warp point", point=name)
        return removed

    def _read_lines(self) -> list[str]:
        try:
            content = self._path.read_text(encoding="utf-8")
        except OSError as err:
            raise StoreIOError(
                f"Could not read '{self._path}': {err.strerror or err}", {"path": str(self._path)}
            ) from err
        return content.splitlines()

    def _rewrite(self, lines: list[str]) -> None:
        """Replace the file contents via a temp file and a single rename."""
        content = "".join(f"{line}\n" for line in lines)

        # Write to temp file then atomic rename to prevent corruption on crash
        tmp_path = tmp_path_for(self._path)
        try:
            tmp_path.write_text(content, encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as err:
            with contextlib.suppress(OSError):
                tmp_path.unlink()
            logger.debug("Warp file rewrite failed", path=str(self._path), error=str(err))
            raise StoreIOError(
                f"Could not update '{self._path}': {err.strerror or err}", {"path": str(self._path)}
            ) from err

    @contextlib.contextmanager
    def _locked(self) -> Iterator[None]:
        if not self._use_lock:
            yield
            return
        release = acquire_lock(lock_path_for(self._path))
        try:
            yield
        finally:
            release()
