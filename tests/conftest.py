"""Shared fixtures for warp point tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from warpdir.points.store import WarpStore

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def warp_file(tmp_path: Path) -> Path:
    """Path of a backing file that does not exist yet."""
    return tmp_path / ".warprc"


@pytest.fixture()
def store(warp_file: Path) -> WarpStore:
    """A loaded store over an empty backing file."""
    warp_store = WarpStore(warp_file)
    warp_store.load()
    return warp_store
