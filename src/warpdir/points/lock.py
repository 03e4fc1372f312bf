"""Advisory file lock held while the backing file is rewritten."""

from __future__ import annotations

import contextlib
import json
import os
import time
from typing import TYPE_CHECKING

from warpdir.infrastructure.logger import logger
from warpdir.points.errors import StoreLockedError

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

STALE_TIMEOUT_S = 5 * 60  # 5 minutes


class LockInfo:
    def __init__(self, pid: int, timestamp: float) -> None:
        self.pid = pid
        self.timestamp = timestamp

    def to_dict(self) -> dict[str, int | float]:
        return {"pid": self.pid, "timestamp": self.timestamp}

    @classmethod
    def from_dict(cls, data: dict[str, int | float]) -> LockInfo:
        return cls(pid=int(data["pid"]), timestamp=float(data["timestamp"]))


def _is_stale(lock: LockInfo) -> bool:
    return time.time() - lock.timestamp > STALE_TIMEOUT_S


def _is_process_alive(pid: int) -> bool:
    try:
        os.kill(pid, 0)
        return True
    except OSError:
        return False


def _create_lock_file(lock_path: Path, lock_info: LockInfo) -> None:
    # Atomic creation -- fails if file already exists
    fd = os.open(str(lock_path), os.O_WRONLY | os.O_CREAT | os.O_EXCL)
    try:
        os.write(fd, json.dumps(lock_info.to_dict()).encode())
    finally:
        os.close(fd)


def _read_lock(lock_path: Path) -> LockInfo:
    return LockInfo.from_dict(json.loads(lock_path.read_text(encoding="utf-8")))


def acquire_lock(lock_path: Path) -> Callable[[], None]:
    """Acquire an exclusive lock on ``lock_path``. Returns a release function."""
    lock_info = LockInfo(pid=os.getpid(), timestamp=time.time())

    try:
        _create_lock_file(lock_path, lock_info)
    except FileExistsError:
        # Lock file exists -- check if it's stale or from a dead process
        try:
            existing = _read_lock(lock_path)
        except (OSError, ValueError, KeyError, TypeError):
            existing = None

        if existing is not None and not _is_stale(existing) and _is_process_alive(existing.pid):
            ts_iso = time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(existing.timestamp))
            raise StoreLockedError(
                f"Another wd is updating warp points (pid {existing.pid}, started {ts_iso}). "
                f"If this is stale, delete {lock_path}",
                {"lock": str(lock_path), "pid": existing.pid},
            ) from None

        logger.debug("Taking over stale lock", lock=str(lock_path))
        with contextlib.suppress(FileNotFoundError):
            lock_path.unlink()

        try:
            _create_lock_file(lock_path, lock_info)
        except FileExistsError as err:
            raise StoreLockedError("Lock contention: another wd acquired the lock. Retry.") from err
        except OSError as err:
            raise StoreLockedError(f"Could not create lock file {lock_path}: {err.strerror or err}") from err
    except OSError as err:
        raise StoreLockedError(f"Could not create lock file {lock_path}: {err.strerror or err}") from err

    return lambda: release_lock(lock_path)


def release_lock(lock_path: Path) -> None:
    """Release the lock if it belongs to the current process."""
    if not lock_path.exists():
        return
    try:
        lock = _read_lock(lock_path)
    except (OSError, ValueError, KeyError, TypeError):
        # Corrupt or missing -- safe to remove
        with contextlib.suppress(FileNotFoundError):
            lock_path.unlink()
        return
    # Only release our own lock
    if lock.pid == os.getpid():
        with contextlib.suppress(FileNotFoundError):
            lock_path.unlink()
