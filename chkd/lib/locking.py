"""
Lock management for spec documents.

Every mutation holds an exclusive flock on a sibling lock file for its whole
read -> write cycle, so two chkd processes cannot interleave and lose an
update. Editors writing the file directly are not coordinated.
"""

import fcntl
import logging
import os
import time
from contextlib import contextmanager, ExitStack
from pathlib import Path

logger = logging.getLogger(__name__)

POLL_INTERVAL = 0.05


class LockTimeout(Exception):
    """Lock acquisition timed out."""
    pass


def lock_path_for(spec_path: Path) -> Path:
    """docs/SPEC.md -> docs/.SPEC.md.lock"""
    spec_path = Path(spec_path)
    return spec_path.with_name(f".{spec_path.name}.lock")


@contextmanager
def _acquire_lock(lock_file: Path, timeout: float, lock_name: str):
    """
    Internal helper to acquire a file lock.

    Args:
        lock_file: Path to the lock file
        timeout: Seconds to wait for lock
        lock_name: Human-readable name for error messages
    """
    lock_file.parent.mkdir(parents=True, exist_ok=True)

    # Lock files are never deleted: unlinking lets two processes hold
    # "exclusive" locks on different inodes at the same path.
    fd = open(lock_file, 'w')
    start = time.monotonic()

    while True:
        try:
            fcntl.flock(fd, fcntl.LOCK_EX | fcntl.LOCK_NB)
            break
        except BlockingIOError:
            if time.monotonic() - start > timeout:
                fd.close()
                raise LockTimeout(
                    f"Could not acquire {lock_name} within {timeout}s. "
                    "Another chkd command is editing this spec; retry in a moment."
                ) from None
            time.sleep(POLL_INTERVAL)

    try:
        fd.write(f"{os.getpid()}\n")
        fd.flush()
        logger.debug(f"Acquired {lock_name}")
        yield
    finally:
        fcntl.flock(fd, fcntl.LOCK_UN)
        fd.close()


@contextmanager
def spec_lock(spec_path: Path, timeout: float = 10):
    """Acquire the per-document lock, yield, release on exit."""
    spec_path = Path(spec_path)
    with _acquire_lock(lock_path_for(spec_path), timeout, f"lock for {spec_path.name}"):
        yield


@contextmanager
def spec_locks(spec_paths: list, timeout: float = 10):
    """Lock several documents in a stable order so two callers cannot deadlock."""
    ordered = sorted({Path(p).resolve() for p in spec_paths})
    with ExitStack() as stack:
        for path in ordered:
            stack.enter_context(spec_lock(path, timeout))
        yield
