"""Per-output-path mutual exclusion for compilations."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path


class PathLocks:
    """Registry of locks keyed by resolved output path.

    Compilations targeting different paths proceed in parallel; two
    compilations of the same path are serialized.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[Path, threading.Lock] = {}

    def lock_for(self, path: Path) -> threading.Lock:
        key = path.resolve()
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._locks[key] = lock
            return lock

    @contextmanager
    def hold(self, path: Path) -> Iterator[None]:
        """Hold the lock for ``path`` for the duration of the block."""
        with self.lock_for(path):
            yield


# Shared by all builders in the process
path_locks = PathLocks()
