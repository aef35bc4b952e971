"""A string map that keeps track of changes through a version number."""

from __future__ import annotations

import threading
from collections.abc import Iterator, Mapping
from contextlib import contextmanager


class VerMap:
    """A thread safe str -> str map whose version grows with every store."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._map: dict[str, str] = {}
        self._version = 0
        self._readers = threading.local()

    @property
    def version(self) -> int:
        """Number of stores done so far."""
        return self._version

    @contextmanager
    def read_locked(self) -> Iterator[VerMap]:
        """Hold the map lock for the duration of the block."""
        with self._lock:
            depth = getattr(self._readers, "depth", 0)
            self._readers.depth = depth + 1
            try:
                yield self
            finally:
                self._readers.depth = depth

    def _require_read_lock(self, name: str) -> None:
        if not getattr(self._readers, "depth", 0):
            raise RuntimeError(f"{name} called outside read_locked context")

    def store(self, m: Mapping[str, str]) -> None:
        """Replace the content with a copy of m."""
        with self._lock:
            self._version += 1
            self._map = dict(m)

    def load(self) -> dict[str, str]:
        """Return a copy of the content."""
        with self._lock:
            return dict(self._map)

    def load_with_rlock(self) -> dict[str, str]:
        """Like load, but must be called inside read_locked."""
        self._require_read_lock("load_with_rlock")
        return dict(self._map)

    def _compare(self, m: Mapping[str, str]) -> tuple[dict[str, str], set[str]]:
        updates = {k: v for k, v in self._map.items() if k not in m or m[k] != v}
        deletes = {k for k in m if k not in self._map}
        return updates, deletes

    def compare(self, m: Mapping[str, str]) -> tuple[dict[str, str], set[str]]:
        """Return the updates and the deleted keys of this map compared to m."""
        with self._lock:
            return self._compare(m)

    def compare_with_rlock(
        self, m: Mapping[str, str]
    ) -> tuple[dict[str, str], set[str]]:
        """Like compare, but must be called inside read_locked."""
        self._require_read_lock("compare_with_rlock")
        return self._compare(m)