"""Single-slot cache keyed by object identity.

This module provides the cache behind the class-name index: it holds one
value together with the identity of the object it was built for, and
rebuilds atomically when asked for a different identity.
"""

import threading
from collections.abc import Callable
from typing import Any, Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")

_EMPTY: Any = object()


class SnapshotCache(Generic[K, V]):
    """Thread-safe cache holding a single ``(key, value)`` snapshot.

    Keys are compared by identity, not equality, so two distinct
    workspaces with the same contents still count as different keys.
    ``None`` is a valid key.

    Example:
        >>> cache = SnapshotCache[object, list[str]]()
        >>> owner = object()
        >>> cache.get_or_rebuild(owner, lambda: ["a"])
        ['a']
        >>> cache.get_or_rebuild(owner, lambda: ["b"])
        ['a']
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._key: Any = _EMPTY
        self._value: V | None = None
        self.rebuilds = 0

    def _matches(self, key: K) -> bool:
        return self._key is not _EMPTY and self._key is key

    def get_or_rebuild(self, key: K, builder: Callable[[], V]) -> V:
        """Return the snapshot for ``key``, building it first if needed.

        The builder runs under the cache lock, so concurrent readers either
        see the previous snapshot or wait for the new one to be complete.
        """
        with self._lock:
            if self._matches(key):
                return self._value  # type: ignore[return-value]
            value = builder()
            self._key = key
            self._value = value
            self.rebuilds += 1
            return value

    def clear(self, key: K | None = None) -> None:
        """Drop the snapshot.

        Args:
            key: If provided, only drop the snapshot when it belongs to this key
        """
        with self._lock:
            if key is None or self._matches(key):
                self._key = _EMPTY
                self._value = None
