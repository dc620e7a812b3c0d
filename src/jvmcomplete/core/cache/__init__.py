"""Caching implementations for jvmcomplete."""

from jvmcomplete.core.cache.snapshot import SnapshotCache

__all__ = ["SnapshotCache"]
