"""
Merged, cached index of completable class names.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from jvmcomplete.core.cache import SnapshotCache
from jvmcomplete.domain.protocols import RuntimeClassSource, Workspace, WorkspaceProvider
from jvmcomplete.logger import get_logger

logger = get_logger("completion.index")


class ClassNameIndex:
    """Sorted union of runtime and workspace class names.

    The merged tuple is cached against the identity of the workspace it
    was built from and rebuilt the first time it is read after the
    active workspace changes. ``invalidate`` lets workspace-swap
    notifications drop it eagerly.
    """

    def __init__(
        self,
        runtime: RuntimeClassSource,
        workspaces: WorkspaceProvider,
        cache: Optional[SnapshotCache[Optional[Workspace], tuple[str, ...]]] = None,
        sort_runtime_names: bool = True,
    ) -> None:
        self._runtime = runtime
        self._workspaces = workspaces
        self._cache = cache if cache is not None else SnapshotCache()
        self._sort_runtime_names = sort_runtime_names

    def names(self) -> Sequence[str]:
        """Return every completable class name in alphabetical order."""
        workspace = self._workspaces.current_workspace()
        return self._cache.get_or_rebuild(workspace, lambda: self._build(workspace))

    def invalidate(self, workspace: Optional[Workspace] = None) -> None:
        """Drop the cached names (only those built for ``workspace`` if given)."""
        logger.debug("Class name index invalidated")
        self._cache.clear(workspace)

    def _build(self, workspace: Optional[Workspace]) -> tuple[str, ...]:
        runtime_names = self._runtime.all_class_names()
        if workspace is None:
            if self._sort_runtime_names:
                names = tuple(sorted(set(runtime_names)))
            else:
                names = tuple(runtime_names)
            logger.debug("Built runtime-only class name index ({} names)", len(names))
            return names

        workspace_names = workspace.class_names()
        # dict.fromkeys keeps the first occurrence of each name
        merged = dict.fromkeys(workspace_names)
        merged.update(dict.fromkeys(runtime_names))
        names = tuple(sorted(merged))
        logger.debug(
            "Built merged class name index ({} workspace + {} runtime -> {} names)",
            len(workspace_names),
            len(runtime_names),
            len(names),
        )
        return names
