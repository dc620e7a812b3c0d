"""Holder for the workspace that is active right now."""

import threading
from collections.abc import Callable
from typing import Optional

from jvmcomplete.domain.protocols import Workspace, WorkspaceProvider
from jvmcomplete.logger import get_logger

logger = get_logger("workspace")

WorkspaceListener = Callable[[Optional[Workspace], Optional[Workspace]], None]


class WorkspaceHolder(WorkspaceProvider):
    """Thread-safe "current workspace" slot.

    Listeners are called with ``(old, new)`` after every swap, outside the
    lock, which lets the class name index drop its snapshot eagerly.
    """

    def __init__(self, workspace: Optional[Workspace] = None) -> None:
        self._lock = threading.Lock()
        self._workspace = workspace
        self._listeners: list[WorkspaceListener] = []

    def current_workspace(self) -> Optional[Workspace]:
        with self._lock:
            return self._workspace

    def add_listener(self, listener: WorkspaceListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: WorkspaceListener) -> None:
        """Unregister a listener; unknown listeners are ignored."""
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def open(self, workspace: Optional[Workspace]) -> None:
        """Make ``workspace`` the active one (None closes the current one)."""
        with self._lock:
            old, self._workspace = self._workspace, workspace
            listeners = list(self._listeners)
        if old is workspace:
            return
        logger.debug("Active workspace changed ({} -> {})", type(old).__name__, type(workspace).__name__)
        for listener in listeners:
            listener(old, workspace)

    def close(self) -> None:
        self.open(None)
