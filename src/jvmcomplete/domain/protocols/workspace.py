"""Workspace protocols."""

from collections.abc import Collection
from typing import Optional, Protocol

from jvmcomplete.domain.types import WorkspaceClass

__all__ = ["Workspace", "WorkspaceProvider"]


class Workspace(Protocol):
    """Classes currently loaded into an editing session."""

    def class_names(self) -> Collection[str]:
        """Return the internal names of all resident classes."""
        ...

    def get_class(self, internal_name: str) -> Optional[WorkspaceClass]:
        """Return the bytecode view of a resident class, or None."""
        ...


class WorkspaceProvider(Protocol):
    """Supplies the workspace that is active right now, if any."""

    def current_workspace(self) -> Optional[Workspace]: ...
