"""In-memory workspace implementation."""

from collections.abc import Iterable
from typing import Optional

from jvmcomplete.domain.protocols import Workspace
from jvmcomplete.domain.types import WorkspaceClass


class InMemoryWorkspace(Workspace):
    """Workspace holding already-parsed classes in a dictionary.

    Example:
        >>> ws = InMemoryWorkspace([WorkspaceClass("a/B")])
        >>> sorted(ws.class_names())
        ['a/B']
        >>> ws.get_class("a/C") is None
        True
    """

    def __init__(self, classes: Iterable[WorkspaceClass] = ()) -> None:
        self._classes: dict[str, WorkspaceClass] = {}
        for cls in classes:
            self.add_class(cls)

    def add_class(self, cls: WorkspaceClass) -> None:
        """Add or replace a class, keyed by its internal name."""
        self._classes[cls.name] = cls

    def remove_class(self, internal_name: str) -> None:
        self._classes.pop(internal_name, None)

    def class_names(self) -> frozenset[str]:
        return frozenset(self._classes)

    def get_class(self, internal_name: str) -> Optional[WorkspaceClass]:
        return self._classes.get(internal_name)

    def __len__(self) -> int:
        return len(self._classes)

    def __contains__(self, internal_name: object) -> bool:
        return internal_name in self._classes
