"""In-memory implementations of the collaborator protocols."""

from jvmcomplete.infrastructure.runtime.static import StaticRuntimeSource, read_classlist
from jvmcomplete.infrastructure.workspace.holder import WorkspaceHolder
from jvmcomplete.infrastructure.workspace.memory import InMemoryWorkspace

__all__ = [
    "InMemoryWorkspace",
    "StaticRuntimeSource",
    "WorkspaceHolder",
    "read_classlist",
]
