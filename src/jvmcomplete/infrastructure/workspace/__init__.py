"""Workspace implementations."""

from jvmcomplete.infrastructure.workspace.holder import WorkspaceHolder
from jvmcomplete.infrastructure.workspace.memory import InMemoryWorkspace

__all__ = ["InMemoryWorkspace", "WorkspaceHolder"]
