"""
Completion engine facade used by editor front ends.
"""

from __future__ import annotations

from typing import Optional

from jvmcomplete.core.config import CompletionSettings
from jvmcomplete.domain.protocols import OwnerContext, RuntimeClassSource, Workspace, WorkspaceProvider
from jvmcomplete.infrastructure.runtime import StaticRuntimeSource
from jvmcomplete.infrastructure.workspace import WorkspaceHolder
from jvmcomplete.logger import get_logger, setup_logger

from .class_completion import DescriptorCompletionStrategy, InternalNameCompletionStrategy
from .index import ClassNameIndex
from .member_completion import MemberCompletionStrategy
from .orchestrator import CompletionOrchestrator
from .owner import OwnerResolver
from .signatures import RuntimeSignatureSource, WorkspaceSignatureSource
from .strategy import CompletionKind, CompletionRequest

logger = get_logger("completion.engine")


class CompletionEngine:
    """Completes class names, descriptors, methods and fields.

    Every entry point returns a list in display order; anything that
    cannot be completed (blank input, a closed descriptor, an unknown
    owner) yields an empty list.

    Args:
        runtime: Classes loadable from the running system's classpath
        workspaces: Supplies the active workspace, if any
        index: Class name index to share; built from the sources when omitted
    """

    def __init__(
        self,
        runtime: RuntimeClassSource,
        workspaces: WorkspaceProvider,
        index: Optional[ClassNameIndex] = None,
    ) -> None:
        self.index = index if index is not None else ClassNameIndex(runtime, workspaces)
        self.resolver = OwnerResolver(
            [
                WorkspaceSignatureSource(workspaces),
                RuntimeSignatureSource(runtime),
            ]
        )
        self._orchestrator = CompletionOrchestrator(
            [
                InternalNameCompletionStrategy(self.index),
                DescriptorCompletionStrategy(self.index),
                MemberCompletionStrategy(self.resolver, CompletionKind.METHOD),
                MemberCompletionStrategy(self.resolver, CompletionKind.FIELD),
            ]
        )
        self._holder: Optional[WorkspaceHolder] = None
        if isinstance(workspaces, WorkspaceHolder):
            self._holder = workspaces
            workspaces.add_listener(self._on_workspace_changed)

    @classmethod
    def from_settings(
        cls,
        settings: CompletionSettings,
        workspaces: WorkspaceProvider,
        runtime: Optional[RuntimeClassSource] = None,
    ) -> "CompletionEngine":
        """Build an engine and configure logging from settings.

        Without an explicit runtime source the settings' classlist file is
        used, or an empty source when none is configured.
        """
        setup_logger(log_file=settings.log_file, log_level=settings.log_level)
        if runtime is None:
            if settings.classlist_path is not None:
                runtime = StaticRuntimeSource.from_classlist(settings.classlist_path)
            else:
                logger.warning("No runtime class source configured; only workspace classes will complete")
                runtime = StaticRuntimeSource()
        index = ClassNameIndex(runtime, workspaces, sort_runtime_names=settings.sort_runtime_names)
        return cls(runtime, workspaces, index)

    def close(self) -> None:
        """Stop listening for workspace swaps on a shared holder."""
        if self._holder is not None:
            self._holder.remove_listener(self._on_workspace_changed)
            self._holder = None

    def _on_workspace_changed(self, old: Optional[Workspace], new: Optional[Workspace]) -> None:
        self.index.invalidate(old)

    def complete(self, request: CompletionRequest) -> list[str]:
        return self._orchestrator.get_completions(request)

    def complete_internal_name(self, partial: str) -> list[str]:
        return self.complete(CompletionRequest(CompletionKind.INTERNAL_NAME, partial))

    def complete_descriptor(self, partial: str) -> list[str]:
        return self.complete(CompletionRequest(CompletionKind.DESCRIPTOR, partial))

    def complete_method(self, owner: Optional[str], partial: str) -> list[str]:
        return self.complete(CompletionRequest(CompletionKind.METHOD, partial, owner))

    def complete_field(self, owner: Optional[str], partial: str) -> list[str]:
        return self.complete(CompletionRequest(CompletionKind.FIELD, partial, owner))

    def complete_method_in(self, context: OwnerContext, partial: str) -> list[str]:
        """Complete a method against the owner already parsed in ``context``."""
        return self.complete_method(context.get_owner_value(), partial)

    def complete_field_in(self, context: OwnerContext, partial: str) -> list[str]:
        """Complete a field against the owner already parsed in ``context``."""
        return self.complete_field(context.get_owner_value(), partial)
