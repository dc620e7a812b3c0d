"""
Signature sources for workspace bytecode and runtime reflection.

Both sources render members the same way so that filtering and sorting
never depend on where an owner was found:

* methods: ``name + descriptor``, e.g. ``indexOf(Ljava/lang/String;)I``
* fields: ``name + " " + descriptor``, e.g. ``hash I``
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional

from jvmcomplete.core.descriptors import method_descriptor, to_source_name, type_descriptor
from jvmcomplete.domain.protocols import MemberSignatureSource, RuntimeClass, RuntimeClassSource, WorkspaceProvider
from jvmcomplete.domain.types import MemberDef, MemberKind, WorkspaceClass

__all__ = [
    "RuntimeSignatureSource",
    "WorkspaceSignatureSource",
    "format_field",
    "format_method",
]


def format_method(name: str, descriptor: str) -> str:
    return name + descriptor


def format_field(name: str, descriptor: str) -> str:
    return f"{name} {descriptor}"


def _member_defs(members: Iterable[MemberDef], kind: MemberKind) -> Iterator[str]:
    fmt = format_method if kind is MemberKind.METHOD else format_field
    return (fmt(member.name, member.descriptor) for member in members)


class WorkspaceSignatureSource(MemberSignatureSource):
    """Signatures declared by a class resident in the active workspace."""

    def __init__(self, workspaces: WorkspaceProvider) -> None:
        self._workspaces = workspaces

    def signatures(self, owner: str, kind: MemberKind) -> Optional[Iterator[str]]:
        workspace = self._workspaces.current_workspace()
        if workspace is None:
            return None
        node: Optional[WorkspaceClass] = workspace.get_class(owner)
        if node is None:
            return None
        members = node.methods if kind is MemberKind.METHOD else node.fields
        return _member_defs(members, kind)


class RuntimeSignatureSource(MemberSignatureSource):
    """Signatures reflected from a class loadable on the runtime classpath."""

    def __init__(self, runtime: RuntimeClassSource) -> None:
        self._runtime = runtime

    def signatures(self, owner: str, kind: MemberKind) -> Optional[Iterator[str]]:
        cls: Optional[RuntimeClass] = self._runtime.load_class(to_source_name(owner))
        if cls is None:
            return None
        if kind is MemberKind.METHOD:
            return (
                format_method(method.name, method_descriptor(method.parameter_types, method.return_type))
                for method in cls.declared_methods
            )
        return (format_field(field.name, type_descriptor(field.type)) for field in cls.declared_fields)
