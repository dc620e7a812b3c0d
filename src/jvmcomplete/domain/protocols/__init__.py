"""Domain protocols - interfaces for all collaborators.

The completion engine never talks to a concrete workspace, classpath or
parser. These protocols describe the small surface it consumes, which
keeps the engine testable with in-memory stand-ins.
"""

from jvmcomplete.domain.protocols.context import OwnerContext
from jvmcomplete.domain.protocols.runtime import RuntimeClass, RuntimeClassSource
from jvmcomplete.domain.protocols.signatures import MemberSignatureSource
from jvmcomplete.domain.protocols.workspace import Workspace, WorkspaceProvider

__all__ = [
    "OwnerContext",
    "RuntimeClass",
    "RuntimeClassSource",
    "MemberSignatureSource",
    "Workspace",
    "WorkspaceProvider",
]
