"""Runtime class source implementations."""

from jvmcomplete.infrastructure.runtime.static import StaticRuntimeSource, read_classlist

__all__ = ["StaticRuntimeSource", "read_classlist"]
