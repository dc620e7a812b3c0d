"""Runtime classpath protocols."""

from collections.abc import Collection, Sequence
from typing import Optional, Protocol

from jvmcomplete.domain.types import ReflectedField, ReflectedMethod

__all__ = ["RuntimeClass", "RuntimeClassSource"]


class RuntimeClass(Protocol):
    """Reflective handle for a loadable class."""

    @property
    def declared_methods(self) -> Sequence[ReflectedMethod]: ...

    @property
    def declared_fields(self) -> Sequence[ReflectedField]: ...


class RuntimeClassSource(Protocol):
    """Protocol for the classes available on the running system's classpath."""

    def all_class_names(self) -> Collection[str]:
        """Return every loadable class name in internal (slash) form.

        The result carries no ordering guarantee.
        """
        ...

    def load_class(self, dotted_name: str) -> Optional[RuntimeClass]:
        """Load a class by its dotted source name.

        Args:
            dotted_name: Fully qualified name such as ``java.lang.String``

        Returns:
            The reflective handle, or None if the class is not loadable
        """
        ...
