"""Parser context protocol."""

from typing import Optional, Protocol

__all__ = ["OwnerContext"]


class OwnerContext(Protocol):
    """Read-only view of an in-progress parse.

    Member completion only needs the owner class the parser has already
    resolved for the current instruction.
    """

    def get_owner_value(self) -> Optional[str]:
        """Return the parsed owner internal name, or None if not parsed yet."""
        ...
