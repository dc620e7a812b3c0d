"""Member signature source protocol."""

from collections.abc import Iterator
from typing import Optional, Protocol

from jvmcomplete.domain.types import MemberKind

__all__ = ["MemberSignatureSource"]


class MemberSignatureSource(Protocol):
    """Produces member signatures for an owner class.

    Methods are rendered as ``name + descriptor`` (``length()I``) and
    fields as ``name + " " + descriptor`` (``value [C``) whatever the
    underlying representation is.
    """

    def signatures(self, owner: str, kind: MemberKind) -> Optional[Iterator[str]]:
        """Return a lazy iterator of signatures, or None if the owner is unknown.

        Args:
            owner: Owner class in internal form
            kind: Whether to produce method or field signatures
        """
        ...
