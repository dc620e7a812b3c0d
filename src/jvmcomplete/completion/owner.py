"""
Owner resolution for member completion.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Optional

from jvmcomplete.domain.protocols import MemberSignatureSource
from jvmcomplete.domain.types import MemberKind
from jvmcomplete.logger import get_logger

logger = get_logger("completion.owner")


class OwnerResolver:
    """Finds the member signatures of an owner class.

    Sources are consulted in order and the first one that knows the owner
    wins. The workspace source goes first so that classes being edited
    shadow same-named classes on the classpath. Nothing is cached here.
    """

    def __init__(self, sources: Sequence[MemberSignatureSource]) -> None:
        self._sources = list(sources)

    def resolve(self, owner: Optional[str], kind: MemberKind) -> Optional[Iterator[str]]:
        """Return the owner's signatures, or None if no source resolves it."""
        if owner is None:
            return None
        owner = owner.strip()
        if not owner:
            return None
        for source in self._sources:
            signatures = source.signatures(owner, kind)
            if signatures is not None:
                logger.debug("Owner {} resolved by {}", owner, source.__class__.__name__)
                return signatures
        logger.debug("Owner {} is unresolved", owner)
        return None
