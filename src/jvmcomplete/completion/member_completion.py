"""
Member completion strategies for methods and fields of an owner class.
"""

from __future__ import annotations

from jvmcomplete.domain.types import MemberKind
from jvmcomplete.logger import get_logger

from .matcher import match_signatures
from .owner import OwnerResolver
from .strategy import CompletionKind, CompletionRequest, CompletionStrategy

logger = get_logger("completion.member")

_MEMBER_KINDS = {
    CompletionKind.METHOD: MemberKind.METHOD,
    CompletionKind.FIELD: MemberKind.FIELD,
}


class MemberCompletionStrategy(CompletionStrategy):
    """Completes ``name(desc)ret`` methods and ``name desc`` fields.

    Only leading whitespace is dropped from the typed text: for fields the
    space between name and type is part of the signature.
    """

    def __init__(self, resolver: OwnerResolver, kind: CompletionKind) -> None:
        if kind not in _MEMBER_KINDS:
            raise ValueError(f"Not a member completion kind: {kind}")
        self._resolver = resolver
        self._kind = kind

    def can_handle(self, request: CompletionRequest) -> bool:
        return request.kind is self._kind and not request.is_blank

    def get_candidates(self, request: CompletionRequest) -> list[str]:
        signatures = self._resolver.resolve(request.owner, _MEMBER_KINDS[self._kind])
        if signatures is None:
            return []
        matches = match_signatures(signatures, request.text.lstrip())
        logger.debug(
            "{} {!r} on {} matched {} members",
            self._kind.value,
            request.text,
            request.owner,
            len(matches),
        )
        return matches
