"""
Class name completion strategies: bare internal names and descriptors.
"""

from __future__ import annotations

from jvmcomplete.logger import get_logger

from .index import ClassNameIndex
from .matcher import match_descriptors, match_internal_names
from .strategy import CompletionKind, CompletionRequest, CompletionStrategy
from .tokenizer import tokenize

logger = get_logger("completion.class")


class InternalNameCompletionStrategy(CompletionStrategy):
    """Completes ``java/lang/Str`` style internal names."""

    def __init__(self, index: ClassNameIndex) -> None:
        self._index = index

    def can_handle(self, request: CompletionRequest) -> bool:
        return request.kind is CompletionKind.INTERNAL_NAME and not request.is_blank

    def get_candidates(self, request: CompletionRequest) -> list[str]:
        query = request.text.strip()
        matches = match_internal_names(self._index.names(), query)
        logger.debug("Internal name {!r} matched {} classes", query, len(matches))
        return matches


class DescriptorCompletionStrategy(CompletionStrategy):
    """Completes ``Ljava/lang/Str`` and ``[[Ljava/`` style descriptors."""

    def __init__(self, index: ClassNameIndex) -> None:
        self._index = index

    def can_handle(self, request: CompletionRequest) -> bool:
        return request.kind is CompletionKind.DESCRIPTOR and not request.is_blank

    def get_candidates(self, request: CompletionRequest) -> list[str]:
        token = tokenize(request.text)
        if token is None:
            logger.debug("Descriptor {!r} has no completable reference", request.text)
            return []
        matches = match_descriptors(self._index.names(), token)
        logger.debug("Descriptor fragment {!r} matched {} classes", token.fragment, len(matches))
        return matches
