"""
Prefix filters shared by every completion kind.
"""

from __future__ import annotations

from collections.abc import Iterable

from .tokenizer import DescriptorToken

__all__ = ["match_descriptors", "match_internal_names", "match_signatures"]


def match_internal_names(candidates: Iterable[str], query: str) -> list[str]:
    """Names extending ``query``; an exact match is not its own completion.

    Candidates come from the sorted index, so order is preserved as-is.
    """
    return [name for name in candidates if name.startswith(query) and name != query]


def match_descriptors(candidates: Iterable[str], token: DescriptorToken) -> list[str]:
    """Names extending the token fragment, re-wrapped as full descriptors."""
    return [token.complete(name) for name in candidates if name.startswith(token.fragment)]


def match_signatures(candidates: Iterable[str], query: str) -> list[str]:
    """Signatures extending ``query``, sorted.

    Member lists come straight from class declarations and carry no order.
    """
    return sorted(signature for signature in candidates if signature.startswith(query))
