"""
Tokenizer for partially typed type descriptors.

A descriptor reference is a run of array markers, an ``L`` and a class
name: ``[[Ljava/lang/Str``. The tokenizer splits what the user typed so
far into that prefix and the name fragment to complete.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

__all__ = ["DescriptorToken", "TokenizerState", "tokenize"]


class TokenizerState(Enum):
    READING_PREFIX = auto()
    READING_FRAGMENT = auto()
    REJECTED = auto()


@dataclass(frozen=True, slots=True)
class DescriptorToken:
    """Structural result of tokenizing a partial descriptor."""

    prefix: str
    fragment: str

    def complete(self, class_name: str) -> str:
        """Wrap a class name back into a finished descriptor."""
        return f"{self.prefix}{class_name};"


def tokenize(raw: str) -> Optional[DescriptorToken]:
    """
    Split a partial descriptor into prefix and name fragment.

    Examples:
        'La/B' -> DescriptorToken('L', 'a/B')
        '[[La/' -> DescriptorToken('[[L', 'a/')
        'a/B' -> None (no reference marker)
        'La/B;' -> None (already closed)

    Args:
        raw: Text typed so far

    Returns:
        The token, or None when there is nothing completable
    """
    text = raw.strip()
    if not text:
        return None

    state = TokenizerState.READING_PREFIX
    prefix: list[str] = []
    fragment: list[str] = []

    for char in text:
        if state is TokenizerState.READING_PREFIX:
            if char == "[":
                prefix.append(char)
                continue
            if char == "L":
                prefix.append(char)
                state = TokenizerState.READING_FRAGMENT
                continue
            state = TokenizerState.READING_FRAGMENT

        if char == ";":
            state = TokenizerState.REJECTED
            break
        fragment.append(char)

    if state is TokenizerState.REJECTED or "L" not in prefix or not fragment:
        return None
    return DescriptorToken("".join(prefix), "".join(fragment))
