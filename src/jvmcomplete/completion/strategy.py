"""
Strategy interfaces for symbol completion.

Each completion kind is served by its own strategy so the engine can be
decomposed into focused, testable components.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol


class CompletionKind(str, Enum):
    """What the token under the cursor names."""

    INTERNAL_NAME = "internal_name"
    DESCRIPTOR = "descriptor"
    METHOD = "method"
    FIELD = "field"


@dataclass(slots=True)
class CompletionRequest:
    """A single completion request from the editor."""

    kind: CompletionKind
    text: str
    owner: Optional[str] = None

    @property
    def is_blank(self) -> bool:
        """True when nothing but whitespace has been typed."""
        return not self.text.strip()


class CompletionStrategy(Protocol):
    """Contract implemented by all completion strategies."""

    def can_handle(self, request: CompletionRequest) -> bool:
        """Return ``True`` when this strategy should produce candidates."""

        ...

    def get_candidates(self, request: CompletionRequest) -> list[str]:
        """Return completions for the request in display order."""

        ...
