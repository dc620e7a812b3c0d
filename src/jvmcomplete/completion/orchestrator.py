"""
Orchestrator that coordinates completion strategies.
"""

from __future__ import annotations

from collections.abc import Sequence

from jvmcomplete.logger import get_logger

from .strategy import CompletionRequest, CompletionStrategy

logger = get_logger("completion.orchestrator")


class CompletionOrchestrator:
    """Selects the first strategy able to serve the current request."""

    def __init__(self, strategies: Sequence[CompletionStrategy]) -> None:
        self._strategies = list(strategies)

    def get_completions(self, request: CompletionRequest) -> list[str]:
        for strategy in self._strategies:
            try:
                if strategy.can_handle(request):
                    logger.debug("Strategy {} selected for completion", strategy.__class__.__name__)
                    return strategy.get_candidates(request)
            except Exception:
                # Strategy failures surface as no completions
                logger.exception(
                    "Completion strategy {} failed",
                    strategy.__class__.__name__,
                )
                return []
        logger.debug("No completion strategy matched {} request", request.kind.value)
        return []
