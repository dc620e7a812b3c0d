"""Symbol completion for JVM bytecode editing."""

from jvmcomplete.completion import CompletionEngine, CompletionKind, CompletionRequest
from jvmcomplete.core.config import CompletionSettings, load_settings

__all__ = [
    "CompletionEngine",
    "CompletionKind",
    "CompletionRequest",
    "CompletionSettings",
    "load_settings",
]

__version__ = "0.1.0"
