"""
Completion components for JVM symbols.

This package provides a strategy-based decomposition of the completion
flows (internal names, descriptors, methods, fields) behind
`CompletionEngine`.
"""

from .strategy import CompletionKind, CompletionRequest, CompletionStrategy
from .orchestrator import CompletionOrchestrator
from .index import ClassNameIndex
from .tokenizer import DescriptorToken, tokenize
from .owner import OwnerResolver
from .signatures import RuntimeSignatureSource, WorkspaceSignatureSource
from .class_completion import DescriptorCompletionStrategy, InternalNameCompletionStrategy
from .member_completion import MemberCompletionStrategy
from .engine import CompletionEngine

__all__ = [
    "CompletionKind",
    "CompletionRequest",
    "CompletionStrategy",
    "CompletionOrchestrator",
    "ClassNameIndex",
    "DescriptorToken",
    "tokenize",
    "OwnerResolver",
    "RuntimeSignatureSource",
    "WorkspaceSignatureSource",
    "DescriptorCompletionStrategy",
    "InternalNameCompletionStrategy",
    "MemberCompletionStrategy",
    "CompletionEngine",
]
