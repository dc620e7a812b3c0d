"""Tests for owner resolution and signature sources."""

import pytest

from jvmcomplete.completion.owner import OwnerResolver
from jvmcomplete.completion.signatures import RuntimeSignatureSource, WorkspaceSignatureSource
from jvmcomplete.domain.types import MemberKind
from jvmcomplete.infrastructure import WorkspaceHolder


@pytest.fixture
def resolver(runtime, holder) -> OwnerResolver:
    return OwnerResolver([WorkspaceSignatureSource(holder), RuntimeSignatureSource(runtime)])


def test_workspace_methods_use_raw_descriptors(resolver):
    assert sorted(resolver.resolve("a/B", MemberKind.METHOD)) == ["<init>()V", "alpha()V", "zeta()V"]


def test_workspace_fields_are_space_separated(resolver):
    assert sorted(resolver.resolve("a/B", MemberKind.FIELD)) == ["count I", "name Ljava/lang/String;"]


def test_runtime_methods_are_rendered_as_descriptors(resolver):
    signatures = sorted(resolver.resolve("java/lang/String", MemberKind.METHOD))
    assert signatures == [
        "charAt(I)C",
        "indexOf(Ljava/lang/String;I)I",
        "length()I",
        "split(Ljava/lang/String;)[Ljava/lang/String;",
    ]


def test_runtime_fields_are_rendered_as_descriptors(resolver):
    assert sorted(resolver.resolve(" java/lang/String ", MemberKind.FIELD)) == ["hash I", "value [B"]


def test_workspace_takes_precedence(resolver):
    assert "fromRuntime()V" not in list(resolver.resolve("a/B", MemberKind.METHOD))


def test_runtime_used_when_workspace_closed(runtime):
    holder = WorkspaceHolder()
    resolver = OwnerResolver([WorkspaceSignatureSource(holder), RuntimeSignatureSource(runtime)])

    assert list(resolver.resolve("a/B", MemberKind.METHOD)) == ["fromRuntime()V"]


@pytest.mark.parametrize("owner", [None, "", "   ", "no/such/Owner"])
def test_unresolved_owner(resolver, owner):
    assert resolver.resolve(owner, MemberKind.METHOD) is None
