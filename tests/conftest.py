"""Shared fixtures for completion tests."""

import pytest

from jvmcomplete.completion import CompletionEngine
from jvmcomplete.domain.types import (
    MemberDef,
    ReflectedClass,
    ReflectedField,
    ReflectedMethod,
    WorkspaceClass,
)
from jvmcomplete.infrastructure import InMemoryWorkspace, StaticRuntimeSource, WorkspaceHolder
from jvmcomplete.logger import reset_logger


@pytest.fixture(autouse=True)
def _quiet_logger():
    yield
    reset_logger()


@pytest.fixture
def runtime() -> StaticRuntimeSource:
    string_class = ReflectedClass(
        name="java.lang.String",
        declared_methods=(
            ReflectedMethod("length", (), "int"),
            ReflectedMethod("charAt", ("int",), "char"),
            ReflectedMethod("indexOf", ("java.lang.String", "int"), "int"),
            ReflectedMethod("split", ("java.lang.String",), "java.lang.String[]"),
        ),
        declared_fields=(
            ReflectedField("hash", "int"),
            ReflectedField("value", "byte[]"),
        ),
    )
    shadowed = ReflectedClass(
        name="a.B",
        declared_methods=(ReflectedMethod("fromRuntime", (), "void"),),
        declared_fields=(ReflectedField("runtimeField", "long"),),
    )
    return StaticRuntimeSource(
        {"java.lang.String": string_class, "a.B": shadowed},
        extra_names=["java/lang/Object", "java/lang/StringBuilder", "java/util/List"],
    )


@pytest.fixture
def workspace() -> InMemoryWorkspace:
    return InMemoryWorkspace(
        [
            WorkspaceClass(
                name="a/B",
                methods=(
                    MemberDef("zeta", "()V"),
                    MemberDef("alpha", "()V"),
                    MemberDef("<init>", "()V"),
                ),
                fields=(MemberDef("count", "I"), MemberDef("name", "Ljava/lang/String;")),
            ),
            WorkspaceClass(name="a/Bar"),
            WorkspaceClass(name="com/example/Main"),
        ]
    )


@pytest.fixture
def holder(workspace: InMemoryWorkspace) -> WorkspaceHolder:
    return WorkspaceHolder(workspace)


@pytest.fixture
def engine(runtime: StaticRuntimeSource, holder: WorkspaceHolder) -> CompletionEngine:
    return CompletionEngine(runtime, holder)
