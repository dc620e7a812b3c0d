"""Value types exchanged between the completion engine and its collaborators."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class MemberKind(str, Enum):
    """Kind of class member a signature is built from."""

    METHOD = "method"
    FIELD = "field"


@dataclass(frozen=True, slots=True)
class MemberDef:
    """A member as declared in class bytecode: its name and raw descriptor."""

    name: str
    descriptor: str


@dataclass(frozen=True, slots=True)
class WorkspaceClass:
    """Bytecode-level view of a class resident in a workspace."""

    name: str
    methods: tuple[MemberDef, ...] = ()
    fields: tuple[MemberDef, ...] = ()


@dataclass(frozen=True, slots=True)
class ReflectedMethod:
    """A method as reported by runtime reflection.

    Types use the reflective naming scheme (``int``, ``java.lang.String``,
    ``java.lang.String[]`` or ``[Ljava.lang.String;``).
    """

    name: str
    parameter_types: tuple[str, ...] = ()
    return_type: str = "void"


@dataclass(frozen=True, slots=True)
class ReflectedField:
    """A field as reported by runtime reflection."""

    name: str
    type: str


@dataclass(frozen=True, slots=True)
class ReflectedClass:
    """Reflective handle for a class loadable from the runtime classpath."""

    name: str
    declared_methods: tuple[ReflectedMethod, ...] = field(default_factory=tuple)
    declared_fields: tuple[ReflectedField, ...] = field(default_factory=tuple)
