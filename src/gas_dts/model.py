"""Data model for services, declarations and namespaces."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union

from .typeref import TypeRef, VOID


# ---------------------------------------------------------------------------
# ServiceDescriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ServiceDescriptor:
    name: str
    description: str
    source_path: str


# ---------------------------------------------------------------------------
# DeclarationKind
# ---------------------------------------------------------------------------

class DeclarationKind(Enum):
    Enum = auto()
    Interface = auto()


# ---------------------------------------------------------------------------
# Doc comments
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class DocTag:
    name: str  # "summary"|"example"|"param"|"return"
    text: str = ""
    param_name: str | None = None
    bracketed: bool = False  # optional param → [name]
    type_expr: str | None = None


@dataclass(slots=True)
class DocComment:
    tags: list[DocTag] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Members
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class EnumMember:
    name: str
    description: str = ""
    value: str | int | float | None = None


@dataclass(slots=True)
class PropertyDeclaration:
    name: str
    type: TypeRef
    description: str = ""
    optional: bool = False


@dataclass(slots=True)
class ParameterDeclaration:
    name: str
    type: TypeRef
    optional: bool = False
    default: str | int | float | bool | None = None
    rest: bool = False


@dataclass(slots=True)
class MethodDeclaration:
    name: str
    parameters: list[ParameterDeclaration] = field(default_factory=list)
    return_type: TypeRef = VOID
    description: str = ""
    example_text: str | None = None
    return_description: str | None = None
    doc: DocComment | None = None


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class EnumDeclaration:
    name: str
    description: str = ""
    members: list[EnumMember] = field(default_factory=list)
    kind: DeclarationKind = field(default=DeclarationKind.Enum, init=False)


@dataclass(slots=True)
class InterfaceDeclaration:
    name: str
    description: str = ""
    properties: list[PropertyDeclaration] = field(default_factory=list)
    methods: list[MethodDeclaration] = field(default_factory=list)
    kind: DeclarationKind = field(default=DeclarationKind.Interface, init=False)


MemberDeclaration = Union[EnumDeclaration, InterfaceDeclaration]

# Options types are interfaces synthesized by the lifter
OptionsType = InterfaceDeclaration


# ---------------------------------------------------------------------------
# NamespaceNode
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class NamespaceNode:
    name: str
    description: str | None = None
    members: list[Union[MemberDeclaration, "NamespaceNode"]] = field(default_factory=list)
    ambient: bool = False
