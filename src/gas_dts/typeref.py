"""Type references for the declaration model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Primitive:
    name: str  # "number"|"string"|"boolean"|"object"|"void"|"unknown"|"any"

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Named:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Array:
    element: "TypeRef"

    def __str__(self) -> str:
        inner = str(self.element)
        if isinstance(self.element, (EnumValueOf, StringKeyedMap)):
            return f"({inner})[]"
        return f"{inner}[]"


@dataclass(frozen=True)
class EnumValueOf:
    name: str

    def __str__(self) -> str:
        return f"typeof {self.name}"


@dataclass(frozen=True)
class StringKeyedMap:
    value_type: "TypeRef"

    def __str__(self) -> str:
        return f"{{ [key: string]: {self.value_type} }}"


TypeRef = Union[Primitive, Named, Array, EnumValueOf, StringKeyedMap]

VOID = Primitive("void")
UNKNOWN = Primitive("unknown")
