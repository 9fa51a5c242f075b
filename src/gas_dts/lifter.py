"""Advanced-parameter lifting.

Some methods take an ``Object`` argument whose real shape is documented in a
separate "advanced parameters" table. The lifter turns that table into a
named options interface and points the parameter at it.
"""

from __future__ import annotations

from .environment import Environment
from .heuristics import is_advanced_param, is_array_name, is_enum_description
from .model import OptionsType, PropertyDeclaration
from .rows import ValueRow
from .typenorm import capitalize, is_array_shaped, normalize_type, unbox
from .typeref import Array, EnumValueOf, Named, TypeRef

OPTIONS_SUFFIX = "Options"


def options_name(method_name: str) -> str:
    return capitalize(method_name) + OPTIONS_SUFFIX


def should_lift(param: ValueRow) -> bool:
    return is_advanced_param(param.type, param.description)


def advanced_property(row: ValueRow, parent_type: str) -> PropertyDeclaration:
    """Build one options property from an advanced parameter row.

    - ``name[]`` → property ``name``; the marker only affects the identifier
    - enum-like description → ``typeof Type``
    - array-shaped parent parameter → every property wrapped in an array
    """
    name = unbox(row.name) if is_array_name(row.name) else row.name

    if is_enum_description(row.description):
        ref: TypeRef = EnumValueOf(unbox(row.type).strip())
    else:
        ref = normalize_type(row.type)

    if is_array_shaped(parent_type):
        ref = Array(ref)

    return PropertyDeclaration(name=name, type=ref, description=row.description)


def build_options_type(method_name: str, parent_type: str, rows: list[ValueRow]) -> OptionsType:
    """An empty *rows* list still yields a (propertyless) options type."""
    return OptionsType(
        name=options_name(method_name),
        properties=[advanced_property(row, parent_type) for row in rows],
    )


def lift(
    method_name: str,
    param: ValueRow,
    rows: list[ValueRow],
    env: Environment,
    owner: str,
) -> Named:
    """Register the options type for *param* and return a reference to it."""
    options = build_options_type(method_name, param.type, rows)
    env.register_options(owner, options)
    return Named(options.name)
