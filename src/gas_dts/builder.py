"""Builder: 2-pass construction of a service's declarations."""

from __future__ import annotations

import logging
from typing import Callable

from bs4 import BeautifulSoup

from .config import Selectors
from .doccomment import split_return, synthesize
from .environment import Environment
from .heuristics import (
    REST_PREFIX,
    classify,
    is_enum_description,
    is_optional_description,
    is_rest_name,
)
from .lifter import lift, should_lift
from .model import (
    DeclarationKind,
    EnumDeclaration,
    EnumMember,
    InterfaceDeclaration,
    MemberDeclaration,
    MethodDeclaration,
    ParameterDeclaration,
    PropertyDeclaration,
)
from .reader import read_member_rows, read_method_blocks, read_property_rows
from .rows import MethodBlock, ValueRow
from .typenorm import is_map_shaped, normalize_type, unbox
from .typeref import EnumValueOf, StringKeyedMap, TypeRef, UNKNOWN, VOID

logger = logging.getLogger(__name__)

Fetch = Callable[[str], "BeautifulSoup | None"]

_DEFAULT = Selectors()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def build_service(
    service_doc: BeautifulSoup,
    fetch: Fetch,
    sel: Selectors = _DEFAULT,
    typed: bool = False,
) -> Environment:
    """Build every declaration of one service page.

    Pass 1 creates a skeleton per class-table row; pass 2 fetches each
    member's detail page and fills the skeleton in.
    """
    env = Environment()
    build_skeletons(service_doc, env, sel)
    populate(env, fetch, sel, typed=typed)
    return env


# ---------------------------------------------------------------------------
# Pass 1: skeletons
# ---------------------------------------------------------------------------

def create_skeleton(name: str, desc: str) -> MemberDeclaration:
    if classify(desc) == DeclarationKind.Enum:
        return EnumDeclaration(name=name, description=desc)
    return InterfaceDeclaration(name=name, description=desc)


def build_skeletons(service_doc: BeautifulSoup, env: Environment, sel: Selectors = _DEFAULT) -> None:
    for row in read_member_rows(service_doc, sel):
        if not row.path:
            logger.warning("Skipping %s: no detail link", row.name)
            continue
        env.register_member(row.path, create_skeleton(row.name, row.description))


# ---------------------------------------------------------------------------
# Pass 2: population
# ---------------------------------------------------------------------------

def populate(env: Environment, fetch: Fetch, sel: Selectors = _DEFAULT, typed: bool = False) -> None:
    # Snapshot: replace_member() reassigns values while we iterate
    for path in list(env.members):
        decl = env.resolve_member(path)
        member_doc = fetch(path)
        if member_doc is None:
            logger.warning("Could not fetch %s; leaving %s empty", path, decl.name)
            continue
        populate_member(path, decl, member_doc, env, sel, typed=typed)


def populate_member(
    path: str,
    decl: MemberDeclaration,
    member_doc: BeautifulSoup,
    env: Environment,
    sel: Selectors = _DEFAULT,
    typed: bool = False,
) -> MemberDeclaration:
    """Replace the declaration at *path* with one built from *member_doc*."""
    env.clear_options(path)
    if decl.kind == DeclarationKind.Enum:
        updated: MemberDeclaration = EnumDeclaration(
            name=decl.name,
            description=decl.description,
            members=[build_enum_member(row) for row in read_property_rows(member_doc, sel)],
        )
    else:
        updated = InterfaceDeclaration(
            name=decl.name,
            description=decl.description,
            properties=[build_property(row) for row in read_property_rows(member_doc, sel)],
            methods=[
                build_method(block, env, path, typed=typed)
                for block in read_method_blocks(member_doc, sel)
            ],
        )
    env.replace_member(path, updated)
    return updated


# ---------------------------------------------------------------------------
# Members
# ---------------------------------------------------------------------------

def build_enum_member(row: ValueRow) -> EnumMember:
    return EnumMember(name=row.name, description=row.description)


def build_property(row: ValueRow) -> PropertyDeclaration:
    """Property typed as ``typeof Enum`` when its description names an enum."""
    if is_enum_description(row.description):
        ref: TypeRef = EnumValueOf(unbox(row.type).strip())
    else:
        ref = normalize_type(row.type)
    return PropertyDeclaration(name=row.name, type=ref, description=row.description)


def build_parameter(
    row: ValueRow,
    method_name: str,
    advanced_rows: list[ValueRow],
    env: Environment,
    owner: str,
) -> ParameterDeclaration:
    if should_lift(row):
        ref: TypeRef = lift(method_name, row, advanced_rows, env, owner)
    elif is_map_shaped(row.type):
        ref = StringKeyedMap(UNKNOWN)
    else:
        ref = normalize_type(row.type)

    rest = is_rest_name(row.name)
    return ParameterDeclaration(
        name=row.name[len(REST_PREFIX):] if rest else row.name,
        type=ref,
        optional=is_optional_description(row.description),
        rest=rest,
    )


def build_method(block: MethodBlock, env: Environment, owner: str, typed: bool = False) -> MethodDeclaration:
    name = block.name
    return_token, return_comment = split_return(block.return_text)

    method = MethodDeclaration(
        name=name,
        parameters=[
            build_parameter(row, name, block.advanced_params, env, owner)
            for row in block.params
        ],
        return_type=normalize_type(return_token) if return_token else VOID,
        description=block.summary,
        example_text=block.example or None,
        return_description=return_comment or None,
    )
    method.doc = synthesize(
        method,
        summary=block.summary,
        example=block.example,
        param_comments=[row.description for row in block.params],
        return_comment=return_comment,
        typed=typed,
    )
    return method
