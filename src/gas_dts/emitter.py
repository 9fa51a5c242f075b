"""Emitter — renders a namespace tree as TypeScript declaration source."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import OUTPUT_PATH
from .model import (
    DocComment,
    EnumDeclaration,
    EnumMember,
    InterfaceDeclaration,
    MethodDeclaration,
    NamespaceNode,
    ParameterDeclaration,
    PropertyDeclaration,
)

logger = logging.getLogger(__name__)

INDENT = "    "


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------

def _fmt_comment(text: str, depth: int) -> list[str]:
    """A ``/** ... */`` block with one `` * `` line per source line."""
    pad = INDENT * depth
    lines = [f"{pad}/**"]
    text = text.replace("*/", "*\\/")
    for line in text.splitlines() or [""]:
        lines.append(f"{pad} * {line}".rstrip())
    lines.append(f"{pad} */")
    return lines


def _fmt_doc(doc: DocComment) -> str:
    """Join the tags of *doc* into comment text."""
    parts: list[str] = []
    for tag in doc.tags:
        head = f"@{tag.name}"
        if tag.type_expr:
            head += f" {{{tag.type_expr}}}"
        if tag.param_name is not None:
            head += f" [{tag.param_name}]" if tag.bracketed else f" {tag.param_name}"
        if tag.name == "example":
            parts.append(head + tag.text.rstrip("\n"))
        elif tag.text:
            parts.append(f"{head} {tag.text}")
        else:
            parts.append(head)
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Members
# ---------------------------------------------------------------------------

def _fmt_enum_member(member: EnumMember) -> str:
    if member.value is None:
        return f"{member.name},"
    if isinstance(member.value, str):
        return f'{member.name} = "{member.value}",'
    return f"{member.name} = {member.value},"


def _fmt_property(prop: PropertyDeclaration) -> str:
    q = "?" if prop.optional else ""
    return f"{prop.name}{q}: {prop.type};"


def _fmt_parameter(param: ParameterDeclaration) -> str:
    dots = "..." if param.rest else ""
    q = "?" if param.optional and not param.rest else ""
    return f"{dots}{param.name}{q}: {param.type}"


def _fmt_method(method: MethodDeclaration) -> str:
    params = ", ".join(_fmt_parameter(p) for p in method.parameters)
    return f"{method.name}({params}): {method.return_type};"


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------

def _emit_enum(decl: EnumDeclaration, depth: int) -> list[str]:
    pad = INDENT * depth
    lines = [f"{pad}enum {decl.name} {{"]
    for member in decl.members:
        if member.description:
            lines.extend(_fmt_comment(member.description, depth + 1))
        lines.append(f"{pad}{INDENT}{_fmt_enum_member(member)}")
    lines.append(f"{pad}}}")
    return lines


def _emit_interface(decl: InterfaceDeclaration, depth: int) -> list[str]:
    pad = INDENT * depth
    lines = [f"{pad}interface {decl.name} {{"]
    for prop in decl.properties:
        if prop.description:
            lines.extend(_fmt_comment(prop.description, depth + 1))
        lines.append(f"{pad}{INDENT}{_fmt_property(prop)}")
    for method in decl.methods:
        if method.doc is not None:
            lines.extend(_fmt_comment(_fmt_doc(method.doc), depth + 1))
        lines.append(f"{pad}{INDENT}{_fmt_method(method)}")
    lines.append(f"{pad}}}")
    return lines


def _emit_namespace(node: NamespaceNode, depth: int) -> list[str]:
    pad = INDENT * depth
    keyword = "declare namespace" if node.ambient else "namespace"
    lines = [f"{pad}{keyword} {node.name} {{"]
    for member in node.members:
        lines.extend(_emit_node(member, depth + 1))
    lines.append(f"{pad}}}")
    return lines


def _emit_node(node, depth: int) -> list[str]:
    lines: list[str] = []
    if node.description:
        lines.extend(_fmt_comment(node.description, depth))
    if isinstance(node, NamespaceNode):
        lines.extend(_emit_namespace(node, depth))
    elif isinstance(node, EnumDeclaration):
        lines.extend(_emit_enum(node, depth))
    elif isinstance(node, InterfaceDeclaration):
        lines.extend(_emit_interface(node, depth))
    else:
        raise TypeError(f"Cannot emit {type(node).__name__}")
    return lines


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def render(root: NamespaceNode) -> str:
    """Declaration source text for *root*."""
    return "\n".join(_emit_node(root, 0)) + "\n"


class FileEmitter:
    """Writes the rendered tree to a fixed output path on every call."""

    def __init__(self, path: str | Path = OUTPUT_PATH) -> None:
        self.path = Path(path)

    def __call__(self, root: NamespaceNode) -> Path:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(render(root), encoding="utf-8")
        logger.info("Wrote %s", self.path)
        return self.path
