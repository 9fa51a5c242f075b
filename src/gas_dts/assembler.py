"""Namespace assembly — the final shape handed to the emitter."""

from __future__ import annotations

import re

from .config import AMBIENT_NAMESPACE
from .environment import Environment
from .model import NamespaceNode, ServiceDescriptor

_SERVICE_SUFFIX_RE = re.compile(r"\s*Service$", re.IGNORECASE)


def namespace_name(title: str) -> str:
    """``Calendar Service`` → ``Calendar``."""
    return _SERVICE_SUFFIX_RE.sub("", title.strip())


def assemble_service(service: ServiceDescriptor, env: Environment) -> NamespaceNode:
    """Members in discovery order, then lifted option types."""
    return NamespaceNode(
        name=namespace_name(service.name),
        description=service.description or None,
        members=env.declarations(),
    )


def assemble_root(services: list[NamespaceNode], name: str = AMBIENT_NAMESPACE) -> NamespaceNode:
    return NamespaceNode(name=name, members=list(services), ambient=True)
