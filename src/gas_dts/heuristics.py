"""Text heuristics over documentation prose.

Each predicate encodes one phrasing convention of the reference site and is
kept separate so it can be swapped or tested on its own.
"""

from __future__ import annotations

import re

from .model import DeclarationKind
from .typenorm import is_array_shaped, is_map_shaped

_ENUM_RE = re.compile(r"^(?:an?\s+enum|enum\b)", re.IGNORECASE)
_OPTIONAL_RE = re.compile(r"^\(?optional\b", re.IGNORECASE)

ADVANCED_PARAMS_MARKER = "advanced parameters"
REST_PREFIX = "..."


def is_enum_description(desc: str) -> bool:
    """True for descriptions such as ``An enum of colors`` or ``An enumeration of themes``."""
    return bool(_ENUM_RE.match(desc.strip()))


def classify(desc: str) -> DeclarationKind:
    if is_enum_description(desc):
        return DeclarationKind.Enum
    return DeclarationKind.Interface


def is_advanced_param(type_token: str, desc: str) -> bool:
    """An ``Object`` parameter whose shape lives in a separate table."""
    return is_map_shaped(type_token) and ADVANCED_PARAMS_MARKER in desc


def is_array_name(name: str) -> bool:
    """Advanced parameter names such as ``attendees[]`` denote arrays."""
    return is_array_shaped(name)


def is_rest_name(name: str) -> bool:
    return name.startswith(REST_PREFIX)


def is_optional_description(desc: str) -> bool:
    return bool(_OPTIONAL_RE.match(desc.strip()))
