"""Type-level utilities: documented token → TypeRef normalisation."""

from __future__ import annotations

from .typeref import Array, Named, Primitive, TypeRef

ARRAY_MARKER = "[]"

TYPE_SYNONYMS: dict[str, str] = {
    "Integer": "number",
    "String": "string",
    "Boolean": "boolean",
    "Object": "object",
}

# Tokens already spelled in the target vocabulary
TARGET_PRIMITIVES = frozenset({"number", "string", "boolean", "object", "void", "unknown", "any"})


def is_array_shaped(token: str) -> bool:
    return token.endswith(ARRAY_MARKER)


def is_map_shaped(token: str) -> bool:
    """Only the bare ``Object`` token documents a string-keyed map."""
    return token == "Object"


def unbox(token: str) -> str:
    """Remove the array marker from a documented token."""
    return token.replace(ARRAY_MARKER, "")


def capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]


def normalize_type(token: str | TypeRef) -> TypeRef:
    """Convert a documented type token to a TypeRef.

    - ``Integer`` / ``String`` / ``Boolean`` / ``Object`` → Primitive
    - target spellings (``number``, ``void`` …) → Primitive
    - a trailing ``[]`` wraps the result in Array
    - everything else → Named (passthrough)

    A TypeRef is returned unchanged, so normalising twice is a no-op.
    """
    if not isinstance(token, str):
        return token

    token = token.strip()
    is_array = is_array_shaped(token)
    unboxed = unbox(token).strip()

    if unboxed in TYPE_SYNONYMS:
        ref: TypeRef = Primitive(TYPE_SYNONYMS[unboxed])
    elif unboxed in TARGET_PRIMITIVES:
        ref = Primitive(unboxed)
    else:
        ref = Named(unboxed)

    if is_array:
        return Array(ref)
    return ref
