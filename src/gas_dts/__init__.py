"""gas-dts — TypeScript declarations from the Apps Script reference."""

__project__ = "gas-dts"
__version__ = "0.1.0"
__description__ = "Generates Google Apps Script type declarations from the online reference"

from .assembler import assemble_root, assemble_service
from .builder import build_service
from .emitter import FileEmitter, render
from .environment import Environment
from .errors import FetchError, GasDtsError
from .fetch import DocumentSource
from .model import (
    DeclarationKind,
    EnumDeclaration,
    EnumMember,
    InterfaceDeclaration,
    MethodDeclaration,
    NamespaceNode,
    ParameterDeclaration,
    PropertyDeclaration,
    ServiceDescriptor,
)
from .pipeline import Pipeline
from .typenorm import normalize_type
from .typeref import Array, EnumValueOf, Named, Primitive, StringKeyedMap

__all__ = [
    "assemble_root",
    "assemble_service",
    "build_service",
    "render",
    "FileEmitter",
    "Environment",
    "FetchError",
    "GasDtsError",
    "DocumentSource",
    "DeclarationKind",
    "EnumDeclaration",
    "EnumMember",
    "InterfaceDeclaration",
    "MethodDeclaration",
    "NamespaceNode",
    "ParameterDeclaration",
    "PropertyDeclaration",
    "ServiceDescriptor",
    "Pipeline",
    "normalize_type",
    "Array",
    "EnumValueOf",
    "Named",
    "Primitive",
    "StringKeyedMap",
]
