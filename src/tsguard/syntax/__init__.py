"""Typed TypeScript syntax nodes and their tree-sitter conversion."""

from tsguard.syntax.convert import SyntaxConverter, kind_name
from tsguard.syntax.nodes import (
    IdentifierNode,
    InterfaceBodyNode,
    InterfaceDeclarationNode,
    InterfaceMember,
    KeywordTypeNode,
    ModuleItem,
    ModuleNode,
    OpaqueNode,
    PropertyKey,
    PropertySignatureNode,
    TypeAnnotation,
)

__all__ = [
    # Conversion
    "SyntaxConverter",
    "kind_name",
    # Nodes
    "IdentifierNode",
    "InterfaceBodyNode",
    "InterfaceDeclarationNode",
    "InterfaceMember",
    "KeywordTypeNode",
    "ModuleItem",
    "ModuleNode",
    "OpaqueNode",
    "PropertyKey",
    "PropertySignatureNode",
    "TypeAnnotation",
]
