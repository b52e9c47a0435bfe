"""Conversion from tree-sitter nodes to typed syntax nodes.

This is the only module that inspects tree-sitter node shapes. Everything
downstream works with the models in ``tsguard.syntax.nodes``.
"""

from __future__ import annotations

import logging

from tree_sitter import Node

from tsguard.models import PrimitiveKind
from tsguard.syntax.base import (
    find_child_by_type,
    find_children_by_type,
    get_line,
    get_node_text,
    is_trivial_node,
)
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

logger = logging.getLogger(__name__)

# Tree-sitter node types
_INTERFACE_TYPE = "interface_declaration"
_EXPORT_TYPE = "export_statement"
_AMBIENT_TYPE = "ambient_declaration"
_PROPERTY_SIGNATURE_TYPE = "property_signature"
_PROPERTY_IDENTIFIER_TYPE = "property_identifier"
_TYPE_IDENTIFIER_TYPE = "type_identifier"
_EXTENDS_TYPES = ("extends_type_clause", "extends_clause")
_PREDEFINED_TYPE = "predefined_type"
_LITERAL_TYPE = "literal_type"

# Tree-sitter types whose kind name differs from the PascalCase default
_KIND_NAMES = {
    "program": "Module",
    "string": "StringLiteral",
    "number": "NumericLiteral",
    "type_identifier": "TypeReference",
    "generic_type": "TypeReference",
    "nested_type_identifier": "TypeReference",
    "object_type": "TypeLiteral",
    "lexical_declaration": "VariableDeclaration",
    "internal_module": "ModuleDeclaration",
    "module": "ModuleDeclaration",
    "import_statement": "ImportDeclaration",
    "export_statement": "ExportDeclaration",
    "ambient_declaration": "AmbientDeclaration",
    "extends_type_clause": "ExtendsClause",
}

# Type identifiers tree-sitter does not treat as predefined types
_KEYWORD_TYPE_IDENTIFIERS = frozenset({"bigint", "undefined"})

_LITERAL_KEYWORDS = frozenset({"null", "undefined"})

_PRIMITIVE_KEYWORDS = frozenset(kind.value for kind in PrimitiveKind)


def kind_name(node_type: str) -> str:
    """Map a tree-sitter node type to its TypeScript AST kind name.

    Args:
        node_type: Tree-sitter node type (e.g. ``method_signature``)

    Returns:
        PascalCase kind name (e.g. ``MethodSignature``)

    """
    if node_type in _KIND_NAMES:
        return _KIND_NAMES[node_type]
    return "".join(part.capitalize() for part in node_type.split("_") if part)


class SyntaxConverter:
    """Converts a tree-sitter TypeScript tree into typed syntax nodes."""

    def __init__(self, source_code: str) -> None:
        """Initialise with the source the tree was parsed from.

        Args:
            source_code: The original source code string

        """
        # Tree-sitter offsets are byte offsets into the UTF-8 encoding the parser read
        self._source_bytes = source_code.encode("utf-8")

    def convert_module(self, root_node: Node) -> ModuleNode:
        """Convert the top-level items of a parsed file.

        Args:
            root_node: The root node of the parsed AST

        Returns:
            ModuleNode whose body holds one item per top-level statement

        """
        items = [self._convert_item(child) for child in root_node.named_children]
        logger.debug("Converted %d top-level items", len(items))
        return ModuleNode(body=items, line=get_line(root_node))

    def _convert_item(self, node: Node) -> ModuleItem:
        """Convert a top-level statement, unwrapping declared interfaces."""
        interface = self._interface_of(node)
        if interface is not None:
            return self._convert_interface(interface)
        return self._opaque(node)

    def _interface_of(self, node: Node) -> Node | None:
        """Return the interface a top-level statement declares, if any.

        Handles ``interface``, ``export interface``, ``declare interface`` and
        ``export declare interface``.
        """
        if node.type == _INTERFACE_TYPE:
            return node

        if node.type == _EXPORT_TYPE:
            declaration = node.child_by_field_name("declaration")
            if declaration is not None:
                return self._interface_of(declaration)

        if node.type == _AMBIENT_TYPE:
            # The declared statement is the only named child, with no field name
            declarations = node.named_children
            if len(declarations) == 1 and declarations[0].type == _INTERFACE_TYPE:
                return declarations[0]

        return None

    def _convert_interface(self, node: Node) -> InterfaceDeclarationNode:
        """Convert an interface declaration node."""
        name_node = node.child_by_field_name("name")
        if name_node is not None and name_node.type == _TYPE_IDENTIFIER_TYPE:
            identifier: IdentifierNode | OpaqueNode = IdentifierNode(
                value=get_node_text(name_node, self._source_bytes),
                line=get_line(name_node),
            )
        else:
            identifier = self._opaque(name_node or node)

        type_parameters_node = node.child_by_field_name("type_parameters")
        type_parameters = (
            self._opaque(type_parameters_node)
            if type_parameters_node is not None
            else None
        )

        extends: list[OpaqueNode] = []
        for extends_type in _EXTENDS_TYPES:
            extends.extend(
                self._opaque(clause)
                for clause in find_children_by_type(node, extends_type)
            )

        body_node = node.child_by_field_name("body")
        if body_node is None:
            body_node = find_child_by_type(node, "interface_body") or find_child_by_type(
                node, "object_type"
            )

        members: list[InterfaceMember] = []
        if body_node is not None:
            members = [
                self._convert_member(child)
                for child in body_node.named_children
                if not is_trivial_node(child)
            ]

        return InterfaceDeclarationNode(
            id=identifier,
            type_parameters=type_parameters,
            extends=extends,
            body=InterfaceBodyNode(
                body=members,
                line=get_line(body_node) if body_node is not None else get_line(node),
            ),
            line=get_line(node),
        )

    def _convert_member(self, node: Node) -> InterfaceMember:
        """Convert one interface body member."""
        if node.type != _PROPERTY_SIGNATURE_TYPE:
            return self._opaque(node)

        name_node = node.child_by_field_name("name")
        if name_node is not None and name_node.type == _PROPERTY_IDENTIFIER_TYPE:
            key: PropertyKey = IdentifierNode(
                value=get_node_text(name_node, self._source_bytes),
                line=get_line(name_node),
            )
        else:
            key = self._opaque(name_node or node)

        annotation: TypeAnnotation | None = None
        type_node = node.child_by_field_name("type")
        if type_node is not None:
            # type_annotation wraps the ':' token and the annotated type
            inner = type_node.named_children
            annotation = self._convert_annotation(inner[-1] if inner else type_node)

        return PropertySignatureNode(
            key=key,
            optional=any(child.type == "?" for child in node.children),
            type_annotation=annotation,
            line=get_line(node),
        )

    def _convert_annotation(self, node: Node) -> TypeAnnotation:
        """Convert a type annotation, normalising every primitive keyword."""
        keyword = self._keyword_of(node)
        if keyword is not None:
            return KeywordTypeNode(keyword=PrimitiveKind(keyword), line=get_line(node))
        return self._opaque(node)

    def _keyword_of(self, node: Node) -> str | None:
        """Return the primitive keyword an annotation spells, if any."""
        text = get_node_text(node, self._source_bytes).strip()

        if node.type == _PREDEFINED_TYPE and text in _PRIMITIVE_KEYWORDS:
            return text

        if node.type == _TYPE_IDENTIFIER_TYPE and text in _KEYWORD_TYPE_IDENTIFIERS:
            return text

        if node.type == _LITERAL_TYPE:
            children = node.named_children
            if len(children) == 1 and children[0].type in _LITERAL_KEYWORDS:
                return children[0].type

        if node.type in _LITERAL_KEYWORDS:
            return node.type

        return None

    def _opaque(self, node: Node) -> OpaqueNode:
        return OpaqueNode(
            kind=kind_name(node.type),
            text=get_node_text(node, self._source_bytes),
            line=get_line(node),
        )
