"""Typed syntax nodes for the constructs interface extraction understands.

Each node carries a ``kind`` discriminant mirroring the TypeScript AST naming
(``InterfaceDeclaration``, ``PropertySignature``, ``Identifier``,
``KeywordType``). Any construct without a dedicated model is represented by
``OpaqueNode``, which keeps its kind and source text so that consumers can
report exactly what they encountered.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from tsguard.models import PrimitiveKind


class SyntaxNode(BaseModel):
    """Base class for typed syntax nodes."""

    model_config = ConfigDict(frozen=True)


class IdentifierNode(SyntaxNode):
    """A plain identifier (interface name or property key)."""

    kind: Literal["Identifier"] = "Identifier"
    value: str
    line: int


class KeywordTypeNode(SyntaxNode):
    """A primitive keyword type annotation such as ``string`` or ``null``."""

    kind: Literal["KeywordType"] = "KeywordType"
    keyword: PrimitiveKind
    line: int


class OpaqueNode(SyntaxNode):
    """Any construct without a dedicated model (e.g. ``MethodSignature``)."""

    kind: str
    text: str
    line: int


PropertyKey = IdentifierNode | OpaqueNode
TypeAnnotation = KeywordTypeNode | OpaqueNode


class PropertySignatureNode(SyntaxNode):
    """A property signature inside an interface body."""

    kind: Literal["PropertySignature"] = "PropertySignature"
    key: IdentifierNode | OpaqueNode
    optional: bool = False
    type_annotation: KeywordTypeNode | OpaqueNode | None = None
    line: int


InterfaceMember = PropertySignatureNode | OpaqueNode


class InterfaceBodyNode(SyntaxNode):
    """The braced member list of an interface declaration."""

    kind: Literal["InterfaceBody"] = "InterfaceBody"
    body: list[PropertySignatureNode | OpaqueNode] = []
    line: int


class InterfaceDeclarationNode(SyntaxNode):
    """A top-level interface declaration."""

    kind: Literal["InterfaceDeclaration"] = "InterfaceDeclaration"
    id: IdentifierNode | OpaqueNode
    type_parameters: OpaqueNode | None = None
    extends: list[OpaqueNode] = []
    body: InterfaceBodyNode
    line: int


ModuleItem = InterfaceDeclarationNode | OpaqueNode


class ModuleNode(SyntaxNode):
    """The top-level items of one parsed source file."""

    kind: Literal["Module"] = "Module"
    body: list[InterfaceDeclarationNode | OpaqueNode] = []
    line: int = 1
