"""TypeScript interface extraction.

This module turns the typed syntax tree of one source file into
InterfaceDefinition models. Extraction is atomic per file: the first
unsupported construct aborts it and no partial result is returned.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import BaseModel

from tsguard.annotations import AnnotationResolver
from tsguard.errors import ConflictingDeclarationError, UnsupportedSyntaxError
from tsguard.models import InterfaceDefinition, PropertyDefinition
from tsguard.parser import TypeScriptParser
from tsguard.syntax import (
    IdentifierNode,
    InterfaceDeclarationNode,
    InterfaceMember,
    ModuleItem,
    ModuleNode,
    PropertySignatureNode,
    SyntaxConverter,
)

logger = logging.getLogger(__name__)


class ExtractionResult(BaseModel):
    """A parsed source file and the interfaces extracted from it."""

    ast: ModuleNode
    interfaces: list[InterfaceDefinition] = []


def merge_declarations(
    first: InterfaceDefinition, later: InterfaceDefinition
) -> InterfaceDefinition:
    """Merge a later declaration of an interface into an earlier one.

    A property declared in both must have the same kind and optionality;
    identical redeclarations are kept once.

    Raises:
        ConflictingDeclarationError: If a property is redeclared differently

    """
    properties = list(first.properties)
    by_name = {prop.name: prop for prop in properties}
    for prop in later.properties:
        previous = by_name.get(prop.name)
        if previous is None:
            properties.append(prop)
            by_name[prop.name] = prop
        elif previous != prop:
            raise ConflictingDeclarationError(first.name, prop.name, later.line)
    return first.model_copy(update={"properties": properties})


class InterfaceExtractor:
    """Extracts interface definitions from top-level syntax nodes.

    Only top-level declarations are considered; interfaces nested in
    namespaces or blocks are not discovered.
    """

    def __init__(
        self,
        resolver: AnnotationResolver | None = None,
        parser: TypeScriptParser | None = None,
    ) -> None:
        """Initialise the extractor.

        Args:
            resolver: Annotation resolver (default: keyword types only)
            parser: Parser used by extract_source (default: plain TypeScript)

        """
        self._resolver = resolver or AnnotationResolver()
        self._parser = parser or TypeScriptParser()

    def extract_source(self, source_code: str) -> ExtractionResult:
        """Parse source text and extract all of its interfaces.

        Args:
            source_code: Whole-file TypeScript source text

        Returns:
            ExtractionResult holding the typed tree and the interfaces

        Raises:
            SourceSyntaxError: If the source does not parse
            UnsupportedSyntaxError: If any interface cannot be extracted

        """
        root_node = self._parser.parse(source_code)
        module = SyntaxConverter(source_code).convert_module(root_node)
        return ExtractionResult(ast=module, interfaces=self.extract_all(module.body))

    def extract_all(self, nodes: Sequence[ModuleItem]) -> list[InterfaceDefinition]:
        """Extract every top-level interface declaration.

        Declarations sharing a name are merged into one definition, as
        TypeScript does: properties are appended in declaration order and
        the definition keeps the position of the first declaration.

        Args:
            nodes: Top-level items of one source file

        Returns:
            Interface definitions in order of first declaration

        Raises:
            UnsupportedSyntaxError: If any interface cannot be extracted
            ConflictingDeclarationError: If merged declarations disagree on a
                property

        """
        merged: dict[str, InterfaceDefinition] = {}
        for node in nodes:
            if not isinstance(node, InterfaceDeclarationNode):
                continue
            interface = self.extract_interface(node)
            existing = merged.get(interface.name)
            if existing is None:
                merged[interface.name] = interface
                continue
            logger.info(
                "Merging declaration of interface '%s' at line %s",
                interface.name,
                interface.line,
            )
            merged[interface.name] = merge_declarations(existing, interface)

        interfaces = list(merged.values())
        logger.debug("Extracted %d interfaces", len(interfaces))
        return interfaces

    def extract_interface(self, node: InterfaceDeclarationNode) -> InterfaceDefinition:
        """Extract a single interface declaration."""
        match node.id:
            case IdentifierNode(value=name):
                pass
            case other:
                raise UnsupportedSyntaxError(
                    other.kind,
                    "Identifier",
                    context="an interface name",
                    line=other.line,
                )

        if node.type_parameters is not None:
            raise UnsupportedSyntaxError(
                node.type_parameters.kind,
                "InterfaceBody",
                context="a generic type parameter list",
                interface=name,
                line=node.type_parameters.line,
            )

        if node.extends:
            clause = node.extends[0]
            raise UnsupportedSyntaxError(
                clause.kind,
                "InterfaceBody",
                context="an interface heritage clause",
                interface=name,
                line=clause.line,
            )

        properties = [self._extract_property(member, name) for member in node.body.body]
        return InterfaceDefinition(name=name, properties=properties, line=node.line)

    def _extract_property(
        self, member: InterfaceMember, interface: str
    ) -> PropertyDefinition:
        """Extract one interface member, which must be a property signature."""
        match member:
            case PropertySignatureNode():
                signature = member
            case other:
                raise UnsupportedSyntaxError(
                    other.kind,
                    "PropertySignature",
                    context="an interface body member",
                    interface=interface,
                    line=other.line,
                )

        match signature.key:
            case IdentifierNode(value=name):
                pass
            case other:
                raise UnsupportedSyntaxError(
                    other.kind,
                    "Identifier",
                    context="a property key",
                    interface=interface,
                    line=other.line,
                )

        kind = None
        if signature.type_annotation is not None:
            try:
                kind = self._resolver.resolve(signature.type_annotation)
            except UnsupportedSyntaxError as e:
                raise UnsupportedSyntaxError(
                    e.actual_kind,
                    e.expected_kind,
                    context=f"{e.context} on '{name}'",
                    interface=interface,
                    line=e.line,
                ) from e

        return PropertyDefinition(name=name, kind=kind, optional=signature.optional)
