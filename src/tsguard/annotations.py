"""Resolution of property type annotations to primitive kinds.

Resolvers are registered per annotation node kind, so that recognising a new
annotation shape does not require changes to the extraction traversal.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from tsguard.errors import UnsupportedSyntaxError
from tsguard.models import PrimitiveKind
from tsguard.syntax.nodes import KeywordTypeNode, TypeAnnotation

AnnotationKindResolver: TypeAlias = Callable[[TypeAnnotation], PrimitiveKind]


class ResolverAlreadyRegisteredError(Exception):
    """Raised when attempting to register a resolver for a kind twice."""

    pass


def resolve_keyword_type(annotation: TypeAnnotation) -> PrimitiveKind:
    """Resolve a ``KeywordType`` annotation to its keyword."""
    match annotation:
        case KeywordTypeNode(keyword=keyword):
            return keyword
        case _:
            raise UnsupportedSyntaxError(
                annotation.kind,
                "KeywordType",
                context="a property type annotation",
                line=annotation.line,
            )


class AnnotationResolver:
    """Registry of annotation resolvers keyed by annotation node kind."""

    def __init__(self) -> None:
        """Initialise with the keyword type resolver registered."""
        self._resolvers: dict[str, AnnotationKindResolver] = {}
        self.register("KeywordType", resolve_keyword_type)

    def register(self, kind: str, resolver: AnnotationKindResolver) -> None:
        """Register a resolver for an annotation node kind.

        Args:
            kind: Annotation node kind (e.g. 'KeywordType')
            resolver: Callable mapping the annotation to a primitive kind

        Raises:
            ResolverAlreadyRegisteredError: If the kind already has a resolver

        """
        if kind in self._resolvers:
            raise ResolverAlreadyRegisteredError(
                f"Annotation kind '{kind}' is already registered"
            )
        self._resolvers[kind] = resolver

    def supported_kinds(self) -> list[str]:
        """List annotation kinds with a registered resolver."""
        return list(self._resolvers.keys())

    def resolve(self, annotation: TypeAnnotation) -> PrimitiveKind:
        """Resolve an annotation to a primitive kind.

        Args:
            annotation: Typed annotation node of a property signature

        Returns:
            The primitive kind the annotation denotes

        Raises:
            UnsupportedSyntaxError: If no resolver handles the annotation kind

        """
        resolver = self._resolvers.get(annotation.kind)
        if resolver is None:
            raise UnsupportedSyntaxError(
                annotation.kind,
                " | ".join(self.supported_kinds()),
                context="a property type annotation",
                line=annotation.line,
            )
        return resolver(annotation)
