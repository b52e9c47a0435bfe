"""TypeScript type guard generation.

For every InterfaceDefinition a predicate ``is<Name>(value): value is <Name>``
is emitted. The predicate returns false for null/undefined and non-object
values, then checks each property for presence and, where a primitive kind
is known, its runtime type tag. Checks run in declaration order and return
false at the first failure.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from tsguard.errors import GenerationError
from tsguard.models import InterfaceDefinition, PrimitiveKind, PropertyDefinition

logger = logging.getLogger(__name__)

_INDENT = "  "

_BANNER = "// Code generated by tsguard. DO NOT EDIT."

# Kinds checked with a typeof comparison against the same tag
_TYPEOF_KINDS = frozenset(
    {
        PrimitiveKind.STRING,
        PrimitiveKind.NUMBER,
        PrimitiveKind.BOOLEAN,
        PrimitiveKind.BIGINT,
        PrimitiveKind.SYMBOL,
        PrimitiveKind.UNDEFINED,
    }
)


def guard_name(interface_name: str) -> str:
    """Return the guard function name for an interface.

    The first character is upper-cased and the rest left unchanged, so
    ``fooBar`` becomes ``isFooBar``.

    Raises:
        GenerationError: If the name is empty

    """
    if not interface_name:
        raise GenerationError("Cannot name a guard for an interface without a name")
    return f"is{interface_name[0].upper()}{interface_name[1:]}"


def mismatch_condition(accessor: str, kind: PrimitiveKind | None) -> str | None:
    """Return a TypeScript condition that is true when the value has the wrong kind.

    Args:
        accessor: Expression reading the property value
        kind: Declared primitive kind of the property

    Returns:
        The condition, or None when the kind has no runtime type tag

    """
    if kind is None:
        return None
    if kind in _TYPEOF_KINDS:
        return f'typeof {accessor} !== "{kind.value}"'
    if kind is PrimitiveKind.NULL:
        return f"{accessor} !== null"
    # void, any, unknown, never and object carry no single discriminating tag
    return None


class GuardGenerator:
    """Generates TypeScript type guard source text from interface definitions."""

    def generate(self, definition: InterfaceDefinition) -> str:
        """Generate the guard function for one interface.

        Args:
            definition: Extracted interface definition

        Returns:
            Doc comment and function source, ending with a newline

        """
        name = guard_name(definition.name)
        lines = [
            "/**",
            f" * Ensures that value is a {definition.name} interface.",
            " * @param value To check.",
            f" * @returns True if value is {definition.name}, false otherwise.",
            " */",
            f"export function {name}(value: unknown): value is {definition.name} {{",
            f"{_INDENT}if (value === null || value === undefined) {{",
            f"{_INDENT * 2}return false;",
            f"{_INDENT}}}",
            f'{_INDENT}if (typeof value !== "object") {{',
            f"{_INDENT * 2}return false;",
            f"{_INDENT}}}",
        ]

        if definition.properties:
            lines.append(
                f"{_INDENT}const record = value as Record<string, unknown>;"
            )
        for prop in definition.properties:
            lines.extend(self._property_checks(prop))

        lines.append(f"{_INDENT}return true;")
        lines.append("}")

        logger.debug(
            "Generated %s with %d property checks",
            name,
            len(definition.properties),
        )
        return "\n".join(lines) + "\n"

    def generate_all(self, definitions: Sequence[InterfaceDefinition]) -> list[str]:
        """Generate one guard per definition, in order."""
        return [self.generate(definition) for definition in definitions]

    def generate_module(
        self, definitions: Sequence[InterfaceDefinition], source_module: str
    ) -> str:
        """Generate a complete guard file for the interfaces of one source.

        Args:
            definitions: Interfaces extracted from the source file
            source_module: Import specifier of the source file (e.g. './user.ts')

        Returns:
            File text with a banner, a type import and every guard

        Raises:
            GenerationError: If two definitions would produce the same guard
                function name

        """
        parts = [_BANNER + "\n"]
        if definitions:
            self._check_guard_names(definitions)
            names = [definition.name for definition in definitions]
            parts.append(
                f'import type {{ {", ".join(names)} }} from "{source_module}";\n'
            )
            parts.extend(self.generate_all(definitions))
        return "\n".join(parts)

    def _property_checks(self, prop: PropertyDefinition) -> list[str]:
        """Emit the presence and type tag checks for one property."""
        accessor = f"record.{prop.name}"
        mismatch = mismatch_condition(accessor, prop.kind)

        if prop.optional:
            if mismatch is None:
                return []
            condition = f"{accessor} !== undefined && {mismatch}"
        else:
            presence = f'!("{prop.name}" in record)'
            condition = presence if mismatch is None else f"{presence} || {mismatch}"

        return [
            f"{_INDENT}if ({condition}) {{",
            f"{_INDENT * 2}return false;",
            f"{_INDENT}}}",
        ]

    def _check_guard_names(self, definitions: Sequence[InterfaceDefinition]) -> None:
        """Reject definitions whose guards would be declared twice in one file."""
        declared: dict[str, str] = {}
        for definition in definitions:
            name = guard_name(definition.name)
            if name in declared:
                raise GenerationError(
                    f"Interfaces '{declared[name]}' and '{definition.name}' "
                    f"would both generate {name}"
                )
            declared[name] = definition.name
