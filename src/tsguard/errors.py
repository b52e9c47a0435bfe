"""Error classes for tsguard.

This module provides:
- TsGuardError: Base exception class for all tsguard errors
- UsageError, ReadError: Invocation and file access exceptions
- ParserError, SourceSyntaxError: Parser-related exceptions
- ExtractionError, UnsupportedSyntaxError,
  ConflictingDeclarationError: Interface extraction exceptions
- GenerationError: Guard generation exception
- ConfigError: Configuration exception
"""

from __future__ import annotations

from pathlib import Path
from typing_extensions import override


class TsGuardError(Exception):
    """Base exception for all tsguard errors."""

    pass


class UsageError(TsGuardError):
    """Raised when the tool is invoked without usable input files."""

    def __init__(self, message: str, missing: list[Path] | None = None) -> None:
        """Initialise usage error.

        Args:
            message: Human-readable description of the usage problem
            missing: Input files that were named but do not exist

        """
        super().__init__(message)
        self.missing = missing or []


class ReadError(TsGuardError):
    """Raised when an existing input file cannot be read."""

    def __init__(self, path: Path, cause: Exception) -> None:
        """Initialise read error.

        Args:
            path: File that failed to read
            cause: Underlying I/O or decoding error

        """
        super().__init__(f"Failed to open {path}: {cause}")
        self.path = path
        self.cause = cause


class ParserError(TsGuardError):
    """Base exception for parser-related errors."""

    pass


class SourceSyntaxError(ParserError):
    """Raised when source text is not valid TypeScript."""

    def __init__(self, message: str, line: int | None = None) -> None:
        """Initialise syntax error.

        Args:
            message: Description of the parse failure
            line: 1-based line of the first error node, if known

        """
        super().__init__(message)
        self.line = line

    @override
    def __str__(self) -> str:
        """Return message with line context."""
        base_message = super().__str__()
        if self.line is not None:
            return f"{base_message} (line {self.line})"
        return base_message


class ExtractionError(TsGuardError):
    """Base exception for interface extraction errors."""

    pass


class UnsupportedSyntaxError(ExtractionError):
    """Raised when an interface uses a construct guards cannot be built for.

    Extraction is atomic per file: raising this discards every interface
    already extracted from the same source.
    """

    def __init__(
        self,
        actual_kind: str,
        expected_kind: str,
        *,
        context: str,
        interface: str | None = None,
        line: int | None = None,
    ) -> None:
        """Initialise unsupported syntax error.

        Args:
            actual_kind: Node kind that was encountered
            expected_kind: Node kind(s) that would have been accepted
            context: Where in the declaration the node was found
            interface: Name of the enclosing interface, if known
            line: 1-based source line of the offending node, if known

        """
        super().__init__(
            f"encountered {context} of kind '{actual_kind}' "
            f"but expected '{expected_kind}'"
        )
        self.actual_kind = actual_kind
        self.expected_kind = expected_kind
        self.context = context
        self.interface = interface
        self.line = line

    @override
    def __str__(self) -> str:
        """Return message with interface and line context."""
        base_message = super().__str__()
        location: list[str] = []
        if self.interface:
            location.append(f"interface '{self.interface}'")
        if self.line is not None:
            location.append(f"line {self.line}")
        if location:
            return f"{base_message} ({', '.join(location)})"
        return base_message


class ConflictingDeclarationError(ExtractionError):
    """Raised when merged interface declarations redeclare a property differently."""

    def __init__(self, interface: str, property_name: str, line: int | None) -> None:
        """Initialise conflicting declaration error.

        Args:
            interface: Name of the merged interface
            property_name: Property declared with different signatures
            line: 1-based line of the later declaration, if known

        """
        super().__init__(
            f"property '{property_name}' of interface '{interface}' is "
            "redeclared with a different type or optionality"
        )
        self.interface = interface
        self.property_name = property_name
        self.line = line

    @override
    def __str__(self) -> str:
        """Return message with line context."""
        base_message = super().__str__()
        if self.line is not None:
            return f"{base_message} (line {self.line})"
        return base_message


class GenerationError(TsGuardError):
    """Raised when guard generation fails."""

    pass


class ConfigError(TsGuardError):
    """Raised when configuration is invalid."""

    pass
