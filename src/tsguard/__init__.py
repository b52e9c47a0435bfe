"""Runtime type guard generation for TypeScript interfaces.

This package extracts top-level interface declarations from TypeScript
source and generates ``is<Name>(value): value is <Name>`` predicates.

Use in pipeline: SourceReader → InterfaceExtractor → GuardGenerator → GuardWriter
"""

from .annotations import AnnotationResolver
from .config import DebugOption, GuardGenConfig
from .errors import (
    ConfigError,
    ConflictingDeclarationError,
    ExtractionError,
    GenerationError,
    ParserError,
    ReadError,
    SourceSyntaxError,
    TsGuardError,
    UnsupportedSyntaxError,
    UsageError,
)
from .extractor import ExtractionResult, InterfaceExtractor
from .generator import GuardGenerator, guard_name
from .models import InterfaceDefinition, PrimitiveKind, PropertyDefinition
from .parser import TypeScriptParser
from .pipeline import FileOutcome, GuardPipeline

__all__ = [
    # Core
    "AnnotationResolver",
    "ExtractionResult",
    "GuardGenerator",
    "InterfaceExtractor",
    "TypeScriptParser",
    "guard_name",
    # Models
    "InterfaceDefinition",
    "PrimitiveKind",
    "PropertyDefinition",
    # Pipeline
    "DebugOption",
    "FileOutcome",
    "GuardGenConfig",
    "GuardPipeline",
    # Errors
    "ConfigError",
    "ConflictingDeclarationError",
    "ExtractionError",
    "GenerationError",
    "ParserError",
    "ReadError",
    "SourceSyntaxError",
    "TsGuardError",
    "UnsupportedSyntaxError",
    "UsageError",
]
