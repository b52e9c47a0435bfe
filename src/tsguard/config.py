"""Configuration for guard generation."""

from __future__ import annotations

import codecs
from enum import Enum
from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from tsguard.errors import ConfigError

FILE_TOKEN = "<FILE>"
STDOUT_PATTERN = "-"


class DebugOption(str, Enum):
    """Debug outputs that can be requested from the command line."""

    AST = "ast"


class GuardGenConfig(BaseModel):
    """Configuration for a guard generation run with Pydantic validation.

    Immutable and strict: unknown keys in a configuration file are rejected
    rather than ignored.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    output_pattern: str = Field(
        default=f"{FILE_TOKEN}-guard.ts",
        description=(
            f"Output file name pattern; '{FILE_TOKEN}' is replaced by the input "
            f"file name without extension, '{STDOUT_PATTERN}' writes to stdout"
        ),
    )
    output_dir: Path | None = Field(
        default=None,
        description="Directory output paths are resolved against (default: cwd)",
    )
    encoding: str = Field(
        default="utf-8",
        description="Text encoding used to read sources and write guards",
    )
    dialect: str | None = Field(
        default=None,
        description="TypeScript dialect ('typescript' or 'tsx'); detected if None",
    )
    debug: list[DebugOption] = Field(
        default_factory=list,
        description="Debug outputs to print before generation",
    )

    @field_validator("output_pattern")
    @classmethod
    def validate_output_pattern(cls, v: str) -> str:
        """Reject empty output patterns."""
        if not v.strip():
            raise ValueError("output_pattern must not be empty")
        return v

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Validate that the encoding is known to Python."""
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v

    @field_validator("dialect")
    @classmethod
    def validate_dialect(cls, v: str | None) -> str | None:
        """Validate and normalise the dialect name."""
        if v is None:
            return None
        normalised = v.strip().lower()
        allowed = ["typescript", "tsx"]
        if normalised not in allowed:
            raise ValueError(f"dialect must be one of {allowed}, got: {v}")
        return normalised

    @property
    def writes_to_stdout(self) -> bool:
        """Whether generated guards go to stdout instead of files."""
        return self.output_pattern == STDOUT_PATTERN

    def dumps_ast(self) -> bool:
        """Whether the syntax tree debug dump was requested."""
        return DebugOption.AST in self.debug

    @classmethod
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create configuration from a properties dictionary.

        Args:
            properties: Raw properties, e.g. from a YAML file or CLI options

        Returns:
            Validated configuration object

        Raises:
            ConfigError: If validation fails

        """
        try:
            return cls.model_validate(properties)
        except ValidationError as e:
            raise ConfigError(f"Invalid tsguard configuration: {e}") from e
        except ValueError as e:
            raise ConfigError(f"Invalid tsguard configuration: {e}") from e


def load_config_file(config_path: Path) -> dict[str, Any]:
    """Load configuration properties from a YAML file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        Properties dictionary (empty for an empty file)

    Raises:
        ConfigError: If the file cannot be read or parsed

    """
    try:
        with open(config_path, encoding="utf-8") as f:
            properties = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse YAML config {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config file {config_path}: {e}") from e

    if properties is None:
        return {}
    if not isinstance(properties, dict):
        raise ConfigError(f"Invalid configuration format in {config_path}")
    return properties  # type: ignore[return-value]
