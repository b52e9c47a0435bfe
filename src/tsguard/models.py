"""Data models for extracted interface definitions."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PrimitiveKind(str, Enum):
    """Primitive keyword types a property annotation may resolve to."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    BIGINT = "bigint"
    SYMBOL = "symbol"
    UNDEFINED = "undefined"
    NULL = "null"
    VOID = "void"
    ANY = "any"
    UNKNOWN = "unknown"
    NEVER = "never"
    OBJECT = "object"


class PropertyDefinition(BaseModel):
    """A property signature of an interface."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    kind: PrimitiveKind | None = None
    optional: bool = False


class InterfaceDefinition(BaseModel):
    """An interface declaration with its properties in declaration order."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    properties: list[PropertyDefinition] = []
    line: int | None = None  # 1-based, diagnostics only
