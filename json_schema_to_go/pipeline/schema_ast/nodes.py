"""
AST node definitions for JSON Schema.

These nodes represent the parsed structure of a JSON Schema before
any reference resolution or language-specific processing. They are
built once by the parser and never modified afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

# Path of the document root; children append "/properties/<name>", "/items", ...
ROOT_PATH = "#"

# Value categories understood by the analyzer
STRING = "string"
INTEGER = "integer"
NUMBER = "number"
BOOLEAN = "boolean"
NULL = "null"
OBJECT = "object"
ARRAY = "array"
ANY = "any"  # untyped value
TIMESTAMP = "timestamp"  # any category with format "date-time"


@dataclass(frozen=True)
class TypeSpec:
    """Base class for the three shapes a "type" keyword can take."""

    nullable: ClassVar[bool] = False

    @property
    def category(self) -> str:
        return ANY


@dataclass(frozen=True)
class AbsentType(TypeSpec):
    """No usable "type": missing, malformed, or a union we can't express."""


@dataclass(frozen=True)
class SingleType(TypeSpec):
    """A single category, e.g. "string" or ["string"]."""

    name: str = ANY

    @property
    def category(self) -> str:
        return self.name


@dataclass(frozen=True)
class NullableUnionType(TypeSpec):
    """A category paired with "null", e.g. ["string", "null"]."""

    nullable: ClassVar[bool] = True

    name: str = ANY

    @property
    def category(self) -> str:
        return self.name


@dataclass(frozen=True)
class SchemaNode:
    """One schema definition (object, array, scalar or reference)."""

    title: str = ""
    description: str = ""
    type_spec: TypeSpec = field(default_factory=AbsentType)
    required: tuple[str, ...] = ()
    properties: dict[str, SchemaNode] = field(default_factory=dict)

    # Single schema, tuple of schemas, or None
    items: SchemaNode | tuple[SchemaNode, ...] | None = None

    format: str = ""

    # "definitions" and "$defs" are kept apart so their paths stay distinct
    definitions: dict[str, SchemaNode] = field(default_factory=dict)
    defs: dict[str, SchemaNode] = field(default_factory=dict)

    # True/False, a schema, or None when absent
    additional_properties: bool | SchemaNode | None = None

    # Local reference, e.g. "#/definitions/Address"
    ref: str = ""

    @property
    def additional_properties_schema(self) -> SchemaNode | None:
        """The additionalProperties schema, if it is one (not a boolean)."""
        if isinstance(self.additional_properties, SchemaNode):
            return self.additional_properties
        return None

    def iter_definitions(self):
        """Yield (path segment, name, node) for every nested definition."""
        for name, node in self.definitions.items():
            yield "definitions", name, node
        for name, node in self.defs.items():
            yield "$defs", name, node
