"""
IR (Intermediate Representation) node definitions.

These nodes represent the analyzed and resolved schema, ready for
code generation. All references are resolved and names are unique.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TypeKind(Enum):
    """Kind of type in the IR."""

    PRIMITIVE = "primitive"  # string, int, float64, bool, time.Time, interface{}
    STRUCT = "struct"  # struct with fields
    COLLECTION = "collection"  # []T
    MAP = "map"  # map[string]T
    REFERENCE = "reference"  # another descriptor, used as is


@dataclass
class FieldDescriptor:
    """A field of a struct type."""

    name: str = ""
    kind: TypeKind = TypeKind.PRIMITIVE

    # Category of the value (or of its elements) when it is a primitive
    primitive: str = ""

    # Path of the referenced descriptor (REFERENCE) or of the element type
    type_ref: str = ""

    nullable: bool = False
    property_name: str = ""  # Original JSON property name
    required: bool = False


@dataclass
class TypeDescriptor:
    """A resolved type, one per schema path."""

    path: str = ""
    name: str = ""
    kind: TypeKind = TypeKind.PRIMITIVE

    # Category when the type (or its elements) is a primitive
    primitive: str = ""

    # Path of the element type for collections and maps
    element_ref: str = ""

    nullable: bool = False
    fields: list[FieldDescriptor] = field(default_factory=list)
    comment: str = ""

    # Name before disambiguation, extended with parent names when renamed
    original_name: str = ""

    # Path of the structural parent ("" for the document root)
    parent_path: str = ""


@dataclass
class IR:
    """The complete Intermediate Representation."""

    root_name: str = ""
    package_name: str = "main"

    # Generation comment
    generation_comment: str = ""

    # All type descriptors, ordered by name
    types: list[TypeDescriptor] = field(default_factory=list)

    # Path -> descriptor, for following references
    table: dict[str, TypeDescriptor] = field(default_factory=dict)

    # Whether a date-time field requires the "time" import
    needs_time_import: bool = False
