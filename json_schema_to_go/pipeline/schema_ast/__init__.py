"""
Schema AST (Abstract Syntax Tree) module.

Contains the AST node definitions and parser for JSON Schema.
"""

from __future__ import annotations

from .nodes import (
    ROOT_PATH,
    AbsentType,
    NullableUnionType,
    SchemaNode,
    SingleType,
    TypeSpec,
)
from .parser import SchemaParser

__all__ = [
    "ROOT_PATH",
    "SchemaNode",
    "TypeSpec",
    "AbsentType",
    "SingleType",
    "NullableUnionType",
    "SchemaParser",
]
