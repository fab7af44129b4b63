"""JSON Schema to Go Generator

A Python package for generating Go type declarations from JSON Schema
definitions, with shared $ref types, recursive definitions and
deterministic, collision-free type names.
"""

__version__ = "1.0.0"
__author__ = "François Lagunas"

from .pipeline import (
    AmbiguousNameError,
    AtomicWriter,
    CodeGeneratorConfig,
    CodeWriteError,
    FormatterConfig,
    IdentifierError,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
    SchemaParseError,
    SchemaResolutionError,
    UnresolvableReferenceError,
    UnsupportedSchemaError,
)

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "FormatterConfig",
    "OutputConfig",
    "OutputMode",
    "AtomicWriter",
    "SchemaResolutionError",
    "SchemaParseError",
    "UnsupportedSchemaError",
    "IdentifierError",
    "UnresolvableReferenceError",
    "AmbiguousNameError",
    "CodeWriteError",
]
