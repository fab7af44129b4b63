"""
Pipeline - JSON Schema to Go type generator.

This module provides a multi-phase architecture for generating Go type
declarations from JSON schemas:

1. Phase 1 (Parser): Parse JSON Schema into Schema AST
2. Phase 2 (Analyzer): Build the type graph, resolve deferred references,
   disambiguate names and order the types (IR)
3. Phase 3 (Backend): Render the IR as Go source with Jinja2 templates
4. Phase 4 (Formatter): Optional post-processing with gofmt
5. Phase 5 (Writer): Atomic write of the result
"""

from __future__ import annotations

from .config import CodeGeneratorConfig, FormatterConfig, OutputConfig, OutputMode
from .errors import (
    AmbiguousNameError,
    CodeWriteError,
    IdentifierError,
    SchemaParseError,
    SchemaResolutionError,
    UnresolvableReferenceError,
    UnsupportedSchemaError,
)
from .generator import PipelineGenerator
from .writer import AtomicWriter

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
