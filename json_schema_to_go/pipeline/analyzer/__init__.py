"""
Analyzer module.

Contains type graph building, deferred reference resolution, name
resolution and IR building.
"""

from __future__ import annotations

from .analyzer import SchemaAnalyzer
from .context import DeferredEntry, NameRegistry, ResolutionContext
from .ir_nodes import IR, FieldDescriptor, TypeDescriptor, TypeKind
from .name_resolver import NameDeduplicator, NameResolver
from .reference_resolver import DeferredReferenceResolver
from .type_builder import TypeGraphBuilder

__all__ = [
    "IR",
    "TypeKind",
    "TypeDescriptor",
    "FieldDescriptor",
    "DeferredEntry",
    "NameRegistry",
    "ResolutionContext",
    "NameResolver",
    "NameDeduplicator",
    "TypeGraphBuilder",
    "DeferredReferenceResolver",
    "SchemaAnalyzer",
]
