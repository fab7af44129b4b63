"""
Schema analyzer that transforms AST to IR.

Phase 2 of the pipeline: build the type graph, retry deferred
references, disambiguate names and order the result.
"""

from __future__ import annotations

import logging
from collections import Counter

from ..config import CodeGeneratorConfig
from ..errors import AmbiguousNameError
from ..schema_ast.nodes import ROOT_PATH, SchemaNode
from .context import ResolutionContext
from .ir_nodes import IR, TypeDescriptor
from .name_resolver import NameDeduplicator, NameResolver
from .reference_resolver import DeferredReferenceResolver
from .type_builder import TypeGraphBuilder

logger = logging.getLogger(__name__)


class SchemaAnalyzer:
    """Analyzes schema AST and builds IR."""

    def __init__(self, config: CodeGeneratorConfig):
        """
        Initialize the analyzer.

        Args:
            config: Code generation configuration
        """
        self.config = config
        self.name_resolver = NameResolver(config)

        # Will be set during analysis
        self.context: ResolutionContext | None = None

    def analyze(self, root: SchemaNode, default_root_name: str) -> IR:
        """
        Analyze the AST and build IR.

        Args:
            root: The parsed root schema node
            default_root_name: Name the root type is derived from when
                no root type name is configured (usually the schema file name)

        Returns:
            IR ready for code generation
        """
        root_name = self.name_resolver.root_name(default_root_name)
        self.context = ResolutionContext()
        builder = TypeGraphBuilder(self.context, self.name_resolver, root_name)

        # First pass: every node reachable from the root, deferring what can't resolve yet
        builder.resolve(root, root_name, root.description, ROOT_PATH, "")

        # Second pass: retry deferred nodes until the fixpoint
        DeferredReferenceResolver(self.context, builder).drain()

        # Third pass: make names unique
        NameDeduplicator(self.context, self.name_resolver).deduplicate()

        types = self.order_types(self.context.descriptors.values())
        self._check_unique_names(types)
        logger.info("Resolved %d types for %s", len(types), root_name)

        return IR(
            root_name=root_name,
            package_name=self.config.package_name,
            types=types,
            table=dict(self.context.descriptors),
            needs_time_import=self.context.needs_time_import,
        )

    @staticmethod
    def order_types(descriptors) -> list[TypeDescriptor]:
        """Deterministic emission order: by name, fields already sorted by name."""
        return sorted(descriptors, key=lambda d: d.name)

    def _check_unique_names(self, types: list[TypeDescriptor]) -> None:
        counts = Counter(d.name for d in types)
        duplicates = [d.path for d in types if counts[d.name] > 1]
        if duplicates:
            raise AmbiguousNameError(duplicates)
