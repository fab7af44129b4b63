"""
Name resolver for case conversion and naming collisions.

NameResolver applies the naming policy (export casing, prefix, root name)
to turn schema strings into Go identifiers. NameDeduplicator renames types
whose generated names collide, using the names of their parents.
"""

from __future__ import annotations

import logging

from ...utils import generate_identifier
from ..config import CodeGeneratorConfig
from ..errors import AmbiguousNameError, IdentifierError
from .context import ResolutionContext

logger = logging.getLogger(__name__)


class NameResolver:
    """Generates type and field names according to the configuration."""

    def __init__(self, config: CodeGeneratorConfig):
        """
        Initialize the resolver.

        Args:
            config: Code generation configuration
        """
        self.config = config

    def type_name(self, original_name: str) -> str:
        """Name of a non-root type."""
        if self.config.exports_type_names:
            name = generate_identifier(original_name, True)
            if name:
                name = self.config.type_name_prefix + name
        else:
            name = generate_identifier(original_name, False)

        if not name:
            raise IdentifierError(f"Can't generate type without name (from {original_name!r})")
        return name

    def field_name(self, original_name: str) -> str:
        """Name of a struct field; fields are always exported."""
        name = generate_identifier(original_name, True)
        if not name:
            raise IdentifierError(f"Can't generate field without name (from {original_name!r})")
        return name

    def root_name(self, default_name: str) -> str:
        """Name of the root type: the configured one, or derived from default_name."""
        name = self.config.root_type_name or generate_identifier(default_name, self.config.export_types)
        if not name:
            raise IdentifierError(f"Can't generate root type name (from {default_name!r})")
        return name


class NameDeduplicator:
    """Makes generated type names unique by prefixing them with their parent's name."""

    def __init__(self, context: ResolutionContext, names: NameResolver):
        self.context = context
        self.names = names

    def deduplicate(self) -> None:
        """
        Rename colliding types until every name is claimed by a single path.

        Each round works on the names colliding at its start. A type whose
        parent collides in the same round waits for a later round, so that
        it is renamed after its parent's name is settled.

        Raises:
            AmbiguousNameError: If a colliding type has no named parent
        """
        registry = self.context.names
        round_number = 0

        while True:
            registry.drop_unique()
            if not len(registry):
                break

            round_number += 1
            colliding = registry.take_all()
            colliding_paths = {path for paths in colliding.values() for path in paths}
            new_names = set()
            renamed = 0

            for name, paths in colliding.items():
                for path in paths:
                    descriptor = self.context.descriptors[path]
                    parent = self.context.descriptors.get(descriptor.parent_path)

                    if parent is not None and parent.path in colliding_paths:
                        registry.add(descriptor.name, path)
                        continue

                    if parent is None or not parent.original_name:
                        raise AmbiguousNameError(paths)

                    descriptor.original_name = f"{parent.original_name}-{descriptor.original_name}"
                    descriptor.name = self.names.type_name(descriptor.original_name)
                    new_names.add(descriptor.name)
                    renamed += 1
                    logger.debug("Renamed %s from %s to %s", path, name, descriptor.name)

            if not renamed:
                raise AmbiguousNameError(colliding_paths)

            # A new name may clash with a type that was already unique. Holders
            # are looked up once the round is over, when every rename is done.
            for new_name in new_names:
                for other in self._paths_named(new_name):
                    registry.add(new_name, other)

            logger.debug("Deduplication round %d renamed %d types", round_number, renamed)

    def _paths_named(self, name: str) -> list[str]:
        return [path for path, descriptor in self.context.descriptors.items() if descriptor.name == name]
