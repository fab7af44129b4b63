"""
Resolution state shared by the analyzer components.

A single ResolutionContext is created per analysis and handed to the
builder, the deferred resolver and the deduplicator.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field

from ..schema_ast.nodes import SchemaNode
from .ir_nodes import TypeDescriptor

logger = logging.getLogger(__name__)


@dataclass
class DeferredEntry:
    """A node waiting for one of its dependencies to resolve."""

    node: SchemaNode
    name: str = ""
    description: str = ""
    parent_path: str = ""


class NameRegistry:
    """Maps each generated type name to the paths claiming it."""

    def __init__(self):
        self._paths: dict[str, set[str]] = defaultdict(set)

    def add(self, name: str, path: str) -> None:
        self._paths[name].add(path)

    def remove(self, name: str, path: str) -> None:
        paths = self._paths.get(name)
        if paths is None:
            return
        paths.discard(path)
        if not paths:
            del self._paths[name]

    def drop_unique(self) -> None:
        """Forget every name claimed by a single path."""
        for name in [name for name, paths in self._paths.items() if len(paths) == 1]:
            del self._paths[name]

    def take_all(self) -> dict[str, list[str]]:
        """Empty the registry, returning name -> sorted paths."""
        snapshot = {name: sorted(self._paths[name]) for name in sorted(self._paths)}
        self._paths.clear()
        return snapshot

    def __len__(self) -> int:
        return len(self._paths)


@dataclass
class ResolutionContext:
    """Mutable state of one resolution run."""

    # path -> descriptor; a path may be claimed before it is complete
    descriptors: dict[str, TypeDescriptor] = field(default_factory=dict)

    # path -> entry, in insertion order
    deferred: dict[str, DeferredEntry] = field(default_factory=dict)

    names: NameRegistry = field(default_factory=NameRegistry)

    # $ref paths that resolved to another path
    aliases: dict[str, str] = field(default_factory=dict)

    needs_time_import: bool = False

    def lookup(self, path: str) -> str | None:
        """Return the descriptor path a reference resolves to, if any."""
        # aliases always point at a descriptor path, never at another alias
        path = self.aliases.get(path, path)
        if path in self.descriptors:
            return path
        return None

    def register(self, descriptor: TypeDescriptor) -> None:
        """Claim the descriptor's path and name."""
        previous = self.descriptors.get(descriptor.path)
        if previous is not None and previous.name != descriptor.name:
            self.names.remove(previous.name, descriptor.path)
        self.descriptors[descriptor.path] = descriptor
        self.names.add(descriptor.name, descriptor.path)

    def add_alias(self, path: str, target: str) -> None:
        self.aliases[path] = target

    def defer(self, path: str, entry: DeferredEntry) -> None:
        if path not in self.deferred:
            logger.debug("Deferring %s", path)
        self.deferred[path] = entry

    def resolved(self, path: str) -> None:
        """Mark a path as fully resolved."""
        self.deferred.pop(path, None)
