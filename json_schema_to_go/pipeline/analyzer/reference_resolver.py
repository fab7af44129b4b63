"""
Deferred reference resolver.

Retries the nodes the builder could not complete on first visit (a $ref
to a type that did not exist yet, or a nested type depending on one)
until none is left.
"""

from __future__ import annotations

import logging

from ..errors import UnresolvableReferenceError
from .context import ResolutionContext
from .type_builder import TypeGraphBuilder

logger = logging.getLogger(__name__)


class DeferredReferenceResolver:
    """Drains the deferred entries of a resolution context."""

    def __init__(self, context: ResolutionContext, builder: TypeGraphBuilder):
        """
        Initialize the resolver.

        Args:
            context: Shared resolution state holding the deferred entries
            builder: Builder used to retry each entry
        """
        self.context = context
        self.builder = builder

    def drain(self) -> None:
        """
        Retry deferred entries in rounds until none is left.

        Each round takes a snapshot of the pending paths, retries each of
        them, then compares what is still pending with the snapshot.

        Raises:
            UnresolvableReferenceError: If a round ends with the same pending
                paths it started with
        """
        round_number = 0

        while self.context.deferred:
            round_number += 1
            pending = list(self.context.deferred)

            for path in pending:
                # An earlier retry in this round may already have resolved it
                entry = self.context.deferred.get(path)
                if entry is None:
                    continue
                self.builder.resolve(entry.node, entry.name, entry.description, path, entry.parent_path)

            remaining = set(self.context.deferred)
            logger.debug(
                "Deferred round %d: %d pending, %d left",
                round_number,
                len(pending),
                len(remaining),
            )

            if remaining == set(pending):
                raise UnresolvableReferenceError(pending)
