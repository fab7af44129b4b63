"""
Errors raised by the generator pipeline.

The engine never partially succeeds: every failure is raised as one of
these exceptions and handled once, by the caller (the CLI turns them
into a non-zero exit).
"""

from __future__ import annotations

from collections.abc import Iterable


class SchemaResolutionError(Exception):
    """Base class for all errors raised while turning a schema into types."""


class SchemaParseError(SchemaResolutionError):
    """Raised when a schema node has a shape the parser cannot read."""


class UnsupportedSchemaError(SchemaResolutionError):
    """Raised for schema constructs the generator deliberately does not handle.

    This covers external (non-local) $ref values and objects that declare
    both properties and an additionalProperties schema.
    """


class IdentifierError(SchemaResolutionError):
    """Raised when a name has no letter, digit or underscore left to build an identifier."""


class _PathSetError(SchemaResolutionError):
    def __init__(self, message: str, paths: Iterable[str]):
        self.paths = sorted(paths)
        super().__init__(f"{message}: ({' '.join(self.paths)})")


class UnresolvableReferenceError(_PathSetError):
    """Raised when deferred types stop making progress.

    Either a $ref points to a path that never resolves, or definitions
    reference each other without any resolvable base case.
    """

    def __init__(self, paths: Iterable[str]):
        super().__init__("Can't resolve", paths)


class AmbiguousNameError(_PathSetError):
    """Raised when colliding type names cannot be disambiguated by their parents."""

    def __init__(self, paths: Iterable[str]):
        super().__init__("Can't disambiguate", paths)


class CodeWriteError(Exception):
    """Raised when generated code fails validation before being written.

    This can happen when:
    - The package clause is missing
    - Braces are unbalanced
    """
