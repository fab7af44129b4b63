"""
JSON Schema parser that builds an AST.

Phase 1 of the pipeline: Parse JSON Schema into an AST without
resolving references or doing language-specific processing.
"""

from __future__ import annotations

from typing import Any

from ..errors import SchemaParseError, UnsupportedSchemaError
from .nodes import (
    NULL,
    AbsentType,
    NullableUnionType,
    SchemaNode,
    SingleType,
    TypeSpec,
)


class SchemaParser:
    """Parses JSON Schema into an AST."""

    def parse(self, schema: dict[str, Any] | bool) -> SchemaNode:
        """
        Parse a JSON Schema document into its root node.

        Args:
            schema: The JSON Schema dictionary

        Returns:
            The root SchemaNode
        """
        return self._parse_schema_node(schema, "#")

    def _parse_schema_node(self, schema: Any, path: str) -> SchemaNode:
        """
        Parse a schema node recursively.

        Args:
            schema: The schema dictionary (or boolean schema)
            path: Current path in schema (for error messages)

        Returns:
            The parsed SchemaNode
        """
        # true/false schemas carry no type information
        if isinstance(schema, bool):
            return SchemaNode()

        if not isinstance(schema, dict):
            raise SchemaParseError(f"Schema at {path} must be an object, got {type(schema).__name__}")

        ref = self._get_string(schema, "$ref")
        if ref and not ref.startswith("#"):
            raise UnsupportedSchemaError(f"External reference {ref!r} at {path} is not supported")

        return SchemaNode(
            title=self._get_string(schema, "title"),
            description=self._get_string(schema, "description"),
            type_spec=self._parse_type_spec(schema.get("type")),
            required=self._parse_required(schema.get("required")),
            properties=self._parse_schema_map(schema, "properties", path),
            items=self._parse_items(schema.get("items"), path),
            format=self._get_string(schema, "format"),
            definitions=self._parse_schema_map(schema, "definitions", path),
            defs=self._parse_schema_map(schema, "$defs", path),
            additional_properties=self._parse_additional_properties(schema.get("additionalProperties"), path),
            ref=ref,
        )

    def _get_string(self, schema: dict[str, Any], key: str) -> str:
        value = schema.get(key)
        return value if isinstance(value, str) else ""

    def _parse_type_spec(self, type_value: Any) -> TypeSpec:
        """
        Decide once what a "type" keyword means.

        A one-element list is a single type; a two-element list containing
        "null" is a nullable type. Anything else (missing, other unions,
        non-strings) is left untyped.
        """
        if isinstance(type_value, str):
            return SingleType(type_value)

        if isinstance(type_value, list) and all(isinstance(t, str) for t in type_value):
            if len(type_value) == 1:
                return SingleType(type_value[0])
            if len(type_value) == 2 and NULL in type_value:
                other = type_value[1] if type_value[0] == NULL else type_value[0]
                return NullableUnionType(other)

        return AbsentType()

    def _parse_schema_map(self, schema: dict[str, Any], key: str, path: str) -> dict[str, SchemaNode]:
        """Parse a name -> schema mapping such as properties or definitions."""
        value = schema.get(key)
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise SchemaParseError(f"'{key}' at {path} must be an object")

        return {name: self._parse_schema_node(child, f"{path}/{key}/{name}") for name, child in value.items()}

    def _parse_items(self, items: Any, path: str) -> SchemaNode | tuple[SchemaNode, ...] | None:
        """Parse "items": a single schema or a tuple of schemas."""
        if items is None:
            return None

        if isinstance(items, list):
            return tuple(self._parse_schema_node(item, f"{path}/items/{i}") for i, item in enumerate(items))

        return self._parse_schema_node(items, f"{path}/items")

    def _parse_additional_properties(self, value: Any, path: str) -> bool | SchemaNode | None:
        """Parse "additionalProperties": a boolean or a schema."""
        if value is None or isinstance(value, bool):
            return value

        return self._parse_schema_node(value, f"{path}/additionalProperties")

    def _parse_required(self, value: Any) -> tuple[str, ...]:
        # draft-03 style boolean "required" is ignored
        if not isinstance(value, list):
            return ()
        return tuple(name for name in value if isinstance(name, str))
