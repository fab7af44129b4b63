"""
Tests for the type graph builder: first-pass resolution of schema nodes.
"""

from __future__ import annotations

import pytest

from json_schema_to_go.pipeline.analyzer import (
    NameResolver,
    ResolutionContext,
    TypeGraphBuilder,
    TypeKind,
)
from json_schema_to_go.pipeline.config import CodeGeneratorConfig
from json_schema_to_go.pipeline.errors import UnsupportedSchemaError
from json_schema_to_go.pipeline.schema_ast import SchemaParser


def build(schema, root_name="root", **config_kwargs):
    """Run the first pass only, returning the context it filled."""
    config = CodeGeneratorConfig(**config_kwargs)
    context = ResolutionContext()
    builder = TypeGraphBuilder(context, NameResolver(config), root_name)
    root = SchemaParser().parse(schema)
    result = builder.resolve(root, root_name, root.description, "#", "")
    return context, builder, result


def test_root_is_nullable_and_named_after_root_name():
    context, _, result = build({"type": "object", "properties": {"a": {"type": "string"}}}, root_name="order")

    assert result == "#"
    root = context.descriptors["#"]
    assert root.name == "order"
    assert root.kind == TypeKind.STRUCT
    assert root.nullable
    assert [f.name for f in root.fields] == ["A"]


def test_root_description_becomes_comment():
    context, _, _ = build({"type": "string", "description": "An identifier."})
    assert context.descriptors["#"].comment == "An identifier."
    assert context.descriptors["#"].primitive == "string"


def test_fields_sorted_by_name_with_required_flags():
    context, _, _ = build(
        {
            "type": "object",
            "required": ["zeta"],
            "properties": {
                "zeta": {"type": "integer"},
                "alpha": {"type": ["number", "null"]},
                "mid_value": {"type": "boolean"},
            },
        }
    )

    fields = context.descriptors["#"].fields
    assert [f.name for f in fields] == ["Alpha", "MidValue", "Zeta"]
    assert [f.property_name for f in fields] == ["alpha", "mid_value", "zeta"]
    assert [f.required for f in fields] == [False, False, True]
    assert [f.nullable for f in fields] == [True, False, False]
    assert [f.primitive for f in fields] == ["number", "boolean", "integer"]


def test_forward_reference_is_deferred():
    context, _, _ = build(
        {
            "definitions": {
                "a": {"$ref": "#/definitions/b"},
                "b": {"type": "string"},
            }
        }
    )

    assert list(context.deferred) == ["#/definitions/a"]
    assert context.lookup("#/definitions/a") is None
    assert context.lookup("#/definitions/b") == "#/definitions/b"


def test_reference_becomes_alias_once_resolved():
    context, builder, _ = build(
        {
            "definitions": {
                "a": {"$ref": "#/definitions/b"},
                "b": {"type": "string"},
            }
        }
    )

    entry = context.deferred["#/definitions/a"]
    result = builder.resolve(entry.node, entry.name, entry.description, "#/definitions/a", entry.parent_path)

    assert result == "#/definitions/b"
    assert context.aliases == {"#/definitions/a": "#/definitions/b"}
    assert "#/definitions/a" not in context.descriptors
    assert not context.deferred


def test_self_reference_resolves_against_claimed_root():
    context, _, result = build({"type": "object", "properties": {"next": {"$ref": "#"}}})

    assert result == "#"
    assert not context.deferred
    (field,) = context.descriptors["#"].fields
    assert field.kind == TypeKind.REFERENCE
    assert field.type_ref == "#"
    assert field.nullable


def test_reference_field_takes_target_nullability():
    context, _, _ = build(
        {
            "type": "object",
            "properties": {"note": {"$ref": "#/definitions/note"}},
            "definitions": {"note": {"type": ["string", "null"]}},
        }
    )

    (field,) = context.descriptors["#"].fields
    assert field.type_ref == "#/definitions/note"
    assert field.nullable


def test_nested_object_gets_its_own_type():
    context, _, _ = build(
        {
            "type": "object",
            "properties": {
                "billing_address": {
                    "type": "object",
                    "properties": {"city": {"type": "string"}},
                }
            },
        }
    )

    nested = context.descriptors["#/properties/billing_address"]
    assert nested.name == "billingAddress"
    assert nested.original_name == "BillingAddress"
    assert nested.parent_path == "#"
    assert nested.kind == TypeKind.STRUCT

    (field,) = context.descriptors["#"].fields
    assert field.kind == TypeKind.REFERENCE
    assert field.type_ref == "#/properties/billing_address"


def test_title_takes_precedence_over_property_name():
    context, _, _ = build(
        {
            "type": "object",
            "properties": {
                "home": {
                    "title": "Place",
                    "type": "object",
                    "properties": {"city": {"type": "string"}},
                }
            },
        },
        export_types=True,
    )

    assert context.descriptors["#/properties/home"].name == "Place"
    assert context.descriptors["#"].fields[0].name == "Place"


def test_collection_element_named_after_singular_property():
    context, _, _ = build(
        {
            "type": "object",
            "properties": {
                "Items": {
                    "type": "array",
                    "items": {"type": "object", "properties": {"sku": {"type": "string"}}},
                }
            },
        },
        export_types=True,
    )

    element = context.descriptors["#/properties/Items/items"]
    assert element.name == "Item"
    assert element.parent_path == "#"

    (field,) = context.descriptors["#"].fields
    assert field.kind == TypeKind.COLLECTION
    assert field.type_ref == "#/properties/Items/items"


def test_single_element_tuple_items():
    context, _, _ = build({"type": "array", "items": [{"type": "object", "properties": {"a": {"type": "string"}}}]})

    root = context.descriptors["#"]
    assert root.kind == TypeKind.COLLECTION
    assert root.element_ref == "#/items/0"


def test_heterogeneous_tuple_items_are_untyped():
    context, _, _ = build({"type": "array", "items": [{"type": "string"}, {"type": "integer"}]})

    root = context.descriptors["#"]
    assert root.kind == TypeKind.COLLECTION
    assert root.element_ref == ""
    assert root.primitive == "any"


def test_map_of_primitive():
    context, _, _ = build({"type": "object", "additionalProperties": {"type": "integer"}}, root_name="counts")

    root = context.descriptors["#"]
    assert root.kind == TypeKind.MAP
    element = context.descriptors[root.element_ref]
    assert root.element_ref == "#/additionalProperties"
    assert element.name == "count"
    assert element.primitive == "integer"


def test_object_without_properties_or_schema_is_map_of_any():
    context, _, _ = build({"type": "object", "properties": {"extra": {"type": "object"}}})

    (field,) = context.descriptors["#"].fields
    assert field.kind == TypeKind.MAP
    assert field.primitive == "any"


def test_date_time_sets_time_import():
    context, _, _ = build({"type": "object", "properties": {"created": {"type": "string", "format": "date-time"}}})

    assert context.needs_time_import
    assert context.descriptors["#"].fields[0].primitive == "timestamp"


def test_no_time_import_without_date_time():
    context, _, _ = build({"type": "object", "properties": {"created": {"type": "string", "format": "date"}}})
    assert not context.needs_time_import


def test_properties_with_additional_properties_schema_is_rejected():
    with pytest.raises(UnsupportedSchemaError):
        build(
            {
                "type": "object",
                "properties": {"a": {"type": "string"}},
                "additionalProperties": {"type": "string"},
            }
        )


def test_properties_with_boolean_additional_properties_is_a_struct():
    context, _, _ = build(
        {
            "type": "object",
            "properties": {"a": {"type": "string"}},
            "additionalProperties": False,
        }
    )
    assert context.descriptors["#"].kind == TypeKind.STRUCT


def test_definitions_are_parented_at_their_container():
    context, _, _ = build({"$defs": {"point": {"type": "object", "properties": {"x": {"type": "number"}}}}})

    point = context.descriptors["#/$defs/point"]
    assert point.parent_path == "#"
    assert point.name == "point"


def test_fields_after_a_deferred_one_are_still_claimed():
    context, _, result = build(
        {
            "type": "object",
            "properties": {
                "first": {"$ref": "#/properties/second"},
                "second": {"type": "object", "properties": {"c": {"type": "string"}}},
            },
        }
    )

    assert result is None
    assert list(context.deferred) == ["#"]
    assert context.descriptors["#/properties/second"].kind == TypeKind.STRUCT
