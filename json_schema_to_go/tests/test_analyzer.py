"""
Tests for the schema analyzer (Phase 2): the complete resolution run.
"""

from __future__ import annotations

import pytest

from json_schema_to_go.pipeline.analyzer import SchemaAnalyzer, TypeKind
from json_schema_to_go.pipeline.config import CodeGeneratorConfig
from json_schema_to_go.pipeline.errors import (
    IdentifierError,
    UnresolvableReferenceError,
    UnsupportedSchemaError,
)
from json_schema_to_go.pipeline.schema_ast import SchemaParser


def analyze(schema, name="root", **config_kwargs):
    config = CodeGeneratorConfig(**config_kwargs)
    root = SchemaParser().parse(schema)
    return SchemaAnalyzer(config).analyze(root, name)


def field(descriptor, name):
    return next(f for f in descriptor.fields if f.name == name)


SHARED_ADDRESS = {
    "type": "object",
    "properties": {
        "shipping": {"$ref": "#/definitions/address"},
        "billing": {"$ref": "#/definitions/address"},
    },
    "definitions": {
        "address": {
            "type": "object",
            "required": ["street"],
            "properties": {"street": {"type": "string"}},
        }
    },
}


def test_analysis_is_deterministic():
    first = analyze(SHARED_ADDRESS, "order")
    second = analyze(SHARED_ADDRESS, "order")

    assert first.types == second.types
    assert [d.name for d in first.types] == [d.name for d in second.types]


def test_types_ordered_by_name():
    ir = analyze(SHARED_ADDRESS, "order")

    assert [d.name for d in ir.types] == ["address", "order"]
    assert ir.root_name == "order"


def test_shared_reference_yields_one_type():
    ir = analyze(SHARED_ADDRESS, "order")

    assert len(ir.types) == 2
    root = ir.table["#"]
    assert field(root, "Billing").type_ref == "#/definitions/address"
    assert field(root, "Shipping").type_ref == "#/definitions/address"


def test_reference_through_defs():
    ir = analyze(
        {
            "type": "object",
            "properties": {"origin": {"$ref": "#/$defs/point"}},
            "$defs": {"point": {"type": "object", "properties": {"x": {"type": "number"}}}},
        },
        export_types=True,
    )

    assert field(ir.table["#"], "Origin").type_ref == "#/$defs/point"
    assert ir.table["#/$defs/point"].name == "Point"


@pytest.mark.parametrize("type_value", [["string", "null"], ["null", "string"]])
def test_nullable_union_in_either_order(type_value):
    ir = analyze({"type": "object", "properties": {"note": {"type": type_value}}})

    note = field(ir.table["#"], "Note")
    assert note.kind == TypeKind.PRIMITIVE
    assert note.primitive == "string"
    assert note.nullable


@pytest.mark.parametrize("type_value", [["string", "integer"], ["string", "integer", "null"]])
def test_wider_union_is_untyped(type_value):
    ir = analyze({"type": "object", "properties": {"value": {"type": type_value}}})

    value = field(ir.table["#"], "Value")
    assert value.primitive == "any"
    assert not value.nullable


def test_collection_element_singularized():
    ir = analyze(
        {
            "type": "object",
            "properties": {
                "Items": {"type": "array", "items": {"type": "object", "properties": {"sku": {"type": "string"}}}},
                "address": {"type": "array", "items": {"type": "object", "properties": {"city": {"type": "string"}}}},
            },
        }
    )

    assert ir.table["#/properties/Items/items"].name == "item"
    assert ir.table["#/properties/address/items"].name == "addressItem"


def test_root_referencing_itself():
    ir = analyze({"type": "object", "additionalProperties": {"$ref": "#"}}, "tree")

    root = ir.table["#"]
    assert root.kind == TypeKind.MAP
    assert root.element_ref == "#"
    assert root.nullable
    assert [d.path for d in ir.types] == ["#"]


def test_date_time_requires_time_import():
    ir = analyze({"type": "object", "properties": {"at": {"type": "string", "format": "date-time"}}})
    assert ir.needs_time_import

    ir = analyze({"type": "object", "properties": {"at": {"type": "string"}}})
    assert not ir.needs_time_import


def test_package_name_carried_to_ir():
    ir = analyze({"type": "string"}, package_name="models")
    assert ir.package_name == "models"


def test_properties_with_additional_properties_schema():
    with pytest.raises(UnsupportedSchemaError):
        analyze(
            {
                "type": "object",
                "properties": {
                    "nested": {
                        "type": "object",
                        "properties": {"a": {"type": "string"}},
                        "additionalProperties": {"type": "integer"},
                    }
                },
            }
        )


def test_unresolvable_reference():
    with pytest.raises(UnresolvableReferenceError):
        analyze({"type": "object", "properties": {"a": {"$ref": "#/definitions/nope"}}})


def test_unusable_definition_name():
    with pytest.raises(IdentifierError):
        analyze({"definitions": {"$$": {"type": "string"}}})
