"""
Go code generation backend.

Generates Go type declarations from IR.
"""

from __future__ import annotations

from typing import Any

from ..analyzer.ir_nodes import IR, FieldDescriptor, TypeDescriptor, TypeKind
from .base import CodeBackend

GO_ANY = "interface{}"


class GoBackend(CodeBackend):
    """Go code generation backend."""

    TEMPLATE_LANG = "go"
    FILE_EXTENSION = "go"

    TYPE_MAP = {
        "string": "string",
        "integer": "int",
        "number": "float64",
        "boolean": "bool",
        "timestamp": "time.Time",
        "null": GO_ANY,
        "any": GO_ANY,
    }

    def generate(self, ir: IR) -> str:
        """Generate Go code from IR."""
        prefix = self.prefix_template.render(
            package_name=ir.package_name,
            generation_comment=ir.generation_comment,
            needs_time_import=ir.needs_time_import,
        )

        declarations = [self.type_template.render(self._prepare_type_context(d, ir.table)) for d in ir.types]

        return prefix + "\n".join(declarations)

    def translate_type(self, descriptor: TypeDescriptor, table: dict[str, TypeDescriptor]) -> str:
        """Translate a descriptor to the type on the right of its declaration."""
        if descriptor.kind == TypeKind.STRUCT:
            return "struct"

        return self._translate_shape(descriptor.kind, descriptor.element_ref, descriptor.primitive, table)

    def translate_field_type(self, field: FieldDescriptor, table: dict[str, TypeDescriptor]) -> str:
        """Translate a field type; nullable fields become pointers."""
        result = self._translate_shape(field.kind, field.type_ref, field.primitive, table)

        if field.nullable and result != GO_ANY:
            result = "*" + result

        return result

    def _translate_shape(self, kind: TypeKind, type_ref: str, primitive: str, table: dict[str, TypeDescriptor]) -> str:
        element = table[type_ref].name if type_ref else self.TYPE_MAP.get(primitive, GO_ANY)

        if kind == TypeKind.COLLECTION:
            return "[]" + element
        if kind == TypeKind.MAP:
            return "map[string]" + element
        return element

    def _struct_tag(self, field: FieldDescriptor) -> str:
        options = "" if field.required else ",omitempty"
        return f'`json:"{field.property_name}{options}"`'

    def _prepare_type_context(self, descriptor: TypeDescriptor, table: dict[str, TypeDescriptor]) -> dict[str, Any]:
        """
        Prepare the template context for one type declaration.

        Field names and types are padded into columns the way gofmt
        aligns them.
        """
        fields = []
        if descriptor.kind == TypeKind.STRUCT:
            rows = [(f.name, self.translate_field_type(f, table), self._struct_tag(f)) for f in descriptor.fields]
            name_width = max((len(name) for name, _, _ in rows), default=0)
            type_width = max((len(type_str) for _, type_str, _ in rows), default=0)
            for name, type_str, tag in rows:
                fields.append(
                    {
                        "NAME": name.ljust(name_width),
                        "TYPE": type_str.ljust(type_width),
                        "TAG": tag,
                    }
                )

        return {
            "COMMENT_LINES": self._comment_lines(descriptor.comment),
            "NAME": descriptor.name,
            "TYPE": self.translate_type(descriptor, table),
            "IS_STRUCT": descriptor.kind == TypeKind.STRUCT,
            "FIELDS": fields,
            "INDENT": "\t",
        }
