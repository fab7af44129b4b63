"""
Type graph builder.

Walks schema nodes recursively and produces one TypeDescriptor per
visited path. A node whose dependencies (a $ref target, a nested type)
are not resolved yet is recorded as deferred and reported as unresolved;
every caller up the recursion then defers itself as well.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from ...utils import singularize
from ..errors import UnsupportedSchemaError
from ..schema_ast.nodes import (
    ANY,
    ARRAY,
    OBJECT,
    ROOT_PATH,
    TIMESTAMP,
    SchemaNode,
)
from .context import DeferredEntry, ResolutionContext
from .ir_nodes import FieldDescriptor, TypeDescriptor, TypeKind
from .name_resolver import NameResolver

logger = logging.getLogger(__name__)


class Shape(NamedTuple):
    """Structural kind of a map or collection and what it contains."""

    kind: TypeKind
    element_ref: str = ""
    primitive: str = ""


class TypeGraphBuilder:
    """Builds type descriptors from schema nodes."""

    def __init__(self, context: ResolutionContext, names: NameResolver, root_name: str):
        """
        Initialize the builder.

        Args:
            context: Shared resolution state
            names: Naming policy
            root_name: Name of the type generated for the document root
        """
        self.context = context
        self.names = names
        self.root_name = root_name

    def resolve(
        self,
        node: SchemaNode,
        proposed_name: str,
        proposed_description: str,
        path: str,
        parent_path: str,
    ) -> str | None:
        """
        Resolve a node to the path of its type descriptor.

        Args:
            node: The schema node
            proposed_name: Name to use when the node has no title
            proposed_description: Comment to use when the node has no description
            path: Path of the node in the document
            parent_path: Path of the structural parent

        Returns:
            Path of the descriptor, which differs from path for a $ref,
            or None if the node has been deferred
        """
        self.resolve_definitions(node, path)

        entry = DeferredEntry(node, proposed_name, proposed_description, parent_path)

        # References are aliases: they never get a descriptor of their own
        if node.ref:
            target = self.context.lookup(node.ref)
            if target is None:
                self.context.defer(path, entry)
                return None
            self.context.add_alias(path, target)
            self.context.resolved(path)
            return target

        descriptor = self._new_descriptor(node, proposed_name, proposed_description, path, parent_path)

        # Claim the path first so that recursive references to it resolve
        self.context.register(descriptor)

        if not self._build(descriptor, node):
            self.context.defer(path, entry)
            return None

        self.context.resolved(path)
        return path

    def resolve_definitions(self, node: SchemaNode, path: str) -> None:
        """Resolve nested definitions as independent types parented at path."""
        for keyword, name, definition in node.iter_definitions():
            self.resolve(definition, name, definition.description, f"{path}/{keyword}/{name}", path)

    def _new_descriptor(
        self,
        node: SchemaNode,
        proposed_name: str,
        proposed_description: str,
        path: str,
        parent_path: str,
    ) -> TypeDescriptor:
        descriptor = TypeDescriptor(
            path=path,
            parent_path=parent_path,
            comment=node.description or proposed_description,
            nullable=node.type_spec.nullable,
        )

        if path == ROOT_PATH:
            # Avoid the recursive type problem, at least for the root type
            descriptor.nullable = True
            descriptor.original_name = self.root_name
            descriptor.name = self.root_name
        else:
            descriptor.original_name = node.title or proposed_name
            descriptor.name = self.names.type_name(descriptor.original_name)

        return descriptor

    def _category(self, node: SchemaNode) -> str:
        """Value category of a node, with date-time taking precedence."""
        if node.format == "date-time":
            self.context.needs_time_import = True
            return TIMESTAMP
        return node.type_spec.category

    def _build(self, descriptor: TypeDescriptor, node: SchemaNode) -> bool:
        """Fill in the descriptor's kind, element and fields. False if deferred."""
        category = self._category(node)
        path = descriptor.path

        if category == OBJECT and node.properties:
            self._check_object(node, path)
            descriptor.kind = TypeKind.STRUCT
            fields = self._build_fields(node, path)
            if fields is None:
                return False
            descriptor.fields = fields
            return True

        if category in (OBJECT, ARRAY):
            shape = self._container_shape(node, category, singularize(descriptor.original_name), path, path)
            if shape is None:
                return False
            descriptor.kind, descriptor.element_ref, descriptor.primitive = shape
            return True

        descriptor.kind = TypeKind.PRIMITIVE
        descriptor.primitive = category
        return True

    def _check_object(self, node: SchemaNode, path: str) -> None:
        if node.additional_properties_schema is not None:
            raise UnsupportedSchemaError(f"Object at {path} declares both properties and an additionalProperties schema")

    def _container_shape(
        self,
        node: SchemaNode,
        category: str,
        element_name: str,
        path: str,
        parent_path: str,
    ) -> Shape | None:
        """
        Shape of a map (object without properties) or collection (array) node.

        The element type is resolved at path + "/additionalProperties",
        path + "/items" or path + "/items/0", with parent_path as its parent.
        Returns None if the element type is deferred.
        """
        if category == OBJECT:
            element = node.additional_properties_schema
            element_path = f"{path}/additionalProperties"
            kind = TypeKind.MAP
        else:
            element, element_path = self._single_items(node, path)
            kind = TypeKind.COLLECTION

        if element is None:
            return Shape(kind, primitive=ANY)

        element_ref = self.resolve(element, element_name, node.description, element_path, parent_path)
        if element_ref is None:
            return None
        return Shape(kind, element_ref=element_ref)

    def _single_items(self, node: SchemaNode, path: str) -> tuple[SchemaNode | None, str]:
        """The homogeneous item schema of an array, if there is one."""
        if isinstance(node.items, SchemaNode):
            return node.items, f"{path}/items"
        if isinstance(node.items, tuple) and len(node.items) == 1:
            return node.items[0], f"{path}/items/0"
        return None, ""

    def _build_fields(self, node: SchemaNode, path: str) -> list[FieldDescriptor] | None:
        """
        Build the fields of a struct, sorted by name. None if any field is deferred.

        Every field is visited even after one fails: nested types declared
        after a deferred field are claimed before the struct is retried.
        """
        fields = []
        unresolved = False
        for property_name, property_node in node.properties.items():
            field = self._build_field(property_name, property_node, property_name in node.required, path)
            if field is None:
                logger.debug("Field %s of %s is not resolved yet", property_name, path)
                unresolved = True
                continue
            fields.append(field)

        if unresolved:
            return None

        fields.sort(key=lambda f: f.name)
        return fields

    def _build_field(
        self,
        property_name: str,
        node: SchemaNode,
        required: bool,
        path: str,
    ) -> FieldDescriptor | None:
        field = FieldDescriptor(
            name=self.names.field_name(node.title or property_name),
            property_name=property_name,
            required=required,
        )

        if node.ref:
            target = self.context.lookup(node.ref)
            if target is None:
                return None
            field.kind = TypeKind.REFERENCE
            field.type_ref = target
            field.nullable = self.context.descriptors[target].nullable
            return field

        field.nullable = node.type_spec.nullable
        category = self._category(node)
        field_path = f"{path}/properties/{property_name}"

        if category == OBJECT and node.properties:
            self._check_object(node, field_path)
            type_ref = self.resolve(node, field.name, node.description, field_path, path)
            if type_ref is None:
                return None
            field.kind = TypeKind.REFERENCE
            field.type_ref = type_ref
            return field

        if category in (OBJECT, ARRAY):
            shape = self._container_shape(node, category, singularize(property_name), field_path, path)
            if shape is None:
                return None
            field.kind, field.type_ref, field.primitive = shape
            return field

        field.kind = TypeKind.PRIMITIVE
        field.primitive = category
        return field
