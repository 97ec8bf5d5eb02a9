"""
Model synthesizer that turns schemas into type references and models.

Every schema use-site (a definition, a property, a parameter, a response)
yields a TypeInfo naming its type in the target language, plus the object
and enum models that type needs. Models are returned in discovery order and
are not deduplicated here.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from ...exceptions import CyclicReferenceError, UnsupportedSchemaError
from ...utils import describe
from ..schema_ast import ArrayNode, EnumNode, ObjectNode, PrimitiveNode, RefNode, SchemaParser
from .ir_nodes import EnumModel, EnumValue, Model, ObjectModel, Property, SchemaResult, TypeInfo
from .name_resolver import NameResolver, last_ref_component
from .reference_resolver import ReferenceResolver
from .type_mapper import TypeMapper

logger = logging.getLogger(__name__)


class ModelSynthesizer:
    """Builds TypeInfo and models for schemas of one document."""

    def __init__(
        self,
        resolver: ReferenceResolver,
        type_mapper: TypeMapper,
        names: NameResolver,
    ):
        """
        Initialize the synthesizer.

        Args:
            resolver: Reference resolver over the document
            type_mapper: Type mapper of the target language
            names: Name resolver
        """
        self.resolver = resolver
        self.type_mapper = type_mapper
        self.names = names
        self.parser = SchemaParser()

        # Object models being built, innermost last: (class name, is named)
        # Inline objects are not named, references inside them belong to the
        # closest named model.
        self._defining: list[tuple[str, bool]] = []

    def models_from_definitions(self, definitions: dict[str, Any] | None) -> list[Model]:
        """Models for every top-level definition, in declaration order."""
        models: list[Model] = []
        for name, schema in (definitions or {}).items():
            models.extend(self.from_schema(schema, name).models)
        return models

    def from_schema(self, schema: dict[str, Any], default_name: str) -> SchemaResult:
        """
        Synthesize the type and models of a schema use-site.

        Args:
            schema: The unresolved schema
            default_name: Name used when the schema is not a $ref, e.g.
                "GetPetBody" for a parameter or "Pet.category" for a property

        Returns:
            SchemaResult with the type reference and contributed models
        """
        node = self.parser.parse(schema)
        if isinstance(node, RefNode):
            name = self.names.class_name_from_ref(node.ref_path)
            spec_name = last_ref_component(node.ref_path)
            if self._is_self_reference(name):
                return SchemaResult(type_info=TypeInfo(name=name))
        else:
            name = self.names.class_name(default_name)
            spec_name = default_name

        # The superclass is looked up before allOf is flattened, and kept out
        # of the flattened schema: it becomes a model of its own.
        ref_resolved = self.resolver.resolve_ref(schema)
        superclass_schema = next((item for item in ref_resolved.get("allOf") or [] if "$ref" in item), None)
        superclass_ref = superclass_schema["$ref"] if superclass_schema else None

        resolved = self.parser.parse(self.resolver.resolve_ref_and_all_of(schema, ignore_ref=superclass_ref))

        if isinstance(resolved, EnumNode):
            return self._enum_result(resolved, name)

        if isinstance(resolved, ArrayNode):
            return self._array_result(resolved, name)

        if isinstance(resolved, ObjectNode):
            is_named = isinstance(node, RefNode) or not self._defining
            return self._object_result(resolved, name, spec_name, superclass_schema, is_named)

        return self._primitive_result(resolved)

    def _is_self_reference(self, name: str) -> bool:
        """
        Check a referenced class name against the models being built.

        Raises:
            CyclicReferenceError: If the name belongs to an enclosing model other
                than the innermost one
        """
        named = [defining for defining, is_named in self._defining if is_named]
        if name not in named:
            return False
        if named[-1] == name:
            return True
        raise CyclicReferenceError([*named[named.index(name) :], name])

    def _enum_result(self, node: EnumNode, name: str) -> SchemaResult:
        """Build an enum model."""
        enum_type = self._map_primitive(node.base_type, node.format, None, node.raw)

        values = []
        for value in node.values:
            value_name, u_name = self.names.enum_value_names(value)
            literal = f'"{value}"' if node.base_type == "string" else json.dumps(value)
            values.append(EnumValue(name=value_name, u_name=u_name, literal=literal))

        model = EnumModel(name=name, enum_type=enum_type, values=values, description=node.description)
        return SchemaResult(type_info=TypeInfo(name=name), models=[model])

    def _array_result(self, node: ArrayNode, name: str) -> SchemaResult:
        """Wrap the item type; item models pass through unchanged."""
        if not node.items:
            raise UnsupportedSchemaError(f"Found an array schema with no items:\n{describe(node.raw)}")

        item = self.from_schema(node.items, name)
        type_info = TypeInfo(
            name=self.type_mapper.arrayify(item.type_info.name),
            format=item.type_info.format,
        )
        return SchemaResult(type_info=type_info, models=item.models)

    def _object_result(
        self,
        node: ObjectNode,
        name: str,
        spec_name: str,
        superclass_schema: dict[str, Any] | None,
        is_named: bool,
    ) -> SchemaResult:
        """Build an object model, its nested models and everything it references."""
        self._defining.append((name, is_named))
        try:
            properties: list[Property] = []
            nested_models: list[ObjectModel] = []
            property_models: list[Model] = []
            for prop_name, prop_schema in node.properties.items():
                prop, nested, models = self._analyze_property(prop_name, prop_schema, name, node.required)
                properties.append(prop)
                if nested:
                    nested_models.append(nested)
                property_models.extend(models)

            superclass_models = self.from_schema(superclass_schema, "").models if superclass_schema else []
        finally:
            self._defining.pop()

        superclass = self.names.class_name_from_ref(superclass_schema["$ref"]) if superclass_schema else None

        # Inherited: the superclass' own properties, then what it inherited itself
        super_model = superclass_models[0] if superclass_models else None
        inherited_properties: list[Property] = []
        if isinstance(super_model, ObjectModel):
            inherited_properties = [*super_model.properties, *super_model.inherited_properties]

        # A redeclared property is only kept as inherited: initializer
        # properties never repeat a name
        inherited_by_name = {prop.name: prop for prop in inherited_properties}
        own_properties: list[Property] = []
        for prop in properties:
            inherited = inherited_by_name.get(prop.name)
            if inherited is None:
                own_properties.append(prop)
            elif not _same_property(prop, inherited):
                logger.warning(
                    "%s redeclares inherited property %s with a different type, keeping %s from %s",
                    name,
                    prop.name,
                    inherited.type,
                    superclass,
                )

        model = ObjectModel(
            name=name,
            spec_name=spec_name,
            superclass=superclass,
            properties=own_properties,
            inherited_properties=inherited_properties,
            nested_models=nested_models,
            discriminator=node.discriminator,
            description=node.description,
        )
        return SchemaResult(
            type_info=TypeInfo(name=name),
            models=[model, *property_models, *superclass_models],
        )

    def _analyze_property(
        self,
        prop_name: str,
        prop_schema: dict[str, Any],
        parent_name: str,
        required: list[str],
    ) -> tuple[Property, ObjectModel | None, list[Model]]:
        """
        Analyze a single property.

        Returns:
            The property, the model of an inline object nested in the parent
            (if any), and the other models the property contributes
        """
        # Inline objects become classes nested inside the parent class
        is_nested = self.parser.is_inline_object(prop_schema)
        default_name = self.names.class_name([parent_name, prop_name], skip=1 if is_nested else 0)
        result = self.from_schema(prop_schema, default_name)

        nested = None
        models = result.models
        type_name = result.type_info.name
        if is_nested and models:
            nested, models = models[0], models[1:]
            type_name = f"{parent_name}.{type_name}"

        prop = Property(
            name=self.names.property_name(prop_name),
            spec_name=prop_name,
            type=type_name,
            format=result.type_info.format,
            is_required=prop_name in required,
            description=prop_schema.get("description"),
        )
        return prop, nested, models

    def _primitive_result(self, node: PrimitiveNode) -> SchemaResult:
        """Map a primitive or free-form schema."""
        name = self._map_primitive(node.type_name, node.format, node.additional_properties, node.raw)

        # A map value schema still contributes its models, even though it is
        # only reachable through the map type
        models = self.from_schema(node.additional_properties, "").models if node.additional_properties else []

        # The format is only passed through for strings
        type_info = TypeInfo(name=name, format=node.format if node.type_name == "string" else None)
        return SchemaResult(type_info=type_info, models=models)

    def _map_primitive(
        self,
        type_name: str | None,
        format: str | None,
        additional_properties: dict[str, Any] | None,
        raw: dict[str, Any],
    ) -> str:
        name = self.type_mapper.map_type(type_name, format, additional_properties)
        if not name:
            raise UnsupportedSchemaError(f"I don't know how to process a schema of type {type_name}\n{describe(raw)}")
        return name

    def void_result(self) -> SchemaResult:
        """Type of a response without schema."""
        return SchemaResult(type_info=TypeInfo(name=self._map_primitive(None, None, None, {})))


def _same_property(prop: Property, other: Property) -> bool:
    """Compare properties, ignoring description and required-ness."""
    return (prop.name, prop.spec_name, prop.type, prop.format) == (other.name, other.spec_name, other.type, other.format)
