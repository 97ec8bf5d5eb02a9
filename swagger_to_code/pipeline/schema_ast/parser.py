"""
Swagger schema parser that classifies schema objects.

Used on both unresolved schemas (to find $ref use-sites) and normalized
schemas (to dispatch model synthesis by shape).
"""

from __future__ import annotations

from typing import Any

from .nodes import (
    ArrayNode,
    EnumNode,
    ObjectNode,
    PrimitiveNode,
    RefNode,
    SchemaNode,
)


class SchemaParser:
    """Classifies a schema dictionary into a SchemaNode."""

    def parse(self, schema: dict[str, Any]) -> SchemaNode:
        """
        Classify a schema.

        Args:
            schema: The schema dictionary

        Returns:
            Appropriate SchemaNode subclass
        """
        description = schema.get("description")

        # Handle $ref
        if "$ref" in schema:
            return RefNode(ref_path=schema["$ref"], raw=schema, description=description)

        # Enums take priority over the declared type
        if schema.get("enum"):
            return EnumNode(
                base_type=schema.get("type"),
                format=schema.get("format"),
                values=list(schema["enum"]),
                raw=schema,
                description=description,
            )

        if schema.get("type") == "array":
            return ArrayNode(items=schema.get("items"), raw=schema, description=description)

        if self.is_object_with_properties(schema):
            return self._parse_object_node(schema, description)

        additional_properties = schema.get("additionalProperties")
        return PrimitiveNode(
            type_name=schema.get("type"),
            format=schema.get("format"),
            additional_properties=additional_properties if isinstance(additional_properties, dict) else None,
            raw=schema,
            description=description,
        )

    def is_object_with_properties(self, schema: dict[str, Any]) -> bool:
        """Check for an object schema declaring properties.

        Definitions commonly omit ``type: object``, so a schema without a type
        that declares properties counts as an object too.
        """
        return schema.get("properties") is not None and schema.get("type") in (None, "object")

    def is_inline_object(self, schema: dict[str, Any]) -> bool:
        """Check for an object declared in place rather than through a $ref."""
        return "$ref" not in schema and self.is_object_with_properties(schema)

    def _parse_object_node(self, schema: dict[str, Any], description: str | None) -> ObjectNode:
        """Parse an object type node."""
        return ObjectNode(
            properties=dict(schema["properties"]),
            required=list(schema.get("required", [])),
            discriminator=schema.get("discriminator"),
            raw=schema,
            description=description,
        )
