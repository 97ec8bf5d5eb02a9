"""
Type mapping from schema types to target-language type names.

A language declares a TypeMapping: one tagged entry per abstract schema type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ...exceptions import UnsupportedSchemaError
from .name_resolver import NameResolver

# Key of the entry used for schemas without a declared type
UNDEFINED_TYPE = "undefined"


@dataclass(frozen=True)
class PlainType:
    """A fixed type name (e.g., "Bool")."""

    name: str


@dataclass(frozen=True)
class ParameterizedType:
    """A container type wrapping an inner type name.

    ``template`` holds a single ``{}`` placeholder, e.g. "Array<{}>".
    """

    template: str

    def apply(self, inner: str) -> str:
        return self.template.format(inner)


@dataclass(frozen=True)
class FormatKeyedType:
    """A type name chosen by the schema's format, with a default."""

    default: str
    by_format: dict[str, str] = field(default_factory=dict)


TypeMapEntry = PlainType | ParameterizedType | FormatKeyedType


@dataclass(frozen=True)
class TypeMapping:
    """What a target language must provide to the IR synthesis."""

    type_map: dict[str, TypeMapEntry]

    # Map value type of free-form objects without additionalProperties
    any_type: str = "Any"


class TypeMapper:
    """Maps abstract schema types to language type names."""

    def __init__(self, mapping: TypeMapping, names: NameResolver):
        """
        Initialize the mapper.

        Args:
            mapping: The target language's type mapping
            names: Name resolver, used for map values given as $ref
        """
        self.mapping = mapping
        self.names = names

    def map_type(
        self,
        type_name: str | None,
        format: str | None = None,
        additional_properties: Any = None,
    ) -> str | None:
        """
        Map a schema type to a language type name.

        Args:
            type_name: Schema type ("string", "object"...), None when undeclared
            format: Schema format ("int64", "date-time"...)
            additional_properties: Map value schema of free-form objects

        Returns:
            The type name, or None when the language has no entry for the type
        """
        entry = self.mapping.type_map.get(type_name or UNDEFINED_TYPE)

        match entry:
            case PlainType(name=name):
                return name
            case ParameterizedType():
                return entry.apply(self._additional_properties_type_name(additional_properties))
            case FormatKeyedType(default=default, by_format=by_format):
                return by_format.get(format, default) if format else default
            case None:
                return None

    def arrayify(self, inner: str) -> str:
        """Wrap an item type name into the language's array type."""
        entry = self.mapping.type_map.get("array")
        match entry:
            case ParameterizedType():
                return entry.apply(inner)
            case PlainType(name=name):
                return name
            case _:
                raise UnsupportedSchemaError("The language type map has no parameterized 'array' entry")

    def _additional_properties_type_name(self, additional_properties: Any) -> str:
        """Type name of a free-form object's values."""
        if not isinstance(additional_properties, dict) or not additional_properties:
            return self.mapping.any_type

        ref = additional_properties.get("$ref")
        if ref:
            return self.names.class_name_from_ref(ref)

        if additional_properties.get("type") == "object":
            raise UnsupportedSchemaError("Schemas with additionalProperties of type object that don't use $ref are not supported.")

        if additional_properties.get("type") == "array":
            return self.arrayify(self._additional_properties_type_name(additional_properties.get("items")))

        mapped = self.map_type(
            additional_properties.get("type"),
            additional_properties.get("format"),
            additional_properties.get("additionalProperties"),
        )
        return mapped or self.mapping.any_type
