"""
AST (Abstract Syntax Tree) node definitions for Swagger schemas.

A node classifies one schema object. Child schemas (property schemas, array
items, map values) are kept as raw mappings: they are normalized again at
their own use-site, where their $ref decides the name of the generated type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SchemaNode:
    """Base class for all AST nodes."""

    # Raw schema the node was classified from
    raw: dict[str, Any] = field(default_factory=dict)

    description: str | None = None


@dataclass
class RefNode(SchemaNode):
    """Represents a $ref (unresolved reference)."""

    ref_path: str = ""  # e.g., "#/definitions/Pet"


@dataclass
class PrimitiveNode(SchemaNode):
    """Represents a primitive type, a free-form map, or a schema without type."""

    type_name: str | None = None  # "string", "integer", "file", "object", None...
    format: str | None = None

    # Map value schema for free-form objects
    additional_properties: dict[str, Any] | None = None


@dataclass
class ArrayNode(SchemaNode):
    """Represents an array type."""

    items: dict[str, Any] | None = None


@dataclass
class ObjectNode(SchemaNode):
    """Represents an object type with properties."""

    properties: dict[str, dict[str, Any]] = field(default_factory=dict)
    required: list[str] = field(default_factory=list)
    discriminator: str | None = None


@dataclass
class EnumNode(SchemaNode):
    """Represents an enum type."""

    base_type: str | None = None  # "string", "integer", etc.
    format: str | None = None
    values: list[Any] = field(default_factory=list)
