"""
IR (Intermediate Representation) node definitions.

These nodes represent the analyzed API, ready for rendering by a language
backend. All references are resolved and type names are already mapped to
the target language.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ParameterLocation(str, Enum):
    """Where a parameter is sent."""

    PATH = "path"
    QUERY = "query"
    HEADER = "header"
    BODY = "body"
    FORM_DATA = "formData"

    @property
    def cap(self) -> str:
        # Multipart body parts are distinguished from a JSON body
        if self is ParameterLocation.FORM_DATA:
            return "Part"
        return self.value.capitalize()


@dataclass
class TypeInfo:
    """A resolved reference to a target-language type."""

    name: str | None = None

    # Only passed through for strings (e.g., "date-time", "uuid")
    format: str | None = None


@dataclass
class Property:
    """A property of an object model."""

    name: str = ""  # Identifier in the target language
    spec_name: str = ""  # Original JSON property name
    type: str | None = None
    format: str | None = None
    is_required: bool = False
    description: str | None = None


@dataclass
class SubclassRef:
    """A model declaring the owning model as its superclass."""

    name: str = ""
    spec_name: str = ""


@dataclass
class ObjectModel:
    """A class definition."""

    name: str = ""
    spec_name: str = ""  # Original definition key, or the default name for inline objects

    # Inheritance
    superclass: str | None = None
    subclasses: list[SubclassRef] = field(default_factory=list)

    # Declared properties, minus those identical to an inherited one
    properties: list[Property] = field(default_factory=list)

    # Superclass properties followed by the superclass' own inherited ones
    inherited_properties: list[Property] = field(default_factory=list)

    # Classes of inline objects, rendered inside this class
    nested_models: list[ObjectModel] = field(default_factory=list)

    discriminator: str | None = None
    description: str | None = None

    @property
    def initializer_properties(self) -> list[Property]:
        """Constructor parameters: own properties first, then inherited ones."""
        return [*self.properties, *self.inherited_properties]


@dataclass
class EnumValue:
    """A member of an enum model."""

    name: str = ""  # camelCase / snake_case identifier
    u_name: str = ""  # UPPER_SNAKE identifier
    literal: str = ""  # JSON spelling, quoted for string enums
    description: str | None = None


@dataclass
class EnumModel:
    """An enum definition."""

    name: str = ""
    enum_type: str | None = None  # Mapped type of the enum's primitive base type
    values: list[EnumValue] = field(default_factory=list)
    description: str | None = None


Model = ObjectModel | EnumModel


@dataclass
class SchemaResult:
    """Type reference for a schema use-site plus the models it contributes."""

    type_info: TypeInfo = field(default_factory=TypeInfo)
    models: list[Model] = field(default_factory=list)


@dataclass
class Param:
    """A parameter of a method, or its response."""

    name: str = ""  # Identifier in the target language, empty for responses
    server_name: str | None = None  # Name sent over the wire
    location: ParameterLocation | None = None  # None for responses
    type: str | None = None
    format: str | None = None
    is_required: bool = False
    description: str | None = None

    # Declared schema type, kept for validation (e.g., formData must be "file")
    schema_type: str | None = None

    @property
    def in_cap(self) -> str:
        return self.location.cap if self.location else ""


@dataclass
class Method:
    """An operation of the API."""

    path: str = ""
    http_method: str = ""
    name: str = ""
    description: str | None = None
    params: list[Param] = field(default_factory=list)
    response: Param = field(default_factory=Param)
    streaming: bool = False
    security: list[dict[str, Any]] | None = None

    @property
    def cap_method(self) -> str:
        return self.http_method.upper()


@dataclass
class IR:
    """The complete Intermediate Representation of one API."""

    api_name: str = ""

    # Sorted by path
    methods: list[Method] = field(default_factory=list)

    # Deduplicated, with subclasses resolved
    object_models: list[ObjectModel] = field(default_factory=list)
    enum_models: list[EnumModel] = field(default_factory=list)
