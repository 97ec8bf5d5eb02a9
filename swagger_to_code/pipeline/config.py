"""
Configuration for the code generator pipeline.

Options keep the keys used by existing config files (``snake``,
``noOperationIds``, ``version``) and map them onto snake_case attributes.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


@dataclass
class NamingRules:
    """Static naming rules handed to the name resolver."""

    # Identifiers that must be quoted with backticks
    escaped_words: tuple[str, ...] = ("default", "internal", "as")

    # Class names that collide with runtime types of the generated clients
    reserved_class_names: tuple[str, ...] = ("Type", "Error", "ErrorResponse")

    # Prefix for identifiers that would start with a digit
    digit_prefix: str = "_"


@dataclass
class CodeGeneratorConfig:
    """Configuration options for IR synthesis and rendering."""

    # Use snake_case identifiers instead of camelCase
    snake: bool = False

    # Ignore operationId when naming methods
    no_operation_ids: bool = False

    # API version override, otherwise taken from info.version
    version: str | None = None

    # HTTP methods looked up on every path item, in this order
    http_methods: tuple[str, ...] = HTTP_METHODS

    naming: NamingRules = field(default_factory=NamingRules)

    # Accepted spellings from config files and command line options
    _ALIASES = {
        "noOperationIds": "no_operation_ids",
        "httpMethods": "http_methods",
    }

    @staticmethod
    def from_dict(d: dict[str, Any] | None) -> CodeGeneratorConfig:
        """Create a config from a dictionary, ignoring unknown keys."""
        config = CodeGeneratorConfig()
        for k, v in (d or {}).items():
            k = CodeGeneratorConfig._ALIASES.get(k, k)
            if k == "naming" and isinstance(v, dict):
                v = NamingRules(**{name: tuple(value) if isinstance(value, list) else value for name, value in v.items()})
            elif k == "http_methods":
                v = tuple(v)
            if k in {f.name for f in fields(config)}:
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary using the config file keys."""
        return {
            "snake": self.snake,
            "noOperationIds": self.no_operation_ids,
            "version": self.version,
            "httpMethods": list(self.http_methods),
        }


@dataclass
class ApiConfig:
    """One API to generate: its parsed document plus naming details."""

    name: str = ""
    spec: dict[str, Any] = field(default_factory=dict)

    # Name of the generated API class, defaults to the API name
    class_name: str | None = None

    # Prefixed to the document's own basePath
    base_path: str | None = None

    @property
    def api_class_name(self) -> str:
        return self.class_name or self.name
