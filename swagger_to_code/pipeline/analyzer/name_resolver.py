"""
Name resolver for identifiers in the generated code.

Derives class, property, parameter, method and enum member names from
spec names, and escapes names the target languages cannot use as-is.
"""

from __future__ import annotations

from typing import Any

from ...utils import camel_case, join_url_path, snake_case, upper_first, upper_snake_case
from ..config import NamingRules


class NameResolver:
    """Resolves identifiers according to the casing option and naming rules."""

    def __init__(self, snake: bool = False, rules: NamingRules | None = None):
        """
        Initialize the resolver.

        Args:
            snake: Use snake_case instead of camelCase identifiers
            rules: Escaping and reserved word rules
        """
        self.snake = snake
        self.rules = rules or NamingRules()

    def escape(self, name: str) -> str:
        """Escape names starting with a digit or colliding with a keyword."""
        escaped = f"{self.rules.digit_prefix}{name}" if name[:1].isdigit() else name
        if escaped in self.rules.escaped_words:
            return f"`{escaped}`"
        return escaped

    def identifier(self, components: Any) -> str:
        """camelCase (or snake_case) identifier joined from components."""
        joined = "/".join(str(c) for c in _as_list(components))
        name = snake_case(joined) if self.snake else camel_case(joined)
        return self.escape(name)

    def property_name(self, spec_name: str) -> str:
        return self.identifier(spec_name)

    def param_name(self, server_name: str | None) -> str:
        """Parameter identifier; parameters are not escaped."""
        if server_name is None:
            return ""
        return snake_case(server_name) if self.snake else camel_case(server_name)

    def enum_value_names(self, value: Any) -> tuple[str, str]:
        """Return (name, UPPER_NAME) for an enum literal."""
        name = self.identifier(value)
        u_name = self.escape(upper_snake_case(value))
        return name, u_name

    def class_name(self, components: Any, skip: int = 0) -> str:
        """
        Create a class name by combining the given components.

        Args:
            components: A name or list of names, e.g. ["Pet", "category"]
            skip: Number of leading components to leave out, used for classes
                nested inside their parent class

        Example:
            class_name(["aa", "bb", "cc", "dd"], skip=2) -> "CcDd"
        """
        all_components = _as_list(components)
        name = upper_first(self._camel_identifier(all_components[skip:]))

        # Skipping made a reserved name, use all the components instead
        if name in self.rules.reserved_class_names and skip:
            return self.class_name(all_components)

        if name in self.rules.reserved_class_names:
            return f"{name}_"

        return name

    def _camel_identifier(self, components: list[Any]) -> str:
        return self.escape(camel_case("/".join(str(c) for c in components)))

    def class_name_from_ref(self, ref: str) -> str:
        return self.class_name(last_ref_component(ref))

    def method_name(self, http_method: str, path: str, operation_id: str | None) -> str:
        """
        Name a method after its operationId, else after its verb and path.

        Example:
            method_name("get", "/items/{id}", None) -> "getItemsId"
        """
        if self.snake:
            return operation_id or snake_case(join_url_path(http_method, path))
        return camel_case(operation_id or join_url_path(http_method, path))


def last_ref_component(ref: str) -> str:
    """Final segment of a $ref pointer ("#/definitions/Pet" -> "Pet")."""
    return ref.split("/")[-1]


def _as_list(components: Any) -> list[Any]:
    if isinstance(components, (list, tuple)):
        return list(components)
    return [components]
