"""
Swift code generation backend.

Generates a single Swift source file with Codable models and an API client,
plus a podspec.
"""

from __future__ import annotations

import jinja2

from ..analyzer.type_mapper import FormatKeyedType, ParameterizedType, PlainType, TypeMapping
from .base import CodeBackend, OutputTemplate


def maybe_comment(text: str | None, indent: int = 0) -> str:
    """
    Documentation comment line for a possibly empty text.

    Args:
        text: Comment text, newlines are folded into spaces
        indent: Number of spaces before the comment

    Returns:
        "/// text" followed by a newline, or an empty string
    """
    if not text or not text.strip():
        return ""
    folded = text.strip().replace("\n", " ")
    return f"{' ' * indent}/// {folded}\n"


class SwiftBackend(CodeBackend):
    """Swift code generation backend."""

    TEMPLATE_LANG = "swift"

    TYPE_MAPPING = TypeMapping(
        type_map={
            "undefined": PlainType("Void"),
            "boolean": PlainType("Bool"),
            "number": FormatKeyedType("Double", {"int64": "Int64", "int32": "Int32"}),
            "file": PlainType("URL"),
            "object": ParameterizedType("Dictionary<String, {}>"),
            "integer": FormatKeyedType("Int32", {"int64": "Int64"}),
            "string": FormatKeyedType("String", {"date": "Date", "date-time": "Date"}),
            "array": ParameterizedType("Array<{}>"),
        },
        any_type="Any",
    )

    OUTPUT_TEMPLATES = [
        OutputTemplate(filename=lambda ctx: f"{ctx['apiName']}.swift", template="api.swift.jinja2"),
        OutputTemplate(filename=lambda ctx: f"{ctx['apiName']}.podspec", template="podspec.jinja2"),
    ]

    def configure_environment(self, env: jinja2.Environment) -> None:
        env.filters["maybe_comment"] = maybe_comment
