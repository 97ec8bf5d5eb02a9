"""
JavaScript code generation backend.

Generates an npm package: the client module, its TypeScript typings and a
copy of the source document.
"""

from __future__ import annotations

import json

import jinja2

from ..analyzer.type_mapper import FormatKeyedType, ParameterizedType, PlainType, TypeMapping
from .base import CodeBackend, OutputTemplate, RenderContext


def js_identifier(name: str | None) -> str:
    """Flatten a nested class name ("Pet.Owner" -> "Pet_Owner")."""
    return (name or "").replace(".", "_")


def spec_json(context: RenderContext) -> str:
    return json.dumps(context["spec"], indent=2)


class JsBackend(CodeBackend):
    """JavaScript code generation backend."""

    TEMPLATE_LANG = "js"

    TYPE_MAPPING = TypeMapping(
        type_map={
            "undefined": PlainType("void"),
            "boolean": PlainType("boolean"),
            "number": PlainType("number"),
            "file": PlainType("string"),
            "object": ParameterizedType("Map<string, {}>"),
            "integer": PlainType("number"),
            "string": FormatKeyedType("string", {"date": "Date", "date-time": "Date"}),
            "array": ParameterizedType("Array<{}>"),
        },
        any_type="any",
    )

    OUTPUT_TEMPLATES = [
        OutputTemplate(filename=lambda ctx: "package.json", template="package.json.jinja2"),
        OutputTemplate(filename=lambda ctx: "babel.config.js", template="babel.config.js.jinja2"),
        OutputTemplate(filename=lambda ctx: "index.js", template="index.js.jinja2"),
        OutputTemplate(filename=lambda ctx: "index.d.ts", template="index.d.ts.jinja2"),
        OutputTemplate(filename=lambda ctx: "spec.json", source=spec_json),
    ]

    def configure_environment(self, env: jinja2.Environment) -> None:
        env.filters["js_identifier"] = js_identifier
