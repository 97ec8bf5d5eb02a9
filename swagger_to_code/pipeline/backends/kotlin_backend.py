"""
Kotlin code generation backend.

Generates a Retrofit service interface with its Gson-annotated models.
"""

from __future__ import annotations

import jinja2

from ..analyzer.ir_nodes import Param
from ..analyzer.type_mapper import FormatKeyedType, ParameterizedType, PlainType, TypeMapping
from .base import CodeBackend, OutputTemplate


def oneline(text: str | None) -> str:
    """Fold a multi-line text into a single line."""
    return (text or "").strip().replace("\n", " ").strip()


def is_not_body_param(param: Param) -> bool:
    """True for parameters sent by name (path, query, header, part)."""
    return param.in_cap != "Body"


class KotlinBackend(CodeBackend):
    """Kotlin code generation backend."""

    TEMPLATE_LANG = "kotlin"

    TYPE_MAPPING = TypeMapping(
        type_map={
            "undefined": PlainType("Response<Void>"),
            "boolean": PlainType("Boolean"),
            "number": FormatKeyedType("Double", {"int64": "Int", "int32": "Int"}),
            "file": PlainType("MultipartBody.Part"),
            "object": ParameterizedType("Map<String, {}>"),
            "integer": PlainType("Int"),
            "string": FormatKeyedType("String", {"date": "OffsetDateTime", "date-time": "OffsetDateTime"}),
            "array": ParameterizedType("List<{}>"),
        },
        any_type="Any",
    )

    OUTPUT_TEMPLATES = [
        OutputTemplate(filename=lambda ctx: f"{ctx['apiClassName']}.kt", template="api.kt.jinja2"),
    ]

    def configure_environment(self, env: jinja2.Environment) -> None:
        env.filters["oneline"] = oneline
        env.tests["not_body_param"] = is_not_body_param
