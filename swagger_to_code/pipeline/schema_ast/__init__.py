"""
Schema AST (Abstract Syntax Tree) module.

Contains the AST node definitions and parser for Swagger schemas.
"""

from __future__ import annotations

from .nodes import (
    ArrayNode,
    EnumNode,
    ObjectNode,
    PrimitiveNode,
    RefNode,
    SchemaNode,
)
from .parser import SchemaParser

__all__ = [
    "SchemaNode",
    "RefNode",
    "PrimitiveNode",
    "ArrayNode",
    "ObjectNode",
    "EnumNode",
    "SchemaParser",
]
