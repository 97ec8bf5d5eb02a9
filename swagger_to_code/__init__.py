"""Swagger to Code Generator

A Python package for generating API clients from Swagger documents.
Supports Swift, Kotlin and JavaScript code generation from a
language-agnostic intermediate representation.
"""

__version__ = "1.0.0"

from .exceptions import (
    ConfigError,
    CyclicReferenceError,
    MissingSchemaError,
    SwaggerCodegenError,
    UnsupportedReferenceError,
    UnsupportedSchemaError,
    ValidationError,
)
from .pipeline import ApiConfig, CodeGeneratorConfig, NamingRules, PipelineGenerator

__all__ = [
    "PipelineGenerator",
    "ApiConfig",
    "CodeGeneratorConfig",
    "NamingRules",
    "SwaggerCodegenError",
    "UnsupportedReferenceError",
    "UnsupportedSchemaError",
    "MissingSchemaError",
    "CyclicReferenceError",
    "ConfigError",
    "ValidationError",
]
