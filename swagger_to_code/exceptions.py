"""
Exceptions raised by the Swagger to Code generator.

Errors raised while building the IR are fatal: the whole run is aborted and
no partial IR is returned. Problems found by the validator are collected into
a report instead, see :mod:`swagger_to_code.validator`.
"""

from __future__ import annotations


class SwaggerCodegenError(Exception):
    """Base class for all generator errors."""

    pass


class UnsupportedReferenceError(SwaggerCodegenError):
    """Raised when a $ref is not a document-local pointer or does not resolve."""

    pass


class UnsupportedSchemaError(SwaggerCodegenError):
    """Raised when a schema matches none of the shapes the generator knows.

    This covers:
    - Schemas whose type has no entry in the language type map
    - Arrays without items
    - Maps whose value type is an inline object
    """

    pass


class MissingSchemaError(SwaggerCodegenError):
    """Raised when a parameter or response has no schema where one is required."""

    pass


class CyclicReferenceError(SwaggerCodegenError):
    """Raised when references form a cycle the generator cannot terminate."""

    def __init__(self, cycle: list[str]):
        self.cycle = cycle
        super().__init__("Cyclic reference between models: " + " -> ".join(cycle))


class ConfigError(SwaggerCodegenError):
    """Raised for invalid configuration or command line arguments."""

    pass


class ValidationError(SwaggerCodegenError):
    """Raised when the generated IR fails validation.

    The aggregated, human-readable report is available as ``report``.
    """

    def __init__(self, report: str):
        self.report = report
        super().__init__(report)
