"""
Pipeline - Swagger to Code generator.

This module provides a multi-phase architecture for generating API clients
from Swagger documents:

1. Phase 1 (Parser): Classify raw schemas into the Schema AST
2. Phase 2 (Analyzer): Resolve references and build the IR
3. Phase 3 (Post-processing): Deduplicate models and link subclasses
4. Phase 4 (Validation): Report IR problems
5. Phase 5 (Backend): Render the language templates
"""

from __future__ import annotations

from .config import ApiConfig, CodeGeneratorConfig, NamingRules
from .generator import PipelineGenerator

__all__ = [
    "PipelineGenerator",
    "ApiConfig",
    "CodeGeneratorConfig",
    "NamingRules",
]
