"""
Analyzer module.

Contains reference resolution, type mapping, name resolution, model and
method synthesis, and the IR post-processing passes.
"""

from __future__ import annotations

from .ir_nodes import (
    IR,
    EnumModel,
    EnumValue,
    Method,
    Model,
    ObjectModel,
    Param,
    ParameterLocation,
    Property,
    SchemaResult,
    SubclassRef,
    TypeInfo,
)
from .method_synthesizer import MethodSynthesizer
from .model_synthesizer import ModelSynthesizer
from .name_resolver import NameResolver
from .post_process import dedupe_models, resolve_subclasses, split_models
from .reference_resolver import ReferenceResolver, deep_merge
from .type_mapper import FormatKeyedType, ParameterizedType, PlainType, TypeMapper, TypeMapping

__all__ = [
    "IR",
    "EnumModel",
    "EnumValue",
    "Method",
    "Model",
    "ObjectModel",
    "Param",
    "ParameterLocation",
    "Property",
    "SchemaResult",
    "SubclassRef",
    "TypeInfo",
    "MethodSynthesizer",
    "ModelSynthesizer",
    "NameResolver",
    "ReferenceResolver",
    "deep_merge",
    "TypeMapper",
    "TypeMapping",
    "PlainType",
    "ParameterizedType",
    "FormatKeyedType",
    "dedupe_models",
    "split_models",
    "resolve_subclasses",
]
