"""
Post-processing of the synthesized models.

Models are collected with duplicates (a definition referenced from several
places is synthesized once per use-site); they are deduplicated, split by
kind and linked to their subclasses before rendering.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, replace
from typing import Any

from .ir_nodes import EnumModel, Model, ObjectModel, SubclassRef

logger = logging.getLogger(__name__)


def _without_descriptions(value: Any) -> Any:
    """Copy of a structure with every "description" key removed, at any depth."""
    if isinstance(value, dict):
        return {k: _without_descriptions(v) for k, v in value.items() if k != "description"}
    if isinstance(value, list):
        return [_without_descriptions(v) for v in value]
    return value


def _comparable(model: Model) -> tuple[str, Any]:
    return (type(model).__name__, _without_descriptions(asdict(model)))


def dedupe_models(models: list[Model]) -> list[Model]:
    """
    Remove models that are structurally equal, ignoring descriptions.

    The first occurrence wins, so its description is the one kept.
    """
    unique: list[Model] = []
    seen: list[tuple[str, Any]] = []
    for model in models:
        key = _comparable(model)
        if key in seen:
            logger.debug("Dropping duplicate model %s", model.name)
            continue
        seen.append(key)
        unique.append(model)
    return unique


def split_models(models: list[Model]) -> tuple[list[ObjectModel], list[EnumModel]]:
    """Split models into object models and enum models, keeping their order."""
    object_models = [model for model in models if isinstance(model, ObjectModel)]
    enum_models = [model for model in models if isinstance(model, EnumModel)]
    return object_models, enum_models


def resolve_subclasses(object_models: list[ObjectModel]) -> list[ObjectModel]:
    """
    Attach to each object model the models naming it as their superclass.

    Returns:
        New models, in the same order; the input models are left untouched
    """
    resolved = []
    for model in object_models:
        subclasses = [
            SubclassRef(name=other.name, spec_name=other.spec_name) for other in object_models if other.superclass == model.name
        ]
        resolved.append(replace(model, subclasses=subclasses))
    return resolved
