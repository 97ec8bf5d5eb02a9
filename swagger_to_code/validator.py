"""
Validation of the IR before rendering.

Problems are collected rather than raised: every API is checked completely
and the problems of all APIs are combined into a single report. An empty
report means every API passed.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable
from typing import Any

from .pipeline.analyzer.ir_nodes import IR, EnumModel, Method, ObjectModel, ParameterLocation
from .utils import describe

SEPARATOR = "\n---------------------------"

# (predicate, message prefix) applied to each item of a list
ProblemFinder = tuple[Callable[[Any], bool], str]


def _find_problems(items: Iterable[Any], *finders: ProblemFinder) -> str:
    problems = []
    for predicate, message in finders:
        for item in items:
            if predicate(item):
                problems.append(f"\n{message}: {describe(item)}{SEPARATOR}")
    return "".join(problems)


def _has_untyped_param(method: Method) -> bool:
    return any(not param.type for param in [method.response, *method.params])


def _has_non_file_form_data(method: Method) -> bool:
    return any(param.location is ParameterLocation.FORM_DATA and param.schema_type != "file" for param in method.params)


def verify_methods(methods: list[Method]) -> str:
    return _find_problems(
        methods,
        (_has_untyped_param, "Found method with param or response without a type"),
        (_has_non_file_form_data, "Found method with form data param that is not of type 'file'"),
    )


def verify_models(models: list[Any]) -> str:
    """Check model names are present and unique, and models have a known kind."""
    counts = Counter(getattr(model, "name", None) for model in models)
    return _find_problems(
        models,
        (lambda model: counts[getattr(model, "name", None)] > 1, "Found model with duplicated name"),
        (lambda model: not getattr(model, "name", None), "Found model without name"),
        (lambda model: not isinstance(model, (ObjectModel, EnumModel)), "Found non-object-or-enum model"),
    )


def verify_ir(ir: IR) -> str:
    """
    Check the IR of one API.

    Args:
        ir: The IR to check

    Returns:
        The problems found, empty when there are none
    """
    return verify_methods(ir.methods) + verify_models(ir.object_models) + verify_models(ir.enum_models)


def verify(irs: dict[str, IR]) -> str:
    """
    Check the IR of every API.

    Returns:
        One "Problems with <api>" section per API with problems, empty when
        all APIs passed
    """
    report = ""
    for api_name, ir in irs.items():
        problems = verify_ir(ir)
        if problems:
            report += f"Problems with {api_name}: {problems}"
    return report
