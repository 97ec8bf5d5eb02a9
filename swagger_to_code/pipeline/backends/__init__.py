"""
Code generation backends.

Contains language-specific type mappings and template sets.
"""

from __future__ import annotations

from .base import CodeBackend, OutputTemplate
from .js_backend import JsBackend
from .kotlin_backend import KotlinBackend
from .swift_backend import SwiftBackend

BACKENDS: dict[str, type[CodeBackend]] = {
    "swift": SwiftBackend,
    "kotlin": KotlinBackend,
    "js": JsBackend,
}

__all__ = [
    "BACKENDS",
    "CodeBackend",
    "OutputTemplate",
    "SwiftBackend",
    "KotlinBackend",
    "JsBackend",
]
