"""
Base class for code generation backends.

A backend is a target language: the type mapping the analyzer uses to name
types, plus the templates rendering an API's IR into source files.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jinja2

from ...utils import camel_case, upper_first
from ..analyzer.type_mapper import TypeMapping
from ..config import CodeGeneratorConfig

logger = logging.getLogger(__name__)

RenderContext = dict[str, Any]


@dataclass(frozen=True)
class OutputTemplate:
    """
    A generated file.

    Exactly one of ``template`` (a template file of the backend's template
    directory) or ``source`` (a function computing the content) is set.
    """

    filename: Callable[[RenderContext], str]
    template: str | None = None
    source: Callable[[RenderContext], str] | None = None


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Type mapping from schema types to language types
    TYPE_MAPPING: TypeMapping

    # Template directory name
    TEMPLATE_LANG: str = ""

    # Files generated for each API
    OUTPUT_TEMPLATES: list[OutputTemplate] = []

    # Line comment prefix, used for the generation comment
    COMMENT_PREFIX: str = "//"

    def __init__(self, config: CodeGeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
        )
        self.jinja_env.filters["upper_first"] = upper_first
        self.jinja_env.filters["camel_case"] = camel_case
        self.configure_environment(self.jinja_env)

    @abstractmethod
    def configure_environment(self, env: jinja2.Environment) -> None:
        """
        Register the language's filters and tests.

        Args:
            env: The backend's Jinja2 environment
        """

    def render_api(self, context: RenderContext) -> dict[str, str]:
        """
        Render every output file of one API.

        Args:
            context: Template variables of the API

        Returns:
            Mapping of file name to content
        """
        files = {}
        for output in self.OUTPUT_TEMPLATES:
            filename = output.filename(context)
            if output.source is not None:
                content = output.source(context)
            else:
                content = self.jinja_env.get_template(output.template).render(context)
            logger.debug("Rendered %s for %s", filename, context["apiName"])
            files[filename] = content
        return files
