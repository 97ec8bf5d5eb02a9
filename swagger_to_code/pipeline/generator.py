"""
Pipeline generator tying the phases together.

1. Analyzer: resolve references and synthesize methods and models, per API
2. Post-processing: deduplicate models, split them by kind, link subclasses
3. Validation: collect the problems of every API into one report
4. Backend: render the language templates and write the files
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .. import __version__, validator
from ..cli_utils import generation_comment
from ..exceptions import ConfigError, ValidationError
from ..utils import join_url_path
from .analyzer import (
    IR,
    MethodSynthesizer,
    ModelSynthesizer,
    NameResolver,
    ReferenceResolver,
    TypeMapper,
    dedupe_models,
    resolve_subclasses,
    split_models,
)
from .backends import BACKENDS, CodeBackend
from .config import ApiConfig, CodeGeneratorConfig

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates client code for a set of APIs in one target language."""

    def __init__(
        self,
        apis: list[ApiConfig],
        language: str | CodeBackend,
        config: CodeGeneratorConfig | None = None,
    ):
        """
        Initialize the generator.

        Args:
            apis: The APIs to generate, each with its parsed document
            language: Backend name ("swift", "kotlin", "js") or a backend instance
            config: Code generation configuration
        """
        self.config = config or CodeGeneratorConfig()
        self.apis = {api.name: api for api in apis}
        self.backend = self._create_backend(language)

    def _create_backend(self, language: str | CodeBackend) -> CodeBackend:
        if isinstance(language, CodeBackend):
            return language
        backend_class = BACKENDS.get(language)
        if backend_class is None:
            raise ConfigError(f"Unknown language '{language}', expected one of: {', '.join(BACKENDS)}")
        return backend_class(self.config)

    def build_ir(self, api: ApiConfig) -> IR:
        """
        Build the IR of one API.

        Raises:
            SwaggerCodegenError: If the document cannot be processed; no
                partial IR is returned
        """
        logger.debug("Building IR for %s", api.name)
        document = api.spec

        names = NameResolver(snake=self.config.snake, rules=self.config.naming)
        model_synthesizer = ModelSynthesizer(
            ReferenceResolver(document),
            TypeMapper(self.backend.TYPE_MAPPING, names),
            names,
        )
        method_synthesizer = MethodSynthesizer(model_synthesizer, self.config)

        base_path = join_url_path(api.base_path, document.get("basePath"))
        methods, method_models = method_synthesizer.methods_from_paths(document.get("paths"), base_path)

        # Models used by methods come first, so their names are kept on dedup
        models = [*method_models, *model_synthesizer.models_from_definitions(document.get("definitions"))]
        unique_models = dedupe_models(models)
        logger.debug(
            "%s: %d methods, %d models (%d before deduplication)",
            api.name,
            len(methods),
            len(unique_models),
            len(models),
        )

        object_models, enum_models = split_models(unique_models)
        return IR(
            api_name=api.name,
            methods=methods,
            object_models=resolve_subclasses(object_models),
            enum_models=enum_models,
        )

    def build_irs(self) -> dict[str, IR]:
        """Build the IR of every API, keyed by API name."""
        return {name: self.build_ir(api) for name, api in self.apis.items()}

    def verify(self, irs: dict[str, IR] | None = None) -> str:
        """Validation report of the APIs, empty when they all passed."""
        return validator.verify(irs if irs is not None else self.build_irs())

    def render_context(self, api: ApiConfig, ir: IR) -> dict[str, Any]:
        """Template variables for one API."""
        info = api.spec.get("info") or {}
        return {
            "methods": ir.methods,
            "objectModels": ir.object_models,
            "enumModels": ir.enum_models,
            "apiName": ir.api_name,
            "apiClassName": api.api_class_name,
            "apiVersion": self.config.version or info.get("version"),
            "options": self.config.to_dict(),
            "spec": api.spec,
            "generation_comment": generation_comment(self.backend.COMMENT_PREFIX, __version__),
        }

    def generate(self, output: str | Path | None = None) -> dict[str, str]:
        """
        Build, validate and render every API.

        Args:
            output: Directory the files are written to, nothing is written when None

        Returns:
            Mapping of file name to content, for all APIs

        Raises:
            ValidationError: If the validation report is not empty
        """
        irs = self.build_irs()
        report = self.verify(irs)
        if report:
            raise ValidationError(report)

        files: dict[str, str] = {}
        for name, ir in irs.items():
            files.update(self.backend.render_api(self.render_context(self.apis[name], ir)))

        if output is not None:
            self.write_files(files, Path(output))
        return files

    def write_files(self, files: dict[str, str], output: Path) -> None:
        for filename, content in files.items():
            path = output / filename
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
            logger.debug("Wrote %s", path)
