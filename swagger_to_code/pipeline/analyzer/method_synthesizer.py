"""
Method synthesizer that turns path operations into methods.

Each operation yields a Method plus the models its parameters and response
contribute.
"""

from __future__ import annotations

from typing import Any

from ...exceptions import MissingSchemaError, UnsupportedSchemaError
from ...utils import describe, join_url_path
from ..config import CodeGeneratorConfig
from .ir_nodes import Method, Model, Param, ParameterLocation
from .model_synthesizer import ModelSynthesizer

EVENT_STREAM = "text/event-stream"


class MethodSynthesizer:
    """Builds methods for the paths of one document."""

    def __init__(self, models: ModelSynthesizer, config: CodeGeneratorConfig):
        """
        Initialize the synthesizer.

        Args:
            models: Model synthesizer for parameter and response schemas
            config: Code generation configuration
        """
        self.models = models
        self.resolver = models.resolver
        self.names = models.names
        self.config = config

    def methods_from_paths(self, paths: dict[str, Any] | None, base_path: str = "") -> tuple[list[Method], list[Model]]:
        """
        Build the methods of every path, sorted by path.

        Args:
            paths: The document's paths object
            base_path: Prefix for every method path

        Returns:
            The methods and, in method order, the models they contribute
        """
        methods_with_models = []
        for end_path, path_item in (paths or {}).items():
            if not isinstance(path_item, dict):
                continue
            for http_method in self.config.http_methods:
                operation = path_item.get(http_method)
                if not operation:
                    continue
                methods_with_models.append(
                    self.method_from_operation(end_path, path_item.get("parameters"), base_path, http_method, operation)
                )

        # Stable sort: operations of one path keep the http method order
        methods_with_models.sort(key=lambda method_and_models: method_and_models[0].path)

        methods = [method for method, _ in methods_with_models]
        models = [model for _, method_models in methods_with_models for model in method_models]
        return methods, models

    def method_from_operation(
        self,
        end_path: str,
        path_params: list[dict[str, Any]] | None,
        base_path: str,
        http_method: str,
        operation: dict[str, Any],
    ) -> tuple[Method, list[Model]]:
        """Build one method and collect the models of its params and response."""
        operation_id = None if self.config.no_operation_ids else operation.get("operationId")
        name = self.names.method_name(http_method, end_path, operation_id)

        params: list[Param] = []
        models: list[Model] = []
        for param_spec in [*(path_params or []), *(operation.get("parameters") or [])]:
            param, param_models = self.param_from_spec(param_spec, name)
            params.append(param)
            models.extend(param_models)

        response_spec = self._select_response(operation)
        if response_spec is None:
            raise MissingSchemaError(f"Found a method without a success, redirect or default response:\n{describe(operation)}")
        response, response_models = self.param_from_spec(response_spec, name)
        models.extend(response_models)

        produces = operation.get("produces") or []
        method = Method(
            path=join_url_path("/", base_path, end_path),
            http_method=http_method,
            name=name,
            description=operation.get("description"),
            params=params,
            response=response,
            streaming=bool(produces) and produces[0] == EVENT_STREAM,
            security=operation.get("security"),
        )
        return method, models

    def _select_response(self, operation: dict[str, Any]) -> dict[str, Any] | None:
        """First 2xx response, else first 3xx, else the default response."""
        responses = operation.get("responses") or {}
        keys = [str(key) for key in responses]
        good_key = next((k for k in keys if k.startswith("2")), None) or next((k for k in keys if k.startswith("3")), None) or "default"
        for key, response in responses.items():
            if str(key) == good_key:
                return response
        return None

    def param_from_spec(self, unresolved: dict[str, Any], method_name: str) -> tuple[Param, list[Model]]:
        """
        Build a parameter (or the response) and the models of its schema.

        Parameters declaring schema fields directly (``type``, ``format``...)
        are treated as if those fields were nested under ``schema``.
        """
        param_spec = self.resolver.resolve_ref_and_all_of(unresolved)
        if "schema" not in param_spec:
            param_spec = {**param_spec, "schema": param_spec}

        schema = param_spec["schema"]
        if not isinstance(schema, dict):
            raise MissingSchemaError(f"Found a param with no schema:\n{describe(param_spec)}")

        server_name = param_spec.get("name")
        default_name = self.names.class_name([method_name, server_name or "response"])
        if schema:
            result = self.models.from_schema(schema, default_name)
        else:
            result = self.models.void_result()

        location = self._location(param_spec) if param_spec.get("in") else None
        param = Param(
            name=self.names.param_name(server_name),
            server_name=server_name,
            location=location,
            type=result.type_info.name or param_spec.get("type") or "Void",
            format=result.type_info.format,
            is_required=bool(param_spec.get("required")) or location is ParameterLocation.PATH,
            description=param_spec.get("description"),
            schema_type=schema.get("type"),
        )
        return param, result.models

    def _location(self, param_spec: dict[str, Any]) -> ParameterLocation:
        """
        Parse the ``in`` field of a parameter.

        Raises:
            UnsupportedSchemaError: If the location is not one of ParameterLocation
        """
        try:
            return ParameterLocation(param_spec["in"])
        except ValueError as exc:
            accepted = ", ".join(location.value for location in ParameterLocation)
            raise UnsupportedSchemaError(
                f"Found a param in '{param_spec['in']}', expected one of: {accepted}\n{describe(param_spec)}"
            ) from exc
