#!/usr/bin/env python3

import json
from pathlib import Path

import pytest

from swagger_to_code.exceptions import MissingSchemaError, UnsupportedSchemaError
from swagger_to_code.pipeline.analyzer import (
    MethodSynthesizer,
    ModelSynthesizer,
    NameResolver,
    ParameterLocation,
    ReferenceResolver,
    TypeMapper,
)
from swagger_to_code.pipeline.backends import JsBackend, KotlinBackend, SwiftBackend
from swagger_to_code.pipeline.config import CodeGeneratorConfig

TEST_DATA = Path(__file__).parent / "test_data"


def load_petstore():
    with open(TEST_DATA / "petstore.json") as f:
        return json.load(f)


def method_synthesizer(document, backend=SwiftBackend, config=None):
    config = config or CodeGeneratorConfig()
    names = NameResolver(snake=config.snake, rules=config.naming)
    models = ModelSynthesizer(ReferenceResolver(document), TypeMapper(backend.TYPE_MAPPING, names), names)
    return MethodSynthesizer(models, config)


def build_methods(document, backend=SwiftBackend, config=None, base_path=""):
    return method_synthesizer(document, backend, config).methods_from_paths(document.get("paths"), base_path)


def by_name(methods, name):
    return next(method for method in methods if method.name == name)


class TestMethodNaming:
    """Test method names and ordering"""

    def test_name_from_path(self):
        document = {"paths": {"/items/{id}": {"get": {"parameters": [{"name": "id", "in": "path", "type": "string"}], "responses": {"200": {}}}}}}
        methods, _ = build_methods(document)
        method = methods[0]

        assert method.name == "getItemsId"
        assert len(method.params) == 1
        param = method.params[0]
        assert param.name == "id"
        assert param.location is ParameterLocation.PATH
        assert param.is_required

    def test_snake_names(self):
        config = CodeGeneratorConfig(snake=True)
        methods, _ = build_methods(load_petstore(), config=config)
        assert [method.name for method in methods] == [
            "streamEvents",
            "listPets",
            "createPet",
            "get_pets_pet_id",
            "delete_pets_pet_id",
            "post_pets_pet_id_photo",
        ]

    def test_operation_ids_can_be_ignored(self):
        config = CodeGeneratorConfig(no_operation_ids=True)
        methods, _ = build_methods(load_petstore(), config=config)
        assert [method.name for method in methods][:3] == ["getEvents", "getPets", "postPets"]

    def test_sorted_by_path_then_http_method(self):
        methods, _ = build_methods(load_petstore(), base_path="/v1")
        assert [(method.path, method.cap_method) for method in methods] == [
            ("/v1/events", "GET"),
            ("/v1/pets", "GET"),
            ("/v1/pets", "POST"),
            ("/v1/pets/{petId}", "GET"),
            ("/v1/pets/{petId}", "DELETE"),
            ("/v1/pets/{petId}/photo", "POST"),
        ]

    def test_custom_http_methods(self):
        config = CodeGeneratorConfig(http_methods=("delete", "get"))
        methods, _ = build_methods(load_petstore(), config=config)
        assert [method.http_method for method in methods if method.path == "/pets/{petId}"] == ["delete", "get"]
        assert "post" not in [method.http_method for method in methods]


class TestParams:
    """Test parameters"""

    def setup_method(self):
        self.methods, self.models = build_methods(load_petstore())

    def test_query_params(self):
        limit, status = by_name(self.methods, "listPets").params

        assert (limit.name, limit.server_name, limit.type, limit.in_cap) == ("limit", "limit", "Int32", "Query")
        assert limit.description == "Maximum number of pets"
        assert not limit.is_required
        assert status.type == "ListPetsStatus"

    def test_path_item_params_come_first(self):
        method = by_name(self.methods, "postPetsPetIdPhoto")
        assert [param.server_name for param in method.params] == ["petId", "photo", "X-Request-Id"]
        assert method.params[0].type == "Int64"
        assert method.params[0].is_required

    def test_header_and_form_data(self):
        _, photo, request_id = by_name(self.methods, "postPetsPetIdPhoto").params

        assert photo.in_cap == "Part"
        assert photo.location is ParameterLocation.FORM_DATA
        assert photo.type == "URL"
        assert photo.schema_type == "file"
        assert (request_id.name, request_id.in_cap) == ("xRequestId", "Header")

    def test_body_param(self):
        (pet,) = by_name(self.methods, "createPet").params
        assert (pet.name, pet.type, pet.in_cap, pet.is_required) == ("pet", "Pet", "Body", True)

    def test_unknown_location(self):
        document = {
            "paths": {
                "/session": {
                    "get": {
                        "parameters": [{"name": "token", "in": "cookie", "type": "string"}],
                        "responses": {"200": {}},
                    }
                }
            }
        }
        with pytest.raises(UnsupportedSchemaError) as exc_info:
            build_methods(document)

        assert "Found a param in 'cookie'" in str(exc_info.value)
        assert "path, query, header, body, formData" in str(exc_info.value)

    def test_models_in_method_order(self):
        assert [model.name for model in self.models][:4] == ["Event", "ListPetsStatus", "Pet", "PetStatus"]


class TestResponses:
    """Test response selection"""

    def setup_method(self):
        self.methods, _ = build_methods(load_petstore())

    def test_success_response_wins_over_default(self):
        assert by_name(self.methods, "listPets").response.type == "Array<Pet>"

    def test_response_type_follows_language(self):
        methods, _ = build_methods(load_petstore(), backend=KotlinBackend)
        assert by_name(methods, "listPets").response.type == "List<Pet>"
        methods, _ = build_methods(load_petstore(), backend=JsBackend)
        assert by_name(methods, "listPets").response.type == "Array<Pet>"

    def test_response_without_schema(self):
        response = by_name(self.methods, "createPet").response
        assert response.type == "Void"
        assert response.name == ""
        assert response.location is None

    def test_redirect_then_default(self):
        document = {
            "paths": {
                "/a": {"get": {"responses": {"default": {"schema": {"type": "string"}}, "302": {"schema": {"type": "integer"}}}}},
                "/b": {"get": {"responses": {"default": {"schema": {"type": "boolean"}}}}},
            }
        }
        methods, _ = build_methods(document)
        assert [method.response.type for method in methods] == ["Int32", "Bool"]

    def test_integer_response_keys(self):
        document = {"paths": {"/a": {"get": {"responses": {200: {"schema": {"type": "string"}}}}}}}
        methods, _ = build_methods(document)
        assert methods[0].response.type == "String"

    def test_missing_response(self):
        document = {"paths": {"/a": {"get": {"responses": {"400": {"schema": {"type": "string"}}}}}}}
        with pytest.raises(MissingSchemaError):
            build_methods(document)

    def test_null_schema(self):
        document = {"paths": {"/a": {"get": {"responses": {"200": {"schema": None}}}}}}
        with pytest.raises(MissingSchemaError):
            build_methods(document)

    def test_streaming(self):
        assert by_name(self.methods, "streamEvents").streaming
        assert not by_name(self.methods, "listPets").streaming

    def test_description_and_security(self):
        document = {"paths": {"/a": {"get": {"description": "Get a", "security": [{"apiKey": []}], "responses": {"200": {}}}}}}
        methods, _ = build_methods(document)
        assert methods[0].description == "Get a"
        assert methods[0].security == [{"apiKey": []}]


if __name__ == "__main__":
    pytest.main([__file__])
