#!/usr/bin/env python3

import copy

import pytest

from swagger_to_code.exceptions import CyclicReferenceError, UnsupportedReferenceError
from swagger_to_code.pipeline.analyzer import ReferenceResolver, deep_merge

DOCUMENT = {
    "definitions": {
        "Animal": {"required": ["name"], "properties": {"name": {"type": "string"}}},
        "Dog": {
            "allOf": [
                {"$ref": "#/definitions/Animal"},
                {"required": ["bark"], "properties": {"bark": {"type": "boolean"}}},
            ]
        },
        "Alias": {"$ref": "#/definitions/Dog"},
        "a/b": {"type": "string"},
        "Loop1": {"$ref": "#/definitions/Loop2"},
        "Loop2": {"$ref": "#/definitions/Loop1"},
    },
    "parameters": [{"name": "limit", "in": "query", "type": "integer"}],
}


class TestDeepMerge:
    """Test the schema merge"""

    def test_lists_are_concatenated(self):
        assert deep_merge({"a": [1, 2], "b": 1}, {"a": [3], "b": 2}) == {"a": [1, 2, 3], "b": 2}

    def test_nested_dicts_are_merged(self):
        merged = deep_merge(
            {"properties": {"a": {"type": "string"}}},
            {"properties": {"b": {"type": "integer"}}},
        )
        assert list(merged["properties"]) == ["a", "b"]

    def test_later_scalar_wins(self):
        assert deep_merge({"type": "string"}, None, {"type": "integer"}) == {"type": "integer"}

    def test_sources_are_not_modified(self):
        first = {"required": ["a"]}
        second = {"required": ["b"]}
        deep_merge(first, second)
        assert first == {"required": ["a"]}
        assert second == {"required": ["b"]}


class TestReferenceResolver:
    """Test $ref and allOf resolution"""

    def setup_method(self):
        self.document = copy.deepcopy(DOCUMENT)
        self.resolver = ReferenceResolver(self.document)

    def test_lookup(self):
        assert self.resolver.lookup("#/definitions/Animal") is self.document["definitions"]["Animal"]
        assert self.resolver.lookup("#/definitions/a~1b") == {"type": "string"}
        assert self.resolver.lookup("#/parameters/0")["name"] == "limit"

    def test_non_local_ref_is_rejected(self):
        with pytest.raises(UnsupportedReferenceError):
            self.resolver.resolve({"$ref": "other.json#/definitions/Pet"})

    def test_unknown_pointer_is_rejected(self):
        with pytest.raises(UnsupportedReferenceError):
            self.resolver.resolve({"$ref": "#/definitions/Missing"})

    def test_resolve_ref_keeps_all_of(self):
        resolved = self.resolver.resolve_ref({"$ref": "#/definitions/Dog"})
        assert "allOf" in resolved
        assert "$ref" not in resolved

    def test_resolve_all_of_merges_in_order(self):
        resolved = self.resolver.resolve_ref_and_all_of({"$ref": "#/definitions/Dog"})
        assert list(resolved["properties"]) == ["name", "bark"]
        assert resolved["required"] == ["name", "bark"]
        assert "allOf" not in resolved

    def test_local_fields_win(self):
        resolved = self.resolver.resolve_ref_and_all_of({"$ref": "#/definitions/Animal", "description": "Local"})
        assert resolved["description"] == "Local"
        assert "description" not in self.document["definitions"]["Animal"]

    def test_chained_refs(self):
        resolved = self.resolver.resolve_ref_and_all_of({"$ref": "#/definitions/Alias"})
        assert list(resolved["properties"]) == ["name", "bark"]

    def test_ignore_ref(self):
        dog = self.document["definitions"]["Dog"]
        resolved = self.resolver.resolve_ref_and_all_of(dog, ignore_ref="#/definitions/Animal")
        assert list(resolved["properties"]) == ["bark"]
        assert resolved["required"] == ["bark"]

    def test_document_is_not_modified(self):
        self.resolver.resolve_ref_and_all_of({"$ref": "#/definitions/Alias"})
        assert self.document == DOCUMENT

    def test_ref_loop(self):
        with pytest.raises(CyclicReferenceError) as exc_info:
            self.resolver.resolve({"$ref": "#/definitions/Loop1"})
        assert exc_info.value.cycle == ["#/definitions/Loop1", "#/definitions/Loop2", "#/definitions/Loop1"]


if __name__ == "__main__":
    pytest.main([__file__])
