#!/usr/bin/env python3

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from swagger_to_code.cli_utils import reconstruct_command_line
from swagger_to_code.swagger_to_code import swagger_to_code

TEST_DATA = Path(__file__).parent / "test_data"


class TestCli:
    """Test the command line"""

    def test_single_spec(self, tmp_path):
        result = CliRunner().invoke(
            swagger_to_code,
            ["--language", "kotlin", "--spec", str(TEST_DATA / "petstore.json"), "--name", "PetStore", "--output", str(tmp_path)],
        )

        assert result.exit_code == 0, result.output
        kotlin = (tmp_path / "PetStore.kt").read_text()
        assert "// Generated by swagger_to_code" in kotlin
        assert "--language kotlin" in kotlin
        assert "petstore.json" in kotlin

    def test_config_file(self, tmp_path):
        result = CliRunner().invoke(swagger_to_code, [str(TEST_DATA / "config.json"), "--output", str(tmp_path)])

        assert result.exit_code == 0, result.output
        assert sorted(path.name for path in tmp_path.iterdir()) == [
            "PetStore.podspec",
            "PetStore.swift",
            "SmallStore.podspec",
            "SmallStore.swift",
        ]
        assert "public class PetAPI {" in (tmp_path / "PetStore.swift").read_text()

    def test_snake_flag(self, tmp_path):
        result = CliRunner().invoke(
            swagger_to_code,
            ["-l", "js", "-s", str(TEST_DATA / "petstore.json"), "-n", "PetStore", "-o", str(tmp_path), "--snake", "--no-operation-ids"],
        )

        assert result.exit_code == 0, result.output
        assert "get_pets(request" in (tmp_path / "index.d.ts").read_text()

    def test_missing_arguments(self):
        result = CliRunner().invoke(swagger_to_code, ["--language", "swift"])
        assert result.exit_code != 0
        assert "Missing configuration file or spec/name arguments" in result.output

    def test_fatal_error(self, tmp_path):
        spec = tmp_path / "remote.json"
        spec.write_text(json.dumps({"definitions": {"A": {"properties": {"b": {"$ref": "other.json#/B"}}}}}))

        result = CliRunner().invoke(swagger_to_code, ["-l", "swift", "-s", str(spec), "-n", "Remote", "-o", str(tmp_path / "out")])

        assert result.exit_code == 1
        assert "No support for refs" in result.output
        assert not (tmp_path / "out").exists()

    def test_unknown_param_location(self, tmp_path):
        spec = tmp_path / "session.json"
        spec.write_text(
            json.dumps({"paths": {"/session": {"get": {"parameters": [{"name": "token", "in": "cookie", "type": "string"}], "responses": {"200": {}}}}}})
        )

        result = CliRunner().invoke(swagger_to_code, ["-l", "swift", "-s", str(spec), "-n", "Session", "-o", str(tmp_path / "out")])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Found a param in 'cookie'" in result.output

    def test_validation_report(self, tmp_path):
        spec = tmp_path / "upload.json"
        spec.write_text(
            json.dumps({"paths": {"/upload": {"post": {"parameters": [{"name": "meta", "in": "formData", "type": "string"}], "responses": {"200": {}}}}}})
        )

        result = CliRunner().invoke(swagger_to_code, ["-l", "swift", "-s", str(spec), "-n", "Upload", "-o", str(tmp_path / "out")])

        assert result.exit_code == 1
        assert "Problems with Upload: " in result.output
        assert "Found method with form data param that is not of type 'file'" in result.output


class TestCliUtils:
    """Test cases for CLI utilities"""

    def test_reconstruct_command_line_without_context(self):
        # No active Click context outside of a command
        assert reconstruct_command_line(swagger_to_code) == "swagger_to_code"


if __name__ == "__main__":
    pytest.main([__file__])
