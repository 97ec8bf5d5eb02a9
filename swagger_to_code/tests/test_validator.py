#!/usr/bin/env python3

import pytest

from swagger_to_code.pipeline import ApiConfig, PipelineGenerator
from swagger_to_code.pipeline.analyzer import IR, EnumModel, Method, ObjectModel, Param, ParameterLocation
from swagger_to_code.validator import SEPARATOR, verify, verify_ir

FORM_DATA_DOCUMENT = {
    "paths": {
        "/upload": {
            "post": {
                "parameters": [
                    {"name": "file", "in": "formData", "type": "file"},
                    {"name": "meta", "in": "formData", "type": "object"},
                ],
                "responses": {"200": {"schema": {"$ref": "#/definitions/Receipt"}}},
            }
        },
        "/receipts": {"get": {"responses": {"200": {"schema": {"type": "array", "items": {"$ref": "#/definitions/Receipt"}}}}}},
    },
    "definitions": {"Receipt": {"properties": {"id": {"type": "string"}}}},
}


def typed_method(**kwargs):
    return Method(path="/a", http_method="get", name="getA", response=Param(type="Void"), **kwargs)


class TestVerifyIr:
    """Test the IR checks"""

    def test_valid_ir(self):
        ir = IR(api_name="Api", methods=[typed_method()], object_models=[ObjectModel(name="A")], enum_models=[EnumModel(name="B")])
        assert verify_ir(ir) == ""

    def test_untyped_response(self):
        ir = IR(methods=[Method(name="getA", response=Param())])
        report = verify_ir(ir)
        assert report.startswith("\nFound method with param or response without a type: ")
        assert report.endswith(SEPARATOR)

    def test_untyped_param(self):
        ir = IR(methods=[typed_method(params=[Param(name="a", location=ParameterLocation.QUERY)])])
        assert report_count(verify_ir(ir)) == 1

    def test_duplicated_names(self):
        ir = IR(object_models=[ObjectModel(name="A", description="1"), ObjectModel(name="A", description="2")])
        report = verify_ir(ir)
        assert report.count("Found model with duplicated name") == 2

    def test_model_without_name(self):
        assert "Found model without name" in verify_ir(IR(enum_models=[EnumModel()]))

    def test_unknown_model_kind(self):
        assert "Found non-object-or-enum model" in verify_ir(IR(object_models=[Param(name="NotAModel")]))

    def test_problems_are_aggregated(self):
        ir = IR(methods=[Method(name="getA", response=Param())], enum_models=[EnumModel()])
        assert report_count(verify_ir(ir)) == 2


def report_count(report):
    return report.count(SEPARATOR)


class TestVerify:
    """Test the combined report"""

    def test_empty_report(self):
        assert verify({"A": IR(api_name="A"), "B": IR(api_name="B")}) == ""

    def test_report_per_api(self):
        bad = IR(api_name="Bad", enum_models=[EnumModel()])
        report = verify({"Good": IR(api_name="Good"), "Bad": bad})
        assert report.startswith("Problems with Bad: \nFound model without name")
        assert "Good" not in report

    def test_form_data_param_that_is_not_a_file(self):
        generator = PipelineGenerator([ApiConfig(name="Uploads", spec=FORM_DATA_DOCUMENT)], "swift")
        irs = generator.build_irs()

        # The rest of the document is still synthesized
        assert [method.name for method in irs["Uploads"].methods] == ["getReceipts", "postUpload"]
        assert [model.name for model in irs["Uploads"].object_models] == ["Receipt"]

        report = generator.verify(irs)
        assert report_count(report) == 1
        assert "Found method with form data param that is not of type 'file'" in report
        assert "'meta'" in report


if __name__ == "__main__":
    pytest.main([__file__])
