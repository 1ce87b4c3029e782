"""Unit tests for doccheck.api.validate_output module."""

import pytest

from doccheck.api._output_schemas._registry import SchemaRegistry
from doccheck.api.docs.cmd_check import cmd_check
from doccheck.api.validate_output import validate_output


def good_output() -> dict:
    return {
        "root": "docs",
        "passed": False,
        "files_checked": ["docs/a.md"],
        "links_checked": 1,
        "failures": [{"path": "docs/a.md", "reason": "should be relative", "value": "https://github.com/google/cadvisor"}],
        "errors": [],
        "warnings": [],
    }


def test_valid_output_is_normalized():
    output = good_output()
    del output["errors"]
    validated = validate_output(cmd_check, output)
    assert validated["errors"] == []
    assert validated["failures"][0]["reason"] == "should be relative"


def test_missing_field_raises():
    output = good_output()
    del output["links_checked"]
    with pytest.raises(ValueError, match="Output validation failed for docs.check"):
        validate_output(cmd_check, output)


def test_wrong_type_raises():
    output = good_output()
    output["failures"] = ["not a record"]
    with pytest.raises(ValueError, match="docs.check"):
        validate_output(cmd_check, output)


def test_functions_outside_the_api_are_not_validated():
    def cmd_other():
        pass

    assert validate_output(cmd_other, {"anything": 1}) == {"anything": 1}


def test_non_command_functions_are_not_validated():
    def helper():
        pass

    helper.__module__ = "doccheck.api.docs.helper"
    assert validate_output(helper, {"anything": 1}) == {"anything": 1}


def test_registry_rejects_duplicates():
    registry = SchemaRegistry()

    class Schema:
        pass

    registry.register_output_schema("docs", "check", Schema)
    assert registry.get_output_schema("docs", "check") is Schema
    assert registry.get_output_schema("docs", "other") is None
    with pytest.raises(ValueError, match="already registered"):
        registry.register_output_schema("docs", "check", Schema)
