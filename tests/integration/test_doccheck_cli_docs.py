"""Integration tests for the docs CLI."""

import json

from typer.testing import CliRunner

from doccheck.cli import main
from doccheck.cli._create_app import _create_app
from doccheck.cli.docs import docs

runner = CliRunner()


def test_check_with_failures_exits_1(docs_tree):
    result = runner.invoke(_create_app(), ["docs", "check", str(docs_tree)])
    assert result.exit_code == 1
    assert "passed: false" in result.output
    assert "links_checked: 5" in result.output
    assert "reason: should be relative" in result.output


def test_check_clean_tree_exits_0(clean_tree):
    result = runner.invoke(_create_app(), ["docs", "check", str(clean_tree)])
    assert result.exit_code == 0
    assert "passed: true" in result.output


def test_json_display(docs_tree):
    result = runner.invoke(_create_app(), ["--display", "json", "docs", "check", str(docs_tree)])
    assert result.exit_code == 1
    assert '"passed": false' in result.output
    assert '"reason": "github line links must have a descriptive title"' in result.output


def test_invalid_display_is_rejected(docs_tree):
    result = runner.invoke(_create_app(), ["--display", "xml", "docs", "check", str(docs_tree)])
    assert result.exit_code == 1
    assert "--display must be 'json' or 'yaml'" in result.output


def test_verbose_flag_is_accepted(clean_tree):
    result = runner.invoke(_create_app(), ["--verbose", "docs", "check", str(clean_tree)])
    assert result.exit_code == 0


def test_source_root_option(docs_tree, tmp_path):
    result = runner.invoke(_create_app(), ["docs", "check", str(docs_tree), "--source-root", str(tmp_path)])
    assert result.exit_code == 1
    assert "reason: cannot read anchored source" in result.output


def test_empty_directory_passes(tmp_path):
    result = runner.invoke(_create_app(), ["docs", "check", str(tmp_path)])
    assert result.exit_code == 0
    assert "No markdown files found" in result.output


def test_docs_app_runs_without_root_callback(clean_tree):
    result = runner.invoke(docs(), ["check", str(clean_tree)])
    assert result.exit_code == 0
    assert "passed: true" in result.output


def test_help_lists_commands():
    result = runner.invoke(_create_app(), ["--help"])
    assert result.exit_code == 0
    assert "docs" in result.output

    result = runner.invoke(_create_app(), ["docs", "check", "--help"])
    assert result.exit_code == 0
    assert "--source-root" in result.output


def test_main_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.startswith("doccheck ")


def test_main_returns_exit_code(docs_tree, clean_tree, capsys):
    assert main(["--display", "json", "docs", "check", str(clean_tree)]) == 0
    out = capsys.readouterr().out
    assert json.loads(out)["passed"] is True
    assert main(["docs", "check", str(docs_tree)]) == 1
