"""Tests for the command line interface."""

import json
import shutil
from pathlib import Path

import pytest
from typer.testing import CliRunner

from complex_lint import __version__
from complex_lint.cli import app

EXAMPLE_GO = Path(__file__).resolve().parents[2] / "examples" / "example.go"

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_config_files(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("COMPLEX_LINT_OUTPUT_FORMAT", raising=False)


class TestRun:
    def test_text_report(self):
        result = runner.invoke(app, ["--path", str(EXAMPLE_GO)])
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        start = lines.index('Function "Render" analysis:')
        assert lines[start + 1 : start + 6] == [
            " - input state space: 200000",
            " - output state space: 10",
            " - branching factor: 3",
            " - operational complexity: 6",
            " - local assignment: 0",
        ]

    def test_declaration_order(self):
        result = runner.invoke(app, ["-p", str(EXAMPLE_GO)])
        headers = [line for line in result.stdout.splitlines() if line.startswith("Function")]
        assert headers == [
            'Function "ProcessData" analysis:',
            'Function "processSingleValue" analysis:',
            'Function "Render" analysis:',
            'Function "Sum" analysis:',
        ]

    def test_json_format(self):
        result = runner.invoke(app, ["-p", str(EXAMPLE_GO), "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["package"] == "main"
        assert data["functions"][0]["name"] == "ProcessData"
        assert data["functions"][0]["input_state_space"] == 1000

    def test_default_path(self, tmp_path):
        with runner.isolated_filesystem(temp_dir=tmp_path):
            shutil.copy(EXAMPLE_GO, "example.go")
            result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert 'Function "Sum" analysis:' in result.stdout

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestErrors:
    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["--path", str(tmp_path / "nope.go")])
        assert result.exit_code == 1
        assert "Error" in result.output
        assert "Function" not in result.output

    def test_syntax_error(self, tmp_path):
        bad = tmp_path / "bad.go"
        bad.write_text("package bad\n\nfunc f( {\n")
        result = runner.invoke(app, ["--path", str(bad)])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_unknown_format(self):
        result = runner.invoke(app, ["-p", str(EXAMPLE_GO), "--format", "xml"])
        assert result.exit_code == 1
        assert "Error" in result.output
