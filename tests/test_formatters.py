"""Tests for the formatters package."""

import json

import pytest

from complex_lint.analysis import ComplexityReport, FileAnalysis
from complex_lint.formatters import JsonFormatter, TextFormatter, get_formatter


def _make_analysis():
    reports = (
        ComplexityReport(
            name="Pick",
            input_state_space=2000,
            output_state_space=10,
            branching_factor=1,
            operational_complexity=2,
            local_assignment_count=1,
            line=3,
        ),
        ComplexityReport(
            name="Serve",
            input_state_space=200,
            output_state_space=1,
            branching_factor=1,
            operational_complexity=4,
            local_assignment_count=1,
            line=9,
            receiver="*Server",
            unresolved_types=1,
        ),
    )
    return FileAnalysis(path="main.go", package="main", reports=reports)


class TestGetFormatter:
    def test_known_names(self):
        assert isinstance(get_formatter("text"), TextFormatter)
        assert isinstance(get_formatter("json"), JsonFormatter)

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown formatter"):
            get_formatter("xml")


class TestTextFormatter:
    def test_block_per_function(self):
        lines = TextFormatter().format(_make_analysis()).split("\n")
        assert lines[:7] == [
            "",
            'Function "Pick" analysis:',
            " - input state space: 2000",
            " - output state space: 10",
            " - branching factor: 1",
            " - operational complexity: 2",
            " - local assignment: 1",
        ]
        assert lines[7:9] == ["", 'Function "Serve" analysis:']

    def test_declaration_order_kept(self):
        output = TextFormatter().format(_make_analysis())
        assert output.index('"Pick"') < output.index('"Serve"')

    def test_empty_file_prints_nothing(self, capsys):
        TextFormatter().render(FileAnalysis(path="empty.go", package="empty"))
        assert capsys.readouterr().out == ""

    def test_render_writes_stdout(self, capsys):
        TextFormatter().render(_make_analysis())
        out = capsys.readouterr().out
        assert out.startswith('\nFunction "Pick" analysis:\n')
        assert out.endswith(" - local assignment: 1\n")


class TestJsonFormatter:
    def test_valid_json(self):
        data = json.loads(JsonFormatter().format(_make_analysis()))
        assert data["path"] == "main.go"
        assert data["package"] == "main"
        assert [f["name"] for f in data["functions"]] == ["Pick", "Serve"]

    def test_report_fields(self):
        data = json.loads(JsonFormatter().format(_make_analysis()))
        serve = data["functions"][1]
        assert serve["receiver"] == "*Server"
        assert serve["input_state_space"] == 200
        assert serve["unresolved_types"] == 1
        assert data["functions"][0]["receiver"] is None
