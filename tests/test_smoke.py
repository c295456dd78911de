"""Smoke tests: imports work, CLI reads JSON and writes a layout."""

import json

from click.testing import CliRunner

from flowchart_layout.__main__ import main

CHAIN = {"nodes": ["A", "B", "C"], "edges": [["A", "B"], ["B", "C"]]}


def test_import():
    import flowchart_layout

    assert flowchart_layout.layout_flowchart is not None


def test_cli_help():
    runner = CliRunner()
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "flowchart graph" in result.output


def test_cli_file_input(tmp_path):
    path = tmp_path / "chain.json"
    path.write_text(json.dumps(CHAIN))
    result = CliRunner().invoke(main, [str(path)])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert [n["id"] for n in data["nodes"]] == ["A", "B", "C"]
    assert [n["layer"] for n in data["nodes"]] == [0, 1, 2]
    assert len(data["edges"]) == 2


def test_cli_stdin_with_overrides():
    result = CliRunner().invoke(main, ["-d", "LR", "-s", "layer-gap=5"], input=json.dumps(CHAIN))
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["direction"] == "LR"
    assert data["width"] == 3 * 3 + 2 * 5


def test_cli_groups(tmp_path):
    document = dict(CHAIN, groups={"top": ["A", "B"]})
    result = CliRunner().invoke(main, ["--group-padding", "1"], input=json.dumps(document))
    assert result.exit_code == 0, result.output
    assert set(json.loads(result.output)["groups"]) == {"top"}


def test_cli_output_file(tmp_path):
    out = tmp_path / "layout.json"
    result = CliRunner().invoke(main, ["-o", str(out)], input=json.dumps(CHAIN))
    assert result.exit_code == 0
    assert json.loads(out.read_text())["height"] == 15


def test_cli_unknown_node_exits_1():
    document = {"nodes": ["A"], "edges": [["A", "B"]]}
    result = CliRunner().invoke(main, [], input=json.dumps(document))
    assert result.exit_code == 1
    assert "error:" in result.output


def test_cli_bad_style_exits_1():
    result = CliRunner().invoke(main, ["-s", "node_gap=-3"], input=json.dumps(CHAIN))
    assert result.exit_code == 1
    assert "node_gap" in result.output


def test_cli_invalid_json_exits_1():
    result = CliRunner().invoke(main, [], input="{not json")
    assert result.exit_code == 1
    assert "invalid JSON" in result.output


def test_cli_non_numeric_size_exits_1():
    document = {"nodes": [{"id": "A", "width": "10"}]}
    result = CliRunner().invoke(main, [], input=json.dumps(document))
    assert result.exit_code == 1
    assert "error:" in result.output
    assert "non-numeric width" in result.output


def test_cli_fan_out_style_options():
    document = {"nodes": ["A", "B", "C", "D"], "edges": [["A", "B"], ["A", "C"], ["A", "D"]]}
    result = CliRunner().invoke(main, ["-s", "widen_for_ports=true"], input=json.dumps(document))
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["nodes"][0]["width"] == 6.0
