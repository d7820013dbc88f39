"""Tests for the ``tree_pretty`` CLI demonstration script."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

import tree_pretty
from tasks.pretty_printing import Branch, Leaf, Tree

EXPECTED_LINES = [
    "Branch(",
    "  Branch(",
    "    Leaf(1), Branch(",
    "      Leaf(2), Leaf(3)",
    "    )",
    "  ), Leaf(4)",
    ")",
]


def test_cli_prints_sample_tree(capsys: pytest.CaptureFixture[str]) -> None:
    assert tree_pretty.main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == "\n".join(EXPECTED_LINES) + "\n"


def test_build_sample_tree_is_fresh_each_call() -> None:
    first = tree_pretty.build_sample_tree()
    second = tree_pretty.build_sample_tree()
    assert first == second
    assert first.depth() == 4


def test_cli_flags_override_defaults(capsys: pytest.CaptureFixture[str]) -> None:
    assert tree_pretty.main(["--width", "80", "--indent", "4"]) == 0
    out = capsys.readouterr().out
    assert out == "Branch( Branch( Leaf(1), Branch( Leaf(2), Leaf(3) ) ), Leaf(4) )\n"


@pytest.mark.parametrize("argv", [["--width", "0"], ["--indent", "-1"], ["--width", "wide"]])
def test_cli_rejects_invalid_flags(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        tree_pretty.main(argv)
    assert excinfo.value.code == 2


def test_cli_reads_yaml_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = tmp_path / "tree.yaml"
    config.write_text("width: 20\nindent: 3\ntree: [5, 6]\n", encoding="utf-8")

    assert tree_pretty.main(["--config", str(config)]) == 0
    assert capsys.readouterr().out == "Branch(\n   Leaf(5), Leaf(6)\n)\n"


def test_cli_flags_take_precedence_over_config(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = tmp_path / "tree.json"
    config.write_text(json.dumps({"width": 10, "tree": [5, 6]}), encoding="utf-8")

    assert tree_pretty.main(["--config", str(config), "--width", "40"]) == 0
    assert capsys.readouterr().out == "Branch( Leaf(5), Leaf(6) )\n"


def test_empty_yaml_config_keeps_defaults(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = tmp_path / "empty.yml"
    config.write_text("", encoding="utf-8")

    assert tree_pretty.main(["--config", str(config)]) == 0
    assert capsys.readouterr().out.splitlines() == EXPECTED_LINES


@pytest.mark.parametrize(
    "filename,content",
    [
        ("bad.json", "{not json"),
        ("bad.yaml", "width: [unclosed"),
        ("list.yaml", "- 1\n- 2\n"),
        ("unknown.yaml", "colour: red\n"),
        ("width.yaml", "width: 0\n"),
        ("indent.json", '{"indent": "two"}'),
        ("tree.yaml", "tree: [1, 2, 3]\n"),
        ("intkey.yaml", "1: 2\n"),
        ("mixedkeys.yaml", "1: 2\nwidth: 3\n"),
    ],
)
def test_cli_reports_config_errors(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
    caplog: pytest.LogCaptureFixture,
    filename: str,
    content: str,
) -> None:
    config = tmp_path / filename
    config.write_text(content, encoding="utf-8")

    with caplog.at_level(logging.ERROR):
        assert tree_pretty.main(["--config", str(config)]) == 1
    assert capsys.readouterr().out == ""
    assert any("Failed to prepare tree" in record.getMessage() for record in caplog.records)


def test_missing_config_file_is_reported(tmp_path: Path) -> None:
    assert tree_pretty.main(["--config", str(tmp_path / "absent.yaml")]) == 1


def test_load_config_wraps_parse_errors(tmp_path: Path) -> None:
    config = tmp_path / "bad.json"
    config.write_text("[", encoding="utf-8")
    with pytest.raises(tree_pretty.TreeConfigError) as excinfo:
        tree_pretty.load_config(config)
    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)


def test_too_deeply_nested_config_tree_is_reported(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    config = tmp_path / "deep.yaml"
    config.write_text("tree: " + "[" * 5000 + "1" + ", 1]" * 5000 + "\n", encoding="utf-8")

    with caplog.at_level(logging.ERROR):
        assert tree_pretty.main(["--config", str(config)]) == 1
    assert any("Failed to prepare tree" in record.getMessage() for record in caplog.records)


def test_too_deep_tree_rendering_is_reported(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    caplog: pytest.LogCaptureFixture,
) -> None:
    tree: Tree = Leaf(0)
    for value in range(1, 20000):
        tree = Branch(tree, Leaf(value))
    monkeypatch.setattr(tree_pretty, "build_sample_tree", lambda: tree)

    with caplog.at_level(logging.ERROR):
        assert tree_pretty.main([]) == 1
    assert capsys.readouterr().out == ""
    assert any("Failed to render tree" in record.getMessage() for record in caplog.records)
