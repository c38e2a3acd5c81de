from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from samplegen.cli import app


def test_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.yaml"
    runner = CliRunner()
    result = runner.invoke(app, ["generate", str(missing)])
    assert result.exit_code == 3
    assert "missing.yaml" in result.output


def test_unparsable_document(tmp_path: Path) -> None:
    bad = tmp_path / "bad.yaml"
    bad.write_text("type: [unclosed\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["generate", str(bad)])
    assert result.exit_code == 3


def test_bad_pointer(tmp_path: Path) -> None:
    schema = tmp_path / "schema.yaml"
    schema.write_text("type: string\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["generate", str(schema), "--pointer", "/components/nope"])
    assert result.exit_code == 3
    assert "components" in result.output


def test_bad_config(tmp_path: Path) -> None:
    schema = tmp_path / "schema.yaml"
    schema.write_text("type: string\n", encoding="utf-8")
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("unknown: true\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["generate", str(schema), "--config", str(bad_cfg)])
    assert result.exit_code == 4


def test_unresolvable_schema(tmp_path: Path) -> None:
    schema = tmp_path / "schema.yaml"
    schema.write_text("description: nothing here\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["generate", str(schema), "--path", "/things"])
    assert result.exit_code == 5
    assert "unresolvable schema" in result.output
    assert "/things" in result.output


def test_unknown_type(tmp_path: Path) -> None:
    schema = tmp_path / "schema.yaml"
    schema.write_text("type: date\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["generate", str(schema)])
    assert result.exit_code == 5


def test_unknown_namespace_listing() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generators", "--locale", "en_US", "-n", "nowhere"])
    assert result.exit_code == 3


def test_malformed_json(tmp_path: Path) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text('{"type": "string",}\n', encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["generate", str(bad)])
    assert result.exit_code == 3
