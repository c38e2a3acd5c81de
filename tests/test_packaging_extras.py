"""Tests for packaging metadata and optional dependencies."""

from __future__ import annotations

import importlib
import tomllib
from pathlib import Path
from typing import Any


def _load_pyproject() -> dict[str, Any]:
    path = Path(__file__).resolve().parents[1] / "pyproject.toml"
    with path.open("rb") as fh:
        return tomllib.load(fh)


def test_runtime_dependencies() -> None:
    deps = " ".join(_load_pyproject()["project"]["dependencies"])
    for name in ("Faker", "pydantic", "PyYAML", "typer"):
        assert name in deps


def test_optional_dependency_groups() -> None:
    extras = _load_pyproject()["project"]["optional-dependencies"]
    assert {"test", "dev"}.issubset(extras)
    assert any(req.startswith("pytest") for req in extras["test"])


def test_console_script_entrypoint() -> None:
    scripts = _load_pyproject()["project"]["scripts"]
    assert scripts["samplegen"] == "samplegen.cli:app"


def test_defaults_shipped_as_package_data() -> None:
    package_data = _load_pyproject()["tool"]["setuptools"]["package-data"]
    assert "defaults.yml" in package_data["samplegen.config"]


def test_import_smoke() -> None:
    importlib.import_module("samplegen")
    importlib.import_module("samplegen.cli")
