"""Typed configuration schema and loader for the samplegen package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint, constr

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class FakerSettings(BaseModel):
    """Settings for the Faker-backed fake-value provider."""

    locale: constr(min_length=1)
    locale_env: str
    seed: int | None = None

    model_config = ConfigDict(extra="forbid")


class ExtensionKeys(BaseModel):
    """Schema keys carrying the vendor-extension directives."""

    faker_key: constr(min_length=1)
    count_key: constr(min_length=1)

    model_config = ConfigDict(extra="forbid")


class LoggingSettings(BaseModel):
    """Log level applied by the CLI."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    faker: FakerSettings
    extensions: ExtensionKeys
    logging: LoggingSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML < the
    environment variable named by ``faker.locale_env``.
    """

    with (
        importlib_resources.files("samplegen.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    locale_env = cfg.faker.locale_env
    if environ.get(locale_env):
        cfg.faker.locale = environ[locale_env]

    return cfg


__all__ = [
    "ConfigModel",
    "FakerSettings",
    "ExtensionKeys",
    "LoggingSettings",
    "deep_merge_dicts",
    "load_config",
]
