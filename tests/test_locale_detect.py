from __future__ import annotations

import logging

import pytest

from samplegen.fake.locale import (
    DEFAULT_LOCALE,
    detect_locale,
    normalize_locale,
    resolve_locale,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("en-US", "en_US"),
        ("pt-br", "pt_BR"),
        ("de_DE.UTF-8", "de_DE"),
        ("ca_ES@valencia", "ca_ES"),
        ("C", DEFAULT_LOCALE),
        ("POSIX", DEFAULT_LOCALE),
        ("C.UTF-8", DEFAULT_LOCALE),
        ("EN", "en"),
    ],
)
def test_normalize_locale(raw: str, expected: str) -> None:
    assert normalize_locale(raw) == expected


def test_detect_precedence() -> None:
    env = {"LANG": "de_DE.UTF-8", "LC_MESSAGES": "fr_FR.UTF-8", "LC_ALL": "ja_JP.UTF-8"}
    assert detect_locale(env) == "ja_JP"
    del env["LC_ALL"]
    assert detect_locale(env) == "fr_FR"
    del env["LC_MESSAGES"]
    assert detect_locale(env) == "de_DE"


def test_detect_defaults() -> None:
    assert detect_locale({}) == DEFAULT_LOCALE
    assert detect_locale({"LANG": ""}) == DEFAULT_LOCALE


def test_resolve_auto() -> None:
    assert resolve_locale("auto", {"LANG": "ja_JP.UTF-8"}) == "ja_JP"


def test_resolve_explicit_value_ignores_env() -> None:
    assert resolve_locale("it-IT", {"LANG": "ja_JP.UTF-8"}) == "it_IT"


def test_resolve_falls_back_to_language() -> None:
    assert resolve_locale("fr_XX", {}).startswith("fr")


def test_resolve_unknown_warns(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="samplegen")
    assert resolve_locale("zz_ZZ", {}) == DEFAULT_LOCALE
    assert "zz_ZZ" in caplog.text
