"""Locale selection for the Faker-backed provider.

The provider is configured once with an explicit locale.  ``"auto"`` asks
:func:`resolve_locale` to derive one from the process environment the way a C
library would (``LC_ALL`` > ``LC_MESSAGES`` > ``LANG``).  Whatever is chosen is
checked against the locales Faker ships; unknown locales degrade to the bare
language and finally to ``en_US``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from faker.config import AVAILABLE_LOCALES

from samplegen.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_LOCALE: Final = "en_US"
_ENV_VARS: Final = ("LC_ALL", "LC_MESSAGES", "LANG")
_NEUTRAL: Final = {"", "C", "POSIX"}


def normalize_locale(value: str) -> str:
    """Return ``value`` as a Faker locale name.

    Encoding and modifier suffixes are dropped and ``-`` separators become
    ``_`` (``"pt-BR.UTF-8"`` -> ``"pt_BR"``).  Neutral locales map to
    :data:`DEFAULT_LOCALE`.
    """

    base = value.strip().split(".", 1)[0].split("@", 1)[0]
    if base in _NEUTRAL:
        return DEFAULT_LOCALE
    base = base.replace("-", "_")
    lang, sep, region = base.partition("_")
    if sep:
        return f"{lang.lower()}_{region.upper()}"
    return lang.lower()


def detect_locale(env: Mapping[str, str] | None = None) -> str:
    """Return the locale configured in ``env`` (defaults to ``os.environ``)."""

    environ = env if env is not None else os.environ
    for name in _ENV_VARS:
        value = environ.get(name)
        if value:
            return normalize_locale(value)
    return DEFAULT_LOCALE


def resolve_locale(value: str = "auto", env: Mapping[str, str] | None = None) -> str:
    """Return a locale Faker supports for the configured ``value``."""

    wanted = detect_locale(env) if value == "auto" else normalize_locale(value)
    if wanted in AVAILABLE_LOCALES:
        return wanted

    lang = wanted.split("_", 1)[0]
    if lang in AVAILABLE_LOCALES:
        return lang
    for candidate in sorted(AVAILABLE_LOCALES):
        if candidate.startswith(lang + "_"):
            return candidate

    log.warning("Locale %r is not supported by Faker, using %s", wanted, DEFAULT_LOCALE)
    return DEFAULT_LOCALE


__all__ = ["DEFAULT_LOCALE", "detect_locale", "normalize_locale", "resolve_locale"]
