"""Fake-value directives and the Faker-backed provider that resolves them."""

from .base import FakeValueProvider
from .directive import Call, Directive, Template, parse_directive
from .locale import DEFAULT_LOCALE, detect_locale, normalize_locale, resolve_locale
from .provider import FakerProvider

__all__ = [
    "Call",
    "DEFAULT_LOCALE",
    "Directive",
    "FakeValueProvider",
    "FakerProvider",
    "Template",
    "detect_locale",
    "normalize_locale",
    "parse_directive",
    "resolve_locale",
]
