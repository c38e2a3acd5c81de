"""Typed exceptions raised while resolving schema nodes into sample values."""

from __future__ import annotations


class ResolutionError(ValueError):
    """Base class for failures while generating a value for a schema node.

    ``path`` is the opaque context path that was being resolved when the error
    was raised.  It is informational only.
    """

    def __init__(self, message: str, *, path: str | None = None) -> None:
        if path:
            message = f"{message} (at {path})"
        super().__init__(message)
        self.path = path


class NoExampleFound(ResolutionError):
    """Raised when ``example``/``examples`` are present but yield no value."""


class UnknownType(ResolutionError):
    """Raised when a node declares a ``type`` that cannot be synthesized."""


class UnresolvableSchema(ResolutionError):
    """Raised when no generation strategy applies to a node."""


class FakeDirectiveError(ResolutionError):
    """Base class for fake-value directive failures.

    These are recovered by the resolver: it logs a warning and falls through
    to the next strategy.
    """


class InvalidDirectiveFormat(FakeDirectiveError):
    """Raised when a directive is neither a template nor ``namespace.method``."""


class UnknownGenerator(FakeDirectiveError):
    """Raised when ``namespace.method`` is not offered by the provider."""


class GeneratorFailed(FakeDirectiveError):
    """Raised when the provider's generator raised while producing a value."""


__all__ = [
    "ResolutionError",
    "NoExampleFound",
    "UnknownType",
    "UnresolvableSchema",
    "FakeDirectiveError",
    "InvalidDirectiveFormat",
    "UnknownGenerator",
    "GeneratorFailed",
]
