"""samplegen: example values for OpenAPI / JSON-Schema-like type descriptors.

The public entry point is :func:`generate`, which walks a schema node and
returns one plausible value for it.  Fake-value directives (``x-faker``) are
resolved with Faker through :class:`FakerProvider`; everything else is derived
from the schema itself.
"""

from __future__ import annotations

from collections.abc import Mapping

from .config import ConfigModel, load_config
from .fake import FakerProvider
from .resolve import SchemaResolver, generate
from .utils.errors import (
    FakeDirectiveError,
    GeneratorFailed,
    InvalidDirectiveFormat,
    NoExampleFound,
    ResolutionError,
    UnknownGenerator,
    UnknownType,
    UnresolvableSchema,
)

__version__ = "0.1.0"


def resolver_from_config(
    cfg: ConfigModel, *, env: Mapping[str, str] | None = None
) -> SchemaResolver:
    """Build a :class:`SchemaResolver` and its Faker provider from ``cfg``."""

    provider = FakerProvider.from_settings(cfg.faker, env=env)
    return SchemaResolver(
        provider,
        faker_key=cfg.extensions.faker_key,
        count_key=cfg.extensions.count_key,
    )


__all__ = [
    "ConfigModel",
    "FakeDirectiveError",
    "FakerProvider",
    "GeneratorFailed",
    "InvalidDirectiveFormat",
    "NoExampleFound",
    "ResolutionError",
    "SchemaResolver",
    "UnknownGenerator",
    "UnknownType",
    "UnresolvableSchema",
    "__version__",
    "generate",
    "load_config",
    "resolver_from_config",
]
