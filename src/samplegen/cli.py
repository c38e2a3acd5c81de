"""Typer-based command line interface for sample generation.

The ``generate`` command loads a JSON or YAML document, optionally follows a
local JSON pointer into it (``/components/schemas/Pet``), and prints one
generated value as JSON.  ``generators`` lists the ``namespace.method`` names
usable in ``x-faker`` directives for a locale.

Exit codes
----------
0 success
3 I/O error (missing file, unparsable document, bad pointer)
4 configuration error
5 resolution error (no strategy could produce a value)
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from . import resolver_from_config
from .config import ConfigModel, load_config
from .fake import FakerProvider, resolve_locale
from .utils.errors import ResolutionError
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="samplegen",
    help="Generate example values from OpenAPI / JSON Schema descriptors. "
    "Use 'samplegen generate' to print a sample.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load_cfg(config_path: Path | None) -> ConfigModel:
    try:
        cfg = load_config(config_path)
    except (ValidationError, OSError, yaml.YAMLError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    return cfg


def _apply_overrides(
    cfg: ConfigModel, *, locale: str | None, seed: int | None
) -> ConfigModel:
    """Return a copy of ``cfg`` with CLI overrides applied."""

    new_cfg = cfg.model_copy(deep=True)
    if locale is not None:
        new_cfg.faker.locale = locale
    if seed is not None:
        new_cfg.faker.seed = seed
    return new_cfg


def follow_pointer(document: Any, pointer: str) -> Any:
    """Return the node addressed by the JSON pointer ``pointer``.

    Only local pointers are supported; a leading ``#`` is accepted so that
    ``$ref`` strings can be pasted as is.

    Raises
    ------
    KeyError
        If a reference token does not exist in ``document``.
    """

    pointer = pointer[1:] if pointer.startswith("#") else pointer
    if pointer in ("", "/"):
        return document
    if not pointer.startswith("/"):
        raise KeyError(f"JSON pointer must start with '/': {pointer!r}")

    node = document
    for raw in pointer[1:].split("/"):
        token = raw.replace("~1", "/").replace("~0", "~")
        if isinstance(node, dict) and token in node:
            node = node[token]
        elif isinstance(node, list) and token.isdigit() and int(token) < len(node):
            node = node[int(token)]
        else:
            raise KeyError(f"JSON pointer {pointer!r} does not resolve at {token!r}")
    return node


def _read_document(path: Path) -> Any:
    """Load ``path`` as JSON when it has a ``.json`` suffix, else as YAML."""

    with path.open("r", encoding="utf-8") as fh:
        if path.suffix.lower() == ".json":
            return json.load(fh)
        return yaml.safe_load(fh)


@app.callback()
def main() -> None:
    """Entry point for the samplegen command group."""
    pass


@app.command()
def generate(  # noqa: PLR0913
    schema_path: Path = typer.Argument(  # noqa: B008
        ..., help="JSON or YAML file holding the schema or an OpenAPI document"
    ),
    pointer: str = typer.Option(  # noqa: B008
        "", "--pointer", "-p", help="JSON pointer to the schema node inside the file"
    ),
    example: Optional[str] = typer.Option(  # noqa: B008
        None, "--example", "-e", help="Name of the preferred named example"
    ),
    context_path: str = typer.Option(  # noqa: B008
        "", "--path", help="Context path forwarded to the resolver for diagnostics"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    locale: Optional[str] = typer.Option(  # noqa: B008
        None, "--locale", help="Faker locale, e.g. en_US or 'auto'"
    ),
    seed: Optional[int] = typer.Option(  # noqa: B008
        None, "--seed", help="Seed for reproducible fake values"
    ),
    indent: int = typer.Option(2, help="JSON indentation; 0 prints compact output"),  # noqa: B008
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """Print one generated value for the schema in ``schema_path``."""

    cfg = _apply_overrides(_load_cfg(config_path), locale=locale, seed=seed)
    configure_logging("INFO" if verbose else cfg.logging.level)
    if verbose:
        typer.echo("Loaded config", err=True)

    try:
        document = _read_document(schema_path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        _safe_exit(3, str(exc).splitlines()[0])

    try:
        schema = follow_pointer(document, pointer)
    except KeyError as exc:
        _safe_exit(3, str(exc.args[0]))

    try:
        resolver = resolver_from_config(cfg)
    except (AttributeError, ValueError) as exc:
        _safe_exit(4, str(exc))
    if verbose:
        typer.echo(f"Resolver ready (locale setting {cfg.faker.locale!r})", err=True)

    try:
        value = resolver.generate(schema, example, context_path)
    except ResolutionError as exc:
        _safe_exit(5, f"Could not generate a value: {exc}")

    typer.echo(json.dumps(value, indent=indent or None, ensure_ascii=False, default=str))


@app.command()
def generators(
    locale: Optional[str] = typer.Option(  # noqa: B008
        None, "--locale", help="Faker locale, e.g. en_US or 'auto'"
    ),
    namespace: Optional[str] = typer.Option(  # noqa: B008
        None, "--namespace", "-n", help="Only list generators in this namespace"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
) -> None:
    """List the ``namespace.method`` names usable in ``x-faker`` directives."""

    cfg = _apply_overrides(_load_cfg(config_path), locale=locale, seed=None)
    provider = FakerProvider(resolve_locale(cfg.faker.locale))
    names = provider.generators(namespace)
    if not names:
        _safe_exit(3, f"No generators found for namespace {namespace!r}")
    for name in names:
        typer.echo(name)


__all__ = ["app", "follow_pointer"]
