"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide a helper to obtain loggers nested under the ``samplegen``
      namespace.
    - Install a single stderr handler on demand (CLI, scripts).

Notes/Edge cases:
    - Library modules only call :func:`get_logger`; handlers are installed by
      :func:`configure_logging` and nowhere else.
    - Configuration is idempotent: repeated calls replace the handler instead
      of stacking duplicates.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Literal

_NAMESPACE = "samplegen"
_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

LevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class _StderrHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Stream handler bound to whatever ``sys.stderr`` is at emit time."""

    @property  # type: ignore[override]
    def stream(self) -> Any:
        return sys.stderr

    @stream.setter
    def stream(self, value: Any) -> None:
        pass


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the ``samplegen`` namespace.

    Module names that already start with ``samplegen`` are used unchanged so
    ``get_logger(__name__)`` works from inside the package.
    """

    if name == _NAMESPACE or name.startswith(_NAMESPACE + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_NAMESPACE}.{name}")


def configure_logging(level: LevelName | str | int = "WARNING") -> logging.Logger:
    """Attach a stderr handler to the package logger and set ``level``."""

    logger = logging.getLogger(_NAMESPACE)
    for existing in logger.handlers[:]:
        if isinstance(existing, _StderrHandler):
            logger.removeHandler(existing)

    handler = _StderrHandler()
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)

    if isinstance(level, str):
        upper = level.upper()
        if upper not in _LEVELS:
            raise ValueError(f"Invalid log level: {level}")
        logger.setLevel(getattr(logging, upper))
    else:
        logger.setLevel(level)
    return logger


__all__ = ["get_logger", "configure_logging"]
