"""Example extraction for schema nodes carrying ``example``/``examples``.

OpenAPI allows ``examples`` in two shapes: a plain list of values (JSON Schema
style) or a mapping of named Example Objects (``{name: {"value": ...}}``).  The
raw field is classified once into :class:`ExampleList` or
:class:`NamedExamples` and the selection rules operate on that tagged value.

Selection order:

1. the preferred named example, when ``examples`` is a mapping holding it with
   a ``value``;
2. the singular ``example`` field, whatever its value (``None``, ``0`` and
   ``""`` included);
3. the first item of an example list;
4. the ``value`` of the first named example.

Anything else raises :class:`~samplegen.utils.errors.NoExampleFound`.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

from samplegen.utils.errors import NoExampleFound

_MISSING = object()


@dataclass(slots=True, frozen=True)
class ExampleList:
    """``examples`` given as an ordered sequence of literal values."""

    values: tuple[Any, ...]

    def first(self) -> Any:
        return self.values[0] if self.values else _MISSING


@dataclass(slots=True, frozen=True)
class NamedExamples:
    """``examples`` given as a mapping of named example wrappers."""

    entries: Mapping[str, Any]

    def named(self, name: str) -> Any:
        return _wrapped_value(self.entries.get(name, _MISSING))

    def first(self) -> Any:
        for wrapper in self.entries.values():
            return _wrapped_value(wrapper)
        return _MISSING


Examples = Union[ExampleList, NamedExamples]


def _wrapped_value(wrapper: Any) -> Any:
    if isinstance(wrapper, Mapping) and "value" in wrapper:
        return wrapper["value"]
    return _MISSING


def classify_examples(raw: Any) -> Examples | None:
    """Return the tagged form of a raw ``examples`` field.

    Strings and other scalars are not example containers and yield ``None``.
    """

    if isinstance(raw, Mapping):
        return NamedExamples(raw)
    if isinstance(raw, Sequence) and not isinstance(raw, (str, bytes)):
        return ExampleList(tuple(raw))
    return None


def has_examples(schema: Mapping[str, Any]) -> bool:
    """Return ``True`` when ``schema`` declares ``example`` or ``examples``."""

    return "example" in schema or "examples" in schema


def extract_example(
    schema: Mapping[str, Any],
    preferred_name: str | None = None,
    path: str = "",
) -> Any:
    """Return the best example value declared on ``schema``.

    The value is deep-copied so the caller owns the result.

    Raises
    ------
    NoExampleFound
        If neither field yields a value.
    """

    examples = classify_examples(schema.get("examples"))

    if preferred_name and isinstance(examples, NamedExamples):
        value = examples.named(preferred_name)
        if value is not _MISSING:
            return copy.deepcopy(value)

    if "example" in schema:
        return copy.deepcopy(schema["example"])

    value = examples.first() if examples is not None else _MISSING
    if value is _MISSING:
        raise NoExampleFound("Could not find an example", path=path)
    return copy.deepcopy(value)


__all__ = [
    "ExampleList",
    "Examples",
    "NamedExamples",
    "classify_examples",
    "extract_example",
    "has_examples",
]
