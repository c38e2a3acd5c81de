"""Type-based synthesis for schema nodes with a ``type`` keyword.

Containers recurse into the resolver; primitives return fixed placeholders.
The placeholders are deliberately constant: they only apply when no example,
enum or fake-value directive was found higher in the priority chain.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final

from samplegen.utils.errors import UnknownType, UnresolvableSchema

if TYPE_CHECKING:  # pragma: no cover
    from .resolver import SchemaResolver

PRIMITIVE_PLACEHOLDERS: Final[Mapping[str, Any]] = {
    "string": "string",
    "number": 1,
    "integer": 1,
    "boolean": True,
}


def coerce_count(raw: Any) -> int:
    """Return a positive element count for the array count directive.

    Integers and numeric strings are truncated towards zero.  Missing, boolean,
    non-numeric, non-finite and non-positive values all give ``1``.
    """

    if raw is None or isinstance(raw, bool):
        return 1
    if isinstance(raw, int):
        return raw if raw >= 1 else 1
    try:
        count = int(float(raw))
    except (TypeError, ValueError, OverflowError):
        return 1
    return count if count >= 1 else 1


def generate_array(schema: Mapping[str, Any], path: str, *, gen: "SchemaResolver") -> list[Any]:
    count = coerce_count(schema.get(gen.count_key))
    items = schema.get("items")
    return [gen.generate(items, None, path) for _ in range(count)]


def generate_object(
    schema: Mapping[str, Any], path: str, *, gen: "SchemaResolver"
) -> dict[str, Any]:
    properties = schema.get("properties") or {}
    if not isinstance(properties, Mapping):
        raise UnresolvableSchema("properties must be a mapping of schemas", path=path)
    return {name: gen.generate(sub, None, path) for name, sub in properties.items()}


def generate_by_type(schema: Mapping[str, Any], path: str, *, gen: "SchemaResolver") -> Any:
    """Dispatch on ``schema["type"]``.

    Raises
    ------
    UnknownType
        If the type is not one of the JSON Schema value types handled here.
    """

    kind = schema["type"]
    if kind == "array":
        return generate_array(schema, path, gen=gen)
    if kind == "object":
        return generate_object(schema, path, gen=gen)
    if isinstance(kind, str) and kind in PRIMITIVE_PLACEHOLDERS:
        return PRIMITIVE_PLACEHOLDERS[kind]
    raise UnknownType(f"Could not generate value: unknown type {kind!r}", path=path)


__all__ = [
    "PRIMITIVE_PLACEHOLDERS",
    "coerce_count",
    "generate_array",
    "generate_by_type",
    "generate_object",
]
