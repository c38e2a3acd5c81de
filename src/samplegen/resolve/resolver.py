"""Recursive resolution of schema nodes into sample values.

:class:`SchemaResolver` walks a JSON-Schema-like node and decides, in a fixed
priority order, how to produce a value for it:

1. fake-value directive (``x-faker``), recovered with a warning on failure;
2. explicit ``example``/``examples``;
3. first ``enum`` candidate;
4. ``allOf`` members merged left to right;
5. first ``oneOf``/``anyOf`` alternative;
6. type-based synthesis (``type``);
7. unwrapping a ``schema`` wrapper (response and parameter objects);

and raises :class:`~samplegen.utils.errors.UnresolvableSchema` when nothing
applies.  The first matching rule wins.

The resolver holds no per-call state.  Input schemas are never mutated and
every returned value is a fresh object tree.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from typing import Any

from samplegen.fake.base import FakeValueProvider
from samplegen.utils.errors import FakeDirectiveError, UnresolvableSchema
from samplegen.utils.logging import get_logger

from .examples import extract_example, has_examples
from .types import generate_by_type

log = get_logger(__name__)

DEFAULT_FAKER_KEY = "x-faker"
DEFAULT_COUNT_KEY = "x-count"

_MISSING = object()


def _non_empty_sequence(value: Any) -> bool:
    return (
        isinstance(value, Sequence)
        and not isinstance(value, (str, bytes))
        and len(value) > 0
    )


def merge_all_of(values: Sequence[Any]) -> Any:
    """Shallow-merge generated ``allOf`` member values, later keys winning.

    Mapping values are merged into a new dict.  A non-mapping value replaces
    whatever was accumulated so far, and a mapping that follows it starts a
    new dict, so the later member always wins.
    """

    merged: Any = {}
    for value in values:
        if isinstance(value, Mapping):
            merged = {**merged, **value} if isinstance(merged, dict) else dict(value)
        else:
            merged = value
    return merged


class SchemaResolver:
    """Generate one example value for a schema node."""

    def __init__(
        self,
        provider: FakeValueProvider | None = None,
        *,
        faker_key: str = DEFAULT_FAKER_KEY,
        count_key: str = DEFAULT_COUNT_KEY,
    ) -> None:
        """Initialize the resolver.

        Parameters
        ----------
        provider:
            Source for fake-value directives.  Without one, directives are
            reported as unresolvable and the remaining strategies apply.
        faker_key:
            Schema key carrying the fake-value directive.
        count_key:
            Schema key carrying the array length directive.
        """

        self.provider = provider
        self.faker_key = faker_key
        self.count_key = count_key

    def generate(
        self,
        schema: Any,
        preferred_example_name: str | None = None,
        path: str = "",
    ) -> Any:
        """Return a value conforming to ``schema``.

        Parameters
        ----------
        schema:
            Schema node, response object or parameter object.
        preferred_example_name:
            Key of the named example to prefer when ``examples`` is a mapping.
        path:
            Opaque context string forwarded to every recursive call and used
            in diagnostics.

        Raises
        ------
        ResolutionError
            Subclass describing why no value could be produced.
        """

        if not isinstance(schema, Mapping):
            raise UnresolvableSchema("unresolvable schema", path=path)

        if self.faker_key in schema:
            value = self._generate_by_directive(schema[self.faker_key], path)
            if value is not _MISSING:
                return value

        if has_examples(schema):
            return extract_example(schema, preferred_example_name, path)

        enum = schema.get("enum")
        if _non_empty_sequence(enum):
            return copy.deepcopy(enum[0])

        if "allOf" in schema:
            return self._generate_all_of(schema["allOf"], path)

        for keyword in ("oneOf", "anyOf"):
            alternatives = schema.get(keyword)
            if _non_empty_sequence(alternatives):
                return self.generate(alternatives[0], None, path)

        if "type" in schema:
            return generate_by_type(schema, path, gen=self)

        if "schema" in schema:
            return self.generate(schema["schema"], preferred_example_name, path)

        raise UnresolvableSchema("unresolvable schema", path=path)

    def _generate_by_directive(self, directive: Any, path: str) -> Any:
        if self.provider is None:
            log.warning("No fake-value provider for %r at path %r, falling back", directive, path)
            return _MISSING
        try:
            return self.provider.resolve(directive)
        except FakeDirectiveError as exc:
            log.warning(
                "Failed to generate fake value using %r at path %r, falling back: %s",
                directive,
                path,
                exc,
            )
        return _MISSING

    def _generate_all_of(self, members: Any, path: str) -> Any:
        if not isinstance(members, Sequence) or isinstance(members, (str, bytes)):
            raise UnresolvableSchema("allOf must be a list of schemas", path=path)
        return merge_all_of([self.generate(member, None, path) for member in members])


_default_resolver: SchemaResolver | None = None


def default_resolver() -> SchemaResolver:
    """Return the shared resolver backed by a Faker provider for the host locale."""

    global _default_resolver
    if _default_resolver is None:
        from samplegen.fake.locale import resolve_locale
        from samplegen.fake.provider import FakerProvider

        _default_resolver = SchemaResolver(FakerProvider(resolve_locale("auto")))
    return _default_resolver


def generate(
    schema: Any,
    preferred_example_name: str | None = None,
    path: str = "",
    *,
    resolver: SchemaResolver | None = None,
) -> Any:
    """Generate a value for ``schema`` with ``resolver`` or the shared default."""

    return (resolver or default_resolver()).generate(schema, preferred_example_name, path)


__all__ = [
    "DEFAULT_COUNT_KEY",
    "DEFAULT_FAKER_KEY",
    "SchemaResolver",
    "default_resolver",
    "generate",
    "merge_all_of",
]
