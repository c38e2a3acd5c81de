"""Parser for fake-value directives.

A directive is the string stored under the ``x-faker`` key of a schema node.
Two shapes are understood:

``Template``
    Any string containing a ``{{...}}`` placeholder, e.g.
    ``"{{first_name}} <{{email}}>"``.  The whole string is handed to the
    provider's templating entry point.

``Call``
    ``namespace.method`` or ``namespace.method(<json-args>)``.  The
    parenthesized fragment is decoded as the body of a JSON array, so
    ``random_int(1, 10)`` yields the arguments ``[1, 10]``.

Parsing is kept separate from dispatch so that format errors
(:class:`~samplegen.utils.errors.InvalidDirectiveFormat`) can be told apart
from lookup errors raised later by the provider.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Final, Union

from samplegen.utils.errors import InvalidDirectiveFormat

_TEMPLATE_RE: Final = re.compile(r"\{\{.+\}\}")
_CALL_RE: Final = re.compile(r"(?P<namespace>\w+)\.(?P<method>\w+)(?:\((?P<args>.*)\))?")


@dataclass(slots=True, frozen=True)
class Template:
    """Directive resolved through the provider's templating entry point."""

    text: str


@dataclass(slots=True, frozen=True)
class Call:
    """Directive naming a single generator and its positional arguments."""

    namespace: str
    method: str
    args: tuple[Any, ...] = ()

    @property
    def qualified_name(self) -> str:
        return f"{self.namespace}.{self.method}"


Directive = Union[Template, Call]


def _decode_args(fragment: str | None, directive: str) -> tuple[Any, ...]:
    if fragment is None or not fragment.strip():
        return ()
    try:
        decoded = json.loads(f"[{fragment}]")
    except json.JSONDecodeError as exc:
        raise InvalidDirectiveFormat(
            f"Arguments of fake directive {directive!r} are not valid JSON: {exc.msg}"
        ) from exc
    return tuple(decoded)


def parse_directive(directive: Any) -> Directive:
    """Parse ``directive`` into a :class:`Template` or a :class:`Call`.

    Raises
    ------
    InvalidDirectiveFormat
        If ``directive`` is not a string, matches neither shape, or carries an
        argument list that is not valid JSON.
    """

    if not isinstance(directive, str):
        raise InvalidDirectiveFormat(
            f"Fake directive must be a string, got {type(directive).__name__}"
        )

    if _TEMPLATE_RE.search(directive):
        return Template(directive)

    match = _CALL_RE.fullmatch(directive)
    if match is None:
        raise InvalidDirectiveFormat(
            f"Fake directive {directive!r} is not in the right format. Expecting "
            "<namespace>.<method> or <namespace>.<method>(<json-args>)."
        )

    args = _decode_args(match.group("args"), directive)
    return Call(match.group("namespace"), match.group("method"), args)


__all__ = ["Call", "Directive", "Template", "parse_directive"]
