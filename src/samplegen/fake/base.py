"""Protocol describing the fake-value provider consumed by the resolver.

The resolver never talks to Faker directly.  It receives an object satisfying
:class:`FakeValueProvider` and hands it the raw directive string found on a
schema node.  Providers raise :class:`~samplegen.utils.errors.FakeDirectiveError`
subclasses on failure so the resolver can recover from them uniformly.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable


@runtime_checkable
class FakeValueProvider(Protocol):
    """Source of realistic sample values addressed by directive strings."""

    def fill_template(self, text: str) -> str:
        """Return ``text`` with every ``{{...}}`` placeholder resolved."""

        ...

    def call(self, namespace: str, method: str, args: Sequence[Any] = ()) -> Any:
        """Invoke the generator ``namespace.method`` with positional ``args``."""

        ...

    def resolve(self, directive: Any) -> Any:
        """Parse ``directive`` and dispatch it to :meth:`fill_template` or :meth:`call`."""

        ...
