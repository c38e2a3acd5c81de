"""Faker-backed implementation of :class:`~samplegen.fake.base.FakeValueProvider`.

Faker groups its generators in provider classes (``faker.providers.person``,
``faker.providers.internet`` ...).  :class:`FakerProvider` exposes each of them
as a namespace, so the directive ``person.first_name`` calls the ``first_name``
method of the person provider.  Directives written for the JavaScript faker are
accepted too: a few namespaces are aliased (``name`` -> ``person``) and
camelCase method names are looked up in snake_case (``firstName`` ->
``first_name``).  Where the JavaScript method has a different Python name
under an aliased namespace, :data:`METHOD_ALIASES` maps it (``date.past`` ->
``date_time.past_datetime``, ``datatype.number`` -> ``python.random_int``).

The provider is configured exactly once, at construction, with an explicit
locale and optional seed.  After that it is only read, so a single instance can
be shared by resolvers running in several threads.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable, Final, Sequence

from faker import Faker

from samplegen.utils.errors import GeneratorFailed, UnknownGenerator

from .directive import Template, parse_directive
from .locale import resolve_locale

if TYPE_CHECKING:  # pragma: no cover
    from samplegen.config.schema import FakerSettings

_PROVIDER_PREFIX: Final = "faker.providers."
_DOTTED_TOKEN_RE: Final = re.compile(r"\{\{\s*(\w+)\.(\w+)\s*\}\}")
_CAMEL_RE: Final = re.compile(r"(?<!^)(?=[A-Z])")

NAMESPACE_ALIASES: Final[Mapping[str, str]] = {
    "name": "person",
    "date": "date_time",
    "datatype": "python",
    "random": "python",
}

METHOD_ALIASES: Final[Mapping[tuple[str, str], str]] = {
    ("date", "past"): "past_datetime",
    ("date", "future"): "future_datetime",
    ("date", "recent"): "date_time_this_month",
    ("datatype", "number"): "random_int",
    ("datatype", "float"): "pyfloat",
    ("datatype", "boolean"): "pybool",
    ("random", "number"): "random_int",
    ("random", "boolean"): "pybool",
}


def _snake_case(name: str) -> str:
    return _CAMEL_RE.sub("_", name).lower()


def _namespace_of(provider: object) -> str | None:
    """Return the short namespace for a Faker provider instance."""

    qualified = getattr(provider, "__provider__", None)
    if not isinstance(qualified, str) or qualified == "base":
        qualified = type(provider).__module__
    if not qualified.startswith(_PROVIDER_PREFIX):
        return None
    return qualified[len(_PROVIDER_PREFIX) :].split(".", 1)[0]


class FakerProvider:
    """Resolve fake-value directives with a locale-bound :class:`faker.Faker`."""

    def __init__(
        self,
        locale: str = "en_US",
        *,
        seed: int | None = None,
        faker: Faker | None = None,
    ) -> None:
        """Initialize the provider.

        Parameters
        ----------
        locale:
            Faker locale name, e.g. ``"en_US"`` or ``"de_DE"``.
        seed:
            Optional seed applied with ``seed_instance`` for reproducible
            values.
        faker:
            Pre-built Faker instance; ``locale`` is then informational only.
        """

        self.locale = locale
        self._faker = faker if faker is not None else Faker(locale)
        if seed is not None:
            self._faker.seed_instance(seed)
        self._registry = self._build_registry()

    @classmethod
    def from_settings(
        cls, settings: "FakerSettings", *, env: Mapping[str, str] | None = None
    ) -> "FakerProvider":
        """Build a provider from the ``faker`` section of the configuration."""

        return cls(resolve_locale(settings.locale, env), seed=settings.seed)

    def _build_registry(self) -> dict[str, dict[str, Callable[..., Any]]]:
        registry: dict[str, dict[str, Callable[..., Any]]] = {}
        factories = getattr(self._faker, "factories", None) or [self._faker]
        for factory in factories:
            for provider in factory.get_providers():
                namespace = _namespace_of(provider)
                if namespace is None or namespace in registry:
                    continue
                methods: dict[str, Callable[..., Any]] = {}
                for attr in dir(provider):
                    if attr.startswith("_"):
                        continue
                    func = getattr(provider, attr, None)
                    if callable(func):
                        methods[attr] = func
                registry[namespace] = methods
        return registry

    # -- Registry ---------------------------------------------------------

    def lookup(self, namespace: str, method: str) -> Callable[..., Any] | None:
        """Return the generator for ``namespace.method`` or ``None``."""

        methods = self._registry.get(namespace)
        if methods is None:
            methods = self._registry.get(NAMESPACE_ALIASES.get(namespace, ""))
            if methods is None:
                return None
            method = METHOD_ALIASES.get((namespace, method), method)
        return methods.get(method) or methods.get(_snake_case(method))

    def generators(self, namespace: str | None = None) -> list[str]:
        """Return sorted ``namespace.method`` names offered by this provider."""

        names = []
        for ns, methods in self._registry.items():
            if namespace is not None and ns != namespace:
                continue
            names.extend(f"{ns}.{method}" for method in methods)
        return sorted(names)

    # -- Entry points -----------------------------------------------------

    def call(self, namespace: str, method: str, args: Sequence[Any] = ()) -> Any:
        """Invoke ``namespace.method`` with positional ``args``.

        Raises
        ------
        UnknownGenerator
            If the pair is not registered.
        GeneratorFailed
            If the generator itself raised, e.g. for unexpected arguments.
        """

        func = self.lookup(namespace, method)
        if func is None:
            raise UnknownGenerator(f"Faker method '{namespace}.{method}' not found")
        try:
            return func(*args)
        except Exception as exc:
            raise GeneratorFailed(
                f"Faker method '{namespace}.{method}' failed: {exc}"
            ) from exc

    def fill_template(self, text: str) -> str:
        """Resolve ``{{...}}`` placeholders in ``text``.

        Dotted placeholders (``{{person.last_name}}``) are resolved through the
        registry first; plain ones (``{{last_name}}``) are left to Faker's own
        ``parse``.
        """

        def _dotted(match: re.Match[str]) -> str:
            return str(self.call(match.group(1), match.group(2)))

        text = _DOTTED_TOKEN_RE.sub(_dotted, text)
        try:
            return self._faker.parse(text)
        except AttributeError as exc:
            raise UnknownGenerator(f"Unknown placeholder in template {text!r}: {exc}") from exc
        except Exception as exc:
            raise GeneratorFailed(f"Template {text!r} failed: {exc}") from exc

    def resolve(self, directive: Any) -> Any:
        """Parse ``directive`` and return the generated value."""

        parsed = parse_directive(directive)
        if isinstance(parsed, Template):
            return self.fill_template(parsed.text)
        return self.call(parsed.namespace, parsed.method, parsed.args)


__all__ = ["FakerProvider", "METHOD_ALIASES", "NAMESPACE_ALIASES"]
