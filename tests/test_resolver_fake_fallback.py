from __future__ import annotations

import logging
from typing import Any, Sequence

import pytest

from samplegen import load_config, resolver_from_config
from samplegen.fake import FakerProvider
from samplegen.resolve import SchemaResolver
from samplegen.utils.errors import GeneratorFailed, UnknownType


class StubProvider:
    """Provider returning canned values and recording directives."""

    def __init__(self, value: Any = "fake", error: Exception | None = None) -> None:
        self.value = value
        self.error = error
        self.seen: list[Any] = []

    def fill_template(self, text: str) -> str:
        return text

    def call(self, namespace: str, method: str, args: Sequence[Any] = ()) -> Any:
        return self.value

    def resolve(self, directive: Any) -> Any:
        self.seen.append(directive)
        if self.error is not None:
            raise self.error
        return self.value


@pytest.fixture(scope="module")
def faker_resolver() -> SchemaResolver:
    return SchemaResolver(FakerProvider("en_US", seed=3))


def test_directive_outranks_example() -> None:
    provider = StubProvider("from-faker")
    resolver = SchemaResolver(provider)
    schema = {"x-faker": "person.name", "example": "ignored", "type": "string"}
    assert resolver.generate(schema) == "from-faker"
    assert provider.seen == ["person.name"]


def test_directive_value_may_be_falsy() -> None:
    resolver = SchemaResolver(StubProvider(0))
    assert resolver.generate({"x-faker": "python.pyint", "type": "integer", "example": 9}) == 0


def test_directive_in_nested_properties(faker_resolver: SchemaResolver) -> None:
    schema = {
        "type": "object",
        "properties": {
            "email": {"type": "string", "x-faker": "internet.email"},
            "age": {"type": "integer", "x-faker": "python.random_int(30, 30)"},
        },
    }
    value = faker_resolver.generate(schema)
    assert "@" in value["email"]
    assert value["age"] == 30


def test_template_directive(faker_resolver: SchemaResolver) -> None:
    value = faker_resolver.generate({"x-faker": "{{first_name}}!", "type": "string"})
    assert isinstance(value, str) and value.endswith("!") and "{{" not in value


def test_unknown_generator_falls_through(
    faker_resolver: SchemaResolver, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.WARNING, logger="samplegen")
    schema = {"x-faker": "person.no_such_thing", "type": "string"}
    assert faker_resolver.generate(schema, path="/users/name") == "string"
    assert "person.no_such_thing" in caplog.text
    assert "/users/name" in caplog.text


@pytest.mark.parametrize(
    ("directive", "schema", "expected"),
    [
        ("not a directive", {"enum": ["e"]}, "e"),
        ("python.pyint(1, x)", {"example": 5}, 5),
        ("person.first_name(1, 2, 3)", {"type": "boolean"}, True),
        (12, {"oneOf": [{"type": "integer"}]}, 1),
        ("{{no_such_formatter}}", {"schema": {"example": "wrapped"}}, "wrapped"),
    ],
)
def test_failed_directive_matches_schema_without_it(
    faker_resolver: SchemaResolver, directive: Any, schema: dict[str, Any], expected: Any
) -> None:
    assert faker_resolver.generate({"x-faker": directive, **schema}) == expected
    assert faker_resolver.generate(schema) == expected


def test_failed_directive_then_fatal_error_propagates(faker_resolver: SchemaResolver) -> None:
    with pytest.raises(UnknownType):
        faker_resolver.generate({"x-faker": "nope.nope", "type": "date"})


def test_provider_failure_kinds_recovered() -> None:
    provider = StubProvider(error=GeneratorFailed("boom"))
    resolver = SchemaResolver(provider)
    assert resolver.generate({"x-faker": "a.b", "type": "number"}) == 1


def test_unexpected_provider_errors_propagate() -> None:
    resolver = SchemaResolver(StubProvider(error=RuntimeError("bug")))
    with pytest.raises(RuntimeError):
        resolver.generate({"x-faker": "a.b", "type": "number"})


def test_without_provider_directive_is_skipped(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="samplegen")
    assert SchemaResolver().generate({"x-faker": "person.name", "type": "string"}) == "string"
    assert "person.name" in caplog.text


def test_custom_faker_key() -> None:
    resolver = SchemaResolver(StubProvider("custom"), faker_key="x-fake")
    assert resolver.generate({"x-fake": "a.b", "type": "string"}) == "custom"
    assert resolver.generate({"x-faker": "a.b", "type": "string"}) == "string"


def test_resolver_from_config(tmp_path: Any) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text(
        "faker:\n  locale: en_US\n  seed: 5\nextensions:\n  faker_key: x-fake\n  count_key: x-n\n"
    )
    resolver = resolver_from_config(load_config(cfg_file, env={}))
    assert resolver.faker_key == "x-fake"
    assert resolver.count_key == "x-n"
    schema = {"type": "array", "x-n": 2, "items": {"x-fake": "python.random_int(8, 8)"}}
    assert resolver.generate(schema) == [8, 8]
