"""Schema resolution: strategy dispatch, example extraction and type synthesis."""

from .examples import ExampleList, NamedExamples, classify_examples, extract_example
from .resolver import SchemaResolver, default_resolver, generate, merge_all_of
from .types import coerce_count, generate_by_type

__all__ = [
    "ExampleList",
    "NamedExamples",
    "SchemaResolver",
    "classify_examples",
    "coerce_count",
    "default_resolver",
    "extract_example",
    "generate",
    "generate_by_type",
    "merge_all_of",
]
