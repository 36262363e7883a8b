"""
Contains the schema values a schema can consist of. Every field of a schema maps onto exactly one of them:

* `Leaf` - a resolver function returning either a boolean or a mapping of named booleans
* `Predicate` - a resolver function which must return a boolean
* `NamedRules` - a resolver function which must return a mapping of rule names to booleans
* `Nested` - a nested schema which is validated against the nested data
* `Conditional` - a guard deciding whether its inner schema value is evaluated at all

Plain functions and plain mappings are accepted as well and are treated as `Leaf` respectively `Nested`.
"""
from dataclasses import dataclass, field
from typing import Any, Mapping

from frozendict import frozendict

from .guard import check_callable, check_nested_fields, check_resolver
from .types import Guard, Pointer, RawSchemaValue, Resolver, SchemaValueT
from .utils.lookup import is_present


@dataclass(frozen=True)
class Leaf:
    """
    A resolver whose verdict is either a mapping of named booleans or any other object, which is then judged by
    its truthiness (e.g. a `re.Match` or None). Which one is decided when it gets called.
    """

    resolver: Resolver


@dataclass(frozen=True)
class Predicate(Leaf):
    """
    A resolver which validates a value with a single boolean verdict.
    """


@dataclass(frozen=True)
class NamedRules(Leaf):
    """
    A resolver which validates a value against multiple independently named rules.
    E.g.:
    ```
    NamedRules(lambda value, pointer: {"minLength": len(value) > 5, "capitalLetter": value.lower() != value})
    ```
    """


@dataclass(frozen=True)
class Nested:
    """
    A schema nested inside another schema. The fields are frozen on construction, so the schema can be shared
    freely between validations.
    """

    fields: Mapping[str, RawSchemaValue] = field(default_factory=frozendict)

    def __post_init__(self):
        check_nested_fields(self.fields)
        if not isinstance(self.fields, frozendict):
            object.__setattr__(self, "fields", frozendict(self.fields))


@dataclass(frozen=True)
class Conditional:
    """
    Evaluates `inner` only if `guard` returns True. The guard is called with
    `(value, key, pointer, data, schema)` where `data` is the object containing `key` and `schema` the schema
    containing it.
    """

    guard: Guard
    inner: RawSchemaValue


def to_schema_value(raw: Any, pointer: Pointer) -> SchemaValueT:
    """
    Converts the value found in a schema at `pointer` into one of the schema value types. Raises an
    InvalidResolverError if this isn't possible.
    """
    if isinstance(raw, Nested):
        return raw
    if isinstance(raw, Leaf):
        check_callable(raw.resolver, pointer)
        return raw
    if isinstance(raw, Conditional):
        check_callable(raw.guard, pointer, role="guard")
        return raw
    check_resolver(raw, pointer)
    if isinstance(raw, Mapping):
        return Nested(raw)
    return Leaf(raw)


# pylint: disable=unused-argument
def _field_is_present(value: Any, key: str, pointer: Pointer, data: Any, schema: Mapping[str, Any]) -> bool:
    return is_present((key,), data)


def optional(schema_value: RawSchemaValue) -> Conditional:
    """
    Wraps any schema value (resolver function, nested schema or another schema value) such that it is only
    evaluated if the field is present in the data. Absent fields and fields set to None yield no errors.
    """
    return Conditional(guard=_field_is_present, inner=schema_value)
