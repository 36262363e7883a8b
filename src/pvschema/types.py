"""
Contains the types used in the schema validator
"""
from typing import TYPE_CHECKING, Any, Callable, Mapping, TypeAlias, Union

if TYPE_CHECKING:
    from .schema import Conditional, Leaf, NamedRules, Nested, Predicate

Pointer: TypeAlias = tuple[str, ...]
Verdict: TypeAlias = bool | Mapping[str, bool]
Resolver: TypeAlias = Callable[[Any, Pointer], Verdict]
Guard: TypeAlias = Callable[[Any, str, Pointer, Any, Mapping[str, Any]], bool]
SchemaValueT: TypeAlias = Union["Leaf", "Predicate", "NamedRules", "Nested", "Conditional"]
RawSchemaValue: TypeAlias = Union[SchemaValueT, Resolver, Mapping[str, Any]]
RawSchema: TypeAlias = Mapping[str, RawSchemaValue]
