"""
Contains utility functions to query values at an arbitrary depth inside the data to validate.
"""
import dataclasses
from typing import Any, Iterable, Mapping


class _Missing:
    """
    Marks a value which is not present in the data. It is falsy and there is exactly one instance: `MISSING`.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "MISSING"


MISSING: Any = _Missing()


_SCALAR_TYPES = (str, bytes, bytearray, int, float, complex, bool, list, tuple, set, frozenset)


def is_container(obj: Any) -> bool:
    """
    Returns True if fields of `obj` can be queried by name. This is the case for mappings and for objects
    carrying attributes, e.g. dataclass instances, pydantic models or plain class instances.
    Scalars, sequences, classes and functions have no fields.
    """
    if isinstance(obj, Mapping):
        return True
    if obj is None or obj is MISSING or isinstance(obj, (type,) + _SCALAR_TYPES) or callable(obj):
        return False
    return dataclasses.is_dataclass(obj) or hasattr(obj, "__dict__") or hasattr(type(obj), "__slots__")


def get_child(obj: Any, key: str) -> Any:
    """
    Returns the field `key` of `obj` or `MISSING` if `obj` has no such field or can't have any fields at all.
    """
    if isinstance(obj, Mapping):
        return obj.get(key, MISSING)
    if is_container(obj):
        return getattr(obj, key, MISSING)
    return MISSING


def get_nested_value(pointer: Iterable[str], data: Any) -> Any:
    """
    Walks `data` along the `pointer` and returns the value found at its end. If any level on the way is None or
    not present, `MISSING` is returned. Callers should treat None and `MISSING` the same way: "not present".
    """
    value = data
    for key in pointer:
        if value is None or value is MISSING:
            return MISSING
        value = get_child(value, key)
    return value


def is_present(pointer: Iterable[str], data: Any) -> bool:
    """
    Returns True if there is a value other than None at the end of `pointer` inside `data`.
    """
    value = get_nested_value(pointer, data)
    return value is not MISSING and value is not None


def required_value(pointer: Iterable[str], data: Any) -> Any:
    """
    Same as `get_nested_value` but raises a LookupError naming the first unreachable level instead of returning
    `MISSING`.
    """
    value = data
    visited: list[str] = []
    for key in pointer:
        visited.append(key)
        child = MISSING if value is None else get_child(value, key)
        if child is MISSING:
            raise LookupError(f"{'.'.join(visited)}: Not found")
        value = child
    return value
