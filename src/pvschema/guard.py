"""
Contains the checks which make sure that the schema and the data handed to the validator are well-formed.
Every check raises a `ContractViolation` which aborts the whole validation.
"""
import logging
from typing import Any, Mapping

from typeguard import TypeCheckError, check_type

from .errors import InvalidDataError, InvalidResolverError, InvalidSchemaError, InvalidVerdictError
from .types import Pointer
from .utils.lookup import is_container

logger = logging.getLogger(__name__)


def type_name(obj: Any) -> str:
    """Returns the runtime type tag of `obj` used in error messages"""
    return type(obj).__name__


def _location(pointer: Pointer) -> str:
    return ".".join(pointer)


def check_schema(schema: Any) -> None:
    """
    Raises an InvalidSchemaError if `schema` is not a mapping.
    """
    if not isinstance(schema, Mapping):
        logger.debug("Rejecting schema of type %s", type_name(schema))
        raise InvalidSchemaError(f"Invalid schema: expected schema to be a mapping, but got {type_name(schema)}.")


def check_data(data: Any) -> None:
    """
    Raises an InvalidDataError if `data` is neither a mapping nor an object carrying attributes.
    """
    if not is_container(data):
        logger.debug("Rejecting data of type %s", type_name(data))
        raise InvalidDataError(
            f"Invalid data: expected actual data to be a mapping or an object, but got {type_name(data)}."
        )


def check_resolver(resolver: Any, pointer: Pointer) -> None:
    """
    Raises an InvalidResolverError if `resolver` is neither callable nor a nested schema.
    """
    if not callable(resolver) and not isinstance(resolver, Mapping):
        raise InvalidResolverError(
            f'Invalid schema at "{_location(pointer)}": expected resolver to be a function or a nested schema, '
            f"but got {type_name(resolver)}."
        )


def check_nested_fields(fields: Any) -> None:
    """
    Raises an InvalidResolverError if the fields of a nested schema are not a mapping.
    """
    if not isinstance(fields, Mapping):
        raise InvalidResolverError(
            f"Invalid nested schema: expected fields to be a mapping, but got {type_name(fields)}."
        )


def check_callable(obj: Any, pointer: Pointer, role: str = "resolver") -> None:
    """
    Raises an InvalidResolverError if `obj` is not callable. `role` names the function in the error message,
    e.g. "guard" for the guard of a conditional resolver.
    """
    if not callable(obj):
        raise InvalidResolverError(
            f'Invalid schema at "{_location(pointer)}": expected {role} to be a function, but got {type_name(obj)}.'
        )


def check_boolean_verdict(verdict: Any, pointer: Pointer) -> bool:
    """
    Raises an InvalidVerdictError if the verdict of a predicate resolver is not a boolean.
    """
    try:
        check_type(verdict, bool)
    except TypeCheckError as error:
        raise InvalidVerdictError(
            f'Invalid schema at "{_location(pointer)}": expected resolver to return a boolean, '
            f"but got {type_name(verdict)}."
        ) from error
    return verdict


def check_named_verdict(verdict: Any, pointer: Pointer) -> Mapping[str, bool]:
    """
    Raises an InvalidVerdictError if the verdict of a named-rule resolver is not a mapping or if any of its rules
    is not a boolean. The rules are checked before any of them is evaluated.
    """
    if not isinstance(verdict, Mapping):
        raise InvalidVerdictError(
            f'Invalid schema at "{_location(pointer)}": expected named resolver to return a mapping, '
            f"but got {type_name(verdict)}."
        )
    for rule, rule_verdict in verdict.items():
        try:
            check_type(rule_verdict, bool)
        except TypeCheckError as error:
            raise InvalidVerdictError(
                f'Invalid schema at "{_location(pointer + (str(rule),))}": expected named resolver to be a boolean, '
                f"but got {type_name(rule_verdict)}."
            ) from error
    return verdict
