"""
Contains the recursive validation of data against a schema.
"""
import logging
from typing import Any, Iterator, Mapping

from .analysis import ValidationResult
from .errors import ErrorStatus, StatusPolicy, ValidationError
from .guard import check_boolean_verdict, check_data, check_named_verdict, check_schema
from .schema import Conditional, Leaf, NamedRules, Nested, Predicate, to_schema_value
from .types import Pointer, RawSchema
from .utils.lookup import MISSING, get_child

logger = logging.getLogger(__name__)


def validate(
    schema: RawSchema | Nested, data: Any, *, status_policy: StatusPolicy = StatusPolicy.TRUTHY
) -> ValidationResult:
    """
    Validates `data` against `schema` and returns the collected validation errors. The errors are ordered by the
    schema's key order, depth-first.
    If the schema or the data is malformed a `ContractViolation` is raised and no errors are returned.
    E.g.:
    ```
    result = validate({"firstName": lambda value, pointer: value == "john"}, {"lastName": "locke"})
    assert result.errors == [ValidationError(pointer=("firstName",), status=ErrorStatus.MISSING)]
    ```
    """
    fields = schema.fields if isinstance(schema, Nested) else schema
    check_schema(fields)
    check_data(data)
    return ValidationResult(list(_iter_errors(fields, data, (), status_policy)))


def _iter_errors(
    schema: Mapping[str, Any], data: Any, pointer: Pointer, policy: StatusPolicy
) -> Iterator[ValidationError]:
    """
    Yields the validation errors of `data` for every key of `schema`.
    """
    for key, raw_value in schema.items():
        current_pointer = pointer + (key,)
        schema_value = to_schema_value(raw_value, current_pointer)

        if data is None or data is MISSING:
            yield from _iter_missing(schema_value, current_pointer)
            continue

        value = get_child(data, key)
        if value is MISSING:
            # resolvers and guards see absent fields as None
            value = None
        while isinstance(schema_value, Conditional):
            if not schema_value.guard(value, key, current_pointer, data, schema):
                logger.debug("Skipping %s: guard not satisfied", ".".join(current_pointer))
                break
            schema_value = to_schema_value(schema_value.inner, current_pointer)
        else:
            yield from _iter_resolved_errors(schema_value, value, current_pointer, policy)


def _iter_resolved_errors(
    schema_value: Leaf | Nested, value: Any, pointer: Pointer, policy: StatusPolicy
) -> Iterator[ValidationError]:
    """
    Yields the validation errors of a single field whose schema value is either a nested schema or a resolver.
    """
    if isinstance(schema_value, Nested):
        yield from _iter_errors(schema_value.fields, value, pointer, policy)
        return

    verdict = schema_value.resolver(value, pointer)
    if isinstance(schema_value, Predicate):
        verdict = check_boolean_verdict(verdict, pointer)
    elif isinstance(schema_value, NamedRules) or isinstance(verdict, Mapping):
        verdict = check_named_verdict(verdict, pointer)
    else:
        # undeclared resolvers may return any object, e.g. a re.Match or None
        verdict = bool(verdict)

    if isinstance(verdict, Mapping):
        for rule, rule_verdict in verdict.items():
            if not rule_verdict:
                yield _create_error(pointer, value, policy, rule)
    elif not verdict:
        yield _create_error(pointer, value, policy)


def _iter_missing(schema_value: Any, pointer: Pointer) -> Iterator[ValidationError]:
    """
    Yields one missing error for every resolver reachable from `schema_value`. Used if the containing data is
    absent, so there is nothing to hand to the resolvers or guards.
    """
    if isinstance(schema_value, Conditional):
        yield from _iter_missing(to_schema_value(schema_value.inner, pointer), pointer)
    elif isinstance(schema_value, Nested):
        for key, raw_value in schema_value.fields.items():
            current_pointer = pointer + (key,)
            yield from _iter_missing(to_schema_value(raw_value, current_pointer), current_pointer)
    else:
        logger.debug("%s is missing: containing data is absent", ".".join(pointer))
        yield _create_error(pointer, MISSING, StatusPolicy.TRUTHY)


def _create_error(pointer: Pointer, value: Any, policy: StatusPolicy, rule: Any = None) -> ValidationError:
    status = policy.status_of(value)
    return ValidationError(
        pointer=pointer,
        status=status,
        value=value if status is ErrorStatus.INVALID else None,
        rule=None if rule is None else str(rule),
    )
