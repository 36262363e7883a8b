"""
Contains the error records returned by a validation and the exceptions raised for malformed input.

Two kinds of errors must not be confused:
* `ValidationError` records are the *result* of a validation. They are collected and returned, never raised.
* `ContractViolation` exceptions are raised if the schema or the data itself is malformed. They abort the validation.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .types import Pointer
from .utils.lookup import MISSING


class ErrorStatus(str, Enum):
    """
    Whether the validated value was absent or present but rejected.
    """

    MISSING = "missing"
    INVALID = "invalid"


class StatusPolicy(str, Enum):
    """
    Decides how the status of a validation error is derived from the offending value.

    `TRUTHY` treats every falsy value (None, 0, "", False, empty containers) as missing.
    `DEFINED` only treats None (or an absent field) as missing.
    """

    TRUTHY = "truthy"
    DEFINED = "defined"

    def status_of(self, value: Any) -> ErrorStatus:
        """Returns the error status for the given offending value"""
        if self is StatusPolicy.TRUTHY:
            present = value is not MISSING and bool(value)
        else:
            present = value is not MISSING and value is not None
        return ErrorStatus.INVALID if present else ErrorStatus.MISSING


@dataclass(frozen=True)
class ValidationError:
    """
    A single failed check. `value` is only set if the status is `invalid`, `rule` is only set if the failing
    check was a named rule.
    """

    pointer: Pointer
    status: ErrorStatus
    value: Any = None
    rule: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """
        Returns a plain representation of this error. Fields which don't apply are omitted instead of set to None.
        """
        result: dict[str, Any] = {"pointer": list(self.pointer), "status": self.status.value}
        if self.status is ErrorStatus.INVALID:
            result["value"] = self.value
        if self.rule is not None:
            result["rule"] = self.rule
        return result

    def __str__(self):
        location = ".".join(self.pointer)
        if self.rule is not None:
            location = f"{location}.{self.rule}"
        if self.status is ErrorStatus.INVALID:
            return f"{location}: invalid value {self.value!r}"
        return f"{location}: missing"


class ContractViolation(TypeError):
    """Base exception for malformed schemas or data passed to the validator."""


class InvalidSchemaError(ContractViolation):
    """Raised if the schema itself is not a mapping."""


class InvalidDataError(ContractViolation):
    """Raised if the data to validate is neither a mapping nor an object carrying attributes."""


class InvalidResolverError(ContractViolation):
    """Raised if a schema value is neither a resolver function nor a nested schema."""


class InvalidVerdictError(ContractViolation):
    """Raised if a resolver returned something other than a boolean or a mapping of booleans."""
