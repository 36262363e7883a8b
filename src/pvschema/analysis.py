"""
Contains functionality to analyze the result of a validation
"""
from typing import Any, Optional

from .errors import ErrorStatus, ValidationError
from .types import Pointer


class ValidationResult:
    """
    The function `validate` will return an instance of this class. `errors` contains the validation errors in the
    order the schema got traversed. The other properties are calculated only if you use them.
    """

    def __init__(self, errors: list[ValidationError]):
        self._errors = errors

        self._missing_errors: Optional[list[ValidationError]] = None
        self._invalid_errors: Optional[list[ValidationError]] = None
        self._errors_per_pointer: Optional[dict[Pointer, list[ValidationError]]] = None
        self._failed_rules_per_pointer: Optional[dict[Pointer, list[str]]] = None

    def __eq__(self, other):
        return isinstance(other, ValidationResult) and self._errors == other._errors

    def __ne__(self, other):
        return not isinstance(other, ValidationResult) or self._errors != other._errors

    def __repr__(self):
        return f"ValidationResult(errors={self._errors!r})"

    @property
    def errors(self) -> list[ValidationError]:
        """All validation errors ordered by schema traversal"""
        return self._errors

    @property
    def is_valid(self) -> bool:
        """True if the data passed every check of the schema"""
        return len(self._errors) == 0

    @property
    def num_errors(self) -> int:
        """Number of validation errors (equivalent to `len(self.errors)`)"""
        return len(self._errors)

    def _determine_statuses(self):
        """Splits the errors by their status"""
        self._missing_errors = []
        self._invalid_errors = []
        for error in self._errors:
            if error.status is ErrorStatus.MISSING:
                self._missing_errors.append(error)
            else:
                self._invalid_errors.append(error)

    @property
    def missing_errors(self) -> list[ValidationError]:
        """Errors of fields which were not present in the data"""
        if self._missing_errors is None:
            self._determine_statuses()
            assert self._missing_errors is not None
        return self._missing_errors

    @property
    def invalid_errors(self) -> list[ValidationError]:
        """Errors of fields which were present but got rejected"""
        if self._invalid_errors is None:
            self._determine_statuses()
            assert self._invalid_errors is not None
        return self._invalid_errors

    @property
    def errors_per_pointer(self) -> dict[Pointer, list[ValidationError]]:
        """
        Maps each failing pointer onto its errors. The pointers keep the order in which they failed first.
        """
        if self._errors_per_pointer is None:
            self._errors_per_pointer = {}
            for error in self._errors:
                self._errors_per_pointer.setdefault(error.pointer, []).append(error)
        return self._errors_per_pointer

    @property
    def failed_rules_per_pointer(self) -> dict[Pointer, list[str]]:
        """
        Maps each pointer onto the names of its failed rules. Pointers which only failed without a named rule
        are not contained.
        """
        if self._failed_rules_per_pointer is None:
            self._failed_rules_per_pointer = {
                pointer: [error.rule for error in errors if error.rule is not None]
                for pointer, errors in self.errors_per_pointer.items()
                if any(error.rule is not None for error in errors)
            }
        return self._failed_rules_per_pointer

    def to_dicts(self) -> list[dict[str, Any]]:
        """
        Returns the errors as plain dictionaries, e.g. to serialize them as JSON.
        """
        return [error.to_dict() for error in self._errors]
