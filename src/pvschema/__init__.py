"""
This package enables you to validate arbitrary keyed data (mappings, dataclass instances or any other objects
carrying attributes) against a declarative schema. A schema maps field names onto resolver functions, nested
schemas or conditionally applied schema values. The result is a flat list of validation errors pinpointing every
failing field.
"""

from .analysis import ValidationResult
from .errors import (
    ContractViolation,
    ErrorStatus,
    InvalidDataError,
    InvalidResolverError,
    InvalidSchemaError,
    InvalidVerdictError,
    StatusPolicy,
    ValidationError,
)
from .schema import Conditional, Leaf, NamedRules, Nested, Predicate, optional
from .validation import validate
