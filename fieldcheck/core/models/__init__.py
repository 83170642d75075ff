"""
Validation outcome models.

ErrorObject is a pydantic model; Errors is a dict keyed by field name.
"""

from .error_object import ErrorObject, new_error
from .errors import Errors, RuleResult
from .exceptions import RuleConfigurationError

__all__ = [
    "ErrorObject",
    "Errors",
    "RuleResult",
    "RuleConfigurationError",
    "new_error",
]
