"""
LengthRule - validates the length of a string or collection.
"""

from collections.abc import Sized
from dataclasses import dataclass
from typing import Any

from fieldcheck.core.models import ErrorObject, RuleResult, new_error
from fieldcheck.utils import is_empty

from .base_rule import ErrorRule

ERR_LENGTH_TOO_LONG = new_error("validation_length_too_long", "the length must be no more than {max}")
ERR_LENGTH_TOO_SHORT = new_error("validation_length_too_short", "the length must be no less than {min}")
ERR_LENGTH_INVALID = new_error("validation_length_invalid", "the length must be exactly {min}")
ERR_LENGTH_OUT_OF_RANGE = new_error(
    "validation_length_out_of_range", "the length must be between {min} and {max}"
)
ERR_LENGTH_EMPTY_REQUIRED = new_error("validation_length_empty_required", "the value must be empty")


@dataclass(frozen=True)
class LengthRule(ErrorRule):
    """
    Validates that len(value) is within [min_length, max_length].

    A bound of 0 means no limit on that side; length(0, 0) only accepts
    empty values. Strings are measured in code points. An empty value is
    considered valid.

    Parameters:
    - min_length: Minimum length (inclusive)
    - max_length: Maximum length (inclusive)
    """

    min_length: int
    max_length: int
    err: ErrorObject | None = None

    def __post_init__(self):
        if self.min_length < 0 or self.max_length < 0:
            raise self.configuration_error(
                f"Length bounds must be non-negative, got ({self.min_length}, {self.max_length})"
            )
        if self.max_length > 0 and self.min_length > self.max_length:
            raise self.configuration_error(
                f"Minimum length {self.min_length} exceeds maximum length {self.max_length}"
            )

    def validate(self, value: Any) -> RuleResult:
        if is_empty(value):
            return None

        if not isinstance(value, Sized):
            raise self.configuration_error(f"Cannot get the length of {type(value).__name__}")

        size = len(value)
        too_short = self.min_length > 0 and size < self.min_length
        too_long = self.max_length > 0 and size > self.max_length
        must_be_empty = self.min_length == 0 and self.max_length == 0

        if too_short or too_long or must_be_empty:
            return self.failure().with_params({"min": self.min_length, "max": self.max_length})
        return None

    def default_error(self) -> ErrorObject:
        if self.min_length == 0 and self.max_length == 0:
            return ERR_LENGTH_EMPTY_REQUIRED
        if self.min_length > 0 and self.max_length > 0:
            if self.min_length == self.max_length:
                return ERR_LENGTH_INVALID
            return ERR_LENGTH_OUT_OF_RANGE
        if self.min_length > 0:
            return ERR_LENGTH_TOO_SHORT
        return ERR_LENGTH_TOO_LONG

    @property
    def rule_type(self) -> str:
        return "length"


def length(min_length: int, max_length: int) -> LengthRule:
    """
    Create a rule checking that a value's length is within the given bounds.

    Args:
        min_length: Minimum length, 0 for no lower bound
        max_length: Maximum length, 0 for no upper bound

    Returns:
        LengthRule instance
    """
    return LengthRule(min_length=min_length, max_length=max_length)
