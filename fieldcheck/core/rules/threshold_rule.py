"""
ThresholdRule - validates a comparable value against a lower or upper bound.
"""

from dataclasses import dataclass, replace
from datetime import date, datetime, time
from enum import Enum
from numbers import Number
from typing import Any

from fieldcheck.core.models import ErrorObject, RuleResult, new_error
from fieldcheck.utils import is_empty

from .base_rule import ErrorRule

ERR_MIN_GREATER_EQUAL = new_error(
    "validation_min_greater_equal_than_required", "must be no less than {threshold}"
)
ERR_MIN_GREATER = new_error("validation_min_greater_than_required", "must be greater than {threshold}")
ERR_MAX_LESS_EQUAL = new_error(
    "validation_max_less_equal_than_required", "must be no greater than {threshold}"
)
ERR_MAX_LESS = new_error("validation_max_less_than_required", "must be less than {threshold}")


class Operator(str, Enum):
    GREATER_EQUAL = ">="
    GREATER = ">"
    LESS_EQUAL = "<="
    LESS = "<"


_DEFAULT_ERRORS = {
    Operator.GREATER_EQUAL: ERR_MIN_GREATER_EQUAL,
    Operator.GREATER: ERR_MIN_GREATER,
    Operator.LESS_EQUAL: ERR_MAX_LESS_EQUAL,
    Operator.LESS: ERR_MAX_LESS,
}

_EXCLUSIVE = {
    Operator.GREATER_EQUAL: Operator.GREATER,
    Operator.LESS_EQUAL: Operator.LESS,
}


def comparable_kind(value: Any) -> str | None:
    """
    Classify a value for threshold comparison.

    Returns:
        "number", "datetime", "date" or "time", or None if unsupported
    """
    # bool is an int subclass but never a meaningful bound
    if isinstance(value, bool):
        return None
    if isinstance(value, Number) and not isinstance(value, complex):
        return "number"
    # datetime subclasses date, check it first
    if isinstance(value, datetime):
        return "datetime"
    if isinstance(value, date):
        return "date"
    if isinstance(value, time):
        return "time"
    return None


@dataclass(frozen=True)
class ThresholdRule(ErrorRule):
    """
    Validates that a value is on the right side of a bound.

    The checked value and the bound must be of the same kind: numbers,
    datetimes, dates or times. Anything else is a configuration error.
    An empty value (including numeric zero) is considered valid; use the
    required rule to make sure a value is not empty.

    Parameters:
    - threshold: the bound
    - operator: comparison applied as `value <operator> threshold`
    """

    threshold: Any
    operator: Operator
    err: ErrorObject | None = None

    def __post_init__(self):
        if comparable_kind(self.threshold) is None:
            raise self.configuration_error(
                f"Threshold must be a number, datetime, date or time, got {type(self.threshold).__name__}"
            )

    def validate(self, value: Any) -> RuleResult:
        if is_empty(value):
            return None

        expected = comparable_kind(self.threshold)
        actual = comparable_kind(value)
        if actual != expected:
            raise self.configuration_error(
                f"Cannot compare {type(value).__name__} with {expected} threshold {self.threshold!r}"
            )

        try:
            passed = self._compare(value)
        except TypeError as e:
            # e.g. naive vs. timezone-aware datetimes
            raise self.configuration_error(f"Cannot compare {value!r} with {self.threshold!r}: {e}") from e

        if passed:
            return None
        return self.failure().with_params({"threshold": self.threshold})

    def _compare(self, value: Any) -> bool:
        if self.operator is Operator.GREATER_EQUAL:
            return value >= self.threshold
        if self.operator is Operator.GREATER:
            return value > self.threshold
        if self.operator is Operator.LESS_EQUAL:
            return value <= self.threshold
        return value < self.threshold

    def exclusive(self) -> "ThresholdRule":
        """Return a copy that excludes the bound itself."""
        return replace(self, operator=_EXCLUSIVE.get(self.operator, self.operator))

    def default_error(self) -> ErrorObject:
        return _DEFAULT_ERRORS[self.operator]

    @property
    def rule_type(self) -> str:
        return "min" if self.operator in (Operator.GREATER_EQUAL, Operator.GREATER) else "max"


def min_(threshold: Any) -> ThresholdRule:
    """
    Create a rule checking that a value is greater than or equal to threshold.

    Call exclusive() on the result to require a strictly greater value.
    """
    return ThresholdRule(threshold=threshold, operator=Operator.GREATER_EQUAL)


def max_(threshold: Any) -> ThresholdRule:
    """
    Create a rule checking that a value is less than or equal to threshold.

    Call exclusive() on the result to require a strictly smaller value.
    """
    return ThresholdRule(threshold=threshold, operator=Operator.LESS_EQUAL)
