"""
InRule / NotInRule - membership checks against a fixed list of values.
"""

from dataclasses import dataclass
from typing import Any

from fieldcheck.core.models import ErrorObject, RuleResult, new_error
from fieldcheck.utils import is_empty

from .base_rule import ErrorRule

ERR_IN_INVALID = new_error("validation_in_invalid", "must be a valid value")
ERR_NOT_IN_INVALID = new_error("validation_not_in_invalid", "must not be in list")


@dataclass(frozen=True)
class InRule(ErrorRule):
    """
    Validates that a value is one of the allowed values.

    Membership uses equality, so the checked value and the allowed values
    should be of the same type. An empty value is considered valid.
    """

    values: tuple[Any, ...]
    err: ErrorObject | None = None

    def validate(self, value: Any) -> RuleResult:
        if is_empty(value) or value in self.values:
            return None
        return self.failure()

    def default_error(self) -> ErrorObject:
        return ERR_IN_INVALID

    @property
    def rule_type(self) -> str:
        return "in"


@dataclass(frozen=True)
class NotInRule(ErrorRule):
    """Validates that a value is not one of the forbidden values. Empty values pass."""

    values: tuple[Any, ...]
    err: ErrorObject | None = None

    def validate(self, value: Any) -> RuleResult:
        if is_empty(value) or value not in self.values:
            return None
        return self.failure()

    def default_error(self) -> ErrorObject:
        return ERR_NOT_IN_INVALID

    @property
    def rule_type(self) -> str:
        return "not_in"


def in_(*values: Any) -> InRule:
    """Create a rule checking that a value is one of values."""
    return InRule(values=values)


def not_in(*values: Any) -> NotInRule:
    """Create a rule checking that a value is none of values."""
    return NotInRule(values=values)
