"""
StringRule - validates strings with a caller-supplied predicate.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fieldcheck.core.models import ErrorObject, RuleConfigurationError, RuleResult, new_error
from fieldcheck.utils import is_empty

from .base_rule import ErrorRule

StringCheck = Callable[[str], bool]


@dataclass(frozen=True)
class StringRule(ErrorRule):
    """
    Validates a string (or UTF-8 bytes) with a predicate returning a bool.

    An empty value is considered valid.
    """

    check: StringCheck
    err: ErrorObject | None = None

    def __post_init__(self):
        if not callable(self.check):
            raise RuleConfigurationError(rule_type="string", message="check must be callable")

    def validate(self, value: Any) -> RuleResult:
        if is_empty(value):
            return None

        if isinstance(value, bytes):
            try:
                value = value.decode("utf-8")
            except UnicodeDecodeError:
                return self.failure()
        if not isinstance(value, str):
            raise self.configuration_error(f"Value must be a string, got {type(value).__name__}")

        if self.check(value):
            return None
        return self.failure()

    def default_error(self) -> ErrorObject:
        return new_error("validation_string_invalid", "must be a valid value")

    @property
    def rule_type(self) -> str:
        return "string"


def new_string_rule(
    check: StringCheck, message: str, code: str = "validation_string_invalid"
) -> StringRule:
    """
    Create a rule that validates strings with check.

    Args:
        check: Predicate returning True for valid strings
        message: Message reported when check returns False
        code: Error code reported when check returns False

    Returns:
        StringRule instance
    """
    return StringRule(check=check, err=new_error(code, message))


def new_string_rule_with_error(check: StringCheck, err: ErrorObject) -> StringRule:
    """Create a rule that validates strings with check and reports err."""
    return StringRule(check=check, err=err)
