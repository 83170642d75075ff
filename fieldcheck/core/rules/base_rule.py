"""
Base rule interface for all validation rules.

All rules inherit from BaseRule and implement validate(). Rules are frozen
dataclasses: configuration methods such as error() or when() return a
modified copy, so a rule can be shared between threads and calls.
"""

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Any

from fieldcheck.core.models import ErrorObject, RuleConfigurationError, RuleResult


class BaseRule(ABC):
    """
    Abstract base class for all rules.

    A rule classifies one value: it returns None when the value is valid,
    otherwise an ErrorObject (or an Errors report for collection rules).
    Validation failures are never raised.
    """

    @abstractmethod
    def validate(self, value: Any) -> RuleResult:
        """
        Validate a value against this rule.

        Args:
            value: The value to validate

        Returns:
            None if valid, otherwise the failure

        Raises:
            RuleConfigurationError: If the rule cannot be applied to the value
        """

    @property
    @abstractmethod
    def rule_type(self) -> str:
        """Return the rule type identifier."""

    def configuration_error(self, message: str) -> RuleConfigurationError:
        """Build a RuleConfigurationError tagged with this rule's type."""
        return RuleConfigurationError(rule_type=self.rule_type, message=message)


class ErrorRule(BaseRule):
    """
    Rule that reports a single ErrorObject.

    Subclasses declare an `err` dataclass field (None means the default error)
    and implement default_error().
    """

    err: ErrorObject | None

    @abstractmethod
    def default_error(self) -> ErrorObject:
        """Return the error reported when no custom error is configured."""

    def failure(self) -> ErrorObject:
        """Return the error this rule reports on failure."""
        return self.err if self.err is not None else self.default_error()

    def error(self, message: str):
        """
        Return a copy of the rule that reports a different message.

        Args:
            message: Message template, may use the rule's params

        Returns:
            New rule instance
        """
        return replace(self, err=self.failure().with_message(message))

    def error_object(self, err: ErrorObject):
        """Return a copy of the rule that reports the given error."""
        return replace(self, err=err)
