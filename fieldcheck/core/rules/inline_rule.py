"""
InlineRule - validates using a caller-supplied function.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fieldcheck.core.models import RuleConfigurationError, RuleResult

from .base_rule import BaseRule

RuleFunc = Callable[[Any], RuleResult]


@dataclass(frozen=True)
class InlineRule(BaseRule):
    """
    Wraps an ad hoc check without defining a new rule class.

    The function signature should be:
        def check(value: Any) -> ErrorObject | Errors | None:
            if not valid:
                return new_error("code", "message")
            return None

    Exceptions raised by the function propagate to the caller.
    """

    func: RuleFunc

    def __post_init__(self):
        if not callable(self.func):
            raise RuleConfigurationError(rule_type="inline", message="func must be callable")

    def validate(self, value: Any) -> RuleResult:
        return self.func(value)

    @property
    def rule_type(self) -> str:
        return "inline"


def by(func: RuleFunc) -> InlineRule:
    """Create a rule that delegates to func."""
    return InlineRule(func=func)
