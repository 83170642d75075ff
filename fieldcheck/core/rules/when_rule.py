"""
WhenRule - runs one of two rule chains depending on a condition.
"""

from dataclasses import dataclass, replace
from typing import Any

from fieldcheck.core.models import RuleResult

from .base_rule import BaseRule
from .chain import validate


@dataclass(frozen=True)
class WhenRule(BaseRule):
    """
    Conditional rule.

    The condition is evaluated once by the caller when the rule is built,
    not per value. When it is true the `rules` chain runs, otherwise the
    `else_rules` chain (empty by default, so the value passes).
    """

    condition: bool
    rules: tuple[BaseRule, ...] = ()
    else_rules: tuple[BaseRule, ...] = ()

    def validate(self, value: Any) -> RuleResult:
        if self.condition:
            return validate(value, *self.rules)
        return validate(value, *self.else_rules)

    def else_(self, *rules: BaseRule) -> "WhenRule":
        """Return a copy that runs rules when the condition is false."""
        return replace(self, else_rules=rules)

    @property
    def rule_type(self) -> str:
        return "when"


def when(condition: bool, *rules: BaseRule) -> WhenRule:
    """
    Create a rule that applies rules only when condition is true.

    Example:
        when(order.shipped, required, date("%Y-%m-%d")).else_(nil)
    """
    return WhenRule(condition=bool(condition), rules=rules)
