"""
SkipRule - marker that stops a rule chain and reports the value as valid.
"""

from dataclasses import dataclass
from typing import Any

from fieldcheck.core.models import RuleResult

from .base_rule import BaseRule


@dataclass(frozen=True)
class SkipRule(BaseRule):
    """
    Stops the rest of the chain when active.

    Rules placed before the skip marker have already run, so put it first
    to bypass every check of a field: validate(value, skip.when(c), required).
    """

    skip: bool = True

    def validate(self, value: Any) -> RuleResult:
        return None

    def when(self, condition: bool) -> "SkipRule":
        """Return a marker that is active only when condition is true."""
        return SkipRule(skip=condition)

    @property
    def rule_type(self) -> str:
        return "skip"


skip = SkipRule()
