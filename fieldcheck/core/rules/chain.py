"""
Rule chain execution.

A chain runs its rules left to right and stops at the first failure.
"""

from typing import Any

from fieldcheck.core.models import Errors, RuleResult

from .base_rule import BaseRule
from .skip_rule import SkipRule


def validate(value: Any, *rules: BaseRule | None) -> RuleResult:
    """
    Validate a value against a chain of rules.

    Rules run in order. An active skip marker ends the chain with no error;
    the first rule reporting a failure ends it with that failure. None
    entries are ignored.

    Args:
        value: The value to validate
        *rules: Rules to apply

    Returns:
        None if every rule passed, otherwise the first failure

    Raises:
        RuleConfigurationError: If a rule cannot be applied to the value
    """
    for rule in rules:
        if rule is None:
            continue

        if isinstance(rule, SkipRule) and rule.skip:
            return None

        result = rule.validate(value)
        if isinstance(result, Errors):
            result = result.filter()
        if result is not None:
            return result

    return None
