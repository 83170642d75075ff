"""
EachRule - validates every element of a sequence or every value of a mapping.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from fieldcheck.core.models import Errors, RuleResult
from fieldcheck.utils import is_empty

from .base_rule import BaseRule
from .chain import validate


@dataclass(frozen=True)
class EachRule(BaseRule):
    """
    Applies a rule chain to each element of a collection.

    Failures are collected into an Errors report keyed by the element's
    position for sequences or by its key for mappings (as strings). An empty
    collection is valid; use the required rule to make sure it is not empty.
    Strings and bytes are not treated as collections.
    """

    rules: tuple[BaseRule, ...]

    def validate(self, value: Any) -> RuleResult:
        if is_empty(value):
            return None

        if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
            raise self.configuration_error(f"Value must be iterable, got {type(value).__name__}")

        if isinstance(value, Mapping):
            elements = ((str(key), item) for key, item in value.items())
        else:
            elements = ((str(index), item) for index, item in enumerate(value))

        errors = Errors()
        for key, item in elements:
            err = validate(item, *self.rules)
            if err is not None:
                errors[key] = err

        return errors if errors else None

    @property
    def rule_type(self) -> str:
        return "each"


def each(*rules: BaseRule) -> EachRule:
    """Create a rule that validates every element of a collection with rules."""
    return EachRule(rules=rules)
