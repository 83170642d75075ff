"""
AbsentRule - requires a value to be None (nil) or None/empty (empty).
"""

from dataclasses import dataclass, replace
from typing import Any

from fieldcheck.core.models import ErrorObject, RuleResult, new_error
from fieldcheck.utils import is_empty

from .base_rule import ErrorRule

ERR_NIL = new_error("validation_nil", "must be blank")
ERR_EMPTY = new_error("validation_empty", "must be blank")


@dataclass(frozen=True)
class AbsentRule(ErrorRule):
    """
    Validates that a value is absent.

    Parameters:
    - skip_nil: False requires the value to be None; True also accepts a
                present value that is empty
    - condition: the rule only applies when True
    """

    skip_nil: bool
    condition: bool = True
    err: ErrorObject | None = None

    def validate(self, value: Any) -> RuleResult:
        if not self.condition or value is None:
            return None

        if self.skip_nil and is_empty(value):
            return None

        return self.failure()

    def when(self, condition: bool) -> "AbsentRule":
        """Return a copy that only applies when condition is true."""
        return replace(self, condition=condition)

    def default_error(self) -> ErrorObject:
        return ERR_EMPTY if self.skip_nil else ERR_NIL

    @property
    def rule_type(self) -> str:
        return "empty" if self.skip_nil else "nil"


# Valid only when the value is None
nil = AbsentRule(skip_nil=False)

# Valid when the value is None or empty
empty = AbsentRule(skip_nil=True)
