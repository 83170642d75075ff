"""
RequiredRule - ensures a value is not empty.
"""

from dataclasses import dataclass, replace
from typing import Any

from fieldcheck.core.models import ErrorObject, RuleResult, new_error
from fieldcheck.utils import is_empty

from .base_rule import ErrorRule

ERR_REQUIRED = new_error("validation_required", "cannot be blank")
ERR_NIL_OR_NOT_EMPTY = new_error("validation_nil_or_not_empty_required", "cannot be blank")


@dataclass(frozen=True)
class RequiredRule(ErrorRule):
    """
    Validates that a value is not empty.

    Unlike every other rule, an empty value is a failure here.

    Parameters:
    - skip_nil: when True, None is accepted but a present empty value still fails
    - condition: the rule only applies when True
    """

    skip_nil: bool = False
    condition: bool = True
    err: ErrorObject | None = None

    def validate(self, value: Any) -> RuleResult:
        if not self.condition:
            return None

        if self.skip_nil and value is None:
            return None

        if is_empty(value):
            return self.failure()

        return None

    def when(self, condition: bool) -> "RequiredRule":
        """Return a copy that only applies when condition is true."""
        return replace(self, condition=condition)

    def default_error(self) -> ErrorObject:
        return ERR_NIL_OR_NOT_EMPTY if self.skip_nil else ERR_REQUIRED

    @property
    def rule_type(self) -> str:
        return "nil_or_not_empty" if self.skip_nil else "required"


# A value is not empty if it is a non-zero number, True, a non-empty
# string or collection, or any other non-None object.
required = RequiredRule()

# Like required, but None is valid
nil_or_not_empty = RequiredRule(skip_nil=True)
