"""
MatchRule - validates string values against a regular expression pattern.
"""

import re
from dataclasses import dataclass
from re import Pattern
from typing import Any

from fieldcheck.core.models import ErrorObject, RuleConfigurationError, RuleResult, new_error
from fieldcheck.utils import is_empty

from .base_rule import ErrorRule

ERR_MATCH_INVALID = new_error("validation_match_invalid", "must be in a valid format")


@dataclass(frozen=True)
class MatchRule(ErrorRule):
    """
    Validates that a value matches a regular expression pattern.

    Parameters:
    - pattern: compiled pattern
    - full: when True the whole value must match (re.fullmatch), otherwise a
            match anywhere in the value is enough (re.search)

    Bytes values are decoded as UTF-8 when the pattern is a str pattern.
    An empty value is considered valid.
    """

    pattern: Pattern
    full: bool = False
    err: ErrorObject | None = None

    def validate(self, value: Any) -> RuleResult:
        if is_empty(value):
            return None

        if isinstance(value, bytes) and isinstance(self.pattern.pattern, str):
            try:
                value = value.decode("utf-8")
            except UnicodeDecodeError:
                return self.failure()
        if not isinstance(value, (str, bytes)):
            raise self.configuration_error(
                f"Value must be a string or bytes, got {type(value).__name__}"
            )

        try:
            matched = self.pattern.fullmatch(value) if self.full else self.pattern.search(value)
        except TypeError as e:
            # str pattern applied to bytes or the reverse
            raise self.configuration_error(str(e)) from e

        if matched is None:
            return self.failure()
        return None

    def default_error(self) -> ErrorObject:
        return ERR_MATCH_INVALID

    @property
    def rule_type(self) -> str:
        return "match"


def match(pattern: str | Pattern, full: bool = False, flags: int = 0) -> MatchRule:
    """
    Create a rule checking that a string matches pattern.

    Args:
        pattern: Regular expression (string or compiled Pattern)
        full: Require the whole value to match
        flags: Regex flags used when compiling a string pattern

    Returns:
        MatchRule instance

    Raises:
        RuleConfigurationError: If the pattern is not a valid regular expression
    """
    if isinstance(pattern, Pattern):
        return MatchRule(pattern=pattern, full=full)

    if not isinstance(pattern, (str, bytes)):
        raise RuleConfigurationError(
            rule_type="match",
            message=f"Pattern must be string or compiled Pattern, got {type(pattern).__name__}",
        )

    try:
        compiled = re.compile(pattern, flags)
    except re.error as e:
        raise RuleConfigurationError(rule_type="match", message=f"Invalid regex pattern: {e}") from e

    return MatchRule(pattern=compiled, full=full)
