"""
DateRule - validates that a string parses as a date under a given layout.
"""

from dataclasses import dataclass, replace
from datetime import date as date_type
from datetime import datetime
from typing import Any

from fieldcheck.config import get_settings
from fieldcheck.core.models import ErrorObject, RuleResult, new_error
from fieldcheck.utils import is_empty

from .base_rule import ErrorRule

ERR_DATE_INVALID = new_error("validation_date_invalid", "must be a valid date")
ERR_DATE_OUT_OF_RANGE = new_error("validation_date_out_of_range", "the date is out of range")


@dataclass(frozen=True)
class DateRule(ErrorRule):
    """
    Validates that a string value is a date in the given layout.

    Parameters:
    - layout: strptime format, e.g. "%Y-%m-%d" or "%d %b %y %H:%M %Z"
    - min_date / max_date: optional inclusive bounds on the parsed value

    A bound given as a plain date is compared with the parsed value's date part.
    An empty value is considered valid.
    """

    layout: str
    min_date: date_type | None = None
    max_date: date_type | None = None
    err: ErrorObject | None = None
    range_err: ErrorObject | None = None

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

        try:
            parsed = datetime.strptime(value, self.layout)
        except ValueError:
            return self.failure()

        try:
            in_range = self._in_range(parsed)
        except TypeError as e:
            raise self.configuration_error(f"Cannot compare {parsed!r} with date bounds: {e}") from e

        if not in_range:
            return self.range_err if self.range_err is not None else ERR_DATE_OUT_OF_RANGE
        return None

    def _in_range(self, parsed: datetime) -> bool:
        for bound, below in ((self.min_date, True), (self.max_date, False)):
            if bound is None:
                continue
            actual = parsed if isinstance(bound, datetime) else parsed.date()
            if below and actual < bound:
                return False
            if not below and actual > bound:
                return False
        return True

    def min(self, bound: date_type) -> "DateRule":
        """Return a copy that rejects dates earlier than bound."""
        return replace(self, min_date=bound)

    def max(self, bound: date_type) -> "DateRule":
        """Return a copy that rejects dates later than bound."""
        return replace(self, max_date=bound)

    def range_error(self, message: str) -> "DateRule":
        """Return a copy reporting a different out-of-range message."""
        current = self.range_err if self.range_err is not None else ERR_DATE_OUT_OF_RANGE
        return replace(self, range_err=current.with_message(message))

    def default_error(self) -> ErrorObject:
        return ERR_DATE_INVALID

    @property
    def rule_type(self) -> str:
        return "date"


def date(layout: str | None = None) -> DateRule:
    """
    Create a rule checking that a string is a date in the given layout.

    Args:
        layout: strptime format; defaults to the configured date layout

    Returns:
        DateRule instance
    """
    return DateRule(layout=layout or get_settings().date_layout)
