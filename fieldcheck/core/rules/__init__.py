"""
Validation rule implementations.

Provides rules for absence, required values, thresholds, dates, membership,
lengths, patterns, per-element checks, conditionals, skip markers and
inline or string-predicate logic.
"""

from . import is_rules
from .absent_rule import AbsentRule, empty, nil
from .base_rule import BaseRule, ErrorRule
from .chain import validate
from .date_rule import DateRule, date
from .each_rule import EachRule, each
from .in_rule import InRule, NotInRule, in_, not_in
from .inline_rule import InlineRule, RuleFunc, by
from .length_rule import LengthRule, length
from .match_rule import MatchRule, match
from .required_rule import RequiredRule, nil_or_not_empty, required
from .skip_rule import SkipRule, skip
from .string_rule import StringRule, new_string_rule, new_string_rule_with_error
from .threshold_rule import Operator, ThresholdRule, max_, min_
from .when_rule import WhenRule, when

__all__ = [
    "BaseRule",
    "ErrorRule",
    "AbsentRule",
    "RequiredRule",
    "ThresholdRule",
    "Operator",
    "DateRule",
    "InRule",
    "NotInRule",
    "LengthRule",
    "MatchRule",
    "EachRule",
    "WhenRule",
    "InlineRule",
    "RuleFunc",
    "SkipRule",
    "StringRule",
    "validate",
    "nil",
    "empty",
    "required",
    "nil_or_not_empty",
    "min_",
    "max_",
    "date",
    "in_",
    "not_in",
    "length",
    "match",
    "each",
    "when",
    "by",
    "skip",
    "new_string_rule",
    "new_string_rule_with_error",
    "is_rules",
]
