"""
fieldcheck: composable validation rules with field-addressable error reports.

Usage:
    from fieldcheck import field, min_, required, validate_object

    errors = validate_object(user,
        field("name", user.name, required),
        field("age", user.age, min_(18)),
    )
    if errors is not None:
        return {"errors": errors.to_details()}
"""

from fieldcheck.core import (
    Accessor,
    FieldRules,
    accessor,
    field,
    field_of,
    validate,
    validate_object,
)
from fieldcheck.core.models import ErrorObject, Errors, RuleConfigurationError, new_error
from fieldcheck.core.rules import (
    BaseRule,
    by,
    date,
    each,
    empty,
    in_,
    length,
    match,
    max_,
    min_,
    new_string_rule,
    new_string_rule_with_error,
    nil,
    nil_or_not_empty,
    not_in,
    required,
    skip,
    when,
)
from fieldcheck.core.rules import is_rules as is_
from fieldcheck.core.rules.is_rules import EMAIL_PATTERN

__all__ = [
    "Accessor",
    "FieldRules",
    "accessor",
    "field",
    "field_of",
    "validate",
    "validate_object",
    "ErrorObject",
    "Errors",
    "RuleConfigurationError",
    "new_error",
    "BaseRule",
    "by",
    "date",
    "each",
    "empty",
    "in_",
    "length",
    "match",
    "max_",
    "min_",
    "new_string_rule",
    "new_string_rule_with_error",
    "nil",
    "nil_or_not_empty",
    "not_in",
    "required",
    "skip",
    "when",
    "is_",
    "EMAIL_PATTERN",
]
