"""
Rule engine core: models, rules, field binding and the validation facade.
"""

from .field_rules import Accessor, FieldRules, accessor, field, field_of
from .validation import validate, validate_object

__all__ = [
    "Accessor",
    "FieldRules",
    "accessor",
    "field",
    "field_of",
    "validate",
    "validate_object",
]
