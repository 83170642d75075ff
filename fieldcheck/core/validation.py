"""
Validation facade.

validate() runs one rule chain against one value. validate_object() runs the
chain of every field of an object and collects the failures into an Errors
report keyed by field name.
"""

from typing import Any

from fieldcheck.config import get_settings
from fieldcheck.core.models import ErrorObject, Errors
from fieldcheck.core.rules import validate
from fieldcheck.observability.logger import get_logger, log_operation
from fieldcheck.observability.metrics import (
    record_field_failure,
    record_validation,
    track_duration,
    validation_duration_seconds,
)

from .field_rules import FieldRules

logger = get_logger(__name__)

__all__ = ["validate", "validate_object"]


def validate_object(target: Any, *field_rules: FieldRules | None) -> Errors | None:
    """
    Validate the fields of an object.

    Every field is validated, even after another field failed, so the caller
    receives the complete report in one call. Within a field the chain stops
    at the first failure.

    Args:
        target: The object being validated; None skips validation
        *field_rules: Field rule chains; None entries are ignored

    Returns:
        None if every field passed, otherwise Errors keyed by field name

    Raises:
        RuleConfigurationError: If a rule cannot be applied to a field's value
    """
    if target is None:
        return None

    metrics_enabled = get_settings().metrics_enabled
    fields = [fr for fr in field_rules if fr is not None]

    try:
        with log_operation("validate_object", logger=logger, field_count=len(fields)):
            if metrics_enabled:
                with track_duration(validation_duration_seconds, operation="validate_object"):
                    errors = _validate_fields(target, fields)
            else:
                errors = _validate_fields(target, fields)
    except Exception:
        if metrics_enabled:
            record_validation("error")
        raise

    if not errors:
        if metrics_enabled:
            record_validation("valid")
        return None

    logger.debug(
        f"Validation failed for {len(errors)} field(s)",
        extra={"failed_fields": list(errors)},
    )
    if metrics_enabled:
        record_validation("invalid")
        for name, err in errors.items():
            record_field_failure(name, err.code if isinstance(err, ErrorObject) else "nested")
    return errors


def _validate_fields(target: Any, fields: list[FieldRules]) -> Errors:
    errors = Errors()
    for fr in fields:
        err = validate(fr.resolve(target), *fr.rules)
        if err is not None:
            errors[fr.name] = err
    return errors
