"""
FieldRules and Accessor: bind a named field to its value and rule chain.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fieldcheck.core.models import RuleConfigurationError
from fieldcheck.core.rules import BaseRule


@dataclass(frozen=True)
class Accessor:
    """
    Named getter for one field of a target object.

    Attributes:
        name: Field name reported in the Errors mapping
        get: Pure function returning the field's value for a target
    """

    name: str
    get: Callable[[Any], Any]

    def __post_init__(self):
        if not self.name:
            raise RuleConfigurationError(rule_type="field", message="Accessor name must be non-empty")
        if not callable(self.get):
            raise RuleConfigurationError(rule_type="field", message="Accessor get must be callable")


@dataclass(frozen=True)
class FieldRules:
    """
    Rule chain for one field of an object.

    The value is either a literal captured when the FieldRules is built or
    read through an accessor from the target passed to validate_object.
    Resolving never mutates the instance, so one FieldRules may be shared
    by concurrent validations.
    """

    name: str
    rules: tuple[BaseRule, ...]
    value: Any = None
    accessor: Accessor | None = None

    def resolve(self, target: Any) -> Any:
        """
        Return this field's value for target.

        Args:
            target: The object being validated

        Returns:
            The accessor's result for target, or the literal value
        """
        if self.accessor is not None:
            return self.accessor.get(target)
        return self.value


def accessor(name: str, get: Callable[[Any], Any]) -> Accessor:
    """
    Create an Accessor.

    Example:
        age = accessor("age", lambda user: user.age)
    """
    return Accessor(name=name, get=get)


def field(name: str, value: Any, *rules: BaseRule) -> FieldRules:
    """
    Create rules for a field whose value is already known.

    Args:
        name: Field name reported in the Errors mapping
        value: The field's value
        *rules: Rule chain

    Returns:
        FieldRules instance
    """
    return FieldRules(name=name, rules=rules, value=value)


def field_of(field_accessor: Accessor, *rules: BaseRule) -> FieldRules:
    """
    Create rules for a field read from the validated object.

    Args:
        field_accessor: Accessor naming the field and reading its value
        *rules: Rule chain

    Returns:
        FieldRules instance
    """
    return FieldRules(name=field_accessor.name, rules=rules, accessor=field_accessor)
