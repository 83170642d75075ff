"""
Type-directed emptiness checks.

Most rules treat an empty value as valid and leave the non-empty guarantee
to the Required rule, so every rule consults the same predicate.
"""

from collections.abc import Sized
from numbers import Number
from typing import Any


def is_empty(value: Any) -> bool:
    """
    Check whether a value is empty.

    A value is considered empty if it is:
    - None
    - False
    - a numeric zero (int, float, Decimal, Fraction, complex)
    - a string, bytes, sequence, set or mapping with no items

    Any other value (dates and times included) is non-empty.

    Args:
        value: The value to inspect

    Returns:
        True if the value is empty

    Examples:
        >>> is_empty("")
        True
        >>> is_empty(0.0)
        True
        >>> is_empty([0])
        False
    """
    if value is None:
        return True

    if isinstance(value, bool):
        return not value

    if isinstance(value, Number):
        return value == 0

    if isinstance(value, Sized):
        return len(value) == 0

    return False
