"""
Errors model: field-keyed collection of validation failures.
"""

from typing import Any, Union

from .error_object import ErrorObject


class Errors(dict):
    """
    Ordered mapping of field name to ErrorObject or nested Errors.

    Errors renders like a single failure, so a rule such as Each can return
    it as the failure of one field. An empty Errors means "valid"; the
    engine never returns one and hands back None instead.

    Writing the same field twice keeps the last value.
    """

    def error(self) -> str:
        """
        Render every contained failure.

        Failures are listed in insertion order as "field: message" joined by
        "; " and terminated by ".". Nested Errors render in parentheses.

        Returns:
            Rendered message, or "" when empty
        """
        parts = []
        for key, err in self.items():
            if err is None:
                continue
            if isinstance(err, Errors):
                nested = err.error()
                if nested:
                    parts.append(f"{key}: ({nested})")
            else:
                parts.append(f"{key}: {err.error()}")

        if not parts:
            return ""
        return "; ".join(parts) + "."

    def filter(self) -> "Errors | None":
        """
        Drop entries that carry no failure.

        Returns:
            A new Errors without None entries, or None if nothing is left
        """
        filtered = Errors((key, err) for key, err in self.items() if err is not None)
        return filtered if filtered else None

    def to_dict(self) -> dict[str, Any]:
        """Serialize as nested {field: rendered message} dictionaries."""
        return {
            key: err.to_dict() if isinstance(err, Errors) else err.error()
            for key, err in self.items()
            if err is not None
        }

    def to_details(self) -> dict[str, Any]:
        """Serialize as nested {field: {"code", "message"}} dictionaries."""
        return {
            key: err.to_details() if isinstance(err, Errors) else err.to_detail()
            for key, err in self.items()
            if err is not None
        }

    def __str__(self) -> str:
        return self.error()


# What a rule hands back: a single failure, a nested report, or None if valid
RuleResult = Union[ErrorObject, Errors, None]
