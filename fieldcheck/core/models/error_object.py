"""
ErrorObject model representing a single validation failure.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from fieldcheck.utils.formatting import format_message

from .exceptions import RuleConfigurationError


class ErrorObject(BaseModel):
    """
    A single validation failure.

    ErrorObject is a value: rules return it instead of raising. The message is
    a template rendered against params when error() is called.

    Attributes:
        code: Stable identifier clients can match on ("validation_required")
        message: Message template ("must be no less than {threshold}")
        params: Values substituted into the template placeholders
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "code": "validation_min_greater_equal_than_required",
                "message": "must be no less than {threshold}",
                "params": {"threshold": 18},
            }
        },
    )

    code: str
    message: str
    params: dict[str, Any] = Field(default_factory=dict)

    def error(self) -> str:
        """
        Render the message.

        Returns:
            The template verbatim when there are no params, otherwise the
            template with its placeholders substituted

        Raises:
            RuleConfigurationError: If the template names an unknown placeholder
                or its format spec cannot be applied
        """
        if not self.params:
            return self.message

        try:
            return format_message(self.message, self.params)
        except (KeyError, IndexError) as e:
            raise RuleConfigurationError(
                rule_type=self.code or "error",
                message=f"Message template '{self.message}' references missing param {e}",
            ) from e
        except (ValueError, AttributeError) as e:
            raise RuleConfigurationError(
                rule_type=self.code or "error",
                message=f"Message template '{self.message}' cannot be rendered: {e}",
            ) from e

    def with_message(self, message: str) -> "ErrorObject":
        """Return a copy reporting a different message template."""
        return self.model_copy(update={"message": message})

    def with_params(self, params: dict[str, Any]) -> "ErrorObject":
        """Return a copy carrying the given template params."""
        return self.model_copy(update={"params": dict(params)})

    def with_code(self, code: str) -> "ErrorObject":
        """Return a copy with a different error code."""
        return self.model_copy(update={"code": code})

    def to_detail(self) -> dict[str, str]:
        """Serialize as {"code", "message"} for API responses."""
        return {"code": self.code, "message": self.error()}

    def __str__(self) -> str:
        return self.error()


def new_error(code: str, message: str) -> ErrorObject:
    """
    Create an ErrorObject with no params.

    Args:
        code: Error code
        message: Message template

    Returns:
        ErrorObject instance
    """
    return ErrorObject(code=code, message=message)
