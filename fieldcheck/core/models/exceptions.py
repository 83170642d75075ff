"""
Exceptions raised for malformed rule chains.

Validation failures are never raised; they are returned as ErrorObject or
Errors values. RuleConfigurationError signals that the rule chain itself is
wrong, for example a threshold bound whose type cannot be compared with the
checked value.
"""


class RuleConfigurationError(ValueError):
    """Raised when a rule is misconfigured or applied to an unsupported value."""

    def __init__(self, rule_type: str, message: str):
        self.rule_type = rule_type
        self.message = message
        super().__init__(f"[{rule_type}] {message}")
