"""
Message template rendering.
"""

from collections.abc import Mapping
from typing import Any


def format_message(template: str, params: Mapping[str, Any]) -> str:
    """
    Substitute named placeholders in a message template.

    Placeholders use the str.format syntax, e.g. "must be at least {threshold}".

    Args:
        template: Message template
        params: Placeholder values keyed by name

    Returns:
        The rendered message

    Raises:
        KeyError: If the template names a placeholder missing from params
    """
    return template.format_map(params)
