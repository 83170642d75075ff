"""
Shared helpers for rules and error rendering.
"""

from .emptiness import is_empty
from .formatting import format_message

__all__ = [
    "is_empty",
    "format_message",
]
