"""
Ready-made string rules for common formats.

Usage:
    from fieldcheck import is_

    validate_object(user,
        field("email", user.email, required, is_.email),
        field("homepage", user.homepage, is_.url),
    )
"""

import re
from urllib.parse import urlsplit
from uuid import UUID

from .string_rule import new_string_rule

EMAIL_PATTERN = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*\Z"
)

_DIGIT = re.compile(r"^[0-9]+\Z")
_ALPHA = re.compile(r"^[a-zA-Z]+\Z")
_ALPHANUMERIC = re.compile(r"^[a-zA-Z0-9]+\Z")
_INT = re.compile(r"^[-+]?(?:0|[1-9][0-9]*)\Z")
_FLOAT = re.compile(r"^[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?\Z")

_URL_SCHEMES = ("http", "https", "ftp", "ftps")


def _is_email(value: str) -> bool:
    return len(value) <= 254 and EMAIL_PATTERN.match(value) is not None


def _is_url(value: str) -> bool:
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return parts.scheme.lower() in _URL_SCHEMES and bool(parts.netloc) and " " not in value


def _is_uuid(value: str) -> bool:
    try:
        UUID(value)
    except ValueError:
        return False
    return True


email = new_string_rule(_is_email, "must be a valid email address", code="validation_is_email")
url = new_string_rule(_is_url, "must be a valid URL", code="validation_is_url")
uuid = new_string_rule(_is_uuid, "must be a valid UUID", code="validation_is_uuid")
digit = new_string_rule(
    lambda v: _DIGIT.match(v) is not None, "must contain digits only", code="validation_is_digit"
)
alpha = new_string_rule(
    lambda v: _ALPHA.match(v) is not None,
    "must contain English letters only",
    code="validation_is_alpha",
)
alphanumeric = new_string_rule(
    lambda v: _ALPHANUMERIC.match(v) is not None,
    "must contain English letters and digits only",
    code="validation_is_alphanumeric",
)
lower_case = new_string_rule(
    lambda v: v == v.lower(), "must be in lower case", code="validation_is_lower_case"
)
upper_case = new_string_rule(
    lambda v: v == v.upper(), "must be in upper case", code="validation_is_upper_case"
)
int_ = new_string_rule(
    lambda v: _INT.match(v) is not None, "must be an integer number", code="validation_is_int"
)
float_ = new_string_rule(
    lambda v: _FLOAT.match(v) is not None,
    "must be a floating point number",
    code="validation_is_float",
)
