"""Field validators: pure functions from a value to a ValidationResult.

Each validator checks the runtime type first, then the format or range,
and returns the original value unchanged on success. Nothing is coerced.
"""

from __future__ import annotations

import json
import math
import re
from collections.abc import Mapping, Sequence
from numbers import Real
from typing import Any

from .patterns import EMAIL, IDENTIFIER, ISO_DATETIME, JSON_STRING, PATTERNS, PORT, SLUG, URL, UUID
from .result import ValidationResult

MUST_BE_STRING = "Value must be a string"


def _matches_string(
    value: Any, pattern: re.Pattern[str], message: str
) -> ValidationResult[str]:
    if not isinstance(value, str):
        return ValidationResult.fail(MUST_BE_STRING)
    if not pattern.match(value):
        return ValidationResult.fail(message)
    return ValidationResult.ok(value)


def _strict_equals(a: Any, b: Any) -> bool:
    # bool is an int subclass; keep True and 1 apart
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    return a == b


def is_string(value: Any) -> ValidationResult[str]:
    """Accept any ``str``, including the empty string."""
    if not isinstance(value, str):
        return ValidationResult.fail(MUST_BE_STRING)
    return ValidationResult.ok(value)


def is_number(value: Any) -> ValidationResult[Real]:
    """Accept real numbers, including infinities but not NaN or bools."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return ValidationResult.fail("Value must be a number")
    # Only floats can be NaN; converting a huge int to float would overflow
    if isinstance(value, float) and math.isnan(value):
        return ValidationResult.fail("Value must be a number")
    return ValidationResult.ok(value)


def is_boolean(value: Any) -> ValidationResult[bool]:
    """Accept only ``True`` and ``False``."""
    if not isinstance(value, bool):
        return ValidationResult.fail("Value must be a boolean")
    return ValidationResult.ok(value)


def is_array(value: Any) -> ValidationResult[Sequence[Any]]:
    """Accept lists and tuples; strings and other iterables are rejected."""
    if not isinstance(value, (list, tuple)):
        return ValidationResult.fail("Value must be an array")
    return ValidationResult.ok(value)


def is_object(value: Any) -> ValidationResult[Mapping[Any, Any]]:
    """Accept mappings, including an empty dict."""
    if not isinstance(value, Mapping):
        return ValidationResult.fail("Value must be an object")
    return ValidationResult.ok(value)


def is_required(value: Any, field_name: str = "Value") -> ValidationResult[Any]:
    """Reject ``None`` and ``""``; falsy values such as 0 and False pass.

    Args:
        value: Value to check
        field_name: Name used in the error message

    Returns:
        ValidationResult failing with ``"<field_name> is required"``
    """
    if value is None or (isinstance(value, str) and value == ""):
        return ValidationResult.fail(f"{field_name} is required")
    return ValidationResult.ok(value)


def is_uuid(value: Any) -> ValidationResult[str]:
    """Accept hyphenated 8-4-4-4-12 hex UUID strings, any case."""
    return _matches_string(value, UUID, "Value is not a valid UUID")


def is_email(value: Any) -> ValidationResult[str]:
    """Accept strings shaped like ``local@domain.tld``."""
    return _matches_string(value, EMAIL, "Value is not a valid email address")


def is_url(value: Any) -> ValidationResult[str]:
    """Accept ``http://`` and ``https://`` URLs."""
    return _matches_string(value, URL, "Value is not a valid URL")


def is_identifier(value: Any) -> ValidationResult[str]:
    """Accept bare identifiers: letter, ``_`` or ``$`` then alnum, ``_`` or ``$``."""
    return _matches_string(value, IDENTIFIER, "Value is not a valid identifier")


def is_slug(value: Any) -> ValidationResult[str]:
    """Accept lowercase hyphen-separated slugs such as ``my-post-2``."""
    return _matches_string(value, SLUG, "Value is not a valid slug")


def is_iso_datetime(value: Any) -> ValidationResult[str]:
    """Accept ISO 8601 timestamps like ``2024-01-31T12:00:00Z``."""
    return _matches_string(value, ISO_DATETIME, "Value is not a valid ISO datetime")


def is_json_string(value: Any) -> ValidationResult[str]:
    """Accept strings holding a JSON object or array.

    The shape is checked with the JSON_STRING pattern, then the string must
    actually parse. The string itself is returned, not the parsed document.
    """
    result = _matches_string(value, JSON_STRING, "Value is not a valid JSON string")
    if not result.is_valid:
        return result
    try:
        json.loads(value)
    except json.JSONDecodeError:
        return ValidationResult.fail("Value is not a valid JSON string")
    return result


def is_one_of(value: Any, allowed_values: Sequence[Any]) -> ValidationResult[Any]:
    """Accept a value strictly equal to one of ``allowed_values``.

    Args:
        value: Value to check; no type check is applied
        allowed_values: The allowed values

    Returns:
        ValidationResult failing with ``"Value must be one of: a, b"``
    """
    if not any(_strict_equals(value, allowed) for allowed in allowed_values):
        allowed_str = ", ".join(str(v) for v in allowed_values)
        return ValidationResult.fail(f"Value must be one of: {allowed_str}")
    return ValidationResult.ok(value)


def is_port(value: Any) -> ValidationResult[Any]:
    """Accept values whose string form is an integer from 0 to 65535.

    Integral floats such as ``8080.0`` are read as integers. The value itself
    is returned on success, not its string form.
    """
    if isinstance(value, float) and value.is_integer():
        text = str(int(value))
    else:
        text = str(value)
    if not PORT.match(text):
        return ValidationResult.fail("Value is not a valid port number (0-65535)")
    return ValidationResult.ok(value)


def matches(
    value: Any, pattern: str | re.Pattern[str], message: str | None = None
) -> ValidationResult[str]:
    """Check a string against a named pattern, a regex string or a compiled regex.

    Args:
        value: Value to check
        pattern: A ``PATTERNS`` key (e.g. ``"SLUG"``), a regex string or a
            compiled pattern. Regex strings must match the whole value.
        message: Optional failure message

    Returns:
        ValidationResult with the original string on success
    """
    if isinstance(pattern, str):
        regex = PATTERNS.get(pattern) or re.compile(rf"(?:{pattern})\Z")
    else:
        regex = pattern
    return _matches_string(
        value, regex, message or f"Value does not match pattern '{regex.pattern}'"
    )
