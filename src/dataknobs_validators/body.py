"""Request-body helpers that raise instead of returning a result.

These sit on the raise-based channel: they check a parsed body mapping and
raise ``ValidationError`` with the offending field in ``context["field"]``.
Emptiness follows Python truthiness, so ``None``, ``""``, ``0``, ``False``
and empty collections all count as missing, except in
``require_body_field`` which only rejects ``None`` and ``""``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .exceptions import ValidationError
from .field_validators import is_array, is_required
from .type_checkers import TypeTag, is_type

logger = logging.getLogger(__name__)

_KNOWN_TAGS = frozenset(tag.value for tag in TypeTag)


def _raise(field: str, message: str) -> None:
    logger.debug(f"Body validation failed on '{field}': {message}")
    raise ValidationError(message, context={"field": field})


def validate_body_fields(body: Mapping[str, Any], fields: Iterable[str]) -> Mapping[str, Any]:
    """Require every field in ``fields`` to be present and non-empty.

    Raises:
        ValidationError: Listing all missing fields, e.g. ``"name, email required"``
    """
    missing = [field for field in fields if not body.get(field)]
    if missing:
        _raise(missing[0], f"{', '.join(missing)} required")
    return body


def validate_body_array(body: Mapping[str, Any], field: str) -> Any:
    """Return ``body[field]`` if it is a non-empty array.

    Raises:
        ValidationError: If the field is not an array or is empty
    """
    value = body.get(field)
    result = is_array(value)
    if not result.is_valid:
        _raise(field, f"{field} array is required and cannot be empty")
    if len(result.value) == 0:
        _raise(field, f"{field} array cannot be empty")
    return value


def validate_body_field_exists(
    body: Mapping[str, Any], field: str, error_message: str | None = None
) -> Any:
    """Return ``body[field]`` if it is non-empty, raising otherwise."""
    value = body.get(field)
    if not value:
        _raise(field, error_message or f"{field} is required")
    return value


def require_body_field(body: Mapping[str, Any], field: str) -> Any:
    """Return ``body[field]`` unless it is ``None`` or ``""``.

    Unlike ``validate_body_field_exists``, ``0`` and ``False`` are accepted.
    """
    value = body.get(field)
    if not is_required(value, field).is_valid:
        _raise(field, f"{field} is required")
    return value


def validate_body_multiple(
    body: Mapping[str, Any], schema: Mapping[str, Mapping[str, Any]]
) -> Mapping[str, Any]:
    """Check several fields at once and report every problem together.

    Each schema entry may contain:
        required (bool): The field must be non-empty
        message (str): Replaces ``"required"`` in the missing-field message
        type (str): Type tag (see ``TypeTag``) a non-empty value must carry;
            unknown tags are logged and skipped

    Raises:
        ValidationError: With all problems joined by ``"; "``
    """
    errors = []
    for field, config in schema.items():
        value = body.get(field)
        if config.get("required") and not value:
            errors.append(f"{field}: {config.get('message') or 'required'}")
        type_tag = config.get("type")
        if type_tag and type_tag not in _KNOWN_TAGS:
            logger.warning(f"Unknown type '{type_tag}' for field '{field}', skipping type check")
            type_tag = None
        if value and type_tag and not is_type(value, type_tag):
            errors.append(f"{field}: must be {type_tag}")

    if errors:
        _raise("validation", "; ".join(errors))
    return body
