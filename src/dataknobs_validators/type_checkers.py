"""Type-tag helpers for validator authors.

These helpers work on plain booleans and exceptions rather than
``ValidationResult`` and keep no state.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from datetime import date
from enum import Enum
from numbers import Real
from typing import Any

from .exceptions import TypeMismatchError


class TypeTag(str, Enum):
    """Runtime type tags reported by ``get_type``."""

    NULL = "null"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    FUNCTION = "function"
    DATE = "date"
    REGEXP = "regexp"
    ERROR = "error"


# Object-like kinds that still count as "object" for is_type
_OBJECT_KINDS = frozenset({TypeTag.OBJECT, TypeTag.DATE, TypeTag.REGEXP, TypeTag.ERROR})

_PRIMITIVES = (str, bool, Real)


def get_type(value: Any) -> TypeTag:
    """Get the detailed type tag of a value.

    ``None``, arrays, dates, compiled regexes and exceptions are recognized
    before falling back to the primitive tags.

    Args:
        value: Any value

    Returns:
        The value's TypeTag
    """
    if value is None:
        return TypeTag.NULL
    if isinstance(value, (list, tuple)):
        return TypeTag.ARRAY
    if isinstance(value, date):
        return TypeTag.DATE
    if isinstance(value, re.Pattern):
        return TypeTag.REGEXP
    if isinstance(value, BaseException):
        return TypeTag.ERROR
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, Real):
        return TypeTag.NUMBER
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, Mapping):
        return TypeTag.OBJECT
    if callable(value):
        return TypeTag.FUNCTION
    return TypeTag.OBJECT


def is_type(value: Any, type_tag: TypeTag | str) -> bool:
    """Check whether a value carries the given type tag.

    ``"object"`` also matches dates, regexes and errors, which are objects
    with a more specific tag.

    Raises:
        ValueError: If ``type_tag`` is not a known tag
    """
    tag = TypeTag(type_tag)
    actual = get_type(value)
    if tag is TypeTag.OBJECT:
        return actual in _OBJECT_KINDS
    return actual is tag


def assert_type(value: Any, type_tag: TypeTag | str, message: str | None = None) -> Any:
    """Return ``value`` if it carries ``type_tag``, otherwise raise.

    Args:
        value: Value to check
        type_tag: Expected tag
        message: Optional message replacing the default
            ``"Expected <tag> but got <actual>"``

    Raises:
        TypeMismatchError: If the tag does not match
    """
    if not is_type(value, type_tag):
        expected = TypeTag(type_tag).value
        actual = get_type(value).value
        raise TypeMismatchError(
            message or f"Expected {expected} but got {actual}",
            expected=expected,
            actual=actual,
        )
    return value


def _has_members(obj: Any) -> bool:
    return obj is not None and not isinstance(obj, _PRIMITIVES)


def _has_member(obj: Any, prop: str) -> bool:
    if isinstance(obj, Mapping):
        return prop in obj
    return hasattr(obj, prop)


def has_property(obj: Any, prop: str) -> bool:
    """Check whether an object has a key (mappings) or attribute (objects).

    ``None`` and primitive values have no properties.
    """
    return _has_members(obj) and _has_member(obj, prop)


def has_properties(obj: Any, props: Iterable[str]) -> bool:
    """Check whether an object has every one of ``props``."""
    if not _has_members(obj):
        return False
    return all(_has_member(obj, prop) for prop in props)


def is_instance_of(value: Any, cls: Any) -> bool:
    """``isinstance`` that returns False instead of raising for a bad ``cls``."""
    try:
        return isinstance(value, cls)
    except TypeError:
        return False
