"""Exception hierarchy for dataknobs_validators.

Validators themselves never raise for ordinary failures; they return a
``ValidationResult``. The exceptions here cover the explicit raise points:

- ``ValidationResult.get_or_throw()`` unwrapping a failed result
- ``assert_type()`` fail-fast type guards
- the request-body helpers in ``dataknobs_validators.body``
- registry lookups and configuration-driven schema construction

Example:
    ```python
    from dataknobs_validators import ValidationError, is_email

    try:
        address = is_email(raw).get_or_throw()
    except ValidationError as e:
        logger.warning(f"Rejected input: {e}")
        logger.debug(f"Errors: {e.context['errors']}")
    ```
"""

from typing import Any, Dict


class ValidatorsError(Exception):
    """Base exception for the validators package.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context (field names, errors, etc.)
        details: Alternative to context (both are supported)

    Example:
        ```python
        error = ValidatorsError("Lookup failed", context={"key": "is_email"})
        str(error)
        # 'Lookup failed'
        error.context
        # {'key': 'is_email'}
        ```
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        # Details takes precedence if both are provided
        self.context = details or context or {}
        self.details = self.context


class ValidationError(ValidatorsError):
    """Raised when a value is rejected on the raise-based channel.

    Example:
        ```python
        raise ValidationError(
            "email is required",
            context={"field": "email"}
        )
        ```
    """

    pass


class TypeMismatchError(ValidationError, TypeError):
    """Raised by ``assert_type`` when a value carries the wrong type tag.

    Also a ``TypeError`` so callers guarding with the builtin keep working.
    """

    def __init__(self, message: str, expected: str, actual: str):
        super().__init__(message, context={"expected": expected, "actual": actual})
        self.expected = expected
        self.actual = actual


class ConfigurationError(ValidatorsError):
    """Raised when a schema configuration is invalid or cannot be read.

    Example:
        ```python
        raise ConfigurationError(
            "Unsupported file format: .ini",
            context={"path": "schemas/user.ini"}
        )
        ```
    """

    pass


class NotFoundError(ValidatorsError):
    """Raised when a named validator or configuration file does not exist."""

    pass


class OperationError(ValidatorsError):
    """Raised when a registry operation is not allowed."""

    pass


__all__ = [
    "ValidatorsError",
    "ValidationError",
    "TypeMismatchError",
    "ConfigurationError",
    "NotFoundError",
    "OperationError",
]
