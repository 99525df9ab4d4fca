"""Compose validators into new validators.

All combinators return plain ``value -> ValidationResult`` functions, so the
result can be used anywhere a field validator is expected, including as a
schema rule.

Example:
    ```python
    from functools import partial

    email_field = chain(partial(is_required, field_name="email"), is_string, is_email)
    role_field = optional(partial(is_one_of, allowed_values=["admin", "user"]))
    ```
"""

from __future__ import annotations

from typing import Any, Callable

from .result import ValidationResult

Validator = Callable[[Any], ValidationResult[Any]]


def chain(*validators: Validator) -> Validator:
    """Run validators in sequence; the first failure stops the chain.

    Each validator receives the value produced by the previous one.
    """

    def validate(value: Any) -> ValidationResult[Any]:
        result: ValidationResult[Any] = ValidationResult.ok(value)
        for validator in validators:
            result = result.flat_map(validator)
        return result

    return validate


def all_of(*validators: Validator) -> Validator:
    """Run every validator on the same value and collect all failures."""

    def validate(value: Any) -> ValidationResult[Any]:
        result: ValidationResult[Any] = ValidationResult.ok(value)
        for validator in validators:
            result.merge(validator(value))
        if not result.is_valid:
            result.value = None
        return result

    return validate


def any_of(*validators: Validator) -> Validator:
    """Return the first successful result, or a failure with every error."""

    def validate(value: Any) -> ValidationResult[Any]:
        failure: ValidationResult[Any] = ValidationResult.fail([])
        for validator in validators:
            check_result = validator(value)
            if check_result.is_valid:
                return check_result
            failure.merge(check_result)
        return failure

    return validate


def optional(validator: Validator) -> Validator:
    """Let ``None`` through; validate anything else with ``validator``."""

    def validate(value: Any) -> ValidationResult[Any]:
        if value is None:
            return ValidationResult.ok(None)
        return validator(value)

    return validate
