"""Schema validation: apply named validators to named values.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable

from .result import FieldError, ValidationResult

logger = logging.getLogger(__name__)

Validator = Callable[[Any], ValidationResult[Any]]


def _field_value(data: Any, field_name: str) -> Any:
    if isinstance(data, Mapping):
        return data.get(field_name)
    return getattr(data, field_name, None)


class SchemaValidator:
    """Validate a mapping field by field against a set of rules.

    Rules map a field name to a validator. Fields without a rule are
    ignored; rules whose field is missing from the data see ``None``, which
    is how a missing required field gets reported.

    Example:
        ```python
        validator = (
            SchemaValidator({"email": is_email})
            .add_rule("age", is_number)
        )
        result = validator.validate({"email": "bad", "age": "x"})
        [e.field for e in result.errors]
        # ['email', 'age']
        ```
    """

    def __init__(self, rules: Mapping[str, Validator] | None = None):
        """Initialize schema validator.

        Args:
            rules: Optional mapping of field name to validator (copied)
        """
        self.rules: dict[str, Validator] = dict(rules or {})

    def __len__(self) -> int:
        return len(self.rules)

    def __contains__(self, field_name: object) -> bool:
        return field_name in self.rules

    @property
    def fields(self) -> list[str]:
        """Field names with a rule, in insertion order."""
        return list(self.rules)

    def add_rule(self, field_name: str, validator: Validator) -> SchemaValidator:
        """Add or replace the rule for a field (fluent API).

        Args:
            field_name: Field to validate
            validator: Validator applied to the field's value

        Returns:
            Self for chaining
        """
        self.rules[field_name] = validator
        return self

    def validate(self, data: Any) -> ValidationResult[Any]:
        """Validate data against every rule.

        Args:
            data: Mapping (or object with attributes) to validate

        Returns:
            Success wrapping ``data`` unchanged, or a failure whose errors are
            one FieldError per failing field in rule order
        """
        errors: list[FieldError] = []

        for field_name, validator in self.rules.items():
            result = validator(_field_value(data, field_name))
            if not result.is_valid:
                errors.append(FieldError(field=field_name, errors=list(result.errors)))

        if errors:
            logger.debug(
                f"Schema validation failed for fields: {', '.join(e.field for e in errors)}"
            )
            return ValidationResult.fail(errors)

        return ValidationResult.ok(data)

    def validate_many(
        self, records: list[Any], stop_on_error: bool = False
    ) -> list[ValidationResult[Any]]:
        """Validate multiple records.

        Args:
            records: Records to validate
            stop_on_error: If True, stop after the first failing record

        Returns:
            One ValidationResult per validated record
        """
        results = []

        for record in records:
            result = self.validate(record)
            results.append(result)

            if not result.is_valid and stop_on_error:
                break

        return results


def validate_schema(data: Any, rules: Mapping[str, Validator]) -> ValidationResult[Any]:
    """Validate ``data`` once against ``rules``.

    Equivalent to ``SchemaValidator(rules).validate(data)``.
    """
    return SchemaValidator(rules).validate(data)
