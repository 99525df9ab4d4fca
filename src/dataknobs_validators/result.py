"""Validation result types with consistent, predictable behavior.

``ValidationResult`` is the return type of every validator in this package.
It is either a success carrying a value, or a failure carrying an ordered
list of errors. Results compose without exceptions:

- ``map`` / ``flat_map`` sequence work on a success and short-circuit on a
  failure without calling the supplied function
- ``merge`` folds independent checks into one combined report
- ``get_or_throw`` / ``get_or`` are the two ways back out

Example:
    ```python
    from dataknobs_validators import ValidationResult, is_required, is_email

    email = (
        is_required(raw, "email")
        .flat_map(is_email)
        .map(str.lower)
        .get_or(None)
    )
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

from .exceptions import ValidationError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class FieldError:
    """Failure record for a single field of a schema.

    Attributes:
        field: Name of the field that failed
        errors: The errors reported by that field's validator, in order
    """

    field: str
    errors: list[Any]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a ``{"field": ..., "errors": [...]}`` dictionary."""
        return {"field": self.field, "errors": list(self.errors)}

    def __str__(self) -> str:
        return f"{self.field}: {'; '.join(str(e) for e in self.errors)}"


@dataclass
class ValidationResult(Generic[T]):
    """Success/failure container returned by all validators.

    Build instances through ``ok`` and ``fail`` rather than the constructor.
    A result may move from success to failure (``add_error``, ``merge``) but
    never back.

    Attributes:
        is_valid: True iff ``value`` is usable
        errors: Ordered error list; empty for a result that never failed
        value: The validated payload; ``None`` on failure
    """

    is_valid: bool
    errors: list[Any] = field(default_factory=list)
    value: T | None = None

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult.ok({self.value!r})"
        return f"ValidationResult.fail({self.errors!r})"

    @classmethod
    def ok(cls, value: T) -> ValidationResult[T]:
        """Create a successful result wrapping ``value``."""
        return cls(is_valid=True, errors=[], value=value)

    @classmethod
    def fail(cls, errors: Any = ()) -> ValidationResult[Any]:
        """Create a failed result.

        Args:
            errors: A single error, or a list/tuple of errors. A single
                error is wrapped into a one-element list.

        Returns:
            Failed ValidationResult without a value
        """
        if isinstance(errors, (list, tuple)):
            error_list = list(errors)
        else:
            error_list = [errors]
        return cls(is_valid=False, errors=error_list)

    def add_error(self, error: Any) -> ValidationResult[T]:
        """Add an error and mark as invalid (fluent API).

        The result becomes a failure even when ``error`` is empty.

        Args:
            error: Error message to add

        Returns:
            Self for chaining
        """
        self.errors.append(error)
        self.is_valid = False
        return self

    def merge(self, other: ValidationResult[Any]) -> ValidationResult[T]:
        """Absorb another result's failure into this one (fluent API).

        If ``other`` failed, this result fails too and ``other.errors`` are
        appended after the existing errors. A successful ``other`` leaves
        this result untouched.

        Args:
            other: Result to merge into this one

        Returns:
            Self for chaining
        """
        if not other.is_valid:
            self.is_valid = False
            self.errors.extend(other.errors)
        return self

    def map(self, fn: Callable[[T], U]) -> ValidationResult[Any]:
        """Transform the value of a successful result.

        A failure is returned as is and ``fn`` is never called. Exceptions
        raised by ``fn`` are not caught.

        Args:
            fn: Total function applied to the value

        Returns:
            A new successful result wrapping ``fn(value)``, or self on failure
        """
        if not self.is_valid:
            return self
        return ValidationResult.ok(fn(self.value))  # type: ignore[arg-type]

    def flat_map(self, fn: Callable[[T], ValidationResult[U]]) -> ValidationResult[Any]:
        """Chain a validator onto a successful result.

        A failure is returned as is and ``fn`` is never called.

        Args:
            fn: Function from the value to a new ValidationResult

        Returns:
            ``fn(value)`` on success, self on failure
        """
        if not self.is_valid:
            return self
        return fn(self.value)  # type: ignore[arg-type]

    def get_or_throw(self) -> T:
        """Return the value, raising if this result failed.

        Raises:
            ValidationError: With message ``"Validation failed: <errors>"``
                where errors are joined by ``", "``
        """
        if not self.is_valid:
            raise ValidationError(
                f"Validation failed: {', '.join(str(e) for e in self.errors)}",
                context={"errors": list(self.errors)},
            )
        return self.value  # type: ignore[return-value]

    def get_or(self, default: Any) -> Any:
        """Return the value on success, otherwise ``default``."""
        return self.value if self.is_valid else default

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "is_valid": self.is_valid,
            "errors": [
                e.to_dict() if isinstance(e, FieldError) else e for e in self.errors
            ],
            "value": self.value,
        }
