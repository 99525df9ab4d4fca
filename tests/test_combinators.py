"""Tests for validator combinators."""

from functools import partial

from dataknobs_validators import (
    SchemaValidator,
    ValidationResult,
    all_of,
    any_of,
    chain,
    is_email,
    is_number,
    is_one_of,
    is_required,
    is_string,
    is_uuid,
    optional,
)


def _max_length(limit):
    def validate(value):
        if len(value) > limit:
            return ValidationResult.fail(f"Value is longer than {limit}")
        return ValidationResult.ok(value)

    return validate


class TestChain:
    """Test sequencing with chain."""

    def test_all_pass(self):
        validator = chain(is_required, is_string, is_email)
        assert validator("a@b.com").value == "a@b.com"

    def test_first_failure_wins(self):
        calls = []

        def spy(value):
            calls.append(value)
            return ValidationResult.ok(value)

        result = chain(is_required, is_string, spy)(None)
        assert result.errors == ["Value is required"]
        assert calls == []

    def test_passes_transformed_value_along(self):
        strip = lambda v: ValidationResult.ok(v.strip())  # noqa: E731
        result = chain(is_string, strip, is_email)("  a@b.com  ")
        assert result.value == "a@b.com"

    def test_empty_chain_accepts(self):
        assert chain()(5).value == 5


class TestAllOf:
    """Test aggregation with all_of."""

    def test_collects_every_failure(self):
        validator = all_of(is_email, _max_length(3))
        result = validator("toolong")
        assert result.errors == ["Value is not a valid email address", "Value is longer than 3"]
        assert result.value is None

    def test_success_keeps_original_value(self):
        assert all_of(is_string, _max_length(10))("short").value == "short"


class TestAnyOf:
    """Test alternatives with any_of."""

    def test_first_success_returned(self):
        validator = any_of(is_uuid, is_email)
        assert validator("a@b.com").value == "a@b.com"

    def test_all_errors_when_nothing_passes(self):
        result = any_of(is_uuid, is_number)("nope")
        assert result.errors == ["Value is not a valid UUID", "Value must be a number"]


class TestOptional:
    """Test optional."""

    def test_none_passes(self):
        assert optional(is_email)(None).is_valid

    def test_value_is_validated(self):
        assert optional(is_email)("bad").errors == ["Value is not a valid email address"]

    def test_optional_schema_field(self):
        validator = SchemaValidator(
            {"role": optional(partial(is_one_of, allowed_values=["admin", "user"]))}
        )
        assert validator.validate({}).is_valid
        assert not validator.validate({"role": "root"}).is_valid
