"""Tests for the type-checker utilities."""

import re
from datetime import date, datetime
from types import SimpleNamespace

import pytest

from dataknobs_validators import (
    TypeMismatchError,
    TypeTag,
    ValidationError,
    assert_type,
    get_type,
    has_properties,
    has_property,
    is_instance_of,
    is_type,
)


class TestGetType:
    """Test get_type special cases and fallbacks."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, TypeTag.NULL),
            ([1, 2], TypeTag.ARRAY),
            ((1, 2), TypeTag.ARRAY),
            (date(2024, 1, 1), TypeTag.DATE),
            (datetime(2024, 1, 1, 12), TypeTag.DATE),
            (re.compile("x"), TypeTag.REGEXP),
            (ValueError("boom"), TypeTag.ERROR),
            (True, TypeTag.BOOLEAN),
            (3, TypeTag.NUMBER),
            (float("nan"), TypeTag.NUMBER),
            ("s", TypeTag.STRING),
            ({"a": 1}, TypeTag.OBJECT),
            (len, TypeTag.FUNCTION),
            (SimpleNamespace(a=1), TypeTag.OBJECT),
        ],
    )
    def test_tags(self, value, expected):
        assert get_type(value) is expected

    def test_tags_compare_as_strings(self):
        """Test that tags can be compared to plain strings."""
        assert get_type([]) == "array"
        assert get_type(None).value == "null"


class TestIsType:
    """Test is_type."""

    def test_matches_exact_tag(self):
        assert is_type("x", "string")
        assert is_type(1, TypeTag.NUMBER)
        assert not is_type(True, "number")
        assert is_type(None, "null")

    def test_object_includes_object_like_kinds(self):
        """Test that dates, regexes and errors also count as objects."""
        assert is_type({}, "object")
        assert is_type(date.today(), "object")
        assert is_type(re.compile("x"), "object")
        assert is_type(KeyError(), "object")

    def test_object_excludes_arrays_and_null(self):
        assert not is_type([], "object")
        assert not is_type(None, "object")
        assert not is_type("s", "object")

    def test_unknown_tag_raises(self):
        with pytest.raises(ValueError):
            is_type(1, "integer")


class TestAssertType:
    """Test assert_type."""

    def test_returns_value(self):
        value = {"a": 1}
        assert assert_type(value, "object") is value

    def test_default_message(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            assert_type("3", "number")
        assert str(exc_info.value) == "Expected number but got string"
        assert exc_info.value.expected == "number"
        assert exc_info.value.actual == "string"
        assert exc_info.value.context == {"expected": "number", "actual": "string"}

    def test_custom_message(self):
        with pytest.raises(TypeMismatchError, match="port must be numeric"):
            assert_type("80", "number", "port must be numeric")

    def test_is_type_error_and_validation_error(self):
        """Test the raised error can be caught either way."""
        with pytest.raises(TypeError):
            assert_type(None, "array")
        with pytest.raises(ValidationError):
            assert_type(None, "array")


class TestProperties:
    """Test has_property and has_properties."""

    def test_mapping_keys(self):
        assert has_property({"a": 1}, "a")
        assert not has_property({"a": 1}, "b")

    def test_object_attributes(self):
        obj = SimpleNamespace(name="x")
        assert has_property(obj, "name")
        assert not has_property(obj, "missing")

    @pytest.mark.parametrize("value", [None, "abc", 5, True])
    def test_null_and_primitives_have_no_properties(self, value):
        assert not has_property(value, "upper")
        assert not has_properties(value, [])

    def test_bytes_are_objects_with_attributes(self):
        """Test that bytes get the object tag and expose their attributes."""
        assert get_type(b"x") is TypeTag.OBJECT
        assert has_property(b"x", "decode")
        assert has_properties(b"x", [])

    def test_has_properties(self):
        data = {"a": 1, "b": 2}
        assert has_properties(data, ["a", "b"])
        assert not has_properties(data, ["a", "c"])
        assert has_properties(data, [])


class TestIsInstanceOf:
    """Test is_instance_of never raises."""

    def test_valid_class(self):
        assert is_instance_of([], list)
        assert not is_instance_of({}, list)

    def test_tuple_of_classes(self):
        assert is_instance_of(1, (str, int))

    @pytest.mark.parametrize("bad_cls", [None, "list", 42, [list]])
    def test_invalid_class_returns_false(self, bad_cls):
        assert is_instance_of([], bad_cls) is False
