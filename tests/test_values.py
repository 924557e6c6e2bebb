"""Tests for workflow value semantics."""

import math

import pytest
from pydantic import ValidationError

from flowtree._values import (
    compare_values,
    is_number,
    is_truthy,
    is_value,
    render_value,
    validate_arguments,
    validate_value,
    values_equal,
)


class TestIsValue:
    """Tests for is_value and is_number."""

    @pytest.mark.parametrize("obj", ["", "text", True, False, 0, 3, 1.5])
    def test_primitives_are_values(self, obj: object) -> None:
        """Strings, booleans and finite numbers should be values."""
        assert is_value(obj)

    @pytest.mark.parametrize("obj", [None, [], {}, b"bytes", object()])
    def test_other_objects_are_not_values(self, obj: object) -> None:
        """Other objects should not be values."""
        assert not is_value(obj)

    def test_bool_is_not_a_number(self) -> None:
        """Booleans should not count as numbers."""
        assert is_number(1)
        assert is_number(1.5)
        assert not is_number(True)
        assert not is_number("1")


class TestValidation:
    """Tests for strict value and argument validation."""

    def test_validate_value_keeps_type(self) -> None:
        """Validation should not coerce between kinds."""
        assert validate_value(True) is True
        assert validate_value(1) == 1
        assert type(validate_value(1)) is int
        assert validate_value("") == ""

    def test_validate_value_rejects_non_values(self) -> None:
        """Validation should reject non-values."""
        with pytest.raises(ValidationError):
            validate_value([1, 2])

    def test_validate_arguments_returns_copy(self) -> None:
        """Validated arguments should be a new dict."""
        arguments = {"a": 1, "b": "two"}
        validated = validate_arguments(arguments)
        assert validated == arguments
        validated["c"] = 3
        assert "c" not in arguments

    def test_validate_arguments_rejects_non_value(self) -> None:
        """Arguments should reject non-value entries."""
        with pytest.raises(ValidationError):
            validate_arguments({"a": None})

    def test_validate_arguments_rejects_non_string_key(self) -> None:
        """Arguments should reject non-string names."""
        with pytest.raises(ValidationError):
            validate_arguments({1: "a"})

    @pytest.mark.parametrize("number", [math.nan, math.inf, -math.inf])
    def test_non_finite_numbers_rejected(self, number: float) -> None:
        """NaN and infinities should fail validation."""
        with pytest.raises(ValidationError):
            validate_value(number)
        with pytest.raises(ValidationError):
            validate_arguments({"a": number})

    def test_non_finite_numbers_are_not_values(self) -> None:
        """NaN and infinities should not be values."""
        assert not is_value(math.nan)
        assert not is_value(math.inf)
        assert is_value(1e308)


class TestTruthiness:
    """Tests for is_truthy."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, True),
            (False, False),
            (1, True),
            (0, False),
            (0.0, False),
            (-2.5, True),
            (math.nan, False),
            (math.inf, True),
            ("x", True),
            ("", False),
            ({"status": 200}, True),
            ([], False),
        ],
    )
    def test_truthiness(self, value: object, expected: bool) -> None:  # noqa: FBT001
        """Truthiness should follow the value kind."""
        assert is_truthy(value) is expected


class TestTotalOrder:
    """Tests for compare_values and values_equal."""

    def test_within_kinds(self) -> None:
        """Values of one kind should use their natural order."""
        assert compare_values(1, 2) < 0
        assert compare_values(2.5, 2) > 0
        assert compare_values("a", "b") < 0
        assert compare_values(False, True) < 0  # noqa: FBT003
        assert compare_values(1, 1.0) == 0

    def test_across_kinds(self) -> None:
        """Kinds should order as bool, number, string."""
        # bool < number < string
        assert compare_values(True, 0) < 0  # noqa: FBT003
        assert compare_values(100, "0") < 0
        assert compare_values("", False) > 0  # noqa: FBT003

    def test_compare_rejects_non_values(self) -> None:
        """Comparing a non-value should raise TypeError."""
        with pytest.raises(TypeError):
            compare_values(None, 1)  # type: ignore[arg-type]

    def test_compare_rejects_nan(self) -> None:
        """Comparing NaN should raise TypeError."""
        with pytest.raises(TypeError, match="Not a workflow value"):
            compare_values(math.nan, 1)

    def test_nan_is_never_equal(self) -> None:
        """NaN should not equal anything, itself included."""
        assert not values_equal(math.nan, math.nan)
        assert not values_equal(math.nan, 1)

    def test_equality_requires_same_kind(self) -> None:
        """Values of different kinds should never be equal."""
        assert values_equal(1, 1.0)
        assert values_equal("a", "a")
        assert not values_equal(1, True)  # noqa: FBT003
        assert not values_equal(0, False)  # noqa: FBT003
        assert not values_equal(1, "1")

    def test_equality_of_raw_objects(self) -> None:
        """Raw objects should use Python equality."""
        assert values_equal({"a": 1}, {"a": 1})
        assert not values_equal({"a": 1}, "a")


class TestRenderValue:
    """Tests for render_value."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("text", "text"),
            (True, "true"),
            (False, "false"),
            (3, "3"),
            (3.0, "3"),
            (2.5, "2.5"),
            (-7.0, "-7"),
            (1e15, "1000000000000000"),
            (1e16, "1e+16"),
            (1e300, "1e+300"),
        ],
    )
    def test_render(self, value: object, expected: str) -> None:
        """Values should render as text."""
        assert render_value(value) == expected  # type: ignore[arg-type]
