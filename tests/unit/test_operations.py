"""Unit tests for arithmetic operations."""

import pytest

from pocketcalc import (
    DIVISION_ERROR,
    ArithmeticOverflowError,
    DivisionByZeroError,
    ErrorEntry,
    InvalidInputError,
    Operator,
    add,
    combine,
    divide,
    format_number,
    multiply,
    subtract,
)


class TestAdd:
    """Tests for the add function."""

    def test_add_positive_numbers(self):
        assert add(2, 3) == 5

    def test_add_mixed_signs(self):
        assert add(-2, 3) == 1

    def test_add_floats(self):
        result = add(0.1, 0.2)
        assert abs(result - 0.3) < 1e-10

    def test_add_rejects_nan(self):
        with pytest.raises(InvalidInputError):
            add(float("nan"), 1)

    def test_add_overflow(self):
        with pytest.raises(ArithmeticOverflowError):
            add(1.7e308, 1.7e308)


class TestSubtract:
    """Tests for the subtract function."""

    def test_subtract_positive_numbers(self):
        assert subtract(9, 4) == 5

    def test_subtract_resulting_negative(self):
        assert subtract(3, 5) == -2


class TestMultiply:
    """Tests for the multiply function."""

    def test_multiply_positive_numbers(self):
        assert multiply(6, 7) == 42

    def test_multiply_by_zero(self):
        assert multiply(1000, 0) == 0

    def test_multiply_overflow(self):
        with pytest.raises(ArithmeticOverflowError):
            multiply(1e308, 10)


class TestDivide:
    """Tests for the divide function."""

    def test_divide_evenly(self):
        assert divide(8, 2) == 4

    def test_divide_with_remainder(self):
        assert divide(7, 2) == 3.5

    def test_divide_by_zero_raises(self):
        with pytest.raises(DivisionByZeroError) as exc_info:
            divide(10, 0)
        assert exc_info.value.numerator == 10


class TestCombine:
    """Tests for the combine dispatcher used by the engine."""

    @pytest.mark.parametrize(
        ("a", "b", "op", "expected"),
        [
            (5, 3, Operator.ADD, 8),
            (9, 4, Operator.SUBTRACT, 5),
            (6, 7, Operator.MULTIPLY, 42),
            (8, 2, Operator.DIVIDE, 4),
            (5, 3, "+", 8),
            (8, 2, "/", 4),
        ],
    )
    def test_four_operations(self, a, b, op, expected):
        assert combine(a, b, op) == expected

    def test_division_by_zero_returns_error_marker(self):
        result = combine(5, 0, Operator.DIVIDE)
        assert result is DIVISION_ERROR
        assert isinstance(result, ErrorEntry)

    def test_overflow_returns_error_entry(self):
        result = combine(1e308, 10, Operator.MULTIPLY)
        assert isinstance(result, ErrorEntry)
        assert result.reason == "overflow"

    def test_unrecognized_operator_returns_second_operand(self):
        assert combine(5, 3, "%") == 3

    def test_unrecognized_operator_is_logged(self, caplog):
        combine(5, 3, "^")
        assert "Unrecognized operator" in caplog.text


class TestFormatNumber:
    """Tests for result formatting."""

    def test_integral_float_drops_fraction(self):
        assert format_number(4.0) == "4"

    def test_negative_zero(self):
        assert format_number(-0.0) == "0"

    def test_negative_integer(self):
        assert format_number(-12.0) == "-12"

    def test_fraction_uses_shortest_repr(self):
        assert format_number(0.1 + 0.2) == "0.30000000000000004"
        assert format_number(2.5) == "2.5"

    def test_large_integer_stays_plain(self):
        assert format_number(1e20) == "100000000000000000000"

    def test_huge_value_uses_exponent(self):
        assert format_number(1e21) == "1e+21"

    def test_rejects_infinity(self):
        with pytest.raises(InvalidInputError):
            format_number(float("inf"))
