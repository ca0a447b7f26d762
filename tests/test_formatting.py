from pytest import mark

from polyinterp.formatting import (
    format_coefficients,
    format_evaluation,
    format_number,
    format_polynomial,
)
from polyinterp.polynomial import interpolate


def test_format_canonical():
    assert format_polynomial([3, -2, 1]) == "f(x) = x^2 - 2x + 3"


def test_format_zero_polynomial():
    assert format_polynomial([0, 0, 0]) == "f(x) = 0"
    assert format_polynomial([]) == "f(x) = 0"
    assert format_polynomial([1e-11, -3e-11]) == "f(x) = 0"


def test_format_unit_coefficients():
    assert format_polynomial([0, 1]) == "f(x) = x"
    assert format_polynomial([0, -1]) == "f(x) = -x"
    assert format_polynomial([0, 0, 0, 1]) == "f(x) = x^3"
    assert format_polynomial([1, 0, -1]) == "f(x) = -x^2 + 1"
    assert format_polynomial([1]) == "f(x) = 1"


def test_format_fractional_coefficients():
    assert (
        format_polynomial([0.5, -1.25, 2.5])
        == "f(x) = 2.500000x^2 - 1.250000x + 0.500000"
    )
    assert format_polynomial([-1 / 3]) == "f(x) = -0.333333"


def test_format_leading_negative():
    assert format_polynomial([4, 0, -2]) == "f(x) = -2x^2 + 4"


def test_format_threshold():
    assert format_number(5e-11) == "0"
    assert format_number(-5e-11) == "0"
    assert format_number(2e-10) == "0.000000"
    assert format_polynomial([1, 5e-11]) == "f(x) = 1"
    assert format_polynomial([1, 2e-10]) == "f(x) = 0.000000x + 1"


@mark.parametrize(
    "value, expected",
    [
        (3, "3.000000"),
        (-2.5, "-2.500000"),
        (1e20, "100000000000000000000.000000"),
        (1.5e-7, "0.000000"),
        (123456.7890123, "123456.789012"),
    ],
)
def test_format_number_fixed_point(value, expected):
    assert format_number(value) == expected


def test_format_number_compact():
    assert format_number(3.0, compact=True) == "3"
    assert format_number(2.5, compact=True) == "2.500000"


def test_format_non_finite_passes_through():
    assert format_number(float("nan")) == "nan"
    assert format_number(float("inf")) == "inf"
    assert format_polynomial([float("nan")]) == "f(x) = nan"
    assert format_polynomial([0, float("-inf")]) == "f(x) = -infx"


def test_format_custom_precision():
    assert format_polynomial([0.5, 2], decimal_places=2) == "f(x) = 2x + 0.50"
    assert format_polynomial([0.001, 1], tolerance=0.01) == "f(x) = x"


def test_format_coefficients():
    assert format_coefficients([3, -2, 1e-12]) == [
        (2, "0"),
        (1, "-2.000000"),
        (0, "3.000000"),
    ]


def test_format_evaluation():
    assert format_evaluation(3, 10.0) == "f(3) = 10.000000"
    assert format_evaluation(-0.5, 1e-12) == "f(-0.5) = 0"


def test_format_interpolated_coefficients():
    # Non-integer samples leave rounding noise in whole-number coefficients
    points = [(x, x * x - 2 * x + 3) for x in (0.1, 0.7, 1.3)]
    assert format_polynomial(interpolate(points)) == "f(x) = x^2 - 2x + 3"

    points = [(x, 0.5 * x ** 3 - x + 4) for x in (-1.3, 0.2, 0.9, 2.6)]
    assert format_polynomial(interpolate(points)) == "f(x) = 0.500000x^3 - x + 4"


def test_format_number_compact_within_tolerance():
    assert format_number(2.9999999999999, compact=True) == "3"
    assert format_number(-7.00000000000002, compact=True) == "-7"
    assert format_number(3.0000001, compact=True) == "3.000000"
    assert format_number(float("inf"), compact=True) == "inf"


def test_format_evaluation_argument_is_fixed_point():
    assert format_evaluation(1234567, 0.0) == "f(1234567) = 0"
    assert format_evaluation(1e-7, 1.0) == "f(0.0000001) = 1.000000"
    assert format_evaluation(1234.5678901, 2.0) == "f(1234.5678901) = 2.000000"
    assert format_evaluation(float("nan"), 1.0) == "f(nan) = 1.000000"
