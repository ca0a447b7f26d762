"""Human-readable rendering of coefficient vectors, e.g.

    format_polynomial([3, -2, 1]) => "f(x) = x^2 - 2x + 3"
"""

import math
from collections.abc import Sequence
from decimal import Decimal
from numbers import Real

from polyinterp.config import DECIMAL_PLACES, ZERO_TOLERANCE
from polyinterp.utils import TypeCheck


@TypeCheck()
def format_number(
    value: Real,
    tolerance: Real = ZERO_TOLERANCE,
    decimal_places: int = DECIMAL_PLACES,
    compact: bool = False,
) -> str:
    """Values below ``tolerance`` in magnitude print as "0", everything else
    in fixed-point notation with ``decimal_places`` digits.
    With ``compact``, values within ``tolerance`` of a whole number print as
    that whole number.
    """
    if abs(value) < tolerance:
        return "0"
    if compact and math.isfinite(value) and abs(value - round(value)) < tolerance:
        return str(round(value))
    return f"{value:.{decimal_places}f}"


def _format_term(coeff, power, is_first, tolerance, decimal_places):
    if coeff < 0:
        sign = "-" if is_first else " - "
    else:
        sign = "" if is_first else " + "
    magnitude = abs(coeff)

    if power == 0:
        return sign + format_number(magnitude, tolerance, decimal_places, True)

    variable = "x" if power == 1 else f"x^{power}"
    if abs(magnitude - 1) < tolerance:
        return sign + variable
    return sign + format_number(magnitude, tolerance, decimal_places, True) + variable


@TypeCheck()
def format_polynomial(
    coefficients: Sequence,
    tolerance: Real = ZERO_TOLERANCE,
    decimal_places: int = DECIMAL_PLACES,
) -> str:
    """Render ``coefficients`` as ``"f(x) = <terms>"``, highest power first.

    Terms whose coefficient is below ``tolerance`` in magnitude are left out;
    if none remain the result is ``"f(x) = 0"``.
    """
    terms = []
    for power in range(len(coefficients) - 1, -1, -1):
        coeff = coefficients[power]
        if abs(coeff) < tolerance:
            continue
        terms.append(_format_term(coeff, power, not terms, tolerance, decimal_places))

    if not terms:
        return "f(x) = 0"
    return "f(x) = " + "".join(terms)


@TypeCheck()
def format_coefficients(
    coefficients: Sequence,
    tolerance: Real = ZERO_TOLERANCE,
    decimal_places: int = DECIMAL_PLACES,
) -> list:
    """Returns ``(power, text)`` pairs, highest power first, for tabulating
    every coefficient including the zero ones.
    """
    return [
        (power, format_number(coefficients[power], tolerance, decimal_places))
        for power in range(len(coefficients) - 1, -1, -1)
    ]


@TypeCheck()
def format_evaluation(
    x: Real,
    value: Real,
    tolerance: Real = ZERO_TOLERANCE,
    decimal_places: int = DECIMAL_PLACES,
) -> str:
    # e.g. format_evaluation(3, 10.0) => "f(3) = 10.000000"
    text = format_number(value, tolerance, decimal_places)
    return f"f({_format_argument(x)}) = {text}"


def _format_argument(x):
    # Shortest round-tripping digits, never in exponent notation
    x = float(x)
    if not math.isfinite(x):
        return repr(x)
    if x.is_integer():
        return str(int(x))
    return format(Decimal(repr(x)), "f")
