"""Lagrange interpolation of real-valued sample points into monomial
coefficients, and evaluation of the resulting coefficient vectors.

A coefficient vector ``c`` is a list of floats where ``c[k]`` is the
coefficient of ``x^k``. Interpolating ``n`` points always yields exactly
``n`` coefficients; trailing zeros are kept and the degree is ``n - 1``.
"""

import logging
from collections.abc import Sequence
from numbers import Real

from polyinterp.config import MIN_POINTS, ZERO_TOLERANCE
from polyinterp.exceptions import CollinearOrDuplicateInputError, InsufficientPointsError
from polyinterp.formatting import format_polynomial
from polyinterp.points import as_points
from polyinterp.utils import TypeCheck

logger = logging.getLogger(__name__)


def _check_enough_points(points):
    if len(points) < MIN_POINTS:
        logger.debug("Refusing to interpolate %d point(s)", len(points))
        raise InsufficientPointsError(MIN_POINTS, len(points))


def _check_denominator(index, denominator, tolerance):
    if abs(denominator) < tolerance:
        logger.warning(
            "Degenerate point set: denominator %r for point %d", denominator, index
        )
        raise CollinearOrDuplicateInputError(index, denominator)


@TypeCheck()
def interpolate(points: Sequence, tolerance: Real = ZERO_TOLERANCE) -> list:
    """Returns the coefficients ``[c0, c1, ..., c(n-1)]`` of the unique
    polynomial of degree ``n - 1`` passing through the ``n`` given points.

    Each Lagrange basis polynomial ``prod_{j != i} (x - x_j)`` is built up
    in place, one factor at a time, then scaled by
    ``y_i / prod_{j != i} (x_i - x_j)`` and added into the result.

    Complexity: O(n^2) time, O(n) extra space.

    raises:
        InsufficientPointsError: fewer than 2 points.
        CollinearOrDuplicateInputError: two x-values coincide (a basis
            denominator is smaller than ``tolerance`` in magnitude).
    """
    points = as_points(points)
    _check_enough_points(points)

    n = len(points)
    coeffs = [0.0] * n
    for i, (x_i, y_i) in enumerate(points):
        # basis holds x^(n-1) * prod(x - x_j) / x^m after m factors, so the
        # constant 1 starts in the top slot and each factor shifts it down.
        basis = [0.0] * n
        basis[n - 1] = 1.0
        denominator = 1.0

        for j, (x_j, _) in enumerate(points):
            if i == j:
                continue
            denominator *= x_i - x_j
            # Ascending k so basis[k + 1] still holds the previous factor's value
            for k in range(n - 1):
                basis[k] += basis[k + 1] * -x_j

        _check_denominator(i, denominator, tolerance)

        for k in range(n):
            coeffs[k] += y_i * basis[k] / denominator

    logger.debug("Interpolated %d points into a degree %d polynomial", n, n - 1)
    return coeffs


@TypeCheck()
def interpolate_at(points: Sequence, x: Real, tolerance: Real = ZERO_TOLERANCE) -> float:
    """Evaluates the interpolating polynomial of ``points`` at ``x`` directly
    from the Lagrange form, without computing coefficients.
    """
    points = as_points(points)
    _check_enough_points(points)

    result = 0.0
    for i, (x_i, y_i) in enumerate(points):
        numerator = 1.0
        denominator = 1.0
        for j, (x_j, _) in enumerate(points):
            if i == j:
                continue
            numerator *= x - x_j
            denominator *= x_i - x_j
        _check_denominator(i, denominator, tolerance)
        result += y_i * numerator / denominator
    return result


@TypeCheck()
def evaluate(coefficients: Sequence, x: Real) -> float:
    """Evaluate ``sum(c[k] * x^k)`` using Horner's method.
    Non-finite coefficients propagate into the result.
    """
    result = 0.0
    for coeff in reversed(coefficients):
        result = result * x + coeff
    return float(result)


class Polynomial(Sequence):
    """Immutable polynomial over the reals. coeffs[0] = constant term.

    Unlike a reduced representation, trailing zero coefficients are kept, so
    ``degree()`` of an interpolated polynomial is always ``len(points) - 1``.
    """

    __slots__ = ("coeffs",)

    def __init__(self, coeffs):
        self.coeffs = tuple(float(c) for c in coeffs)

    @classmethod
    def interpolate(cls, points, tolerance=ZERO_TOLERANCE):
        return cls(interpolate(points, tolerance))

    def __call__(self, x):
        return evaluate(self.coeffs, x)

    def __getitem__(self, k):
        return self.coeffs[k]

    def __len__(self):
        return len(self.coeffs)

    def __iter__(self):
        return iter(self.coeffs)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.coeffs == other.coeffs

    def __hash__(self):
        return hash(self.coeffs)

    def __repr__(self):
        return f"Polynomial({list(self.coeffs)!r})"

    def __str__(self):
        return format_polynomial(self.coeffs)

    def degree(self):
        return len(self.coeffs) - 1

    def is_zero(self, tolerance=ZERO_TOLERANCE):
        return all(abs(c) < tolerance for c in self.coeffs)
