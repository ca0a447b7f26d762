"""Recompute-on-demand entry point for an interactive point editor.

The surrounding application owns the point list. On every change it hands
the whole list to :meth:`Solver.solve` (or :meth:`Solver.describe`), which
interpolates from scratch and returns a fresh :class:`Solution`; nothing is
cached between calls.
"""

import logging
from collections import namedtuple
from collections.abc import Sequence
from numbers import Real

from polyinterp.config import InterpolationConfig
from polyinterp.exceptions import CollinearOrDuplicateInputError, InsufficientPointsError
from polyinterp.formatting import format_evaluation, format_polynomial
from polyinterp.points import as_points
from polyinterp.polynomial import Polynomial, evaluate, interpolate
from polyinterp.utils import TypeCheck

logger = logging.getLogger(__name__)


class Solution(
    namedtuple("Solution", ["points", "coefficients", "degree", "expression", "config"])
):
    """Interpolation result for one point set.

    ``coefficients`` is a tuple with ``len(points)`` entries, lowest power
    first, and ``degree`` is always ``len(points) - 1``.
    """

    __slots__ = ()

    @property
    def polynomial(self):
        return Polynomial(self.coefficients)

    def evaluate(self, x):
        return evaluate(self.coefficients, x)

    def format_evaluation(self, x):
        return format_evaluation(
            x, self.evaluate(x), self.config.tolerance, self.config.decimal_places
        )


class Solver(object):
    def __init__(self, config=None):
        if config is None:
            config = InterpolationConfig.default()
        self.config = config

    @TypeCheck()
    def solve(self, records: Sequence) -> Solution:
        """Interpolate ``records`` into a :class:`Solution`.

        raises:
            InsufficientPointsError: fewer than ``config.min_points`` points.
            CollinearOrDuplicateInputError: duplicate x-values.
            InvalidPointError: a record is not a valid point.
        """
        points = as_points(records)
        if len(points) < self.config.min_points:
            logger.debug(
                "Need %d more point(s)", self.config.min_points - len(points)
            )
            raise InsufficientPointsError(self.config.min_points, len(points))

        coefficients = interpolate(points, self.config.tolerance)
        expression = format_polynomial(
            coefficients, self.config.tolerance, self.config.decimal_places
        )
        logger.debug("Solved %d points: %s", len(points), expression)
        return Solution(
            points=points,
            coefficients=tuple(coefficients),
            degree=len(coefficients) - 1,
            expression=expression,
            config=self.config,
        )

    @TypeCheck()
    def describe(self, records: Sequence) -> str:
        """Like :meth:`solve`, but returns a displayable status line instead
        of raising for too few or degenerate points.
        """
        try:
            return self.solve(records).expression
        except (InsufficientPointsError, CollinearOrDuplicateInputError) as e:
            return str(e)

    @TypeCheck()
    def evaluate(self, records: Sequence, x: Real) -> float:
        return self.solve(records).evaluate(x)


def solve(records, config=None):
    """Shorthand for ``Solver(config).solve(records)``."""
    return Solver(config).solve(records)
