from random import Random

from pytest import fixture


@fixture
def rng():
    return Random(0)


@fixture
def distinct_points(rng):
    def _distinct_points(n):
        """
        Builds ``n`` points with pairwise-distinct integer x-values

        :return: list of ``(x, y)`` tuples
        :rtype: list
        """
        xs = rng.sample(range(-4, 5), n)
        return [(x, rng.uniform(-100, 100)) for x in xs]

    return _distinct_points


@fixture
def quadratic_by_cramer():
    def _quadratic_by_cramer(p1, p2, p3):
        """
        Solves ``a x^2 + b x + c = y`` through three points with Cramer's rule

        :return: coefficient vector ``[c, b, a]``, or None for a singular system
        :rtype: list
        """
        (x1, y1), (x2, y2), (x3, y3) = p1, p2, p3
        det = x1 * x1 * (x2 - x3) + x2 * x2 * (x3 - x1) + x3 * x3 * (x1 - x2)
        if abs(det) < 1e-10:
            return None

        a = (y1 * (x2 - x3) + y2 * (x3 - x1) + y3 * (x1 - x2)) / det
        b = (x1 * x1 * (y2 - y3) + x2 * x2 * (y3 - y1) + x3 * x3 * (y1 - y2)) / det
        c = (
            x1 * x1 * (x2 * y3 - x3 * y2)
            + x2 * x2 * (x3 * y1 - x1 * y3)
            + x3 * x3 * (x1 * y2 - x2 * y1)
        ) / det
        return [c, b, a]

    return _quadratic_by_cramer
