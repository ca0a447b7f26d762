"""Sample points and conversion from the ``{x, y}`` record boundary."""

import logging
from collections import namedtuple
from collections.abc import Mapping, Sequence
from numbers import Real

from polyinterp.exceptions import InvalidPointError
from polyinterp.utils import TypeCheck

logger = logging.getLogger(__name__)


class Point(namedtuple("Point", ["x", "y"])):
    """An (x, y) sample of the polynomial being interpolated."""

    __slots__ = ()

    @classmethod
    def from_record(cls, record):
        """Build a point from a ``{"x": ..., "y": ...}`` mapping, an (x, y)
        pair, or an existing point.
        """
        if isinstance(record, Point):
            return record

        if isinstance(record, Mapping):
            try:
                x, y = record["x"], record["y"]
            except KeyError as e:
                raise InvalidPointError(
                    f"Point record {record!r} is missing key {e}"
                ) from e
        elif isinstance(record, Sequence) and not isinstance(record, (str, bytes)):
            if len(record) != 2:
                raise InvalidPointError(
                    f"Point {record!r} must have exactly 2 values, got {len(record)}"
                )
            x, y = record
        else:
            raise InvalidPointError(f"Cannot read {record!r} as a point")

        return cls(_to_real("x", x, record), _to_real("y", y, record))

    def to_record(self):
        return {"x": self.x, "y": self.y}


def _to_real(name, value, record):
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidPointError(
            f"{name} of point {record!r} must be a real number, got {value!r}"
        )
    # Non-finite values are kept and show up as nan/inf coefficients
    return float(value)


@TypeCheck()
def as_points(records: Sequence) -> tuple:
    """Convert a sequence of records into a tuple of :class:`Point`, keeping
    their order. No deduplication is done.
    e.g. as_points([{"x": 0, "y": 1}, (1, 2)]) => (Point(0.0, 1.0), Point(1.0, 2.0))
    """
    points = tuple(Point.from_record(record) for record in records)
    logger.debug("Read %d points", len(points))
    return points
