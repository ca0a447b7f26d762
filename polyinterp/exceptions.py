class PolyInterpError(Exception):
    """Base exception class."""


class ConfigurationError(PolyInterpError):
    """Raise for configuration errors."""


class InvalidPointError(PolyInterpError, ValueError):
    """Raised when an input record cannot be read as an (x, y) point."""


class InsufficientPointsError(PolyInterpError):
    """Raised when too few points are supplied to determine a polynomial."""

    def __init__(self, required, supplied):
        self.required = required
        self.supplied = supplied
        if supplied == 0:
            message = f"Add at least {required} data points to compute the polynomial."
        else:
            message = (
                f"Need {self.missing} more data point(s) "
                "for polynomial interpolation."
            )
        super().__init__(message)

    @property
    def missing(self):
        return max(self.required - self.supplied, 0)


class CollinearOrDuplicateInputError(PolyInterpError):
    """Raised when two x-values coincide, making the system singular."""

    def __init__(self, index, denominator):
        self.index = index
        self.denominator = denominator
        super().__init__(
            f"Points are degenerate: basis denominator for point {index} "
            f"is {denominator!r}, x-values must be pairwise distinct."
        )
