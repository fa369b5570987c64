"""
dpspline exceptions.

Caller errors are detected eagerly by :func:`dpspline.core.dpspline.calculate`
before any work is done.  A missing pole collection belongs to the
``TypeError`` family, every out-of-range value to the ``ValueError`` family,
so callers can tell the two kinds apart with plain ``except`` clauses.

Numerical trouble (a vanishing recalibration denominator) is never raised;
it shows up as non-finite node coordinates.
"""


class DpSplineError(Exception):
    """Base exception class for all dpspline errors"""

    def __init__(self, message: str, error_code: str = "DPS_GENERAL"):
        super().__init__(message)
        self.error_code = error_code
        self.message = message

    def __str__(self):
        return f"[{self.error_code}] {self.message}"


class NullInputError(DpSplineError, TypeError):
    """Raised when the pole sequence is missing altogether"""

    def __init__(self, argument: str = "poles"):
        self.argument = argument
        super().__init__(f"'{argument}' must not be None", "DPS_NULL_INPUT")


class InvalidArgumentError(DpSplineError, ValueError):
    """Raised when an argument is present but outside its valid range"""

    def __init__(self, message: str, value=None, error_code: str = "DPS_INVALID"):
        self.value = value
        if value is not None:
            message = f"{message} (got {value!r})"
        super().__init__(message, error_code)


class InvalidPoleCountError(InvalidArgumentError):
    """Raised when fewer than three poles are given"""

    def __init__(self, count: int):
        super().__init__("number of poles must be > 2", count, "DPS_POLE_COUNT")


class InvalidOrderError(InvalidArgumentError):
    """Raised when the spline order is not positive"""

    def __init__(self, r):
        super().__init__("spline order r must be > 0", r, "DPS_ORDER")


class InvalidSubdivisionError(InvalidArgumentError):
    """Raised when the number of nodes between poles is below one"""

    def __init__(self, n):
        super().__init__("number of nodes between poles n must be >= 1", n, "DPS_SUBDIVISION")


class InvalidPoleShapeError(InvalidArgumentError):
    """Raised when poles cannot be read as a sequence of 2-D points"""

    def __init__(self, shape):
        super().__init__("poles must be an (m, 2) collection of points", shape, "DPS_POLE_SHAPE")


class InvalidMethodError(InvalidArgumentError):
    """Raised for an unknown evaluation method"""

    def __init__(self, method, allowed=("direct", "fft")):
        self.allowed = tuple(allowed)
        super().__init__(f"method must be one of {self.allowed}", method, "DPS_METHOD")
