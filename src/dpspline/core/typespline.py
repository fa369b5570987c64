"""
Spline parameter structure and parameter-file I/O.

A parameter file holds one value per line, optionally followed by a
``!`` comment::

    3           ! r : spline order
    5           ! n : nodes between poles
    1           ! include poles (1 = interpolate, 0 = approximate)
    direct      ! method (direct | fft)
"""

import numbers
from dataclasses import dataclass

from ..libdpspline.errors import (
    InvalidMethodError,
    InvalidOrderError,
    InvalidSubdivisionError,
)
from .evaluator import METHODS


# ---------------------------------------------------------------------------
# File I/O helpers
# ---------------------------------------------------------------------------
def GetFileToken(file_handle):
    """Read the first token of the next line of *file_handle*.

    Parameters
    ----------
    file_handle : file-like
        Open text stream.

    Returns
    -------
    str
        The first whitespace-delimited token.

    Raises
    ------
    ValueError
        If the stream is exhausted, the line is empty or comment-only.
    """
    line = file_handle.readline()
    if not line:
        raise ValueError("Unexpected end of file while reading parameter")
    parts = line.split()
    if not parts:
        raise ValueError(f"Empty line in parameter file: {line!r}")
    token = parts[0]
    if token.startswith("!"):
        raise ValueError(f"Comment-only line: {line!r}")
    return token


def GetFileParam(file_handle):
    """Read a single numeric parameter from a file handle."""
    return float(GetFileToken(file_handle))


def _GetFileCount(file_handle):
    """Numeric parameter as int when whole; fractional values are kept for validation."""
    value = GetFileParam(file_handle)
    return int(value) if value.is_integer() else value


# ---------------------------------------------------------------------------
# Argument checks (shared with dpspline.calculate)
# ---------------------------------------------------------------------------
def check_order(r):
    """Raise InvalidOrderError unless *r* is an integer > 0."""
    if not isinstance(r, numbers.Integral) or r <= 0:
        raise InvalidOrderError(r)


def check_subdivision(n):
    """Raise InvalidSubdivisionError unless *n* is an integer >= 1."""
    if not isinstance(n, numbers.Integral) or n < 1:
        raise InvalidSubdivisionError(n)


def check_method(method):
    if method not in METHODS:
        raise InvalidMethodError(method, METHODS)


# ---------------------------------------------------------------------------
# Data structure
# ---------------------------------------------------------------------------
@dataclass
class SplineParams:
    """
    Parameters of one spline evaluation.

    Attributes
    ----------
    r : int
        Spline order.
    n : int
        Number of nodes between poles.
    include_poles : bool
        True makes the spline pass through the poles.
    method : str
        ``"direct"`` (trigonometric sums and JIT loops) or ``"fft"``.
    """
    r: int = 3
    n: int = 5
    include_poles: bool = True
    method: str = "direct"

    def validate(self):
        """Raise the matching :mod:`dpspline.libdpspline.errors` exception."""
        check_order(self.r)
        check_subdivision(self.n)
        check_method(self.method)


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------
def readsplineparams_sub(fh, params):
    """Read spline parameters from an open file handle.

    Parameters
    ----------
    fh : file-like
        Readable text stream.
    params : SplineParams
        Structure to populate (modified in-place).
    """
    params.r = _GetFileCount(fh)
    params.n = _GetFileCount(fh)
    params.include_poles = int(GetFileParam(fh)) != 0
    params.method = GetFileToken(fh).lower()


def ReadSplineParams(filename, params):
    """Read spline parameters from a named file and validate them.

    Raises
    ------
    InvalidOrderError, InvalidSubdivisionError, InvalidMethodError
        If the file holds values :func:`dpspline.core.dpspline.calculate`
        would reject.
    """
    with open(filename, "r") as fh:
        readsplineparams_sub(fh, params)
    params.validate()


def writesplineparams_sub(fh, params):
    """Write spline parameters to an open file handle."""
    fh.write(f"{params.r:<12d} ! r : spline order\n")
    fh.write(f"{params.n:<12d} ! n : nodes between poles\n")
    fh.write(f"{int(params.include_poles):<12d} ! include poles (1 = interpolate, 0 = approximate)\n")
    fh.write(f"{params.method:<12s} ! method (direct | fft)\n")


def WriteSplineParams(filename, params):
    """Write spline parameters to a named file."""
    with open(filename, "w") as fh:
        writesplineparams_sub(fh, params)
