"""
Two-dimensional vector value type and pole-array conversions.

The numerical core works on ``(count, 2)`` float64 arrays; :class:`Vector2`
is the value type offered to callers that prefer points as objects.
Conversions always copy, so no array handed to the core aliases caller data.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from .errors import InvalidPoleShapeError, NullInputError

_dp = np.float64


@dataclass(frozen=True, slots=True)
class Vector2:
    """Immutable 2-D vector with value semantics."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __mul__(self, d: float) -> "Vector2":
        if isinstance(d, Vector2):
            return NotImplemented
        return Vector2(self.x * d, self.y * d)

    __rmul__ = __mul__

    def __truediv__(self, d: float) -> "Vector2":
        if isinstance(d, Vector2):
            return NotImplemented
        return Vector2(self.x / d, self.y / d)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def to_tuple(self) -> tuple:
        return (self.x, self.y)


PointsLike = Union[Sequence[Vector2], Sequence[Sequence[float]], NDArray[_dp]]


def as_pole_array(poles: PointsLike) -> NDArray[_dp]:
    """
    Convert a collection of points into a fresh ``(m, 2)`` float64 array.

    Parameters
    ----------
    poles : sequence of Vector2, sequence of (x, y) pairs, or ndarray
        Control points of the closed polygon.

    Returns
    -------
    ndarray
        Copy of the points, shape ``(m, 2)``.  An empty input gives ``(0, 2)``.

    Raises
    ------
    NullInputError
        If *poles* is None.
    InvalidPoleShapeError
        If the input cannot be read as rows of two real coordinates.
    """
    if poles is None:
        raise NullInputError("poles")

    try:
        if isinstance(poles, np.ndarray):
            rows = poles
        else:
            rows = [p.to_tuple() if isinstance(p, Vector2) else p for p in poles]
        arr = np.array(rows, dtype=_dp)
    except (TypeError, ValueError) as exc:
        raise InvalidPoleShapeError(type(poles).__name__) from exc

    if arr.size == 0:
        return np.zeros((0, 2), dtype=_dp)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidPoleShapeError(arr.shape)
    return arr


def to_vectors(arr: Iterable) -> List[Vector2]:
    """Convert ``(count, 2)`` rows back into a list of :class:`Vector2`."""
    return [Vector2(float(x), float(y)) for x, y in np.asarray(arr, dtype=_dp)]
