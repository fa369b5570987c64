"""
Small array utilities shared by the kernel, the recalibrator and the
evaluator.

Periodic index arithmetic wraps modulo the full node count N (never modulo
the pole count or the subdivision count).

Author: dpspline developers
"""

from typing import Union

import numpy as np
from numba import njit
from numpy.typing import NDArray

_dp = np.float64


def periodic_index(j: Union[int, NDArray], N: int) -> Union[int, NDArray]:
    """
    Map any integer index into ``[0, N-1]``.

    Parameters
    ----------
    j : int or ndarray of int
        Index, possibly negative or larger than N.
    N : int
        Period (number of nodes).

    Returns
    -------
    int or ndarray
        The non-negative residue of *j* modulo *N*, so that
        ``periodic_index(j, N) == periodic_index(j + N, N)``.

    Notes
    -----
    Python's ``%`` is a floor modulo: the result carries the sign of the
    divisor, so negative *j* need no special branch.
    """
    if N < 1:
        raise ValueError(f"period N must be >= 1, got {N}")
    if isinstance(j, np.ndarray):
        return np.mod(j, N)
    return int(j) % N


@njit(cache=True)
def _periodic(j, N):
    """JIT-compiled scalar form of :func:`periodic_index` (numba keeps floor-mod)."""
    return j % N


def close_polyline(nodes: NDArray[_dp]) -> NDArray[_dp]:
    """Return *nodes* with the first row appended, closing the polygon."""
    nodes = np.asarray(nodes, dtype=_dp)
    if nodes.shape[0] == 0:
        return nodes.copy()
    return np.concatenate([nodes, nodes[:1]], axis=0)


def is_finite_curve(nodes: NDArray[_dp]) -> bool:
    """True when every node coordinate is finite."""
    return bool(np.all(np.isfinite(nodes)))
