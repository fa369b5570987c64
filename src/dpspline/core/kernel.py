"""
First-order discrete periodic Q-spline coefficients.

The kernel is a periodic triangular pulse of period N = n*m::

    q[j] = (n - j) / n          0     <= j <= n-1
    q[j] = 0                    n     <= j <= N-n
    q[j] = (j - N + n) / n      N-n+1 <= j <= N-1

It equals 1 at j = 0, ramps down to 0 at j = n, and ramps back up towards
1 as j approaches N (which wraps to 0).  Over one period the values sum to n.
"""

import numpy as np
from numpy.typing import NDArray

from ..libdpspline.logger import get_logger

log = get_logger(__name__)

_dp = np.float64


def qspline_kernel(n: int, m: int) -> NDArray[_dp]:
    """
    Coefficients of the first-order periodic Q-spline.

    Parameters
    ----------
    n : int
        Number of nodes between poles (>= 1).
    m : int
        Number of poles.

    Returns
    -------
    ndarray
        Real array of length ``N = n*m``.
    """
    N = n * m
    j = np.arange(N, dtype=_dp)
    q = np.zeros(N, dtype=_dp)
    q[:n] = (n - j[:n]) / n
    q[N - n + 1:] = (j[N - n + 1:] - N + n) / n
    log.debug2("Q-spline kernel: n=%d m=%d N=%d", n, m, N)
    return q
