"""
Recursive evaluation of the discrete N-periodic spline with vector
coefficients.

Order 1 is the periodic convolution of the vector coefficients, sitting at
nodes ``p*n`` of an N-length working array, with the Q-spline kernel::

    S1[j] = sum_{p=0}^{m-1} V[p] * q[(j - p n) mod N]

Every further order convolves the previous one with the same kernel and
divides by n (the kernel sums to n over one period, so the scale is kept)::

    Sv[j] = (1/n) sum_{k=0}^{N-1} q[k] * S(v-1)[(j - k) mod N]

Only two buffers are alive at any time (previous and current order); each
order is a fresh allocation, so reads never see values written in the same
pass.
"""

import numpy as np
from numba import njit, prange
from numpy.typing import NDArray

from ..libdpspline.logger import get_logger
from ..libdpspline.nrutils import _periodic
from .fftw import circular_convolve

log = get_logger(__name__)

_dp = np.float64

METHODS = ("direct", "fft")


def place_poles(vectors: NDArray[_dp], n: int) -> NDArray[_dp]:
    """
    Working vector array of length ``N = n*m``.

    Vector p is copied to index ``p*n``; every other slot is the zero vector.

    Parameters
    ----------
    vectors : ndarray
        Vector coefficients, shape ``(m, 2)``.
    n : int
        Number of nodes between poles.

    Returns
    -------
    ndarray
        Fresh ``(N, 2)`` float64 array.
    """
    vectors = np.asarray(vectors, dtype=_dp)
    m = vectors.shape[0]
    working = np.zeros((n * m, 2), dtype=_dp)
    working[::n] = vectors
    return working


# -----------------------------------------------------------------------------
# Convolution kernels (Numba JIT, one output index per prange iteration)
# -----------------------------------------------------------------------------

@njit(parallel=True, cache=True)
def _order_one_core(working, kernel, n):
    N = working.shape[0]
    m = N // n
    out = np.zeros((N, 2))
    for j in prange(N):
        sx = 0.0
        sy = 0.0
        for p in range(m):
            w = kernel[_periodic(j - p * n, N)]
            sx += working[p * n, 0] * w
            sy += working[p * n, 1] * w
        out[j, 0] = sx
        out[j, 1] = sy
    return out


@njit(parallel=True, cache=True)
def _raise_order_core(prev, kernel, n):
    N = prev.shape[0]
    out = np.zeros((N, 2))
    for j in prange(N):
        sx = 0.0
        sy = 0.0
        for k in range(N):
            idx = _periodic(j - k, N)
            sx += kernel[k] * prev[idx, 0]
            sy += kernel[k] * prev[idx, 1]
        out[j, 0] = sx / n
        out[j, 1] = sy / n
    return out


def _check_method(method: str) -> None:
    if method not in METHODS:
        raise ValueError(f"Unknown evaluation method: {method!r}")


def order_one(working: NDArray[_dp], kernel: NDArray[_dp], n: int,
              method: str = "direct") -> NDArray[_dp]:
    """
    First-order spline nodes from the working vector array.

    Parameters
    ----------
    working : ndarray
        ``(N, 2)`` array from :func:`place_poles`.
    kernel : ndarray
        Q-spline kernel of length N.
    n : int
        Number of nodes between poles.
    method : {"direct", "fft"}
        Sparse loop over the populated slots, or FFT circular convolution.

    Returns
    -------
    ndarray
        Fresh ``(N, 2)`` array.
    """
    _check_method(method)
    working = np.ascontiguousarray(working, dtype=_dp)
    kernel = np.ascontiguousarray(kernel, dtype=_dp)
    if working.shape[0] != kernel.shape[0]:
        raise ValueError("Bad sizes in order_one")
    if method == "fft":
        return circular_convolve(kernel, working)
    return _order_one_core(working, kernel, n)


def raise_order(prev: NDArray[_dp], kernel: NDArray[_dp], n: int,
                method: str = "direct") -> NDArray[_dp]:
    """
    Next-order spline nodes: periodic convolution with the kernel, divided by n.

    Parameters
    ----------
    prev : ndarray
        ``(N, 2)`` nodes of order v-1.
    kernel : ndarray
        Q-spline kernel of length N.
    n : int
        Number of nodes between poles.
    method : {"direct", "fft"}
        Dense O(N^2) loop or FFT circular convolution.

    Returns
    -------
    ndarray
        Fresh ``(N, 2)`` array of order v.
    """
    _check_method(method)
    prev = np.ascontiguousarray(prev, dtype=_dp)
    kernel = np.ascontiguousarray(kernel, dtype=_dp)
    if prev.shape[0] != kernel.shape[0]:
        raise ValueError("Bad sizes in raise_order")
    if method == "fft":
        return circular_convolve(kernel, prev) / n
    return _raise_order_core(prev, kernel, n)


def calculate_sspline(vectors: NDArray[_dp], kernel: NDArray[_dp], r: int, n: int,
                      method: str = "direct") -> NDArray[_dp]:
    """
    Nodes of the order-r spline with vector coefficients *vectors*.

    Parameters
    ----------
    vectors : ndarray
        ``(m, 2)`` vector coefficients (poles or recalculated vectors).
    kernel : ndarray
        Q-spline kernel of length ``n*m``.
    r : int
        Spline order (>= 1).
    n : int
        Number of nodes between poles.
    method : {"direct", "fft"}
        Convolution method for every order.

    Returns
    -------
    ndarray
        ``(n*m, 2)`` nodes; index 0 belongs to the first pole.
    """
    _check_method(method)
    working = place_poles(vectors, n)
    current = order_one(working, kernel, n, method)
    for v in range(2, r + 1):
        previous = current
        current = raise_order(previous, kernel, n, method)
        log.debug3("order %d of %d done", v, r)
    return current
