"""
Recalculation of the spline vector coefficients so that the resulting
order-r spline passes through the original poles.

The poles are filtered in the discrete Fourier domain::

    tr[0] = 1
    tr[k] = (2 sin(pi k / m))^(2r) * sum_{q=0}^{n-1} (2 n sin(pi (q m + k) / N))^(-2r)

    zre[j] + i zim[j] = sum_k P[k] exp(-2 pi i j k / m)
    V[p] = (1/m) sum_k (zre[k] cos(2 pi k p / m) - zim[k] sin(2 pi k p / m)) / tr[k]

``tr[k]`` is the aliased Fourier symbol of the order-r spline sampled at the
pole nodes, so evaluating the spline on ``V`` reproduces ``P`` there.

Limitation: ``tr[k]`` is not guarded against vanishing.  For m >= 3, n >= 1
and 1 <= k <= m-1 every sine argument lies strictly inside (0, pi), but very
large r can still underflow/overflow the powers; the result then carries
non-finite values rather than raising.
"""

import numpy as np
from numpy.typing import NDArray

from ..libdpspline.logger import get_logger
from .fftw import dft_columns, idft_columns

log = get_logger(__name__)

_dp = np.float64
pi = np.pi
twopi = 2.0 * pi

METHODS = ("direct", "fft")


def denominator(m: int, n: int, r: int) -> NDArray[_dp]:
    """
    Fourier-domain denominator ``tr[0..m-1]``.

    The ``-2r`` power is applied to every inner term before the outer
    ``2r`` factor multiplies the sum; both passes stay in float64.

    Parameters
    ----------
    m : int
        Number of poles.
    n : int
        Number of nodes between poles.
    r : int
        Spline order.

    Returns
    -------
    ndarray
        Real array of length *m* with ``tr[0] == 1``.
    """
    N = n * m
    tr = np.zeros(m, dtype=_dp)
    tr[0] = 1.0

    k = np.arange(1, m, dtype=_dp)[:, None]
    q = np.arange(n, dtype=_dp)[None, :]
    inner = np.power(2.0 * n * np.sin(pi * (q * m + k) / N), -2.0 * r)
    tr[1:] = inner.sum(axis=1)
    tr[1:] *= np.power(2.0 * np.sin(pi * k[:, 0] / m), 2.0 * r)
    return tr


def _spectrum_direct(poles: NDArray[_dp]):
    """Real and imaginary parts of the pole DFT by explicit cos/sin sums."""
    m = poles.shape[0]
    jk = np.outer(np.arange(m), np.arange(m)).astype(_dp)
    zre = np.cos(-twopi * jk / m) @ poles
    zim = np.sin(-twopi * jk / m) @ poles
    return zre, zim


def _synthesis_direct(zre: NDArray[_dp], zim: NDArray[_dp], tr: NDArray[_dp]) -> NDArray[_dp]:
    """Filtered inverse transform by explicit cos/sin sums."""
    m = zre.shape[0]
    kp = np.outer(np.arange(m), np.arange(m)).astype(_dp)
    d = (np.cos(twopi * kp / m) @ (zre / tr[:, None])
         - np.sin(twopi * kp / m) @ (zim / tr[:, None]))
    return d / m


def recalculate_vectors(poles: NDArray[_dp], r: int, n: int,
                        method: str = "direct") -> NDArray[_dp]:
    """
    Vector coefficients whose order-r spline interpolates *poles*.

    Parameters
    ----------
    poles : ndarray
        Pole coordinates, shape ``(m, 2)``.
    r : int
        Spline order (>= 1).
    n : int
        Number of nodes between poles (>= 1).
    method : {"direct", "fft"}
        ``"direct"`` evaluates the trigonometric sums as dense matrices,
        ``"fft"`` goes through :mod:`dpspline.core.fftw`.  Both agree to
        round-off.

    Returns
    -------
    ndarray
        Fresh ``(m, 2)`` array of recalculated vectors.
    """
    if method not in METHODS:
        raise ValueError(f"Unknown recalculation method: {method!r}")

    poles = np.asarray(poles, dtype=_dp)
    m = poles.shape[0]
    tr = denominator(m, n, r)
    log.debug2("recalibration denominator: min=%.3e max=%.3e", tr.min(), tr.max())

    if method == "direct":
        zre, zim = _spectrum_direct(poles)
        return _synthesis_direct(zre, zim, tr)

    Z = dft_columns(poles)
    return idft_columns(Z / tr[:, None])
