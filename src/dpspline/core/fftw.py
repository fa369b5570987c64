# fftw.py
# FFT plumbing for the periodic spline: column-wise transforms of
# (count, 2) vector arrays and circular convolution against a real kernel.
#
# Design goals:
# - Default to SciPy FFT; optional pyFFTW if available
# - Keep arrays float64/complex128 and Fortran-contiguous (`order='F'`) so the
#   x and y columns are each contiguous along the transform axis
# - In-place semantics for fft_1D/ifft_1D: compute into a scratch and assign
#   back to the provided array
#
from __future__ import annotations

import os

import numpy as np
import scipy.fft as _sfft
from numpy.typing import NDArray

try:  # optional pyFFTW acceleration
    import pyfftw  # type: ignore
    import pyfftw.interfaces.numpy_fft as _pfft  # type: ignore
    _HAS_PYFFTW = True
    pyfftw.interfaces.cache.enable()
    _FFTW_THREADS = int(os.environ.get('OMP_NUM_THREADS', os.cpu_count() or 1))
except ImportError:
    _HAS_PYFFTW = False
    _FFTW_THREADS = 1

_dp = np.float64
_dc = np.complex128

__all__ = [
    "fft_1D", "ifft_1D",
    "dft_columns", "idft_columns",
    "circular_convolve",
]


# --------------------------------------------------------------------------------------
# Utility helpers
# --------------------------------------------------------------------------------------

def _asF(a: NDArray, dtype) -> NDArray:
    """Return Fortran-contiguous view/copy of `a` with dtype, no-copy if possible."""
    b = np.asarray(a, dtype=dtype, order='F')
    if not b.flags.f_contiguous:
        b = np.asfortranarray(b, dtype=dtype)
    return b


def _fft1(a: NDArray[_dc], inverse: bool = False) -> NDArray[_dc]:
    """Transform along axis 0; the inverse is normalised by the length."""
    if _HAS_PYFFTW:
        fn = _pfft.ifft if inverse else _pfft.fft
        out = fn(a, axis=0, threads=_FFTW_THREADS)
    else:
        out = _sfft.ifft(a, axis=0) if inverse else _sfft.fft(a, axis=0)
    return np.asarray(out, dtype=_dc)


# --------------------------------------------------------------------------------------
# 1D FFTs along the node/pole axis (in-place semantics)
# --------------------------------------------------------------------------------------

def fft_1D(Z: NDArray[_dc]) -> None:
    Zf = _asF(Z, _dc)
    out = _fft1(Zf, inverse=False)
    Z[...] = out


def ifft_1D(Z: NDArray[_dc]) -> None:
    Zf = _asF(Z, _dc)
    out = _fft1(Zf, inverse=True)
    Z[...] = out


# --------------------------------------------------------------------------------------
# Out-of-place helpers for real vector arrays
# --------------------------------------------------------------------------------------

def dft_columns(points: NDArray[_dp]) -> NDArray[_dc]:
    """Forward DFT of each coordinate column of a ``(count, 2)`` real array."""
    Z = _asF(points, _dc).copy(order='F')
    fft_1D(Z)
    return Z


def idft_columns(Z: NDArray[_dc]) -> NDArray[_dp]:
    """Inverse DFT (1/count normalised) of each column, real part kept."""
    W = _asF(Z, _dc).copy(order='F')
    ifft_1D(W)
    return np.ascontiguousarray(W.real, dtype=_dp)


def circular_convolve(kernel: NDArray[_dp], X: NDArray[_dp]) -> NDArray[_dp]:
    """
    Periodic convolution ``out[j] = sum_k kernel[k] * X[(j - k) mod N]``.

    Parameters
    ----------
    kernel : ndarray
        Real kernel of length N.
    X : ndarray
        Real ``(N, 2)`` array of vectors.

    Returns
    -------
    ndarray
        Fresh ``(N, 2)`` float64 array.
    """
    if kernel.shape[0] != X.shape[0]:
        raise ValueError("Bad sizes in circular_convolve")
    K = dft_columns(np.asarray(kernel, dtype=_dp)[:, None])
    return idft_columns(K * dft_columns(X))
