"""
Tests for fftw — column transforms and circular convolution.

Tolerances:
    FFT round-off : rtol=1e-10, atol=1e-10
"""
import numpy as np

from dpspline.core.fftw import (
    circular_convolve,
    dft_columns,
    fft_1D,
    idft_columns,
    ifft_1D,
)

RNG = np.random.default_rng(1)
RTOL = 1e-10
ATOL = 1e-10


def _naive_convolve(kernel, X):
    N = len(kernel)
    out = np.zeros_like(X)
    for j in range(N):
        for k in range(N):
            out[j] += kernel[k] * X[(j - k) % N]
    return out


class TestColumnTransforms:
    def test_dft_matches_numpy(self):
        X = RNG.standard_normal((9, 2))
        np.testing.assert_allclose(dft_columns(X), np.fft.fft(X, axis=0), rtol=RTOL, atol=ATOL)

    def test_inverse_recovers_input(self):
        X = RNG.standard_normal((8, 2))
        np.testing.assert_allclose(idft_columns(dft_columns(X)), X, rtol=RTOL, atol=ATOL)

    def test_in_place_pair(self):
        Z = RNG.standard_normal((6, 2)) + 1j * RNG.standard_normal((6, 2))
        Z0 = Z.copy()
        fft_1D(Z)
        np.testing.assert_allclose(Z, np.fft.fft(Z0, axis=0), rtol=RTOL, atol=ATOL)
        ifft_1D(Z)
        np.testing.assert_allclose(Z, Z0, rtol=RTOL, atol=ATOL)


class TestCircularConvolve:
    def test_matches_naive(self):
        kernel = RNG.standard_normal(11)
        X = RNG.standard_normal((11, 2))
        np.testing.assert_allclose(
            circular_convolve(kernel, X), _naive_convolve(kernel, X), rtol=RTOL, atol=ATOL
        )

    def test_delta_kernel_is_identity(self):
        kernel = np.zeros(7)
        kernel[0] = 1.0
        X = RNG.standard_normal((7, 2))
        np.testing.assert_allclose(circular_convolve(kernel, X), X, rtol=RTOL, atol=ATOL)

    def test_shifted_delta_rolls(self):
        kernel = np.zeros(7)
        kernel[2] = 1.0
        X = RNG.standard_normal((7, 2))
        np.testing.assert_allclose(circular_convolve(kernel, X), np.roll(X, 2, axis=0),
                                   rtol=RTOL, atol=ATOL)
