"""
Tests for kernel — the first-order periodic Q-spline coefficients.

Tolerances:
    exact piecewise-linear values : atol=1e-14
"""
import numpy as np
import pytest

from dpspline.core.kernel import qspline_kernel

ATOL = 1e-14


class TestQSplineKernel:
    @pytest.mark.parametrize("n, m", [(1, 3), (2, 3), (4, 4), (5, 7), (10, 12)])
    def test_length(self, n, m):
        assert qspline_kernel(n, m).shape == (n * m,)

    @pytest.mark.parametrize("n, m", [(1, 3), (3, 4), (5, 6), (8, 5)])
    def test_peak_and_middle(self, n, m):
        q = qspline_kernel(n, m)
        N = n * m
        assert np.isclose(q[0], 1.0, atol=ATOL)
        assert q[N // 2] == 0.0

    @pytest.mark.parametrize("n, m", [(2, 3), (4, 4), (7, 5)])
    def test_symmetric_ramps(self, n, m):
        q = qspline_kernel(n, m)
        N = n * m
        for j in range(1, n):
            assert np.isclose(q[j], q[N - j], atol=ATOL)

    def test_explicit_values(self):
        q = qspline_kernel(4, 3)
        expected = [1.0, 0.75, 0.5, 0.25, 0, 0, 0, 0, 0, 0.25, 0.5, 0.75]
        np.testing.assert_allclose(q, expected, atol=ATOL)

    @pytest.mark.parametrize("n, m", [(1, 3), (3, 5), (6, 4)])
    def test_sums_to_n(self, n, m):
        assert np.isclose(qspline_kernel(n, m).sum(), n, atol=1e-12)

    def test_no_subdivision_is_delta(self):
        q = qspline_kernel(1, 5)
        np.testing.assert_array_equal(q, [1.0, 0.0, 0.0, 0.0, 0.0])

    def test_values_in_unit_interval(self):
        q = qspline_kernel(6, 7)
        assert np.all(q >= 0.0) and np.all(q <= 1.0)
