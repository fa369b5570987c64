"""
Tests for vector2 — Vector2 value arithmetic and pole-array conversion.
"""
import numpy as np
import pytest

from dpspline.libdpspline.errors import InvalidPoleShapeError, NullInputError
from dpspline.libdpspline.vector2 import Vector2, as_pole_array, to_vectors

ATOL = 1e-12


# ===================================================================
# Vector2 arithmetic
# ===================================================================

class TestVector2:
    def test_default_is_zero(self):
        assert Vector2() == Vector2(0.0, 0.0)

    def test_add_sub(self):
        a = Vector2(1.0, 2.0)
        b = Vector2(3.0, -4.0)
        assert a + b == Vector2(4.0, -2.0)
        assert a - b == Vector2(-2.0, 6.0)

    def test_negate(self):
        assert -Vector2(1.5, -2.5) == Vector2(-1.5, 2.5)

    def test_scalar_multiply_both_sides(self):
        v = Vector2(1.0, -2.0)
        assert v * 3 == Vector2(3.0, -6.0)
        assert 3 * v == Vector2(3.0, -6.0)

    def test_scalar_divide(self):
        assert Vector2(3.0, 9.0) / 3.0 == Vector2(1.0, 3.0)

    def test_unpacking(self):
        x, y = Vector2(7.0, 8.0)
        assert (x, y) == (7.0, 8.0)

    def test_immutable(self):
        v = Vector2(1.0, 2.0)
        with pytest.raises(AttributeError):
            v.x = 5.0

    def test_vector_times_vector_unsupported(self):
        with pytest.raises(TypeError):
            Vector2(1.0, 1.0) * Vector2(2.0, 2.0)

    def test_add_non_vector_unsupported(self):
        with pytest.raises(TypeError):
            Vector2(1.0, 1.0) + 1.0


# ===================================================================
# as_pole_array / to_vectors
# ===================================================================

class TestAsPoleArray:
    def test_from_vectors(self):
        arr = as_pole_array([Vector2(0, 0), Vector2(1, 2), Vector2(3, 4)])
        np.testing.assert_array_equal(arr, [[0, 0], [1, 2], [3, 4]])
        assert arr.dtype == np.float64

    def test_from_tuples(self):
        arr = as_pole_array([(0, 0), (1, 2)])
        assert arr.shape == (2, 2)

    def test_array_is_copied(self):
        src = np.array([[0.0, 0.0], [1.0, 1.0], [2.0, 0.0]])
        arr = as_pole_array(src)
        arr[0, 0] = 99.0
        assert src[0, 0] == 0.0

    def test_empty_gives_zero_rows(self):
        assert as_pole_array([]).shape == (0, 2)

    def test_none_raises(self):
        with pytest.raises(NullInputError):
            as_pole_array(None)

    def test_wrong_width_raises(self):
        with pytest.raises(InvalidPoleShapeError):
            as_pole_array([(0, 0, 0), (1, 1, 1), (2, 2, 2)])

    def test_ragged_raises(self):
        with pytest.raises(InvalidPoleShapeError):
            as_pole_array([(0, 0), (1,), (2, 2)])

    def test_non_iterable_raises(self):
        with pytest.raises(InvalidPoleShapeError):
            as_pole_array(5)

    def test_to_vectors(self):
        vs = to_vectors(np.array([[1.0, 2.0], [3.0, 4.0]]))
        assert vs == [Vector2(1.0, 2.0), Vector2(3.0, 4.0)]
