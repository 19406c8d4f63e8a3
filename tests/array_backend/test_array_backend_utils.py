# tests/array_backend/test_array_backend_utils.py
import numpy as np
import pytest

from distcheck.array_backend import utils as U


def test_ensure_vector_scalar_and_1d_and_2d():
    v0 = U._ensure_vector(5)
    assert v0.shape == (1,)
    assert v0.dtype == float
    v1 = U._ensure_vector([1, 2, 3])
    assert v1.shape == (3,)
    # 2D (1,n) and (n,1)
    v2 = U._ensure_vector(np.array([[1, 2, 3]]), length=3)
    assert v2.shape == (3,)
    v3 = U._ensure_vector(np.array([[1], [2]]))
    assert v3.shape == (2,)


def test_ensure_vector_errors():
    with pytest.raises(ValueError):
        U._ensure_vector(np.ones((2, 2)))
    with pytest.raises(ValueError):
        U._ensure_vector(np.ones((1, 1, 2)))
    with pytest.raises(ValueError):
        U._ensure_vector([1.0, 2.0], length=3)


def test_ensure_vector_copy_semantics():
    x = np.array([1.0, 2.0])
    assert U._ensure_vector(x) is not x
    assert U._ensure_vector(x, copy=False) is x


def test_ensure_matrix_shapes_and_checks():
    m = U._ensure_matrix([1.0, 2.0, 3.0])
    assert m.shape == (3, 1)
    m2 = U._ensure_matrix(np.ones((4, 2)), num_rows=4, num_cols=2)
    assert m2.shape == (4, 2)
    with pytest.raises(ValueError):
        U._ensure_matrix(np.ones((4, 2)), num_cols=3)
    with pytest.raises(ValueError):
        U._ensure_matrix(np.ones((4, 2)), num_rows=3)
    with pytest.raises(ValueError):
        U._ensure_matrix(np.ones((2, 2, 2)))


def test_ensure_square_matrix():
    assert U._ensure_square_matrix(np.eye(3), n=3).shape == (3, 3)
    with pytest.raises(ValueError):
        U._ensure_square_matrix(np.ones((2, 3)))
    with pytest.raises(ValueError):
        U._ensure_square_matrix(np.eye(2), n=3)


def test_as_array_wraps_conversion_errors():
    class Bad:
        def __array__(self, *args, **kwargs):
            raise RuntimeError("nope")

    with pytest.raises(TypeError):
        U._as_array(Bad())


# ------------------------------------------------------------------------------
# Optional destinations
# ------------------------------------------------------------------------------

def test_reuse_vector():
    v = U._reuse_vector(None, 3)
    assert v.shape == (3,)
    np.testing.assert_array_equal(v, 0.0)

    buf = np.ones(3)
    assert U._reuse_vector(buf, 3) is buf

    with pytest.raises(ValueError):
        U._reuse_vector(np.ones(2), 3)
    with pytest.raises(TypeError):
        U._reuse_vector([0.0, 0.0, 0.0], 3)


def test_reuse_square_matrix_allocates_and_reuses():
    m = U._reuse_square_matrix(None, 2)
    assert m.shape == (2, 2)

    buf = np.zeros((2, 2))
    assert U._reuse_square_matrix(buf, 2) is buf

    with pytest.raises(ValueError):
        U._reuse_square_matrix(np.zeros((3, 3)), 2)


def test_reuse_square_matrix_resizes_zero_value_in_place():
    empty = np.empty((0, 0))
    out = U._reuse_square_matrix(empty, 3)
    assert out is empty
    assert empty.shape == (3, 3)
