import numpy as np
import pytest

from distcheck import stats


def test_mean_unweighted_and_weighted():
    x = np.array([1.0, 3.0, 5.0])
    assert stats.mean(x) == pytest.approx(3.0)

    w = np.array([0.2, 0.3, 0.5])
    assert stats.mean(x, w) == pytest.approx((w * x).sum())

    # weights need not be normalized
    assert stats.mean(x, 10 * w) == pytest.approx((w * x).sum())


def test_mean_rejects_bad_weights():
    x = np.array([1.0, 2.0, 3.0])
    with pytest.raises(ValueError):
        stats.mean(x, [0.5, 0.5])           # wrong length
    with pytest.raises(ValueError):
        stats.mean(x, [0.5, -0.2, 0.7])     # negative
    with pytest.raises(ValueError):
        stats.mean(x, [0.0, 0.0, 0.0])      # all zero


def test_column_means():
    X = np.array([[0.0, 1.0],
                  [2.0, 3.0],
                  [4.0, 8.0]])
    np.testing.assert_allclose(stats.column_means(X), [2.0, 4.0])


def test_covariance_matches_numpy(rng):
    X = rng.normal(size=(500, 3))
    C = stats.covariance_matrix(X)
    np.testing.assert_allclose(C, np.cov(X, rowvar=False, ddof=1), rtol=1e-12, atol=1e-14)
    np.testing.assert_array_equal(C, C.T)


def test_covariance_weighted_frequency_semantics():
    # integer weights act as repeat counts
    X = np.array([[0.0, 0.0],
                  [2.0, 1.0],
                  [4.0, 3.0]])
    w = np.array([1.0, 2.0, 3.0])
    repeated = np.repeat(X, w.astype(int), axis=0)

    C = stats.covariance_matrix(X, weights=w)
    np.testing.assert_allclose(C, np.cov(repeated, rowvar=False, ddof=1), atol=1e-12)


def test_covariance_out_contract():
    X = np.array([[0.0, 1.0], [1.0, 0.0], [2.0, 2.0]])
    expected = stats.covariance_matrix(X)

    presized = np.zeros((2, 2))
    res = stats.covariance_matrix(X, out=presized)
    assert res is presized
    np.testing.assert_array_equal(presized, expected)

    empty = np.empty((0, 0))
    stats.covariance_matrix(X, out=empty)
    assert empty.shape == (2, 2)
    np.testing.assert_array_equal(empty, expected)

    with pytest.raises(ValueError):
        stats.covariance_matrix(X, out=np.zeros((3, 3)))


def test_covariance_needs_two_samples():
    with pytest.raises(ValueError):
        stats.covariance_matrix(np.array([[1.0, 2.0]]))
