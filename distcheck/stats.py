# stats.py
"""
Descriptive statistics used to estimate moments from samples.

Samples are stored one per row, so a matrix `x` of shape (n, d) holds `n`
draws of a `d`-dimensional variable. Weights, when given, are frequency-like
and need not sum to one.
"""
from __future__ import annotations

import numpy as np

from .custom_types import Array, ArrayLike
from .array_backend.utils import (
    _ensure_vector,
    _ensure_matrix,
    _reuse_square_matrix,
)

__all__ = [
    "mean",
    "column_means",
    "covariance_matrix",
]


def _check_weights(weights: ArrayLike | None, n: int) -> Array | None:
    if weights is None:
        return None
    w = _ensure_vector(weights, length=n)
    if np.any(w < 0):
        raise ValueError("weights must be nonnegative.")
    return w


def mean(x: ArrayLike, weights: ArrayLike | None = None) -> float:
    """Arithmetic mean of a 1D sample, `sum(w * x) / sum(w)` when weighted."""
    x = _ensure_vector(x, copy=False)
    w = _check_weights(weights, x.size)
    if w is None:
        return float(x.mean())
    s = w.sum()
    if s <= 0:
        raise ValueError("weights cannot all be zero.")
    return float((w * x).sum() / s)


def column_means(x: ArrayLike, weights: ArrayLike | None = None) -> Array:
    """Mean of every column of an (n, d) sample matrix, shape (d,)."""
    X = _ensure_matrix(x, copy=False)
    return np.array([mean(X[:, j], weights) for j in range(X.shape[1])])


def covariance_matrix(x: ArrayLike, weights: ArrayLike | None = None,
                      out: Array | None = None) -> Array:
    """
    Sample covariance between the columns of `x`, shape (d, d).

    The unweighted estimate divides by `n - 1`; the weighted estimate divides
    by `sum(weights) - 1`. The result is written into `out` when supplied
    (see `_reuse_square_matrix`).

    Args:
        x: array-like, shape (n, d)
            Samples, one per row.
        weights: array-like, shape (n,), optional
            Nonnegative sample weights.
        out: ndarray, optional
            Destination for the result.

    Returns:
        Symmetric covariance matrix of shape (d, d).
    """
    X = _ensure_matrix(x, copy=False)
    n, d = X.shape
    if n < 2:
        raise ValueError(f"covariance_matrix: need at least two samples. Got {n}.")
    w = _check_weights(weights, n)

    if w is None:
        centered = X - X.mean(axis=0)
        C = centered.T @ centered / (n - 1)
    else:
        s = w.sum()
        if s <= 1:
            raise ValueError(f"covariance_matrix: sum of weights must exceed one. Got {s}.")
        centered = X - (w[:, np.newaxis] * X).sum(axis=0) / s
        C = (centered.T * w) @ centered / (s - 1)

    dest = _reuse_square_matrix(out, d)
    # matmul rounding can leave the two halves a few ulps apart
    dest[...] = 0.5 * (C + C.T)
    return dest
