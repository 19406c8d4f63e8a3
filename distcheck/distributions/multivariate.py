# distributions/multivariate.py
from __future__ import annotations

import math
import numpy as np
import scipy.linalg as sla

from ..custom_types import Array, ArrayLike, PRNG
from ..array_backend.utils import (
    _ensure_vector,
    _ensure_matrix,
    _ensure_square_matrix,
    _reuse_vector,
    _reuse_square_matrix,
)
from .distribution import Distribution

__all__ = [
    "MvNormal",
    "Uniform",
]


class MvNormal(Distribution):
    """
    Multivariate Normal N(mean, cov).

    The lower Cholesky factor L of `cov` is computed once; densities are
    evaluated through triangular solves against L and draws are `mean + L z`
    with z standard normal.

    Args:
        mean: array-like, shape (d,)
        cov: array-like, shape (d, d)
            Symmetric positive definite covariance.
        rng: np.random.Generator, optional
            Random number generator for sampling.
    """

    def __init__(self, mean: ArrayLike, cov: ArrayLike,
                 *, rng: PRNG | None = None):
        m = _ensure_vector(mean)
        C = _ensure_square_matrix(cov, m.shape[0])
        if not np.allclose(C, C.T, rtol=0, atol=1e-12):
            raise ValueError("cov must be symmetric.")
        try:
            L = np.linalg.cholesky(C)
        except np.linalg.LinAlgError as e:
            raise ValueError("cov must be positive definite.") from e

        self._mean = m
        self._cov = 0.5 * (C + C.T)
        self._chol = L
        self._logdet = 2.0 * float(np.sum(np.log(np.diag(L))))
        self._rng = rng or np.random.default_rng()

    @property
    def dim(self) -> int:
        return int(self._mean.shape[0])

    def log_prob(self, x: ArrayLike) -> float:
        x = _ensure_vector(x, length=self.dim, copy=False)
        z = sla.solve_triangular(self._chol, x - self._mean, lower=True)
        quadratic_term = float(z @ z)
        return -0.5 * (self.dim * math.log(2 * math.pi) + self._logdet + quadratic_term)

    def mean(self, out: Array | None = None) -> Array:
        out = _reuse_vector(out, self.dim)
        out[:] = self._mean
        return out

    def cov(self, out: Array | None = None) -> Array:
        out = _reuse_square_matrix(out, self.dim)
        out[...] = self._cov
        return out

    def rand(self, out: Array | None = None) -> Array:
        out = _reuse_vector(out, self.dim)
        z = self._rng.standard_normal(self.dim)
        out[:] = self._mean + self._chol @ z
        return out

    def sample(self, n_samples: int = 1) -> Array:
        Z = self._rng.standard_normal(size=(int(n_samples), self.dim))
        return self._mean + Z @ self._chol.T


class Uniform(Distribution):
    """
    Uniform distribution over an axis-aligned box in R^d.

    Args:
        bounds: array-like, shape (d, 2)
            Row i holds (min_i, max_i) with min_i < max_i.
        rng: np.random.Generator, optional
            Random number generator for sampling.
    """

    def __init__(self, bounds: ArrayLike, *, rng: PRNG | None = None):
        B = _ensure_matrix(bounds, num_cols=2)
        if B.shape[0] < 1:
            raise ValueError("Uniform requires at least one dimension.")
        if not np.all(B[:, 0] < B[:, 1]):
            raise ValueError(f"Uniform bounds must satisfy min < max in every dimension. Got {B.tolist()}.")
        self._min = B[:, 0].copy()
        self._max = B[:, 1].copy()
        self._log_volume = float(np.sum(np.log(self._max - self._min)))
        self._rng = rng or np.random.default_rng()

    @property
    def dim(self) -> int:
        return int(self._min.shape[0])

    @property
    def bounds(self) -> Array:
        """(min, max) per dimension, shape (d, 2)."""
        return np.column_stack([self._min, self._max])

    def log_prob(self, x: ArrayLike) -> float:
        x = _ensure_vector(x, length=self.dim, copy=False)
        if np.any(x < self._min) or np.any(x > self._max):
            return -math.inf
        return -self._log_volume

    def mean(self, out: Array | None = None) -> Array:
        out = _reuse_vector(out, self.dim)
        out[:] = 0.5 * (self._min + self._max)
        return out

    def cov(self, out: Array | None = None) -> Array:
        out = _reuse_square_matrix(out, self.dim)
        out[...] = np.diag((self._max - self._min) ** 2 / 12.0)
        return out

    def rand(self, out: Array | None = None) -> Array:
        out = _reuse_vector(out, self.dim)
        out[:] = self._rng.uniform(self._min, self._max)
        return out

    def sample(self, n_samples: int = 1) -> Array:
        return self._rng.uniform(self._min, self._max, size=(int(n_samples), self.dim))
