# distributions/distribution.py
from __future__ import annotations

from typing import Protocol, runtime_checkable
from abc import ABC, abstractmethod

import numpy as np

from ..custom_types import Array, ArrayLike

__all__ = [
    "Prober",
    "Meaner",
    "Cover",
    "Rander",
    "Distribution",
]

# -------------------------- Capabilities ----------------------------
#
# Each check only needs a slice of a distribution's interface. These
# protocols name those slices so that a check can be run against any object
# providing the methods it calls.


@runtime_checkable
class Prober(Protocol):
    def prob(self, x: ArrayLike) -> float: ...

    def log_prob(self, x: ArrayLike) -> float: ...


@runtime_checkable
class Meaner(Protocol):
    def mean(self, out: Array | None = None) -> Array: ...


@runtime_checkable
class Cover(Protocol):
    def cov(self, out: Array | None = None) -> Array: ...


@runtime_checkable
class Rander(Protocol):
    def rand(self, out: Array | None = None) -> Array: ...


# -------------------------- Abstract Classes ----------------------------


class Distribution(ABC):
    """
    Abstract base class for real-valued distributions over R^d.

    Methods taking an `out` argument follow one contract: when `out` is None a
    new array is allocated, otherwise the result is written into `out`, which
    is also returned. The contents must be identical either way.
    """

    @property
    @abstractmethod
    def dim(self) -> int:
        """Dimensionality d."""
        raise NotImplementedError

    @abstractmethod
    def log_prob(self, x: ArrayLike) -> float:
        """Natural log of the density at a single point x of shape (d,)."""
        raise NotImplementedError

    def prob(self, x: ArrayLike) -> float:
        """Density at a single point x of shape (d,)."""
        return float(np.exp(self.log_prob(x)))

    @abstractmethod
    def mean(self, out: Array | None = None) -> Array:
        """Mean vector, shape (d,)."""
        raise NotImplementedError

    @abstractmethod
    def cov(self, out: Array | None = None) -> Array:
        """
        Covariance matrix, shape (d, d).

        `out` may also be an empty array, which is resized in place.
        """
        raise NotImplementedError

    @abstractmethod
    def rand(self, out: Array | None = None) -> Array:
        """One random draw, shape (d,)."""
        raise NotImplementedError

    def sample(self, n_samples: int = 1) -> Array:
        """
        Draw (n, d) samples, one per row.

        Subclasses may override with a vectorized version.
        """
        x = np.empty((int(n_samples), self.dim), dtype=float)
        for row in x:
            self.rand(row)
        return x
