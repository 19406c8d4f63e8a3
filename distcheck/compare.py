# compare.py
"""
Float, vector and matrix comparison predicates.

Approximate comparisons accept two values when they are within an absolute
tolerance of each other, or failing that, within a relative tolerance of the
larger magnitude. This keeps a single `tol` meaningful both near zero and for
large values.
"""
from __future__ import annotations

import numpy as np

from .custom_types import Array, ArrayLike

__all__ = [
    "equal_within_abs",
    "equal_within_rel",
    "equal_within_abs_or_rel",
    "equal",
    "equal_approx",
    "matrix_equal",
    "matrix_equal_approx",
    "is_symmetric",
    "format_matrix",
]

_MIN_NORMAL = np.finfo(float).tiny


def equal_within_abs(a: ArrayLike, b: ArrayLike, tol: float) -> Array:
    """Elementwise `a == b or |a - b| <= tol`."""
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    with np.errstate(invalid="ignore"):
        return (a == b) | (np.abs(a - b) <= tol)


def equal_within_rel(a: ArrayLike, b: ArrayLike, tol: float) -> Array:
    """Elementwise `|a - b| / max(|a|, |b|) <= tol`.

    Subnormal differences are compared against `tol` scaled by the smallest
    normal float instead.
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    with np.errstate(invalid="ignore", divide="ignore"):
        delta = np.abs(a - b)
        scale = np.maximum(np.abs(a), np.abs(b))
        tiny = delta <= _MIN_NORMAL
        rel = np.where(tiny, delta <= tol * _MIN_NORMAL, delta / scale <= tol)
    return (a == b) | rel


def equal_within_abs_or_rel(a: ArrayLike, b: ArrayLike,
                            abs_tol: float, rel_tol: float) -> Array:
    return equal_within_abs(a, b, abs_tol) | equal_within_rel(a, b, rel_tol)


def equal(a: ArrayLike, b: ArrayLike) -> bool:
    """True if `a` and `b` have the same length and identical elements.

    NaN is never equal to anything, itself included.
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if a.shape != b.shape:
        return False
    return bool(np.all(a == b))


def equal_approx(a: ArrayLike, b: ArrayLike, tol: float) -> bool:
    """True if `a` and `b` have the same length and every element pair is
    within `tol`, absolutely or relatively."""
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if a.shape != b.shape:
        return False
    return bool(np.all(equal_within_abs_or_rel(a, b, tol, tol)))


def matrix_equal(a: ArrayLike, b: ArrayLike) -> bool:
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if a.ndim != 2 or b.ndim != 2:
        raise ValueError(f"matrix_equal: expected 2D inputs. Got shapes {a.shape} and {b.shape}.")
    return equal(a, b)


def matrix_equal_approx(a: ArrayLike, b: ArrayLike, tol: float) -> bool:
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if a.ndim != 2 or b.ndim != 2:
        raise ValueError(f"matrix_equal_approx: expected 2D inputs. Got shapes {a.shape} and {b.shape}.")
    return equal_approx(a, b, tol)


def is_symmetric(a: ArrayLike) -> bool:
    """True if `a` is square and exactly equal to its transpose."""
    a = np.asarray(a, dtype=float)
    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        return False
    return bool(np.all(a == a.T))


def format_matrix(a: ArrayLike, precision: int = 4) -> str:
    """Render a matrix one row per line, for failure messages."""
    a = np.atleast_2d(np.asarray(a, dtype=float))
    return np.array2string(a, precision=precision, suppress_small=True)
