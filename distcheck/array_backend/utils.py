# array_backend/utils.py
"""
Utility functions for array canonicalization used by distcheck.

Two families live here:

- `_ensure_*` helpers coerce array-like input to a canonical shape and raise
  `ValueError` when that is impossible.
- `_reuse_*` helpers implement the optional destination contract used by
  `mean(out=None)`, `cov(out=None)` and `rand(out=None)`: a missing
  destination is allocated, a destination of the right shape is written in
  place, and an empty (zero value) destination is resized in place.

Functions returning a converted copy accept `copy: bool = True`. When
`copy=True` the returned array is guaranteed to be a different object from
the input. The `_reuse_*` helpers never copy; writing into caller storage is
their whole point.
"""

from __future__ import annotations

import numpy as np
from typing import Any

from ..custom_types import Array, ArrayLike


def _as_array(x: Any) -> Array:
    try:
        return np.asarray(x)
    except Exception as e:
        raise TypeError(
            f"Could not convert input to array.\n"
            f"Input type: {type(x).__name__}\n"
            f"Input value: {repr(x)}\n"
            f"Original error: {e}"
        ) from e


def _ensure_vector(x: ArrayLike, *, length: int | None = None,
                   copy: bool = True) -> Array:
    """
    Ensure input is returned as a float 1-D vector of shape (n,).

    Accepts:
      - 1D arrays -> (n,)
      - 2D arrays shaped (n,1) or (1,n) -> flattened
      - 0D scalar -> treated as length-1 vector (1,)

    Raises:
      ValueError for incompatible shapes (ndim > 2 or 2D with both dims >1)
      or when `length` is given and does not match.
    """
    arr = _as_array(x).astype(float, copy=False)

    if arr.ndim == 0:
        out = arr.reshape((1,))
    elif arr.ndim == 1:
        out = arr
    elif arr.ndim == 2:
        num_rows, num_cols = arr.shape
        if num_rows == 1 or num_cols == 1:
            out = np.ravel(arr)
        else:
            raise ValueError(f"_ensure_vector: 2D input has shape {arr.shape}, which is not a vector (expected (n,1) or (1,n)).")
    else:
        raise ValueError(f"_ensure_vector: input has too many dimensions (ndim={arr.ndim}).")

    if length is not None and out.size != length:
        raise ValueError(f"_ensure_vector: required length {length}. Got {out.size}.")

    return out.copy() if copy else out


def _ensure_matrix(x: ArrayLike, *, num_rows: int | None = None,
                   num_cols: int | None = None, copy: bool = True) -> Array:
    """ Ensure input is a float 2D matrix

    - 1D inputs of length n become shape (n, 1), one sample per row
    - 2D inputs are passed through as is
    - Other shapes raise an error
    """
    arr = _as_array(x).astype(float, copy=False)

    if arr.ndim == 2:
        out = arr
    elif arr.ndim == 1:
        out = arr.reshape(-1, 1)
    else:
        raise ValueError(f"_ensure_matrix: Input cannot be converted to a 2D matrix. Shape {arr.shape}")

    if num_rows is not None and out.shape[0] != num_rows:
        raise ValueError(f"_ensure_matrix: Required {num_rows} rows. Got {out.shape[0]}.")

    if num_cols is not None and out.shape[1] != num_cols:
        raise ValueError(f"_ensure_matrix: Required {num_cols} columns. Got {out.shape[1]}.")

    return out.copy() if copy else out


def _ensure_square_matrix(x: ArrayLike, n: int | None = None, *, copy: bool = True) -> Array:
    """Ensure input is a 2d square matrix"""
    matrix = _ensure_matrix(x, copy=copy)
    num_rows, num_cols = matrix.shape
    if num_rows != num_cols:
        raise ValueError(f"Array is not square. Shape {matrix.shape}")

    if n is not None and matrix.shape[0] != n:
        raise ValueError(f"Required matrix dimension {n}. Got {matrix.shape[0]}.")

    return matrix


# ------------------------------------------------------------------------------
# Optional destinations
# ------------------------------------------------------------------------------

def _reuse_vector(out: Array | None, length: int) -> Array:
    """Return a length-`length` destination, allocating when `out` is None.

    An `out` of the wrong length is a caller error.
    """
    if out is None:
        return np.zeros(length, dtype=float)
    if not isinstance(out, np.ndarray):
        raise TypeError(f"_reuse_vector: destination must be a numpy array. Got {type(out).__name__}.")
    if out.shape != (length,):
        raise ValueError(f"_reuse_vector: destination must have shape ({length},). Got {out.shape}.")
    return out


def _reuse_square_matrix(out: Array | None, n: int) -> Array:
    """Return an (n, n) destination, allocating when `out` is None.

    An empty `out` (the zero value, e.g. `np.empty((0, 0))`) is resized in
    place so the caller's array holds the result afterwards. This needs `out`
    to own its data. Any other shape than (n, n) is a caller error.
    """
    if out is None:
        return np.zeros((n, n), dtype=float)
    if not isinstance(out, np.ndarray):
        raise TypeError(f"_reuse_square_matrix: destination must be a numpy array. Got {type(out).__name__}.")
    if out.size == 0:
        out.resize((n, n), refcheck=False)
        return out
    if out.shape != (n, n):
        raise ValueError(f"_reuse_square_matrix: destination must have shape ({n}, {n}). Got {out.shape}.")
    return out
