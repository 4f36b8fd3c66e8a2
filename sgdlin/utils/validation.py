from __future__ import annotations
import numpy as np

from ..exceptions import ShapeError


def as_2d(X, name: str = "X") -> np.ndarray:
    X = np.asarray(X, dtype=float)
    if X.ndim != 2:
        raise ShapeError(f"{name} must be 2D, got shape {X.shape}")
    return X


def as_column(y, name: str = "y") -> np.ndarray:
    """
    Return y as an (n, 1) column. A 1D array of length n is taken to be a
    column; any 2D array with more than one column is rejected.
    """
    y = np.asarray(y, dtype=float)
    if y.ndim == 1:
        return y.reshape(-1, 1)
    if y.ndim != 2 or y.shape[1] != 1:
        raise ShapeError(f"{name} must be a column vector, got shape {y.shape}")
    return y


def assert_row_vector(x, name: str = "x") -> np.ndarray:
    """Return a single instance as a (1, d) row."""
    x = np.asarray(x, dtype=float)
    if x.ndim == 1:
        return x.reshape(1, -1)
    if x.ndim != 2 or x.shape[0] != 1:
        raise ShapeError(f"{name} must be a single row vector, got shape {x.shape}")
    return x
