from __future__ import annotations
import numpy as np
from abc import ABC, abstractmethod
from typing import Optional

from .activations import ActivationFunction, Identity, apply
from .exceptions import DimensionMismatchError, ShapeError
from .utils.validation import as_2d, assert_row_vector


def add_bias(X: np.ndarray) -> np.ndarray:
    """Append a constant 1 column (the bias input) to every row of X."""
    X = as_2d(X)
    return np.hstack([X, np.ones((X.shape[0], 1), dtype=float)])


class Function(ABC):
    """A mapping from a vector space to a float."""

    @abstractmethod
    def predict(self, instance) -> float:
        """Evaluate the function at a single row vector."""
        raise NotImplementedError

    @abstractmethod
    def predict_m(self, instances) -> np.ndarray:
        """Evaluate the function at every row of a matrix; returns (n, 1)."""
        raise NotImplementedError

    @abstractmethod
    def input_dims(self) -> int:
        """Number of columns of a valid input vector."""
        raise NotImplementedError

    def __call__(self, instance) -> float:
        return self.predict(instance)


class FunctionApproximator(Function):
    """
    A Function that can be trained on a labelled set of (input vector, scalar)
    pairs.
    """

    @abstractmethod
    def fit(self, X, y):
        """
        Fit to the rows of X with the matching entries of the column vector y.
        Returns self.
        """
        raise NotImplementedError


class LinearFunction(Function):
    """
    Evaluates input vectors by taking the dot product with a weight vector and
    passing the result through an activation function.

    Parameters
    ----------
    weights : np.ndarray
        1D array of length d + 1. The first d entries weight the features, the
        last one is the bias weight.
    activation : Optional[ActivationFunction]
        Applied to the linear output. None means identity.
    """

    def __init__(
        self, weights: np.ndarray, activation: Optional[ActivationFunction] = None
    ) -> None:
        weights = np.asarray(weights, dtype=float)
        if weights.ndim != 1 or weights.shape[0] < 2:
            raise ShapeError(
                f"weights must be 1D with at least 2 entries, got shape {weights.shape}"
            )
        self.weights = weights
        self.activation = activation if activation is not None else Identity()

    def input_dims(self) -> int:
        return int(self.weights.shape[0]) - 1

    def net_input(self, X_aug: np.ndarray) -> np.ndarray:
        """
        Pre-activation output for bias-augmented rows (d + 1 columns).
        Returns a 1D array with one entry per row.
        """
        X_aug = as_2d(X_aug)
        if X_aug.shape[1] != self.weights.shape[0]:
            raise DimensionMismatchError(
                f"Augmented input has {X_aug.shape[1]} columns. "
                f"Expected {self.weights.shape[0]}."
            )
        return X_aug @ self.weights

    def _check_width(self, X: np.ndarray) -> None:
        if X.shape[1] != self.input_dims():
            raise DimensionMismatchError(
                f"x has {X.shape[1]} columns. Expected {self.input_dims()}."
            )

    def predict(self, instance) -> float:
        x = assert_row_vector(instance)
        return float(self.predict_m(x)[0, 0])

    def predict_m(self, instances) -> np.ndarray:
        X = as_2d(instances)
        self._check_width(X)
        z = self.net_input(add_bias(X)).reshape(-1, 1)
        return apply(z, self.activation)

    def __repr__(self) -> str:
        return f"LinearFunction(weights={self.weights!r}, activation={self.activation!r})"
