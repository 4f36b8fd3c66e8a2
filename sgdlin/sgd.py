"""
sgd.py

Stochastic Gradient Descent (SGD) for a linear function with an optional
activation, regularized with an L1 or L2 penalty.

Example
-------
    ```python
    from sgdlin import SGD, Penalty, Tanh

    sgd = SGD(Penalty.L2, lam=0.01, num_iterations=1000, learning_rate=0.1,
              activation=Tanh(), random_state=0)
    sgd.fit(X, y)            # X: (n, d), y: (n, 1)
    yhat = sgd.predict_m(X)  # (n, 1)
    ```
"""

from __future__ import annotations

import logging
import numbers
from enum import IntEnum
from typing import Union

import numpy as np
from sklearn.base import BaseEstimator, clone

from .activations import ActivationLike, resolve_activation
from .exceptions import (
    DimensionMismatchError,
    InvalidConfigError,
    NotFittedError,
    ShapeError,
)
from .function import FunctionApproximator, LinearFunction
from .utils.rng import RandomStateLike, make_rng
from .utils.validation import as_2d, as_column, assert_row_vector

_logger = logging.getLogger(__name__)


class Penalty(IntEnum):
    L1 = 0
    L2 = 1


L1_PENALTY = Penalty.L1
L2_PENALTY = Penalty.L2

PenaltyLike = Union[Penalty, int, str]


def signum(a):
    """Sign as -1, 0 or +1 (elementwise for arrays)."""
    return np.sign(a)


def _resolve_penalty(penalty: PenaltyLike) -> Penalty:
    if isinstance(penalty, str):
        try:
            return Penalty[penalty.upper()]
        except KeyError:
            pass
    elif isinstance(penalty, numbers.Integral) and not isinstance(penalty, bool):
        try:
            return Penalty(int(penalty))
        except ValueError:
            pass
    raise InvalidConfigError(
        f"Invalid regularization penalty {penalty!r}. Valid types are "
        "Penalty.L1 or Penalty.L2."
    )


class SGD(BaseEstimator, FunctionApproximator):
    """
    Online SGD on the squared error of a linear model with a bias weight.

    Each iteration draws one training row uniformly at random (with
    replacement) and takes a single gradient step on it. Repeated calls to
    fit continue from the current weights.

    Parameters
    ----------
    penalty : Penalty | int | str
        Regularization penalty, L1 or L2.
    lam : float
        Regularization strength, must be >= 0.
    num_iterations : int
        Number of single-sample updates per call to fit, must be >= 1.
    learning_rate : float
        Constant learning rate. The step actually taken is
        learning_rate / input_dims.
    activation : ActivationFunction | str | None
        Applied to the linear output at prediction time. None is identity.
    random_state : int | np.random.RandomState | None
        Source of the sample indices drawn during fit.
    regularize_bias : bool
        Apply the penalty to the bias weight as well as the feature weights.
    activation_gradient : bool
        If True, the residual is taken after the activation and the gradient
        is multiplied by the activation's derivative. If False the update only
        sees the linear output and the activation is used for prediction only.
    """

    def __init__(
        self,
        penalty: PenaltyLike = Penalty.L2,
        lam: float = 0.0,
        num_iterations: int = 1000,
        learning_rate: float = 0.1,
        activation: ActivationLike = None,
        random_state: RandomStateLike = None,
        regularize_bias: bool = True,
        activation_gradient: bool = False,
    ) -> None:
        self.penalty = penalty
        self.lam = lam
        self.num_iterations = num_iterations
        self.learning_rate = learning_rate
        self.activation = activation
        self.random_state = random_state
        self.regularize_bias = regularize_bias
        self.activation_gradient = activation_gradient
        self._check_params()

    def _check_params(self) -> None:
        self._penalty = _resolve_penalty(self.penalty)
        if not isinstance(self.lam, numbers.Real) or not np.isfinite(self.lam):
            raise InvalidConfigError(f"lam must be a finite number, got {self.lam!r}")
        if self.lam < 0.0:
            raise InvalidConfigError("Regularization parameter cannot be negative.")
        if (
            not isinstance(self.num_iterations, numbers.Integral)
            or isinstance(self.num_iterations, bool)
            or self.num_iterations < 1
        ):
            raise InvalidConfigError(
                f"num_iterations must be a positive integer, got {self.num_iterations!r}"
            )
        if not isinstance(self.learning_rate, numbers.Real):
            raise InvalidConfigError(
                f"learning_rate must be a number, got {self.learning_rate!r}"
            )
        self._activation = resolve_activation(self.activation)

    # ------------------------------------------------------------------ state

    @property
    def is_fitted(self) -> bool:
        return hasattr(self, "model_")

    def _require_fitted(self) -> LinearFunction:
        if not self.is_fitted:
            raise NotFittedError("Cannot predict before running the fit method.")
        return self.model_

    def input_dims(self) -> int:
        return int(self.input_dims_) if self.is_fitted else 0

    def weights(self) -> np.ndarray:
        """
        Weight vector obtained during fitting: the feature weights followed by
        the bias weight. Before the first fit this is array([0.0]), which
        carries no meaning.
        """
        if self.is_fitted:
            return self.model_.weights.copy()
        return np.zeros(1)

    def new_copy(self) -> "SGD":
        """
        A new, unfitted SGD with the same hyperparameters as this one. No
        weights are copied, so the copy can be trained on data of any width.
        """
        return clone(self)

    # -------------------------------------------------------------------- fit

    def _check_training_data(self, X, y):
        X = np.asarray(X, dtype=float)
        y = np.asarray(y, dtype=float)
        if X.ndim != 2:
            raise ShapeError(f"X must be 2D, got shape {X.shape}")
        if y.ndim == 0 or X.shape[0] != y.shape[0]:
            n_y = y.shape[0] if y.ndim else 0
            raise DimensionMismatchError(
                f"The number of rows in X ({X.shape[0]}) does not match the "
                f"number of rows in y ({n_y}). X should contain one input vector "
                "per row and y should be a column vector with a label for each."
            )
        y = as_column(y)
        if X.shape[0] == 0:
            raise ShapeError("X must contain at least one row.")
        if X.shape[1] == 0:
            raise ShapeError("X must contain at least one column.")
        if self.is_fitted and X.shape[1] != self.input_dims_:
            raise DimensionMismatchError(
                f"X has {X.shape[1]} columns but previous training data had "
                f"{self.input_dims_}. Construct a new SGD instance (see new_copy) "
                "to train on data of a different dimension."
            )
        return X, y[:, 0]

    def fit(self, X, y) -> "SGD":
        self._check_params()
        X, y = self._check_training_data(X, y)
        n, d = X.shape

        warm = self.is_fitted
        if not warm:
            self.input_dims_ = d
            self.rng_ = make_rng(self.random_state)
            self.model_ = LinearFunction(np.zeros(d + 1), self._activation)
        else:
            self.model_.activation = self._activation

        _logger.debug(
            "SGD fit: n=%d d=%d iterations=%d penalty=%s lam=%g warm_start=%s",
            n,
            d,
            self.num_iterations,
            self._penalty.name,
            self.lam,
            warm,
        )

        f = self.model_
        w = f.weights
        alpha = self.learning_rate / float(d)
        pen_mask = np.ones(d + 1)
        if not self.regularize_bias:
            pen_mask[-1] = 0.0

        for index in self.rng_.randint(n, size=self.num_iterations):
            xb = np.append(X[index], 1.0)
            z = float(f.net_input(xb.reshape(1, -1))[0])
            if self.activation_gradient:
                diff = y[index] - f.activation.eval(z)
                grad = -diff * f.activation.deriv(z) * xb
            else:
                diff = y[index] - z
                grad = -diff * xb

            if self._penalty == Penalty.L1:
                gpen = self.lam * signum(w)
            else:
                gpen = self.lam * w
            w -= alpha * (grad + gpen * pen_mask)

        if not np.all(np.isfinite(w)):
            _logger.warning(
                "SGD weights are no longer finite after %d iterations "
                "(learning_rate=%g); the fit has diverged.",
                self.num_iterations,
                self.learning_rate,
            )
        return self

    # ---------------------------------------------------------------- predict

    def predict(self, instance) -> float:
        f = self._require_fitted()
        x = assert_row_vector(instance)
        if x.shape[1] != self.input_dims_:
            raise DimensionMismatchError(
                f"x has {x.shape[1]} columns. Expected {self.input_dims_}."
            )
        return f.predict(x)

    def predict_m(self, instances) -> np.ndarray:
        f = self._require_fitted()
        X = as_2d(instances)
        if X.shape[1] != self.input_dims_:
            raise DimensionMismatchError(
                f"X has {X.shape[1]} columns. Expected {self.input_dims_}."
            )
        return f.predict_m(X)


def new_sgd(
    penalty: PenaltyLike,
    lam: float,
    num_iterations: int,
    learning_rate: float,
    activation: ActivationLike = None,
    random_state: RandomStateLike = None,
    **kwargs,
) -> SGD:
    """Construct a new, untrained SGD instance (raises InvalidConfigError)."""
    return SGD(
        penalty=penalty,
        lam=lam,
        num_iterations=num_iterations,
        learning_rate=learning_rate,
        activation=activation,
        random_state=random_state,
        **kwargs,
    )
