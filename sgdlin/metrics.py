from __future__ import annotations
import numpy as np
from typing import List
from sklearn.metrics import mean_squared_error

from .function import Function, FunctionApproximator
from .utils.validation import as_2d, as_column


def sq_error(a: float, b: float) -> float:
    """Squared difference between two scalars."""
    diff = a - b
    return diff * diff


def mean_squared_error_of(model: Function, X, y) -> float:
    """MSE of the bulk predictions model.predict_m(X) against y."""
    X = as_2d(X)
    y = as_column(y)
    return float(mean_squared_error(y[:, 0], model.predict_m(X)[:, 0]))


def linear_fit_mse(model: FunctionApproximator, X, y) -> float:
    """
    Fit model on (X, y) and return its MSE on the same data.

    The MSE is computed twice, once from predict_m and once from predict
    applied row by row, and the larger of the two is returned so that a
    disagreement between the two code paths cannot hide a bad fit.
    """
    X = as_2d(X)
    y = as_column(y)
    model.fit(X, y)

    mse_bulk = mean_squared_error_of(model, X, y)
    sq_err = 0.0
    for i in range(X.shape[0]):
        sq_err += sq_error(float(y[i, 0]), model.predict(X[i]))
    mse_rows = sq_err / X.shape[0]
    return max(mse_bulk, mse_rows)


def learning_curve(model, X, y, n_rounds: int) -> List[float]:
    """
    Train a fresh copy of model (model.new_copy()) for n_rounds calls to fit,
    each continuing from the previous weights, and record the training MSE
    after every round. The model passed in is not modified.
    """
    if n_rounds < 1:
        raise ValueError("n_rounds must be >= 1")
    X = as_2d(X)
    y = as_column(y)
    m = model.new_copy()
    mses = []
    for _ in range(n_rounds):
        m.fit(X, y)
        mses.append(mean_squared_error_of(m, X, y))
    return mses
