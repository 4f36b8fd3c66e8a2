from .activations import ActivationFunction, Identity, Tanh, Sigmoid, apply
from .exceptions import (
    SGDError,
    InvalidConfigError,
    ShapeError,
    DimensionMismatchError,
    NotFittedError,
)
from .function import Function, FunctionApproximator, LinearFunction, add_bias
from .sgd import SGD, Penalty, L1_PENALTY, L2_PENALTY, new_sgd, signum
from .metrics import sq_error, mean_squared_error_of, linear_fit_mse, learning_curve
from . import fake_data

__all__ = [
    "ActivationFunction",
    "Identity",
    "Tanh",
    "Sigmoid",
    "apply",
    "SGDError",
    "InvalidConfigError",
    "ShapeError",
    "DimensionMismatchError",
    "NotFittedError",
    "Function",
    "FunctionApproximator",
    "LinearFunction",
    "add_bias",
    "SGD",
    "Penalty",
    "L1_PENALTY",
    "L2_PENALTY",
    "new_sgd",
    "signum",
    "sq_error",
    "mean_squared_error_of",
    "linear_fit_mse",
    "learning_curve",
    "fake_data",
]
