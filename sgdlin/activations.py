from __future__ import annotations
import numpy as np
from abc import ABC, abstractmethod
from typing import Callable, Optional, Union

from .exceptions import InvalidConfigError


class ActivationFunction(ABC):
    """
    A differentiable scalar map applied to the output of a linear predictor.

    Both methods must be pure and accept either a float or a numpy array
    (elementwise).
    """

    @abstractmethod
    def eval(self, x):
        raise NotImplementedError

    @abstractmethod
    def deriv(self, x):
        raise NotImplementedError

    def __call__(self, x):
        return self.eval(x)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

    def __eq__(self, other) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


class Identity(ActivationFunction):
    def eval(self, x):
        return x

    def deriv(self, x):
        return np.ones_like(x, dtype=float) if np.ndim(x) else 1.0


class Tanh(ActivationFunction):
    def eval(self, x):
        return np.tanh(x)

    def deriv(self, x):
        # 1 - tanh(x)^2
        return 1.0 - np.tanh(x) ** 2


class Sigmoid(ActivationFunction):
    def eval(self, x):
        z = np.asarray(x, dtype=float)
        flat = np.atleast_1d(z)
        out = np.empty_like(flat)
        pos = flat >= 0
        out[pos] = 1.0 / (1.0 + np.exp(-flat[pos]))
        ez = np.exp(flat[~pos])
        out[~pos] = ez / (1.0 + ez)
        return out.reshape(z.shape) if z.ndim else float(out[0])

    def deriv(self, x):
        s = self.eval(x)
        return s * (1.0 - s)


_BY_NAME = {
    "identity": Identity,
    "linear": Identity,
    "tanh": Tanh,
    "sigmoid": Sigmoid,
    "logistic": Sigmoid,
}

ActivationLike = Optional[Union[str, ActivationFunction]]


def resolve_activation(activation: ActivationLike) -> ActivationFunction:
    """None means no activation, i.e. the identity."""
    if activation is None:
        return Identity()
    if isinstance(activation, ActivationFunction):
        return activation
    if isinstance(activation, str) and activation.lower() in _BY_NAME:
        return _BY_NAME[activation.lower()]()
    raise InvalidConfigError(
        f"activation must be None, an ActivationFunction or one of "
        f"{sorted(_BY_NAME)}; got {activation!r}"
    )


def apply(matrix, f: Optional[Callable[[float], float]]) -> np.ndarray:
    """
    Apply f to every element of matrix and return a new array of the same
    shape. If f is None the input is returned unchanged.
    """
    if f is None:
        return matrix
    M = np.asarray(matrix, dtype=float)
    if isinstance(f, ActivationFunction):
        return np.array(f.eval(M), dtype=float).reshape(M.shape)
    return np.vectorize(f, otypes=[float])(M)
