from __future__ import annotations
from sklearn.exceptions import NotFittedError as _SklearnNotFittedError


class SGDError(Exception):
    """Base class for errors raised by sgdlin."""


class InvalidConfigError(SGDError, ValueError):
    """Bad hyperparameters (unknown penalty, negative lam, ...)."""


class ShapeError(SGDError, ValueError):
    """An array does not have the expected number of axes, rows or columns."""


class DimensionMismatchError(SGDError, ValueError):
    """Row counts disagree, or the column count differs from the fitted one."""


class NotFittedError(SGDError, _SklearnNotFittedError):
    """A predict-family call was made before the first successful fit."""
