from __future__ import annotations
import numpy as np
import matplotlib.pyplot as plt
from typing import Sequence

from ..exceptions import ShapeError
from ..utils.validation import as_2d, as_column


def plot_fit(model, X, y, out_png: str, title: str = "SGD fit") -> None:
    """Scatter of 1-d training data with the fitted curve on top."""
    X = as_2d(X)
    y = as_column(y)
    if X.shape[1] != 1:
        raise ShapeError(f"plot_fit needs a single feature, got {X.shape[1]}")
    grid = np.linspace(X[:, 0].min(), X[:, 0].max(), 200).reshape(-1, 1)
    plt.figure(figsize=(6.0, 4.0))
    plt.scatter(X[:, 0], y[:, 0], s=12, alpha=0.6, label="data")
    plt.plot(grid[:, 0], model.predict_m(grid)[:, 0], linewidth=2, label="fit")
    plt.xlabel("x")
    plt.ylabel("y")
    plt.title(title)
    plt.legend()
    plt.tight_layout()
    plt.savefig(out_png, dpi=180)
    plt.close()


def plot_learning_curve(mses: Sequence[float], out_png: str) -> None:
    plt.figure(figsize=(6.0, 4.0))
    plt.plot(np.arange(1, len(mses) + 1), mses, marker="o", linewidth=2)
    plt.xlabel("fit round (warm start)")
    plt.ylabel("Training MSE")
    plt.title("SGD: MSE vs fit rounds")
    plt.tight_layout()
    plt.savefig(out_png, dpi=180)
    plt.close()
