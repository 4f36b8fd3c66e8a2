import numpy as np
import pandas as pd


def generate_linear_data(
    n_samples=100, slope=0.25, intercept=-0.5, noise=0.1, random_seed=None
):
    """
    Generate a 1-d linear regression data set on an even grid.

    Parameters
    ----------
    n_samples : int
        Number of samples (rows).
    slope, intercept : float
        Coefficients of the underlying line.
    noise : float
        Standard deviation of the Gaussian noise added to the targets.
    random_seed : int, optional
        Random seed for reproducibility.

    Returns
    -------
    pd.DataFrame
        Columns "feature" (x_i = i / n_samples) and "target".
    """
    rng = np.random.RandomState(random_seed)
    x = np.arange(n_samples, dtype=float) / n_samples
    y = slope * x + intercept + rng.normal(scale=noise, size=n_samples)
    return pd.DataFrame({"feature": x, "target": y})


def to_arrays(df, target="target"):
    """Split a DataFrame into an (n, d) feature matrix and an (n, 1) column."""
    X = df.drop(target, axis=1).to_numpy(dtype=float)
    y = df[target].to_numpy(dtype=float).reshape(-1, 1)
    return X, y
