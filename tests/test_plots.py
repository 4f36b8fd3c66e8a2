import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from sgdlin import L2_PENALTY, ShapeError, Tanh, new_sgd
from sgdlin.fake_data import generate_linear_data, to_arrays
from sgdlin.metrics import learning_curve
from sgdlin.viz import plot_fit, plot_learning_curve


def test_plot_fit_writes_png(tmp_path):
    X, y = to_arrays(generate_linear_data(random_seed=0))
    sgd = new_sgd(L2_PENALTY, 0.01, 500, 0.1, activation=Tanh(), random_state=0)
    sgd.fit(X, y)
    out = tmp_path / "fit.png"
    plot_fit(sgd, X, y, str(out))
    assert out.exists() and out.stat().st_size > 0


def test_plot_fit_needs_one_feature(tmp_path):
    X, y = to_arrays(generate_linear_data(random_seed=0))
    X2 = np.hstack([X, X])
    sgd = new_sgd(L2_PENALTY, 0.01, 50, 0.1, random_state=0).fit(X2, y)
    with pytest.raises(ShapeError):
        plot_fit(sgd, X2, y, str(tmp_path / "fit.png"))


def test_plot_learning_curve_writes_png(tmp_path):
    X, y = to_arrays(generate_linear_data(random_seed=0))
    mses = learning_curve(new_sgd(L2_PENALTY, 0.01, 50, 0.1, random_state=0), X, y, 5)
    out = tmp_path / "curve.png"
    plot_learning_curve(mses, str(out))
    assert out.exists()
