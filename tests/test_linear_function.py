import numpy as np
import pytest

from sgdlin.activations import Tanh
from sgdlin.exceptions import DimensionMismatchError, ShapeError
from sgdlin.function import LinearFunction, add_bias


def test_add_bias_appends_ones_column():
    X = np.array([[1.0, 2.0], [3.0, 4.0]])
    np.testing.assert_array_equal(add_bias(X), [[1.0, 2.0, 1.0], [3.0, 4.0, 1.0]])


def test_input_dims_excludes_bias():
    f = LinearFunction(np.array([1.0, 2.0, 3.0]))
    assert f.input_dims() == 2


def test_bad_weights_rejected():
    with pytest.raises(ShapeError):
        LinearFunction(np.array([1.0]))
    with pytest.raises(ShapeError):
        LinearFunction(np.ones((3, 1)))


def test_predict_is_dot_product_plus_bias():
    f = LinearFunction(np.array([2.0, -1.0, 0.5]))
    assert f.predict(np.array([1.0, 3.0])) == pytest.approx(2.0 - 3.0 + 0.5)
    assert f.predict(np.array([[1.0, 3.0]])) == pytest.approx(-0.5)
    assert f(np.array([0.0, 0.0])) == pytest.approx(0.5)


def test_predict_applies_activation():
    f = LinearFunction(np.array([2.0, -1.0, 0.5]), Tanh())
    assert f.predict(np.array([1.0, 3.0])) == pytest.approx(np.tanh(-0.5))


def test_predict_m_matches_row_wise_predict():
    rng = np.random.RandomState(0)
    for activation in (None, Tanh()):
        f = LinearFunction(rng.normal(size=6), activation)
        X = rng.normal(size=(50, 5))
        bulk = f.predict_m(X)
        assert bulk.shape == (50, 1)
        rows = np.array([f.predict(X[i]) for i in range(X.shape[0])])
        np.testing.assert_allclose(bulk[:, 0], rows, rtol=1e-9, atol=1e-12)


def test_dimension_mismatch():
    f = LinearFunction(np.array([1.0, 2.0, 3.0]))
    with pytest.raises(DimensionMismatchError):
        f.predict(np.array([1.0, 2.0, 3.0]))
    with pytest.raises(DimensionMismatchError):
        f.predict_m(np.ones((4, 1)))
    with pytest.raises(DimensionMismatchError):
        f.net_input(np.ones((4, 2)))


def test_predict_rejects_more_than_one_row():
    f = LinearFunction(np.array([1.0, 2.0, 3.0]))
    with pytest.raises(ShapeError):
        f.predict(np.ones((2, 2)))


def test_net_input_is_pre_activation():
    f = LinearFunction(np.array([1.0, 1.0]), Tanh())
    np.testing.assert_allclose(f.net_input(np.array([[2.0, 1.0]])), [3.0])
