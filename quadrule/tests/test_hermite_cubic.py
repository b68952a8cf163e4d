import numpy as np
import pytest
from hypothesis import given
import hypothesis.strategies as st

from quadrule.exceptions import InvalidOrderError, InvalidParameterError
from quadrule.rules.hermite_cubic import (
    hc_compute_weights_from_points,
    hce_compute,
    hcc_compute,
    hermite_cubic_integrate,
)

even_orders = st.integers(2, 30).map(lambda n: 2 * n)


def f(x):
    return x**3 - 2 * x**2 + x + 1


def df(x):
    return 3 * x**2 - 4 * x + 1


@pytest.mark.parametrize("compute", [hcc_compute, hce_compute])
@given(order=even_orders)
def test_cubics_are_integrated_exactly(compute, order):
    rule = compute(order)
    assert len(rule.points) == len(rule.weights) == order
    assert hermite_cubic_integrate(rule, f, df) == pytest.approx(2 / 3, rel=1e-13)


@pytest.mark.parametrize("compute", [hcc_compute, hce_compute])
def test_points_come_in_pairs(compute):
    x, w = compute(8)
    assert np.array_equal(x[::2], x[1::2])
    assert (x[0], x[-1]) == (-1.0, 1.0)
    assert w[::2].sum() == pytest.approx(2.0)


def test_four_points():
    x, w = hcc_compute(4)
    assert list(x) == [-1.0, -1.0, 1.0, 1.0]
    np.testing.assert_allclose(w, [1.0, 1 / 3, 1.0, -1 / 3])


def test_weights_from_points():
    w = hc_compute_weights_from_points([0.0, 1.0, 3.0])
    np.testing.assert_allclose(w, [0.5, 1 / 12, 1.5, 4 / 12 - 1 / 12, 1.0, -4 / 12])


def test_converges_for_smooth_functions():
    rule = hce_compute(40)
    approx = hermite_cubic_integrate(rule, np.exp, np.exp)
    assert approx == pytest.approx(np.exp(1) - np.exp(-1), rel=1e-6)


@pytest.mark.parametrize("order", [2, 5, 7])
def test_invalid_order(order):
    with pytest.raises(InvalidOrderError):
        hcc_compute(order)
    with pytest.raises(InvalidOrderError):
        hce_compute(order)


@pytest.mark.parametrize("xhalf", [[0.0], [0.0, 0.0], [1.0, 0.0, 2.0]])
def test_invalid_nodes(xhalf):
    with pytest.raises(InvalidParameterError):
        hc_compute_weights_from_points(xhalf)
