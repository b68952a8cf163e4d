import math

import numpy as np
import pytest
from hypothesis import given
import hypothesis.strategies as st

from quadrule.integrals import legendre_integral
from quadrule.rules.interpolatory import (
    chebyshev1_compute,
    chebyshev2_compute,
    chebyshev3_compute,
    clenshaw_curtis_compute,
    clenshaw_curtis_compute_points,
    clenshaw_curtis_compute_weights,
    fejer1_compute,
    fejer2_compute,
    interpolatory_exactness,
    ncc_compute,
    nco_compute,
    ncoh_compute,
)

all_rules = [
    chebyshev1_compute,
    chebyshev2_compute,
    chebyshev3_compute,
    clenshaw_curtis_compute,
    fejer1_compute,
    fejer2_compute,
    ncc_compute,
    nco_compute,
    ncoh_compute,
]


def test_clenshaw_curtis_5():
    x, w = clenshaw_curtis_compute(5)
    s = math.sqrt(0.5)
    assert list(x) == [-1.0, -x[3], 0.0, x[3], 1.0]
    assert x[3] == pytest.approx(s, abs=1e-15)
    np.testing.assert_allclose(w, np.array([1, 8, 12, 8, 1]) / 15, rtol=1e-14)


def test_clenshaw_curtis_order_1():
    x, w = clenshaw_curtis_compute(1)
    assert list(x) == [0.0]
    assert list(w) == [2.0]


@given(st.integers(2, 65))
def test_clenshaw_curtis_points(order):
    x = clenshaw_curtis_compute_points(order)
    assert (x[0], x[-1]) == (-1.0, 1.0)
    assert np.array_equal(x, -x[::-1])
    assert np.all(np.diff(x) > 0)
    if order % 2:
        assert x[order // 2] == 0.0


@pytest.mark.parametrize("level", range(1, 6))
def test_clenshaw_curtis_nesting(level):
    coarse = clenshaw_curtis_compute_points(2 ** (level - 1) + 1)
    fine = clenshaw_curtis_compute_points(2**level + 1)
    np.testing.assert_allclose(fine[::2], coarse, atol=1e-15)


@given(st.integers(1, 65))
def test_clenshaw_curtis_weights(order):
    w = clenshaw_curtis_compute_weights(order)
    assert w.sum() == pytest.approx(2.0, rel=1e-14)
    assert np.all(w > 0)


@pytest.mark.parametrize("compute", all_rules)
@given(order=st.integers(1, 12))
def test_ascending_and_symmetric(compute, order):
    x, w = compute(order)
    assert len(x) == len(w) == order
    assert np.all(np.diff(x) > 0)
    assert np.array_equal(x, -x[::-1])
    assert np.array_equal(w, w[::-1])


@pytest.mark.parametrize(
    "compute", [clenshaw_curtis_compute, fejer1_compute, fejer2_compute]
)
@given(order=st.integers(1, 40))
def test_legendre_moments(compute, order):
    x, w = compute(order)
    for k in range(interpolatory_exactness(order) + 1):
        assert np.dot(w, x**k) == pytest.approx(legendre_integral(k), abs=1e-13)


def test_chebyshev_closed_forms():
    x, w = chebyshev1_compute(3)
    np.testing.assert_allclose(x, [-math.sqrt(0.75), 0, math.sqrt(0.75)], atol=1e-15)
    np.testing.assert_allclose(w, np.pi / 3)

    x, w = chebyshev2_compute(3)
    np.testing.assert_allclose(x, [-math.sqrt(0.5), 0, math.sqrt(0.5)], atol=1e-15)
    np.testing.assert_allclose(w, [np.pi / 8, np.pi / 4, np.pi / 8])

    x, w = chebyshev3_compute(3)
    assert list(x) == [-1.0, 0.0, 1.0]
    np.testing.assert_allclose(w, [np.pi / 4, np.pi / 2, np.pi / 4])

    assert list(chebyshev3_compute(1).weights) == [np.pi]


def test_newton_cotes_closed():
    np.testing.assert_allclose(ncc_compute(2).weights, [1, 1])
    np.testing.assert_allclose(ncc_compute(3).weights, [1 / 3, 4 / 3, 1 / 3])
    np.testing.assert_allclose(
        ncc_compute(5).weights, np.array([7, 32, 12, 32, 7]) / 45
    )
    x, w = ncc_compute(1)
    assert (list(x), list(w)) == ([0.0], [2.0])


def test_newton_cotes_open():
    x, w = nco_compute(1)
    assert (list(x), list(w)) == ([0.0], [2.0])
    x, w = nco_compute(2)
    np.testing.assert_allclose(x, [-1 / 3, 1 / 3])
    np.testing.assert_allclose(w, [1, 1])
    x, w = nco_compute(3)
    np.testing.assert_allclose(w, [4 / 3, -2 / 3, 4 / 3])

    x, w = ncoh_compute(2)
    np.testing.assert_allclose(x, [-0.5, 0.5])
    np.testing.assert_allclose(w, [1, 1])


def test_newton_cotes_weights_turn_negative():
    assert np.any(ncc_compute(9).weights < 0)
    assert np.all(ncc_compute(8).weights > 0)


@pytest.mark.parametrize("order, exactness", [(1, 1), (2, 1), (5, 5), (6, 5)])
def test_interpolatory_exactness(order, exactness):
    assert interpolatory_exactness(order) == exactness


def test_clenshaw_curtis_4():
    x, w = clenshaw_curtis_compute(4)
    assert (x[0], x[-1]) == (-1.0, 1.0)
    np.testing.assert_allclose(x, [-1.0, -0.5, 0.5, 1.0], atol=1e-15)
    np.testing.assert_allclose(w, [1 / 9, 8 / 9, 8 / 9, 1 / 9], rtol=1e-14)
