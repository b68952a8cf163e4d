import math

import numpy as np
import pytest
from hypothesis import given
import hypothesis.strategies as st

from quadrule.exceptions import (
    InvalidOrderError,
    NewtonConvergenceError,
    NewtonConvergenceWarning,
)
from quadrule.rules import gauss, stroud_secrest
from quadrule.rules.interpolatory import chebyshev1_compute, chebyshev2_compute
from quadrule.rules.stroud_secrest import (
    gegenbauer_compute,
    gen_laguerre_ss_compute,
    hermite_ss_compute,
    jacobi_ss_compute,
    laguerre_ss_compute,
    legendre_dr_compute,
    lobatto_compute,
    radau_compute,
)


def assert_same_rule(rule, other, rtol=1e-12, atol=1e-13):
    np.testing.assert_allclose(rule.points, other.points, rtol=rtol, atol=atol)
    np.testing.assert_allclose(rule.weights, other.weights, rtol=rtol, atol=atol)


@given(st.integers(1, 30))
def test_legendre_dr_agrees_with_eigenvalue_method(order):
    assert_same_rule(legendre_dr_compute(order), gauss.legendre_compute(order))


@given(st.integers(1, 20))
def test_hermite_ss_agrees_with_eigenvalue_method(order):
    assert_same_rule(hermite_ss_compute(order), gauss.hermite_compute(order))


@given(st.integers(1, 15))
def test_laguerre_ss_agrees_with_eigenvalue_method(order):
    assert_same_rule(
        laguerre_ss_compute(order), gauss.laguerre_compute(order), atol=1e-15
    )


@pytest.mark.parametrize("alpha", [-0.5, 0.0, 0.5, 2.0])
@pytest.mark.parametrize("order", [1, 2, 3, 4, 7, 10])
def test_gen_laguerre_ss_agrees_with_eigenvalue_method(order, alpha):
    assert_same_rule(
        gen_laguerre_ss_compute(order, alpha),
        gauss.gen_laguerre_compute(order, alpha),
        atol=1e-15,
    )


@pytest.mark.parametrize(
    "alpha, beta", [(0.0, 0.0), (0.5, 1.5), (-0.5, 0.25), (1.0, 1.0), (2.0, -0.5)]
)
@pytest.mark.parametrize("order", [1, 2, 3, 4, 5, 8, 11])
def test_jacobi_ss_agrees_with_eigenvalue_method(order, alpha, beta):
    assert_same_rule(
        jacobi_ss_compute(order, alpha, beta), gauss.jacobi_compute(order, alpha, beta)
    )


@pytest.mark.parametrize("alpha", [-0.5, 0.0, 0.5, 1.5, 3.0])
@pytest.mark.parametrize("order", [1, 2, 3, 6, 9, 12])
def test_gegenbauer_agrees_with_jacobi(order, alpha):
    assert_same_rule(
        gegenbauer_compute(order, alpha), gauss.jacobi_compute(order, alpha, alpha)
    )


@given(st.integers(1, 12))
def test_gegenbauer_special_cases(order):
    assert_same_rule(gegenbauer_compute(order, -0.5), chebyshev1_compute(order))
    assert_same_rule(gegenbauer_compute(order, 0.5), chebyshev2_compute(order))


@pytest.mark.parametrize(
    "rule",
    [
        legendre_dr_compute(9),
        hermite_ss_compute(9),
        gegenbauer_compute(9, 0.25),
        jacobi_ss_compute(9, 1.5, 1.5),
        lobatto_compute(9),
    ],
)
def test_symmetric_rules_are_exactly_symmetric(rule):
    x, w = rule
    assert np.array_equal(x, -x[::-1])
    assert np.array_equal(w, w[::-1])
    assert x[4] == 0.0


def test_lobatto_5():
    x, w = lobatto_compute(5)
    s = math.sqrt(3 / 7)
    np.testing.assert_allclose(x, [-1, -s, 0, s, 1], atol=1e-15)
    np.testing.assert_allclose(w, [1 / 10, 49 / 90, 32 / 45, 49 / 90, 1 / 10])
    assert x[0] == -1.0
    assert x[-1] == 1.0


@given(st.integers(2, 30))
def test_lobatto(order):
    x, w = lobatto_compute(order)
    assert (x[0], x[-1]) == (-1.0, 1.0)
    assert np.all(np.diff(x) > 0)
    assert np.all(w > 0)
    assert w.sum() == pytest.approx(2.0, rel=1e-13)
    assert w[0] == pytest.approx(2 / (order * (order - 1)))


def test_lobatto_needs_two_points():
    with pytest.raises(InvalidOrderError):
        lobatto_compute(1)


def test_radau_3():
    x, w = radau_compute(3)
    s6 = math.sqrt(6)
    np.testing.assert_allclose(x, [-1, (1 - s6) / 5, (1 + s6) / 5], atol=1e-15)
    np.testing.assert_allclose(w, [2 / 9, (16 + s6) / 18, (16 - s6) / 18])
    assert x[0] == -1.0


@given(st.integers(1, 30))
def test_radau(order):
    x, w = radau_compute(order)
    assert x[0] == -1.0
    assert np.all(np.diff(x) > 0)
    assert x[-1] < 1.0
    assert np.all(w > 0)
    assert w.sum() == pytest.approx(2.0, rel=1e-13)


@pytest.mark.parametrize("compute", [lobatto_compute, radau_compute])
def test_simultaneous_iteration_policy(compute, monkeypatch):
    monkeypatch.setattr(stroud_secrest, "MAX_SIMULTANEOUS_STEPS", 1)
    with pytest.raises(NewtonConvergenceError):
        compute(12)
    with pytest.warns(NewtonConvergenceWarning):
        x, w = compute(12, strict=False)
    assert len(x) == len(w) == 12


@pytest.mark.parametrize(
    "compute, args",
    [
        (gegenbauer_compute, (-1.0,)),
        (jacobi_ss_compute, (0.0, -1.5)),
        (gen_laguerre_ss_compute, (math.nan,)),
    ],
)
def test_invalid_parameters(compute, args):
    with pytest.raises(ValueError):
        compute(3, *args)


def assert_valid_high_order_rule(rule, reference):
    x, w = rule
    assert np.all(np.diff(x) > 0)
    assert np.all(w > 0)
    # Weights at the far end are tiny; compare them on the scale of the total.
    assert_same_rule(rule, reference, rtol=1e-9, atol=1e-12)


@pytest.mark.parametrize("order", [100, 200])
def test_hermite_ss_high_order(order):
    assert_valid_high_order_rule(
        hermite_ss_compute(order), gauss.hermite_compute(order)
    )


def test_laguerre_ss_high_order():
    assert_valid_high_order_rule(laguerre_ss_compute(100), gauss.laguerre_compute(100))
    assert_valid_high_order_rule(
        gen_laguerre_ss_compute(100, 1.5), gauss.gen_laguerre_compute(100, 1.5)
    )


def test_jacobi_ss_repeated_root_is_reported():
    # The guesses for the two smaller roots both lead to -0.99948574...,
    # and the root near -0.81 is never found.
    with pytest.raises(NewtonConvergenceError):
        jacobi_ss_compute(3, 10.0, -0.99)
    with pytest.warns(NewtonConvergenceWarning):
        jacobi_ss_compute(3, 10.0, -0.99, strict=False)
