import math

import numpy as np
import pytest
from hypothesis import given
import hypothesis.strategies as st

from quadrule.recurrence import (
    chebyshev1_matrix,
    chebyshev2_matrix,
    gegenbauer_matrix,
    gen_hermite_matrix,
    gen_laguerre_matrix,
    hermite_matrix,
    jacobi_matrix,
    laguerre_matrix,
    legendre_matrix,
)
from quadrule.tridiagonal import gauss_from_jacobi_matrix

orders = st.integers(1, 20)
exponents = st.floats(-0.95, 10)


@pytest.mark.parametrize(
    "builder",
    [
        legendre_matrix,
        chebyshev1_matrix,
        chebyshev2_matrix,
        laguerre_matrix,
        hermite_matrix,
    ],
)
@given(order=orders)
def test_shapes(builder, order):
    zemu, diagonal, offdiagonal = builder(order)
    assert zemu > 0
    assert diagonal.shape == offdiagonal.shape == (order,)
    assert np.all(offdiagonal[: order - 1] > 0)


def test_legendre_matrix():
    zemu, d, e = legendre_matrix(3)
    assert zemu == 2.0
    assert np.array_equal(d, np.zeros(3))
    np.testing.assert_allclose(e[:2], [1 / math.sqrt(3), 2 / math.sqrt(15)])


@given(order=orders)
def test_jacobi_reduces_to_legendre(order):
    expected = legendre_matrix(order)
    zemu, d, e = jacobi_matrix(order, 0.0, 0.0)
    assert math.isclose(zemu, expected.zemu)
    np.testing.assert_allclose(d, expected.diagonal, atol=1e-15)
    np.testing.assert_allclose(e[: order - 1], expected.offdiagonal[: order - 1])


@given(order=orders)
def test_jacobi_reduces_to_chebyshev(order):
    for alpha, expected in [
        (-0.5, chebyshev1_matrix(order)),
        (0.5, chebyshev2_matrix(order)),
    ]:
        zemu, d, e = jacobi_matrix(order, alpha, alpha)
        assert math.isclose(zemu, expected.zemu)
        np.testing.assert_allclose(d, 0, atol=1e-15)
        np.testing.assert_allclose(e[: order - 1], expected.offdiagonal[: order - 1])


@pytest.mark.parametrize("alpha, beta", [(0.5, -0.5), (-0.5, 0.5), (-0.25, -0.75)])
def test_jacobi_cancelled_first_entries(alpha, beta):
    # alpha + beta is 0 or -1, where the general formulas are 0/0.
    zemu, d, e = jacobi_matrix(4, alpha, beta)
    assert np.all(np.isfinite(d))
    assert np.all(np.isfinite(e))
    assert math.isclose(d[0], (beta - alpha) / (alpha + beta + 2))


@given(order=orders, alpha=exponents)
def test_gegenbauer_is_symmetric_jacobi(order, alpha):
    a = gegenbauer_matrix(order, alpha)
    b = jacobi_matrix(order, alpha, alpha)
    assert a.zemu == b.zemu
    assert np.array_equal(a.diagonal, b.diagonal)
    assert np.array_equal(a.offdiagonal, b.offdiagonal)


@given(order=orders)
def test_generalized_families_reduce(order):
    for generalized, classical in [
        (gen_laguerre_matrix(order, 0.0), laguerre_matrix(order)),
        (gen_hermite_matrix(order, 0.0), hermite_matrix(order)),
    ]:
        assert math.isclose(generalized.zemu, classical.zemu)
        np.testing.assert_allclose(generalized.diagonal, classical.diagonal)
        np.testing.assert_allclose(generalized.offdiagonal, classical.offdiagonal)


def test_gen_hermite_offdiagonal_alternates():
    _, _, e = gen_hermite_matrix(4, 1.0)
    np.testing.assert_allclose(e**2, [1.0, 1.0, 2.0, 2.0])


@given(order=st.integers(1, 12))
def test_chebyshev_points_from_matrix(order):
    x, w = gauss_from_jacobi_matrix(chebyshev1_matrix(order))
    k = np.arange(order)
    expected = np.sort(np.cos((2 * k + 1) * np.pi / (2 * order)))
    np.testing.assert_allclose(x, expected, atol=1e-14)
    np.testing.assert_allclose(w, np.pi / order, rtol=1e-13)
