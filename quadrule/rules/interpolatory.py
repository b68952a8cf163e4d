"""Closed-form interpolatory rules on [-1, 1].

Chebyshev, Clenshaw-Curtis and Fejer rules have trigonometric formulas
for their points and weights.  The Newton-Cotes weights are integrals of
the Lagrange basis polynomials over equally spaced, hence rational,
nodes; they are computed exactly with `fractions.Fraction` and rounded
once at the end.
"""

from __future__ import annotations

from fractions import Fraction

import numpy as np

from quadrule.types import Rule
from quadrule.utils import check_order, make_symmetric

__all__ = [
    "chebyshev1_compute",
    "chebyshev2_compute",
    "chebyshev3_compute",
    "clenshaw_curtis_compute_points",
    "clenshaw_curtis_compute_weights",
    "clenshaw_curtis_compute",
    "fejer1_compute",
    "fejer2_compute",
    "ncc_compute",
    "nco_compute",
    "ncoh_compute",
    "interpolatory_exactness",
]


def chebyshev1_compute(order: int) -> Rule:
    """Gauss-Chebyshev rule of the first kind, for the weight
    1 / sqrt(1 - x**2) on [-1, 1].  All weights equal pi / order."""
    n = check_order(order)
    x = np.cos(np.pi * (2 * n - 1 - 2 * np.arange(n)) / (2 * n))
    return make_symmetric(x, np.full(n, np.pi / n))


def chebyshev2_compute(order: int) -> Rule:
    """Gauss-Chebyshev rule of the second kind, for the weight
    sqrt(1 - x**2) on [-1, 1]."""
    n = check_order(order)
    angle = np.pi * (n - np.arange(n)) / (n + 1)
    return make_symmetric(np.cos(angle), np.pi / (n + 1) * np.sin(angle) ** 2)


def chebyshev3_compute(order: int) -> Rule:
    """Gauss-Lobatto-Chebyshev rule, for the weight 1 / sqrt(1 - x**2) on
    [-1, 1] with both endpoints among the points."""
    n = check_order(order)
    if n == 1:
        return Rule(np.array([0.0]), np.array([np.pi]))
    x = np.cos(np.pi * (n - 1 - np.arange(n)) / (n - 1))
    w = np.full(n, np.pi / (n - 1))
    w[0] = w[-1] = np.pi / (2 * (n - 1))
    x, w = make_symmetric(x, w)
    x[0] = -1.0
    x[-1] = 1.0
    return Rule(x, w)


def _cosine_sum(theta: np.ndarray, j: np.ndarray, coeffs: np.ndarray) -> np.ndarray:
    # sum_j coeffs[j] * cos(j * theta), for every theta
    return np.cos(np.outer(theta, j)) @ coeffs


def clenshaw_curtis_compute_points(order: int) -> np.ndarray:
    """The Clenshaw-Curtis points, the extrema of the Chebyshev polynomial
    T_{order - 1}, in ascending order.  A single point is placed at 0."""
    n = check_order(order)
    if n == 1:
        return np.array([0.0])
    x = np.cos(np.pi * (n - 1 - np.arange(n)) / (n - 1))
    # Make 'x' perfectly anti-symmetric, with exact endpoints.
    x = (x - x[::-1]) / 2
    x[0] = -1.0
    x[-1] = 1.0
    if n % 2:
        x[n // 2] = 0.0
    return x


def clenshaw_curtis_compute_weights(order: int) -> np.ndarray:
    n = check_order(order)
    if n == 1:
        return np.array([2.0])
    theta = np.pi * (n - 1 - np.arange(n)) / (n - 1)
    j = np.arange(1, (n - 1) // 2 + 1)
    b = np.where(2 * j == n - 1, 1.0, 2.0)
    w = 1.0 - _cosine_sum(theta, 2 * j, b / (4 * j**2 - 1))
    w[0] /= n - 1
    w[1:-1] *= 2.0 / (n - 1)
    w[-1] /= n - 1
    return (w + w[::-1]) / 2


def clenshaw_curtis_compute(order: int) -> Rule:
    """Clenshaw-Curtis rule for the integral of f(x) over [-1, 1].

    The rules are nested for orders 1, 3, 5, 9, 17, ... and exact for
    polynomials of degree ``order - 1`` (``order`` if it is odd).
    """
    return Rule(
        clenshaw_curtis_compute_points(order), clenshaw_curtis_compute_weights(order)
    )


def fejer1_compute(order: int) -> Rule:
    """Fejer's first rule on [-1, 1]: the points are the roots of the
    Chebyshev polynomial T_order, the weight function is 1."""
    n = check_order(order)
    if n == 1:
        return Rule(np.array([0.0]), np.array([2.0]))
    theta = np.pi * (2 * n - 1 - 2 * np.arange(n)) / (2 * n)
    j = np.arange(1, n // 2 + 1)
    w = 1.0 - _cosine_sum(theta, 2 * j, 2.0 / (4 * j**2 - 1))
    return make_symmetric(np.cos(theta), 2.0 * w / n)


def fejer2_compute(order: int) -> Rule:
    """Fejer's second rule on [-1, 1], whose points are the interior
    points of the Clenshaw-Curtis rule of order ``order + 2``."""
    n = check_order(order)
    if n == 1:
        return Rule(np.array([0.0]), np.array([2.0]))
    theta = np.pi * (n - np.arange(n)) / (n + 1)
    j = np.arange(1, (n - 1) // 2 + 1)
    w = 1.0 - _cosine_sum(theta, 2 * j, 2.0 / (4 * j**2 - 1))
    p = 2 * ((n + 1) // 2) - 1
    w -= np.cos((p + 1) * theta) / p
    return make_symmetric(np.cos(theta), 2.0 * w / (n + 1))


def _lagrange_weights(nodes: list[Fraction]) -> list[Fraction]:
    """Integrate the Lagrange basis polynomials of 'nodes' over [-1, 1]."""
    weights = []
    for i, xi in enumerate(nodes):
        # Monomial coefficients of prod_{j != i} (x - x_j) / (x_i - x_j).
        c = [Fraction(1)]
        for j, xj in enumerate(nodes):
            if j == i:
                continue
            scale = xi - xj
            new = (len(c) + 1) * [Fraction(0)]
            for k, ck in enumerate(c):
                new[k + 1] += ck / scale
                new[k] -= ck * xj / scale
            c = new
        # Only the even powers survive on a symmetric interval.
        weights.append(2 * sum(c[k] / (k + 1) for k in range(0, len(c), 2)))
    return weights


def _newton_cotes(nodes: list[Fraction]) -> Rule:
    weights = _lagrange_weights(nodes)
    return Rule(np.array(nodes, dtype=float), np.array(weights, dtype=float))


def ncc_compute(order: int) -> Rule:
    """Closed Newton-Cotes rule on [-1, 1]: equally spaced points including
    the endpoints.

    The weights become negative from order 9 on, which makes high orders
    numerically useless.
    """
    n = check_order(order)
    if n == 1:
        return Rule(np.array([0.0]), np.array([2.0]))
    return _newton_cotes([Fraction(2 * i, n - 1) - 1 for i in range(n)])


def nco_compute(order: int) -> Rule:
    """Open Newton-Cotes rule on [-1, 1]: the interior points of the closed
    rule of order ``order + 2``."""
    n = check_order(order)
    return _newton_cotes([Fraction(2 * (i + 1), n + 1) - 1 for i in range(n)])


def ncoh_compute(order: int) -> Rule:
    """Open half Newton-Cotes rule on [-1, 1]: the midpoints of 'order'
    equal subintervals."""
    n = check_order(order)
    return _newton_cotes([Fraction(2 * i + 1, n) - 1 for i in range(n)])


def interpolatory_exactness(order: int) -> int:
    """Polynomial degree integrated exactly by a symmetric interpolatory
    rule: ``order - 1``, and one more for odd orders by symmetry."""
    return order if order % 2 else order - 1
