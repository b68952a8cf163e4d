"""Gauss rules by diagonalization of the Jacobi matrix (Elhay-Kautsky).

Every rule here is obtained from a `~quadrule.recurrence.JacobiMatrix`
with `~quadrule.tridiagonal.gauss_from_jacobi_matrix`.  Rules for weight
functions that are even about the centre of the domain are symmetrized
afterwards, so that the points and weights mirror each other exactly.
"""

from __future__ import annotations

import math

import numpy as np

from quadrule.exceptions import InvalidParameterError
from quadrule.recurrence import (
    gen_hermite_matrix,
    gen_laguerre_matrix,
    hermite_matrix,
    jacobi_matrix,
    laguerre_matrix,
    legendre_matrix,
)
from quadrule.tridiagonal import gauss_from_jacobi_matrix
from quadrule.types import Rule
from quadrule.utils import check_order, check_parameter, make_symmetric

__all__ = [
    "legendre_compute",
    "hermite_compute",
    "gen_hermite_compute",
    "laguerre_compute",
    "gen_laguerre_compute",
    "jacobi_compute",
    "hermite_probabilist_compute",
    "hermite_1_compute",
    "laguerre_1_compute",
    "rescale",
]


def legendre_compute(order: int) -> Rule:
    """Gauss-Legendre rule for the integral of f(x) over [-1, 1].

    Exact for polynomials of degree ``2 * order - 1``.
    """
    order = check_order(order)
    return make_symmetric(*gauss_from_jacobi_matrix(legendre_matrix(order)))


def hermite_compute(order: int) -> Rule:
    """Gauss-Hermite rule for the integral of exp(-x**2) f(x) over the real line."""
    order = check_order(order)
    return make_symmetric(*gauss_from_jacobi_matrix(hermite_matrix(order)))


def gen_hermite_compute(order: int, alpha: float) -> Rule:
    """Generalized Gauss-Hermite rule for the weight |x|**alpha * exp(-x**2).

    Parameters
    ----------
    order : int
        The number of points, at least 1.
    alpha : float
        The exponent of |x|, greater than -1.
    """
    order = check_order(order)
    alpha = check_parameter(alpha, "alpha")
    return make_symmetric(*gauss_from_jacobi_matrix(gen_hermite_matrix(order, alpha)))


def laguerre_compute(order: int) -> Rule:
    """Gauss-Laguerre rule for the integral of exp(-x) f(x) over [0, inf)."""
    order = check_order(order)
    return gauss_from_jacobi_matrix(laguerre_matrix(order))


def gen_laguerre_compute(order: int, alpha: float) -> Rule:
    """Generalized Gauss-Laguerre rule for the weight x**alpha * exp(-x)
    on [0, inf), with alpha > -1."""
    order = check_order(order)
    alpha = check_parameter(alpha, "alpha")
    return gauss_from_jacobi_matrix(gen_laguerre_matrix(order, alpha))


def jacobi_compute(order: int, alpha: float, beta: float) -> Rule:
    """Gauss-Jacobi rule for the weight (1 - x)**alpha * (1 + x)**beta
    on [-1, 1].

    Both exponents must be greater than -1.  For ``alpha == beta`` the
    weight is even and the rule is returned exactly symmetric.
    """
    order = check_order(order)
    alpha = check_parameter(alpha, "alpha")
    beta = check_parameter(beta, "beta")
    x, w = gauss_from_jacobi_matrix(jacobi_matrix(order, alpha, beta))
    if alpha == beta:
        return make_symmetric(x, w)
    return Rule(x, w)


def hermite_probabilist_compute(order: int) -> Rule:
    """Gauss-Hermite rule for the standard normal density
    exp(-x**2 / 2) / sqrt(2 pi), i.e. expectations of f(X) with X ~ N(0, 1).
    """
    x, w = hermite_compute(order)
    return Rule(x * math.sqrt(2.0), w / math.sqrt(math.pi))


def hermite_1_compute(order: int) -> Rule:
    """Gauss-Hermite rule for the unweighted integral of f(x) over the
    real line.

    This is the Gauss-Hermite rule with the weight function folded into
    the weights; it is only accurate for f decaying like exp(-x**2).
    """
    x, w = hermite_compute(order)
    return Rule(x, w * np.exp(x**2))


def laguerre_1_compute(order: int) -> Rule:
    """Gauss-Laguerre rule for the unweighted integral of f(x) over [0, inf)."""
    x, w = laguerre_compute(order)
    return Rule(x, w * np.exp(x))


def rescale(rule: Rule, a: float, b: float) -> Rule:
    """Map a rule for [-1, 1] onto the interval [a, b].

    The points are transformed affinely and the weights scaled by the
    Jacobian ``(b - a) / 2``.
    """
    a = float(a)
    b = float(b)
    if not (math.isfinite(a) and math.isfinite(b)) or not a < b:
        raise InvalidParameterError(
            f"The interval must be finite with a < b, got [{a}, {b}]."
        )
    x, w = rule
    return Rule(((b - a) * x + (a + b)) / 2, w * (b - a) / 2)
