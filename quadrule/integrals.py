"""Exact weighted integrals of monomials.

``*_integral(k, ...)`` returns the integral of x**k times the weight
function of the family, which is what a rule of that family must
reproduce up to its degree of exactness.
"""

from __future__ import annotations

import math

import numpy as np

from quadrule.special import factorial2, gamma, hyper_2f1
from quadrule.types import Rule

__all__ = [
    "legendre_integral",
    "chebyshev1_integral",
    "chebyshev2_integral",
    "gegenbauer_integral",
    "jacobi_integral",
    "laguerre_integral",
    "gen_laguerre_integral",
    "hermite_integral",
    "gen_hermite_integral",
    "hermite_probabilist_integral",
    "monomial_quadrature",
]


def legendre_integral(k: int) -> float:
    """Integral of x**k over [-1, 1]."""
    if k % 2:
        return 0.0
    return 2.0 / (k + 1)


def gegenbauer_integral(k: int, alpha: float) -> float:
    """Integral of x**k * (1 - x**2)**alpha over [-1, 1].

    For even k this is the Beta function B((k + 1) / 2, alpha + 1).
    """
    if k % 2:
        return 0.0
    a = (k + 1) / 2.0
    return gamma(a) * gamma(alpha + 1.0) / gamma(a + alpha + 1.0)


def chebyshev1_integral(k: int) -> float:
    """Integral of x**k / sqrt(1 - x**2) over [-1, 1]."""
    if k % 2:
        return 0.0
    return math.pi * factorial2(k - 1) / factorial2(k)


def chebyshev2_integral(k: int) -> float:
    """Integral of x**k * sqrt(1 - x**2) over [-1, 1]."""
    if k % 2:
        return 0.0
    return math.pi * factorial2(k - 1) / factorial2(k + 2)


def jacobi_integral(k: int, alpha: float, beta: float) -> float:
    """Integral of x**k * (1 - x)**alpha * (1 + x)**beta over [-1, 1].

    Splitting the interval at 0 gives two incomplete Beta functions, each
    expressible through 2F1 at -1.
    """
    c = float(k)
    s = 1.0 if k % 2 == 0 else -1.0
    value1 = hyper_2f1(-alpha, 1.0 + c, 2.0 + beta + c, -1.0)
    value2 = hyper_2f1(-beta, 1.0 + c, 2.0 + alpha + c, -1.0)
    return gamma(1.0 + c) * (
        s * gamma(1.0 + beta) * value1 / gamma(2.0 + beta + c)
        + gamma(1.0 + alpha) * value2 / gamma(2.0 + alpha + c)
    )


def laguerre_integral(k: int) -> float:
    """Integral of x**k * exp(-x) over [0, inf), i.e. k!."""
    return float(math.factorial(k))


def gen_laguerre_integral(k: int, alpha: float) -> float:
    """Integral of x**k * x**alpha * exp(-x) over [0, inf)."""
    return gamma(k + alpha + 1.0)


def hermite_integral(k: int) -> float:
    """Integral of x**k * exp(-x**2) over the real line."""
    if k % 2:
        return 0.0
    return factorial2(k - 1) * math.sqrt(math.pi) / 2.0 ** (k // 2)


def gen_hermite_integral(k: int, alpha: float) -> float:
    """Integral of x**k * |x|**alpha * exp(-x**2) over the real line."""
    if k % 2:
        return 0.0
    return gamma((k + alpha + 1.0) / 2.0)


def hermite_probabilist_integral(k: int) -> float:
    """The k-th moment of the standard normal distribution."""
    if k % 2:
        return 0.0
    return factorial2(k - 1)


def monomial_quadrature(k: int, rule: Rule, exact: float) -> float:
    """Error of 'rule' applied to x**k, relative to 'exact' unless that
    is zero, in which case the absolute error is returned."""
    x, w = rule
    quad = float(np.dot(w, x**k))
    if exact == 0.0:
        return abs(quad)
    return abs(quad - exact) / abs(exact)
