"""Scalar special functions shared by the rule builders.

These are thin wrappers around `scipy.special` so that every module
goes through the same primitives and returns plain Python floats.
"""

from __future__ import annotations

import math

import numpy as np
import scipy.special

__all__ = ["epsilon", "gamma", "gammaln", "psi", "hyper_2f1", "factorial2"]


def epsilon() -> float:
    """Return the float64 machine epsilon, the distance from 1.0 to the
    next larger representable number."""
    return float(np.spacing(1.0))


def gamma(x: float) -> float:
    return float(scipy.special.gamma(x))


def gammaln(x: float) -> float:
    """Logarithm of the absolute value of `gamma`, finite where `gamma`
    overflows."""
    return float(scipy.special.gammaln(x))


def psi(x: float) -> float:
    """The digamma function, the logarithmic derivative of `gamma`."""
    return float(scipy.special.psi(x))


def hyper_2f1(a: float, b: float, c: float, x: float) -> float:
    """Evaluate the Gauss hypergeometric function 2F1(a, b; c; x).

    The series converges for |x| < 1 and is continued analytically
    elsewhere; the exact-integral helpers only use it at x = -1.
    """
    return float(scipy.special.hyp2f1(a, b, c, x))


def factorial2(n: int) -> float:
    """Return the double factorial n!!, with (-1)!! = 0!! = 1."""
    if n < -1:
        raise ValueError(f"The double factorial is undefined for n={n}.")
    return float(math.prod(range(n, 0, -2)))
