"""Jacobi matrices of the classical orthogonal polynomial families.

Each builder returns the zero-th moment of the weight function together
with the diagonal and subdiagonal of the symmetric tridiagonal matrix
formed from the three-term recurrence of the orthonormal polynomials.
The subdiagonal has the same length as the diagonal; its last entry is
not part of the matrix.

The builders trust their arguments.  The range checks on the order and
on the family parameters live in `quadrule.rules`.
"""

from __future__ import annotations

import math
from typing import NamedTuple

import numpy as np

from quadrule.special import gamma

__all__ = [
    "JacobiMatrix",
    "legendre_matrix",
    "chebyshev1_matrix",
    "chebyshev2_matrix",
    "gegenbauer_matrix",
    "jacobi_matrix",
    "laguerre_matrix",
    "gen_laguerre_matrix",
    "hermite_matrix",
    "gen_hermite_matrix",
]


class JacobiMatrix(NamedTuple):
    zemu: float
    diagonal: np.ndarray
    offdiagonal: np.ndarray


def legendre_matrix(order: int) -> JacobiMatrix:
    i = np.arange(1, order + 1, dtype=float)
    return JacobiMatrix(2.0, np.zeros(order), i / np.sqrt(4 * i**2 - 1))


def chebyshev1_matrix(order: int) -> JacobiMatrix:
    offdiagonal = np.full(order, 0.5)
    offdiagonal[0] = math.sqrt(0.5)
    return JacobiMatrix(math.pi, np.zeros(order), offdiagonal)


def chebyshev2_matrix(order: int) -> JacobiMatrix:
    return JacobiMatrix(math.pi / 2, np.zeros(order), np.full(order, 0.5))


def gegenbauer_matrix(order: int, alpha: float) -> JacobiMatrix:
    """The weight (1 - x**2)**alpha on [-1, 1], i.e. Jacobi with beta = alpha."""
    return jacobi_matrix(order, alpha, alpha)


def jacobi_matrix(order: int, alpha: float, beta: float) -> JacobiMatrix:
    """The weight (1 - x)**alpha * (1 + x)**beta on [-1, 1]."""
    ab = alpha + beta
    zemu = 2.0 ** (ab + 1.0) * gamma(alpha + 1.0) * gamma(beta + 1.0) / gamma(ab + 2.0)

    diagonal = np.empty(order)
    offdiagonal = np.empty(order)

    # The first entries are written in cancelled form: the general
    # expressions are 0/0 when alpha + beta is 0 or -1.
    abi = 2.0 + ab
    diagonal[0] = (beta - alpha) / abi
    offdiagonal[0] = 4.0 * (1.0 + alpha) * (1.0 + beta) / ((abi + 1.0) * abi * abi)

    a2b2 = beta**2 - alpha**2
    for i in range(2, order + 1):
        abi = 2.0 * i + ab
        diagonal[i - 1] = a2b2 / ((abi - 2.0) * abi)
        abi = abi**2
        offdiagonal[i - 1] = (
            4.0 * i * (i + alpha) * (i + beta) * (i + ab) / ((abi - 1.0) * abi)
        )

    return JacobiMatrix(zemu, diagonal, np.sqrt(offdiagonal))


def laguerre_matrix(order: int) -> JacobiMatrix:
    """The weight exp(-x) on [0, inf)."""
    i = np.arange(1, order + 1, dtype=float)
    return JacobiMatrix(1.0, 2 * i - 1, i)


def gen_laguerre_matrix(order: int, alpha: float) -> JacobiMatrix:
    """The weight x**alpha * exp(-x) on [0, inf)."""
    i = np.arange(1, order + 1, dtype=float)
    return JacobiMatrix(
        gamma(alpha + 1.0), 2 * i - 1 + alpha, np.sqrt(i * (i + alpha))
    )


def hermite_matrix(order: int) -> JacobiMatrix:
    """The weight exp(-x**2) on (-inf, inf)."""
    i = np.arange(1, order + 1, dtype=float)
    return JacobiMatrix(math.sqrt(math.pi), np.zeros(order), np.sqrt(i / 2))


def gen_hermite_matrix(order: int, alpha: float) -> JacobiMatrix:
    """The weight |x|**alpha * exp(-x**2) on (-inf, inf)."""
    i = np.arange(1, order + 1, dtype=float)
    # Odd indices carry the alpha shift.
    b = np.where(i % 2 == 1, i + alpha, i) / 2
    return JacobiMatrix(gamma((alpha + 1.0) / 2.0), np.zeros(order), np.sqrt(b))
