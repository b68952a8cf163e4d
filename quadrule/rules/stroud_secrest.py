"""Gauss rules by Newton iteration on the orthogonal polynomials.

The roots are found one at a time, largest first (smallest first for the
Laguerre families).  The first few initial guesses come from empirical
asymptotic formulas, the later ones are extrapolated from the roots
already found, so the loops below are inherently sequential.  For
symmetric weight functions only the non-negative roots are computed and
the rule is completed by reflection.

A guess can lead Newton to a root that was already found, skipping one.
That is reported like a root that does not converge.

The guesses follow Stroud and Secrest, "Gaussian Quadrature Formulas"
(1966), and Davis and Rabinowitz, "Methods of Numerical Integration"
(1984).
"""

from __future__ import annotations

import math

import numpy as np

from quadrule.newton import (
    MAX_NEWTON_STEPS,
    gegenbauer_coefficients,
    gegenbauer_root,
    gen_laguerre_ss_coefficients,
    gen_laguerre_ss_root,
    hermite_ss_root,
    jacobi_ss_coefficients,
    jacobi_ss_root,
    laguerre_ss_coefficients,
    laguerre_ss_root,
    report_nonconvergence,
    stroud_secrest_weight,
)
from quadrule.special import epsilon, gammaln
from quadrule.types import Rule
from quadrule.utils import (
    check_order,
    check_parameter,
    make_symmetric,
    reflect_upper_half,
)

__all__ = [
    "gegenbauer_compute",
    "jacobi_ss_compute",
    "gen_laguerre_ss_compute",
    "laguerre_ss_compute",
    "hermite_ss_compute",
    "legendre_dr_compute",
    "lobatto_compute",
    "radau_compute",
]

# Lobatto and Radau move all points at once, starting from Chebyshev
# points; this bounds the number of sweeps.
MAX_SIMULTANEOUS_STEPS = 10 * MAX_NEWTON_STEPS


def _jacobi_guess(i: int, order: int, alpha: float, beta: float, x: list, x0: float):
    """Initial guess for the i-th largest root (1-based) of the Jacobi
    polynomial, given the previous guess 'x0' and the roots 'x' found so far.
    """
    if i == 1:
        an = alpha / order
        bn = beta / order
        r1 = (1.0 + alpha) * (2.78 / (4.0 + order * order) + 0.768 * an / order)
        r2 = 1.0 + 1.48 * an + 0.96 * bn + 0.452 * an * an + 0.83 * an * bn
        return (r2 - r1) / r2
    if i == 2:
        r1 = (4.1 + alpha) / ((1.0 + alpha) * (1.0 + 0.156 * alpha))
        r2 = 1.0 + 0.06 * (order - 8.0) * (1.0 + 0.12 * alpha) / order
        r3 = 1.0 + 0.012 * beta * (1.0 + 0.25 * abs(alpha)) / order
        return x0 - r1 * r2 * r3 * (1.0 - x0)
    if i == 3:
        r1 = (1.67 + 0.28 * alpha) / (1.0 + 0.37 * alpha)
        r2 = 1.0 + 0.22 * (order - 8.0) / order
        r3 = 1.0 + 8.0 * beta / ((6.28 + beta) * order * order)
        return x0 - r1 * r2 * r3 * (x[0] - x0)
    if i < order - 1:
        return 3.0 * x[i - 2] - 3.0 * x[i - 3] + x[i - 4]
    if i == order - 1:
        r1 = (1.0 + 0.235 * beta) / (0.766 + 0.119 * beta)
        r2 = 1.0 / (1.0 + 0.639 * (order - 4.0) / (1.0 + 0.71 * (order - 4.0)))
        r3 = 1.0 / (1.0 + 20.0 * alpha / ((7.5 + alpha) * order * order))
        return x0 + r1 * r2 * r3 * (x0 - x[i - 3])
    r1 = (1.0 + 0.37 * beta) / (1.67 + 0.28 * beta)
    r2 = 1.0 / (1.0 + 0.22 * (order - 8.0) / order)
    r3 = 1.0 / (1.0 + 8.0 * alpha / ((6.28 + alpha) * order * order))
    return x0 + r1 * r2 * r3 * (x0 - x[i - 3])


def _check_separated(x: list, root: float, *, increasing: bool = False, strict: bool):
    """Report 'root' unless it lies beyond the last root in 'x' by more
    than the Newton tolerance.  Otherwise two guesses converged to the
    same root and one root of the polynomial was missed."""
    if not x:
        return
    previous = x[-1]
    gap = root - previous if increasing else previous - root
    if not gap > math.sqrt(epsilon()) * (abs(previous) + 1.0):
        report_nonconvergence(
            f"Root {len(x) + 1} converged to x={root!r}, which does not lie "
            f"beyond the previous root {previous!r}.",
            iterations=len(x) + 1,
            correction=float(gap),
            strict=strict,
            # _check_separated <- *_compute <- user code
            stacklevel=4,
        )


def gegenbauer_compute(order: int, alpha: float, *, strict: bool = True) -> Rule:
    """Gauss-Gegenbauer rule for the weight (1 - x**2)**alpha on [-1, 1].

    Parameters
    ----------
    order : int
        The number of points, at least 1.
    alpha : float
        The exponent, greater than -1.
    strict : bool, default: True
        Raise `~quadrule.exceptions.NewtonConvergenceError` when a root
        does not converge, instead of warning.
    """
    order = check_order(order)
    alpha = check_parameter(alpha, "alpha")

    b, c = gegenbauer_coefficients(order, alpha)
    log_cc = (
        2.0 * gammaln(alpha + 1.0)
        - gammaln(2.0 * alpha + 2.0)
        + (2.0 * alpha + 1.0) * math.log(2.0)
        + np.log(c[1:]).sum()
    )

    x = []
    w = []
    x0 = 0.0
    for i in range(1, (order + 1) // 2 + 1):
        x0 = _jacobi_guess(i, order, alpha, alpha, x, x0)
        x0, dp2, p1, scale = gegenbauer_root(x0, order, b, c, strict=strict)
        _check_separated(x, x0, strict=strict)
        x.append(x0)
        w.append(stroud_secrest_weight(log_cc, dp2, p1, scale))

    return reflect_upper_half(x, w, order)


def jacobi_ss_compute(
    order: int, alpha: float, beta: float, *, strict: bool = True
) -> Rule:
    """Gauss-Jacobi rule for the weight (1 - x)**alpha * (1 + x)**beta
    on [-1, 1], by the Stroud-Secrest method.

    Both exponents must be greater than -1.
    """
    order = check_order(order)
    alpha = check_parameter(alpha, "alpha")
    beta = check_parameter(beta, "beta")

    b, c = jacobi_ss_coefficients(order, alpha, beta)
    log_cc = (
        gammaln(alpha + 1.0)
        + gammaln(beta + 1.0)
        - gammaln(alpha + beta + 2.0)
        + (alpha + beta + 1.0) * math.log(2.0)
        + np.log(c[1:]).sum()
    )

    symmetric = alpha == beta
    n_roots = (order + 1) // 2 if symmetric else order
    x = []
    w = []
    x0 = 0.0
    for i in range(1, n_roots + 1):
        x0 = _jacobi_guess(i, order, alpha, beta, x, x0)
        x0, dp2, p1, scale = jacobi_ss_root(x0, order, b, c, strict=strict)
        _check_separated(x, x0, strict=strict)
        x.append(x0)
        w.append(stroud_secrest_weight(log_cc, dp2, p1, scale))

    if symmetric:
        return reflect_upper_half(x, w, order)
    return Rule(np.array(x[::-1]), np.array(w[::-1]))


def gen_laguerre_ss_compute(order: int, alpha: float, *, strict: bool = True) -> Rule:
    """Generalized Gauss-Laguerre rule for the weight x**alpha * exp(-x)
    on [0, inf), by the Stroud-Secrest method."""
    order = check_order(order)
    alpha = check_parameter(alpha, "alpha")

    b, c = gen_laguerre_ss_coefficients(order, alpha)
    log_cc = gammaln(alpha + 1.0) + np.log(c[1:]).sum()

    x = []
    w = []
    x0 = 0.0
    for i in range(1, order + 1):
        if i == 1:
            x0 = (
                (1.0 + alpha) * (3.0 + 0.92 * alpha) / (1.0 + 2.4 * order + 1.8 * alpha)
            )
        elif i == 2:
            x0 += (15.0 + 6.25 * alpha) / (1.0 + 0.9 * alpha + 2.5 * order)
        else:
            r1 = (1.0 + 2.55 * (i - 2)) / (1.9 * (i - 2))
            r2 = 1.26 * (i - 2) * alpha / (1.0 + 3.5 * (i - 2))
            ratio = (r1 + r2) / (1.0 + 0.3 * alpha)
            x0 += ratio * (x0 - x[i - 3])
        x0, dp2, p1, scale = gen_laguerre_ss_root(x0, order, b, c, strict=strict)
        _check_separated(x, x0, increasing=True, strict=strict)
        x.append(x0)
        w.append(stroud_secrest_weight(log_cc, dp2, p1, scale))

    return Rule(np.array(x), np.array(w))


def laguerre_ss_compute(order: int, *, strict: bool = True) -> Rule:
    """Gauss-Laguerre rule for the weight exp(-x) on [0, inf), by the
    Stroud-Secrest method."""
    order = check_order(order)

    b, c = laguerre_ss_coefficients(order)
    # log(((order - 1)!)**2)
    log_cc = 2.0 * gammaln(order)

    x = []
    w = []
    x0 = 0.0
    for i in range(1, order + 1):
        if i == 1:
            x0 = 3.0 / (1.0 + 2.4 * order)
        elif i == 2:
            x0 += 15.0 / (1.0 + 2.5 * order)
        else:
            ratio = (1.0 + 2.55 * (i - 2)) / (1.9 * (i - 2))
            x0 += ratio * (x0 - x[i - 3])
        x0, dp2, p1, scale = laguerre_ss_root(x0, order, b, c, strict=strict)
        _check_separated(x, x0, increasing=True, strict=strict)
        x.append(x0)
        w.append(stroud_secrest_weight(log_cc, dp2, p1, scale))

    return Rule(np.array(x), np.array(w))


def hermite_ss_compute(order: int, *, strict: bool = True) -> Rule:
    """Gauss-Hermite rule for the weight exp(-x**2), by the Stroud-Secrest
    method."""
    order = check_order(order)

    log_cc = 0.5 * math.log(math.pi) + gammaln(order) - (order - 1) * math.log(2.0)
    s = (2.0 * order + 1.0) ** (1.0 / 6.0)

    x = []
    w = []
    x0 = 0.0
    for i in range(1, (order + 1) // 2 + 1):
        if i == 1:
            x0 = s**3 - 1.85575 / s
        elif i == 2:
            x0 -= 1.14 * order**0.426 / x0
        elif i == 3:
            x0 = 1.86 * x0 - 0.86 * x[0]
        elif i == 4:
            x0 = 1.91 * x0 - 0.91 * x[1]
        else:
            x0 = 2.0 * x0 - x[i - 3]
        x0, dp2, p1, scale = hermite_ss_root(x0, order, strict=strict)
        _check_separated(x, x0, strict=strict)
        x.append(x0)
        w.append(stroud_secrest_weight(log_cc, dp2, p1, scale))

    return reflect_upper_half(x, w, order)


def legendre_dr_compute(order: int) -> Rule:
    """Gauss-Legendre rule on [-1, 1] by the method of Davis and Rabinowitz.

    Each root starts from an asymptotic cosine estimate, is corrected with
    a fourth order Taylor expansion of the Legendre polynomial and then
    with one Newton step on that expansion.
    """
    order = check_order(order)

    e1 = order * (order + 1.0)
    x = []
    w = []
    for i in range(1, (order + 1) // 2 + 1):
        t = (4 * i - 1) * math.pi / (4 * order + 2)
        x0 = math.cos(t) * (1.0 - (1.0 - 1.0 / order) / (8.0 * order * order))

        pkm1 = 1.0
        pk = x0
        for k in range(2, order + 1):
            pkp1 = 2.0 * x0 * pk - pkm1 - (x0 * pk - pkm1) / k
            pkm1 = pk
            pk = pkp1

        d1 = order * (pkm1 - x0 * pk)
        dpn = d1 / (1.0 - x0 * x0)
        d2pn = (2.0 * x0 * dpn - e1 * pk) / (1.0 - x0 * x0)
        d3pn = (4.0 * x0 * d2pn + (2.0 - e1) * dpn) / (1.0 - x0 * x0)
        d4pn = (6.0 * x0 * d3pn + (6.0 - e1) * d2pn) / (1.0 - x0 * x0)

        u = pk / dpn
        v = d2pn / dpn
        h = -u * (1.0 + 0.5 * u * (v + u * (v * v - d3pn / (3.0 * dpn))))

        p = pk + h * (dpn + 0.5 * h * (d2pn + h / 3.0 * (d3pn + 0.25 * h * d4pn)))
        dp = dpn + h * (d2pn + 0.5 * h * (d3pn + h * d4pn / 3.0))
        h -= p / dp

        xi = x0 + h
        fx = d1 - h * e1 * (
            pk + 0.5 * h * (dpn + h / 3.0 * (d2pn + 0.25 * h * (d3pn + 0.2 * h * d4pn)))
        )
        x.append(xi)
        w.append(2.0 * (1.0 - xi * xi) / (fx * fx))

    return reflect_upper_half(x, w, order)


def _legendre_table(x: np.ndarray, degree: int) -> np.ndarray:
    """Return the Legendre polynomials P_0 .. P_degree evaluated at 'x',
    one row per degree."""
    P = [np.ones(x.shape), x.copy()]
    for i in range(2, degree + 1):
        P.append((2 * i - 1) / i * x * P[-1] - (i - 1) / i * P[-2])
    return np.array(P[: degree + 1])


def lobatto_compute(order: int, *, strict: bool = True) -> Rule:
    """Gauss-Lobatto-Legendre rule on [-1, 1].

    The endpoints are included exactly; the interior points are the roots
    of P'_{order - 1}.  Exact for polynomials of degree ``2 * order - 3``.
    Requires ``order >= 2``.
    """
    order = check_order(order, minimum=2)
    n = order
    tol = 100.0 * epsilon()

    # Start from the Chebyshev-Gauss-Lobatto points.
    x = -np.cos(np.pi * np.arange(n) / (n - 1))
    for _ in range(MAX_SIMULTANEOUS_STEPS):
        P = _legendre_table(x, n - 1)
        x_old = x
        x = x_old - (x_old * P[n - 1] - P[n - 2]) / (n * P[n - 1])
        change = np.max(np.abs(x - x_old))
        if change <= tol:
            break
    else:
        report_nonconvergence(
            f"Lobatto points did not converge in {MAX_SIMULTANEOUS_STEPS} "
            f"iterations; the last change was {change:.3e}.",
            iterations=MAX_SIMULTANEOUS_STEPS,
            correction=float(change),
            strict=strict,
        )

    P = _legendre_table(x, n - 1)
    w = 2.0 / ((n - 1) * n * P[n - 1] ** 2)
    x, w = make_symmetric(x, w)
    x[0] = -1.0
    x[-1] = 1.0
    return Rule(x, w)


def radau_compute(order: int, *, strict: bool = True) -> Rule:
    """Gauss-Radau-Legendre rule on [-1, 1] with the fixed point -1.

    The other points are the roots of (P_{order - 1} + P_order) / (1 + x).
    Exact for polynomials of degree ``2 * order - 2``.
    """
    order = check_order(order)
    n = order
    if n == 1:
        return Rule(np.array([-1.0]), np.array([2.0]))
    tol = 100.0 * epsilon()

    # Start from the Chebyshev-Gauss-Radau points; x[0] = -1 stays fixed.
    x = -np.cos(2.0 * np.pi * np.arange(n) / (2 * n - 1))
    x[0] = -1.0
    for _ in range(MAX_SIMULTANEOUS_STEPS):
        P = _legendre_table(x[1:], n)
        x_old = x.copy()
        x[1:] = x_old[1:] - (1.0 - x_old[1:]) / n * (P[n - 1] + P[n]) / (
            P[n - 1] - P[n]
        )
        change = np.max(np.abs(x - x_old))
        if change <= tol:
            break
    else:
        report_nonconvergence(
            f"Radau points did not converge in {MAX_SIMULTANEOUS_STEPS} "
            f"iterations; the last change was {change:.3e}.",
            iterations=MAX_SIMULTANEOUS_STEPS,
            correction=float(change),
            strict=strict,
        )

    P = _legendre_table(x[1:], n - 1)
    w = np.empty(n)
    w[0] = 2.0 / n**2
    w[1:] = (1.0 - x[1:]) / (n * P[n - 1]) ** 2
    return Rule(x, w)
