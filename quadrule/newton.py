"""Newton iteration on orthogonal polynomials evaluated by recurrence.

Each family has a ``*_recur`` function that evaluates the monic
polynomial of degree ``order``, its derivative, and the polynomial of
degree ``order - 1`` at a point by running the three-term recurrence

    p[k](x) = (x - b[k]) * p[k - 1](x) - c[k] * p[k - 2](x)

forward, and a ``*_root`` function that polishes an approximate root
with `newton_polish`.

Monic polynomials of high degree overflow long before their roots are
hard to find, so the recurrences carry a binary exponent: the three
values returned are to be multiplied by ``2**scale``.  Newton steps only
use the ratio ``p2 / dp2`` and do not need it.  The Stroud-Secrest
weight ``cc / (dp2 * p1)`` does, and is evaluated in log space by
`stroud_secrest_weight`.

Reference: Arthur Stroud, Don Secrest, "Gaussian Quadrature Formulas",
Prentice Hall, 1966.
"""

from __future__ import annotations

import math
import warnings
from typing import Callable

import numpy as np

from quadrule.exceptions import NewtonConvergenceError, NewtonConvergenceWarning
from quadrule.special import epsilon

__all__ = [
    "MAX_NEWTON_STEPS",
    "newton_polish",
    "report_nonconvergence",
    "stroud_secrest_weight",
    "gegenbauer_coefficients",
    "gegenbauer_recur",
    "gegenbauer_root",
    "jacobi_ss_coefficients",
    "jacobi_ss_recur",
    "jacobi_ss_root",
    "gen_laguerre_ss_coefficients",
    "gen_laguerre_ss_recur",
    "gen_laguerre_ss_root",
    "laguerre_ss_coefficients",
    "laguerre_ss_recur",
    "laguerre_ss_root",
    "hermite_ss_recur",
    "hermite_ss_root",
]

MAX_NEWTON_STEPS = 10

# The recurrences divide their running values by a power of two once
# they grow past this.
RESCALE_THRESHOLD = 2.0**256

# (p2, dp2, p1, scale)
Evaluation = tuple[float, float, float, int]


def newton_polish(
    x: float,
    evaluate: Callable[[float], Evaluation],
    *,
    strict: bool = True,
    max_steps: int = MAX_NEWTON_STEPS,
) -> tuple[float, float, float, int]:
    """Refine the root 'x' of a polynomial by Newton's method.

    Parameters
    ----------
    x : float
        The initial guess.
    evaluate : callable
        ``evaluate(x)`` returns ``(p2, dp2, p1, scale)``: the polynomial,
        its derivative and the polynomial one degree lower, each to be
        multiplied by ``2**scale``.
    strict : bool, default: True
        What to do when 'max_steps' steps do not meet the tolerance
        ``|step| <= eps * (|x| + 1)``.  The iterate is still accepted
        when the last step was below ``sqrt(eps) * (|x| + 1)``, since the
        error after such a step is of the order of eps.  Otherwise a
        `NewtonConvergenceError` is raised if 'strict', and a
        `NewtonConvergenceWarning` is emitted if not.
    max_steps : int
        The number of Newton steps to take at most.

    Returns
    -------
    x : float
        The refined root.
    dp2, p1, scale : float, float, int
        The scaled derivative, the scaled lower degree polynomial and
        their binary exponent from the last evaluation.

    Raises
    ------
    NewtonConvergenceError
        Also when 'strict' is False, if the polynomial, its derivative or
        the step is not finite, or the derivative vanishes.  There is no
        iterate worth keeping in that case.
    """
    eps = epsilon()
    d = math.inf
    dp2 = p1 = math.nan
    scale = 0
    for step in range(1, max_steps + 1):
        p2, dp2, p1, scale = evaluate(x)
        if not (math.isfinite(dp2) and dp2 != 0.0):
            d = math.nan
        else:
            d = p2 / dp2
        if not math.isfinite(d):
            raise NewtonConvergenceError(
                f"Newton iteration broke down at x={x!r}: the polynomial "
                f"is {p2!r} and its derivative {dp2!r}.",
                iterations=step,
                correction=d,
            )
        x -= d
        if abs(d) <= eps * (abs(x) + 1.0):
            return x, dp2, p1, scale

    if not abs(d) <= math.sqrt(eps) * (abs(x) + 1.0):
        report_nonconvergence(
            f"Newton iteration did not converge in {max_steps} steps; "
            f"the last step was {d:.3e} at x={x!r}.",
            iterations=max_steps,
            correction=float(d),
            strict=strict,
            # newton_polish <- *_root <- *_compute <- user code
            stacklevel=5,
        )
    return x, dp2, p1, scale


def report_nonconvergence(
    message: str,
    iterations: int,
    correction: float,
    *,
    strict: bool,
    stacklevel: int = 3,
) -> None:
    """Raise `NewtonConvergenceError` if 'strict', otherwise emit a
    `NewtonConvergenceWarning` at 'stacklevel' relative to the caller."""
    if strict:
        raise NewtonConvergenceError(
            message, iterations=iterations, correction=correction
        )
    warnings.warn(message, NewtonConvergenceWarning, stacklevel=stacklevel)


def stroud_secrest_weight(log_cc: float, dp2: float, p1: float, scale: int) -> float:
    """Return ``cc / (dp2 * p1)`` with ``cc = exp(log_cc)``, for 'dp2'
    and 'p1' as returned by `newton_polish`.

    ``cc`` is the norm of the polynomial of degree ``order - 1`` and
    overflows at moderate orders, so the quotient is formed from
    logarithms.
    """
    log_w = (
        log_cc
        - math.log(abs(dp2))
        - math.log(abs(p1))
        - 2 * scale * math.log(2.0)
    )
    return math.copysign(math.exp(log_w), dp2 * p1)


def _rescale(p1, dp1, p2, dp2, scale):
    m = max(abs(p2), abs(dp2))
    if m > RESCALE_THRESHOLD:
        e = math.frexp(m)[1]
        p1, dp1, p2, dp2 = (math.ldexp(v, -e) for v in (p1, dp1, p2, dp2))
        scale += e
    return p1, dp1, p2, dp2, scale


def _recur(x, order, b, c) -> Evaluation:
    # Forward recurrence from p[0] = 1 and p[1] = x - b[0].
    p1 = 1.0
    dp1 = 0.0
    p2 = x - b[0]
    dp2 = 1.0
    scale = 0
    for i in range(1, order):
        p0, dp0 = p1, dp1
        p1, dp1 = p2, dp2
        p2 = (x - b[i]) * p1 - c[i] * p0
        dp2 = (x - b[i]) * dp1 + p1 - c[i] * dp0
        p1, dp1, p2, dp2, scale = _rescale(p1, dp1, p2, dp2, scale)
    return p2, dp2, p1, scale


# Gegenbauer, weight (1 - x**2)**alpha on [-1, 1]


def gegenbauer_coefficients(order: int, alpha: float) -> tuple[np.ndarray, np.ndarray]:
    b = np.zeros(order)
    c = np.zeros(order)
    if order >= 2:
        c[1] = 1.0 / (2.0 * alpha + 3.0)
    for i in range(3, order + 1):
        c[i - 1] = (
            (i - 1)
            * (2.0 * alpha + i - 1)
            / ((2.0 * alpha + 2 * i - 1) * (2.0 * alpha + 2 * i - 3))
        )
    return b, c


def gegenbauer_recur(x, order, b, c) -> Evaluation:
    return _recur(x, order, b, c)


def gegenbauer_root(x, order, b, c, *, strict=True):
    return newton_polish(x, lambda t: gegenbauer_recur(t, order, b, c), strict=strict)


# Jacobi, weight (1 - x)**alpha * (1 + x)**beta on [-1, 1]


def jacobi_ss_coefficients(
    order: int, alpha: float, beta: float
) -> tuple[np.ndarray, np.ndarray]:
    ab = alpha + beta
    b = np.empty(order)
    c = np.zeros(order)
    # b[0] is written in cancelled form, the general expression is 0/0
    # for alpha + beta = 0.
    b[0] = (beta - alpha) / (ab + 2.0)
    for i in range(2, order + 1):
        b[i - 1] = ab * (beta - alpha) / ((ab + 2.0 * i) * (ab + 2.0 * i - 2.0))
    if order >= 2:
        # The factor alpha + beta + 1 cancels between numerator and denominator.
        c[1] = 4.0 * (1.0 + alpha) * (1.0 + beta) / ((ab + 3.0) * (ab + 2.0) ** 2)
    for i in range(3, order + 1):
        c[i - 1] = (
            4.0
            * (i - 1)
            * (alpha + i - 1)
            * (beta + i - 1)
            * (ab + i - 1)
            / ((ab + 2 * i - 1) * (ab + 2 * i - 2) ** 2 * (ab + 2 * i - 3))
        )
    return b, c


def jacobi_ss_recur(x, order, b, c) -> Evaluation:
    return _recur(x, order, b, c)


def jacobi_ss_root(x, order, b, c, *, strict=True):
    return newton_polish(x, lambda t: jacobi_ss_recur(t, order, b, c), strict=strict)


# Generalized Laguerre, weight x**alpha * exp(-x) on [0, inf)


def gen_laguerre_ss_coefficients(
    order: int, alpha: float
) -> tuple[np.ndarray, np.ndarray]:
    i = np.arange(1, order + 1, dtype=float)
    return alpha + 2 * i - 1, (i - 1) * (alpha + i - 1)


def gen_laguerre_ss_recur(x, order, b, c) -> Evaluation:
    return _recur(x, order, b, c)


def gen_laguerre_ss_root(x, order, b, c, *, strict=True):
    return newton_polish(
        x, lambda t: gen_laguerre_ss_recur(t, order, b, c), strict=strict
    )


# Laguerre, weight exp(-x) on [0, inf)


def laguerre_ss_coefficients(order: int) -> tuple[np.ndarray, np.ndarray]:
    i = np.arange(1, order + 1, dtype=float)
    return 2 * i - 1, (i - 1) ** 2


def laguerre_ss_recur(x, order, b, c) -> Evaluation:
    return _recur(x, order, b, c)


def laguerre_ss_root(x, order, b, c, *, strict=True):
    return newton_polish(x, lambda t: laguerre_ss_recur(t, order, b, c), strict=strict)


# Hermite, weight exp(-x**2) on (-inf, inf)


def hermite_ss_recur(x, order) -> Evaluation:
    """Evaluate the monic Hermite polynomials, whose recurrence has b = 0
    and c = (k - 1) / 2 for degree k."""
    q1 = 1.0
    dq1 = 0.0
    q2 = x
    dq2 = 1.0
    scale = 0
    for i in range(2, order + 1):
        q0, dq0 = q1, dq1
        q1, dq1 = q2, dq2
        q2 = x * q1 - 0.5 * (i - 1) * q0
        dq2 = x * dq1 + q1 - 0.5 * (i - 1) * dq0
        q1, dq1, q2, dq2, scale = _rescale(q1, dq1, q2, dq2, scale)
    return q2, dq2, q1, scale


def hermite_ss_root(x, order, *, strict=True):
    return newton_polish(x, lambda t: hermite_ss_recur(t, order), strict=strict)
