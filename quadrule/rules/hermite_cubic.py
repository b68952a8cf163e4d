"""Rules built on the piecewise cubic Hermite interpolant.

Given values and derivatives of f at nodes x_0 < ... < x_m, the cubic
Hermite interpolant integrates over [x_j, x_{j+1}] to

    h/2 * (f(x_j) + f(x_{j+1})) + h**2/12 * (f'(x_j) - f'(x_{j+1}))

with h = x_{j+1} - x_j.  The rules below therefore come with two weights
per node.  They are stored interleaved: ``points[2 * j]`` and
``points[2 * j + 1]`` are both x_j, and the matching weights multiply
f(x_j) and f'(x_j) respectively.
"""

from __future__ import annotations

import numpy as np

from quadrule.exceptions import InvalidParameterError
from quadrule.rules.interpolatory import clenshaw_curtis_compute_points
from quadrule.types import Rule
from quadrule.utils import check_order

__all__ = [
    "hc_compute_weights_from_points",
    "hcc_compute",
    "hce_compute",
    "hermite_cubic_integrate",
]


def hc_compute_weights_from_points(xhalf) -> np.ndarray:
    """Return the ``2 * len(xhalf)`` interleaved value/derivative weights
    for the nodes 'xhalf', which must be strictly increasing."""
    xhalf = np.asarray(xhalf, dtype=float)
    if xhalf.ndim != 1 or len(xhalf) < 2:
        raise InvalidParameterError("At least two nodes are needed.")
    h = np.diff(xhalf)
    if not np.all(h > 0):
        raise InvalidParameterError("The nodes must be strictly increasing.")

    nhalf = len(xhalf)
    w = np.zeros(2 * nhalf)
    # Each interval contributes to the weights of its two end nodes.
    w[0 : 2 * nhalf - 2 : 2] += h / 2
    w[2 : 2 * nhalf : 2] += h / 2
    w[1 : 2 * nhalf - 2 : 2] += h**2 / 12
    w[3 : 2 * nhalf : 2] -= h**2 / 12
    return w


def _hermite_cubic_rule(xhalf: np.ndarray) -> Rule:
    return Rule(np.repeat(xhalf, 2), hc_compute_weights_from_points(xhalf))


def hcc_compute(order: int) -> Rule:
    """Hermite cubic rule on [-1, 1] with Chebyshev (Clenshaw-Curtis)
    spaced nodes.  'order' counts values and derivatives, so it must be
    even and at least 4."""
    order = check_order(order, minimum=4, even=True)
    return _hermite_cubic_rule(clenshaw_curtis_compute_points(order // 2))


def hce_compute(order: int) -> Rule:
    """Hermite cubic rule on [-1, 1] with equally spaced nodes."""
    order = check_order(order, minimum=4, even=True)
    return _hermite_cubic_rule(np.linspace(-1.0, 1.0, order // 2))


def hermite_cubic_integrate(rule: Rule, f, df) -> float:
    """Apply a Hermite cubic rule to the vectorised callables 'f' and its
    derivative 'df'."""
    x, w = rule
    nodes = x[::2]
    return float(np.dot(w[::2], f(nodes)) + np.dot(w[1::2], df(nodes)))
