from __future__ import annotations

import math
from collections.abc import Sequence
from itertools import product
from typing import Any

import numpy as np

from quadrule.exceptions import InvalidOrderError, InvalidParameterError
from quadrule.types import Rule

__all__ = [
    "named_product",
    "check_order",
    "check_parameter",
    "make_symmetric",
    "reflect_upper_half",
]


def named_product(**items: Sequence[Any]):
    names = items.keys()
    vals = items.values()
    return [dict(zip(names, res)) for res in product(*vals)]


def check_order(order, minimum: int = 1, *, even: bool = False) -> int:
    """Return 'order' as an int, or raise InvalidOrderError."""
    if isinstance(order, (bool, np.bool_)) or not isinstance(
        order, (int, np.integer)
    ):
        raise InvalidOrderError(f"The order must be an integer, got {order!r}.")
    if order < minimum:
        raise InvalidOrderError(f"The order must be at least {minimum}, got {order}.")
    if even and order % 2:
        raise InvalidOrderError(f"The order must be even, got {order}.")
    return int(order)


def check_parameter(value, name: str, lower: float = -1.0) -> float:
    """Return 'value' as a float, or raise InvalidParameterError unless
    it is finite and strictly greater than 'lower'."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"{name} must be a real number, got {value!r}.")
    if not math.isfinite(value):
        raise InvalidParameterError(f"{name} must be finite, got {value}.")
    if value <= lower:
        raise InvalidParameterError(
            f"{name} must be greater than {lower}, got {value}."
        )
    return value


def make_symmetric(x: np.ndarray, w: np.ndarray) -> Rule:
    """Make a rule on a symmetric domain exactly symmetric about 0.

    The points are averaged with their mirror images, so that
    ``x[i] == -x[n - 1 - i]`` holds bit for bit, and likewise for the
    weights.  For odd orders the centre point is exactly 0.
    """
    x = (x - x[::-1]) / 2
    w = (w + w[::-1]) / 2
    n = len(x)
    if n % 2:
        x[n // 2] = 0.0
    return Rule(x, w)


def reflect_upper_half(x_half, w_half, order: int) -> Rule:
    """Build a symmetric rule of 'order' points from its non-negative half.

    'x_half' holds the ``(order + 1) // 2`` largest points in descending
    order, 'w_half' the matching weights.  For odd orders the last entry
    is the centre point, which is set to exactly 0.
    """
    half = (order + 1) // 2
    x_half = np.asarray(x_half, dtype=float)
    w_half = np.asarray(w_half, dtype=float)
    x = np.empty(order)
    w = np.empty(order)
    x[:half] = -x_half
    w[:half] = w_half
    x[order - half :] = x_half[::-1]
    w[order - half :] = w_half[::-1]
    if order % 2:
        x[order // 2] = 0.0
    return Rule(x, w)
