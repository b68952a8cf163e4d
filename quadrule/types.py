from typing import NamedTuple

import numpy as np


class Rule(NamedTuple):
    """A one-dimensional quadrature rule.

    ``sum(weights * f(points))`` approximates the weighted integral of ``f``
    the rule was built for.  Unpacks as ``x, w = rule``.
    """

    points: np.ndarray
    weights: np.ndarray

    @property
    def order(self) -> int:
        return len(self.points)

    def integrate(self, f) -> float:
        """Apply the rule to the vectorised callable ``f``."""
        return float(np.dot(self.weights, f(self.points)))


__all__ = ["Rule"]
