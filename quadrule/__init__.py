from quadrule._version import __version__
from quadrule.catalog import FAMILIES, compute, exactness
from quadrule.exceptions import (
    ConvergenceError,
    EigensolverConvergenceError,
    InvalidOrderError,
    InvalidParameterError,
    NewtonConvergenceError,
    NewtonConvergenceWarning,
    QuadratureError,
)
from quadrule.rules import *  # noqa: F401,F403
from quadrule.rules import __all__ as _rules_all
from quadrule.types import Rule

from quadrule import integrals, rules, special, tridiagonal  # isort:skip

__all__ = [
    "integrals",
    "rules",
    "special",
    "tridiagonal",
    "__version__",
    "Rule",
    "FAMILIES",
    "compute",
    "exactness",
    "QuadratureError",
    "InvalidOrderError",
    "InvalidParameterError",
    "ConvergenceError",
    "EigensolverConvergenceError",
    "NewtonConvergenceError",
    "NewtonConvergenceWarning",
    *_rules_all,
]
