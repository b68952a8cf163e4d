"""A table of all rule families, keyed by name.

The table is what the test-suite iterates over, and `compute` is a
convenient single entry point::

    >>> from quadrule.catalog import compute
    >>> x, w = compute("jacobi", 5, alpha=0.5, beta=-0.25)
"""

from __future__ import annotations

import inspect
import math
from typing import Callable, NamedTuple, Optional

from quadrule import integrals
from quadrule.exceptions import InvalidParameterError
from quadrule.rules import gauss, interpolatory, stroud_secrest
from quadrule.types import Rule

__all__ = ["Family", "FAMILIES", "compute", "exactness"]


class Family(NamedTuple):
    """A rule family.

    Attributes
    ----------
    name : str
    compute : callable
        ``compute(order, **parameters) -> Rule``.
    integral : callable or None
        ``integral(k, **parameters)``, the exact integral of x**k against
        the weight function of the family.  None when the weight function
        does not make monomials integrable.
    parameters : tuple of str
        Names of the keyword parameters of ``compute`` and ``integral``.
    exactness : callable
        ``exactness(order)``, the highest polynomial degree integrated
        exactly against the weight function.
    symmetric : bool
        Whether the rule mirrors about 0 for every parameter value.
    domain : tuple of float
        The integration interval.
    """

    name: str
    compute: Callable[..., Rule]
    integral: Optional[Callable[..., float]]
    parameters: tuple[str, ...]
    exactness: Callable[[int], int]
    symmetric: bool
    domain: tuple[float, float]


def _gauss(order: int) -> int:
    return 2 * order - 1


def _radau(order: int) -> int:
    return 2 * order - 2


def _lobatto(order: int) -> int:
    return max(2 * order - 3, 1)


_FINITE = (-1.0, 1.0)
_HALF_LINE = (0.0, math.inf)
_REAL_LINE = (-math.inf, math.inf)

# name, compute, integral, parameters, exactness, symmetric, domain
# fmt: off
_TABLE = [
    # Golub-Welsch / Elhay-Kautsky
    ("legendre", gauss.legendre_compute, integrals.legendre_integral, (), _gauss, True, _FINITE),
    ("jacobi", gauss.jacobi_compute, integrals.jacobi_integral, ("alpha", "beta"), _gauss, False, _FINITE),
    ("laguerre", gauss.laguerre_compute, integrals.laguerre_integral, (), _gauss, False, _HALF_LINE),
    ("gen_laguerre", gauss.gen_laguerre_compute, integrals.gen_laguerre_integral, ("alpha",), _gauss, False, _HALF_LINE),
    ("hermite", gauss.hermite_compute, integrals.hermite_integral, (), _gauss, True, _REAL_LINE),
    ("gen_hermite", gauss.gen_hermite_compute, integrals.gen_hermite_integral, ("alpha",), _gauss, True, _REAL_LINE),
    ("hermite_probabilist", gauss.hermite_probabilist_compute, integrals.hermite_probabilist_integral, (), _gauss, True, _REAL_LINE),
    ("hermite_1", gauss.hermite_1_compute, None, (), _gauss, True, _REAL_LINE),
    ("laguerre_1", gauss.laguerre_1_compute, None, (), _gauss, False, _HALF_LINE),
    # Newton iteration
    ("gegenbauer", stroud_secrest.gegenbauer_compute, integrals.gegenbauer_integral, ("alpha",), _gauss, True, _FINITE),
    ("jacobi_ss", stroud_secrest.jacobi_ss_compute, integrals.jacobi_integral, ("alpha", "beta"), _gauss, False, _FINITE),
    ("laguerre_ss", stroud_secrest.laguerre_ss_compute, integrals.laguerre_integral, (), _gauss, False, _HALF_LINE),
    ("gen_laguerre_ss", stroud_secrest.gen_laguerre_ss_compute, integrals.gen_laguerre_integral, ("alpha",), _gauss, False, _HALF_LINE),
    ("hermite_ss", stroud_secrest.hermite_ss_compute, integrals.hermite_integral, (), _gauss, True, _REAL_LINE),
    ("legendre_dr", stroud_secrest.legendre_dr_compute, integrals.legendre_integral, (), _gauss, True, _FINITE),
    ("lobatto", stroud_secrest.lobatto_compute, integrals.legendre_integral, (), _lobatto, True, _FINITE),
    ("radau", stroud_secrest.radau_compute, integrals.legendre_integral, (), _radau, False, _FINITE),
    # Closed form
    ("chebyshev1", interpolatory.chebyshev1_compute, integrals.chebyshev1_integral, (), _gauss, True, _FINITE),
    ("chebyshev2", interpolatory.chebyshev2_compute, integrals.chebyshev2_integral, (), _gauss, True, _FINITE),
    ("chebyshev3", interpolatory.chebyshev3_compute, integrals.chebyshev1_integral, (), _lobatto, True, _FINITE),
    ("clenshaw_curtis", interpolatory.clenshaw_curtis_compute, integrals.legendre_integral, (), interpolatory.interpolatory_exactness, True, _FINITE),
    ("fejer1", interpolatory.fejer1_compute, integrals.legendre_integral, (), interpolatory.interpolatory_exactness, True, _FINITE),
    ("fejer2", interpolatory.fejer2_compute, integrals.legendre_integral, (), interpolatory.interpolatory_exactness, True, _FINITE),
    ("ncc", interpolatory.ncc_compute, integrals.legendre_integral, (), interpolatory.interpolatory_exactness, True, _FINITE),
    ("nco", interpolatory.nco_compute, integrals.legendre_integral, (), interpolatory.interpolatory_exactness, True, _FINITE),
    ("ncoh", interpolatory.ncoh_compute, integrals.legendre_integral, (), interpolatory.interpolatory_exactness, True, _FINITE),
]
# fmt: on

FAMILIES: dict[str, Family] = {row[0]: Family(*row) for row in _TABLE}


def _family(name: str) -> Family:
    try:
        return FAMILIES[name]
    except KeyError:
        raise KeyError(
            f"Unknown rule family {name!r}, choose from {sorted(FAMILIES)}."
        ) from None


def compute(
    name: str, order: int, *, strict: Optional[bool] = None, **params
) -> Rule:
    """Compute the rule of family 'name' with 'order' points.

    Parameters
    ----------
    name : str
        A key of `FAMILIES`.
    order : int
        The number of points.
    strict : bool, optional
        Passed on to the families computed by Newton iteration, see
        `quadrule.newton.newton_polish`.  Other families reject it.
    **params
        Exactly the parameters the family takes, e.g. ``alpha`` and
        ``beta`` for ``"jacobi"``.

    Returns
    -------
    rule : Rule
    """
    family = _family(name)
    missing = set(family.parameters) - set(params)
    unexpected = set(params) - set(family.parameters)
    if missing or unexpected:
        raise InvalidParameterError(
            f"{name!r} takes the parameters {list(family.parameters)}, "
            f"got {sorted(params)}."
        )
    if strict is not None:
        if "strict" not in inspect.signature(family.compute).parameters:
            raise InvalidParameterError(f"{name!r} does not take 'strict'.")
        params["strict"] = strict
    return family.compute(order, **params)


def exactness(name: str, order: int) -> int:
    """Highest polynomial degree that the rule of family 'name' with
    'order' points integrates exactly against its weight function."""
    return _family(name).exactness(order)
