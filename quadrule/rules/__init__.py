from quadrule.rules.gauss import (
    gen_hermite_compute,
    gen_laguerre_compute,
    hermite_1_compute,
    hermite_compute,
    hermite_probabilist_compute,
    jacobi_compute,
    laguerre_1_compute,
    laguerre_compute,
    legendre_compute,
    rescale,
)
from quadrule.rules.hermite_cubic import (
    hc_compute_weights_from_points,
    hce_compute,
    hcc_compute,
    hermite_cubic_integrate,
)
from quadrule.rules.interpolatory import (
    chebyshev1_compute,
    chebyshev2_compute,
    chebyshev3_compute,
    clenshaw_curtis_compute,
    clenshaw_curtis_compute_points,
    clenshaw_curtis_compute_weights,
    fejer1_compute,
    fejer2_compute,
    interpolatory_exactness,
    ncc_compute,
    nco_compute,
    ncoh_compute,
)
from quadrule.rules.stroud_secrest import (
    gegenbauer_compute,
    gen_laguerre_ss_compute,
    hermite_ss_compute,
    jacobi_ss_compute,
    laguerre_ss_compute,
    legendre_dr_compute,
    lobatto_compute,
    radau_compute,
)

__all__ = [
    "legendre_compute",
    "hermite_compute",
    "gen_hermite_compute",
    "laguerre_compute",
    "gen_laguerre_compute",
    "jacobi_compute",
    "hermite_probabilist_compute",
    "hermite_1_compute",
    "laguerre_1_compute",
    "rescale",
    "gegenbauer_compute",
    "jacobi_ss_compute",
    "gen_laguerre_ss_compute",
    "laguerre_ss_compute",
    "hermite_ss_compute",
    "legendre_dr_compute",
    "lobatto_compute",
    "radau_compute",
    "chebyshev1_compute",
    "chebyshev2_compute",
    "chebyshev3_compute",
    "clenshaw_curtis_compute_points",
    "clenshaw_curtis_compute_weights",
    "clenshaw_curtis_compute",
    "fejer1_compute",
    "fejer2_compute",
    "ncc_compute",
    "nco_compute",
    "ncoh_compute",
    "interpolatory_exactness",
    "hc_compute_weights_from_points",
    "hcc_compute",
    "hce_compute",
    "hermite_cubic_integrate",
]
