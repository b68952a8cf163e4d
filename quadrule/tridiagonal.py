"""Diagonalization of symmetric tridiagonal (Jacobi) matrices.

The eigenvalues of the Jacobi matrix of an orthogonal polynomial family
are the abscissas of the Gauss rule for its weight function, and the
squared first components of the normalized eigenvectors, scaled by the
zero-th moment, are the weights (Golub and Welsch).  Following Elhay and
Kautsky we never form the eigenvectors: the QL rotations are applied to
the seed vector ``z = (sqrt(zemu), 0, ..., 0)`` instead.

References
----------
Sylvan Elhay, Jaroslav Kautsky, "Algorithm 655: IQPACK, FORTRAN
Subroutines for the Weights of Interpolatory Quadrature", ACM TOMS 13(4),
1987, pages 399-415.

Roger Martin, James Wilkinson, "The Implicit QL Algorithm", Numerische
Mathematik 12(5), 1968, pages 377-383.
"""

from __future__ import annotations

import math

import numpy as np

from quadrule.exceptions import EigensolverConvergenceError
from quadrule.special import epsilon
from quadrule.types import Rule

__all__ = ["MAX_QL_ITERATIONS", "imtqlx", "gauss_from_jacobi_matrix"]

# Number of QL sweeps allowed for a single eigenvalue.
MAX_QL_ITERATIONS = 30


def imtqlx(d, e, z) -> tuple[np.ndarray, np.ndarray]:
    """Diagonalize a symmetric tridiagonal matrix.

    Parameters
    ----------
    d : array-like of length n
        The diagonal of the matrix.
    e : array-like of length n
        The subdiagonal in ``e[:n - 1]``; ``e[n - 1]`` is ignored.
    z : array-like of length n
        The vector to transform.

    Returns
    -------
    d : numpy array
        The eigenvalues, in ascending order.
    z : numpy array
        The vector ``Q.T @ z``, where ``Q`` diagonalizes the matrix,
        permuted along with the eigenvalues.

    Raises
    ------
    EigensolverConvergenceError
        If an eigenvalue does not split off after `MAX_QL_ITERATIONS`
        sweeps.

    Notes
    -----
    The arguments are copied; nothing is overwritten in place, unlike
    the EISPACK routine.
    """
    d = np.array(d, dtype=float)
    e = np.array(e, dtype=float)
    z = np.array(z, dtype=float)
    n = len(d)
    if not (len(e) == len(z) == n):
        raise ValueError("'d', 'e' and 'z' must have the same length.")
    if n <= 1:
        return d, z

    prec = epsilon()
    e[n - 1] = 0.0

    for l in range(n):
        j = 0
        while True:
            # Look for a negligible subdiagonal element.
            for m in range(l, n):
                if m == n - 1:
                    break
                if abs(e[m]) <= prec * (abs(d[m]) + abs(d[m + 1])):
                    break
            p = d[l]
            if m == l:
                break
            if j >= MAX_QL_ITERATIONS:
                raise EigensolverConvergenceError(
                    f"Eigenvalue {l} did not converge in {MAX_QL_ITERATIONS} "
                    "QL iterations.",
                    iterations=j,
                    correction=float(e[l]),
                )
            j += 1

            # Wilkinson shift from the leading 2x2 block.
            g = (d[l + 1] - p) / (2.0 * e[l])
            r = math.hypot(g, 1.0)
            # sign(g) with sign(0) = +1, also for g = -0.0.
            g = d[m] - p + e[l] / (g + (r if g >= 0.0 else -r))
            s = 1.0
            c = 1.0
            p = 0.0

            for i in range(m - 1, l - 1, -1):
                f = s * e[i]
                b = c * e[i]
                if abs(g) <= abs(f):
                    c = g / f
                    r = math.hypot(c, 1.0)
                    e[i + 1] = f * r
                    s = 1.0 / r
                    c *= s
                else:
                    s = f / g
                    r = math.hypot(s, 1.0)
                    e[i + 1] = g * r
                    c = 1.0 / r
                    s *= c
                g = d[i + 1] - p
                r = (d[i] - g) * s + 2.0 * c * b
                p = s * r
                d[i + 1] = g + p
                g = c * r - b

                # Carry the rotation over to z.
                f = z[i + 1]
                z[i + 1] = s * z[i] + c * f
                z[i] = c * z[i] - s * f

            d[l] -= p
            e[l] = g
            e[m] = 0.0

    # The sweeps leave the eigenvalues unordered.
    for i in range(n - 1):
        k = i + int(np.argmin(d[i:]))
        if k != i:
            d[i], d[k] = d[k], d[i]
            z[i], z[k] = z[k], z[i]

    return d, z


def gauss_from_jacobi_matrix(matrix) -> Rule:
    """Compute the Gauss rule of a `~quadrule.recurrence.JacobiMatrix`.

    The abscissas are the eigenvalues and the weights ``zemu`` times the
    squared first eigenvector components.
    """
    zemu, diagonal, offdiagonal = matrix
    z = np.zeros(len(diagonal))
    z[0] = math.sqrt(zemu)
    x, z = imtqlx(diagonal, offdiagonal, z)
    return Rule(x, z**2)
