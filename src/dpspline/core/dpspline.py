"""
Discrete periodic spline with vector coefficients.

Computes the nodes of an order-r discrete N-periodic spline built on a
closed polygon of m poles, with n nodes per pole segment (N = n*m).

Pipeline::

    poles --(include_poles)--> recalculate_vectors --+
      |                                              v
      +-------------------------------------> calculate_sspline --> nodes
                                                     ^
                              qspline_kernel(n, m) --+

References:
    http://www.math.spbu.ru/ru/mmeh/AspDok/pub/2010/Chashnikov.pdf
    http://dha.spb.ru/PDF/discreteSplines.pdf
"""

from typing import List

import numpy as np
from numpy.typing import NDArray

from ..libdpspline.errors import InvalidPoleCountError
from ..libdpspline.logger import get_logger
from ..libdpspline.nrutils import is_finite_curve
from ..libdpspline.vector2 import PointsLike, Vector2, as_pole_array, to_vectors
from .evaluator import calculate_sspline
from .kernel import qspline_kernel
from .recalibrate import recalculate_vectors
from .typespline import SplineParams, check_method, check_order, check_subdivision

log = get_logger(__name__)

_dp = np.float64


def calculate(poles: PointsLike, r: int, n: int = 5, include_poles: bool = True,
              method: str = "direct") -> NDArray[_dp]:
    """
    Nodes of the discrete periodic spline with vector coefficients.

    Parameters
    ----------
    poles : sequence of Vector2, sequence of (x, y), or ndarray (m, 2)
        Poles of the spline (closed control polygon), at least three.
    r : int
        Spline order, an integer > 0.
    n : int, optional
        Number of nodes between consecutive poles, an integer >= 1.
        Default 5.
    include_poles : bool, optional
        True: the vectors are recalculated first so the spline passes
        through the poles.  False: the poles are used as vector
        coefficients directly and the spline only approximates them.
    method : {"direct", "fft"}, optional
        Evaluation method for the recalculation and the convolutions.

    Returns
    -------
    ndarray
        ``(n*m, 2)`` nodes in periodic order; node ``p*n`` belongs to pole p.

    Raises
    ------
    NullInputError
        If *poles* is None.
    InvalidPoleShapeError
        If *poles* are not 2-D points.
    InvalidPoleCountError
        If there are fewer than three poles.
    InvalidOrderError
        If *r* is not an integer or ``r <= 0``.
    InvalidSubdivisionError
        If *n* is not an integer or ``n < 1``.
    InvalidMethodError
        If *method* is unknown.

    Notes
    -----
    The recalibration denominator is not guarded.  Non-finite nodes are
    logged as a warning and returned unchanged, but the usual failure at
    large order is silent: for r of a few dozen and up the powers in the
    denominator lose precision and the nodes stay finite while drifting
    away from the poles (for the square with n = 10 the pole error is
    about 0.1 at r = 80 and about 5e45 at r = 200).  Check ``nodes[::n]``
    against the poles when high orders are needed.
    """
    P = as_pole_array(poles)
    m = P.shape[0]
    if m <= 2:
        raise InvalidPoleCountError(m)
    check_order(r)
    check_subdivision(n)
    check_method(method)

    r = int(r)
    n = int(n)
    N = n * m
    log.debug("dpspline: m=%d n=%d N=%d r=%d include_poles=%s method=%s",
              m, n, N, r, include_poles, method)

    if include_poles:
        vectors = recalculate_vectors(P, r, n, method)
    else:
        vectors = P

    kernel = qspline_kernel(n, m)
    nodes = calculate_sspline(vectors, kernel, r, n, method)

    if not is_finite_curve(nodes):
        log.warning("dpspline: non-finite nodes for m=%d n=%d r=%d; "
                    "parameter combination not supported numerically", m, n, r)
    return nodes


def calculate_from_params(poles: PointsLike, params: SplineParams) -> NDArray[_dp]:
    """Run :func:`calculate` with the values held by *params*."""
    return calculate(poles, params.r, params.n, params.include_poles, params.method)


def calculate_vectors(poles: PointsLike, r: int, n: int = 5,
                      include_poles: bool = True, method: str = "direct") -> List[Vector2]:
    """Same as :func:`calculate`, returning the nodes as :class:`Vector2` values."""
    return to_vectors(calculate(poles, r, n, include_poles, method))
