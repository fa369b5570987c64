"""
dpspline: discrete periodic splines with vector coefficients.

Evaluates an order-r discrete N-periodic spline on a closed polygon of
poles, optionally recalculating the vector coefficients in the Fourier
domain so the curve passes through the poles.
"""

__version__ = "0.1.0"

# Import main sub-packages
from . import core
from . import libdpspline

from .core.dpspline import calculate, calculate_from_params, calculate_vectors
from .core.typespline import SplineParams
from .libdpspline.vector2 import Vector2

__all__ = [
    "core",
    "libdpspline",
    "calculate",
    "calculate_from_params",
    "calculate_vectors",
    "SplineParams",
    "Vector2",
]
