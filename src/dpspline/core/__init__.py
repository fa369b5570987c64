"""Numerical core: kernel, recalibration, recursive evaluation and orchestration."""

# Import modules themselves (allows: from dpspline.core import evaluator)
from . import dpspline
from . import evaluator
from . import fftw
from . import kernel
from . import recalibrate
from . import typespline

__all__ = [
    "dpspline",
    "evaluator",
    "fftw",
    "kernel",
    "recalibrate",
    "typespline",
]
