"""libdpspline sub-package: value types, errors, logging and array helpers."""

# Import modules themselves (allows: from dpspline.libdpspline import nrutils)
from . import errors
from . import logger
from . import nrutils
from . import vector2

__all__ = [
    "errors",
    "logger",
    "nrutils",
    "vector2",
]
