"""
Thin wrapper around Python's ``logging`` module with dpspline-specific
log levels for the inner convolution loops.

Usage
-----
>>> from dpspline.libdpspline.logger import get_logger
>>> log = get_logger(__name__)
>>> log.debug("stage entry")            # pipeline stages
>>> log.debug2("per-order detail")      # custom level
"""

import logging
import sys

# ── Custom levels (below DEBUG=10) ──────────────────────────────────────
DEBUG2 = 9
DEBUG3 = 8

logging.addLevelName(DEBUG2, "DEBUG2")
logging.addLevelName(DEBUG3, "DEBUG3")


class _SplineLogger(logging.Logger):
    """Logger subclass that adds ``debug2`` and ``debug3`` convenience methods."""

    def debug2(self, msg, *args, **kwargs):
        if self.isEnabledFor(DEBUG2):
            self._log(DEBUG2, msg, args, **kwargs)

    def debug3(self, msg, *args, **kwargs):
        if self.isEnabledFor(DEBUG3):
            self._log(DEBUG3, msg, args, **kwargs)


logging.setLoggerClass(_SplineLogger)

# ── Integer verbosity (parameter files, CLI-style -v counts) ────────────
VERBOSITY_LEVEL_MAP = {
    0: logging.ERROR,
    1: logging.WARNING,
    2: logging.INFO,
    3: logging.DEBUG,
    4: logging.DEBUG,
    5: DEBUG2,
    6: DEBUG3,
}

_ROOT = "dpspline"
_FORMAT = "%(levelname)-7s: %(message)s"


def get_logger(name: str | None = None) -> _SplineLogger:
    """Return a logger under the ``dpspline`` hierarchy.

    Module loggers (``dpspline.core.evaluator`` ...) inherit from the
    ``dpspline`` root logger so a single ``set_level()`` call controls
    everything.
    """
    return logging.getLogger(name or _ROOT)


def set_level(level: int | str = logging.INFO) -> None:
    """Set the log level for *all* dpspline loggers at once.

    Accepts Python level ints/names **or** integer verbosity levels (0-6).
    """
    if isinstance(level, int) and level in VERBOSITY_LEVEL_MAP:
        level = VERBOSITY_LEVEL_MAP[level]
    logging.getLogger(_ROOT).setLevel(level)


def setup(level: int | str = logging.INFO, stream=None) -> None:
    """One-time setup: attach a stderr handler with the dpspline format.

    Extra calls are no-ops.
    """
    root = logging.getLogger(_ROOT)
    if root.handlers:
        return
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
    set_level(level)
