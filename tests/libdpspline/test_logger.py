"""
Tests for logger — level mapping, custom levels and one-time setup.
"""
import io
import logging

import pytest

from dpspline.libdpspline import logger


@pytest.fixture
def clean_root():
    root = logging.getLogger("dpspline")
    saved_handlers = list(root.handlers)
    saved_level = root.level
    root.handlers.clear()
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestLogger:
    def test_module_logger_follows_root_level(self, clean_root):
        log = logger.get_logger("dpspline.core.evaluator")
        logger.set_level(logging.WARNING)
        assert log.getEffectiveLevel() == logging.WARNING
        assert hasattr(log, "debug2")

    def test_default_name(self):
        assert logger.get_logger().name == "dpspline"

    @pytest.mark.parametrize(
        "verbosity, expected",
        [(0, logging.ERROR), (1, logging.WARNING), (2, logging.INFO),
         (3, logging.DEBUG), (5, logger.DEBUG2), (6, logger.DEBUG3)],
    )
    def test_verbosity_levels(self, clean_root, verbosity, expected):
        logger.set_level(verbosity)
        assert clean_root.level == expected

    def test_python_level_passthrough(self, clean_root):
        logger.set_level(logging.WARNING)
        assert clean_root.level == logging.WARNING

    def test_setup_is_idempotent_and_formats(self, clean_root):
        buf = io.StringIO()
        logger.setup(level=logger.DEBUG2, stream=buf)
        logger.setup(level=logging.ERROR, stream=io.StringIO())
        assert len(clean_root.handlers) == 1

        log = logger.get_logger("dpspline.test")
        log.debug2("inner detail")
        log.debug3("hidden detail")
        out = buf.getvalue()
        assert "DEBUG2 : inner detail" in out
        assert "hidden detail" not in out
