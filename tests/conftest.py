"""Shared pytest fixtures."""

import logging

import pytest

from bwdraw.core.canvas import Canvas


@pytest.fixture
def border_canvas() -> Canvas:
    """3x3 canvas with every pixel lit except the center."""
    canvas = Canvas(3, 3)
    for y in range(3):
        for x in range(3):
            if (x, y) != (1, 1):
                canvas.set(x, y, True)
    return canvas


@pytest.fixture
def checker_canvas() -> Canvas:
    """4x3 checkerboard, lit where x + y is even."""
    canvas = Canvas(4, 3)
    for y in range(3):
        for x in range(4):
            canvas.set(x, y, (x + y) % 2 == 0)
    return canvas


@pytest.fixture(autouse=True)
def reset_bwdraw_logger():
    """Drop handlers installed by setup_logging so tests stay isolated."""
    yield
    logger = logging.getLogger("bwdraw")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
