"""Core data structures for half-block drawing."""

from bwdraw.core.canvas import Canvas
from bwdraw.core.pixel import DuoPixel, Row

__all__ = ["Canvas", "DuoPixel", "Row"]
