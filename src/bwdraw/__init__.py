"""
bwdraw: black and white drawing in the terminal

Draws on a grid of booleans and renders it with half-block characters,
two pixels per character cell, so pixels come out square.

Quick Start:
    >>> import bwdraw
    >>> canvas = bwdraw.Canvas(10, 10)
    >>> canvas.set(0, 0, True)
    >>> print(canvas.render())

Glyphs:
    - FULL: both pixels on ('█')
    - UPPER: upper pixel on ('▀')
    - LOWER: lower pixel on ('▄')
    - EMPTY: both pixels off (' ')
"""

__version__ = "0.1.0"

# Core types
from bwdraw.core.canvas import Canvas
from bwdraw.core.pixel import DuoPixel, Row
from bwdraw.core.constants import FULL, UPPER, LOWER, EMPTY
from bwdraw.exceptions import IndexOutOfBounds

# Terminal
from bwdraw.render.terminal import clear

__all__ = [
    # Version
    "__version__",
    # Core types
    "Canvas",
    "DuoPixel",
    "Row",
    "IndexOutOfBounds",
    # Glyphs
    "FULL",
    "UPPER",
    "LOWER",
    "EMPTY",
    # Terminal
    "clear",
]
