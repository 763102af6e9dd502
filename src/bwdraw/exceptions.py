"""Exceptions raised by bwdraw."""


class IndexOutOfBounds(IndexError):
    """A coordinate fell outside the canvas."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(f"Position ({x}, {y}) out of bounds ({width}x{height})")
