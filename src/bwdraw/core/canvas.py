"""Canvas - 2D grid of boolean pixels rendered with half-block glyphs."""

from __future__ import annotations

import logging
from typing import Iterator, Sequence

from bwdraw.core.constants import LINE_TERMINATOR
from bwdraw.core.pixel import DuoPixel, Row
from bwdraw.exceptions import IndexOutOfBounds

logger = logging.getLogger(__name__)


class Canvas:
    """
    A black and white drawing surface.

    Stores a grid of booleans where height counts pixel rows, so the
    rendered text has half as many lines (rounded up). Each terminal
    cell shows two vertically adjacent pixels as one half-block glyph.

    When the height is odd, the last character row pairs the final pixel
    row with a row that is always off. That padding row is not part of
    the grid and cannot be addressed through get/set.
    """

    def __init__(self, width: int, height: int):
        """
        Initialize an empty canvas.

        Args:
            width: Width in columns (characters)
            height: Height in pixels (2x terminal rows)

        Raises:
            ValueError: If either dimension is negative
        """
        if width < 0 or height < 0:
            raise ValueError(f"Canvas dimensions must be non-negative, got {width}x{height}")
        self._width = width
        self._height = height
        self._grid: list[list[bool]] = [
            [False] * width for _ in range(height)
        ]

    @property
    def width(self) -> int:
        """Width in columns."""
        return self._width

    @property
    def height(self) -> int:
        """Height in pixels."""
        return self._height

    @property
    def terminal_height(self) -> int:
        """Height in terminal rows (half of pixel height, rounded up)."""
        return (self._height + 1) // 2

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexOutOfBounds(x, y, self._width, self._height)

    def get(self, x: int, y: int) -> bool:
        """
        Get pixel state at position.

        Raises:
            IndexOutOfBounds: If position is out of bounds
        """
        self._check(x, y)
        return self._grid[y][x]

    def set(self, x: int, y: int, value: bool) -> None:
        """
        Set pixel state at position.

        Raises:
            IndexOutOfBounds: If position is out of bounds
        """
        self._check(x, y)
        self._grid[y][x] = bool(value)

    def __getitem__(self, pos: tuple[int, int]) -> bool:
        """Get pixel using indexing: canvas[x, y]."""
        x, y = pos
        return self.get(x, y)

    def __setitem__(self, pos: tuple[int, int], value: bool) -> None:
        """Set pixel using indexing: canvas[x, y] = value."""
        x, y = pos
        self.set(x, y, value)

    def get_pixel(self, x: int, row: int) -> DuoPixel:
        """Get both halves of the terminal cell at column x, terminal row `row`."""
        top = 2 * row
        if not (0 <= x < self._width and 0 <= row < self.terminal_height):
            raise IndexOutOfBounds(x, top, self._width, self._height)
        lower = self._grid[top + 1][x] if top + 1 < self._height else False
        return DuoPixel(self._grid[top][x], lower)

    def set_pixel(self, x: int, row: int, pixel: DuoPixel) -> None:
        """
        Set both halves of the terminal cell at column x, terminal row `row`.

        On the last row of an odd-height canvas only the upper half exists;
        a lit lower half there raises IndexOutOfBounds.
        """
        top = 2 * row
        if not (0 <= x < self._width and 0 <= row < self.terminal_height):
            raise IndexOutOfBounds(x, top, self._width, self._height)
        if top + 1 < self._height:
            self._grid[top + 1][x] = pixel.lower
        elif pixel.lower:
            raise IndexOutOfBounds(x, top + 1, self._width, self._height)
        self._grid[top][x] = pixel.upper

    def rows(self) -> Iterator[Row]:
        """Iterate over terminal rows, top to bottom."""
        padding = [False] * self._width
        for top in range(0, self._height, 2):
            lower = self._grid[top + 1] if top + 1 < self._height else padding
            yield Row.from_pair(self._grid[top], lower)

    def pixels(self) -> Iterator[tuple[int, int, bool]]:
        """Iterate over all pixels as (x, y, value) tuples."""
        for y, row in enumerate(self._grid):
            for x, value in enumerate(row):
                yield x, y, value

    def render(self) -> str:
        """Render to half-block text, one line per terminal row."""
        if self._width == 0:
            return ""
        return LINE_TERMINATOR.join(str(row) for row in self.rows())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._grid == other._grid
        )

    def copy(self) -> Canvas:
        """Return an independent canvas with the same pixels."""
        return Canvas.from_grid(self._grid, width=self._width)

    def to_grid(self) -> list[list[bool]]:
        """Return a copy of the pixel grid, indexed [y][x]."""
        return [list(row) for row in self._grid]

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[bool]], width: int | None = None) -> Canvas:
        """
        Build a canvas from a rectangular matrix of booleans.

        Args:
            grid: Rows of pixel states, indexed [y][x]
            width: Column count; defaults to the length of the first row

        Raises:
            ValueError: If any row length differs from the width
        """
        if width is None:
            width = len(grid[0]) if grid else 0
        canvas = cls(width, len(grid))
        for y, row in enumerate(grid):
            if len(row) != width:
                raise ValueError(f"Row {y} has {len(row)} pixels, expected {width}")
            canvas._grid[y] = [bool(v) for v in row]
        logger.debug("Built %dx%d canvas from grid", width, len(grid))
        return canvas

    @classmethod
    def parse(cls, text: str, active: str = "#", inactive: str = " ") -> Canvas:
        """
        Parse a canvas from text, one pixel row per line.

        `active` characters are on, even when `active` equals `inactive`.
        Other `inactive` characters are off and anything else is on. Short
        lines are padded with off pixels.
        """
        if len(active) != 1 or len(inactive) != 1:
            raise ValueError("active and inactive must be single characters")
        lines = text.splitlines()
        width = max((len(line) for line in lines), default=0)
        grid = [
            [c == active or c != inactive for c in line] + [False] * (width - len(line))
            for line in lines
        ]
        logger.debug("Parsed %d lines of text (active=%r, inactive=%r)", len(lines), active, inactive)
        return cls.from_grid(grid, width=width)

    @classmethod
    def from_render(cls, text: str) -> Canvas:
        """
        Rebuild a canvas from half-block text produced by render().

        The result always has an even height; a padded final row comes
        back as a row of off pixels.
        """
        rows = [Row.from_text(line) for line in text.splitlines()]
        width = max((len(row) for row in rows), default=0)
        grid: list[list[bool]] = []
        for row in rows:
            upper, lower = row.split()
            pad = [False] * (width - len(row))
            grid.append(upper + pad)
            grid.append(lower + pad)
        return cls.from_grid(grid, width=width)
