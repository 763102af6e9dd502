from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from bwdraw.core.constants import GLYPHS, GLYPH_STATES


@dataclass(frozen=True, slots=True)
class DuoPixel:
    """Two vertically stacked pixels sharing one terminal cell."""
    upper: bool = False
    lower: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "upper", bool(self.upper))
        object.__setattr__(self, "lower", bool(self.lower))

    @classmethod
    def from_pair(cls, pair: tuple[bool, bool]) -> DuoPixel:
        upper, lower = pair
        return cls(upper, lower)

    @classmethod
    def from_char(cls, char: str) -> DuoPixel:
        """Recover the pixel pair behind a rendered glyph."""
        try:
            return cls(*GLYPH_STATES[char])
        except KeyError:
            raise ValueError(f"Not a half-block glyph: {char!r}") from None

    @property
    def pair(self) -> tuple[bool, bool]:
        return (self.upper, self.lower)

    def to_char(self) -> str:
        return GLYPHS[self.upper, self.lower]

    def __str__(self) -> str:
        return self.to_char()


@dataclass(frozen=True)
class Row:
    """
    One character row of a canvas.

    Built from two equal-length boolean rows: the first supplies the
    upper halves, the second the lower halves.
    """
    pixels: tuple[DuoPixel, ...] = ()

    @classmethod
    def from_pair(cls, upper: Iterable[bool], lower: Iterable[bool]) -> Row:
        upper = list(upper)
        lower = list(lower)
        if len(upper) != len(lower):
            raise ValueError(
                f"Row halves differ in length ({len(upper)} != {len(lower)})"
            )
        return cls(tuple(DuoPixel(u, l) for u, l in zip(upper, lower)))

    @classmethod
    def from_text(cls, text: str) -> Row:
        return cls(tuple(DuoPixel.from_char(c) for c in text))

    def split(self) -> tuple[list[bool], list[bool]]:
        """Return the (upper, lower) boolean rows."""
        return (
            [p.upper for p in self.pixels],
            [p.lower for p in self.pixels],
        )

    def __len__(self) -> int:
        return len(self.pixels)

    def __iter__(self) -> Iterator[DuoPixel]:
        return iter(self.pixels)

    def __str__(self) -> str:
        return "".join(p.to_char() for p in self.pixels)
