"""Shared constants for half-block rendering."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
CLEAR_SCREEN = f"{CSI}2J"
CURSOR_HOME = f"{CSI}1;1H"

# Half-block glyphs, one per (upper, lower) pixel state
FULL = "█"   # Full block
UPPER = "▀"  # Upper half block
LOWER = "▄"  # Lower half block
EMPTY = " "

GLYPHS = {
    (True, True): FULL,
    (True, False): UPPER,
    (False, True): LOWER,
    (False, False): EMPTY,
}

# Reverse lookup for parsing rendered output
GLYPH_STATES = {glyph: state for state, glyph in GLYPHS.items()}

LINE_TERMINATOR = "\n"
