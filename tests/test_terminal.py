"""Tests for terminal output helpers."""

import io

import bwdraw
from bwdraw.render.terminal import Terminal, clear


class TestClear:
    """Tests for the screen-clear helper."""

    def test_writes_escape_sequence(self, capsys) -> None:
        clear()
        assert capsys.readouterr().out == "\x1b[2J\x1b[1;1H"

    def test_custom_stream(self) -> None:
        stream = io.StringIO()
        clear(stream)
        assert stream.getvalue() == "\x1b[2J\x1b[1;1H"

    def test_exported_from_package(self) -> None:
        assert bwdraw.clear is clear

    def test_render_does_not_write(self, capsys, border_canvas) -> None:
        border_canvas.render()
        assert capsys.readouterr().out == ""


class TestTerminal:
    """Tests for Terminal.write."""

    def test_write(self) -> None:
        stream = io.StringIO()
        Terminal.write("▀▄", stream)
        assert stream.getvalue() == "▀▄"
