"""Terminal output for rendered canvases."""

from bwdraw.render.terminal import Terminal, clear

__all__ = ["Terminal", "clear"]
