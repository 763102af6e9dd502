"""Typer CLI application."""

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from bwdraw.core.canvas import Canvas
from bwdraw.logging_config import setup_logging
from bwdraw.render.terminal import Terminal

logger = logging.getLogger(__name__)


def square(width: int, height: int) -> Canvas:
    """Canvas with an outlined rectangle along its edges."""
    canvas = Canvas(width, height)
    for y in range(height):
        for x in range(width):
            if y == 0 or y == height - 1 or x == 0 or x == width - 1:
                canvas.set(x, y, True)
    return canvas


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="bwdraw",
        help="Black and white drawing in the terminal with half-block characters.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    def show(canvas: Canvas, clear_first: bool) -> None:
        if clear_first:
            Terminal.clear()
        Terminal.write(canvas.render() + "\n")

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
        log_file: Annotated[Optional[Path], typer.Option("--log-file", help="Also write log records to this file")] = None,
    ) -> None:
        setup_logging(
            logging.DEBUG if verbose else logging.WARNING,
            log_file=str(log_file) if log_file else None,
        )

    @app.command("square")
    def square_command(
        width: Annotated[int, typer.Argument(min=0, help="Width in columns")],
        height: Annotated[int, typer.Argument(min=0, help="Height in pixels")],
        clear: Annotated[bool, typer.Option("--clear", "-c", help="Clear the screen first")] = False,
    ) -> None:
        """Draw an outlined rectangle."""
        logger.debug("Drawing %dx%d square", width, height)
        show(square(width, height), clear)

    @app.command()
    def render(
        path: Annotated[Path, typer.Argument(help="Text file to render, or - for stdin")],
        active: Annotated[str, typer.Option("--active", "-a", envvar="BWDRAW_ACTIVE", help="Character for lit pixels")] = "#",
        inactive: Annotated[str, typer.Option("--inactive", "-i", envvar="BWDRAW_INACTIVE", help="Character for unlit pixels")] = " ",
        clear: Annotated[bool, typer.Option("--clear", "-c", help="Clear the screen first")] = False,
    ) -> None:
        """Render a text drawing with half-block characters.

        Every character other than the inactive one counts as a lit pixel.
        """
        try:
            text = sys.stdin.read() if str(path) == "-" else path.read_text(encoding="utf-8")
            canvas = Canvas.parse(text, active=active, inactive=inactive)
        except (OSError, ValueError) as e:
            console.print(f"[red]Cannot render {path}: {e}[/]")
            raise typer.Exit(1)
        logger.debug("Rendering %r", canvas)
        show(canvas, clear)

    return app
