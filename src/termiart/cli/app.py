"""Typer CLI application."""

import json
import logging
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from termiart.config import Settings
from termiart.core.color import Color
from termiart.core.errors import GridError
from termiart.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _parse_color(value: Optional[str]) -> Optional[Color]:
    if value is None:
        return None
    try:
        return Color.from_hex(value)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from None


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="termiart",
        help="Create and view character-grid drawings.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    def fail(error: Exception) -> NoReturn:
        err_console.print(f"[red]{escape(str(error))}[/]")
        raise typer.Exit(1)

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ) -> None:
        """Create and view character-grid drawings."""
        try:
            settings = Settings.from_env()
            setup_logging("DEBUG" if verbose else settings.log_level)
        except ValueError as e:
            fail(e)

    @app.command()
    def new(
        width: Annotated[Optional[int], typer.Argument(help="Width in cells", min=1)] = None,
        height: Annotated[Optional[int], typer.Argument(help="Height in cells", min=1)] = None,
        path: Annotated[Path, typer.Option("--output", "-o", help="Destination file")] = Path("drawing.tart"),
        background: Annotated[Optional[str], typer.Option("--background", "-b", help="Background as #rrggbb")] = None,
        force: Annotated[bool, typer.Option("--force", "-f", help="Overwrite an existing file")] = False,
    ) -> None:
        """Create a blank grid file."""
        from termiart.core.grid import Grid

        try:
            settings = Settings.from_env()
        except ValueError as e:
            fail(e)
        if path.exists() and not force:
            err_console.print(f"[red]{path} already exists (use --force to overwrite)[/]")
            raise typer.Exit(1)

        grid = Grid(
            width or settings.width,
            height or settings.height,
            _parse_color(background) or settings.background,
        )
        try:
            grid.save(path)
        except (GridError, OSError) as e:
            fail(e)
        console.print(f"[green]Created {grid.width}x{grid.height} grid → {path}[/]")

    @app.command()
    def view(
        path: Annotated[Path, typer.Argument(help="Grid file to show")],
        hold: Annotated[bool, typer.Option("--hold", help="Show full screen until a key is pressed")] = False,
    ) -> None:
        """Render a grid file to the terminal."""
        import termiart

        try:
            grid = termiart.load(path)
        except (GridError, OSError) as e:
            fail(e)

        if hold:
            from termiart.cli.core.terminal import Terminal, TerminalSession

            with TerminalSession() as session:
                Terminal.clear()
                Terminal.write_rows(grid.flush_dirty_rows())
                session.read_key()
        else:
            from termiart.render.terminal import TerminalRenderer
            print(TerminalRenderer().render(grid.rows()))

    @app.command()
    def info(
        path: Annotated[Path, typer.Argument(help="Grid file to inspect")],
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show the format tag and dimensions of a grid file."""
        from termiart.core.constants import FORMAT_TAG
        from termiart.io.reader import read_header

        try:
            header = read_header(path)
        except (GridError, OSError) as e:
            fail(e)

        compatible = header.format_tag == FORMAT_TAG
        if json_output:
            data = {
                "format_tag": header.format_tag,
                "width": header.width,
                "height": header.height,
                "compatible": compatible,
            }
            print(json.dumps(data, indent=2))
        else:
            console.print(f"[bold cyan]{path.name}[/]")
            console.print(f"  [bold]Format:[/] {header.format_tag}")
            console.print(f"  [bold]Size:[/]   {header.width}x{header.height}")
            if not compatible:
                console.print(f"  [yellow]Cannot be loaded by this version ({FORMAT_TAG})[/]")

    @app.command()
    def export(
        source: Annotated[Path, typer.Argument(help="Source grid file")],
        dest: Annotated[Path, typer.Argument(help="Destination file (.png or .txt)")],
        cell_size: Annotated[int, typer.Option("--cell-size", "-s", help="Pixels per cell for images", min=1)] = 16,
    ) -> None:
        """Export a grid file to PNG or plain text."""
        import termiart

        try:
            grid = termiart.load(source)
        except (GridError, OSError) as e:
            fail(e)

        fmt = dest.suffix.lstrip('.').lower()
        if fmt in ("txt", "text"):
            from termiart.render.text import TextRenderer
            dest.write_text(TextRenderer().render(grid.rows()))
        elif fmt in ("png", "jpg", "jpeg", "gif", "bmp"):
            from termiart.render.image import ImageRenderer
            ImageRenderer(cell_size=cell_size).save(grid, dest)
        else:
            err_console.print(f"[red]Unknown format: {fmt}[/]")
            raise typer.Exit(1)

        logger.debug("Exported %s as %s", source, fmt)
        console.print(f"[green]Exported {source} → {dest}[/]")

    return app
