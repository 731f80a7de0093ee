"""Command-line interface for tome."""

import sys
from pathlib import Path

import click
import typer
import yaml
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from tome import __version__
from tome.adapters import UnsupportedFormatError, default_registry
from tome.anchors import Anchor
from tome.config import (
    log_level_from_env,
    validate_log_level,
    validate_view_height,
    view_height_from_env,
)
from tome.logging_config import get_logger, setup_logging
from tome.models import DocumentId, Range
from tome.storage import dump_anchor, load_document_id, save_anchor
from tome.text import decode_bytes, normalize_eol
from tome.viewport import Viewport, apply_key

app = typer.Typer(
    name="tome",
    help="Read text files in the terminal and keep selections anchored across edits.",
)
console = Console()
err_console = Console(stderr=True)
logger = get_logger("cli")

# Panel border takes one line above and one below the text
BORDER_LINES = 2


def _fail(error: Exception) -> typer.Exit:
    err_console.print(f"[bold red]Error:[/bold red] {error}", highlight=False)
    return typer.Exit(1)


@app.callback()
def main_options(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Log level (default: $TOME_LOG_LEVEL or WARNING)",
    ),
) -> None:
    """Configure logging before running a command."""
    try:
        level = validate_log_level(log_level) if log_level else log_level_from_env()
    except ValueError as e:
        raise _fail(e) from e
    setup_logging(level)


def _render(name: str, lines: list[str], viewport: Viewport) -> Panel:
    first, last = viewport.visible_range()
    body = Text("\n".join(lines[first:last]), no_wrap=True, overflow="crop")
    return Panel(
        body,
        title=Text(f"Tome — {name} (q to quit)"),
        title_align="center",
        subtitle=f"{first + 1 if lines else 0}-{last}/{len(lines)}",
        height=viewport.height + BORDER_LINES,
    )


@app.command()
def view(
    path: Path = typer.Argument(..., help="File to read"),
    height: int | None = typer.Option(
        None,
        "--height",
        "-n",
        help="Lines per page (default: terminal height)",
    ),
) -> None:
    """Show a file with keyboard scrolling (j/k, space/b, g/G, q)."""
    try:
        adapter = default_registry().adapter_for_path(path)
        lines = adapter.render_lines(path.read_bytes())
        if height is None:
            height = max(1, console.size.height - BORDER_LINES)
            if not console.is_terminal:
                height = view_height_from_env()
        validate_view_height(height)
    except (OSError, ValueError, UnsupportedFormatError) as e:
        raise _fail(e) from e

    logger.info("Opened %s with the %s adapter (%d lines)", path, adapter.name, len(lines))

    if not sys.stdin.isatty():
        # Nothing to read keys from: print the whole document once.
        for line in lines:
            typer.echo(line)
        return

    viewport = Viewport(total_lines=len(lines), height=height)
    with console.screen() as screen:
        while True:
            screen.update(_render(path.name, lines, viewport))
            if not apply_key(viewport, click.getchar()):
                break


@app.command()
def anchor(
    path: Path = typer.Argument(..., help="File the selection belongs to"),
    start: int = typer.Argument(..., help="Start byte of the selection"),
    end: int = typer.Argument(..., help="End byte of the selection (exclusive)"),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the anchor YAML to this file instead of stdout",
    ),
) -> None:
    """Create an anchor over a byte range of a file."""
    try:
        text = decode_bytes(path.read_bytes())
    except OSError as e:
        raise _fail(e) from e

    created = Anchor.create(text, Range(start=start, end=end))
    document_id = DocumentId.new()

    if output is None:
        typer.echo(dump_anchor(created, document_id), nl=False)
        return

    try:
        saved = save_anchor(created, output, document_id)
    except OSError as e:
        raise _fail(e) from e
    console.print(f"[bold green]Saved to:[/bold green] {saved}")


@app.command()
def resolve(
    path: Path = typer.Argument(..., help="Current version of the file"),
    anchor_file: Path = typer.Argument(..., help="YAML file written by 'tome anchor'"),
) -> None:
    """Locate a saved anchor in the current version of a file."""
    try:
        yaml_text = anchor_file.read_text(encoding="utf-8")
        saved = Anchor.from_yaml(yaml_text)
        document_id = load_document_id(yaml_text)
        text = decode_bytes(path.read_bytes())
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise _fail(e) from e

    if document_id is not None:
        console.print(f"[dim]Document {document_id}[/dim]")

    match = saved.locate(text)
    if match.range is None:
        console.print("[bold red]Lost:[/bold red] the selected text no longer occurs")
        raise typer.Exit(1)

    data = normalize_eol(text).encode("utf-8")
    matched = match.range.slice(data).decode("utf-8")
    style = "green" if match.exact else "yellow"
    console.print(
        f"[bold {style}]{match.status.value.capitalize()}:[/bold {style}] "
        f"bytes {match.range.start}-{match.range.end} "
        f"({match.occurrences} occurrence(s) inspected)"
    )
    console.print(Text(matched))


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"tome {__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
