"""Command-line interface for the localizable converter."""

import asyncio
import logging
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config import config
from .errors import LocalizableError
from .models.search_result import FilePreview
from .search.results import load_preview
from .services.convert_service import ConvertService
from .services.workspace import Workspace
from .tools.grep_searcher import GrepSearcher
from .tools.plutil_normalizer import PlutilNormalizer

console = Console()

HIGHLIGHT_STYLE = "bold black on yellow"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Search and convert Localizable.strings files."""
    _configure_logging("DEBUG" if verbose else config.log_level)


@cli.command()
@click.option(
    "--project", "-p",
    "project_dir",
    required=True,
    type=click.Path(exists=True, file_okay=False),
    help="Project folder containing the dependency folder"
)
@click.option(
    "--text", "-t",
    "needle",
    required=True,
    help="Text to search for"
)
@click.option(
    "--ignore-case",
    is_flag=True,
    help="Match the text case-insensitively when searching files"
)
@click.option(
    "--preview",
    "preview_index",
    type=int,
    default=None,
    help="Show result N (1-based) with matches highlighted"
)
def search(project_dir: str, needle: str, ignore_case: bool, preview_index: Optional[int]):
    """Search the project's dependency folder for strings files containing TEXT."""
    workspace = Workspace.create(searcher=GrepSearcher(ignore_case=ignore_case))

    state = workspace.search.select_project(project_dir)
    if state.dependency_dir is None:
        console.print(f"[red]{state.status}[/red]")
        raise click.Abort()

    console.print(f"[blue]{config.dependency_dir_name} Directory:[/blue] {state.dependency_dir}")

    try:
        with console.status("Searching..."):
            hits = asyncio.run(workspace.search.search(needle))
    except LocalizableError as e:
        console.print(f"[red]Search failed:[/red] {e}")
        raise click.Abort()

    if not hits:
        console.print(f"[yellow]No matches found for[/yellow] {needle!r}")
        return

    table = Table(title=f"Files containing {needle!r}")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("File", style="green")
    table.add_column("Match", max_width=60)

    for index, hit in enumerate(hits, start=1):
        table.add_row(str(index), hit.file_path, hit.snippet or "[dim]binary[/dim]")

    console.print(table)

    if preview_index is not None:
        if not 1 <= preview_index <= len(hits):
            raise click.BadParameter(
                f"must be between 1 and {len(hits)}", param_hint="--preview"
            )
        try:
            preview = workspace.search.select_result(hits[preview_index - 1])
        except LocalizableError as e:
            console.print(f"[red]{e}[/red]")
            raise click.Abort()
        _print_preview(preview)


@cli.command()
@click.option(
    "--file", "-f",
    "file_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a .strings file"
)
@click.option(
    "--text", "-t",
    "needle",
    required=True,
    help="Text to highlight"
)
def preview(file_path: str, needle: str):
    """Show a strings file with every occurrence of TEXT highlighted."""
    try:
        file_preview = load_preview(file_path, needle)
    except LocalizableError as e:
        console.print(f"[red]{e}[/red]")
        raise click.Abort()

    _print_preview(file_preview)


@cli.command()
@click.option(
    "--input", "-i",
    "input_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a binary .strings file"
)
@click.option(
    "--output", "-o",
    "output_path",
    type=click.Path(dir_okay=False),
    help=f"Path to the converted file (defaults to {config.default_output_name} next to the input)"
)
def convert(input_path: str, output_path: Optional[str]):
    """Convert a binary .strings file to plain "key" = "value"; lines."""
    service = ConvertService(PlutilNormalizer())

    try:
        service.select_file(input_path)
        console.print(f"[blue]Reading:[/blue] {input_path}")
        result = asyncio.run(service.convert(output_path))
    except LocalizableError:
        console.print(f"[red]{service.state.status}[/red]")
        raise click.Abort()

    console.print(f"[blue]Writing:[/blue] {result.destination}")
    console.print(f"[green]{service.state.status}[/green] ({result.entry_count} entries)")


@cli.command()
def check():
    """Check that the external tools are configured."""
    table = Table(title="Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Search tool", config.grep_path)
    table.add_row("Property list tool", config.plutil_path)
    table.add_row("Dependency folder", config.dependency_dir_name)
    table.add_row("Search timeout", f"{config.search_timeout:g}s")
    table.add_row("Convert timeout", f"{config.convert_timeout:g}s")
    console.print(table)

    errors = config.validate()
    if errors:
        console.print("[red]Configuration errors:[/red]")
        for error in errors:
            console.print(f"  - {error}")
        raise click.Abort()

    console.print("[green]All tools available[/green]")


def _print_preview(file_preview: FilePreview):
    """Print file content with matches highlighted."""
    text = Text()
    for fragment in file_preview.segments():
        text.append(fragment.text, style=HIGHLIGHT_STYLE if fragment.highlighted else None)

    console.print(
        Panel(
            text,
            title=file_preview.file_path,
            subtitle=f"{file_preview.match_count} matches",
        )
    )


if __name__ == "__main__":
    cli()
