"""blitzdoc CLI — BlitzMax command documentation lookup."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from blitzdoc import __version__
from blitzdoc.config.paths import catalog_path, get_blitzmax_root
from blitzdoc.core.catalog.index import CommandIndex
from blitzdoc.core.catalog.model import CommandFilter

console = Console()

app = typer.Typer(
    name="blitzdoc",
    help="blitzdoc — BlitzMax command documentation lookup.",
    no_args_is_help=True,
)

_options: dict[str, Path | None] = {"root": None, "catalog": None}

def _print_plain(text: str, style: str | None = None) -> None:
    """Print catalog text verbatim, without markup or emoji substitution."""
    console.print(text, style=style, markup=False, emoji=False, highlight=False)

def _resolve_catalog() -> Path:
    """Return the catalog path from ``--catalog``, ``--root`` or ``BLITZMAX_PATH``."""
    if _options["catalog"] is not None:
        return _options["catalog"]

    root = get_blitzmax_root(_options["root"])
    if root is None:
        console.print(
            "[red]Error:[/red] BlitzMax path not set. Use --root or set BLITZMAX_PATH."
        )
        raise typer.Exit(code=1)
    return catalog_path(root)

def _load_index() -> CommandIndex:
    """Build and populate the command index, exiting when it stays empty."""
    path = _resolve_catalog()
    index = CommandIndex.from_path(path)
    if not index.ensure_populated(notify_if_empty=True):
        console.print(
            f"[red]Error:[/red] No commands found at {path}. Run 'blitzdoc rebuild' first."
        )
        raise typer.Exit(code=1)
    return index

def _version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        console.print(f"blitzdoc v{__version__}")
        raise typer.Exit()

@app.callback()
def main(
    version: Optional[bool] = typer.Option(  # noqa: N803
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    root: Optional[Path] = typer.Option(
        None, "--root", "-r", help="BlitzMax installation root (defaults to $BLITZMAX_PATH)."
    ),
    catalog: Optional[Path] = typer.Option(
        None, "--catalog", "-c", help="Explicit path to commands.txt."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
) -> None:
    """blitzdoc — BlitzMax command documentation lookup."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    _options["root"] = root
    _options["catalog"] = catalog

@app.command(name="help")
def quick_help(
    name: str = typer.Argument(..., help="Command name to look up."),
) -> None:
    """Show the description of a command."""
    from blitzdoc.core.render import format_matches, short_help

    index = _load_index()
    commands = index.find(name, CommandFilter(has_description=True))

    if not commands:
        console.print(f'[red]Error:[/red] No help available for "{name}"')
        raise typer.Exit(code=1)

    if len(commands) > 1:
        _print_plain(format_matches(commands))
        return

    command = commands[0]
    _print_plain(command.signature(), style="bold")
    _print_plain(short_help(command) or "")

@app.command()
def find(
    name: str = typer.Argument(..., help="Command name (case-insensitive)."),
    params: bool = typer.Option(False, "--params", help="Only commands with parameters."),
    described: bool = typer.Option(False, "--described", help="Only documented commands."),
) -> None:
    """Find every command with the given name."""
    from blitzdoc.core.render import format_matches

    index = _load_index()
    commands = index.find(
        name, CommandFilter(has_description=described, has_parameters=params)
    )
    if not commands:
        console.print(f'[red]Error:[/red] No command named "{name}"')
        raise typer.Exit(code=1)
    _print_plain(format_matches(commands))

@app.command(name="list")
def list_commands(
    module: Optional[str] = typer.Option(None, "--module", "-m", help="Restrict to a module."),
) -> None:
    """List all commands in the catalog."""
    index = _load_index()
    wanted = module.lower() if module else None
    for command in index.find():
        if wanted is not None and (command.module or "").lower() != wanted:
            continue
        _print_plain(command.signature())

@app.command()
def stats() -> None:
    """Show catalog statistics."""
    index = _load_index()
    result = index.stats()
    console.print("[bold]Catalog statistics[/bold]")
    console.print(f"  Commands:       {result.commands}")
    console.print(f"  Functions:      {result.functions}")
    console.print(f"  Documented:     {result.described}")
    console.print(f"  Modules:        {result.modules}")

@app.command()
def snippet(
    name: str = typer.Argument(..., help="Function name."),
) -> None:
    """Print an editor insertion snippet for a function."""
    from blitzdoc.core.render import insert_snippet

    index = _load_index()
    functions = [c for c in index.find(name) if c.is_function]
    if not functions:
        console.print(f'[red]Error:[/red] No function named "{name}"')
        raise typer.Exit(code=1)
    _print_plain(insert_snippet(functions[0]) or "")

@app.command()
def rebuild() -> None:
    """Regenerate commands.txt by running makedocs."""
    from blitzdoc.core.rebuild import RebuildError, rebuild_catalog

    root = get_blitzmax_root(_options["root"])
    if root is None:
        console.print(
            "[red]Error:[/red] BlitzMax path not set. Use --root or set BLITZMAX_PATH."
        )
        raise typer.Exit(code=1)

    console.print(f"[bold]Rebuilding documentation[/bold] in {root}")
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("{task.description}", markup=False),
            console=console,
            transient=True,
        ) as progress:
            task = progress.add_task("Starting makedocs...", total=None)

            def on_output(line: str) -> None:
                progress.update(task, description=line)

            result = rebuild_catalog(root, on_output=on_output)
    except RebuildError as exc:
        console.print(f"[red]Error:[/red] Error rebuilding documentation: {exc}")
        raise typer.Exit(code=1) from exc
    except KeyboardInterrupt:
        console.print("\n[bold]Rebuild cancelled.[/bold]")
        raise typer.Exit(code=130)

    console.print("[bold green]Documentation rebuilt.[/bold green]")
    console.print(f"  Output lines:   {result.lines}")
    console.print(f"  Duration:       {result.duration_seconds:.2f}s")
