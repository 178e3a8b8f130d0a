"""
Entity Registry - Inspection CLI

Builds a registry from key=value pairs and shows how it resolves them.

Usage:
    python main.py show a=10 b=20            # Table of identifiers, handles, values
    python main.py show a=1 a=2 --remove b   # Later duplicates replace earlier ones
    python main.py stats a=10 b= c=30        # Size and combinator results
    python main.py info                      # Show configuration
"""

import logging
from typing import List, Optional, Tuple

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from entity_registry import EntityRegistry, __version__
from entity_registry.config import Config
from entity_registry.utils import setup_logger

app = typer.Typer(add_completion=False)
console = Console()


def parse_entry(raw: str) -> Tuple[str, str]:
    """Split 'key=value' into (key, value)."""
    identifier, sep, value = raw.partition("=")
    identifier = identifier.strip()
    if not sep or not identifier:
        raise typer.BadParameter(f"Expected key=value, got '{raw}'")
    return identifier, value


def build_registry(entries: List[str]) -> EntityRegistry[str]:
    registry: EntityRegistry[str] = EntityRegistry()
    for raw in entries:
        identifier, value = parse_entry(raw)
        registry.add(identifier, value)
    return registry


def render_registry(registry: EntityRegistry[str], show_handles: bool) -> Table:
    """Render a registry as a table, one row per entry in enumeration order."""
    table = Table(title="Entity Registry", border_style="cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Identifier", style="bold")
    if show_handles:
        table.add_column("Handle", style="magenta")
    table.add_column("Value", style="green")

    identifiers = registry.get_all_identifiers()
    for index, (value, handle, _, _) in enumerate(registry):
        row = [str(index), escape(identifiers[index])]
        if show_handles:
            row.append(repr(handle))
        row.append(escape(value))
        table.add_row(*row)

    return table


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log registry operations"),
):
    """Inspect how an entity registry resolves identifiers."""
    setup_logger(level=logging.DEBUG if verbose else None)


@app.command()
def show(
    entries: List[str] = typer.Argument(..., help="Entries as key=value"),
    remove: Optional[List[str]] = typer.Option(None, "--remove", "-r", help="Identifier to remove after adding"),
    handles: Optional[bool] = typer.Option(None, "--handles/--no-handles", help="Show the handle column"),
):
    """
    Build a registry and print its contents.

    Examples:
        python main.py show a=10 b=20
        python main.py show a=10 b=20 --remove a --no-handles
    """
    registry = build_registry(entries)

    for identifier in remove or []:
        if not registry.remove(identifier):
            console.print(f"[yellow]Not found:[/yellow] {identifier}")

    show_handles = Config.SHOW_HANDLES if handles is None else handles

    if registry.is_empty:
        console.print("[dim]Registry is empty[/dim]")
    else:
        console.print(render_registry(registry, show_handles))
    console.print(f"Size: {registry.size}")


@app.command()
def stats(
    entries: List[str] = typer.Argument(..., help="Entries as key=value"),
):
    """Show size and combinator results for a registry."""
    registry = build_registry(entries)

    non_empty = registry.filter(lambda value, *_: bool(value))
    last_non_empty = registry.find(lambda value, *_: bool(value))
    total_chars = registry.reduce(lambda acc, value, *_: acc + len(value), 0)

    console.print(f"\n[bold cyan]Size:[/bold cyan] {registry.size}")
    console.print(f"[bold cyan]Empty:[/bold cyan] {registry.is_empty}")
    console.print(f"[bold cyan]Identifiers:[/bold cyan] {', '.join(registry.get_all_identifiers())}")
    console.print(f"[bold cyan]Non-empty values:[/bold cyan] {len(non_empty)}")
    console.print(f"[bold cyan]Last non-empty value:[/bold cyan] {last_non_empty}")
    console.print(f"[bold cyan]Total characters:[/bold cyan] {total_chars}")
    console.print()


@app.command()
def info():
    """Show version and configuration."""
    console.print(f"\n[bold cyan]Entity Registry v{__version__}[/bold cyan]\n")
    console.print(f"Log level: {Config.LOG_LEVEL}")
    console.print(f"Show handles: {Config.SHOW_HANDLES}")
    console.print(f"Debug: {Config.DEBUG}")
    console.print()


if __name__ == "__main__":
    app()
