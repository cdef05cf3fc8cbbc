"""Catalog demo commands."""

import importlib

import typer
from rich.console import Console
from rich.table import Table

from ...catalog import get_demo, list_demos
from ...core.exceptions import PatternCatalogError, UnknownDemoError

console = Console()


def list_command():
    """Print every registered demo name with its module summary."""
    table = Table(title="Pattern Demonstrations")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description")

    for name in list_demos():
        table.add_row(name, describe_demo(name))

    console.print(table)


def demo_command(name: str):
    """Run one demo; unknown names and demo errors exit with status 1."""
    try:
        demo = get_demo(name)
    except UnknownDemoError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    try:
        demo()
    except PatternCatalogError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def describe_demo(name: str) -> str:
    """First line of the docstring of the module defining the demo."""
    demo = get_demo(name)
    # functools.partial wraps the singleton entries
    func = getattr(demo, "func", demo)
    doc = importlib.import_module(func.__module__).__doc__ or ""
    return doc.strip().splitlines()[0] if doc.strip() else ""
