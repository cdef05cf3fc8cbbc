"""Main CLI entry point for the patterns CLI."""

from importlib import metadata
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from ..core.singleton.guards import Strategy


def get_version() -> str:
    """Get the package version from metadata."""
    try:
        return metadata.version("pattern-catalog")
    except metadata.PackageNotFoundError:
        return "unknown"


console = Console()

# command: patterns
app = typer.Typer(
    name="patterns",
    help="Design pattern catalog - singleton strategies and classic demos",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# command: patterns <command>


@app.command("singleton")
def singleton_cmd(
    strategy: Optional[Strategy] = typer.Argument(
        None, help="Construction strategy (defaults to PATTERNS_STRATEGY)"
    ),
    callers: Optional[int] = typer.Option(
        None, "--callers", "-n", min=1, help="Number of concurrent callers"
    ),
    delay: Optional[float] = typer.Option(
        None, "--delay", "-d", min=0.0, help="Simulated construction delay in seconds"
    ),
    cancel_after: Optional[float] = typer.Option(
        None, "--cancel-after", min=0.0, help="Cancel construction after N seconds"
    ),
):
    """Race concurrent callers against one singleton strategy."""
    from .commands.singleton import singleton_command
    return singleton_command(strategy, callers, delay, cancel_after)


@app.command("compare")
def compare_cmd(
    callers: Optional[int] = typer.Option(
        None, "--callers", "-n", min=1, help="Number of concurrent callers"
    ),
    delay: Optional[float] = typer.Option(
        None, "--delay", "-d", min=0.0, help="Simulated construction delay in seconds"
    ),
):
    """Run every singleton strategy and compare the outcomes."""
    from .commands.singleton import compare_command
    return compare_command(callers, delay)


@app.command("list")
def list_cmd():
    """List available pattern demonstrations."""
    from .commands.catalog import list_command
    return list_command()


@app.command("demo")
def demo_cmd(name: str = typer.Argument(..., help="Demo name (see 'patterns list')")):
    """Run one pattern demonstration."""
    from .commands.catalog import demo_command
    return demo_command(name)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
):
    """Design pattern catalog CLI."""
    if version:
        console.print(f"patterns v{get_version()}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(
            Panel(
                "[bold blue]Design Pattern Catalog[/bold blue]\n\n"
                "Singleton construction strategies under concurrent access,\n"
                "plus the classic creational, structural and behavioral demos.\n\n"
                "Use [bold]patterns --help[/bold] to see available commands.",
                title="Welcome",
                expand=False,
            )
        )


if __name__ == "__main__":
    app()
