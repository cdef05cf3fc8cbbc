"""Singleton strategy commands."""

from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...catalog.creational.singleton import run_singleton_demo
from ...config import get_demo_config
from ...core.exceptions import PatternCatalogError
from ...core.singleton import DemoReport, Strategy
from ...core.utils.rich_ui import format_status_text

console = Console()


def singleton_command(
    strategy: Optional[Strategy] = None,
    callers: Optional[int] = None,
    delay: Optional[float] = None,
    cancel_after: Optional[float] = None,
):
    """Race concurrent callers against one strategy and summarize the result."""
    try:
        strategy = strategy or get_demo_config().strategy
        report = run_singleton_demo(
            strategy,
            callers=callers,
            delay=delay,
            cancel_after=cancel_after,
            emit=lambda line: console.print(line, markup=False, highlight=False),
        )
    except PatternCatalogError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print(generate_report_panel(report))

    if report.errors:
        raise typer.Exit(1)


def compare_command(callers: Optional[int] = None, delay: Optional[float] = None):
    """Run every strategy once and print a comparison table."""
    try:
        reports = [
            run_singleton_demo(
                strategy, callers=callers, delay=delay, emit=lambda _: None
            )
            for strategy in Strategy
        ]
    except PatternCatalogError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print(generate_comparison_table(reports))


def generate_report_panel(report: DemoReport) -> Panel:
    """Summarize one run."""
    if report.errors:
        status = format_status_text("EMPTY", f"{len(report.errors)} caller(s) failed")
    elif report.is_consistent:
        status = format_status_text("READY", "exactly one instance")
    else:
        status = format_status_text(
            "READY", f"[red]{report.creation_count} constructions raced[/red]"
        )

    content = (
        f"Strategy: [cyan]{report.strategy.label}[/cyan]\n"
        f"Callers: {report.callers}\n"
        f"Creation count: {report.creation_count}\n"
        f"Unique instances: {report.unique_instances}\n"
        f"Elapsed: {report.elapsed:.3f}s\n"
        f"State: {status}"
    )
    for error in report.errors:
        content += f"\n[red]✗ {error}[/red]"

    return Panel(content, title="Singleton Report", expand=False)


def generate_comparison_table(reports: list[DemoReport]) -> Table:
    """Tabulate one row per strategy."""
    table = Table(title="Singleton Strategy Comparison")
    table.add_column("Strategy", style="cyan", no_wrap=True)
    table.add_column("Safe", justify="center")
    table.add_column("Creations", justify="right")
    table.add_column("Instances", justify="right")
    table.add_column("Elapsed", justify="right")
    table.add_column("Consistent", justify="center")

    for report in reports:
        table.add_row(
            report.strategy.label,
            "✓" if report.strategy.thread_safe else "✗",
            str(report.creation_count),
            str(report.unique_instances),
            f"{report.elapsed:.3f}s",
            "[green]✓[/green]" if report.is_consistent else "[red]✗[/red]",
        )

    return table
