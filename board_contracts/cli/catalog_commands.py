"""Catalog inspection commands."""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from board_contracts.catalog import CATALOG, OPERATIONS, select
from board_contracts.contract import Expectation
from board_contracts.validation import schema_name

catalog_app = typer.Typer(no_args_is_help=True)
console = Console()

_EXPECTATION_STYLE = {
    Expectation.SUCCESS: "[green]success[/green]",
    Expectation.NOT_FOUND: "[yellow]not found[/yellow]",
    Expectation.REJECTED: "[magenta]rejected[/magenta]",
    Expectation.OMITTED: "[dim]omitted[/dim]",
}


@catalog_app.command("operations")
def list_operations() -> None:
    """List every SDK operation and its schemas."""
    table = Table(title="Operations", border_style="cyan")
    table.add_column("Operation", style="bold cyan")
    table.add_column("Method", style="yellow")
    table.add_column("Route", style="white")
    table.add_column("Request", style="dim")
    table.add_column("Response", style="green")

    for operation in OPERATIONS:
        table.add_row(
            operation.name,
            operation.method,
            operation.path,
            schema_name(operation.request) if operation.request else "-",
            schema_name(operation.response),
        )

    console.print(table)
    console.print(f"\n[dim]{len(OPERATIONS)} operations[/dim]")


@catalog_app.command("cases")
def list_cases(
    match: Optional[str] = typer.Option(None, "--match", "-m", help="Only cases whose name or operation contains TEXT"),
) -> None:
    """List contract cases."""
    cases = select(CATALOG, match)
    if not cases:
        console.print("[yellow]No contract cases match.[/yellow]")
        return

    table = Table(title="Contract Cases", border_style="cyan")
    table.add_column("Case", style="bold white")
    table.add_column("Operation", style="cyan")
    table.add_column("Expectation", justify="center")
    table.add_column("Note", style="dim")

    for case in cases:
        table.add_row(case.name, case.operation.name, _EXPECTATION_STYLE[case.expect], case.reason or "")

    console.print(table)
    console.print(f"\n[dim]Showing {len(cases)} of {len(CATALOG)} cases[/dim]")
