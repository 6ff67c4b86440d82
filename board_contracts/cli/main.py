"""boardcheck CLI - Main entry point."""

import asyncio
import logging
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn
from rich.table import Table

from board_contracts.catalog import CATALOG, OPERATIONS, select
from board_contracts.cli.catalog_commands import catalog_app
from board_contracts.config import get_settings
from board_contracts.runner import Outcome, SuiteReport, authorize, build_connection, run_suite

app = typer.Typer(
    name="boardcheck",
    help="Discussion board API contract checks",
    no_args_is_help=True,
)

app.add_typer(catalog_app, name="catalog", help="Inspect operations and contract cases")

console = Console()

_OUTCOME_STYLE = {
    Outcome.PASSED: "[green]passed[/green]",
    Outcome.FAILED: "[red]failed[/red]",
    Outcome.OMITTED: "[dim]omitted[/dim]",
}


@app.callback()
def main() -> None:
    """Load .env and configure logging before any command runs."""
    load_dotenv()
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def status() -> None:
    """Show configuration of the backend under test."""
    settings = get_settings()

    console.print(
        Panel(
            "[bold cyan]boardcheck[/bold cyan] - Discussion board contract checks",
            title="Status",
            border_style="cyan",
        )
    )

    table = Table(border_style="cyan")
    table.add_column("Setting", style="bold white")
    table.add_column("Value", justify="center")
    table.add_column("Details", style="dim")

    table.add_row("Host", f"[cyan]{settings.host}[/cyan]", f"timeout {settings.timeout_seconds:g}s")

    token_status = "[green]Set[/green]" if settings.api_token else "[yellow]Not set[/yellow]"
    table.add_row("API Token", token_status, "BOARD_API_TOKEN")

    authorize_status = "[green]Enabled[/green]" if settings.authorize else "[yellow]Disabled[/yellow]"
    table.add_row("Administrator Join", authorize_status, "join before running cases")

    strict_status = "[green]Strict[/green]" if settings.strict_not_found else "[yellow]Any error[/yellow]"
    table.add_row("Not-found Check", strict_status, "require 404 for unknown identifiers")

    table.add_row("Catalog", f"{len(CATALOG)} cases", f"{len(OPERATIONS)} operations")
    table.add_row("Log Level", settings.log_level.upper(), "BOARD_LOG_LEVEL")

    console.print(table)


async def _run_cases(
    match: Optional[str],
    fail_fast: bool,
    authorize_first: bool,
    strict_not_found: bool,
) -> SuiteReport:
    cases = select(CATALOG, match)
    connection = build_connection(get_settings())

    if authorize_first:
        try:
            with Progress(
                SpinnerColumn(),
                TextColumn("[bold cyan]Joining as administrator..."),
                console=console,
            ) as progress:
                progress.add_task("authorize", total=None)
                connection = await authorize(connection)
        except Exception as e:
            console.print(Panel(f"[red]Authorization failed: {e}[/red]", title="Error", border_style="red"))
            raise typer.Exit(1)

    with Progress(
        SpinnerColumn(),
        TextColumn("[bold cyan]{task.description}"),
        BarColumn(),
        TextColumn("{task.completed}/{task.total}"),
        console=console,
    ) as progress:
        task = progress.add_task("Running contract cases...", total=len(cases))
        return await run_suite(
            cases,
            connection,
            fail_fast=fail_fast,
            strict_not_found=strict_not_found,
            on_result=lambda result: progress.advance(task),
        )


def _print_report(report: SuiteReport) -> None:
    table = Table(title="Contract Results", border_style="cyan")
    table.add_column("Case", style="bold white")
    table.add_column("Operation", style="cyan")
    table.add_column("Outcome", justify="center")
    table.add_column("Duration", justify="right", style="dim")

    for result in report.results:
        table.add_row(result.name, result.operation, _OUTCOME_STYLE[result.outcome], f"{result.duration_ms:.0f} ms")

    console.print(table)

    for result in report.failures():
        console.print(Panel(f"[red]{result.error}[/red]", title=result.name, border_style="red"))

    border = "green" if report.ok else "red"
    console.print(
        Panel(
            f"[green]Passed:[/green]  {report.passed}\n"
            f"[red]Failed:[/red]  {report.failed}\n"
            f"[dim]Omitted:[/dim] {report.omitted}",
            title="Summary",
            border_style=border,
        )
    )


@app.command()
def run(
    match: Optional[str] = typer.Option(None, "--match", "-m", help="Only cases whose name or operation contains TEXT"),
    fail_fast: bool = typer.Option(False, "--fail-fast", "-x", help="Stop at the first failing case"),
    authorize_first: Optional[bool] = typer.Option(
        None,
        "--authorize/--no-authorize",
        help="Join as a fresh administrator before running (default from BOARD_AUTHORIZE)",
    ),
    strict_not_found: bool = typer.Option(
        False,
        "--strict-not-found",
        help="Require 404 for unknown identifiers (default from BOARD_STRICT_NOT_FOUND)",
    ),
) -> None:
    """Run contract cases against the configured backend."""
    settings = get_settings()
    if not select(CATALOG, match):
        console.print("[yellow]No contract cases match.[/yellow]")
        raise typer.Exit(1)

    report = asyncio.run(
        _run_cases(
            match,
            fail_fast,
            settings.authorize if authorize_first is None else authorize_first,
            strict_not_found or settings.strict_not_found,
        )
    )
    _print_report(report)
    if not report.ok:
        raise typer.Exit(1)
