"""CLI for bill-split using Typer."""

import logging
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .config import load_settings
from .dates import format_date
from .exceptions import BillSplitError
from .models import BillSummary
from .service import BillSplitService
from .splitter import calculate_tip

app = typer.Typer(
    name="bill-split",
    help="Split a shared bill between participants with a proportional tip",
)

console = Console()


def setup_logging(verbose: bool = False, level_name: str = "INFO"):
    """Setup logging configuration."""
    level = (
        logging.DEBUG
        if verbose
        else getattr(logging, level_name.upper(), logging.INFO)
    )
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def parse_decimal(value: str | None) -> Decimal | None:
    """Parse a command-line number as Decimal."""
    if value is None:
        return None
    try:
        number = Decimal(value)
    except InvalidOperation as e:
        raise typer.BadParameter(f"Not a number: {value}") from e
    if not number.is_finite():
        raise typer.BadParameter(f"Not a finite number: {value}")
    return number


def format_money(amount: Decimal, use_color: bool = True) -> str:
    """
    Format money with alignment.

    Negative amounts use parentheses: (12.50)
    Positive amounts have spaces:      12.50
    """
    abs_amount = abs(amount)
    if amount < 0:
        if use_color:
            return f"([red]{abs_amount:,.2f}[/red])"
        return f"({abs_amount:,.2f})"
    if use_color:
        return f" [green]{abs_amount:,.2f}[/green] "
    return f" {abs_amount:,.2f} "


def display_summary(summary: BillSummary):
    """Display a bill summary in a table."""
    console.print("\n[bold]Bill Summary:[/bold]")
    console.print(f"  Date: {summary.date}")
    console.print(f"  Location: {summary.location or '—'}")
    console.print(f"  Subtotal: {format_money(summary.sub_total)}")
    console.print(f"  Tip: {format_money(summary.tip)}")
    console.print(f"  Total: {format_money(summary.total_amount)}")
    console.print()

    table = Table(title="Participants", show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", width=4)
    table.add_column("Name", style="cyan", width=30)
    table.add_column("Amount", justify="right", width=14)

    for idx, item in enumerate(summary.items, start=1):
        table.add_row(str(idx), item.name, format_money(item.amount))

    console.print(table)

    console.print()
    if not summary.items:
        console.print(
            "  [yellow]⚠️  No personal items: the total is not attributed to anyone[/yellow]"
        )
    elif summary.is_balanced:
        console.print("  [green]✓ Totals match (no rounding errors)[/green]")
    else:
        console.print(
            f"  [red]✗ Total mismatch: allocated {summary.allocated_amount}, "
            f"expected {summary.total_amount}[/red]"
        )


@app.command()
def split(
    bill_path: Path = typer.Argument(..., help="Path to a JSON bill file"),
    tip: Optional[str] = typer.Option(
        None, "--tip", "-t", help="Override the tip percentage"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the summary as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """
    Split a bill read from a JSON file.

    Personal items go to their owner, shared items are divided evenly and
    the tip is distributed in proportion to each person's pre-tip share.
    """
    try:
        settings = load_settings()
        setup_logging(verbose, settings.log_level)

        service = BillSplitService(settings)
        summary = service.split_file(bill_path, parse_decimal(tip))

        if as_json:
            typer.echo(summary.to_json())
        else:
            display_summary(summary)

    except BillSplitError as e:
        console.print(f"\n[bold red]Error:[/bold red] {e}")
        if verbose:
            raise
        sys.exit(1)


@app.command("format-date")
def format_date_command(
    date: str = typer.Argument(..., help="Date as YYYY-MM-DD"),
):
    """Print a YYYY-MM-DD date as YYYY年M月D日."""
    try:
        typer.echo(format_date(date))
    except BillSplitError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)


@app.command()
def tip(
    sub_total: str = typer.Argument(..., help="Bill subtotal"),
    tip_percentage: str = typer.Argument(..., help="Tip in percent, e.g. 10"),
):
    """Print the tip for a subtotal, rounded to 0.1."""
    amount = calculate_tip(parse_decimal(sub_total), parse_decimal(tip_percentage))
    typer.echo(str(amount))


if __name__ == "__main__":
    app()
