"""Rich renderers for comparison results and validation errors.

Transforms SDK models into formatted Rich tables.
"""

from typing import List

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from exitcalc.sdk import (
    ComparisonResult,
    EmploymentInput,
    UnemploymentBenefit,
    ValidationError,
    format_currency,
)


OPTION_LABELS = {
    "mutual": "Mutual Agreement",
    "termination": "Contract Termination",
    "equal": "Both options are equal",
}


def render_comparison(console: Console, data: EmploymentInput, result: ComparisonResult) -> None:
    """Render a comparison result as Rich tables.

    Args:
        console: Rich Console instance
        data: The input the result was computed from
        result: SDK output from calculate_comparison()
    """
    _render_inputs(console, data)
    _render_scenarios(console, result)
    _render_termination_breakdown(console, result)
    _render_verdict(console, result)


def render_validation_errors(console: Console, errors: List[ValidationError]) -> None:
    """Render validation errors in a red panel."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("field", style="bold")
    table.add_column("message")
    for error in errors:
        table.add_row(error.field, error.message)

    console.print(Panel(table, title=f"Invalid input ({len(errors)})", border_style="red"))


def render_benefit(console: Console, age: int, annual_salary: float, benefit: UnemploymentBenefit) -> None:
    """Render an unemployment benefit breakdown."""
    table = Table(title=f"Unemployment Benefit (age {age})", box=box.ROUNDED)
    table.add_column("", style="bold", min_width=22)
    table.add_column("Amount", justify="right", min_width=12)

    table.add_row("Annual salary", format_currency(annual_salary))
    table.add_row("Duration", f"{benefit.months} months")
    monthly = f"€{benefit.monthly_amount:,.2f}"
    if benefit.capped:
        monthly += " [yellow](capped)[/yellow]"
    table.add_row("Monthly benefit", monthly)
    table.add_row("[bold green]Total[/bold green]", f"[bold green]{format_currency(benefit.total)}[/bold green]")

    console.print(table)


def _render_inputs(console: Console, data: EmploymentInput) -> None:
    """Render the input facts panel."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("key", style="dim")
    table.add_column("value")

    months_label = "per year" if data.mutual_months_type == "per_year" else "total"
    table.add_row("Years of service", f"{data.years_of_service:g}")
    table.add_row("Annual salary", format_currency(data.annual_salary))
    table.add_row("Mutual offer", f"{data.mutual_months:g} months ({months_label})")
    table.add_row("Household", f"{data.marital_status}, {data.dependents} dependent(s)")
    table.add_row("Age", str(data.age))
    table.add_row("Vacation days left", f"{data.vacation_days_left:g}")
    table.add_row("Holiday subsidy months left", f"{data.holiday_subsidy_months_left:g}")
    table.add_row("Training days used", f"{data.paid_training_days_used:g}")

    console.print(Panel(table, title="Inputs", border_style="dim"))


def _render_scenarios(console: Console, result: ComparisonResult) -> None:
    """Render the side-by-side scenario table."""
    table = Table(title=f"Exit Scenarios ({result.fiscal_year} rules)", box=box.ROUNDED)
    table.add_column("", style="bold", min_width=25)
    table.add_column("Mutual Agreement", justify="right", min_width=16)
    table.add_column("Contract Termination", justify="right", min_width=16)

    table.add_row("Gross compensation", _fmt(result.mutual_gross), _fmt(result.termination_gross))
    table.add_row("Net compensation", _fmt(result.mutual_net), _fmt(result.termination_net))
    table.add_row(
        f"Unemployment benefit ({result.unemployment_benefit_months} months)",
        "-",
        _fmt(result.unemployment_benefit_total),
    )
    table.add_row("", "", "")
    table.add_row(
        "[bold]TOTAL NET VALUE[/bold]",
        f"[bold]{_fmt(result.mutual_net)}[/bold]",
        f"[bold]{_fmt(result.termination_total)}[/bold]",
    )

    console.print(table)


def _render_termination_breakdown(console: Console, result: ComparisonResult) -> None:
    """Render the unrounded termination components."""
    breakdown = result.termination_breakdown
    table = Table(title="Termination Breakdown", box=box.SIMPLE)
    table.add_column("Component", min_width=25)
    table.add_column("Amount", justify="right", min_width=12)

    table.add_row(f"Base severance ({breakdown.full_years} full years × 12 days)", f"€{breakdown.base_severance:,.2f}")
    table.add_row("Unused vacation", f"€{breakdown.vacation:,.2f}")
    table.add_row("Holiday subsidy", f"€{breakdown.holiday_subsidy:,.2f}")
    table.add_row(f"Unused training ({breakdown.training_days_unused:g} days)", f"€{breakdown.training:,.2f}")
    table.add_row("[dim]Total (rounded)[/dim]", f"[dim]{_fmt(breakdown.gross)}[/dim]")

    console.print(table)


def _render_verdict(console: Console, result: ComparisonResult) -> None:
    """Render the better-option panel."""
    if result.better_option == "equal":
        console.print(Panel(OPTION_LABELS["equal"], title="Result", border_style="yellow"))
        return

    console.print(Panel(
        f"[bold green]{OPTION_LABELS[result.better_option]}[/bold green] provides "
        f"[bold]{format_currency(result.difference)}[/bold] more in total net value.",
        title="Result",
        border_style="green",
    ))


def _fmt(amount: float | None) -> str:
    """Format currency amount."""
    if amount is None:
        return "-"
    return format_currency(amount)
