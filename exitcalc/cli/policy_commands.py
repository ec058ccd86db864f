"""Policy CLI commands for Exit Calc.

Shows the fiscal-year policy in effect and dumps it as YAML so it can be
copied to policy/<year>.yaml and replaced wholesale.
"""

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table
from rich import box

from exitcalc.sdk import (
    PolicyError,
    PolicyNotFoundError,
    available_years,
    dump_policy,
    load_policy,
)
from exitcalc.sdk.policy import get_policy_path


TABLE_TITLES = {
    "single": "Table I - Single, no dependents",
    "single_with_dependents": "Table II - Single with dependents",
    "married": "Table III - Married, two earners",
}


def _load(year):
    try:
        return load_policy(year)
    except (PolicyError, PolicyNotFoundError) as e:
        raise click.ClickException(str(e))


@click.group()
def policy():
    """Inspect fiscal-year policy (IRS tables, benefit rules).

    Built-in policies can be replaced wholesale by placing a YAML file at
    <config dir>/policy/<year>.yaml (see 'policy dump').
    """
    pass


@policy.command("years")
def policy_years():
    """List fiscal years with a policy available."""
    for year in available_years():
        override = get_policy_path(year)
        source = f"override ({override})" if override.exists() else "built-in"
        click.echo(f"{year}  {source}")


@policy.command("show")
@click.option("--year", "-y", type=int, default=None, help="Fiscal year (default: 'fiscal_year' setting)")
def policy_show(year):
    """Show the IRS tables and benefit rules in effect."""
    rules = _load(year)
    console = Console()

    console.print(f"[bold]Fiscal year {rules.year}[/bold]")
    console.print(f"Social security rate: {rules.social_security_rate:.0%}")

    unemployment = rules.unemployment
    console.print(
        f"Unemployment benefit: {unemployment.replacement_rate:.0%} of monthly salary, "
        f"capped at €{unemployment.monthly_cap:,.2f}/month"
    )
    for band in unemployment.duration_bands:
        label = f"under {band.under_age}" if band.under_age is not None else "all other ages"
        console.print(f"  {label}: {band.months} months")

    for category, title in TABLE_TITLES.items():
        table = Table(title=title, box=box.SIMPLE)
        table.add_column("From", justify="right")
        table.add_column("To", justify="right")
        table.add_column("Rate", justify="right")
        table.add_column("Parcel", justify="right")
        for bracket in getattr(rules.tax_tables, category):
            upper = f"€{bracket.upper_bound:,.0f}" if bracket.upper_bound is not None else "-"
            table.add_row(
                f"€{bracket.lower_bound:,.0f}",
                upper,
                f"{bracket.rate_percent:.2f}%",
                f"€{bracket.parcel:,.2f}",
            )
        console.print(table)


@policy.command("dump")
@click.option("--year", "-y", type=int, default=None, help="Fiscal year (default: 'fiscal_year' setting)")
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None,
              help="Write to file instead of stdout")
def policy_dump(year, output):
    """Print the policy in effect as YAML.

    Examples:
        exit-calc policy dump
        exit-calc policy dump -o ~/.config/exit-calc/policy/2026.yaml
    """
    text = dump_policy(_load(year))

    if not output:
        click.echo(text, nl=False)
        return

    path = Path(output).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    click.echo(f"Wrote policy to {path}")
