"""Settings CLI commands for Exit Calc.

Manages settings.json - fiscal year and output preferences.
"""

import click

from exitcalc.sdk import (
    DEFAULT_YEAR,
    OUTPUT_FORMATS,
    available_years,
    clear_setting,
    get_setting,
    get_settings_path,
    load_settings,
    set_setting,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - fiscal_year: policy year used for calculations
    - output_format: default output ('text' or 'json')
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and their values."""
    settings_path = get_settings_path()
    current = load_settings()

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
    else:
        click.echo("Current settings:")
        for key, value in current.items():
            click.echo(f"  {key}: {value}")

    click.echo()
    click.echo("Effective values:")
    click.echo(f"  fiscal_year: {get_setting('fiscal_year', DEFAULT_YEAR)}")
    click.echo(f"  output_format: {get_setting('output_format', 'text')}")


@settings.command("fiscal-year")
@click.argument("year", required=False, type=int)
@click.option("--clear", is_flag=True, help="Clear fiscal_year, revert to default")
def settings_fiscal_year(year, clear):
    """Set or clear the fiscal year used for calculations.

    Examples:
        exit-calc settings fiscal-year 2025
        exit-calc settings fiscal-year --clear
    """
    if clear:
        if clear_setting("fiscal_year"):
            click.echo("Cleared fiscal_year setting.")
        else:
            click.echo("fiscal_year was not set.")
        click.echo(f"Fiscal year is now: {DEFAULT_YEAR} (default)")
        return

    if year is None:
        current = get_setting("fiscal_year")
        if current is not None:
            click.echo(f"Current fiscal_year: {current}")
        else:
            click.echo(f"No fiscal_year set. Using default: {DEFAULT_YEAR}")
        return

    years = available_years()
    if year not in years:
        raise click.BadParameter(
            f"No policy for {year}. Available: {', '.join(str(y) for y in years)}",
            param_hint="YEAR",
        )

    set_setting("fiscal_year", year)
    click.echo(f"Set fiscal_year: {year}")
    click.echo(f"Saved to: {get_settings_path()}")


@settings.command("output-format")
@click.argument("output_format", required=False, type=click.Choice(OUTPUT_FORMATS))
def settings_output_format(output_format):
    """Set or show the default output format."""
    if output_format is None:
        click.echo(f"Current output_format: {get_setting('output_format', 'text')}")
        return

    set_setting("output_format", output_format)
    click.echo(f"Set output_format: {output_format}")
