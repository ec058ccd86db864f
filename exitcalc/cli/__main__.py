"""Exit Calc CLI - Command-line interface for employment-exit payout comparison."""

import json
import logging
import os
import sys
from typing import Any, Optional

import click
import yaml
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console

from exitcalc import __version__
from exitcalc.sdk import (
    EmploymentInput,
    FiscalPolicy,
    OUTPUT_FORMATS,
    PolicyError,
    PolicyNotFoundError,
    calculate_comparison,
    estimate_net,
    format_currency,
    get_setting,
    load_policy,
    unemployment_benefit,
    validate_inputs,
)
from exitcalc.sdk.taxes import calc_irs_withholding, calc_social_security

from .renderers.comparison_renderer import (
    render_benefit,
    render_comparison,
    render_validation_errors,
)
from .policy_commands import policy as policy_group
from .settings_commands import settings as settings_group


# camelCase form keys -> EmploymentInput attribute names. File keys are
# renamed before merging so a command-line option replaces the file value
# instead of sitting beside it under the other key style.
_FIELD_ALIASES = {
    field.alias: name
    for name, field in EmploymentInput.model_fields.items()
    if field.alias
}


@click.group()
@click.version_option(version=__version__, prog_name="exit-calc")
def cli():
    """Exit Calc - Compare employment-exit payouts under Portuguese labor law.

    Estimates a mutual agreement exit against a contract termination:
    gross and net compensation, unemployment benefit, and which option
    yields more total value.

    Configuration is loaded from (in order):

    \b
    1. EXIT_CALC_CONFIG_PATH environment variable
    2. ~/.config/exit-calc/settings.json (XDG default)

    Run 'exit-calc settings show' to see the active settings.
    """
    pass


cli.add_command(policy_group)
cli.add_command(settings_group)


def input_options(f):
    """Attach the employment input options to a command."""
    options = [
        click.option("--input", "-i", "input_file", type=click.Path(exists=True, dir_okay=False),
                     help="JSON or YAML file with the input record (snake_case or camelCase keys)"),
        click.option("--years", "years_of_service", type=float, help="Years of service (fractional allowed)"),
        click.option("--salary", "annual_salary", type=float, help="Annual gross salary (EUR)"),
        click.option("--mutual-months", type=float, help="Months offered for mutual agreement"),
        click.option("--mutual-months-type", type=click.Choice(["per_year", "total"]),
                     help="'per_year' multiplies by years of service (default), 'total' is used as-is"),
        click.option("--marital-status", type=click.Choice(["single", "married"]), help="Default: single"),
        click.option("--dependents", type=int, help="Number of dependents (default: 0)"),
        click.option("--vacation-days", "vacation_days_left", type=float, help="Unused vacation days"),
        click.option("--holiday-months", "holiday_subsidy_months_left", type=float,
                     help="Holiday subsidy months still to be paid"),
        click.option("--age", type=int, help="Age in years"),
        click.option("--training-days-used", "paid_training_days_used", type=float,
                     help="Paid training days already used"),
    ]
    for option in reversed(options):
        f = option(f)
    return f


def _read_input_file(path: str) -> dict:
    """Read an input record from JSON or YAML, normalising keys."""
    try:
        with open(path, "r") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise click.ClickException(f"Invalid input file {path}: {e}")

    if not isinstance(raw, dict):
        raise click.ClickException(f"Input file must contain a mapping, got {type(raw).__name__}")

    return {_FIELD_ALIASES.get(key, key): value for key, value in raw.items()}


def _build_input(input_file: Optional[str], fields: dict) -> EmploymentInput:
    """Merge the input file with command-line overrides."""
    data = _read_input_file(input_file) if input_file else {}
    data.update({key: value for key, value in fields.items() if value is not None})

    try:
        return EmploymentInput.model_validate(data)
    except PydanticValidationError as e:
        problems = "\n".join(
            f"  {'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise click.ClickException(f"Incomplete or malformed input:\n{problems}")


def _resolve_policy(year: Optional[int]) -> FiscalPolicy:
    try:
        return load_policy(year)
    except (PolicyError, PolicyNotFoundError) as e:
        raise click.ClickException(str(e))


def _resolve_format(output_format: Optional[str]) -> str:
    return output_format or get_setting("output_format", "text")


def _echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _fail_validation(errors, output_format: str) -> None:
    if output_format == "json":
        _echo_json({"valid": False, "errors": [e.model_dump() for e in errors]})
    else:
        render_validation_errors(Console(), errors)
    sys.exit(1)


year_option = click.option("--year", "-y", type=int, default=None,
                           help="Fiscal year of the rules (default: 'fiscal_year' setting)")
format_option = click.option("--format", "output_format", type=click.Choice(OUTPUT_FORMATS), default=None,
                             help="Output format (default: 'output_format' setting, else text)")


@cli.command("compare")
@input_options
@year_option
@format_option
def compare(input_file, year, output_format, **fields):
    """Compare a mutual agreement exit with a contract termination.

    Input comes from --input and/or the individual options (options win).
    The input is validated first; invalid input exits with status 1.

    Examples:
        exit-calc compare --years 5 --salary 36000 --mutual-months 2 --age 35
        exit-calc compare -i employee.json --format json
    """
    data = _build_input(input_file, fields)
    output_format = _resolve_format(output_format)

    errors = validate_inputs(data)
    if errors:
        _fail_validation(errors, output_format)

    result = calculate_comparison(data, _resolve_policy(year))

    if output_format == "json":
        payload = result.model_dump()
        payload["termination_total"] = result.termination_total
        _echo_json({"input": data.model_dump(), "result": payload})
    else:
        render_comparison(Console(), data, result)


@cli.command("validate")
@input_options
@format_option
def validate(input_file, output_format, **fields):
    """Check an input record against the allowed ranges.

    Reports every invalid field at once; exits with status 1 if any.
    """
    data = _build_input(input_file, fields)
    output_format = _resolve_format(output_format)

    errors = validate_inputs(data)
    if errors:
        _fail_validation(errors, output_format)

    if output_format == "json":
        _echo_json({"valid": True, "errors": []})
    else:
        click.echo("Input is valid.")


@cli.command("benefit")
@click.argument("age", type=int)
@click.argument("annual_salary", type=float)
@year_option
@format_option
def benefit(age, annual_salary, year, output_format):
    """Show the unemployment benefit for AGE and ANNUAL_SALARY.

    Examples:
        exit-calc benefit 35 28000
    """
    policy = _resolve_policy(year)
    result = unemployment_benefit(age, annual_salary, policy)

    if _resolve_format(output_format) == "json":
        _echo_json(result.model_dump())
    else:
        render_benefit(Console(), age, annual_salary, result)


@cli.command("net")
@click.argument("gross", type=float)
@click.option("--marital-status", type=click.Choice(["single", "married"]), default="single",
              show_default=True)
@click.option("--dependents", type=int, default=0, show_default=True)
@year_option
@format_option
def net(gross, marital_status, dependents, year, output_format):
    """Estimate the net of a taxable GROSS payout.

    Uses the top IRS bracket of the household's table on the whole amount
    (worst-case withholding), plus social security.
    """
    if gross < 0:
        raise click.BadParameter("GROSS must not be negative.", param_hint="GROSS")

    policy = _resolve_policy(year)
    social_security = calc_social_security(gross, policy)
    irs = calc_irs_withholding(gross, marital_status, dependents, policy)
    net_amount = estimate_net(gross, marital_status, dependents, policy=policy)

    if _resolve_format(output_format) == "json":
        _echo_json({
            "gross": gross,
            "social_security": round(social_security, 2),
            "irs": round(irs, 2),
            "net": net_amount,
        })
        return

    click.echo(f"Gross:            {format_currency(gross)}")
    click.echo(f"Social security:  -€{social_security:,.2f}")
    click.echo(f"IRS (top bracket): -€{irs:,.2f}")
    click.echo(f"Net:              {format_currency(net_amount)}")


def main():
    """Entry point for the CLI."""
    log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    cli()


if __name__ == "__main__":
    main()
