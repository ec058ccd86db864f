"""Exit Calc MCP Server - FastMCP implementation for exit payout tools."""

import logging
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from exitcalc.sdk import (
    EmploymentInput,
    calculate_comparison,
    estimate_net,
    load_policy,
    unemployment_benefit,
    validate_inputs,
)

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("exit-calc")


def _employment_input(
    years_of_service: float,
    annual_salary: float,
    age: int,
    mutual_months: float,
    mutual_months_type: str,
    marital_status: str,
    dependents: int,
    vacation_days_left: float,
    holiday_subsidy_months_left: float,
    paid_training_days_used: float,
) -> EmploymentInput:
    return EmploymentInput(
        years_of_service=years_of_service,
        annual_salary=annual_salary,
        age=age,
        mutual_months=mutual_months,
        mutual_months_type=mutual_months_type,
        marital_status=marital_status,
        dependents=dependents,
        vacation_days_left=vacation_days_left,
        holiday_subsidy_months_left=holiday_subsidy_months_left,
        paid_training_days_used=paid_training_days_used,
    )


# --- Tools ---

@mcp.tool()
async def compare_exit_options(
    years_of_service: float = Field(description="Years of service (fractional allowed)"),
    annual_salary: float = Field(description="Annual gross salary in EUR"),
    age: int = Field(description="Age in years"),
    mutual_months: float = Field(default=0, description="Months offered for the mutual agreement"),
    mutual_months_type: str = Field(default="per_year", description="'per_year' or 'total'"),
    marital_status: str = Field(default="single", description="'single' or 'married'"),
    dependents: int = Field(default=0, description="Number of dependents"),
    vacation_days_left: float = Field(default=0, description="Unused vacation days"),
    holiday_subsidy_months_left: float = Field(default=0, description="Holiday subsidy months still to be paid"),
    paid_training_days_used: float = Field(default=0, description="Paid training days already used"),
    year: int | None = Field(default=None, description="Fiscal year of the rules (default: configured year)"),
) -> dict[str, Any]:
    """Compare a mutual agreement exit with a contract termination under Portuguese labor law. Returns gross and net payouts, unemployment benefit, and the better option."""
    try:
        data = _employment_input(
            years_of_service, annual_salary, age, mutual_months, mutual_months_type,
            marital_status, dependents, vacation_days_left, holiday_subsidy_months_left,
            paid_training_days_used,
        )

        errors = validate_inputs(data)
        if errors:
            return {"error": "Invalid input", "errors": [e.model_dump() for e in errors], "result": None}

        result = calculate_comparison(data, load_policy(year))
        payload = result.model_dump()
        payload["termination_total"] = result.termination_total
        return {"result": payload}

    except Exception as e:
        logger.error(f"Error comparing exit options: {e}")
        return {"error": str(e), "result": None}


@mcp.tool()
async def validate_employment_input(
    years_of_service: float = Field(description="Years of service (fractional allowed)"),
    annual_salary: float = Field(description="Annual gross salary in EUR"),
    age: int = Field(description="Age in years"),
    mutual_months: float = Field(default=0, description="Months offered for the mutual agreement"),
    mutual_months_type: str = Field(default="per_year", description="'per_year' or 'total'"),
    marital_status: str = Field(default="single", description="'single' or 'married'"),
    dependents: int = Field(default=0, description="Number of dependents"),
    vacation_days_left: float = Field(default=0, description="Unused vacation days"),
    holiday_subsidy_months_left: float = Field(default=0, description="Holiday subsidy months still to be paid"),
    paid_training_days_used: float = Field(default=0, description="Paid training days already used"),
) -> dict[str, Any]:
    """Check employment facts against the allowed ranges. Returns every invalid field at once."""
    try:
        data = _employment_input(
            years_of_service, annual_salary, age, mutual_months, mutual_months_type,
            marital_status, dependents, vacation_days_left, holiday_subsidy_months_left,
            paid_training_days_used,
        )
        errors = validate_inputs(data)
        return {"valid": not errors, "errors": [e.model_dump() for e in errors]}

    except Exception as e:
        logger.error(f"Error validating input: {e}")
        return {"error": str(e), "valid": False, "errors": []}


@mcp.tool()
async def get_unemployment_benefit(
    age: int = Field(description="Age in years"),
    annual_salary: float = Field(description="Annual gross salary in EUR"),
    year: int | None = Field(default=None, description="Fiscal year of the rules (default: configured year)"),
) -> dict[str, Any]:
    """Get unemployment benefit duration, capped monthly amount and total for an age and salary."""
    try:
        return {"benefit": unemployment_benefit(age, annual_salary, load_policy(year)).model_dump()}
    except Exception as e:
        logger.error(f"Error computing unemployment benefit: {e}")
        return {"error": str(e), "benefit": None}


@mcp.tool()
async def estimate_net_income(
    gross: float = Field(description="Taxable gross payout in EUR"),
    marital_status: str = Field(default="single", description="'single' or 'married'"),
    dependents: int = Field(default=0, description="Number of dependents"),
    year: int | None = Field(default=None, description="Fiscal year of the rules (default: configured year)"),
) -> dict[str, Any]:
    """Estimate net of a taxable payout: social security plus IRS at the top bracket (worst case)."""
    try:
        net = estimate_net(gross, marital_status.lower(), dependents, policy=load_policy(year))
        return {"gross": gross, "net": net}
    except Exception as e:
        logger.error(f"Error estimating net income: {e}")
        return {"error": str(e), "net": None}


# --- Server Entry Point ---

def run_server():
    """Run the MCP server in stdio mode."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
