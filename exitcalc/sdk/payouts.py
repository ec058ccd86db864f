"""Gross payout calculations for the two exit scenarios.

Mutual agreement (revogacao por mutuo acordo):
    gross = annual_salary / 14 * total_months

    14 = 12 monthly salaries + holiday subsidy + Christmas subsidy.

Contract termination (despedimento):
    base severance   = daily_rate * 12 * full_years
    vacation         = daily_rate * vacation_days_left
    holiday subsidy  = annual_salary / 14 / 12 * holiday_subsidy_months_left
    training         = daily_rate * max(0, full_years * 5 - training_days_used)

    daily_rate = annual_salary / 365. Only completed years count towards
    severance and training entitlement; fractional service is dropped, not
    rounded.

Each calculator rounds once, at the end (see money.round_half_up).
"""

import math

from .money import round_half_up
from .schemas import MutualMonthsType, TerminationBreakdown


SALARY_PAYMENTS_PER_YEAR = 14
DAYS_PER_YEAR = 365
SEVERANCE_DAYS_PER_YEAR = 12
TRAINING_DAYS_PER_YEAR = 5


def full_years_of_service(years_of_service: float) -> int:
    """Completed years of service (fractional year dropped)."""
    return max(0, math.floor(years_of_service))


def training_days_entitled(years_of_service: float) -> int:
    """Paid training days accrued: 5 per completed year."""
    return full_years_of_service(years_of_service) * TRAINING_DAYS_PER_YEAR


def total_mutual_months(
    mutual_months: float,
    years_of_service: float,
    mutual_months_type: MutualMonthsType = "per_year",
) -> float:
    """Resolve the offered months to a total.

    'per_year' offers are multiplied by years of service (fractional years
    included); 'total' offers are used as-is.
    """
    if mutual_months_type == "per_year":
        return mutual_months * years_of_service
    if mutual_months_type == "total":
        return mutual_months
    raise ValueError(f"Unknown mutual_months_type: {mutual_months_type!r}")


def calc_mutual_gross(
    annual_salary: float,
    mutual_months: float,
    years_of_service: float,
    mutual_months_type: MutualMonthsType = "per_year",
) -> int:
    """Gross payout for a mutual agreement exit.

    Examples:
        calc_mutual_gross(28000, 4, 3, "per_year")  # -> 24000 (12 months)
        calc_mutual_gross(28000, 12, 3, "total")    # -> 24000
    """
    months = total_mutual_months(mutual_months, years_of_service, mutual_months_type)
    gross = (annual_salary / SALARY_PAYMENTS_PER_YEAR) * months
    return round_half_up(max(0.0, gross))


def calc_termination_breakdown(
    annual_salary: float,
    years_of_service: float,
    vacation_days_left: float = 0,
    holiday_subsidy_months_left: float = 0,
    paid_training_days_used: float = 0,
) -> TerminationBreakdown:
    """Unrounded components of a contract termination payout.

    Each component is floored at 0.
    """
    daily_rate = annual_salary / DAYS_PER_YEAR
    full_years = full_years_of_service(years_of_service)

    base_severance = daily_rate * SEVERANCE_DAYS_PER_YEAR * full_years
    vacation = daily_rate * vacation_days_left

    # Holiday subsidy accrues monthly: 1/12 of a monthly salary per month
    monthly_holiday_subsidy = (annual_salary / SALARY_PAYMENTS_PER_YEAR) / 12
    holiday_subsidy = monthly_holiday_subsidy * holiday_subsidy_months_left

    training_days_unused = max(0, training_days_entitled(years_of_service) - paid_training_days_used)
    training = daily_rate * training_days_unused

    return TerminationBreakdown(
        full_years=full_years,
        base_severance=max(0.0, base_severance),
        vacation=max(0.0, vacation),
        holiday_subsidy=max(0.0, holiday_subsidy),
        training_days_unused=training_days_unused,
        training=max(0.0, training),
    )


def calc_termination_gross(
    annual_salary: float,
    years_of_service: float,
    vacation_days_left: float = 0,
    holiday_subsidy_months_left: float = 0,
    paid_training_days_used: float = 0,
) -> int:
    """Gross payout for a contract termination exit.

    Note that unused training entitlement is paid out: with
    paid_training_days_used=0 every completed year adds 5 paid days on top
    of the 12 severance days.

    Examples:
        calc_termination_gross(36500, 2, paid_training_days_used=10)  # -> 2400
        calc_termination_gross(36500, 2)                              # -> 3400
    """
    return calc_termination_breakdown(
        annual_salary,
        years_of_service,
        vacation_days_left,
        holiday_subsidy_months_left,
        paid_training_days_used,
    ).gross
