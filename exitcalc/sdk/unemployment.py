"""Unemployment benefit (subsidio de desemprego) estimation.

Only contract termination unlocks the benefit; a mutual agreement exit is
assumed not to qualify.

Duration by age (2025 bands, '<' comparisons):
- under 30: 12 months
- 30 to 49: 18 months
- 50 or more: 24 months

Monthly amount: min(annual_salary / 14 * 60%, 1306). The real benefit pays
65% for the first 6 months and 55% afterwards; 60% is a flat average.
"""

from typing import Optional

from .money import round_half_up
from .payouts import SALARY_PAYMENTS_PER_YEAR
from .schemas import UnemploymentBenefit
from .taxes import POLICY_2025, FiscalPolicy


def calc_unemployment_benefit_months(age: int, policy: Optional[FiscalPolicy] = None) -> int:
    """Benefit duration in months for an age."""
    policy = policy or POLICY_2025
    for band in policy.unemployment.duration_bands:
        if band.under_age is None or age < band.under_age:
            return band.months
    # Unreachable: the last band is open-ended (enforced by UnemploymentRules)
    raise ValueError(f"No duration band covers age {age}")


def calc_unemployment_monthly_amount(
    annual_salary: float,
    policy: Optional[FiscalPolicy] = None,
) -> float:
    """Monthly benefit after the cap (not rounded)."""
    policy = policy or POLICY_2025
    monthly_salary = annual_salary / SALARY_PAYMENTS_PER_YEAR
    return min(monthly_salary * policy.unemployment.replacement_rate, policy.unemployment.monthly_cap)


def calc_unemployment_benefit_total(
    annual_salary: float,
    age: int,
    policy: Optional[FiscalPolicy] = None,
) -> int:
    """Total benefit over the full duration, rounded to whole euros."""
    return unemployment_benefit(age, annual_salary, policy).total


def unemployment_benefit(
    age: int,
    annual_salary: float,
    policy: Optional[FiscalPolicy] = None,
) -> UnemploymentBenefit:
    """Full benefit breakdown for display.

    Example:
        unemployment_benefit(35, 28000)
        # -> months=18, monthly_amount=1200.0, total=21600, capped=False
    """
    policy = policy or POLICY_2025
    months = calc_unemployment_benefit_months(age, policy)
    monthly = calc_unemployment_monthly_amount(annual_salary, policy)
    uncapped = (annual_salary / SALARY_PAYMENTS_PER_YEAR) * policy.unemployment.replacement_rate

    return UnemploymentBenefit(
        months=months,
        monthly_amount=max(0.0, monthly),
        total=round_half_up(max(0.0, monthly) * months),
        capped=uncapped > policy.unemployment.monthly_cap,
    )
