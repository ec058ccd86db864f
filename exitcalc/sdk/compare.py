"""Mutual agreement vs contract termination comparison.

Mutual agreement compensation is taxed (social security + IRS); contract
termination compensation is tax-exempt and additionally unlocks the
unemployment benefit. The options are compared on net value:

    mutual_net  vs  termination_net + unemployment_benefit_total

Callers must run validate_inputs() first; input is not re-validated here.
"""

import logging
from typing import Optional

from .payouts import calc_mutual_gross, calc_termination_breakdown
from .schemas import ComparisonResult, EmploymentInput
from .taxes import POLICY_2025, FiscalPolicy, estimate_net
from .unemployment import unemployment_benefit

logger = logging.getLogger(__name__)


def calculate_comparison(
    data: EmploymentInput,
    policy: Optional[FiscalPolicy] = None,
) -> ComparisonResult:
    """Compare both exit scenarios for one set of employment facts.

    Args:
        data: Validated employment facts
        policy: Fiscal-year policy (default: built-in)

    Returns:
        ComparisonResult with gross/net figures, benefit entitlement and
        the better option
    """
    policy = policy or POLICY_2025

    mutual_gross = calc_mutual_gross(
        data.annual_salary,
        data.mutual_months,
        data.years_of_service,
        data.mutual_months_type,
    )
    breakdown = calc_termination_breakdown(
        data.annual_salary,
        data.years_of_service,
        data.vacation_days_left,
        data.holiday_subsidy_months_left,
        data.paid_training_days_used,
    )
    termination_gross = breakdown.gross

    mutual_net = estimate_net(mutual_gross, data.marital_status, data.dependents, policy=policy)
    # Termination compensation is exempt: gross = net
    termination_net = termination_gross

    benefit = unemployment_benefit(data.age, data.annual_salary, policy)
    termination_total = termination_net + benefit.total

    if mutual_net > termination_total:
        better_option = "mutual"
        difference = mutual_net - termination_total
    elif termination_total > mutual_net:
        better_option = "termination"
        difference = termination_total - mutual_net
    else:
        better_option = "equal"
        difference = 0

    logger.debug(
        f"comparison ({policy.year}): mutual_net={mutual_net} "
        f"termination_total={termination_total} -> {better_option} by {difference}"
    )

    return ComparisonResult(
        fiscal_year=policy.year,
        better_option=better_option,
        difference=difference,
        mutual_gross=mutual_gross,
        termination_gross=termination_gross,
        mutual_net=mutual_net,
        termination_net=termination_net,
        unemployment_benefit_months=benefit.months,
        unemployment_benefit_total=benefit.total,
        unemployment_monthly_amount=benefit.monthly_amount,
        termination_breakdown=breakdown,
    )
