"""Net income estimation for taxable exit payouts.

Applies the social security contribution and the TOP bracket of the
relevant IRS withholding table to the whole gross amount:

    tax = gross * top_rate / 100 - top_parcel
    net = gross - gross * ss_rate - max(0, tax)

This is a worst-case estimate, not a progressive computation. Lump-sum
payouts are withheld at the highest rate.
"""

from typing import Optional

from ..money import round_half_up
from .schemas import FiscalPolicy
from .tables import POLICY_2025, filing_category, top_bracket


def calc_social_security(gross: float, policy: Optional[FiscalPolicy] = None) -> float:
    """Employee social security contribution (flat rate, no brackets)."""
    policy = policy or POLICY_2025
    return gross * policy.social_security_rate


def calc_irs_withholding(
    gross: float,
    marital_status: str,
    dependents: int,
    policy: Optional[FiscalPolicy] = None,
) -> float:
    """IRS withheld at the top bracket of the filing category's table.

    Never negative: small amounts where the parcel exceeds the tax owe 0.
    """
    bracket = top_bracket(filing_category(marital_status, dependents), policy)
    return max(0.0, gross * (bracket.rate_percent / 100) - bracket.parcel)


def estimate_net(
    gross: float,
    marital_status: str,
    dependents: int,
    tax_exempt: bool = False,
    policy: Optional[FiscalPolicy] = None,
) -> Optional[int]:
    """Estimate net payout after social security and IRS.

    Args:
        gross: Gross payout (EUR)
        marital_status: 'single' or 'married'
        dependents: Number of dependents (selects Table II for singles)
        tax_exempt: True for wholly exempt payouts (contract termination)
        policy: Fiscal-year policy (default: built-in)

    Returns:
        Net amount rounded to whole euros, never negative and never above
        gross. None when the payout is tax-exempt (net is not applicable).
    """
    if tax_exempt:
        return None

    social_security = calc_social_security(gross, policy)
    irs = calc_irs_withholding(gross, marital_status, dependents, policy)
    net = gross - social_security - irs

    return round_half_up(max(0.0, net))
