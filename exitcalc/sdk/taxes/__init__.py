"""taxes - IRS tables and net income estimation.

Scope:
- Portuguese IRS withholding tables (Tables I, II, III) per fiscal year
- Social security contribution
- Net estimate for taxable payouts (mutual agreement compensation)

Constraints:
- Pure calculation - no file access (policy overrides are loaded in ../policy.py)
- Policy constants replaced wholesale per fiscal year

Usage:
    from exitcalc.sdk.taxes import estimate_net, top_bracket

    net = estimate_net(25714, "single", dependents=0)
    bracket = top_bracket("married")
"""

from .schemas import (
    DurationBand,
    FiscalPolicy,
    TaxBracket,
    TaxTables,
    UnemploymentRules,
)

from .tables import (
    BUILTIN_POLICIES,
    DEFAULT_YEAR,
    POLICY_2025,
    FilingCategory,
    filing_category,
    get_brackets,
    get_builtin_policy,
    top_bracket,
)

from .net import (
    calc_irs_withholding,
    calc_social_security,
    estimate_net,
)

__all__ = [
    # Schemas
    "DurationBand",
    "FiscalPolicy",
    "TaxBracket",
    "TaxTables",
    "UnemploymentRules",
    # Tables
    "BUILTIN_POLICIES",
    "DEFAULT_YEAR",
    "POLICY_2025",
    "FilingCategory",
    "filing_category",
    "get_brackets",
    "get_builtin_policy",
    "top_bracket",
    # Net income
    "calc_irs_withholding",
    "calc_social_security",
    "estimate_net",
]
