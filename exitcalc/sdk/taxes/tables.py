"""IRS withholding tables and fiscal-year policy constants.

Portuguese IRS withholding tables (Tabelas de Retencao na Fonte), continental
Portugal, 2025. Format per bracket: (lower_bound, upper_bound, rate_percent,
parcel). upper_bound None marks the unbounded top bracket.
"""

from typing import Dict, List, Literal, Optional

from .schemas import FiscalPolicy, TaxBracket


FilingCategory = Literal["single", "single_with_dependents", "married"]

DEFAULT_YEAR = 2025

MARITAL_STATUSES = ("single", "married")

# Table I - Single, widowed, divorced or legally separated without dependents
TABLE_I_2025 = [
    (0, 820, 0.00, 0.00),
    (820, 935, 13.25, 108.65),
    (935, 1002, 18.00, 153.06),
    (1002, 1123, 19.00, 163.09),
    (1123, 1765, 25.50, 236.12),
    (1765, 2057, 32.75, 364.06),
    (2057, 2670, 37.00, 451.48),
    (2670, 4210, 43.50, 625.03),
    (4210, 6410, 45.00, 688.18),
    (6410, 21407, 48.00, 880.48),
    (21407, None, 53.00, 1951.83),
]

# Table II - Single, widowed, divorced or legally separated with dependents
TABLE_II_2025 = [
    (0, 913, 0.00, 0.00),
    (913, 1009, 13.25, 120.97),
    (1009, 1111, 18.00, 168.90),
    (1111, 1371, 19.00, 180.00),
    (1371, 1891, 23.00, 234.84),
    (1891, 2122, 27.50, 320.00),
    (2122, 2987, 33.00, 436.71),
    (2987, 4210, 38.72, 607.51),
    (4210, 5809, 43.50, 808.69),
    (5809, 21407, 45.00, 895.84),
    (21407, None, 53.00, 2609.40),
]

# Table III - Married, two wage earners
TABLE_III_2025 = [
    (0, 820, 0.00, 0.00),
    (820, 935, 13.25, 108.65),
    (935, 1002, 18.00, 153.06),
    (1002, 1123, 19.00, 163.09),
    (1123, 1801, 24.00, 219.38),
    (1801, 2057, 27.50, 282.41),
    (2057, 2987, 33.00, 395.54),
    (2987, 4210, 37.00, 515.02),
    (4210, 5809, 43.50, 788.67),
    (5809, 21407, 45.00, 875.82),
    (21407, None, 53.00, 2589.38),
]


def _brackets(rows: list) -> List[dict]:
    return [
        {"lower_bound": lo, "upper_bound": hi, "rate_percent": rate, "parcel": parcel}
        for lo, hi, rate, parcel in rows
    ]


POLICY_2025 = FiscalPolicy.model_validate({
    "year": 2025,
    "social_security_rate": 0.11,
    "unemployment": {
        # Simplified: 65% for the first 6 months then 55%, averaged to 60%
        "replacement_rate": 0.60,
        "monthly_cap": 1306,
        "duration_bands": [
            {"under_age": 30, "months": 12},
            {"under_age": 50, "months": 18},
            {"months": 24},
        ],
    },
    "tax_tables": {
        "single": _brackets(TABLE_I_2025),
        "single_with_dependents": _brackets(TABLE_II_2025),
        "married": _brackets(TABLE_III_2025),
    },
})

BUILTIN_POLICIES: Dict[int, FiscalPolicy] = {
    2025: POLICY_2025,
}


def get_builtin_policy(year: Optional[int] = None) -> Optional[FiscalPolicy]:
    """Get built-in policy constants for a year (default year if None)."""
    return BUILTIN_POLICIES.get(year if year is not None else DEFAULT_YEAR)


def filing_category(marital_status: str, dependents: int) -> FilingCategory:
    """Map household facts to a withholding table.

    Raises:
        ValueError: If marital_status is not 'single' or 'married'
    """
    status = marital_status.strip().lower()
    if status not in MARITAL_STATUSES:
        raise ValueError(f"Unknown marital status: {marital_status!r}")
    if status == "married":
        return "married"
    return "single_with_dependents" if dependents > 0 else "single"


def get_brackets(
    category: FilingCategory,
    policy: Optional[FiscalPolicy] = None,
) -> List[TaxBracket]:
    """Get the ordered bracket sequence for a filing category."""
    policy = policy or POLICY_2025
    return getattr(policy.tax_tables, category)


def top_bracket(
    category: FilingCategory,
    policy: Optional[FiscalPolicy] = None,
) -> TaxBracket:
    """Get the highest (unbounded) bracket for a filing category."""
    return get_brackets(category, policy)[-1]
