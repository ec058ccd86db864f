"""Exit Calc SDK - Core calculations for employment-exit payout comparison."""

from .config import (
    get_config_dir,
    get_settings_path,
    get_policy_dir,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    clear_setting,
    OUTPUT_FORMATS,
)

from .schemas import (
    EmploymentInput,
    ValidationError,
    TerminationBreakdown,
    UnemploymentBenefit,
    ComparisonResult,
    MutualMonthsType,
    MaritalStatus,
    BetterOption,
)

from .money import (
    round_half_up,
    format_currency,
)

from .payouts import (
    calc_mutual_gross,
    calc_termination_gross,
    calc_termination_breakdown,
    total_mutual_months,
    full_years_of_service,
    training_days_entitled,
)

from .taxes import (
    FiscalPolicy,
    TaxBracket,
    DEFAULT_YEAR,
    estimate_net,
    filing_category,
    get_brackets,
    top_bracket,
)

from .unemployment import (
    calc_unemployment_benefit_months,
    calc_unemployment_benefit_total,
    unemployment_benefit,
)

from .validate import validate_inputs

from .compare import calculate_comparison

from .policy import (
    load_policy,
    dump_policy,
    available_years,
    PolicyError,
    PolicyNotFoundError,
)

__all__ = [
    # Config
    "get_config_dir",
    "get_settings_path",
    "get_policy_dir",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "clear_setting",
    "OUTPUT_FORMATS",
    # Schemas
    "EmploymentInput",
    "ValidationError",
    "TerminationBreakdown",
    "UnemploymentBenefit",
    "ComparisonResult",
    "MutualMonthsType",
    "MaritalStatus",
    "BetterOption",
    # Money
    "round_half_up",
    "format_currency",
    # Gross payouts
    "calc_mutual_gross",
    "calc_termination_gross",
    "calc_termination_breakdown",
    "total_mutual_months",
    "full_years_of_service",
    "training_days_entitled",
    # Taxes
    "FiscalPolicy",
    "TaxBracket",
    "DEFAULT_YEAR",
    "estimate_net",
    "filing_category",
    "get_brackets",
    "top_bracket",
    # Unemployment benefit
    "calc_unemployment_benefit_months",
    "calc_unemployment_benefit_total",
    "unemployment_benefit",
    # Validation and comparison
    "validate_inputs",
    "calculate_comparison",
    # Policy
    "load_policy",
    "dump_policy",
    "available_years",
    "PolicyError",
    "PolicyNotFoundError",
]
