"""Pydantic schemas for exit-calc inputs and results.

All schemas use extra='forbid' to reject unknown fields, and frozen=True so
inputs and results cannot be mutated once built.

EmploymentInput carries no range constraints: out-of-range
values must survive construction so validate_inputs() can report every
violated field at once. Only type errors are rejected here.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .money import round_half_up


MutualMonthsType = Literal["per_year", "total"]
MaritalStatus = Literal["single", "married"]
BetterOption = Literal["mutual", "termination", "equal"]

# Spellings used by the web form's data record
_MONTHS_TYPE_ALIASES = {"peryear": "per_year", "per-year": "per_year"}


class EmploymentInput(BaseModel):
    """Employment facts for one exit scenario comparison.

    Accepts snake_case field names or the camelCase keys of the web form
    record (yearsOfService, mutualMonthsType, ...).
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        allow_inf_nan=False,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    years_of_service: float = Field(..., description="Years of service (fractional allowed)")
    annual_salary: float = Field(..., description="Annual gross salary (EUR)")
    mutual_months: float = Field(default=0, description="Months offered for mutual agreement")
    mutual_months_type: MutualMonthsType = Field(
        default="per_year",
        description="'per_year' multiplies mutual_months by years of service; 'total' uses it as-is",
    )
    marital_status: MaritalStatus = Field(default="single")
    dependents: int = Field(default=0, description="Number of dependents")
    vacation_days_left: float = Field(default=0, description="Unused vacation days")
    holiday_subsidy_months_left: float = Field(
        default=0, description="Holiday subsidy months still to be paid (0-12)"
    )
    age: int = Field(..., description="Age in years")
    paid_training_days_used: float = Field(
        default=0, description="Paid training days already used"
    )

    @field_validator("mutual_months_type", mode="before")
    @classmethod
    def normalize_months_type(cls, v):
        if isinstance(v, str):
            v = v.strip().lower()
            return _MONTHS_TYPE_ALIASES.get(v, v)
        return v

    @field_validator("marital_status", mode="before")
    @classmethod
    def normalize_marital_status(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v


class ValidationError(BaseModel):
    """A single field-scoped input problem.

    Not to be confused with pydantic.ValidationError: these are returned as
    data by validate_inputs(), never raised.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    field: str = Field(..., description="EmploymentInput attribute name")
    message: str = Field(..., description="Human-readable message")


class TerminationBreakdown(BaseModel):
    """Unrounded components of a contract-termination payout."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    full_years: int = Field(..., ge=0, description="Completed years of service")
    base_severance: float = Field(..., ge=0, description="12 days per completed year")
    vacation: float = Field(..., ge=0, description="Unused vacation days")
    holiday_subsidy: float = Field(..., ge=0, description="Holiday subsidy months left")
    training_days_unused: float = Field(..., ge=0)
    training: float = Field(..., ge=0, description="Unused training entitlement")

    @property
    def total(self) -> float:
        """Sum of the four components, before rounding."""
        return self.base_severance + self.vacation + self.holiday_subsidy + self.training

    @property
    def gross(self) -> int:
        """Termination gross, rounded once at the end."""
        return round_half_up(self.total)


class UnemploymentBenefit(BaseModel):
    """Unemployment benefit entitlement (subsidio de desemprego)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    months: int = Field(..., gt=0, description="Benefit duration in months")
    monthly_amount: float = Field(..., ge=0, description="Monthly benefit after the cap")
    total: int = Field(..., ge=0, description="Total benefit over the full duration")
    capped: bool = Field(..., description="True if the monthly cap applied")


class ComparisonResult(BaseModel):
    """Mutual agreement vs contract termination comparison."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    fiscal_year: int
    better_option: BetterOption
    difference: int = Field(..., ge=0)
    mutual_gross: int = Field(..., ge=0)
    termination_gross: int = Field(..., ge=0)
    mutual_net: Optional[int] = Field(
        default=None, ge=0, description="None when not applicable"
    )
    termination_net: int = Field(..., ge=0, description="Tax-exempt, equals termination_gross")
    unemployment_benefit_months: int = Field(..., gt=0)
    unemployment_benefit_total: int = Field(..., ge=0)
    unemployment_monthly_amount: float = Field(..., ge=0)
    termination_breakdown: TerminationBreakdown

    @property
    def termination_total(self) -> int:
        """Termination net plus the unemployment benefit it unlocks."""
        return self.termination_net + self.unemployment_benefit_total
