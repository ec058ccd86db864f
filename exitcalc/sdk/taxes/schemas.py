"""Pydantic schemas for fiscal-year policy validation.

These schemas validate the built-in policy constants and any
policy/<year>.yaml override, and provide typed access to IRS withholding
brackets, the social security rate and unemployment benefit parameters.

A malformed policy (overlapping brackets, missing unbounded top bracket,
unsorted age bands) raises pydantic.ValidationError at construction.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TaxBracket(BaseModel):
    """Single IRS withholding bracket."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    lower_bound: float = Field(..., ge=0, description="Lower bound (inclusive)")
    upper_bound: Optional[float] = Field(default=None, description="Upper bound (None if unbounded)")
    rate_percent: float = Field(..., ge=0, le=100, description="Marginal rate in percent")
    parcel: float = Field(default=0, ge=0, description="Parcel to subtract (parcela a abater)")


class TaxTables(BaseModel):
    """Withholding tables for the three filing categories."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    single: List[TaxBracket] = Field(..., min_length=1, description="Table I")
    single_with_dependents: List[TaxBracket] = Field(..., min_length=1, description="Table II")
    married: List[TaxBracket] = Field(..., min_length=1, description="Table III")

    @model_validator(mode="after")
    def check_contiguous(self) -> "TaxTables":
        """Brackets must start at 0, be contiguous, and end unbounded."""
        errors = []
        for name in ("single", "single_with_dependents", "married"):
            brackets = getattr(self, name)
            if brackets[0].lower_bound != 0:
                errors.append(f"{name}: first bracket must start at 0")
            for lower, upper in zip(brackets, brackets[1:]):
                if lower.upper_bound is None or lower.upper_bound != upper.lower_bound:
                    errors.append(
                        f"{name}: bracket ending at {lower.upper_bound} does not meet "
                        f"bracket starting at {upper.lower_bound}"
                    )
                elif upper.lower_bound <= lower.lower_bound:
                    errors.append(f"{name}: brackets not in ascending order at {upper.lower_bound}")
            if brackets[-1].upper_bound is not None:
                errors.append(f"{name}: last bracket must be unbounded")

        if errors:
            raise ValueError("; ".join(errors))

        return self


class DurationBand(BaseModel):
    """Benefit duration for ages below a threshold (None = all remaining ages)."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    under_age: Optional[int] = Field(default=None, gt=0)
    months: int = Field(..., gt=0)


class UnemploymentRules(BaseModel):
    """Unemployment benefit (subsidio de desemprego) parameters."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    replacement_rate: float = Field(..., gt=0, le=1, description="Share of monthly salary paid")
    monthly_cap: float = Field(..., gt=0, description="Maximum monthly benefit (EUR)")
    duration_bands: List[DurationBand] = Field(..., min_length=1)

    @model_validator(mode="after")
    def check_bands(self) -> "UnemploymentRules":
        """Bands must be ascending and end with an open-ended band."""
        thresholds = [b.under_age for b in self.duration_bands[:-1]]
        if any(t is None for t in thresholds):
            raise ValueError("only the last duration band may omit under_age")
        if thresholds != sorted(thresholds) or len(set(thresholds)) != len(thresholds):
            raise ValueError("duration bands must be in ascending age order")
        if self.duration_bands[-1].under_age is not None:
            raise ValueError("last duration band must omit under_age")
        return self


class FiscalPolicy(BaseModel):
    """Complete policy constants for one fiscal year.

    Replaced wholesale when the year changes; individual brackets are never
    patched in place.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(..., ge=2000)
    social_security_rate: float = Field(..., ge=0, le=1, description="Employee contribution rate")
    unemployment: UnemploymentRules
    tax_tables: TaxTables
