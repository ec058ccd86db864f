"""Input range validation for EmploymentInput.

SDK layer - pure logic, returns ValidationError records. Every rule is
checked independently so callers receive all violated fields at once, in
field-declaration order. Nothing is raised for out-of-range values.

Cross-field plausibility (e.g. a 'total' offer that is absurd for the tenure)
is not checked beyond the training-days bound.
"""

from typing import List

from .payouts import full_years_of_service, training_days_entitled
from .schemas import EmploymentInput, ValidationError


MAX_YEARS_OF_SERVICE = 45
MIN_ANNUAL_SALARY = 1000
MAX_MUTUAL_MONTHS = 36
MAX_DEPENDENTS = 6
MAX_VACATION_DAYS = 30
MAX_HOLIDAY_SUBSIDY_MONTHS = 12
MIN_AGE = 18
MAX_AGE = 70


def _in_range(value: float, low: float, high: float) -> bool:
    return low <= value <= high


def validate_inputs(data: EmploymentInput) -> List[ValidationError]:
    """Validate input ranges.

    Args:
        data: Employment facts to check

    Returns:
        List of ValidationError (empty if the input is valid)
    """
    errors = []

    def fail(field: str, message: str) -> None:
        errors.append(ValidationError(field=field, message=message))

    if not _in_range(data.years_of_service, 0, MAX_YEARS_OF_SERVICE):
        fail("years_of_service", f"Years of service must be between 0 and {MAX_YEARS_OF_SERVICE}")

    if data.annual_salary < MIN_ANNUAL_SALARY:
        fail("annual_salary", f"Annual salary must be at least €{MIN_ANNUAL_SALARY:,}")

    if not _in_range(data.mutual_months, 0, MAX_MUTUAL_MONTHS):
        fail("mutual_months", f"Mutual agreement months must be between 0 and {MAX_MUTUAL_MONTHS}")

    if not _in_range(data.dependents, 0, MAX_DEPENDENTS):
        fail("dependents", f"Number of dependents must be between 0 and {MAX_DEPENDENTS}")

    if not _in_range(data.vacation_days_left, 0, MAX_VACATION_DAYS):
        fail("vacation_days_left", f"Vacation days left must be between 0 and {MAX_VACATION_DAYS}")

    if not _in_range(data.holiday_subsidy_months_left, 0, MAX_HOLIDAY_SUBSIDY_MONTHS):
        fail(
            "holiday_subsidy_months_left",
            f"Holiday subsidy months left must be between 0 and {MAX_HOLIDAY_SUBSIDY_MONTHS}",
        )

    if not _in_range(data.age, MIN_AGE, MAX_AGE):
        fail("age", f"Age must be between {MIN_AGE} and {MAX_AGE}")

    # Entitlement is 0 (never negative) when years_of_service is itself invalid
    max_training_days = training_days_entitled(data.years_of_service)
    if not _in_range(data.paid_training_days_used, 0, max_training_days):
        fail(
            "paid_training_days_used",
            f"Paid training days used must be between 0 and {max_training_days} "
            f"(5 days per year × {full_years_of_service(data.years_of_service)} years)",
        )

    return errors
