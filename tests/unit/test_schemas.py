"""Tests for input/result schemas and currency helpers."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from exitcalc.sdk import EmploymentInput, format_currency, round_half_up


class TestEmploymentInput:
    """EmploymentInput construction."""

    def test_accepts_web_form_record(self):
        """camelCase keys and web-form enum spellings are normalised."""
        data = EmploymentInput.model_validate({
            "yearsOfService": 5,
            "annualSalary": 36000,
            "mutualMonths": 2,
            "mutualMonthsType": "perYear",
            "maritalStatus": "Married",
            "dependents": 1,
            "vacationDaysLeft": 3,
            "holidaySubsidyMonthsLeft": 6,
            "age": 35,
            "paidTrainingDaysUsed": 4,
        })

        assert data.years_of_service == 5
        assert data.mutual_months_type == "per_year"
        assert data.marital_status == "married"
        assert data.paid_training_days_used == 4

    def test_defaults(self):
        data = EmploymentInput(years_of_service=2, annual_salary=20000, age=30)

        assert data.mutual_months == 0
        assert data.mutual_months_type == "per_year"
        assert data.marital_status == "single"
        assert data.dependents == 0

    def test_out_of_range_values_survive_construction(self):
        """Ranges are validate_inputs()' job, not the model's."""
        data = EmploymentInput(years_of_service=-1, annual_salary=500, age=10, dependents=-1)

        assert data.years_of_service == -1

    def test_rejects_unknown_fields(self):
        with pytest.raises(PydanticValidationError):
            EmploymentInput(years_of_service=2, annual_salary=20000, age=30, bonus=100)

    def test_rejects_unknown_months_type(self):
        with pytest.raises(PydanticValidationError):
            EmploymentInput(years_of_service=2, annual_salary=20000, age=30, mutual_months_type="monthly")

    @pytest.mark.parametrize("field,value", [
        ("years_of_service", float("nan")),
        ("years_of_service", float("inf")),
        ("annual_salary", float("nan")),
        ("vacation_days_left", float("-inf")),
    ])
    def test_rejects_non_finite_numbers(self, field, value):
        data = {"years_of_service": 5, "annual_salary": 36000, "age": 35, field: value}

        with pytest.raises(PydanticValidationError):
            EmploymentInput(**data)

    def test_frozen(self):
        data = EmploymentInput(years_of_service=2, annual_salary=20000, age=30)

        with pytest.raises(PydanticValidationError):
            data.age = 40


class TestMoney:
    """Rounding and pt-PT formatting."""

    @pytest.mark.parametrize("amount,expected", [
        (2.5, 3),
        (2.49, 2),
        (0.5, 1),
        (0, 0),
        (15428.571, 15429),
        (-2.5, -2),
        (-2.51, -3),
    ])
    def test_round_half_up(self, amount, expected):
        assert round_half_up(amount) == expected

    @pytest.mark.parametrize("amount,expected", [
        (1000, "1.000 €"),
        (36000, "36.000 €"),
        (0, "0 €"),
        (999, "999 €"),
        (1234567, "1.234.567 €"),
        (999.5, "1.000 €"),
        (-1500, "-1.500 €"),
    ])
    def test_format_currency(self, amount, expected):
        assert format_currency(amount) == expected
