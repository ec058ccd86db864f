"""Tests for the MCP tool functions.

Tools are called directly (the FastMCP decorator returns the coroutine
function unchanged), so every argument is passed explicitly.
"""

import asyncio

import pytest

pytest.importorskip("mcp")

from exitcalc.mcp import server  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Set up isolated config directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv("EXIT_CALC_CONFIG_PATH", str(config_dir))
    return config_dir


def employment(**overrides) -> dict:
    args = {
        "years_of_service": 5,
        "annual_salary": 36000,
        "age": 35,
        "mutual_months": 2,
        "mutual_months_type": "per_year",
        "marital_status": "single",
        "dependents": 0,
        "vacation_days_left": 0,
        "holiday_subsidy_months_left": 0,
        "paid_training_days_used": 0,
    }
    args.update(overrides)
    return args


class TestCompareTool:

    def test_compare(self):
        response = asyncio.run(server.compare_exit_options(**employment(), year=None))

        assert "error" not in response
        assert response["result"]["mutual_gross"] == 25714
        assert response["result"]["termination_total"] == 31892
        assert response["result"]["better_option"] == "termination"

    def test_invalid_input_returns_errors(self):
        response = asyncio.run(server.compare_exit_options(**employment(age=10, annual_salary=500), year=None))

        assert response["result"] is None
        assert response["error"] == "Invalid input"
        assert [e["field"] for e in response["errors"]] == ["annual_salary", "age"]

    def test_unknown_year(self):
        response = asyncio.run(server.compare_exit_options(**employment(), year=1999))

        assert response["result"] is None
        assert "1999" in response["error"]


class TestOtherTools:

    def test_validate(self):
        response = asyncio.run(server.validate_employment_input(**employment()))

        assert response == {"valid": True, "errors": []}

    def test_validate_bad_enum(self):
        response = asyncio.run(server.validate_employment_input(**employment(mutual_months_type="monthly")))

        assert response["valid"] is False
        assert "error" in response

    def test_benefit(self):
        response = asyncio.run(server.get_unemployment_benefit(age=52, annual_salary=50000, year=None))

        assert response["benefit"]["total"] == 31344
        assert response["benefit"]["capped"] is True

    def test_net(self):
        response = asyncio.run(server.estimate_net_income(
            gross=100000, marital_status="Single", dependents=0, year=None,
        ))

        assert response == {"gross": 100000, "net": 37952}
