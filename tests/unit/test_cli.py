"""Tests for the exit-calc CLI commands.

Uses isolated directories via tmp_path and EXIT_CALC_CONFIG_PATH
to avoid touching real settings.
"""

import json

import pytest
import yaml
from click.testing import CliRunner

from exitcalc import __version__
from exitcalc.cli.__main__ import cli


CASE_A = ["--years", "5", "--salary", "36000", "--mutual-months", "2", "--age", "35"]


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Set up isolated config directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()

    monkeypatch.setenv("EXIT_CALC_CONFIG_PATH", str(config_dir))

    return {"config_dir": config_dir, "tmp_path": tmp_path}


@pytest.fixture
def runner():
    return CliRunner()


class TestCompare:
    """exit-calc compare."""

    def test_json_output(self, runner, isolated_env):
        result = runner.invoke(cli, ["compare", *CASE_A, "--format", "json"])

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["input"]["years_of_service"] == 5
        assert payload["result"]["mutual_gross"] == 25714
        assert payload["result"]["termination_gross"] == 8384
        assert payload["result"]["termination_total"] == 31892
        assert payload["result"]["better_option"] == "termination"
        assert payload["result"]["fiscal_year"] == 2025

    def test_text_output(self, runner, isolated_env):
        result = runner.invoke(cli, ["compare", *CASE_A])

        assert result.exit_code == 0, result.output
        assert "Exit Scenarios (2025 rules)" in result.output
        assert "Contract Termination" in result.output
        assert "25.714 €" in result.output

    def test_camel_case_input_file(self, runner, isolated_env):
        input_file = isolated_env["tmp_path"] / "employee.json"
        input_file.write_text(json.dumps({
            "yearsOfService": 5,
            "annualSalary": 36000,
            "mutualMonths": 2,
            "mutualMonthsType": "perYear",
            "maritalStatus": "single",
            "dependents": 0,
            "vacationDaysLeft": 0,
            "holidaySubsidyMonthsLeft": 0,
            "age": 35,
            "paidTrainingDaysUsed": 0,
        }))

        result = runner.invoke(cli, ["compare", "-i", str(input_file), "--format", "json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["result"]["mutual_gross"] == 25714

    def test_options_override_file(self, runner, isolated_env):
        input_file = isolated_env["tmp_path"] / "employee.yaml"
        input_file.write_text(yaml.safe_dump({
            "years_of_service": 5,
            "annual_salary": 36000,
            "mutual_months": 2,
            "age": 35,
        }))

        result = runner.invoke(cli, [
            "compare", "-i", str(input_file), "--mutual-months", "0", "--format", "json",
        ])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["result"]["mutual_gross"] == 0

    def test_option_overrides_camel_case_file_key(self, runner, isolated_env):
        input_file = isolated_env["tmp_path"] / "employee.json"
        input_file.write_text(json.dumps({
            "yearsOfService": 5,
            "annualSalary": 36000,
            "mutualMonths": 2,
            "age": 35,
        }))

        result = runner.invoke(cli, [
            "compare", "-i", str(input_file), "--salary", "28000", "--format", "json",
        ])

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["input"]["annual_salary"] == 28000
        assert payload["result"]["mutual_gross"] == 20000

    def test_invalid_input_exits_1(self, runner, isolated_env):
        result = runner.invoke(cli, [
            "compare", "--years", "5", "--salary", "36000", "--age", "10", "--format", "json",
        ])

        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["valid"] is False
        assert [e["field"] for e in payload["errors"]] == ["age"]

    def test_invalid_input_text(self, runner, isolated_env):
        result = runner.invoke(cli, ["compare", "--years", "5", "--salary", "500", "--age", "35"])

        assert result.exit_code == 1
        assert "annual_salary" in result.output

    def test_missing_required_field(self, runner, isolated_env):
        result = runner.invoke(cli, ["compare", "--years", "5", "--age", "35"])

        assert result.exit_code == 1
        assert "Incomplete or malformed input" in result.output
        assert "annualSalary" in result.output or "annual_salary" in result.output

    def test_output_format_setting(self, runner, isolated_env):
        (isolated_env["config_dir"] / "settings.json").write_text(json.dumps({"output_format": "json"}))

        result = runner.invoke(cli, ["compare", *CASE_A])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["result"]["better_option"] == "termination"

    def test_unknown_year(self, runner, isolated_env):
        result = runner.invoke(cli, ["compare", *CASE_A, "--year", "1999"])

        assert result.exit_code == 1
        assert "No policy for fiscal year 1999" in result.output


class TestValidate:
    """exit-calc validate."""

    @pytest.mark.parametrize("value", ["nan", "inf"])
    def test_non_finite_years(self, runner, isolated_env, value):
        result = runner.invoke(cli, ["validate", "--years", value, "--salary", "36000", "--age", "35"])

        assert result.exit_code == 1
        assert "Incomplete or malformed input" in result.output
        assert not isinstance(result.exception, ValueError)

    def test_valid(self, runner, isolated_env):
        result = runner.invoke(cli, ["validate", *CASE_A])

        assert result.exit_code == 0
        assert "Input is valid." in result.output

    def test_reports_every_field(self, runner, isolated_env):
        result = runner.invoke(cli, [
            "validate", "--years", "-1", "--salary", "500", "--mutual-months", "50",
            "--dependents", "-1", "--age", "35", "--format", "json",
        ])

        assert result.exit_code == 1
        fields = [e["field"] for e in json.loads(result.output)["errors"]]
        assert fields == ["years_of_service", "annual_salary", "mutual_months", "dependents"]


class TestBenefitAndNet:
    """exit-calc benefit / net."""

    def test_benefit_json(self, runner, isolated_env):
        result = runner.invoke(cli, ["benefit", "35", "28000", "--format", "json"])

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["months"] == 18
        assert payload["total"] == 21600
        assert payload["capped"] is False

    def test_benefit_text(self, runner, isolated_env):
        result = runner.invoke(cli, ["benefit", "52", "50000"])

        assert result.exit_code == 0, result.output
        assert "24 months" in result.output
        assert "capped" in result.output

    def test_net_json(self, runner, isolated_env):
        result = runner.invoke(cli, ["net", "100000", "--format", "json"])

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["social_security"] == 11000
        assert payload["net"] == 37952

    def test_net_married(self, runner, isolated_env):
        result = runner.invoke(cli, [
            "net", "100000", "--marital-status", "married", "--dependents", "2", "--format", "json",
        ])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["net"] == 38589

    def test_net_rejects_negative(self, runner, isolated_env):
        result = runner.invoke(cli, ["net", "--", "-5"])

        assert result.exit_code == 2
        assert "must not be negative" in result.output


class TestSettings:
    """exit-calc settings."""

    def test_output_format(self, runner, isolated_env):
        result = runner.invoke(cli, ["settings", "output-format", "json"])

        assert result.exit_code == 0
        settings = json.loads((isolated_env["config_dir"] / "settings.json").read_text())
        assert settings == {"output_format": "json"}

    def test_fiscal_year_unknown(self, runner, isolated_env):
        result = runner.invoke(cli, ["settings", "fiscal-year", "2030"])

        assert result.exit_code == 2
        assert not (isolated_env["config_dir"] / "settings.json").exists()

    def test_fiscal_year_set_and_clear(self, runner, isolated_env):
        result = runner.invoke(cli, ["settings", "fiscal-year", "2025"])
        assert result.exit_code == 0
        assert "Set fiscal_year: 2025" in result.output

        result = runner.invoke(cli, ["settings", "fiscal-year", "--clear"])
        assert result.exit_code == 0
        assert "Cleared fiscal_year setting." in result.output

    def test_show_defaults(self, runner, isolated_env):
        result = runner.invoke(cli, ["settings", "show"])

        assert result.exit_code == 0
        assert "No settings configured" in result.output
        assert "fiscal_year: 2025" in result.output


class TestPolicy:
    """exit-calc policy."""

    def test_years(self, runner, isolated_env):
        result = runner.invoke(cli, ["policy", "years"])

        assert result.exit_code == 0
        assert "2025  built-in" in result.output

    def test_dump_to_file_becomes_override(self, runner, isolated_env):
        target = isolated_env["config_dir"] / "policy" / "2025.yaml"

        result = runner.invoke(cli, ["policy", "dump", "-o", str(target)])

        assert result.exit_code == 0, result.output
        assert "Wrote policy to" in result.output
        assert yaml.safe_load(target.read_text())["year"] == 2025

        result = runner.invoke(cli, ["policy", "years"])
        assert "override" in result.output

    def test_show(self, runner, isolated_env):
        result = runner.invoke(cli, ["policy", "show"])

        assert result.exit_code == 0, result.output
        assert "Fiscal year 2025" in result.output
        assert "Table III" in result.output


def test_version(runner):
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output
