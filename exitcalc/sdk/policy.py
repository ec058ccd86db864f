"""Fiscal-year policy resolution.

The calculators take a FiscalPolicy argument and never read files. This
module resolves which policy applies:

1. year argument, else the 'fiscal_year' setting, else DEFAULT_YEAR
2. policy/<year>.yaml in the config directory (replaces built-in wholesale)
3. built-in constants for that year

Usage:
    from exitcalc.sdk.policy import load_policy, dump_policy

    policy = load_policy()           # settings / default year
    policy = load_policy(2025)
    print(dump_policy(policy))       # YAML, starting point for an override
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from .config import get_policy_dir, get_setting
from .taxes import BUILTIN_POLICIES, DEFAULT_YEAR, FiscalPolicy, get_builtin_policy

logger = logging.getLogger(__name__)


class PolicyError(Exception):
    """Raised when a policy override file is malformed."""
    pass


class PolicyNotFoundError(Exception):
    """Raised when no policy exists for the requested year."""
    pass


def get_policy_path(year: int) -> Path:
    """Path of the override file for a year (may not exist)."""
    return get_policy_dir() / f"{year}.yaml"


def resolve_year(year: Optional[int] = None) -> int:
    """Resolve the fiscal year: argument, then setting, then default."""
    if year is not None:
        return int(year)
    configured = get_setting("fiscal_year")
    if configured is not None:
        return int(configured)
    return DEFAULT_YEAR


def available_years() -> list[int]:
    """Years with a built-in policy or an override file (ascending)."""
    years = set(BUILTIN_POLICIES)
    policy_dir = get_policy_dir()
    if policy_dir.exists():
        years.update(int(p.stem) for p in policy_dir.glob("*.yaml") if p.stem.isdigit())
    return sorted(years)


@lru_cache(maxsize=16)
def _load_policy_file(path: Path, mtime: float) -> FiscalPolicy:
    """Parse and validate a policy file (cached per path and mtime)."""
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise PolicyError(f"Invalid YAML in {path}: {e}")

    if not isinstance(data, dict):
        raise PolicyError(f"Policy must be a YAML dictionary: {path}")

    try:
        return FiscalPolicy.model_validate(data)
    except PydanticValidationError as e:
        raise PolicyError(f"Invalid policy in {path}:\n{e}")


def load_policy(year: Optional[int] = None) -> FiscalPolicy:
    """Load the policy for a fiscal year.

    Args:
        year: Fiscal year (default: 'fiscal_year' setting, else DEFAULT_YEAR)

    Returns:
        FiscalPolicy

    Raises:
        PolicyError: If an override file exists but is invalid
        PolicyNotFoundError: If neither an override nor a built-in exists
    """
    target_year = resolve_year(year)
    override = get_policy_path(target_year)

    if override.exists():
        logger.debug(f"policy {target_year}: loading override {override}")
        policy = _load_policy_file(override, override.stat().st_mtime)
        if policy.year != target_year:
            raise PolicyError(
                f"Policy file {override} declares year {policy.year}, expected {target_year}"
            )
        return policy

    builtin = get_builtin_policy(target_year)
    if builtin is None:
        raise PolicyNotFoundError(
            f"No policy for fiscal year {target_year}. "
            f"Available: {', '.join(str(y) for y in available_years())}\n\n"
            f"Create one with: exit-calc policy dump -o {override}"
        )

    logger.debug(f"policy {target_year}: using built-in constants")
    return builtin


def dump_policy(policy: FiscalPolicy) -> str:
    """Serialize a policy to YAML."""
    return yaml.safe_dump(policy.model_dump(), sort_keys=False)
