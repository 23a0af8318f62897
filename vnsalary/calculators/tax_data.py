"""Vietnamese salary constants: insurance rates, regional minimums, PIT regimes.

Hardcoded Python constants (not DB-driven). Additional regimes can be loaded
from YAML with load_regimes(); the two canonical regimes always come from here.
"""

import logging
from decimal import Decimal
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from config import load_yaml_config
from vnsalary.calculators.errors import InvalidArgumentError
from vnsalary.calculators.models import RegionConfig, Regime, TaxBracket

logger = logging.getLogger(__name__)

# --- Insurance ---

BASE_SALARY = 2_340_000  # statutory base salary, VND/month
CAP_MULTIPLIER = 20

RATE_SI = Decimal("0.08")  # BHXH, employee portion
RATE_HI = Decimal("0.015")  # BHYT
RATE_UI = Decimal("0.01")  # BHTN

# --- Union dues ---

UNION_DUES_RATE = Decimal("0.005")
UNION_DUES_MAX = 234_000  # 10% of BASE_SALARY

# Customary tax-exempt lunch allowance, VND/month
DEFAULT_EXEMPT_ALLOWANCE = 730_000

# --- Regions ---

REGION_IDS: tuple[str, ...] = ("I", "II", "III", "IV")

REGIONAL_MINIMUMS: dict[str, RegionConfig] = {
    "I": RegionConfig(min_wage=4_960_000),  # Hanoi, HCMC, major urban areas
    "II": RegionConfig(min_wage=4_410_000),  # secondary cities
    "III": RegionConfig(min_wage=3_860_000),  # smaller cities and towns
    "IV": RegionConfig(min_wage=3_450_000),  # rural areas
}

CAP_SI_HI = CAP_MULTIPLIER * BASE_SALARY  # 46,800,000

CAP_UI_BY_REGION: dict[str, int] = {
    region: CAP_MULTIPLIER * config.min_wage for region, config in REGIONAL_MINIMUMS.items()
}

# --- PIT regimes ---

REGIME_2025 = Regime(
    id="2025",
    personal_deduction=11_000_000,
    dependent_deduction=4_400_000,
    brackets=(
        TaxBracket(threshold=5_000_000, rate=Decimal("0.05")),
        TaxBracket(threshold=10_000_000, rate=Decimal("0.10")),
        TaxBracket(threshold=18_000_000, rate=Decimal("0.15")),
        TaxBracket(threshold=32_000_000, rate=Decimal("0.20")),
        TaxBracket(threshold=52_000_000, rate=Decimal("0.25")),
        TaxBracket(threshold=80_000_000, rate=Decimal("0.30")),
        TaxBracket(threshold=None, rate=Decimal("0.35")),
    ),
)

# Proposed: higher deductions, five wider brackets
REGIME_2026 = Regime(
    id="2026",
    personal_deduction=15_500_000,
    dependent_deduction=6_200_000,
    brackets=(
        TaxBracket(threshold=10_000_000, rate=Decimal("0.05")),
        TaxBracket(threshold=30_000_000, rate=Decimal("0.15")),
        TaxBracket(threshold=60_000_000, rate=Decimal("0.25")),
        TaxBracket(threshold=100_000_000, rate=Decimal("0.30")),
        TaxBracket(threshold=None, rate=Decimal("0.35")),
    ),
)

CANONICAL_REGIMES: dict[str, Regime] = {
    REGIME_2025.id: REGIME_2025,
    REGIME_2026.id: REGIME_2026,
}

REGIMES: dict[str, Regime] = dict(CANONICAL_REGIMES)

DEFAULT_REGIME = REGIME_2025.id


def regional_minimum(regime: Regime, region: str) -> int:
    """Return the minimum wage for region under regime's regional table."""
    table = regime.regional_minimums if regime.regional_minimums is not None else REGIONAL_MINIMUMS
    if region not in table:
        raise InvalidArgumentError(f"Unknown region: {region}. Available: {', '.join(table)}")
    return table[region].min_wage


def get_regime(regime_id: str) -> Regime:
    """Look up a registered regime by id."""
    if regime_id not in REGIMES:
        raise InvalidArgumentError(
            f"Unknown regime: {regime_id}. Available: {', '.join(sorted(REGIMES))}"
        )
    return REGIMES[regime_id]


def _parse_threshold(value: Any) -> int | None:
    if value is None or str(value).lower() in ("inf", "infinity"):
        return None
    return int(value)


def load_regimes(path: str | Path) -> list[Regime]:
    """Load additional regimes from a YAML file.

    Expected shape::

        regimes:
          - id: flat-2027
            personal_deduction: 15500000
            dependent_deduction: 6200000
            brackets:
              - {threshold: inf, rate: 0.1}

    Raises:
        InvalidArgumentError: If the file is malformed or a regime is invalid.
    """
    data = load_yaml_config(str(path))
    if not isinstance(data, dict) or not isinstance(data.get("regimes"), list):
        raise InvalidArgumentError(f"{path}: expected a top-level 'regimes' list.")

    regimes: list[Regime] = []
    for entry in data["regimes"]:
        try:
            minimums = entry.get("regional_minimums")
            regimes.append(
                Regime(
                    id=str(entry["id"]),
                    personal_deduction=entry["personal_deduction"],
                    dependent_deduction=entry["dependent_deduction"],
                    brackets=tuple(
                        TaxBracket(
                            threshold=_parse_threshold(b.get("threshold")),
                            rate=Decimal(str(b["rate"])),
                        )
                        for b in entry["brackets"]
                    ),
                    regional_minimums=(
                        {str(k): RegionConfig(min_wage=v) for k, v in minimums.items()}
                        if minimums is not None
                        else None
                    ),
                )
            )
        except (KeyError, TypeError, ValueError, AttributeError, ValidationError) as exc:
            raise InvalidArgumentError(f"{path}: invalid regime entry {entry!r}: {exc}") from exc
    return regimes


def register_regimes(regimes: list[Regime]) -> None:
    """Add regimes to the registry. Canonical regimes cannot be replaced."""
    for regime in regimes:
        if regime.id in CANONICAL_REGIMES:
            raise InvalidArgumentError(f"Regime {regime.id} is built in and cannot be overridden.")
        REGIMES[regime.id] = regime
        logger.info("Registered regime %s (%d brackets)", regime.id, len(regime.brackets))
