"""Shared test fixtures."""

from collections.abc import Callable, Iterator
from decimal import Decimal
from pathlib import Path
from typing import Any

import pytest
import yaml

from vnsalary.calculators import tax_data
from vnsalary.calculators.models import CalculatorInputs, Regime, TaxBracket
from vnsalary.calculators.tax_data import REGIME_2025

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def reference_scenarios() -> list[dict[str, Any]]:
    """Load hand-verified gross-to-net scenarios from YAML."""
    data = yaml.safe_load((FIXTURES_DIR / "reference_scenarios.yaml").read_text(encoding="utf-8"))
    return data["scenarios"]


@pytest.fixture
def custom_regimes_path() -> Path:
    return FIXTURES_DIR / "custom_regimes.yaml"


@pytest.fixture
def make_inputs() -> Callable[..., CalculatorInputs]:
    """Factory for CalculatorInputs with Region I / 2025 defaults."""

    def _make(
        gross: int = 30_000_000,
        dependents: int = 0,
        region: str = "I",
        regime: Regime = REGIME_2025,
        insurance_base: int | None = None,
        is_union_member: bool = False,
    ) -> CalculatorInputs:
        return CalculatorInputs(
            gross=gross,
            dependents=dependents,
            region=region,
            regime=regime,
            insurance_base=insurance_base,
            is_union_member=is_union_member,
        )

    return _make


@pytest.fixture
def flat_regime() -> Regime:
    """Synthetic single-bracket regime: 10% on everything."""
    return Regime(
        id="flat-test",
        personal_deduction=10_000_000,
        dependent_deduction=5_000_000,
        brackets=(TaxBracket(threshold=None, rate=Decimal("0.10")),),
    )


@pytest.fixture
def clean_registry() -> Iterator[dict[str, Regime]]:
    """Restore the regime registry after a test registers extra regimes."""
    saved = dict(tax_data.REGIMES)
    yield tax_data.REGIMES
    tax_data.REGIMES.clear()
    tax_data.REGIMES.update(saved)
