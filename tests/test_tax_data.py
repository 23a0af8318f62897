"""Tests for regime and region configuration tables."""

from decimal import Decimal
from pathlib import Path

import pytest

from vnsalary.calculators.errors import InvalidArgumentError
from vnsalary.calculators.models import CalculatorInputs, Regime
from vnsalary.calculators.net_salary import calc_all
from vnsalary.calculators.tax_data import (
    BASE_SALARY,
    CAP_SI_HI,
    CAP_UI_BY_REGION,
    REGIME_2025,
    REGIONAL_MINIMUMS,
    UNION_DUES_MAX,
    get_regime,
    load_regimes,
    register_regimes,
    regional_minimum,
)


class TestConstants:
    def test_si_hi_cap(self) -> None:
        assert CAP_SI_HI == 46_800_000

    def test_ui_caps(self) -> None:
        assert CAP_UI_BY_REGION == {
            "I": 99_200_000,
            "II": 88_200_000,
            "III": 77_200_000,
            "IV": 69_000_000,
        }

    def test_union_dues_cap_is_tenth_of_base_salary(self) -> None:
        assert UNION_DUES_MAX == BASE_SALARY // 10

    def test_regional_minimums_descend(self) -> None:
        wages = [REGIONAL_MINIMUMS[r].min_wage for r in ("I", "II", "III", "IV")]
        assert wages == sorted(wages, reverse=True)


class TestRegistry:
    def test_get_canonical(self) -> None:
        assert get_regime("2025") is REGIME_2025
        assert get_regime("2026").personal_deduction == 15_500_000

    def test_unknown_regime(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Unknown regime"):
            get_regime("2099")

    def test_regional_minimum_defaults_to_national_table(self) -> None:
        assert regional_minimum(REGIME_2025, "II") == 4_410_000

    def test_regional_minimum_unknown_region(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Unknown region"):
            regional_minimum(REGIME_2025, "V")

    def test_register_extra_regime(self, flat_regime: Regime, clean_registry: dict) -> None:
        register_regimes([flat_regime])
        assert get_regime("flat-test") == flat_regime

    def test_cannot_override_canonical(self, clean_registry: dict) -> None:
        clone = REGIME_2025.model_copy(update={"personal_deduction": 1})
        with pytest.raises(InvalidArgumentError):
            register_regimes([clone])
        assert get_regime("2025").personal_deduction == 11_000_000


class TestLoadRegimes:
    def test_load_fixture(self, custom_regimes_path: Path) -> None:
        regimes = load_regimes(custom_regimes_path)
        assert [r.id for r in regimes] == ["flat-10", "two-step-regional"]

        flat = regimes[0]
        assert flat.brackets[0].threshold is None
        assert flat.brackets[0].rate == Decimal("0.1")
        assert flat.regional_minimums is None

        regional = regimes[1]
        assert regional.brackets[0].threshold == 20_000_000
        assert regional.brackets[1].threshold is None
        assert regional.regional_minimums is not None
        assert regional.regional_minimums["I"].min_wage == 5_310_000

    def test_loaded_regime_calculates(self, custom_regimes_path: Path) -> None:
        flat = load_regimes(custom_regimes_path)[0]
        result = calc_all(CalculatorInputs(gross=30_000_000, regime=flat))
        # 30M - 10M personal - 3.15M insurance = 16.85M @ 10%
        assert result.pit.taxable == 16_850_000
        assert result.pit.total == 1_685_000

    def test_loaded_regional_table_applies(self, custom_regimes_path: Path) -> None:
        regional = load_regimes(custom_regimes_path)[1]
        result = calc_all(CalculatorInputs(gross=3_000_000, region="II", regime=regional))
        assert result.insurance.bases.base_si_hi == 4_730_000
        with pytest.raises(InvalidArgumentError):
            calc_all(CalculatorInputs(gross=3_000_000, region="III", regime=regional))

    def test_missing_regimes_key(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("foo: 1\n")
        with pytest.raises(InvalidArgumentError, match="regimes"):
            load_regimes(path)

    def test_unsorted_brackets_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "unsorted.yaml"
        path.write_text(
            "regimes:\n"
            "  - id: unsorted\n"
            "    personal_deduction: 0\n"
            "    dependent_deduction: 0\n"
            "    brackets:\n"
            "      - {threshold: 10000000, rate: 0.1}\n"
            "      - {threshold: 5000000, rate: 0.2}\n"
            "      - {threshold: inf, rate: 0.3}\n"
        )
        with pytest.raises(InvalidArgumentError, match="unsorted"):
            load_regimes(path)

    def test_missing_field_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "partial.yaml"
        path.write_text("regimes:\n  - id: partial\n    personal_deduction: 0\n")
        with pytest.raises(InvalidArgumentError):
            load_regimes(path)
