"""Pydantic models for regime configuration and calculation results.

Every model is frozen: configuration is loaded once and results are never
mutated after a calculation returns them.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer, model_validator

# Rates are exact decimals in calculations but plain numbers on the wire.
Rate = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# --- Configuration ---


class RegionConfig(_Frozen):
    """Statutory monthly minimum wage for one region."""

    min_wage: int


class TaxBracket(_Frozen):
    """A single progressive PIT bracket."""

    threshold: int | None  # inclusive upper bound, None = no cap
    rate: Rate


class Regime(_Frozen):
    """A versioned set of deduction amounts and a bracket schedule."""

    id: str
    personal_deduction: int
    dependent_deduction: int
    brackets: tuple[TaxBracket, ...]
    regional_minimums: dict[str, RegionConfig] | None = None  # None = national table

    @model_validator(mode="after")
    def _check_shape(self) -> "Regime":
        if self.personal_deduction < 0 or self.dependent_deduction < 0:
            raise ValueError("Deduction amounts must be non-negative.")
        if not self.brackets:
            raise ValueError(f"Regime {self.id} has no tax brackets.")

        previous = 0
        for index, bracket in enumerate(self.brackets):
            if not Decimal("0") < bracket.rate <= Decimal("1"):
                raise ValueError(f"Bracket {index + 1} rate must be in (0, 1], got {bracket.rate}.")
            is_last = index == len(self.brackets) - 1
            if bracket.threshold is None:
                if not is_last:
                    raise ValueError("Only the last bracket may be unbounded.")
                continue
            if is_last:
                raise ValueError("The last bracket must be unbounded.")
            if bracket.threshold <= previous:
                raise ValueError(
                    f"Bracket thresholds must be strictly increasing "
                    f"({bracket.threshold} after {previous})."
                )
            previous = bracket.threshold
        return self


# --- Inputs ---


class SalaryInputs(_Frozen):
    """Calculation inputs that do not depend on a tax regime."""

    gross: int
    dependents: int = 0
    region: str = "I"
    insurance_base: int | None = None  # None = use gross
    is_union_member: bool = False


class CalculatorInputs(SalaryInputs):
    """One calculation request against a specific regime."""

    regime: Regime


# --- Results ---


class InsuranceBases(_Frozen):
    """Contribution bases after floor/cap clamping."""

    base_si_hi: int
    base_ui: int


class Insurance(_Frozen):
    """Employee-side SI/HI/UI contributions."""

    bases: InsuranceBases
    si: int
    hi: int
    ui: int
    total: int


class Deductions(_Frozen):
    personal: int
    dependents: int
    insurance: int
    total: int


class PITItem(_Frozen):
    """One bracket's share of the tax."""

    label: str
    slab: int
    rate: Rate
    tax: int


class PIT(_Frozen):
    taxable: int
    items: tuple[PITItem, ...] = ()
    total: int = 0


class UnionDues(_Frozen):
    """Trade union dues for a member."""

    amount: int
    calculation_base: int
    capped_at_max: bool
    rate: Rate
    max_amount: int


class CalculationResult(_Frozen):
    """Complete output of one regime's calculation for one input set."""

    inputs: CalculatorInputs
    insurance: Insurance
    deductions: Deductions
    pit: PIT
    net: int
    union_dues: UnionDues | None = None
    exempt_allowance: int | None = None
    final_net: int


class Deltas(_Frozen):
    """Signed differences, proposed minus baseline."""

    personal_deduction: int
    dependent_deduction: int
    total_deductions: int
    insurance: int
    taxable_income: int
    pit: int
    net_salary: int


class ComparisonResult(_Frozen):
    baseline: CalculationResult
    proposed: CalculationResult
    deltas: Deltas
