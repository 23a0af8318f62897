"""Regime comparator: one set of inputs under two regimes, with signed deltas."""

from vnsalary.calculators.models import (
    CalculatorInputs,
    ComparisonResult,
    Deltas,
    Regime,
    SalaryInputs,
)
from vnsalary.calculators.net_salary import calc_all
from vnsalary.calculators.tax_data import REGIME_2025, REGIME_2026

_SALARY_FIELDS = set(SalaryInputs.model_fields)


def compare_regimes(
    inputs: SalaryInputs,
    exempt_allowance: int | None = None,
    *,
    baseline: Regime = REGIME_2025,
    proposed: Regime = REGIME_2026,
) -> ComparisonResult:
    """Calculate under both regimes and diff the results.

    Deltas are proposed minus baseline: a positive net_salary delta means the
    proposed regime leaves the employee better off. If inputs already carry a
    regime it is ignored.
    """
    fields = inputs.model_dump(include=_SALARY_FIELDS)
    old = calc_all(CalculatorInputs(**fields, regime=baseline), exempt_allowance)
    new = calc_all(CalculatorInputs(**fields, regime=proposed), exempt_allowance)

    deltas = Deltas(
        personal_deduction=new.deductions.personal - old.deductions.personal,
        dependent_deduction=new.deductions.dependents - old.deductions.dependents,
        total_deductions=new.deductions.total - old.deductions.total,
        insurance=new.insurance.total - old.insurance.total,
        taxable_income=new.pit.taxable - old.pit.taxable,
        pit=new.pit.total - old.pit.total,
        net_salary=new.net - old.net,
    )

    return ComparisonResult(baseline=old, proposed=new, deltas=deltas)
