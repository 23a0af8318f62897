"""Deduction aggregator."""

from vnsalary.calculators.models import Deductions, Regime


def aggregate_deductions(regime: Regime, dependents: int, insurance_total: int) -> Deductions:
    """Sum the personal, dependent and insurance deductions for one regime."""
    personal = regime.personal_deduction
    dependent_total = dependents * regime.dependent_deduction

    return Deductions(
        personal=personal,
        dependents=dependent_total,
        insurance=insurance_total,
        total=personal + dependent_total + insurance_total,
    )
