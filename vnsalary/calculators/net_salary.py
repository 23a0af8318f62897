"""Net salary calculator — composites insurance, deductions, PIT and union dues."""

import logging

from vnsalary.calculators.deductions import aggregate_deductions
from vnsalary.calculators.income_tax import calc_pit
from vnsalary.calculators.insurance import calc_insurance, resolve_bases
from vnsalary.calculators.models import CalculationResult, CalculatorInputs
from vnsalary.calculators.tax_data import BASE_SALARY, regional_minimum
from vnsalary.calculators.union_dues import calculate_union_dues

logger = logging.getLogger(__name__)


def calc_all(inputs: CalculatorInputs, exempt_allowance: int | None = None) -> CalculationResult:
    """Calculate take-home pay for one regime.

    The tax-exempt allowance (e.g. a lunch subsidy) lowers taxable income
    once. Its benefit reaches the employee through the smaller PIT, so it is
    not added to net or final_net again.

    Args:
        inputs: Pre-validated calculation inputs including the regime.
        exempt_allowance: Monthly tax-exempt allowance in VND, or None.

    Returns:
        CalculationResult with insurance, deductions, PIT, net and final_net.

    Raises:
        InvalidArgumentError: If the region is not in the regime's table.
    """
    regime = inputs.regime
    logger.debug(
        "Calculating gross=%d dependents=%d region=%s regime=%s",
        inputs.gross, inputs.dependents, inputs.region, regime.id,
    )

    regional_min = regional_minimum(regime, inputs.region)
    bases = resolve_bases(inputs.gross, regional_min, BASE_SALARY, inputs.insurance_base)
    insurance = calc_insurance(bases)

    deductions = aggregate_deductions(regime, inputs.dependents, insurance.total)
    taxable = max(0, inputs.gross - deductions.total - (exempt_allowance or 0))
    pit = calc_pit(taxable, regime)

    net = inputs.gross - insurance.total - pit.total

    union_dues = calculate_union_dues(bases.base_si_hi) if inputs.is_union_member else None
    final_net = net - (union_dues.amount if union_dues is not None else 0)

    return CalculationResult(
        inputs=inputs,
        insurance=insurance,
        deductions=deductions,
        pit=pit,
        net=net,
        union_dues=union_dues,
        exempt_allowance=exempt_allowance,
        final_net=final_net,
    )
