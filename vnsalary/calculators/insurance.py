"""Compulsory insurance calculator: SI, HI and UI employee contributions."""

from vnsalary.calculators.models import Insurance, InsuranceBases
from vnsalary.calculators.money import clamp, round_vnd
from vnsalary.calculators.tax_data import CAP_MULTIPLIER, RATE_HI, RATE_SI, RATE_UI


def resolve_bases(
    gross: int,
    regional_min_wage: int,
    base_salary: int,
    custom_base: int | None = None,
) -> InsuranceBases:
    """Clamp the contribution base into the legally permitted range.

    SI/HI are capped at 20x the statutory base salary (same in every region);
    UI is capped at 20x the regional minimum wage. Both are floored at the
    regional minimum.

    Args:
        gross: Gross monthly salary in VND.
        regional_min_wage: Minimum wage of the employee's region.
        base_salary: Statutory base salary used for the SI/HI cap.
        custom_base: Declared contribution base. Defaults to gross when None.

    Returns:
        InsuranceBases with the clamped SI/HI and UI bases.
    """
    candidate = custom_base if custom_base is not None else gross
    cap_si_hi = CAP_MULTIPLIER * base_salary
    cap_ui = CAP_MULTIPLIER * regional_min_wage

    return InsuranceBases(
        base_si_hi=clamp(candidate, regional_min_wage, cap_si_hi),
        base_ui=clamp(candidate, regional_min_wage, cap_ui),
    )


def calc_insurance(bases: InsuranceBases) -> Insurance:
    """Apply the fixed contribution rates to resolved bases.

    Each component is rounded on its own; total is the sum of rounded parts.
    """
    si = round_vnd(bases.base_si_hi * RATE_SI)
    hi = round_vnd(bases.base_si_hi * RATE_HI)
    ui = round_vnd(bases.base_ui * RATE_UI)

    return Insurance(bases=bases, si=si, hi=hi, ui=ui, total=si + hi + ui)
