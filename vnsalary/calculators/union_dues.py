"""Trade union dues calculator."""

from vnsalary.calculators.errors import InvalidArgumentError
from vnsalary.calculators.models import UnionDues
from vnsalary.calculators.money import round_vnd
from vnsalary.calculators.tax_data import UNION_DUES_MAX, UNION_DUES_RATE


def calculate_union_dues(insurance_base: int) -> UnionDues:
    """Calculate monthly union dues for a registered member.

    Dues are 0.5% of the SI/HI contribution base, capped at 234,000 VND.

    Args:
        insurance_base: SI/HI contribution base in VND (must be >= 0).

    Returns:
        UnionDues with amount, calculation_base, capped_at_max, rate, max_amount.

    Raises:
        InvalidArgumentError: If insurance_base is negative.
    """
    if insurance_base < 0:
        raise InvalidArgumentError("Insurance base cannot be negative.")

    calculated = insurance_base * UNION_DUES_RATE

    return UnionDues(
        amount=round_vnd(min(calculated, UNION_DUES_MAX)),
        calculation_base=insurance_base,
        capped_at_max=calculated > UNION_DUES_MAX,
        rate=UNION_DUES_RATE,
        max_amount=UNION_DUES_MAX,
    )
