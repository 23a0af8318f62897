"""Personal income tax calculator — bracket-by-bracket breakdown."""

from vnsalary.calculators.formatting import format_number
from vnsalary.calculators.models import PIT, PITItem, Regime, TaxBracket
from vnsalary.calculators.money import round_vnd


def _label(index: int, lower: int, bracket: TaxBracket) -> str:
    percent = f"{bracket.rate * 100:.0f}"
    if bracket.threshold is None:
        return f"Bậc {index}: >{format_number(lower)} @ {percent}%"
    return f"Bậc {index}: {format_number(lower)}–{format_number(bracket.threshold)} @ {percent}%"


def calc_pit(taxable: int, regime: Regime) -> PIT:
    """Calculate progressive PIT on monthly taxable income.

    Brackets are walked in the order the regime lists them (the Regime model
    guarantees they are sorted and end unbounded). A threshold is inclusive:
    income exactly at it stays in the lower bracket. Tax is rounded per
    bracket, and brackets past full allocation are not emitted.

    Args:
        taxable: Taxable income in VND. Non-positive values owe nothing.
        regime: Tax regime whose schedule applies.

    Returns:
        PIT with the clamped taxable figure, per-bracket items and total.
    """
    if taxable <= 0:
        return PIT(taxable=max(0, taxable))

    items: list[PITItem] = []
    remaining = taxable
    lower = 0

    for index, bracket in enumerate(regime.brackets, start=1):
        if remaining <= 0:
            break

        slab = remaining if bracket.threshold is None else min(remaining, bracket.threshold - lower)
        items.append(
            PITItem(
                label=_label(index, lower, bracket),
                slab=slab,
                rate=bracket.rate,
                tax=round_vnd(slab * bracket.rate),
            )
        )
        remaining -= slab
        if bracket.threshold is not None:
            lower = bracket.threshold

    return PIT(taxable=taxable, items=tuple(items), total=sum(item.tax for item in items))
