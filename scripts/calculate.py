"""Command-line net salary calculator.

Usage:
    python scripts/calculate.py --gross 30000000 --dependents 2
    python scripts/calculate.py --gross 30000000 --regime compare --allowance
"""

import argparse
import logging

from config.settings import settings
from vnsalary.calculators.comparison import compare_regimes
from vnsalary.calculators.errors import InvalidArgumentError
from vnsalary.calculators.formatting import (
    format_number,
    render_summary,
    sanitize_numeric_input,
)
from vnsalary.calculators.models import CalculatorInputs, SalaryInputs
from vnsalary.calculators.net_salary import calc_all
from vnsalary.calculators.tax_data import (
    DEFAULT_EXEMPT_ALLOWANCE,
    REGION_IDS,
    get_regime,
    load_regimes,
    register_regimes,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Vietnamese gross-to-net salary calculator")
    parser.add_argument(
        "--gross",
        type=sanitize_numeric_input,
        required=True,
        help="Gross monthly salary (VND); separators such as 30.000.000 are accepted",
    )
    parser.add_argument("--dependents", type=int, default=0)
    parser.add_argument("--region", choices=REGION_IDS, default=settings.default_region)
    parser.add_argument(
        "--regime",
        default=settings.baseline_regime,
        help="Regime id (2025, 2026, ...) or 'compare'",
    )
    parser.add_argument(
        "--insurance-base", type=sanitize_numeric_input, default=None, help="Declared insurance base (VND)"
    )
    parser.add_argument("--union", action="store_true", help="Trade union member")
    parser.add_argument(
        "--allowance",
        type=sanitize_numeric_input,
        nargs="?",
        const=DEFAULT_EXEMPT_ALLOWANCE,
        default=None,
        help="Tax-exempt allowance (VND); defaults to 730,000 when given without a value",
    )
    parser.add_argument("--locale", choices=("en-US", "vi-VN"), default="vi-VN")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, run the calculation and print the breakdown."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.log_level, format="%(levelname)s: %(message)s")

    # Amounts are sanitized to digits; only the dependent count can be negative.
    if args.dependents < 0:
        raise SystemExit("--dependents must be non-negative")

    if settings.extra_regimes_file:
        try:
            register_regimes(load_regimes(settings.extra_regimes_file))
        except InvalidArgumentError as exc:
            raise SystemExit(str(exc)) from exc

    inputs = SalaryInputs(
        gross=args.gross,
        dependents=args.dependents,
        region=args.region,
        insurance_base=args.insurance_base,
        is_union_member=args.union,
    )

    try:
        regime = None if args.regime == "compare" else get_regime(args.regime)
    except InvalidArgumentError as exc:
        raise SystemExit(str(exc)) from exc

    if regime is not None:
        result = calc_all(CalculatorInputs(**inputs.model_dump(), regime=regime), args.allowance)
        print(render_summary(result, args.locale))
        return

    comparison = compare_regimes(
        inputs,
        args.allowance,
        baseline=get_regime(settings.baseline_regime),
        proposed=get_regime(settings.proposed_regime),
    )
    print(render_summary(comparison.baseline, args.locale))
    print()
    print(render_summary(comparison.proposed, args.locale))
    print()
    print(f"CHÊNH LỆCH ({comparison.proposed.inputs.regime.id} - {comparison.baseline.inputs.regime.id})")
    for name, delta in comparison.deltas.model_dump().items():
        print(f"  {name}: {'+' if delta > 0 else ''}{format_number(delta, args.locale)}")


if __name__ == "__main__":
    main()
