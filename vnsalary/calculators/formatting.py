"""Display helpers: thousand separators and plain-text result summaries."""

import re
from decimal import Decimal
from typing import Literal

from vnsalary.calculators.models import CalculationResult
from vnsalary.calculators.money import round_vnd

Locale = Literal["en-US", "vi-VN"]

_NON_DIGITS = re.compile(r"\D")


def format_number(amount: int | float, locale: Locale = "vi-VN") -> str:
    """Format with thousand separators and no decimals.

    >>> format_number(1234567, "en-US")
    '1,234,567'
    >>> format_number(1234567, "vi-VN")
    '1.234.567'
    """
    text = f"{round_vnd(Decimal(str(amount))):,}"
    if locale == "vi-VN":
        text = text.replace(",", ".")
    return text


def sanitize_numeric_input(text: str) -> int:
    """Strip every non-digit and parse what is left; 0 when nothing remains."""
    digits = _NON_DIGITS.sub("", text)
    return int(digits) if digits else 0


def render_summary(result: CalculationResult, locale: Locale = "vi-VN") -> str:
    """Render a calculation as a Vietnamese plain-text breakdown."""

    def vnd(amount: int) -> str:
        return f"{format_number(amount, locale)} VND"

    inputs = result.inputs
    regime = inputs.regime
    insurance = result.insurance
    deductions = result.deductions

    lines = [
        "TÍNH LƯƠNG NET TỪ GROSS",
        "======================",
        "",
        "THÔNG TIN ĐẦU VÀO",
        "------------------",
        f"Lương Gross: {vnd(inputs.gross)}",
        f"Số người phụ thuộc: {inputs.dependents}",
        f"Vùng: {inputs.region}",
        f"Chế độ: {regime.id}",
        "",
        "BẢO HIỂM BẮT BUỘC",
        "------------------",
        f"Cơ sở đóng BHXH, BHYT: {vnd(insurance.bases.base_si_hi)}",
        f"Cơ sở đóng BHTN: {vnd(insurance.bases.base_ui)}",
        f"BHXH (8%): {vnd(insurance.si)}",
        f"BHYT (1.5%): {vnd(insurance.hi)}",
        f"BHTN (1%): {vnd(insurance.ui)}",
        f"Tổng bảo hiểm: {vnd(insurance.total)}",
        "",
        "CÁC KHOẢN GIẢM TRỪ",
        "------------------",
        f"Giảm trừ bản thân: {vnd(deductions.personal)}",
        (
            f"Giảm trừ người phụ thuộc: {vnd(deductions.dependents)} "
            f"({vnd(regime.dependent_deduction)} × {inputs.dependents})"
        ),
        f"Tổng giảm trừ: {vnd(deductions.total)}",
        "",
        "THUẾ THU NHẬP CÁ NHÂN",
        "---------------------",
        f"Thu nhập tính thuế: {vnd(result.pit.taxable)}",
    ]
    lines.extend(f"  {item.label}: {vnd(item.tax)}" for item in result.pit.items)
    lines.append(f"Thuế TNCN: {vnd(result.pit.total)}")

    if result.exempt_allowance is not None:
        lines.append(f"Phụ cấp miễn thuế: {vnd(result.exempt_allowance)}")
    if result.union_dues is not None:
        lines.append(f"Đoàn phí công đoàn: {vnd(result.union_dues.amount)}")

    lines.extend([
        "",
        "KẾT QUẢ CUỐI CÙNG",
        "-----------------",
        f"LƯƠNG NET: {vnd(result.net)}",
        f"THỰC NHẬN: {vnd(result.final_net)}",
    ])
    return "\n".join(lines)
