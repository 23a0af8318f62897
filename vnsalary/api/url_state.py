"""Shareable calculator state <-> compact query string.

Keys are abbreviated to keep links short:

    g    gross salary            m    view mode (2025, 2026, compare)
    d    dependents              fmt  number locale (en-US, vi-VN)
    r    region                  u    union member (1, omitted if false)
    ibm  insurance base mode     la   exempt allowance enabled (1)
    ib   custom insurance base   laa  exempt allowance amount
"""

import logging
from typing import Literal
from urllib.parse import parse_qs, urlencode

from pydantic import BaseModel, Field

from config.settings import Settings
from vnsalary.calculators.models import SalaryInputs
from vnsalary.calculators.tax_data import REGION_IDS

logger = logging.getLogger(__name__)

RegionId = Literal["I", "II", "III", "IV"]
ViewMode = Literal["2025", "2026", "compare"]
InsuranceBaseMode = Literal["gross", "custom"]

_VIEW_MODES = ("2025", "2026", "compare")
_BASE_MODES = ("gross", "custom")
_LOCALES = ("en-US", "vi-VN")


class ShareState(BaseModel):
    """Calculator state that can be round-tripped through a share link."""

    gross: int | None = Field(default=None, ge=0)
    dependents: int | None = Field(default=None, ge=0)
    region: RegionId | None = None
    insurance_base_mode: InsuranceBaseMode | None = None
    custom_insurance_base: int | None = Field(default=None, ge=0)
    view_mode: ViewMode | None = None
    locale: Literal["en-US", "vi-VN"] | None = None
    is_union_member: bool = False
    has_exempt_allowance: bool = False
    exempt_allowance: int | None = Field(default=None, ge=0)


def encode_state(state: ShareState) -> str:
    """Encode state as a query string (no leading '?'), omitting unset fields."""
    params: dict[str, str] = {}

    if state.gross is not None:
        params["g"] = str(state.gross)
    if state.dependents is not None:
        params["d"] = str(state.dependents)
    if state.region is not None:
        params["r"] = state.region
    if state.insurance_base_mode is not None:
        params["ibm"] = state.insurance_base_mode
    if state.custom_insurance_base is not None:
        params["ib"] = str(state.custom_insurance_base)
    if state.view_mode is not None:
        params["m"] = state.view_mode
    if state.locale is not None:
        params["fmt"] = state.locale
    if state.is_union_member:
        params["u"] = "1"
    if state.has_exempt_allowance:
        params["la"] = "1"
        if state.exempt_allowance is not None:
            params["laa"] = str(state.exempt_allowance)

    return urlencode(params)


def _non_negative_int(raw: str) -> int | None:
    try:
        value = float(raw)
    except ValueError:
        return None
    if value < 0 or not value.is_integer():
        return None
    return int(value)


def decode_state(query: str) -> ShareState:
    """Decode a query string, silently dropping values that fail validation."""
    query = query.removeprefix("?")
    if not query:
        return ShareState()

    params = {key: values[0] for key, values in parse_qs(query).items()}
    fields: dict[str, object] = {}
    dropped: list[str] = []

    for key, name in (("g", "gross"), ("d", "dependents"), ("ib", "custom_insurance_base"),
                      ("laa", "exempt_allowance")):
        if key in params:
            value = _non_negative_int(params[key])
            if value is None:
                dropped.append(key)
            else:
                fields[name] = value

    for key, name, allowed in (("r", "region", REGION_IDS), ("ibm", "insurance_base_mode", _BASE_MODES),
                               ("m", "view_mode", _VIEW_MODES), ("fmt", "locale", _LOCALES)):
        if key in params:
            if params[key] in allowed:
                fields[name] = params[key]
            else:
                dropped.append(key)

    fields["is_union_member"] = params.get("u") == "1"
    fields["has_exempt_allowance"] = params.get("la") == "1"

    if dropped:
        logger.warning("Dropped invalid share-link values: %s", ", ".join(dropped))
    return ShareState(**fields)


def to_salary_inputs(state: ShareState, settings: Settings) -> tuple[SalaryInputs, int | None]:
    """Build calculator inputs and the exempt allowance from decoded state.

    Missing fields fall back to settings. The custom insurance base only
    applies in "custom" mode; the allowance only when it is enabled.
    """
    insurance_base = (
        state.custom_insurance_base if state.insurance_base_mode == "custom" else None
    )
    inputs = SalaryInputs(
        gross=state.gross or 0,
        dependents=state.dependents or 0,
        region=state.region or settings.default_region,
        insurance_base=insurance_base,
        is_union_member=state.is_union_member,
    )

    allowance: int | None = None
    if state.has_exempt_allowance:
        allowance = (
            state.exempt_allowance
            if state.exempt_allowance is not None
            else settings.default_exempt_allowance
        )
    return inputs, allowance
