"""API routes for the net salary calculator."""

import logging
from typing import Any

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from config.settings import settings
from vnsalary.api.url_state import (
    RegionId,
    ShareState,
    decode_state,
    encode_state,
    to_salary_inputs,
)
from vnsalary.calculators.comparison import compare_regimes
from vnsalary.calculators.models import (
    CalculationResult,
    CalculatorInputs,
    ComparisonResult,
    Regime,
    SalaryInputs,
    UnionDues,
)
from vnsalary.calculators.net_salary import calc_all
from vnsalary.calculators.tax_data import (
    CAP_UI_BY_REGION,
    DEFAULT_REGIME,
    REGIMES,
    REGIONAL_MINIMUMS,
    get_regime,
)
from vnsalary.calculators.union_dues import calculate_union_dues

logger = logging.getLogger(__name__)

router = APIRouter()


class CompareRequest(BaseModel):
    """Request body for the /compare endpoint."""

    gross: int = Field(ge=0)
    dependents: int = Field(default=0, ge=0)
    region: RegionId = "I"
    insurance_base: int | None = Field(default=None, ge=0)
    is_union_member: bool = False
    exempt_allowance: int | None = Field(default=None, ge=0)

    def to_salary_inputs(self) -> SalaryInputs:
        return SalaryInputs(**self.model_dump(exclude={"exempt_allowance", "regime"}))


class CalculateRequest(CompareRequest):
    """Request body for the /calculate endpoint."""

    regime: str = DEFAULT_REGIME


class UnionDuesRequest(BaseModel):
    """Request body for the /union-dues endpoint."""

    insurance_base: int


@router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@router.get("/regimes")
async def list_regimes() -> list[Regime]:
    """List every registered tax regime."""
    return list(REGIMES.values())


@router.get("/regions")
async def list_regions() -> dict[str, dict[str, int]]:
    """Regional minimum wages and the UI contribution cap they imply."""
    return {
        region: {"min_wage": config.min_wage, "cap_ui": CAP_UI_BY_REGION[region]}
        for region, config in REGIONAL_MINIMUMS.items()
    }


@router.post("/calculate", response_model=CalculationResult)
async def calculate(body: CalculateRequest) -> CalculationResult:
    """Calculate net salary under a single regime."""
    logger.info("Calculate gross=%d regime=%s", body.gross, body.regime)
    inputs = CalculatorInputs(
        **body.to_salary_inputs().model_dump(),
        regime=get_regime(body.regime),
    )
    return calc_all(inputs, body.exempt_allowance)


@router.post("/compare", response_model=ComparisonResult)
async def compare(body: CompareRequest) -> ComparisonResult:
    """Compare the baseline and proposed regimes on the same inputs."""
    logger.info("Compare gross=%d", body.gross)
    return compare_regimes(
        body.to_salary_inputs(),
        body.exempt_allowance,
        baseline=get_regime(settings.baseline_regime),
        proposed=get_regime(settings.proposed_regime),
    )


@router.post("/union-dues", response_model=UnionDues)
async def union_dues(body: UnionDuesRequest) -> UnionDues:
    """Calculate union dues for an SI/HI contribution base."""
    return calculate_union_dues(body.insurance_base)


@router.post("/share")
async def share(body: ShareState) -> dict[str, str]:
    """Encode calculator state as a compact query string."""
    return {"query": encode_state(body)}


@router.get("/shared")
async def shared(request: Request) -> Any:
    """Decode a share link and return the calculation it describes."""
    state = decode_state(request.url.query)
    inputs, allowance = to_salary_inputs(state, settings)
    logger.info("Shared link view=%s gross=%d", state.view_mode or "compare", inputs.gross)

    if state.view_mode in ("2025", "2026"):
        result: BaseModel = calc_all(
            CalculatorInputs(**inputs.model_dump(), regime=get_regime(state.view_mode)),
            allowance,
        )
    else:
        result = compare_regimes(
            inputs,
            allowance,
            baseline=get_regime(settings.baseline_regime),
            proposed=get_regime(settings.proposed_regime),
        )
    return result.model_dump(mode="json")
