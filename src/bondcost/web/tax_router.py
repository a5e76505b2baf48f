"""Tax API router for bond cost calculations, comparisons, and defaults."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from bondcost.core.types import InvalidParameterError
from bondcost.finance.amortization import summarize_bond
from bondcost.finance.models import BondTerms, DistrictValuation, HouseholdInputs
from bondcost.finance.taxes import PropertyTaxEngine


router = APIRouter()


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class CalculationRequest(BaseModel):
    """Request body for a cost calculation. Omitted parts take defaults."""

    bond: BondTerms | None = None
    household: HouseholdInputs | None = None
    district: DistrictValuation | None = None


class ComparisonRequest(CalculationRequest):
    """Request body for the cost-by-home-value comparison."""

    market_values: list[float] | None = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _get_tax_engine(request: Request) -> PropertyTaxEngine:
    engine = getattr(request.app.state, "tax_engine", None)
    if engine is None:
        raise HTTPException(status_code=503, detail="Tax engine not available")
    return engine


def _resolve_inputs(
    engine: PropertyTaxEngine, body: CalculationRequest
) -> tuple[BondTerms, HouseholdInputs]:
    bond = body.bond if body.bond is not None else engine.default_bond()
    household = body.household if body.household is not None else engine.default_household()
    return bond, household


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@router.get("/api/tax/defaults")
async def api_get_defaults(request: Request) -> dict[str, Any]:
    """Default bond, household, and district inputs plus the exemption schedule."""
    engine = _get_tax_engine(request)
    return {
        "assessment_ratio": engine.defaults.assessment_ratio,
        "bond": engine.default_bond().model_dump(),
        "household": engine.default_household().model_dump(),
        "district": engine.default_district().model_dump(),
        "exemptions": engine.exemption_schedule.model_dump(),
        "comparison_values": list(engine.comparison_values),
    }


@router.post("/api/tax/calculate")
async def api_calculate(body: CalculationRequest, request: Request) -> dict[str, Any]:
    """Compute the itemized cost of the bond for one household."""
    engine = _get_tax_engine(request)
    bond, household = _resolve_inputs(engine, body)
    try:
        result = engine.calculate(bond, household, body.district)
        summary = summarize_bond(bond)
    except InvalidParameterError as e:
        raise HTTPException(status_code=400, detail=str(e))

    data = result.model_dump()
    data["bond_summary"] = summary.model_dump()
    return data


@router.post("/api/tax/comparison")
async def api_compare(body: ComparisonRequest, request: Request) -> list[dict[str, Any]]:
    """Cost at each comparison home value, keeping the household's exemptions."""
    engine = _get_tax_engine(request)
    bond, household = _resolve_inputs(engine, body)
    try:
        rows = engine.compare_home_values(
            bond, household, market_values=body.market_values, district=body.district
        )
    except InvalidParameterError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return [row.model_dump() for row in rows]


@router.post("/api/tax/exemption-savings")
async def api_exemption_savings(
    body: CalculationRequest, request: Request
) -> list[dict[str, Any]]:
    """Annual savings attributable to each exemption."""
    engine = _get_tax_engine(request)
    bond, household = _resolve_inputs(engine, body)
    try:
        savings = engine.exemption_savings(bond, household, body.district)
    except InvalidParameterError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return [item.model_dump(mode="json") for item in savings]
