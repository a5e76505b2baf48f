"""Normalization of district valuation inputs to a canonical total EAV."""

from __future__ import annotations

from bondcost.finance.models import (
    DecomposedDistrictValuation,
    DistrictValuation,
    FlatDistrictValuation,
    ResolvedDistrict,
)
from bondcost.finance.validation import require_positive


def resolve_district(
    valuation: DistrictValuation,
    default_multiplier: float,
) -> ResolvedDistrict:
    """Resolve either valuation shape to ``(total_eav, equalization_multiplier)``.

    The returned multiplier is the only one a calculation may use, both for
    the district base and for the household's own equalized value. A flat
    valuation without a multiplier borrows ``default_multiplier``.
    """
    if isinstance(valuation, DecomposedDistrictValuation):
        total_assessed = require_positive(
            "total_assessed_value", valuation.total_assessed_value
        )
        multiplier = require_positive(
            "equalization_multiplier", valuation.equalization_multiplier
        )
        return ResolvedDistrict(
            total_eav=total_assessed * multiplier,
            equalization_multiplier=multiplier,
        )

    if isinstance(valuation, FlatDistrictValuation):
        total_eav = require_positive("total_eav", valuation.total_eav)
        multiplier = (
            valuation.equalization_multiplier
            if valuation.equalization_multiplier is not None
            else default_multiplier
        )
        return ResolvedDistrict(
            total_eav=total_eav,
            equalization_multiplier=require_positive("equalization_multiplier", multiplier),
        )

    raise TypeError(f"Unsupported district valuation: {type(valuation).__name__}")
