"""Level-payment amortization for bond debt service."""

from __future__ import annotations

import math

from bondcost.finance.models import BondSummary, BondTerms
from bondcost.finance.validation import (
    require_non_negative,
    require_positive,
    validate_bond,
)


def solve_annual_payment(principal: float, annual_rate: float, term_years: int) -> float:
    """Return the level annual payment that retires ``principal`` over the term.

    Uses the standard PMT formula ``P * r / (1 - (1 + r) ** -n)``, with the
    denominator evaluated through ``expm1``/``log1p`` so rates too small to
    change ``1 + r`` stay finite. A zero rate falls back to straight-line
    repayment ``P / n``.

    Raises:
        InvalidParameterError: if ``term_years`` is not positive or the
            principal or rate is negative or non-finite.
    """
    require_non_negative("principal", principal)
    require_non_negative("interest_rate", annual_rate)
    require_positive("term_years", term_years)

    if annual_rate == 0:
        return principal / term_years
    denominator = -math.expm1(-term_years * math.log1p(annual_rate))
    return principal * annual_rate / denominator


def summarize_bond(bond: BondTerms) -> BondSummary:
    """Total repaid and total interest over the life of the bond."""
    validate_bond(bond)
    annual = solve_annual_payment(bond.principal, bond.interest_rate, bond.term_years)
    total_repaid = annual * bond.term_years
    return BondSummary(
        principal=bond.principal,
        term_years=bond.term_years,
        interest_rate=bond.interest_rate,
        annual_debt_service=annual,
        total_repaid=total_repaid,
        # Clamp float noise at zero rate where total_repaid == principal.
        total_interest=max(0.0, total_repaid - bond.principal),
    )
