"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from bondcost.finance.models import BondTerms, HouseholdInputs
from bondcost.finance.taxes import PropertyTaxEngine


@pytest.fixture
def tax_engine():
    return PropertyTaxEngine()


@pytest.fixture
def default_bond():
    return BondTerms(principal=100_000_000, term_years=30, interest_rate=0.0445)


@pytest.fixture
def home():
    """Factory for a household with the homeowner exemption claimed.

    Keyword overrides replace individual exemption flags.
    """

    def _home(market_value: float, **overrides) -> HouseholdInputs:
        fields = {
            "market_value": market_value,
            "homeowner_exemption": True,
            "senior_exemption": False,
            "disabled_person_exemption": False,
            "returning_veteran_exemption": False,
        }
        fields.update(overrides)
        return HouseholdInputs(**fields)

    return _home
