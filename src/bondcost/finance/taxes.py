"""Deterministic property tax engine for bond repayment costs.

Applies Cook County mechanics: market value is assessed at a fixed ratio,
equalized by the state multiplier, reduced by exemptions, and taxed at the
rate needed to service the bond across the whole district's EAV.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from bondcost.core.config import ComparisonConfig, TaxDefaultsConfig
from bondcost.core.types import ExemptionKind
from bondcost.finance.amortization import solve_annual_payment
from bondcost.finance.district import resolve_district
from bondcost.finance.exemptions import ExemptionAggregator
from bondcost.finance.models import (
    BondTerms,
    CalculationResult,
    ComparisonRow,
    DistrictValuation,
    ExemptionSchedule,
    ExemptionSavings,
    FlatDistrictValuation,
    HouseholdInputs,
)
from bondcost.finance.validation import (
    require_non_negative,
    require_positive,
    validate_bond,
    validate_household,
)


logger = logging.getLogger(__name__)


class PropertyTaxEngine:
    """Estimates a household's share of a bond's annual debt service."""

    def __init__(
        self,
        defaults: TaxDefaultsConfig | None = None,
        exemption_schedule: ExemptionSchedule | None = None,
        comparison_values: Iterable[float] | None = None,
    ) -> None:
        self._defaults = defaults if defaults is not None else TaxDefaultsConfig()
        require_positive("assessment_ratio", self._defaults.assessment_ratio)
        require_positive("equalization_multiplier", self._defaults.equalization_multiplier)
        self._exemptions = ExemptionAggregator(exemption_schedule)
        self._comparison_values = (
            tuple(comparison_values)
            if comparison_values is not None
            else tuple(ComparisonConfig().home_values)
        )

    @property
    def defaults(self) -> TaxDefaultsConfig:
        return self._defaults

    @property
    def exemption_schedule(self) -> ExemptionSchedule:
        return self._exemptions.schedule

    @property
    def comparison_values(self) -> tuple[float, ...]:
        return self._comparison_values

    # -- default value objects ------------------------------------------------

    def default_bond(self) -> BondTerms:
        return BondTerms(
            principal=self._defaults.bond_principal,
            term_years=self._defaults.term_years,
            interest_rate=self._defaults.interest_rate,
        )

    def default_household(self) -> HouseholdInputs:
        return HouseholdInputs(
            market_value=self._defaults.median_home_value,
            homeowner_exemption=True,
        )

    def default_district(self) -> FlatDistrictValuation:
        return FlatDistrictValuation(
            total_eav=self._defaults.district_total_eav,
            equalization_multiplier=self._defaults.equalization_multiplier,
        )

    # -- calculations ---------------------------------------------------------

    def calculate(
        self,
        bond: BondTerms,
        household: HouseholdInputs,
        district: DistrictValuation | None = None,
    ) -> CalculationResult:
        """Compute the itemized annual and monthly cost for one household.

        Raises:
            InvalidParameterError: if any input is outside its domain. Nothing
                is computed in that case.
        """
        validate_bond(bond)
        validate_household(household)
        resolved = resolve_district(
            district if district is not None else self.default_district(),
            default_multiplier=self._defaults.equalization_multiplier,
        )

        annual_debt_service = solve_annual_payment(
            bond.principal, bond.interest_rate, bond.term_years
        )
        implied_tax_rate = annual_debt_service / resolved.total_eav

        assessed_value = household.market_value * self._defaults.assessment_ratio
        equalized_value = assessed_value * resolved.equalization_multiplier
        exemptions = self._exemptions.total_exemptions(household)
        adjusted_eav = max(0.0, equalized_value - exemptions)

        annual_cost = adjusted_eav * implied_tax_rate
        monthly_cost = annual_cost / 12

        logger.debug(
            "Calculated cost for market_value=%s: rate=%.6f annual=%.2f",
            household.market_value,
            implied_tax_rate,
            annual_cost,
        )

        return CalculationResult(
            assessed_value=assessed_value,
            equalized_value=equalized_value,
            total_exemptions=exemptions,
            adjusted_eav=adjusted_eav,
            annual_debt_service=annual_debt_service,
            implied_tax_rate=implied_tax_rate,
            annual_cost=annual_cost,
            monthly_cost=monthly_cost,
        )

    def compare_home_values(
        self,
        bond: BondTerms,
        household: HouseholdInputs,
        market_values: Iterable[float] | None = None,
        district: DistrictValuation | None = None,
    ) -> list[ComparisonRow]:
        """Cost for the household's exemptions at each comparison home value."""
        values = list(market_values) if market_values is not None else list(self._comparison_values)
        for value in values:
            require_non_negative("market_value", value)

        rows: list[ComparisonRow] = []
        for value in values:
            result = self.calculate(
                bond, household.model_copy(update={"market_value": value}), district
            )
            rows.append(ComparisonRow(
                market_value=value,
                annual_cost=result.annual_cost,
                monthly_cost=result.monthly_cost,
                is_active=value == household.market_value,
            ))
        return rows

    def exemption_savings(
        self,
        bond: BondTerms,
        household: HouseholdInputs,
        district: DistrictValuation | None = None,
    ) -> list[ExemptionSavings]:
        """Annual cost reduction from each exemption, other flags held fixed.

        Savings are smaller than ``amount * implied_tax_rate`` when the
        household's adjusted EAV is already floored at zero.
        """
        savings: list[ExemptionSavings] = []
        for kind in ExemptionKind:
            without = self.calculate(bond, household.with_exemption(kind, False), district)
            with_ = self.calculate(bond, household.with_exemption(kind, True), district)
            annual = without.annual_cost - with_.annual_cost
            savings.append(ExemptionSavings(
                kind=kind,
                amount=self.exemption_schedule.amount_for(kind),
                annual_savings=annual,
                monthly_savings=annual / 12,
            ))
        return savings
