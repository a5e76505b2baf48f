"""Finance data models for bond terms, households, districts, and results."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from bondcost.core.types import ExemptionKind


class BondTerms(BaseModel):
    """Terms of the municipal bond being repaid from property taxes."""

    model_config = ConfigDict(frozen=True)

    principal: float
    term_years: int
    interest_rate: float


class HouseholdInputs(BaseModel):
    """A single household's market value and claimed exemptions."""

    model_config = ConfigDict(frozen=True)

    market_value: float
    homeowner_exemption: bool = False
    senior_exemption: bool = False
    disabled_person_exemption: bool = False
    returning_veteran_exemption: bool = False

    def selected_exemptions(self) -> list[ExemptionKind]:
        flags = {
            ExemptionKind.HOMEOWNER: self.homeowner_exemption,
            ExemptionKind.SENIOR: self.senior_exemption,
            ExemptionKind.DISABLED_PERSON: self.disabled_person_exemption,
            ExemptionKind.RETURNING_VETERAN: self.returning_veteran_exemption,
        }
        return [kind for kind, selected in flags.items() if selected]

    def with_exemption(self, kind: ExemptionKind, selected: bool) -> HouseholdInputs:
        """Return a copy with one exemption flag set or cleared."""
        return self.model_copy(update={_EXEMPTION_FIELDS[kind]: selected})


_EXEMPTION_FIELDS: dict[ExemptionKind, str] = {
    ExemptionKind.HOMEOWNER: "homeowner_exemption",
    ExemptionKind.SENIOR: "senior_exemption",
    ExemptionKind.DISABLED_PERSON: "disabled_person_exemption",
    ExemptionKind.RETURNING_VETERAN: "returning_veteran_exemption",
}


class ExemptionSchedule(BaseModel):
    """Dollar reduction to EAV granted by each exemption."""

    model_config = ConfigDict(frozen=True)

    homeowner: float = 10_000
    senior: float = 8_000
    disabled_person: float = 2_000
    returning_veteran: float = 5_000

    def amount_for(self, kind: ExemptionKind) -> float:
        return getattr(self, kind.value)

    def as_dict(self) -> dict[ExemptionKind, float]:
        return {kind: self.amount_for(kind) for kind in ExemptionKind}


class FlatDistrictValuation(BaseModel):
    """District valuation given as a single total EAV.

    ``equalization_multiplier`` is optional; when omitted the engine's
    configured multiplier equalizes the household's assessed value.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["flat"] = "flat"
    total_eav: float
    equalization_multiplier: float | None = None


class DecomposedDistrictValuation(BaseModel):
    """District valuation given as total assessed value and the multiplier."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["decomposed"] = "decomposed"
    total_assessed_value: float
    equalization_multiplier: float


DistrictValuation = Annotated[
    Union[FlatDistrictValuation, DecomposedDistrictValuation],
    Field(discriminator="kind"),
]


class ResolvedDistrict(BaseModel):
    """Canonical district valuation used by one calculation."""

    model_config = ConfigDict(frozen=True)

    total_eav: float
    equalization_multiplier: float


class CalculationResult(BaseModel):
    """Itemized per-household cost of servicing the bond."""

    model_config = ConfigDict(frozen=True)

    assessed_value: float
    equalized_value: float
    total_exemptions: float
    adjusted_eav: float
    annual_debt_service: float
    implied_tax_rate: float
    annual_cost: float
    monthly_cost: float


class BondSummary(BaseModel):
    """Total repayment figures for a bond over its full term."""

    model_config = ConfigDict(frozen=True)

    principal: float
    term_years: int
    interest_rate: float
    annual_debt_service: float
    total_repaid: float
    total_interest: float


class ComparisonRow(BaseModel):
    """Cost for the same household at one alternative home value."""

    model_config = ConfigDict(frozen=True)

    market_value: float
    annual_cost: float
    monthly_cost: float
    is_active: bool = False


class ExemptionSavings(BaseModel):
    """Annual tax reduction attributable to a single exemption."""

    model_config = ConfigDict(frozen=True)

    kind: ExemptionKind
    amount: float
    annual_savings: float
    monthly_savings: float
