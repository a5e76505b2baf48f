"""Application configuration loaded from environment and config files."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class TaxDefaultsConfig(BaseSettings):
    """Cook County property tax constants and the default bond terms.

    Every value is a fallback; callers may override any of them per request.
    """

    model_config = {"env_prefix": "BONDCOST_TAX_"}

    assessment_ratio: float = 0.10
    equalization_multiplier: float = 3.0355
    district_total_eav: float = 2_361_857_488
    median_home_value: float = 465_500
    bond_principal: float = 100_000_000
    term_years: int = 30
    interest_rate: float = 0.0445
    exemption_schedule_path: str | None = None


class ComparisonConfig(BaseSettings):
    """Home values used for the cost-by-home-value comparison."""

    model_config = {"env_prefix": "BONDCOST_COMPARISON_"}

    home_values: list[float] = Field(
        default_factory=lambda: [300_000, 430_000, 465_500, 500_000, 750_000]
    )


class Settings(BaseSettings):
    """Root application settings."""

    model_config = {"env_prefix": "BONDCOST_"}

    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    tax: TaxDefaultsConfig = Field(default_factory=TaxDefaultsConfig)
    comparison: ComparisonConfig = Field(default_factory=ComparisonConfig)
