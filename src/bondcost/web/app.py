"""FastAPI application for the bond cost calculator.

Exposes the property tax engine as JSON endpoints plus a health check.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from bondcost.core.config import Settings
from bondcost.finance.exemptions import load_exemption_schedule
from bondcost.finance.models import ExemptionSchedule
from bondcost.finance.taxes import PropertyTaxEngine
from bondcost.web.tax_router import router as tax_router


logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str = "0.1.0"


def create_app(
    settings: Settings | None = None,
    exemption_schedule: ExemptionSchedule | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Uses the factory pattern so tests can create isolated app instances
    with their own settings.

    Args:
        settings: Application settings. Defaults to Settings().
        exemption_schedule: Optional pre-built schedule. Defaults to the
            YAML schedule at ``settings.tax.exemption_schedule_path``.

    Returns:
        A configured FastAPI instance.
    """
    if settings is None:
        settings = Settings()

    logging.getLogger("bondcost").setLevel(settings.log_level.upper())

    app = FastAPI(
        title="Bond Cost Calculator",
        description="Household property tax cost of repaying a municipal bond",
        version="0.1.0",
        debug=settings.debug,
    )

    # CORS for development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if exemption_schedule is None:
        exemption_schedule = load_exemption_schedule(settings.tax.exemption_schedule_path)

    tax_engine = PropertyTaxEngine(
        defaults=settings.tax,
        exemption_schedule=exemption_schedule,
        comparison_values=settings.comparison.home_values,
    )
    logger.info(
        "Tax engine ready (environment=%s, district_total_eav=%s)",
        settings.environment,
        settings.tax.district_total_eav,
    )

    app.state.settings = settings
    app.state.tax_engine = tax_engine

    app.include_router(tax_router)

    @app.get("/api/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            service="bondcost",
        )

    return app
