"""Domain checks for calculation inputs.

Each helper raises :class:`InvalidParameterError` naming the parameter, so
callers reject bad input before any arithmetic can produce NaN or infinity.
"""

from __future__ import annotations

import logging
import math

from bondcost.core.types import InvalidParameterError
from bondcost.finance.models import BondTerms, ExemptionSchedule, HouseholdInputs


logger = logging.getLogger(__name__)


def _reject(parameter: str, value: object, reason: str) -> InvalidParameterError:
    logger.warning("Rejected %s=%r: %s", parameter, value, reason)
    return InvalidParameterError(parameter, value, reason)


def require_finite(parameter: str, value: float) -> float:
    if not math.isfinite(value):
        raise _reject(parameter, value, "must be a finite number")
    return value


def require_non_negative(parameter: str, value: float) -> float:
    require_finite(parameter, value)
    if value < 0:
        raise _reject(parameter, value, "must not be negative")
    return value


def require_positive(parameter: str, value: float) -> float:
    require_finite(parameter, value)
    if value <= 0:
        raise _reject(parameter, value, "must be greater than zero")
    return value


def validate_bond(bond: BondTerms) -> None:
    require_non_negative("principal", bond.principal)
    require_positive("term_years", bond.term_years)
    require_non_negative("interest_rate", bond.interest_rate)


def validate_household(household: HouseholdInputs) -> None:
    require_non_negative("market_value", household.market_value)


def validate_exemption_schedule(schedule: ExemptionSchedule) -> None:
    for kind, amount in schedule.as_dict().items():
        require_non_negative(f"exemption.{kind.value}", amount)
