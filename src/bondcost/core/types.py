"""Core type definitions shared across all bondcost modules."""

from __future__ import annotations

from enum import StrEnum


class ExemptionKind(StrEnum):
    """Statutory homestead exemptions a household may claim."""

    HOMEOWNER = "homeowner"
    SENIOR = "senior"
    DISABLED_PERSON = "disabled_person"
    RETURNING_VETERAN = "returning_veteran"


class InvalidParameterError(ValueError):
    """Raised when calculation inputs fall outside the documented domain.

    Carries the offending parameter name so API callers can report it.
    """

    def __init__(self, parameter: str, value: object, reason: str) -> None:
        self.parameter = parameter
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {parameter}={value!r}: {reason}")
