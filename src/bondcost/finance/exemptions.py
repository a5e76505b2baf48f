"""Exemption schedule loading and aggregation."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import yaml

from bondcost.core.types import ExemptionKind, InvalidParameterError
from bondcost.finance.models import ExemptionSchedule, HouseholdInputs
from bondcost.finance.validation import (
    require_non_negative,
    validate_exemption_schedule,
)


_DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "exemption_schedule.yml"


def load_exemption_schedule(config_path: str | Path | None = None) -> ExemptionSchedule:
    """Load exemption amounts from YAML.

    Kinds missing from the file keep their default amounts.
    """
    path = Path(config_path) if config_path else _DEFAULT_CONFIG_PATH
    with open(path) as fh:
        raw = yaml.safe_load(fh) or {}

    entries = (raw.get("exemptions") if isinstance(raw, dict) else raw) or {}
    if not isinstance(entries, dict):
        raise InvalidParameterError(
            "exemptions", entries, "must be a mapping of exemption kind to amount"
        )

    amounts: dict[str, float] = {}
    for kind_name, amount in entries.items():
        try:
            kind = ExemptionKind(str(kind_name))
        except ValueError:
            raise InvalidParameterError(
                "exemption",
                kind_name,
                f"unknown kind, expected one of {[k.value for k in ExemptionKind]}",
            )
        try:
            value = float(amount)
        except (TypeError, ValueError):
            raise InvalidParameterError(
                f"exemption.{kind.value}", amount, "must be a number"
            )
        amounts[kind.value] = require_non_negative(f"exemption.{kind.value}", value)

    return ExemptionSchedule(**amounts)


def total_exemptions(
    selected: Iterable[ExemptionKind],
    schedule: ExemptionSchedule | None = None,
) -> float:
    """Sum the scheduled amount of every selected exemption.

    Raises:
        InvalidParameterError: if any scheduled amount is negative or
            non-finite.
    """
    schedule = schedule if schedule is not None else ExemptionSchedule()
    validate_exemption_schedule(schedule)
    return float(sum(schedule.amount_for(kind) for kind in set(selected)))


class ExemptionAggregator:
    """Totals a household's exemptions against a fixed schedule."""

    def __init__(self, schedule: ExemptionSchedule | None = None) -> None:
        self._schedule = schedule if schedule is not None else ExemptionSchedule()
        validate_exemption_schedule(self._schedule)

    @property
    def schedule(self) -> ExemptionSchedule:
        return self._schedule

    def total_exemptions(self, household: HouseholdInputs) -> float:
        return total_exemptions(household.selected_exemptions(), self._schedule)
