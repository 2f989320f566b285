"""Domain service helpers for rolling measurements up into one status."""

from typing import Iterable

from src.domain.entities.health import (
    MeasurementKind,
    Status,
    Tier,
    TieredMeasurements,
)


def worst(statuses: Iterable[Status]) -> Status:
    """Return the most severe status, ``PASS`` for an empty input."""
    result = Status.PASS
    for status in statuses:
        if status.severity > result.severity:
            result = status
    return result


def _tier_failed(entry: TieredMeasurements) -> bool:
    return any(
        measurement.key.kind is MeasurementKind.STATUS
        and measurement.status is Status.FAIL
        for measurement in entry.measurements
    )


def rollup(entries: Iterable[TieredMeasurements]) -> Status:
    """
    Combine per-URL measurements into the overall status.

    Only ``status`` measurements are considered. A failure in the must-pass
    tier yields ``FAIL``, a failure in the may-fail tier yields ``WARN``,
    anything else (including no entries at all) yields ``PASS``.
    """
    escalations = []
    for entry in entries:
        if not _tier_failed(entry):
            continue
        if entry.tier is Tier.MUST_PASS:
            escalations.append(Status.FAIL)
        else:
            escalations.append(Status.WARN)
    return worst(escalations)
