"""
Health domain entities.

This module defines the value objects produced by a probe run: typed
measurements keyed by component and kind, the tagged outcome of a single
HTTP probe, and the aggregated result of a run across both criticality tiers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Tuple, Union


class Status(str, Enum):
    """Tri-state health verdict, ordered by severity."""

    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]


_SEVERITY = {Status.PASS: 0, Status.WARN: 1, Status.FAIL: 2}


class MeasurementKind(str, Enum):
    """Kind of observation reported for a probed component."""

    STATUS = "status"
    DURATION = "duration"


class Tier(str, Enum):
    """Criticality tier a URL was configured under."""

    MUST_PASS = "must_pass"
    MAY_FAIL = "may_fail"


@dataclass(frozen=True, slots=True)
class MeasurementKey:
    """Identifies one observation: the probed component and what was measured."""

    component: str
    kind: MeasurementKind

    def __str__(self) -> str:
        return f"{self.component}:{self.kind.value}"


@dataclass(frozen=True, slots=True)
class Measurement:
    """A single reported fact about a probe."""

    key: MeasurementKey
    status: Status
    observed_value: Optional[Union[int, float]] = None
    observed_unit: Optional[str] = None
    output: Optional[str] = None
    time: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True, slots=True)
class Responded:
    """The transport returned a response, whatever its status code."""

    url: str
    status_code: int
    elapsed_ms: float

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass(frozen=True, slots=True)
class TransportFailed:
    """The transport failed before producing a response."""

    url: str
    error: str


ProbeOutcome = Union[Responded, TransportFailed]


@dataclass(frozen=True, slots=True)
class TieredMeasurements:
    """Measurements produced for one URL together with its tier."""

    tier: Tier
    url: str
    measurements: Tuple[Measurement, ...]


@dataclass(frozen=True, slots=True)
class AggregationResult:
    """Ordered measurements of a run; the overall status is derived from them."""

    entries: Tuple[TieredMeasurements, ...] = ()

    @property
    def measurements(self) -> Tuple[Measurement, ...]:
        return tuple(m for entry in self.entries for m in entry.measurements)

    @property
    def overall(self) -> Status:
        # Local import: the rollup service depends on this module.
        from src.domain.services.health_rollup import rollup

        return rollup(self.entries)
