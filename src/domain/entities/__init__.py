"""
Domain Entities Package

This package contains the core domain entities and business logic.
"""

from .errors import DomainError, TransportError
from .health import (
    AggregationResult,
    Measurement,
    MeasurementKey,
    MeasurementKind,
    ProbeOutcome,
    Responded,
    Status,
    Tier,
    TieredMeasurements,
    TransportFailed,
)

__all__ = [
    "AggregationResult",
    "Measurement",
    "MeasurementKey",
    "MeasurementKind",
    "ProbeOutcome",
    "Responded",
    "Status",
    "Tier",
    "TieredMeasurements",
    "TransportFailed",
    "DomainError",
    "TransportError",
]
