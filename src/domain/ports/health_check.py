"""Domain service abstraction for health checks."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from src.domain.entities.health import AggregationResult, Measurement


class IProbeExecutor(Protocol):
    """Interface for probing a single URL."""

    async def probe(self, url: str) -> list[Measurement]:
        """Probe ``url`` once and return its one or two measurements."""
        ...


class IHealthCheckService(Protocol):
    """Interface for aggregating probe results across criticality tiers."""

    async def aggregate(
        self,
        must_pass: Sequence[str],
        may_fail: Sequence[str],
        *,
        deadline: Optional[float] = None,
    ) -> AggregationResult:
        """Probe every URL of both tiers and roll the results up."""
        ...

    async def evaluate(self) -> AggregationResult:
        """Aggregate the configured tiers."""
        ...
