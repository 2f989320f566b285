"""Infrastructure implementation for tiered URL health checks."""

from __future__ import annotations

import asyncio
from typing import List, Optional, Sequence, Tuple

from src.domain.entities.health import (
    AggregationResult,
    Measurement,
    Tier,
    TieredMeasurements,
    TransportFailed,
)
from src.domain.ports.health_check import IHealthCheckService, IProbeExecutor
from src.infrastructure.services.probe_executor import to_measurements
from src.shared import get_logger

logger = get_logger(__name__)

DEADLINE_EXCEEDED = "probe deadline exceeded"


class HealthCheckService(IHealthCheckService):
    """Probe must-pass and may-fail URLs concurrently and roll them up."""

    def __init__(
        self,
        probe_executor: IProbeExecutor,
        must_pass_urls: Sequence[str] = (),
        may_fail_urls: Sequence[str] = (),
        *,
        deadline: Optional[float] = None,
    ) -> None:
        self._probe_executor = probe_executor
        self._must_pass_urls = tuple(must_pass_urls)
        self._may_fail_urls = tuple(may_fail_urls)
        self._deadline = deadline

    async def evaluate(self) -> AggregationResult:
        """Aggregate the configured URL tiers."""

        return await self.aggregate(
            self._must_pass_urls, self._may_fail_urls, deadline=self._deadline
        )

    async def aggregate(
        self,
        must_pass: Sequence[str],
        may_fail: Sequence[str],
        *,
        deadline: Optional[float] = None,
    ) -> AggregationResult:
        """
        Run every probe concurrently and merge the results in input order.

        Args:
            must_pass: URLs whose failure makes the overall status ``fail``
            may_fail: URLs whose failure only makes the overall status ``warn``
            deadline: Optional upper bound in seconds for the whole run. Probes
                still running when it expires are cancelled and reported as
                transport failures.

        Returns:
            AggregationResult: must-pass measurements first, then may-fail ones.
        """
        targets: List[Tuple[Tier, str]] = [
            (Tier.MUST_PASS, url) for url in must_pass
        ] + [(Tier.MAY_FAIL, url) for url in may_fail]

        if not targets:
            return AggregationResult()

        tasks = [
            asyncio.create_task(self._probe_executor.probe(url), name=f"probe:{url}")
            for _, url in targets
        ]

        try:
            _, pending = await asyncio.wait(tasks, timeout=deadline)
        except asyncio.CancelledError:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        if pending:
            logger.warning(
                "health.aggregate.deadline_exceeded",
                deadline=deadline,
                pending=len(pending),
            )
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)

        entries = tuple(
            TieredMeasurements(
                tier=tier, url=url, measurements=tuple(self._collect(url, task))
            )
            for (tier, url), task in zip(targets, tasks)
        )
        result = AggregationResult(entries=entries)

        logger.info(
            "health.aggregate.completed",
            overall=result.overall.value,
            must_pass=len(must_pass),
            may_fail=len(may_fail),
            measurements=len(result.measurements),
        )
        return result

    def _collect(
        self, url: str, task: "asyncio.Task[List[Measurement]]"
    ) -> List[Measurement]:
        if task.cancelled():
            return to_measurements(TransportFailed(url=url, error=DEADLINE_EXCEEDED))

        exc = task.exception()
        if exc is not None:
            logger.error("health.probe.unexpected_error", url=url, exc_info=exc)
            return to_measurements(
                TransportFailed(url=url, error=f"Probe raised {exc!r}")
            )

        return task.result()
