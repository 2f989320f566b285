"""Single-URL probe execution."""

from __future__ import annotations

from typing import List

from src.domain.entities.errors import TransportError
from src.domain.entities.health import (
    Measurement,
    MeasurementKey,
    MeasurementKind,
    ProbeOutcome,
    Responded,
    Status,
    TransportFailed,
)
from src.domain.ports.health_check import IProbeExecutor
from src.domain.ports.http_transport import IHttpTransport
from src.shared import get_logger

logger = get_logger(__name__)

DURATION_UNIT = "ms"


class ProbeExecutor(IProbeExecutor):
    """Issue one GET per URL and turn the outcome into measurements.

    The executor holds no state besides the shared transport, so a single
    instance may probe many URLs concurrently.
    """

    def __init__(self, transport: IHttpTransport) -> None:
        self._transport = transport

    async def execute(self, url: str) -> ProbeOutcome:
        """Probe ``url`` once; transport errors become ``TransportFailed``."""
        try:
            response = await self._transport.get(url)
        except TransportError as exc:
            logger.warning("probe.transport_failed", url=url, error=exc.message)
            return TransportFailed(url=url, error=exc.message)

        logger.debug(
            "probe.responded",
            url=url,
            status_code=response.status_code,
            elapsed_ms=response.elapsed_ms,
        )
        return Responded(
            url=url,
            status_code=response.status_code,
            elapsed_ms=response.elapsed_ms,
        )

    async def probe(self, url: str) -> List[Measurement]:
        return to_measurements(await self.execute(url))


def to_measurements(outcome: ProbeOutcome) -> List[Measurement]:
    """Derive the ``status`` and, when a response arrived, ``duration`` measurements."""
    if isinstance(outcome, TransportFailed):
        return [
            Measurement(
                key=MeasurementKey(outcome.url, MeasurementKind.STATUS),
                status=Status.FAIL,
                observed_value=None,
                output=outcome.error,
            )
        ]

    status = Status.PASS if outcome.is_success else Status.FAIL
    return [
        Measurement(
            key=MeasurementKey(outcome.url, MeasurementKind.STATUS),
            status=status,
            observed_value=outcome.status_code,
            output=None if outcome.is_success else f"HTTP {outcome.status_code}",
        ),
        Measurement(
            key=MeasurementKey(outcome.url, MeasurementKind.DURATION),
            status=Status.PASS,
            observed_value=outcome.elapsed_ms,
            observed_unit=DURATION_UNIT,
        ),
    ]
