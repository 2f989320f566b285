from __future__ import annotations

from dataclasses import dataclass

import pytest

from src.application.models import ServiceInfo
from src.application.use_cases.health_use_cases import GetHealthStatusUseCase
from src.domain.entities.health import (
    AggregationResult,
    Measurement,
    MeasurementKey,
    MeasurementKind,
    Status,
    Tier,
    TieredMeasurements,
)


@dataclass
class _StubHealthService:
    result: AggregationResult

    async def evaluate(self) -> AggregationResult:
        return self.result

    async def aggregate(self, must_pass, may_fail, *, deadline=None):
        return self.result


@pytest.mark.asyncio
async def test_get_health_status_use_case_returns_report() -> None:
    url = "http://a.test"
    failed = Measurement(MeasurementKey(url, MeasurementKind.STATUS), Status.FAIL)
    result = AggregationResult(
        entries=(TieredMeasurements(Tier.MUST_PASS, url, (failed,)),)
    )
    info = ServiceInfo(
        description="Tiered probes",
        version="1",
        service_id="probe-svc",
        release_id="1.2.3",
    )

    use_case = GetHealthStatusUseCase(
        health_check_service=_StubHealthService(result), service_info=info
    )
    dto = await use_case.execute()

    assert dto.status is Status.FAIL
    assert dto.http_status == 503
    assert dto.version == "1"
    assert dto.release_id == "1.2.3"
    assert dto.service_id == "probe-svc"
    assert dto.description == "Tiered probes"
    assert list(dto.checks) == ["http://a.test:status"]
