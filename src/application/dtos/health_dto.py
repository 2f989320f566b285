"""DTOs for the health report envelope.

The payload follows the "Health Check Response Format for HTTP APIs"
(``application/health+json``): a top-level status plus a ``checks`` map
keyed by ``"<component>:<measurement>"``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field

from src.domain.entities.health import AggregationResult, Measurement, Status

HEALTH_MEDIA_TYPE = "application/health+json"

_HTTP_STATUS = {Status.PASS: 200, Status.WARN: 200, Status.FAIL: 503}


def http_status_for(status: Status) -> int:
    """Map an overall status to the HTTP code of the health endpoint."""
    return _HTTP_STATUS[status]


class CheckDTO(BaseModel):
    """Serializable representation of a single measurement."""

    component_id: str = Field(alias="componentId", description="Probed URL")
    status: Status = Field(description="Status of this measurement")
    observed_value: Optional[Union[int, float]] = Field(
        default=None,
        alias="observedValue",
        description="HTTP status code or elapsed time",
    )
    observed_unit: Optional[str] = Field(
        default=None, alias="observedUnit", description="Unit of observedValue"
    )
    output: Optional[str] = Field(
        default=None, description="Diagnostic text for failed measurements"
    )
    time: datetime = Field(description="When the measurement was taken")

    @classmethod
    def from_domain(cls, measurement: Measurement) -> "CheckDTO":
        return cls(
            componentId=measurement.key.component,
            status=measurement.status,
            observedValue=measurement.observed_value,
            observedUnit=measurement.observed_unit,
            output=measurement.output,
            time=measurement.time,
        )

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "componentId": "http://orders:8080/health",
                "status": "pass",
                "observedValue": 200,
                "time": "2024-09-09T12:00:00Z",
            }
        },
    }


class HealthReportDTO(BaseModel):
    """DTO representing the /health response payload."""

    status: Status = Field(description="Overall status")
    version: Optional[str] = Field(default=None, description="Public API version")
    release_id: Optional[str] = Field(
        default=None, alias="releaseId", description="Release of the service"
    )
    service_id: Optional[str] = Field(
        default=None, alias="serviceId", description="Service identifier"
    )
    description: Optional[str] = Field(default=None, description="Service summary")
    notes: List[str] = Field(default_factory=list, description="Free-form notes")
    checks: Dict[str, List[CheckDTO]] = Field(
        default_factory=dict,
        description="Measurements keyed by '<component>:<measurement>'",
    )

    @classmethod
    def from_domain(
        cls,
        result: AggregationResult,
        *,
        version: Optional[str] = None,
        release_id: Optional[str] = None,
        service_id: Optional[str] = None,
        description: Optional[str] = None,
    ) -> "HealthReportDTO":
        checks: Dict[str, List[CheckDTO]] = {}
        for measurement in result.measurements:
            checks.setdefault(str(measurement.key), []).append(
                CheckDTO.from_domain(measurement)
            )
        return cls(
            status=result.overall,
            version=version,
            releaseId=release_id,
            serviceId=service_id,
            description=description,
            checks=checks,
        )

    def to_payload(self) -> dict:
        """Render the JSON document, omitting empty optional members."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @property
    def http_status(self) -> int:
        return http_status_for(self.status)

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "status": "warn",
                "version": "1",
                "description": "Tiered URL health probe",
                "checks": {
                    "http://orders:8080/health:status": [
                        {
                            "componentId": "http://orders:8080/health",
                            "status": "pass",
                            "observedValue": 200,
                            "time": "2024-09-09T12:00:00Z",
                        }
                    ],
                    "http://orders:8080/health:duration": [
                        {
                            "componentId": "http://orders:8080/health",
                            "status": "pass",
                            "observedValue": 12.5,
                            "observedUnit": "ms",
                            "time": "2024-09-09T12:00:00Z",
                        }
                    ],
                    "http://search:9200:status": [
                        {
                            "componentId": "http://search:9200",
                            "status": "fail",
                            "observedValue": 500,
                            "output": "HTTP 500",
                            "time": "2024-09-09T12:00:00Z",
                        }
                    ],
                },
            }
        },
    }
