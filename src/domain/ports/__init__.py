"""Domain ports package."""

from .health_check import IHealthCheckService, IProbeExecutor
from .http_transport import IHttpTransport, TransportResponse

__all__ = [
    "IHealthCheckService",
    "IProbeExecutor",
    "IHttpTransport",
    "TransportResponse",
]
