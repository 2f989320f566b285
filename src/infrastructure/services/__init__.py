"""Infrastructure services package."""

from .health_check_service import HealthCheckService
from .probe_executor import ProbeExecutor, to_measurements

__all__ = ["HealthCheckService", "ProbeExecutor", "to_measurements"]
