"""Use cases for the health endpoint."""

from src.application.dtos.health_dto import HealthReportDTO
from src.application.models import ServiceInfo
from src.domain.ports.health_check import IHealthCheckService


class GetHealthStatusUseCase:
    """Use case responsible for returning the rolled-up health report."""

    def __init__(
        self, health_check_service: IHealthCheckService, service_info: ServiceInfo
    ) -> None:
        self._health_check_service = health_check_service
        self._info = service_info

    async def execute(self) -> HealthReportDTO:
        result = await self._health_check_service.evaluate()
        return HealthReportDTO.from_domain(
            result,
            version=self._info.version,
            release_id=self._info.release_id,
            service_id=self._info.service_id,
            description=self._info.description,
        )
