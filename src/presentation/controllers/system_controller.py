"""System endpoints exposing the health report."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.application.dtos.health_dto import HEALTH_MEDIA_TYPE, HealthReportDTO
from src.application.use_cases.health_use_cases import GetHealthStatusUseCase
from src.domain.entities.health import Status
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get(
    "/health",
    response_model=HealthReportDTO,
    responses={503: {"model": HealthReportDTO}},
)
@inject
async def health(
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide["get_health_status_use_case"]
    ),
) -> JSONResponse:
    """Return the rolled-up health of the configured URLs."""
    try:
        report = await get_health_status_use_case.execute()
        logger.debug("health.check.success", status=report.status.value)
    except Exception as exc:
        logger.error("health.check.failure", error=str(exc), exc_info=exc)
        report = HealthReportDTO(
            status=Status.FAIL, notes=["Unable to evaluate system health"]
        )

    return JSONResponse(
        content=report.to_payload(),
        status_code=report.http_status,
        media_type=HEALTH_MEDIA_TYPE,
    )
