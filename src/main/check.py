"""
One-shot Health Check Entry Point - Main Layer

Evaluates the configured URL tiers once, prints the health report to
stdout and exits with a status suitable for container HEALTHCHECK
directives: ``0`` for pass or warn, ``1`` for fail.
"""

import asyncio
import json
import sys

from src.application.dtos.health_dto import HealthReportDTO
from src.main.config import get_settings
from src.main.container import app_lifespan, init_container
from src.shared import configure_logging, get_logger, update_logging_from_settings

logger = get_logger(__name__)


async def run_check() -> HealthReportDTO:
    """Evaluate the configured tiers once."""
    init_container(get_settings())

    async with app_lifespan() as container:
        return await container.get_health_status_use_case().execute()


def main() -> int:
    # stdout carries the report only.
    configure_logging(stream=sys.stderr)
    update_logging_from_settings(get_settings(), stream=sys.stderr)

    report = asyncio.run(run_check())
    json.dump(report.to_payload(), sys.stdout, indent=2)
    sys.stdout.write("\n")

    exit_code = 0 if report.http_status < 500 else 1
    logger.info("check.completed", status=report.status.value, exit_code=exit_code)
    return exit_code
