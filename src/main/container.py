"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from src.application.models import ServiceInfo
from src.application.use_cases.health_use_cases import GetHealthStatusUseCase
from src.infrastructure.gateways.http_transport import HttpxTransport
from src.infrastructure.services.health_check_service import HealthCheckService
from src.infrastructure.services.probe_executor import ProbeExecutor
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Infrastructure
    http_transport = providers.Singleton(
        HttpxTransport,
        timeout=config.probe.timeout,
        follow_redirects=config.probe.follow_redirects,
        verify_tls=config.probe.verify_tls,
    )

    probe_executor = providers.Singleton(
        ProbeExecutor,
        transport=http_transport,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        probe_executor=probe_executor,
        must_pass_urls=config.probe.must_pass_urls,
        may_fail_urls=config.probe.may_fail_urls,
        deadline=config.probe.deadline,
    )

    service_info = providers.Singleton(
        ServiceInfo,
        description=config.service.description,
        version=config.service.version,
        service_id=config.service.service_id,
        release_id=config.service.release_id,
    )

    # Application (use cases)
    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
        service_info=service_info,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Lifecycle management for the shared HTTP transport.

    The transport's connection pool is shared by every probe and is closed
    when the application shuts down.
    """
    container = get_container()
    transport = container.http_transport()

    try:
        logger.info("container.resources.initialized")
        yield container
    finally:
        logger.info("container.http_transport.close")
        await transport.close()
        logger.info("container.resources.shutdown")
