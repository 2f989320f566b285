"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

import json
from typing import Annotated, Any, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from src.shared import EnumEnvironment, EnumLogLevel

UrlList = Annotated[List[str], NoDecode]


class ServiceSettings(BaseSettings):
    """Metadata reported in the health envelope."""

    title: str = Field(default="URL Health Probe", description="Service title")
    description: str = Field(
        default="Tiered HTTP dependency health checks",
        description="Service description",
    )
    version: str = Field(default="1", description="Public health API version")
    service_id: Optional[str] = Field(default=None, description="Service identifier")
    release_id: Optional[str] = Field(default=None, description="Release identifier")

    model_config = SettingsConfigDict(
        env_prefix="SERVICE_", case_sensitive=False, extra="ignore"
    )


class ProbeSettings(BaseSettings):
    """URL tiers and transport behaviour for the probes."""

    must_pass_urls: UrlList = Field(
        default_factory=list,
        description="URLs whose failure fails the overall health",
    )
    may_fail_urls: UrlList = Field(
        default_factory=list,
        description="URLs whose failure only degrades the overall health to warn",
    )
    timeout: float = Field(
        default=5.0, gt=0, description="Per-request transport timeout in seconds"
    )
    deadline: Optional[float] = Field(
        default=None,
        gt=0,
        description="Upper bound in seconds for one aggregation run",
    )
    follow_redirects: bool = Field(default=False, description="Follow 3xx responses")
    verify_tls: bool = Field(default=True, description="Verify TLS certificates")

    model_config = SettingsConfigDict(
        env_prefix="PROBE_", case_sensitive=False, extra="ignore"
    )

    @field_validator("must_pass_urls", "may_fail_urls", mode="before")
    @classmethod
    def _split_urls(cls, value: Any) -> Any:
        """Accept a JSON list or a comma-separated string."""
        if not isinstance(value, str):
            return value
        value = value.strip()
        if not value:
            return []
        if value.startswith("["):
            return json.loads(value)
        return [url.strip() for url in value.split(",") if url.strip()]


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: Optional[str] = Field(
        default=None,
        description="Log renderer, json or console (if None, chosen by environment)",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    service: ServiceSettings = Field(default_factory=ServiceSettings)
    probe: ProbeSettings = Field(default_factory=ProbeSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on environment.
    """
    return AppSettings()
