"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .health_dto import HEALTH_MEDIA_TYPE, CheckDTO, HealthReportDTO, http_status_for

__all__ = ["HEALTH_MEDIA_TYPE", "CheckDTO", "HealthReportDTO", "http_status_for"]
