"""Application-layer models."""

from .system_info import ServiceInfo

__all__ = ["ServiceInfo"]
