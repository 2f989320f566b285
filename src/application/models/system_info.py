"""Lightweight settings structures consumed by the application layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ServiceInfo:
    """Service metadata rendered in the health report envelope."""

    description: str
    version: str
    service_id: Optional[str] = None
    release_id: Optional[str] = None
