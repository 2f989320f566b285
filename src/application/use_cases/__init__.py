"""
Use Cases Package - Application Layer

This package contains use cases that orchestrate the domain services
and turn their results into DTOs for the presentation layer.
"""

from .health_use_cases import GetHealthStatusUseCase

__all__ = ["GetHealthStatusUseCase"]
