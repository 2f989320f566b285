"""
Application Layer Package

This package contains the application-specific use cases. It drives the
health check services and maps aggregation results into the health
report payload consumed by the presentation layer.
"""

# Re-export submodules
from src.application import dtos, models, use_cases

__all__ = ["dtos", "use_cases", "models"]
