"""
Domain Layer Package

This package contains the core health rules of the application: measurement
entities, the severity rollup and the ports the infrastructure implements.
It has no dependencies on external frameworks or infrastructure concerns.
"""

# Re-export submodules
from src.domain import entities, ports, services

__all__ = ["entities", "services", "ports"]
