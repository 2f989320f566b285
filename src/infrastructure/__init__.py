"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as the HTTP transport
and the concurrent probe services.
"""

from src.infrastructure import gateways, services

__all__ = ["gateways", "services"]
