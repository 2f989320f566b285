"""
Presentation Layer Package

Exposes the rolled-up health report over HTTP.
"""

from src.presentation import controllers

__all__ = ["controllers"]
