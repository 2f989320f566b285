"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class TransportError(DomainError):
    """Raised when an HTTP probe fails before a response is received."""

    def __init__(
        self, url: str, message: str, details: Optional[Dict[str, Any]] = None
    ):
        self.url = url
        super().__init__(message, {"url": url, **(details or {})})
