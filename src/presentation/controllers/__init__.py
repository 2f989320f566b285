"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that handle
HTTP requests and responses. Controllers map application layer
use case results onto HTTP payloads and status codes.
"""

from .system_controller import router as system_router

__all__ = ["system_router"]
