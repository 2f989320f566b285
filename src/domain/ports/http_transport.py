"""Domain port for the HTTP transport used by probes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class TransportResponse:
    """Raw result of a GET request that produced a response."""

    status_code: int
    elapsed_ms: float


class IHttpTransport(Protocol):
    """Interface for issuing a single GET request to a URL."""

    async def get(self, url: str) -> TransportResponse:
        """
        Issue one GET request.

        Raises:
            TransportError: when no response was received (connection refused,
                timeout, DNS failure, ...).
        """
        ...

    async def close(self) -> None:
        """Release the underlying connection pool."""
        ...
