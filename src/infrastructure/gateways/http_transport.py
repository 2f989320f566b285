"""HTTP transport implementation backed by httpx - Infrastructure layer."""

from __future__ import annotations

from time import perf_counter
from typing import Optional

import httpx

from src.domain.entities.errors import TransportError
from src.domain.ports.http_transport import IHttpTransport, TransportResponse
from src.shared import get_logger

logger = get_logger(__name__)


class HttpxTransport(IHttpTransport):
    """Issue probe requests through one shared ``httpx.AsyncClient``."""

    def __init__(
        self,
        timeout: float = 5.0,
        *,
        follow_redirects: bool = False,
        verify_tls: bool = True,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize the transport.

        Args:
            timeout: Per-request timeout in seconds (connect, read, write, pool)
            follow_redirects: Whether 3xx responses are followed
            verify_tls: Whether server certificates are verified
            client: Pre-built client, mostly useful for tests
        """
        self._client = client or httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=follow_redirects,
            verify=verify_tls,
        )

    async def get(self, url: str) -> TransportResponse:
        """GET ``url``, returning once the status line and headers arrive."""
        request = self._client.build_request("GET", url)
        start = perf_counter()
        try:
            response = await self._client.send(request, stream=True)
        except httpx.RequestError as exc:
            elapsed_ms = (perf_counter() - start) * 1000
            logger.debug(
                "transport.request.failed",
                url=url,
                error=str(exc),
                error_type=type(exc).__name__,
                elapsed_ms=elapsed_ms,
            )
            raise TransportError(
                url,
                f"HTTP request failed: {exc!r}",
                {"error_type": type(exc).__name__},
            ) from exc

        elapsed_ms = (perf_counter() - start) * 1000
        try:
            return TransportResponse(
                status_code=response.status_code, elapsed_ms=elapsed_ms
            )
        finally:
            # The body is never read.
            await response.aclose()

    async def close(self) -> None:
        await self._client.aclose()
