from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Dict, List, Union

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.domain.entities.errors import TransportError  # noqa: E402
from src.domain.ports.http_transport import TransportResponse  # noqa: E402

SUCCESS_URL = "http://orders.test/health"
SERVER_ERROR_URL = "http://billing.test/health"
NOT_FOUND_URL = "http://search.test/missing"
UNREACHABLE_URL = "http://unreachable.test/health"

Route = Union[int, BaseException]


class FakeTransport:
    """In-memory transport answering from a route table."""

    def __init__(
        self,
        routes: Dict[str, Route] | None = None,
        *,
        delays: Dict[str, float] | None = None,
        elapsed_ms: float = 12.5,
    ) -> None:
        self.routes: Dict[str, Route] = {
            SUCCESS_URL: 200,
            SERVER_ERROR_URL: 500,
            NOT_FOUND_URL: 404,
            UNREACHABLE_URL: TransportError(
                UNREACHABLE_URL, "HTTP request failed: ConnectError('refused')"
            ),
        }
        self.routes.update(routes or {})
        self.delays = delays or {}
        self.elapsed_ms = elapsed_ms
        self.calls: List[str] = []
        self.completed: List[str] = []
        self.cancelled: List[str] = []
        self.closed = False

    async def get(self, url: str) -> TransportResponse:
        self.calls.append(url)
        try:
            await asyncio.sleep(self.delays.get(url, 0))
        except asyncio.CancelledError:
            self.cancelled.append(url)
            raise
        self.completed.append(url)

        outcome = self.routes[url]
        if isinstance(outcome, BaseException):
            raise outcome
        return TransportResponse(status_code=outcome, elapsed_ms=self.elapsed_ms)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture()
def fake_transport() -> FakeTransport:
    return FakeTransport()
