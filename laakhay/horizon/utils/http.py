"""HTTP client helper."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

import aiohttp

from ..config import DEFAULT_TIMEOUT
from ..core.request import Request

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HTTPResponse:
    """Raw response handed back to the caller for decoding."""

    status: int
    body: bytes
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def send(self, request: Request) -> HTTPResponse:
        """Send a request and read the whole body.

        Non-2xx statuses are returned, not raised; mapping them to errors is
        the caller's concern.
        """
        logger.debug("Sending request", extra={"method": request.method, "url": request.uri})
        async with self.session.request(
            request.method,
            request.url,
            data=request.body,
            headers=request.header_dict,
        ) as response:
            body = await response.read()
            return HTTPResponse(
                status=response.status,
                body=body,
                headers=dict(response.headers),
            )

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "HTTPClient":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
