"""Horizon REST client.

Architecture:
    HorizonClient is the generic executor for endpoint values. It never
    branches on the endpoint kind: each endpoint builds its own request and
    parses its own response, the client only moves bytes and maps HTTP
    error statuses to exceptions.

    endpoint.into_request(base_url) -> HTTPClient.send() -> endpoint.parse()

Design Decisions:
    - No retries: a failed call raises to the immediate caller
    - Problem documents (Horizon's RFC 7807 error bodies) are attached to
      ProviderError when the error body is JSON
"""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from .config import get_base_url
from .core.endpoint import EndPoint
from .core.enums import BatchPolicy, Network, Order
from .core.exceptions import NotFoundError, ProviderError, RateLimitError
from .endpoints import account, operation
from .models import Account, Operation, OperationBatch
from .utils.http import HTTPClient, HTTPResponse

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT")


def _problem(response: HTTPResponse) -> dict[str, Any]:
    try:
        problem = json.loads(response.body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return {}
    return problem if isinstance(problem, dict) else {}


def _retry_after(response: HTTPResponse, default: int = 60) -> int:
    for name, value in response.headers.items():
        if name.lower() == "retry-after":
            try:
                return int(value)
            except ValueError:
                return default
    return default


def raise_for_status(response: HTTPResponse) -> None:
    """Map a non-2xx response to the ProviderError family."""
    if response.ok:
        return

    problem = _problem(response)
    message = problem.get("detail") or problem.get("title") or f"HTTP {response.status}"

    if response.status == 404:
        raise NotFoundError(message, problem=problem)
    if response.status == 429:
        raise RateLimitError(message, retry_after=_retry_after(response), problem=problem)
    raise ProviderError(message, status_code=response.status, problem=problem)


class HorizonClient:
    """Executes endpoints against one Horizon server.

    Example:
        >>> async with HorizonClient(network=Network.TESTNET) as client:
        ...     acct = await client.account("GA5W...")
    """

    def __init__(
        self,
        base_url: str | None = None,
        network: Network = Network.PUBLIC,
        http: HTTPClient | None = None,
    ) -> None:
        self.base_url = base_url or get_base_url(network)
        self._http = http or HTTPClient()

    async def execute(self, endpoint: EndPoint[ResponseT]) -> ResponseT:
        """Send one endpoint and parse its response.

        Raises:
            MalformedRequest: If the endpoint cannot form a request.
            ProviderError: If Horizon answers with a non-2xx status.
            DecodeError: If the body does not match the endpoint's response type.
        """
        request = endpoint.into_request(self.base_url)
        response = await self._http.send(request)

        if not response.ok:
            logger.error(
                "Horizon request failed",
                extra={"url": request.uri, "status": response.status},
            )
            raise_for_status(response)

        logger.debug(
            "Horizon request completed",
            extra={"url": request.uri, "endpoint": type(endpoint).__name__},
        )
        return endpoint.parse(response.body)

    async def account(self, account_id: str) -> Account:
        return await self.execute(account.Details(account_id))

    async def operation(self, operation_id: str) -> Operation:
        return await self.execute(operation.Details(operation_id))

    async def operations(
        self,
        limit: int | None = None,
        order: Order | None = None,
        policy: BatchPolicy = BatchPolicy.FAIL_FAST,
    ) -> OperationBatch:
        return await self.execute(operation.All(limit=limit, order=order, policy=policy))

    async def account_operations(
        self,
        account_id: str,
        limit: int | None = None,
        order: Order | None = None,
        policy: BatchPolicy = BatchPolicy.FAIL_FAST,
    ) -> OperationBatch:
        return await self.execute(
            account.Operations(account_id, limit=limit, order=order, policy=policy)
        )

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> HorizonClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
