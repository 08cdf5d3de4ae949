"""Shared behaviour of endpoints that return lists of operations."""

from __future__ import annotations

from typing import Any

from ..config import MAX_LIMIT
from ..core.decoding import load_json
from ..core.enums import BatchPolicy, Order
from ..core.exceptions import MalformedRequest
from ..models.operations import OperationBatch, parse_operations


class OperationListing:
    """Mixin for operation list endpoints.

    Expects ``limit``, ``order`` and ``policy`` fields on the dataclass.
    """

    limit: int | None
    order: Order | None
    policy: BatchPolicy

    def query(self) -> dict[str, str] | None:
        q: dict[str, str] = {}
        if self.limit is not None:
            if isinstance(self.limit, bool) or not isinstance(self.limit, int):
                raise MalformedRequest(f"limit must be an integer, got {self.limit!r}")
            if not 1 <= self.limit <= MAX_LIMIT:
                raise MalformedRequest(f"limit must be between 1 and {MAX_LIMIT}, got {self.limit}")
            q["limit"] = str(self.limit)
        if self.order is not None:
            try:
                q["order"] = Order(self.order).value
            except ValueError as e:
                raise MalformedRequest(f"order must be 'asc' or 'desc', got {self.order!r}") from e
        return q or None

    def parse(self, body: Any) -> OperationBatch:
        return parse_operations(load_json(body), policy=self.policy)
