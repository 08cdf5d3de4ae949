"""Endpoints for accessing operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from ..core.decoding import load_json
from ..core.endpoint import EndPoint
from ..core.enums import BatchPolicy, Order
from ..models.operations import Operation, OperationBatch, parse_operation
from ._listing import OperationListing


@dataclass(frozen=True)
class Details(EndPoint[Operation]):
    """A single operation, ``/operations/{id}``."""

    id: str

    response: ClassVar[type[Operation]] = Operation

    def path_segments(self) -> tuple[str, ...]:
        return ("operations", self.id)

    def parse(self, body: Any) -> Operation:
        return parse_operation(load_json(body))


@dataclass(frozen=True)
class All(OperationListing, EndPoint[OperationBatch]):
    """All operations on the ledger, ``/operations``."""

    limit: int | None = None
    order: Order | None = None
    policy: BatchPolicy = BatchPolicy.FAIL_FAST

    response: ClassVar[type[OperationBatch]] = OperationBatch

    def path_segments(self) -> tuple[str, ...]:
        return ("operations",)
