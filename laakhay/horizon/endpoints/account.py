"""Endpoints for accessing accounts and related information."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ..core.endpoint import EndPoint
from ..core.enums import BatchPolicy, Order
from ..models import Account
from ..models.operations import OperationBatch
from ._listing import OperationListing


@dataclass(frozen=True)
class Details(EndPoint[Account]):
    """A single account's details.

    Hand this to the client to request ``/accounts/{id}``.
    """

    id: str

    response: ClassVar[type[Account]] = Account

    def path_segments(self) -> tuple[str, ...]:
        return ("accounts", self.id)


@dataclass(frozen=True)
class Operations(OperationListing, EndPoint[OperationBatch]):
    """Operations that affected one account, ``/accounts/{id}/operations``."""

    id: str
    limit: int | None = None
    order: Order | None = None
    policy: BatchPolicy = BatchPolicy.FAIL_FAST

    response: ClassVar[type[OperationBatch]] = OperationBatch

    def path_segments(self) -> tuple[str, ...]:
        return ("accounts", self.id, "operations")
