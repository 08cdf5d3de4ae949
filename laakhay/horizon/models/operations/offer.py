"""Offer management operations."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_validator

from ...core.enums import OperationType
from ..asset import Asset, collect_asset
from .detail import OperationDetail


class Price(BaseModel):
    """Exact price as a fraction of two 32-bit integers."""

    n: StrictInt = Field(..., ge=0)
    d: StrictInt = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)

    @property
    def value(self) -> Decimal:
        return Decimal(self.n) / Decimal(self.d)


class OfferDetail(OperationDetail):
    """Fields shared by every offer operation."""

    amount: Decimal = Field(..., ge=0)
    price: Decimal = Field(..., ge=0)
    price_r: Price | None = None
    buying: Asset
    selling: Asset

    @model_validator(mode="before")
    @classmethod
    def nest_assets(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = collect_asset(data, prefix="buying_", target="buying")
            data = collect_asset(data, prefix="selling_", target="selling")
        return data


class ManageOffer(OfferDetail):
    """Creates, updates or deletes an offer.

    An ``offer_id`` of 0 creates a new offer; an ``amount`` of 0 deletes one.
    """

    type_code: ClassVar[OperationType] = OperationType.MANAGE_OFFER

    offer_id: int = Field(..., ge=0)

    @property
    def is_delete(self) -> bool:
        return self.amount == 0


class CreatePassiveOffer(OfferDetail):
    """Creates an offer that does not take offers at the same price."""

    type_code: ClassVar[OperationType] = OperationType.CREATE_PASSIVE_OFFER
