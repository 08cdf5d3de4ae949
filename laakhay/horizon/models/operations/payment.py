"""Operations that move lumens or issued assets between accounts."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, ClassVar

from pydantic import Field, model_validator

from ...core.enums import OperationType
from ..asset import Asset, collect_asset
from ..types import PublicKey
from .detail import OperationDetail


class CreateAccount(OperationDetail):
    """Creates and funds a new account."""

    type_code: ClassVar[OperationType] = OperationType.CREATE_ACCOUNT

    account: PublicKey
    funder: PublicKey
    starting_balance: Decimal = Field(..., ge=0)


class Payment(OperationDetail):
    """Sends an amount of one asset to a destination account."""

    type_code: ClassVar[OperationType] = OperationType.PAYMENT

    from_account: PublicKey = Field(..., validation_alias="from")
    to: PublicKey
    asset: Asset
    amount: Decimal = Field(..., ge=0)

    @model_validator(mode="before")
    @classmethod
    def nest_asset(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return collect_asset(data)
        return data


class PathPayment(OperationDetail):
    """Sends one asset and delivers another, converting along ``path``.

    ``source_amount`` is only reported once the operation has been applied.
    """

    type_code: ClassVar[OperationType] = OperationType.PATH_PAYMENT

    from_account: PublicKey = Field(..., validation_alias="from")
    to: PublicKey
    asset: Asset
    amount: Decimal = Field(..., ge=0)
    source_asset: Asset
    source_max: Decimal = Field(..., ge=0)
    source_amount: Decimal | None = None
    path: tuple[Asset, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def nest_assets(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = collect_asset(data, prefix="source_", target="source_asset")
            data = collect_asset(data)
        return data

    @property
    def hops(self) -> int:
        return len(self.path)


class AccountMerge(OperationDetail):
    """Removes ``account`` and transfers its lumens to ``into``."""

    type_code: ClassVar[OperationType] = OperationType.ACCOUNT_MERGE

    account: PublicKey
    into: PublicKey


class Inflation(OperationDetail):
    """Runs the weekly inflation process. Carries no fields."""

    type_code: ClassVar[OperationType] = OperationType.INFLATION
