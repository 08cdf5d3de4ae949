"""Account resource model."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from .asset import Asset, Flag, collect_asset
from .types import PublicKey, Weight


class Balance(BaseModel):
    """One balance line of an account."""

    asset: Asset
    balance: Decimal = Field(..., ge=0)
    limit: Decimal | None = Field(None, ge=0)
    buying_liabilities: Decimal | None = None
    selling_liabilities: Decimal | None = None
    liquidity_pool_id: str | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def nest_asset(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return collect_asset(data)
        return data

    @model_validator(mode="after")
    def check_pool_id(self) -> Balance:
        if self.asset.is_pool_share and not self.liquidity_pool_id:
            raise ValueError("liquidity_pool_shares balance requires liquidity_pool_id")
        return self


class Signer(BaseModel):
    """A key allowed to sign for an account."""

    key: PublicKey = Field(..., validation_alias=AliasChoices("key", "public_key"))
    weight: Weight
    type: str | None = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Thresholds(BaseModel):
    """Signature weight thresholds of an account."""

    low_threshold: Weight
    med_threshold: Weight
    high_threshold: Weight

    model_config = ConfigDict(frozen=True)


class Account(BaseModel):
    """A ledger account as returned by ``/accounts/{id}``."""

    id: PublicKey
    account_id: PublicKey
    paging_token: str | None = None
    sequence: int = Field(..., ge=0)
    subentry_count: int = Field(0, ge=0)
    home_domain: str | None = None
    inflation_destination: str | None = None
    thresholds: Thresholds
    flags: Flag
    balances: tuple[Balance, ...] = ()
    signers: tuple[Signer, ...] = ()
    data: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    def balance_for(self, asset: Asset) -> Balance | None:
        """Return the balance line holding ``asset``, if the account has one."""
        for line in self.balances:
            if line.asset == asset:
                return line
        return None

    @property
    def native_balance(self) -> Decimal:
        line = self.balance_for(Asset.native())
        return line.balance if line is not None else Decimal("0")

    def signer_weight(self, key: str) -> int | None:
        for signer in self.signers:
            if signer.key == key:
                return signer.weight
        return None
