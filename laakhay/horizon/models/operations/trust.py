"""Trustline operations."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, ClassVar

from pydantic import Field, StrictBool, model_validator

from ...core.enums import OperationType
from ..asset import Asset, collect_asset
from ..types import PublicKey
from .detail import OperationDetail


class TrustDetail(OperationDetail):
    """Fields shared by trustline operations."""

    asset: Asset
    trustee: PublicKey
    trustor: PublicKey

    @model_validator(mode="before")
    @classmethod
    def nest_asset(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return collect_asset(data)
        return data


class ChangeTrust(TrustDetail):
    """Creates, updates or removes a trustline. A ``limit`` of 0 removes it."""

    type_code: ClassVar[OperationType] = OperationType.CHANGE_TRUST

    limit: Decimal = Field(..., ge=0)


class AllowTrust(TrustDetail):
    """Issuer authorizes or deauthorizes another account's trustline."""

    type_code: ClassVar[OperationType] = OperationType.ALLOW_TRUST

    authorize: StrictBool
