"""Base class for operation payload variants."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from ...core.enums import OperationType


class OperationDetail(BaseModel):
    """Variant-specific payload of an operation record.

    Each subclass mirrors the fields one ``type_i`` value carries. Header
    fields shared by every operation (id, source account, ...) live on
    Operation, not here.
    """

    type_code: ClassVar[OperationType | None] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class UnknownOperation(OperationDetail):
    """An operation whose ``type_i`` this library does not know.

    Keeps the raw discriminator and every raw field so callers can log or
    skip the record instead of failing a whole batch.
    """

    type_i: StrictInt
    type: str | None = None
    fields: dict[str, Any] = Field(default_factory=dict)
