"""Manage data operation."""

from __future__ import annotations

import base64
import binascii
from typing import ClassVar

from pydantic import Field

from ...core.enums import OperationType
from ...core.exceptions import DecodeError
from .detail import OperationDetail


class ManageData(OperationDetail):
    """Sets, modifies or deletes a named data entry on an account.

    ``value`` is the base64 wire value; it is absent when the entry was
    deleted.
    """

    type_code: ClassVar[OperationType] = OperationType.MANAGE_DATA

    name: str = Field(..., min_length=1, max_length=64)
    value: str | None = None

    @property
    def is_delete(self) -> bool:
        return self.value is None

    def decoded_value(self) -> bytes | None:
        """The entry value as raw bytes."""
        if self.value is None:
            return None
        try:
            return base64.b64decode(self.value, validate=True)
        except binascii.Error as e:
            raise DecodeError(
                f"data entry {self.name!r} is not valid base64",
                field="value",
                type_i=int(self.type_code),
            ) from e
