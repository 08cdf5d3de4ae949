"""Discriminator-driven parsing of operation records.

Architecture:
    Parsing is two-pass. The ``type_i`` discriminator is read and checked
    first; it selects one OperationDetail subclass from OPERATION_DETAILS and
    the whole record is validated against that class. The shared header
    fields are validated last and wrapped around the detail.

Design Decisions:
    - Unknown discriminators are not errors: they produce an UnknownOperation
      carrying the raw record, so new Horizon operation types do not break
      existing callers
    - A failed record raises DecodeError and returns nothing partial
    - List tolerance is an explicit BatchPolicy argument, never implied
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from ...core.decoding import validate
from ...core.enums import BatchPolicy, OperationType
from ...core.exceptions import DecodeError
from .detail import OperationDetail, UnknownOperation
from .manage_data import ManageData
from .offer import CreatePassiveOffer, ManageOffer
from .operation import Operation
from .payment import AccountMerge, CreateAccount, Inflation, PathPayment, Payment
from .set_options import SetOptions
from .trust import AllowTrust, ChangeTrust

logger = logging.getLogger(__name__)

OPERATION_DETAILS: dict[int, type[OperationDetail]] = {
    int(cls.type_code): cls
    for cls in (
        CreateAccount,
        Payment,
        PathPayment,
        ManageOffer,
        CreatePassiveOffer,
        SetOptions,
        ChangeTrust,
        AllowTrust,
        AccountMerge,
        Inflation,
        ManageData,
    )
}

_HEADER_FIELDS = (
    "type_i",
    "type",
    "id",
    "paging_token",
    "source_account",
    "created_at",
    "transaction_hash",
)


def _read_discriminator(payload: dict[str, Any]) -> int:
    if "type_i" not in payload:
        raise DecodeError("Operation: missing required field 'type_i'", field="type_i")
    type_i = payload["type_i"]
    if isinstance(type_i, bool) or not isinstance(type_i, int):
        raise DecodeError(
            f"Operation: field 'type_i' must be an integer, got {type(type_i).__name__}",
            field="type_i",
        )
    return type_i


def _check_type_name(type_i: int, type_name: Any) -> None:
    operation_type = OperationType(type_i)
    if isinstance(type_name, str) and type_name not in operation_type.wire_names:
        logger.warning(
            "Operation type does not match type_i",
            extra={"type_i": type_i, "type": type_name, "expected": operation_type.wire_name},
        )


def parse_operation(payload: Any) -> Operation:
    """Parse one decoded operation object.

    Args:
        payload: Decoded JSON object of a single operation record.

    Returns:
        Operation whose ``detail`` is the variant selected by ``type_i``, or
        UnknownOperation when the code is not known.

    Raises:
        DecodeError: If ``type_i`` is missing or not an integer, or a field the
            variant requires is missing or invalid.
    """
    if not isinstance(payload, dict):
        raise DecodeError(
            f"Expected a JSON object for Operation, got {type(payload).__name__}"
        )

    type_i = _read_discriminator(payload)
    detail_model = OPERATION_DETAILS.get(type_i)

    if detail_model is None:
        logger.debug("Unknown operation type", extra={"type_i": type_i})
        detail: OperationDetail = UnknownOperation(
            type_i=type_i,
            type=payload.get("type") if isinstance(payload.get("type"), str) else None,
            fields=dict(payload),
        )
    else:
        _check_type_name(type_i, payload.get("type"))
        detail = validate(detail_model, payload, type_i=type_i)

    header = {key: payload[key] for key in _HEADER_FIELDS if key in payload}
    header["detail"] = detail
    return validate(Operation, header, type_i=type_i)


@dataclass(frozen=True)
class OperationBatch:
    """Operations parsed from one list response.

    ``errors`` is only populated under BatchPolicy.SKIP_INVALID; each error
    carries the index of the record it came from.
    """

    records: tuple[Operation, ...] = ()
    errors: tuple[DecodeError, ...] = ()

    def __iter__(self) -> Iterator[Operation]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, index: int) -> Operation:
        return self.records[index]

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def unknown(self) -> tuple[Operation, ...]:
        """Records whose discriminator was not recognized."""
        return tuple(op for op in self.records if not op.is_known)

    def of_type(self, operation_type: OperationType) -> tuple[Operation, ...]:
        return tuple(op for op in self.records if op.type_i == operation_type)


def extract_records(payload: Any) -> list[Any]:
    """Return the record list of a JSON array or a Horizon HAL page."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        embedded = payload.get("_embedded")
        if isinstance(embedded, dict) and isinstance(embedded.get("records"), list):
            return embedded["records"]
        raise DecodeError(
            "Expected a page with '_embedded.records'", field="_embedded.records"
        )
    raise DecodeError(f"Expected a list of records, got {type(payload).__name__}")


def parse_operations(
    payload: Any,
    policy: BatchPolicy = BatchPolicy.FAIL_FAST,
) -> OperationBatch:
    """Parse a list of operation records.

    Args:
        payload: Decoded JSON array, or a HAL page embedding the records.
        policy: FAIL_FAST raises on the first malformed record;
            SKIP_INVALID keeps parsing and reports each bad record.

    Raises:
        DecodeError: If the payload is not a list or page, or (FAIL_FAST) a
            record fails to parse; ``index`` names the record.
    """
    records: list[Operation] = []
    errors: list[DecodeError] = []

    for index, raw in enumerate(extract_records(payload)):
        try:
            records.append(parse_operation(raw))
        except DecodeError as e:
            located = e.at_index(index)
            if policy == BatchPolicy.FAIL_FAST:
                raise located from e
            logger.warning(
                "Skipping malformed operation record",
                extra={"index": index, "field": e.field, "type_i": e.type_i},
            )
            errors.append(located)

    return OperationBatch(records=tuple(records), errors=tuple(errors))
