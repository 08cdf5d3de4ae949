"""Unit tests for list parsing and batch policies."""

from __future__ import annotations

import logging

import pytest

from laakhay.horizon.core import BatchPolicy, DecodeError, OperationType
from laakhay.horizon.models import OperationBatch, parse_operations


@pytest.fixture
def mixed_records(operation_records):
    bad = dict(operation_records["payment"])
    del bad["amount"]
    return [
        operation_records["create_account"],
        bad,
        operation_records["set_options"],
        {"type_i": 9999, "type": "bump_sequence"},
    ]


class TestFailFast:
    """Test the default fail-fast policy."""

    def test_raises_with_index(self, mixed_records):
        with pytest.raises(DecodeError) as exc:
            parse_operations(mixed_records)

        assert exc.value.index == 1
        assert exc.value.field == "amount"
        assert exc.value.type_i == 1
        assert str(exc.value).startswith("record 1:")

    def test_all_valid(self, operation_records):
        batch = parse_operations(list(operation_records.values()))

        assert len(batch) == len(operation_records)
        assert batch.ok


class TestSkipInvalid:
    """Test the list-tolerant policy."""

    def test_keeps_good_records(self, mixed_records):
        batch = parse_operations(mixed_records, policy=BatchPolicy.SKIP_INVALID)

        assert len(batch) == 3
        assert [op.type_i for op in batch] == [0, 5, 9999]
        assert not batch.ok

    def test_reports_each_bad_record(self, mixed_records):
        batch = parse_operations(mixed_records, policy=BatchPolicy.SKIP_INVALID)

        assert len(batch.errors) == 1
        assert batch.errors[0].index == 1
        assert batch.errors[0].field == "amount"

    def test_logs_skipped_records(self, mixed_records, caplog):
        with caplog.at_level(logging.WARNING):
            parse_operations(mixed_records, policy=BatchPolicy.SKIP_INVALID)

        assert "Skipping malformed operation record" in caplog.text

    def test_bad_record_does_not_affect_siblings(self, mixed_records, operation_records):
        batch = parse_operations(mixed_records, policy=BatchPolicy.SKIP_INVALID)

        assert batch[1].detail.signer_weight == operation_records["set_options"]["signer_weight"]


class TestBatchAccessors:
    """Test OperationBatch helpers."""

    def test_unknown_and_of_type(self, mixed_records):
        batch = parse_operations(mixed_records, policy=BatchPolicy.SKIP_INVALID)

        assert [op.type_i for op in batch.unknown] == [9999]
        assert len(batch.of_type(OperationType.SET_OPTIONS)) == 1
        assert batch.of_type(OperationType.PAYMENT) == ()

    def test_empty_batch(self):
        batch = parse_operations([])
        assert batch == OperationBatch()
        assert batch.ok


class TestPayloadShapes:
    """Test accepted list containers."""

    def test_hal_page(self, operation_records):
        page = {
            "_links": {"self": {"href": "https://horizon.stellar.org/operations"}},
            "_embedded": {"records": [operation_records["inflation"]]},
        }

        batch = parse_operations(page)

        assert len(batch) == 1
        assert batch[0].is_inflation

    def test_page_without_records(self):
        with pytest.raises(DecodeError) as exc:
            parse_operations({"_embedded": {}})
        assert exc.value.field == "_embedded.records"

    def test_not_a_list(self):
        with pytest.raises(DecodeError):
            parse_operations("records")
