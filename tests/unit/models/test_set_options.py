"""Unit tests for the set options operation variant."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from laakhay.horizon.core import DecodeError, OperationType
from laakhay.horizon.models import Flag, SetOptions, parse_operation


def test_parses_set_options_without_flags(set_options_json):
    """Absent flags stay absent; every accessor returns the wire value."""
    op = parse_operation(set_options_json)

    assert op.is_set_options
    assert op.type_i == 5
    assert op.operation_type == OperationType.SET_OPTIONS
    assert isinstance(op.detail, SetOptions)

    detail = op.detail
    assert detail.signer_key == "GA5WBPYA5Y4WAEHXWR2UKO2UO4BUGHUQ74EUPKON2QHV4WRHOIRNKKH2"
    assert detail.signer_weight == 1
    assert detail.master_key_weight == 2
    assert detail.low_threshold == 0
    assert detail.med_threshold == 3
    assert detail.high_threshold == 3
    assert detail.home_domain == "stellar.org"
    assert detail.set_flags is None
    assert detail.clear_flags is None


def test_parses_set_flags_object(set_options_json):
    set_options_json["set_flags"] = {"auth_required": True, "auth_revocable": False}

    detail = parse_operation(set_options_json).detail

    assert detail.set_flags == Flag(auth_required=True, auth_revocable=False)
    assert detail.clear_flags is None


def test_flags_with_no_bits_are_not_absent(set_options_json):
    set_options_json["clear_flags"] = {"auth_required": False, "auth_revocable": False}

    detail = parse_operation(set_options_json).detail

    assert detail.clear_flags is not None
    assert detail.clear_flags.bits == 0


@pytest.mark.parametrize(
    "wire,expected",
    [
        (1, Flag(auth_required=True, auth_revocable=False)),
        (3, Flag(auth_required=True, auth_revocable=True)),
        ([2], Flag(auth_required=False, auth_revocable=True)),
        ([1, 2], Flag(auth_required=True, auth_revocable=True)),
        ([4], Flag(auth_required=False, auth_revocable=False, auth_immutable=True)),
        (
            [8],
            Flag(auth_required=False, auth_revocable=False, auth_clawback_enabled=True),
        ),
        (
            0xF,
            Flag(
                auth_required=True,
                auth_revocable=True,
                auth_immutable=True,
                auth_clawback_enabled=True,
            ),
        ),
    ],
)
def test_parses_flag_bitmask_forms(set_options_json, wire, expected):
    set_options_json["set_flags"] = wire
    assert parse_operation(set_options_json).detail.set_flags == expected


def test_unknown_flag_bits_fail(set_options_json):
    set_options_json["set_flags"] = 0x10

    with pytest.raises(DecodeError) as exc:
        parse_operation(set_options_json)

    assert exc.value.field.startswith("set_flags")


def test_missing_required_field_names_field(set_options_json):
    del set_options_json["home_domain"]

    with pytest.raises(DecodeError) as exc:
        parse_operation(set_options_json)

    assert exc.value.field == "home_domain"
    assert exc.value.type_i == 5
    assert "home_domain" in str(exc.value)


@pytest.mark.parametrize(
    "field,value",
    [
        ("signer_weight", 256),
        ("master_key_weight", -1),
        ("high_threshold", 2**32),
        ("signer_weight", "1"),
        ("low_threshold", 1.5),
    ],
)
def test_out_of_range_or_mistyped_numbers_fail(set_options_json, field, value):
    set_options_json[field] = value

    with pytest.raises(DecodeError) as exc:
        parse_operation(set_options_json)

    assert exc.value.field == field


def test_threshold_accepts_uint32_max(set_options_json):
    set_options_json["high_threshold"] = 2**32 - 1
    assert parse_operation(set_options_json).detail.high_threshold == 2**32 - 1


def test_detail_is_read_only(set_options_json):
    detail = parse_operation(set_options_json).detail

    with pytest.raises(ValidationError):
        detail.signer_weight = 5
