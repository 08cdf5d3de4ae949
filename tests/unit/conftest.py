"""Shared Horizon response fixtures."""

from __future__ import annotations

import pytest

SIGNER = "GA5WBPYA5Y4WAEHXWR2UKO2UO4BUGHUQ74EUPKON2QHV4WRHOIRNKKH2"
ISSUER = "GCEZWKCA5VLDNRLN3RPRJMRZOX3Z6G5CHCGSNFHEYVXM3XOJMDS674JZ"
ACCOUNT_ID = "GBS43BF24ENNS3KPACUZVKK2VYPOZVBQO2CISGZ777RYGOPYC2FT6S3K"
OTHER_ID = "GDGQVOKHW4VEJRU2TETD6DBRKEO5ERCNF353LW5WBFW3JJWQ2BRQ6KDD"


@pytest.fixture
def set_options_json() -> dict:
    return {
        "type_i": 5,
        "signer_key": SIGNER,
        "signer_weight": 1,
        "master_key_weight": 2,
        "low_threshold": 0,
        "med_threshold": 3,
        "high_threshold": 3,
        "home_domain": "stellar.org",
    }


@pytest.fixture
def operation_header() -> dict:
    return {
        "id": "77309415424",
        "paging_token": "77309415424",
        "source_account": ACCOUNT_ID,
        "created_at": "2015-09-30T17:15:54Z",
        "transaction_hash": "3389e9f0f1a65f19736cacf544c2e825313e8447f569233bb8db39aa607c8889",
    }


@pytest.fixture
def operation_records(operation_header) -> dict[str, dict]:
    """One record per known variant, keyed by the ``type`` wire name."""
    records = {
        "create_account": {
            "type_i": 0,
            "type": "create_account",
            "account": OTHER_ID,
            "funder": ACCOUNT_ID,
            "starting_balance": "10000.0000000",
        },
        "payment": {
            "type_i": 1,
            "type": "payment",
            "asset_type": "native",
            "from": ACCOUNT_ID,
            "to": OTHER_ID,
            "amount": "200.0000000",
        },
        "path_payment": {
            "type_i": 2,
            "type": "path_payment",
            "asset_type": "credit_alphanum4",
            "asset_code": "EUR",
            "asset_issuer": ISSUER,
            "from": ACCOUNT_ID,
            "to": OTHER_ID,
            "amount": "10.0000000",
            "source_asset_type": "native",
            "source_max": "100.0000000",
            "source_amount": "95.5000000",
            "path": [
                {"asset_type": "credit_alphanum4", "asset_code": "USD", "asset_issuer": ISSUER}
            ],
        },
        "manage_offer": {
            "type_i": 3,
            "type": "manage_offer",
            "offer_id": 0,
            "amount": "100.0000000",
            "price": "0.5000000",
            "price_r": {"n": 1, "d": 2},
            "buying_asset_type": "credit_alphanum4",
            "buying_asset_code": "USD",
            "buying_asset_issuer": ISSUER,
            "selling_asset_type": "native",
        },
        "create_passive_offer": {
            "type_i": 4,
            "type": "create_passive_offer",
            "amount": "11.2782700",
            "price": "1.0000000",
            "buying_asset_type": "native",
            "selling_asset_type": "credit_alphanum12",
            "selling_asset_code": "LONGASSET",
            "selling_asset_issuer": ISSUER,
        },
        "set_options": {
            "type_i": 5,
            "type": "set_options",
            "signer_key": SIGNER,
            "signer_weight": 1,
            "master_key_weight": 2,
            "low_threshold": 0,
            "med_threshold": 3,
            "high_threshold": 3,
            "home_domain": "stellar.org",
            "set_flags": {"auth_required": True, "auth_revocable": False},
        },
        "change_trust": {
            "type_i": 6,
            "type": "change_trust",
            "asset_type": "credit_alphanum4",
            "asset_code": "USD",
            "asset_issuer": ISSUER,
            "limit": "922337203685.4775807",
            "trustee": ISSUER,
            "trustor": ACCOUNT_ID,
        },
        "allow_trust": {
            "type_i": 7,
            "type": "allow_trust",
            "asset_type": "credit_alphanum4",
            "asset_code": "USD",
            "asset_issuer": ISSUER,
            "trustee": ISSUER,
            "trustor": ACCOUNT_ID,
            "authorize": True,
        },
        "account_merge": {
            "type_i": 8,
            "type": "account_merge",
            "account": ACCOUNT_ID,
            "into": OTHER_ID,
        },
        "inflation": {"type_i": 9, "type": "inflation"},
        "manage_data": {
            "type_i": 10,
            "type": "manage_data",
            "name": "config.memo_required",
            "value": "MQ==",
        },
    }
    return {name: {**operation_header, **record} for name, record in records.items()}


@pytest.fixture
def account_json() -> dict:
    return {
        "id": ACCOUNT_ID,
        "paging_token": "",
        "account_id": ACCOUNT_ID,
        "sequence": "3298534883330",
        "subentry_count": 1,
        "thresholds": {"low_threshold": 0, "med_threshold": 0, "high_threshold": 0},
        "flags": {"auth_required": False, "auth_revocable": False},
        "balances": [
            {
                "balance": "50.0000000",
                "limit": "922337203685.4775807",
                "asset_type": "credit_alphanum4",
                "asset_code": "USD",
                "asset_issuer": ISSUER,
            },
            {"balance": "9999.9999900", "asset_type": "native"},
        ],
        "signers": [{"public_key": ACCOUNT_ID, "weight": 1}],
        "data": {"config.memo_required": "MQ=="},
    }


@pytest.fixture
def pool_share_balance_json() -> dict:
    return {
        "balance": "12.5000000",
        "limit": "922337203685.4775807",
        "asset_type": "liquidity_pool_shares",
        "liquidity_pool_id": "dd7b1ab831c273310ddbec6f97870aa83c2fbd78ce22aded37ecbf4f3380fac7",
    }
