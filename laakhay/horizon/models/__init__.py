"""Resource models parsed from Horizon responses.

Architecture:
    All resources are Pydantic v2 models with frozen=True: a resource is a
    snapshot of one response, not a live view, and no field can be set after
    construction.

Design Decisions:
    - Decimal for amounts, balances and prices (Horizon sends strings)
    - Strict, range-checked ints for weights and thresholds
    - Optional fields are None when absent, never a sentinel value

Model Categories:
    - Leaf resources: Account, Balance, Signer, Thresholds, Asset, Flag
    - Operation family: Operation with one OperationDetail per ``type_i``
"""

from .account import Account, Balance, Signer, Thresholds
from .asset import (
    AUTH_CLAWBACK_ENABLED_FLAG,
    AUTH_IMMUTABLE_FLAG,
    AUTH_REQUIRED_FLAG,
    AUTH_REVOCABLE_FLAG,
    Asset,
    Flag,
)
from .operations import (
    OPERATION_DETAILS,
    AccountMerge,
    AllowTrust,
    ChangeTrust,
    CreateAccount,
    CreatePassiveOffer,
    Inflation,
    ManageData,
    ManageOffer,
    Operation,
    OperationBatch,
    OperationDetail,
    PathPayment,
    Payment,
    Price,
    SetOptions,
    UnknownOperation,
    parse_operation,
    parse_operations,
)

__all__ = [
    "Account",
    "Asset",
    "AUTH_CLAWBACK_ENABLED_FLAG",
    "AUTH_IMMUTABLE_FLAG",
    "AUTH_REQUIRED_FLAG",
    "AUTH_REVOCABLE_FLAG",
    "Balance",
    "Flag",
    "Signer",
    "Thresholds",
    "Operation",
    "OperationBatch",
    "OperationDetail",
    "OPERATION_DETAILS",
    "parse_operation",
    "parse_operations",
    "AccountMerge",
    "AllowTrust",
    "ChangeTrust",
    "CreateAccount",
    "CreatePassiveOffer",
    "Inflation",
    "ManageData",
    "ManageOffer",
    "PathPayment",
    "Payment",
    "Price",
    "SetOptions",
    "UnknownOperation",
]
