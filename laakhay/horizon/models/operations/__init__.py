"""Operation resource family."""

from .detail import OperationDetail, UnknownOperation
from .manage_data import ManageData
from .offer import CreatePassiveOffer, ManageOffer, OfferDetail, Price
from .operation import Operation
from .parsing import (
    OPERATION_DETAILS,
    OperationBatch,
    extract_records,
    parse_operation,
    parse_operations,
)
from .payment import AccountMerge, CreateAccount, Inflation, PathPayment, Payment
from .set_options import SetOptions
from .trust import AllowTrust, ChangeTrust, TrustDetail

__all__ = [
    "Operation",
    "OperationDetail",
    "OperationBatch",
    "OPERATION_DETAILS",
    "parse_operation",
    "parse_operations",
    "extract_records",
    # Variants
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
    "SetOptions",
    "UnknownOperation",
    # Shared shapes
    "OfferDetail",
    "Price",
    "TrustDetail",
]
