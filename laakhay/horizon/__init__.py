"""Laakhay Horizon - typed client bindings for the Stellar Horizon REST API."""

from . import endpoints
from .client import HorizonClient, raise_for_status
from .config import BASE_URLS, get_base_url
from .core import (
    BatchPolicy,
    DecodeError,
    EndPoint,
    HorizonError,
    MalformedRequest,
    Network,
    NotFoundError,
    OperationType,
    Order,
    ProviderError,
    RateLimitError,
    Request,
    UnknownVariantError,
)
from .models import (
    Account,
    Asset,
    Flag,
    Operation,
    OperationBatch,
    OperationDetail,
    SetOptions,
    UnknownOperation,
    parse_operation,
    parse_operations,
)
from .utils import HTTPClient

__all__ = [
    "HorizonClient",
    "HTTPClient",
    "raise_for_status",
    "endpoints",
    "BASE_URLS",
    "get_base_url",
    # Contract
    "EndPoint",
    "Request",
    # Enums
    "BatchPolicy",
    "Network",
    "OperationType",
    "Order",
    # Resources
    "Account",
    "Asset",
    "Flag",
    "Operation",
    "OperationBatch",
    "OperationDetail",
    "SetOptions",
    "UnknownOperation",
    "parse_operation",
    "parse_operations",
    # Errors
    "HorizonError",
    "MalformedRequest",
    "DecodeError",
    "UnknownVariantError",
    "ProviderError",
    "NotFoundError",
    "RateLimitError",
]
