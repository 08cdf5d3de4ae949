"""Core components."""

from .decoding import load_json, validate
from .endpoint import EndPoint
from .enums import BatchPolicy, Network, OperationType, Order
from .exceptions import (
    DecodeError,
    HorizonError,
    MalformedRequest,
    NotFoundError,
    ProviderError,
    RateLimitError,
    UnknownVariantError,
)
from .request import Request, build_url, encode_path

__all__ = [
    "EndPoint",
    "Request",
    "build_url",
    "encode_path",
    "load_json",
    "validate",
    # Enums
    "BatchPolicy",
    "Network",
    "OperationType",
    "Order",
    # Errors
    "HorizonError",
    "MalformedRequest",
    "DecodeError",
    "UnknownVariantError",
    "ProviderError",
    "NotFoundError",
    "RateLimitError",
]
