"""Horizon endpoints.

Each endpoint is an immutable value: build it with its parameters, then hand
it to HorizonClient.execute() or call into_request() and parse() yourself.

    >>> from laakhay.horizon.endpoints import account
    >>> account.Details("GA5W...").into_request("https://horizon.stellar.org").uri
    'https://horizon.stellar.org/accounts/GA5W...'
"""

from . import account, operation

__all__ = ["account", "operation"]
