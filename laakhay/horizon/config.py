"""Horizon deployment constants.

This module centralizes the public base URLs and request limits so the
client and endpoints stay free of hard-coded hosts.
"""

from __future__ import annotations

from .core.enums import Network

# Public Horizon deployments run by the Stellar Development Foundation.
BASE_URLS = {
    Network.PUBLIC: "https://horizon.stellar.org",
    Network.TESTNET: "https://horizon-testnet.stellar.org",
}

# Seconds for one request, connect included.
DEFAULT_TIMEOUT = 30.0

# Horizon rejects list requests with more records than this.
MAX_LIMIT = 200


def get_base_url(network: Network = Network.PUBLIC) -> str:
    """Get the Horizon base URL for a network.

    Examples:
        >>> get_base_url(Network.TESTNET)
        'https://horizon-testnet.stellar.org'
    """
    return BASE_URLS[Network(network)]
