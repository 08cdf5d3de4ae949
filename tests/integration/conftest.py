"""Shared configuration for integration tests.

Every module here hits the live Horizon testnet and is skipped unless
RUN_LAAKHAY_NETWORK_TESTS=1.
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def horizon_debug_logging(caplog):
    """Surface client request logs when a live test fails."""
    caplog.set_level(logging.DEBUG, logger="laakhay.horizon")
