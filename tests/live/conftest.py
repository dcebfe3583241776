"""Live fixtures: read-only calls against the real Taraxa RPC.

Skipped unless TARAXA_DELEGATOR_LIVE=1. Nothing here signs or sends.
"""

from __future__ import annotations

import os

import pytest

from taraxa_delegator.delegator import RewardDelegator

from tests.conftest import make_test_config

LIVE = os.environ.get("TARAXA_DELEGATOR_LIVE") == "1"
RPC_URL = os.environ.get("TARAXA_DELEGATOR_RPC_URL", "https://rpc.mainnet.taraxa.io")


def pytest_collection_modifyitems(config, items):
    if LIVE:
        return
    skip = pytest.mark.skip(reason="set TARAXA_DELEGATOR_LIVE=1 to run live RPC tests")
    for item in items:
        if "mainnet" in item.keywords:
            item.add_marker(skip)


@pytest.fixture
async def live_delegator():
    """RewardDelegator pointed at the real endpoint; closed after the test."""
    d = RewardDelegator(make_test_config(rpc_url=RPC_URL, request_timeout=15))
    yield d
    await d.close()
