"""Shared fixtures for taraxa_delegator tests."""

from __future__ import annotations

import pytest
from pytest_metadata.plugin import metadata_key

from taraxa_delegator.delegator import RewardDelegator
from taraxa_delegator.models.config import (
    DEFAULT_TARGET_VALIDATOR,
    DPOS_CONTRACT_ADDRESS,
    DelegatorConfig,
)

from tests.mocks import MockChain, MockSubmitter

# Well-known development key; never holds funds on mainnet
TEST_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
TEST_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

VALIDATOR_A = "0x1111111111111111111111111111111111111111"
VALIDATOR_B = "0x2222222222222222222222222222222222222222"
VALIDATOR_C = "0x3333333333333333333333333333333333333333"

TARGET = DEFAULT_TARGET_VALIDATOR
RPC_URL = "https://rpc.mainnet.taraxa.io"
EXPLORER_BASE = "https://mainnet.explorer.taraxa.io"


def explorer_link(kind: str, id: str, label: str | None = None) -> str:
    """Build an HTML anchor to the Taraxa explorer for the report."""
    url = f"{EXPLORER_BASE}/{kind}/{id}"
    text = label or f"{id[:8]}...{id[-4:]}"
    return f'<a href="{url}" target="_blank">{text}</a>'


# ── Report metadata & explorer links ─────────────────────────────


def pytest_configure(config):
    """Add network info to the HTML report Environment table."""
    meta = config.stash.setdefault(metadata_key, {})
    meta["Network"] = "Taraxa Mainnet"
    meta["DPOS Contract"] = DPOS_CONTRACT_ADDRESS
    meta["Target Validator"] = TARGET


def pytest_html_results_summary(prefix, summary, postfix):
    """Inject clickable explorer links into the report summary."""
    prefix.append(
        '<div style="margin:8px 0;padding:10px;background:#f8f9fa;border:1px solid #dee2e6;'
        'border-radius:4px;font-family:monospace;font-size:13px;">'
        "<strong>Taraxa Explorer Links</strong><br/>"
        f'DPOS Contract: {explorer_link("address", DPOS_CONTRACT_ADDRESS, DPOS_CONTRACT_ADDRESS)}<br/>'
        f'Target Validator: {explorer_link("address", TARGET, TARGET)}'
        "</div>"
    )


def make_test_config(**overrides) -> DelegatorConfig:
    """Build a DelegatorConfig suitable for testing."""
    defaults = dict(
        private_key=TEST_KEY,
        rpc_url=RPC_URL,
        dpos_contract=DPOS_CONTRACT_ADDRESS,
        request_timeout=5,
        gas_limit=300_000,
        target_validator=TARGET,
        min_delegation_whole_units=1,
        decimals=18,
        poll_interval=0.001,
        settlement_timeout=None,
        settlement_block_tag="pending",
    )
    defaults.update(overrides)
    return DelegatorConfig(**defaults)


@pytest.fixture
def test_config():
    """Default DelegatorConfig for tests."""
    return make_test_config()


@pytest.fixture
def mock_chain():
    return MockChain(start_nonce=5)


@pytest.fixture
def mock_submitter(mock_chain):
    return MockSubmitter(chain=mock_chain)


@pytest.fixture
def delegator(test_config, mock_chain, mock_submitter):
    """RewardDelegator with the chain-facing components mocked."""
    d = RewardDelegator(test_config)
    d.queries = mock_chain
    d.submitter = mock_submitter
    return d
