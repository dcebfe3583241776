"""Configuration models for the delegator."""

from __future__ import annotations

from dataclasses import dataclass

DPOS_CONTRACT_ADDRESS = "0x00000000000000000000000000000000000000FE"
DEFAULT_TARGET_VALIDATOR = "0xe50b5452B2E8435404DBe06E6a05410C47B7583D"


@dataclass
class DelegatorConfig:
    """Complete delegator configuration."""

    # Account
    private_key: str = ""  # loaded from env var TARAXA_DELEGATOR_PRIVATE_KEY

    # Chain
    rpc_url: str = "https://rpc.mainnet.taraxa.io"
    dpos_contract: str = DPOS_CONTRACT_ADDRESS
    request_timeout: int = 30  # seconds
    gas_limit: int = 300_000  # in units

    # Delegation
    target_validator: str = DEFAULT_TARGET_VALIDATOR
    min_delegation_whole_units: int = 1  # delegate only when strictly above
    decimals: int = 18

    # Settlement
    poll_interval: float = 0.5  # seconds
    settlement_timeout: float | None = None  # None waits forever
    settlement_block_tag: str = "pending"

    # Logging
    log_level: str = "info"
