"""Taraxa DPOS contract bindings."""

from __future__ import annotations

from web3 import AsyncWeb3
from web3.contract import AsyncContract

from taraxa_delegator.bindings.dpos.abi import DPOS_ABI

# Write methods, keyed by the action name used in logs and results
CLAIM_REWARDS = "claimRewards"
CLAIM_COMMISSION_REWARDS = "claimCommissionRewards"
DELEGATE = "delegate"

ACTIONS = {
    "claim_rewards": CLAIM_REWARDS,
    "claim_commission_rewards": CLAIM_COMMISSION_REWARDS,
    "delegate": DELEGATE,
}


def dpos_contract(w3: AsyncWeb3, address: str) -> AsyncContract:
    """Bind the DPOS ABI to ``address`` on an async web3 client."""
    return w3.eth.contract(address=AsyncWeb3.to_checksum_address(address), abi=DPOS_ABI)


__all__ = [
    "DPOS_ABI",
    "ACTIONS",
    "CLAIM_REWARDS",
    "CLAIM_COMMISSION_REWARDS",
    "DELEGATE",
    "dpos_contract",
]
