"""Synthetic position and session factories for testing."""

from __future__ import annotations

from eth_account import Account

from taraxa_delegator.chain.session import AccountSession
from taraxa_delegator.models.positions import DelegationPosition, ValidatorPosition
from taraxa_delegator.units import UNIT

TEST_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"


def make_delegation(
    validator: str = "0x1111111111111111111111111111111111111111",
    stake: int = 1_000 * UNIT,
    rewards: int = 3 * UNIT // 2,
) -> DelegationPosition:
    return DelegationPosition(validator=validator, stake=stake, rewards=rewards)


def make_validator(
    validator: str = "0x3333333333333333333333333333333333333333",
    total_stake: int = 500_000 * UNIT,
    commission_reward: int = 42 * UNIT,
) -> ValidatorPosition:
    return ValidatorPosition(
        validator=validator,
        total_stake=total_stake,
        commission_reward=commission_reward,
    )


def make_session(
    nonce: int = 5,
    chain_id: int = 841,
    gas_price: int = 1_000_000_000,
    gas_limit: int = 300_000,
) -> AccountSession:
    return AccountSession(
        account=Account.from_key(TEST_KEY),
        chain_id=chain_id,
        nonce=nonce,
        gas_price=gas_price,
        gas_limit=gas_limit,
    )
