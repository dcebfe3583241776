"""Reward-bearing positions discovered on the DPOS contract."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DelegationPosition:
    """Stake delegated by the account to a validator."""

    validator: str
    stake: int  # minimal units
    rewards: int  # minimal units


@dataclass(frozen=True)
class ValidatorPosition:
    """A validator owned by the account, with its uncollected commission."""

    validator: str
    total_stake: int  # minimal units
    commission_reward: int  # minimal units
