"""PositionSource protocol - lists reward-bearing positions of an account."""

from __future__ import annotations

from typing import Protocol

from taraxa_delegator.models.positions import DelegationPosition, ValidatorPosition


class PositionSource(Protocol):
    """Discovers delegations and validator commissions held by an account."""

    async def list_delegations(self, address: str) -> list[DelegationPosition]:
        """All delegations of ``address``, in the order the chain returns them."""
        ...

    async def list_validator_positions(self, address: str) -> list[ValidatorPosition]:
        """All validators owned by ``address``, in chain order."""
        ...
