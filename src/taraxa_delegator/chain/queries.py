"""Read-only queries: chain state and DPOS position discovery."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable

import aiohttp
from web3 import AsyncWeb3

from taraxa_delegator.bindings.dpos import dpos_contract
from taraxa_delegator.errors import ChainConnectionError, QueryError
from taraxa_delegator.models.positions import DelegationPosition, ValidatorPosition

log = logging.getLogger(__name__)

_TRANSPORT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError, ConnectionError)


class DposQueries:
    """Read-only calls against the RPC node and the DPOS contract.

    Every failure is raised: transport problems as ChainConnectionError,
    anything else (RPC error, decoding) as QueryError. Nothing is retried.
    """

    def __init__(self, w3: AsyncWeb3, contract_address: str) -> None:
        self._w3 = w3
        self._contract = dpos_contract(w3, contract_address)

    async def _call(self, what: str, awaitable: Awaitable[Any]) -> Any:
        try:
            return await awaitable
        except _TRANSPORT_ERRORS as exc:
            log.error("%s: RPC unreachable: %s", what, exc)
            raise ChainConnectionError(f"RPC unreachable during {what}: {exc}", step=what) from exc
        except Exception as exc:
            log.error("%s failed: %s", what, exc)
            raise QueryError(f"{what} failed: {exc}", step=what) from exc

    # ── Chain state ──────────────────────────────────────────

    async def chain_id(self) -> int:
        return int(await self._call("chain_id", self._w3.eth.chain_id))

    async def block_number(self) -> int:
        return int(await self._call("block_number", self._w3.eth.block_number))

    async def gas_price(self) -> int:
        return int(await self._call("gas_price", self._w3.eth.gas_price))

    async def pending_nonce(self, address: str, block_identifier: str = "pending") -> int:
        return int(await self._call(
            "nonce",
            self._w3.eth.get_transaction_count(_checksum(address), block_identifier),
        ))

    async def balance(self, address: str) -> int:
        return int(await self._call("balance", self._w3.eth.get_balance(_checksum(address))))

    # ── Position discovery ───────────────────────────────────

    async def list_delegations(self, address: str) -> list[DelegationPosition]:
        """Walk getDelegations() batches until the contract reports the end."""
        owner = _checksum(address)
        positions: list[DelegationPosition] = []
        batch = 0
        while True:
            items, end = await self._call(
                "getDelegations",
                self._contract.functions.getDelegations(owner, batch).call(),
            )
            for account, info in items:
                stake, rewards = info[0], info[1]
                positions.append(DelegationPosition(
                    validator=_checksum(account),
                    stake=int(stake),
                    rewards=int(rewards),
                ))
            log.debug("getDelegations batch %d: %d items (end=%s)", batch, len(items), end)
            if end:
                return positions
            batch += 1

    async def list_validator_positions(self, address: str) -> list[ValidatorPosition]:
        """Walk getValidatorsFor() batches until the contract reports the end."""
        owner = _checksum(address)
        positions: list[ValidatorPosition] = []
        batch = 0
        while True:
            items, end = await self._call(
                "getValidatorsFor",
                self._contract.functions.getValidatorsFor(owner, batch).call(),
            )
            for account, info in items:
                # ValidatorBasicInfo: (total_stake, commission_reward, commission, ...)
                positions.append(ValidatorPosition(
                    validator=_checksum(account),
                    total_stake=int(info[0]),
                    commission_reward=int(info[1]),
                ))
            log.debug("getValidatorsFor batch %d: %d items (end=%s)", batch, len(items), end)
            if end:
                return positions
            batch += 1


def _checksum(address: str) -> str:
    return AsyncWeb3.to_checksum_address(address)
