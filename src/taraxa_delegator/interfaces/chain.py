"""ChainReader protocol - account-level reads against the RPC endpoint."""

from __future__ import annotations

from typing import Protocol


class ChainReader(Protocol):
    """Reads chain and account state needed around the claim sequence."""

    async def chain_id(self) -> int:
        ...

    async def block_number(self) -> int:
        ...

    async def pending_nonce(self, address: str, block_identifier: str = "pending") -> int:
        """Transaction count for ``address`` as of ``block_identifier``."""
        ...

    async def balance(self, address: str) -> int:
        """Native balance in minimal units."""
        ...

    async def gas_price(self) -> int:
        """Node-suggested gas price in minimal units."""
        ...
