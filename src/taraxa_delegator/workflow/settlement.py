"""Settlement barrier - waits until the chain has caught up with our nonce."""

from __future__ import annotations

import asyncio
import logging

from taraxa_delegator.errors import DelegatorError, SettlementTimeoutError
from taraxa_delegator.interfaces.chain import ChainReader

log = logging.getLogger(__name__)


class SettlementBarrier:
    """Polls the account nonce at a fixed interval until it reaches a target.

    Only an exact match releases the barrier. A failed poll is logged and
    polling continues; pass ``timeout`` to bound the wait.
    """

    def __init__(
        self,
        chain: ChainReader,
        poll_interval: float = 0.5,
        block_identifier: str = "pending",
    ) -> None:
        self._chain = chain
        self._poll_interval = poll_interval
        self._block_identifier = block_identifier
        self._last_seen: int | None = None
        self.polls = 0

    async def await_settlement(
        self,
        address: str,
        expected_nonce: int,
        timeout: float | None = None,
    ) -> int:
        """Block until the account nonce equals ``expected_nonce``.

        Raises SettlementTimeoutError if ``timeout`` seconds pass first.
        """
        log.info("Waiting for nonce %d to settle", expected_nonce)
        self._last_seen = None
        self.polls = 0

        if timeout is None:
            return await self._poll(address, expected_nonce)

        try:
            return await asyncio.wait_for(self._poll(address, expected_nonce), timeout)
        except asyncio.TimeoutError as exc:
            log.error(
                "Settlement timed out after %.1fs (expected nonce %d, last seen %s)",
                timeout, expected_nonce, self._last_seen,
            )
            raise SettlementTimeoutError(
                f"nonce {expected_nonce} not settled within {timeout}s "
                f"(last seen {self._last_seen})",
                expected_nonce=expected_nonce,
                last_seen=self._last_seen,
            ) from exc

    async def _poll(self, address: str, expected_nonce: int) -> int:
        while True:
            self.polls += 1
            try:
                nonce = await self._chain.pending_nonce(address, self._block_identifier)
            except DelegatorError as exc:
                log.warning("Nonce poll failed: %s", exc)
            else:
                self._last_seen = nonce
                if nonce == expected_nonce:
                    log.info("All transactions settled (nonce %d)", nonce)
                    return nonce
                log.debug("Nonce %d, waiting for %d", nonce, expected_nonce)
            await asyncio.sleep(self._poll_interval)
