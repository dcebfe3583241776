"""DPOS transaction submitter - builds, signs locally, and sends raw transactions."""

from __future__ import annotations

import asyncio
import logging

import aiohttp
from web3 import AsyncWeb3

from taraxa_delegator.bindings.dpos import ACTIONS, dpos_contract
from taraxa_delegator.chain.session import AccountSession
from taraxa_delegator.errors import SubmissionError
from taraxa_delegator.models.records import SubmissionResult

log = logging.getLogger(__name__)

_TRANSPORT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError, ConnectionError)

# Known node error substrings, lowercased
_ERROR_PATTERNS = (
    ("insufficient funds", "insufficient_funds"),
    ("nonce too low", "nonce_too_low"),
    ("already known", "nonce_conflict"),
    ("replacement transaction underpriced", "nonce_conflict"),
    ("nonce too high", "nonce_conflict"),
    ("execution reverted", "reverted"),
    ("revert", "reverted"),
)


def _classify_error(exc: Exception) -> str:
    """Try to extract a meaningful error classification from a node error."""
    if isinstance(exc, _TRANSPORT_ERRORS):
        return "rpc_unreachable"
    msg = str(exc).lower()
    for pattern, reason in _ERROR_PATTERNS:
        if pattern in msg:
            return reason
    return "unknown"


class DposSubmitter:
    """Submits claimRewards / claimCommissionRewards / delegate transactions.

    Gas limit, gas price, chain id, nonce and value all come from the
    session, so nothing here queries the chain before sending. The session
    is not advanced here; the caller does that once ``submit`` returns.
    """

    def __init__(self, w3: AsyncWeb3, contract_address: str) -> None:
        self._w3 = w3
        self._contract = dpos_contract(w3, contract_address)

    async def submit(
        self, session: AccountSession, action: str, validator: str,
    ) -> SubmissionResult:
        """Build, sign, and send one contract write at the session's nonce.

        Raises SubmissionError on any failure; the run must not continue
        since the local nonce no longer matches what the node accepted.
        """
        method = ACTIONS[action]
        target = validator
        nonce = session.next_nonce()
        value = session.value

        log.info("Submitting %s(%s) at nonce %d", method, validator, nonce)

        try:
            target = AsyncWeb3.to_checksum_address(validator)
            fn = getattr(self._contract.functions, method)(target)
            tx = await fn.build_transaction(session.transaction_params())
            signed = session.account.sign_transaction(tx)
            raw_hash = await self._w3.eth.send_raw_transaction(signed.raw_transaction)
        except Exception as exc:
            reason = _classify_error(exc)
            log.error("%s(%s) at nonce %d rejected: %s (%s)", method, target, nonce, reason, exc)
            raise SubmissionError(
                f"{method}({target}) at nonce {nonce} rejected: {reason}: {exc}",
                action=action,
                validator=target,
                nonce=nonce,
                reason=reason,
            ) from exc

        tx_hash = AsyncWeb3.to_hex(raw_hash)
        log.info("%s accepted at nonce %d (tx=%s)", method, nonce, tx_hash[:18])
        return SubmissionResult(
            action=action,
            validator=target,
            nonce=nonce,
            value=value,
            tx_hash=tx_hash,
        )
