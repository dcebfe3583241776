"""Claim orchestrator - one nonce-ordered claim per discovered position."""

from __future__ import annotations

import logging
from typing import Sequence

from taraxa_delegator.chain.session import AccountSession
from taraxa_delegator.interfaces.submitter import TransactionSubmitter
from taraxa_delegator.models.positions import DelegationPosition, ValidatorPosition
from taraxa_delegator.models.records import SubmissionResult

log = logging.getLogger(__name__)


class ClaimOrchestrator:
    """Submits every claim back to back without waiting for confirmation.

    Delegation rewards go first, then validator commissions, each in the
    order discovery returned them. The first rejected submission aborts the
    whole sequence: claims already sent stay sent, and nothing after the
    failure is attempted.
    """

    def __init__(self, submitter: TransactionSubmitter) -> None:
        self._submitter = submitter

    async def claim_all(
        self,
        session: AccountSession,
        delegations: Sequence[DelegationPosition],
        validators: Sequence[ValidatorPosition],
    ) -> list[SubmissionResult]:
        first_nonce = session.next_nonce()
        results: list[SubmissionResult] = []

        for delegation in delegations:
            results.append(await self._claim(session, "claim_rewards", delegation.validator))
        for validator in validators:
            results.append(
                await self._claim(session, "claim_commission_rewards", validator.validator)
            )

        if results:
            log.info(
                "Submitted %d claims at nonces %d..%d",
                len(results), first_nonce, session.next_nonce() - 1,
            )
        else:
            log.info("No positions to claim")
        return results

    async def _claim(
        self, session: AccountSession, action: str, validator: str,
    ) -> SubmissionResult:
        result = await self._submitter.submit(session, action, validator)
        session.advance()
        return result
