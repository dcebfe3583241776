"""Delegation step - re-delegates the settled whole-unit balance."""

from __future__ import annotations

import logging

from taraxa_delegator.chain.session import AccountSession
from taraxa_delegator.interfaces.chain import ChainReader
from taraxa_delegator.interfaces.submitter import TransactionSubmitter
from taraxa_delegator.models.records import SubmissionResult
from taraxa_delegator.units import format_amount, to_minimal_unit, to_whole_units

log = logging.getLogger(__name__)


class DelegationStep:
    """Delegates ``floor(balance)`` whole units to the target validator.

    The fractional remainder stays in the account to pay future gas. The
    step only fires when the whole-unit count is strictly greater than
    ``min_whole_units``.
    """

    def __init__(
        self,
        chain: ChainReader,
        submitter: TransactionSubmitter,
        target_validator: str,
        min_whole_units: int = 1,
        decimals: int = 18,
    ) -> None:
        self._chain = chain
        self._submitter = submitter
        self._target = target_validator
        self._min_whole_units = min_whole_units
        self._decimals = decimals

    async def run(self, session: AccountSession) -> tuple[int, SubmissionResult | None]:
        """Returns the settled balance and the delegation, if one was sent."""
        balance = await self._chain.balance(session.address)
        whole = to_whole_units(balance, self._decimals)
        log.info("Current balance: %s", format_amount(balance, scale=self._decimals))

        if whole <= self._min_whole_units:
            log.info(
                "Balance holds %d whole units (need more than %d); nothing to delegate",
                whole, self._min_whole_units,
            )
            return balance, None

        session.value = to_minimal_unit(whole, self._decimals)
        log.info("Delegating %d whole units to %s", whole, self._target)
        result = await self._submitter.submit(session, "delegate", self._target)
        session.advance()
        return balance, result
