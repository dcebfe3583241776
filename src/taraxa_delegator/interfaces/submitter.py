"""TransactionSubmitter protocol - signs and sends DPOS contract writes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from taraxa_delegator.models.records import SubmissionResult

if TYPE_CHECKING:
    from taraxa_delegator.chain.session import AccountSession


class TransactionSubmitter(Protocol):
    """Submits one contract write at the session's current nonce.

    Implementations never touch the nonce counter; the caller advances the
    session once the submission is accepted.
    """

    async def submit(
        self, session: AccountSession, action: str, validator: str,
    ) -> SubmissionResult:
        """Build, sign, and send ``action`` addressed at ``validator``.

        Raises SubmissionError if the node rejects the transaction.
        """
        ...
