"""Operation results produced during a single run. Nothing here is persisted."""

from __future__ import annotations

from dataclasses import dataclass, field

from taraxa_delegator.models.positions import DelegationPosition, ValidatorPosition


@dataclass
class SubmissionResult:
    """A transaction accepted by the node."""

    action: str  # "claim_rewards", "claim_commission_rewards", "delegate"
    validator: str
    nonce: int
    value: int = 0  # minimal units sent along
    tx_hash: str | None = None


@dataclass
class RunReport:
    """Everything one pass observed and submitted."""

    address: str
    chain_id: int
    block_number: int
    start_nonce: int
    delegations: list[DelegationPosition] = field(default_factory=list)
    validators: list[ValidatorPosition] = field(default_factory=list)
    claims: list[SubmissionResult] = field(default_factory=list)
    settled_nonce: int | None = None
    balance: int | None = None  # minimal units, after settlement
    delegation: SubmissionResult | None = None

    @property
    def submitted(self) -> int:
        return len(self.claims) + (1 if self.delegation else 0)
