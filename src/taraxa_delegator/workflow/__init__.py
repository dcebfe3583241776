"""Run steps: claim, settle, delegate."""

from taraxa_delegator.workflow.claims import ClaimOrchestrator
from taraxa_delegator.workflow.delegation import DelegationStep
from taraxa_delegator.workflow.settlement import SettlementBarrier

__all__ = ["ClaimOrchestrator", "DelegationStep", "SettlementBarrier"]
