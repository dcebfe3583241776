"""Data models for the taraxa_delegator run."""

from taraxa_delegator.models.config import DelegatorConfig
from taraxa_delegator.models.positions import DelegationPosition, ValidatorPosition
from taraxa_delegator.models.records import RunReport, SubmissionResult

__all__ = [
    "DelegatorConfig",
    "DelegationPosition", "ValidatorPosition",
    "RunReport", "SubmissionResult",
]
