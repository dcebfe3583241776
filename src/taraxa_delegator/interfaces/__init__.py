"""Protocol interfaces for the taraxa_delegator components."""

from taraxa_delegator.interfaces.chain import ChainReader
from taraxa_delegator.interfaces.discovery import PositionSource
from taraxa_delegator.interfaces.submitter import TransactionSubmitter

__all__ = [
    "ChainReader",
    "PositionSource",
    "TransactionSubmitter",
]
