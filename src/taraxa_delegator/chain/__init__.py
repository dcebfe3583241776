"""Taraxa EVM integration components."""

from taraxa_delegator.chain.queries import DposQueries
from taraxa_delegator.chain.session import AccountSession, load_account, open_session
from taraxa_delegator.chain.submitter import DposSubmitter

__all__ = ["DposQueries", "DposSubmitter", "AccountSession", "load_account", "open_session"]
