"""Account session - signing identity plus the locally advanced nonce."""

from __future__ import annotations

import logging

from eth_account import Account
from eth_account.signers.local import LocalAccount

from taraxa_delegator.errors import SigningKeyError
from taraxa_delegator.interfaces.chain import ChainReader

log = logging.getLogger(__name__)

DEFAULT_GAS_LIMIT = 300_000


def load_account(private_key: str) -> LocalAccount:
    """Derive the signing account from a hex private key (``0x`` optional)."""
    key = (private_key or "").strip()
    if not key:
        raise SigningKeyError("no private key configured")
    if not key.startswith(("0x", "0X")):
        key = "0x" + key
    try:
        return Account.from_key(key)
    except Exception as exc:
        # never echo the key material itself
        raise SigningKeyError(f"malformed private key: {type(exc).__name__}") from exc


class AccountSession:
    """One account's transaction context for a single run.

    The nonce is fetched once when the session opens and only ever moves
    forward through ``advance()``, so transactions can be sent back to back
    without waiting for the previous one to be mined.
    """

    def __init__(
        self,
        account: LocalAccount,
        chain_id: int,
        nonce: int,
        gas_price: int,
        gas_limit: int = DEFAULT_GAS_LIMIT,
    ) -> None:
        self.account = account
        self.chain_id = chain_id
        self.gas_price = gas_price
        self.gas_limit = gas_limit
        self.value = 0  # minimal units sent with the next transaction
        self._start_nonce = nonce
        self._nonce = nonce

    @property
    def address(self) -> str:
        return self.account.address

    @property
    def start_nonce(self) -> int:
        return self._start_nonce

    @property
    def submitted(self) -> int:
        """Transactions accepted through this session so far."""
        return self._nonce - self._start_nonce

    def next_nonce(self) -> int:
        """Nonce the next transaction must use."""
        return self._nonce

    def advance(self) -> int:
        """Record an accepted submission and return the new nonce."""
        self._nonce += 1
        self.value = 0
        return self._nonce

    def transaction_params(self) -> dict:
        """Base parameters for building the next transaction."""
        return {
            "from": self.address,
            "chainId": self.chain_id,
            "nonce": self._nonce,
            "gas": self.gas_limit,
            "gasPrice": self.gas_price,
            "value": self.value,
        }


async def open_session(
    chain: ChainReader,
    private_key: str,
    gas_limit: int = DEFAULT_GAS_LIMIT,
) -> AccountSession:
    """Load the key, then snapshot chain id, pending nonce and gas price.

    Raises SigningKeyError before touching the network if the key is bad;
    chain errors propagate from the reader.
    """
    account = load_account(private_key)
    chain_id = await chain.chain_id()
    nonce = await chain.pending_nonce(account.address, "pending")
    gas_price = await chain.gas_price()

    log.debug(
        "Session opened for %s (chain=%d nonce=%d gas_price=%d)",
        account.address, chain_id, nonce, gas_price,
    )
    return AccountSession(account, chain_id, nonce, gas_price, gas_limit)
