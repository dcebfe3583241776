"""Error taxonomy for a delegator run.

Every error is fatal to the run. Each carries the name of the step that
failed so the CLI can print a single diagnostic line.
"""

from __future__ import annotations


class DelegatorError(Exception):
    """Base class for all run-aborting errors."""

    def __init__(self, message: str, step: str = "run") -> None:
        super().__init__(message)
        self.message = message
        self.step = step

    def __str__(self) -> str:
        return self.message


class ChainConnectionError(DelegatorError, ConnectionError):
    """RPC endpoint unreachable or timed out."""

    def __init__(self, message: str, step: str = "connect") -> None:
        super().__init__(message, step)


class SigningKeyError(DelegatorError, KeyError):
    """Signing key material is missing or malformed."""

    def __init__(self, message: str, step: str = "load_key") -> None:
        super().__init__(message, step)

    # KeyError.__str__ would repr() the message
    def __str__(self) -> str:
        return self.message


class QueryError(DelegatorError):
    """A read call against the chain or the DPOS contract failed."""


class SubmissionError(DelegatorError):
    """A write call was rejected (insufficient funds, nonce conflict, revert)."""

    def __init__(
        self,
        message: str,
        action: str,
        validator: str,
        nonce: int,
        reason: str = "unknown",
    ) -> None:
        super().__init__(message, step=action)
        self.action = action
        self.validator = validator
        self.nonce = nonce
        self.reason = reason


class SettlementTimeoutError(DelegatorError, TimeoutError):
    """The settlement barrier did not observe the expected nonce in time."""

    def __init__(self, message: str, expected_nonce: int, last_seen: int | None) -> None:
        super().__init__(message, step="settlement")
        self.expected_nonce = expected_nonce
        self.last_seen = last_seen


class AmountError(ValueError):
    """An amount could not be parsed as a non-negative base-10 integer or decimal."""


class ConfigError(DelegatorError, ValueError):
    """A configured value is unusable (e.g. a malformed address)."""

    def __init__(self, message: str, step: str = "config") -> None:
        super().__init__(message, step)
