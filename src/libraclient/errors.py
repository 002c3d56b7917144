"""Exceptions raised by the client.

Every failure carries structured attributes (expected vs. actual values,
remote status) so callers can decide whether resubmitting makes sense.
Nothing here is retried automatically.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from libraclient.models import Transaction, VMStatus


class TransactionOutcome(StrEnum):
    PENDING            = "PENDING"
    EXECUTED           = "EXECUTED"
    EXECUTION_FAILED   = "EXECUTION_FAILED"
    SIGNATURE_MISMATCH = "SIGNATURE_MISMATCH"
    EXPIRED            = "EXPIRED"
    TIMED_OUT          = "TIMED_OUT"


class LibraClientError(Exception):
    """Base class for all client errors."""


class TransportError(LibraClientError):
    """The request never produced a usable JSON-RPC response."""


class JsonRpcError(LibraClientError):
    """The server answered with a JSON-RPC error object."""

    def __init__(self, code: int, message: str, data: Any = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data

    def __str__(self):
        return f"json-rpc error {self.code}: {self.message}"


class ChainIdMismatchError(LibraClientError):
    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"chain id mismatch error: expected server response chain id == {expected}, but got {actual}"
        )
        self.expected = expected
        self.actual = actual


class StaleResponseError(LibraClientError):
    """The server reported a ledger state older than one already observed."""

    def __init__(self, field: str, expected: int, actual: int):
        super().__init__(
            f"stale response error: expected server response ledger {field} >= {expected}, but got {actual}"
        )
        self.field = field
        self.expected = expected
        self.actual = actual


class TransactionWaitError(LibraClientError):
    """Terminal non-success outcome of waiting for a transaction."""

    outcome: TransactionOutcome


class SignatureMismatchError(TransactionWaitError):
    outcome = TransactionOutcome.SIGNATURE_MISMATCH

    def __init__(self, expected: str, actual: str, transaction: Transaction | None = None):
        super().__init__(
            f"found transaction, but signature does not match: expected {expected}, got {actual}"
        )
        self.expected = expected
        self.actual = actual
        self.transaction = transaction


class ExecutionFailedError(TransactionWaitError):
    outcome = TransactionOutcome.EXECUTION_FAILED

    def __init__(self, vm_status: VMStatus, transaction: Transaction | None = None):
        super().__init__(f"transaction execution failed: {vm_status}")
        self.vm_status = vm_status
        self.transaction = transaction


class TransactionExpiredError(TransactionWaitError):
    outcome = TransactionOutcome.EXPIRED

    def __init__(self, expiration_time_secs: int, ledger_timestamp_usec: int):
        super().__init__(
            f"transaction expired: expiration {expiration_time_secs}s, "
            f"ledger timestamp {ledger_timestamp_usec}us"
        )
        self.expiration_time_secs = expiration_time_secs
        self.ledger_timestamp_usec = ledger_timestamp_usec


class WaitTimeoutError(TransactionWaitError):
    outcome = TransactionOutcome.TIMED_OUT

    def __init__(self, timeout: float):
        super().__init__(f"transaction not found within timeout period: {timeout}s")
        self.timeout = timeout


class FaucetError(LibraClientError):
    """Minting through the testnet faucet failed."""


__all__ = [
    "ChainIdMismatchError",
    "ExecutionFailedError",
    "FaucetError",
    "JsonRpcError",
    "LibraClientError",
    "SignatureMismatchError",
    "StaleResponseError",
    "TransactionExpiredError",
    "TransactionOutcome",
    "TransactionWaitError",
    "TransportError",
    "WaitTimeoutError",
]
