from libraclient.client import Client
from libraclient.constants import Method, VMStatusType
from libraclient.errors import (
    ChainIdMismatchError,
    ExecutionFailedError,
    FaucetError,
    JsonRpcError,
    LibraClientError,
    SignatureMismatchError,
    StaleResponseError,
    TransactionExpiredError,
    TransactionOutcome,
    TransactionWaitError,
    TransportError,
    WaitTimeoutError,
)
from libraclient.jsonrpc import HttpTransport, Response, ResponseError, Transport
from libraclient.ledger_state import LedgerState, LedgerStateGuard
from libraclient.models import Account, CurrencyInfo, Event, Metadata, Transaction, VMStatus
from libraclient.waiter import wait_for_transaction

__all__ = [
    "Account",
    "ChainIdMismatchError",
    "Client",
    "CurrencyInfo",
    "Event",
    "ExecutionFailedError",
    "FaucetError",
    "HttpTransport",
    "JsonRpcError",
    "LedgerState",
    "LedgerStateGuard",
    "LibraClientError",
    "Metadata",
    "Method",
    "Response",
    "ResponseError",
    "SignatureMismatchError",
    "StaleResponseError",
    "Transaction",
    "TransactionExpiredError",
    "TransactionOutcome",
    "TransactionWaitError",
    "Transport",
    "TransportError",
    "VMStatus",
    "VMStatusType",
    "WaitTimeoutError",
    "wait_for_transaction",
]
