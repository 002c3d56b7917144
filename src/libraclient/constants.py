from typing import Final
from enum import StrEnum


class Method(StrEnum):
    GET_CURRENCIES           = "get_currencies"
    GET_METADATA             = "get_metadata"
    GET_ACCOUNT              = "get_account"
    GET_ACCOUNT_TRANSACTION  = "get_account_transaction"
    GET_ACCOUNT_TRANSACTIONS = "get_account_transactions"
    GET_TRANSACTIONS         = "get_transactions"
    GET_EVENTS               = "get_events"
    SUBMIT                   = "submit"


class VMStatusType(StrEnum):
    EXECUTED            = "executed"
    OUT_OF_GAS          = "out_of_gas"
    MOVE_ABORT          = "move_abort"
    EXECUTION_FAILURE   = "execution_failure"
    MISCELLANEOUS_ERROR = "miscellaneous_error"
    VERIFICATION_ERROR  = "verification_error"
    DESERIALIZATION_ERROR = "deserialization_error"
    PUBLISHING_FAILURE  = "publishing_failure"


VM_STATUS_EXECUTED: Final = VMStatusType.EXECUTED

JSONRPC_VERSION: Final = "2.0"

USEC_PER_SEC: Final = 1_000_000
MAX_CHAIN_ID: Final = 0xFF

WAIT_STEP = 0.5  # seconds between account transaction lookups
WAIT_TIMEOUT = 30.0
RPC_TIMEOUT = 10.0

__all__ = [
    "JSONRPC_VERSION",
    "MAX_CHAIN_ID",
    "RPC_TIMEOUT",
    "USEC_PER_SEC",
    "VM_STATUS_EXECUTED",
    "WAIT_STEP",
    "WAIT_TIMEOUT",

    ######
    "Method",
    "VMStatusType",
]
