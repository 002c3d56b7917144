"""Polling for a submitted transaction until it reaches a terminal outcome.

Two independent bounds stop the wait: the caller's `timeout`, measured on the
local monotonic clock, and the transaction's own expiration, measured against
the ledger timestamp of the freshest response the client has accepted.
"""

import asyncio
import logging
import time
from datetime import timedelta
from typing import TYPE_CHECKING

import libraclient.constants as C
from libraclient.errors import (
    ExecutionFailedError,
    SignatureMismatchError,
    TransactionExpiredError,
    TransactionOutcome,
    WaitTimeoutError,
)

if TYPE_CHECKING:
    from libraclient.client import Client
    from libraclient.models import Transaction

log = logging.getLogger("libraclient.waiter")


async def wait_for_transaction(
    client: "Client",
    address: str,
    sequence_number: int,
    signature: str,
    expiration_time_secs: int,
    timeout: float | timedelta,
    *,
    step: float = C.WAIT_STEP,
) -> "Transaction":
    """Poll `get_account_transaction` until the transaction is final.

    Args:
        client: Client whose ledger state supplies the server's clock.
        address: Sender account address (hex).
        sequence_number: Sender sequence number of the submitted transaction.
        signature: Hex signature of the submitted transaction.
        expiration_time_secs: The transaction's expiration, in seconds since epoch.
        timeout: Longest time to keep polling, seconds or a timedelta.
        step: Seconds to sleep between lookups.

    Returns:
        The executed transaction, events included.

    Raises:
        SignatureMismatchError: a different transaction holds this sequence number.
        ExecutionFailedError: the transaction landed but its vm_status is not executed.
        TransactionExpiredError: not found and the ledger clock reached the expiration.
        WaitTimeoutError: neither found nor expired within `timeout`.
        Any error from the lookup itself propagates unchanged on the first occurrence.
    """
    if isinstance(timeout, timedelta):
        timeout = timeout.total_seconds()
    if step < 0:
        raise ValueError(f"step must not be negative, got {step}")

    expiration_usec = expiration_time_secs * C.USEC_PER_SEC
    start = time.monotonic()
    polls = 0

    while time.monotonic() - start < timeout:
        txn = await client.get_account_transaction(address, sequence_number, True)
        polls += 1

        if txn is not None:
            found = txn.transaction.signature
            if found != signature:
                log.warning("Signature mismatch %s seq=%s: expected %s, found %s", address, sequence_number, signature, found)
                raise SignatureMismatchError(signature, found, txn)
            if not txn.is_executed:
                log.warning("Execution failed %s seq=%s: %s", address, sequence_number, txn.vm_status)
                raise ExecutionFailedError(txn.vm_status, txn)
            log.info("%s %s seq=%s version=%s after %d polls", TransactionOutcome.EXECUTED, address, sequence_number, txn.version, polls)
            return txn

        # boundary inclusive: reaching the expiration second counts as expired
        ledger_usec = client.last_response_ledger_state().timestamp_usec
        if expiration_usec <= ledger_usec:
            log.info("Expired %s seq=%s: ledger %sus >= %sus", address, sequence_number, ledger_usec, expiration_usec)
            raise TransactionExpiredError(expiration_time_secs, ledger_usec)

        log.debug("%s %s seq=%s (poll %d)", TransactionOutcome.PENDING, address, sequence_number, polls)
        await asyncio.sleep(step)

    log.warning("Timed out waiting for %s seq=%s after %.1fs (%d polls)", address, sequence_number, timeout, polls)
    raise WaitTimeoutError(timeout)
