import logging
from datetime import timedelta
from typing import Any

from pydantic import TypeAdapter

import libraclient.constants as C
from libraclient.config import cfg
from libraclient.jsonrpc import HttpTransport, Transport
from libraclient.ledger_state import LedgerState, LedgerStateGuard
from libraclient.models import Account, CurrencyInfo, Event, Metadata, Transaction
from libraclient.waiter import wait_for_transaction

log = logging.getLogger("libraclient.client")

_currencies = TypeAdapter(list[CurrencyInfo])
_transactions = TypeAdapter(list[Transaction])
_events = TypeAdapter(list[Event])


class Client:
    """Libra JSON-RPC client.

    Every response, including error responses, goes through the ledger state
    guard before its result is looked at, so a client never hands out data older
    than what it has already seen.
    """

    def __init__(
        self,
        chain_id: int,
        url: str | None = None,
        *,
        transport: Transport | None = None,
        wait_step: float | None = None,
    ) -> None:
        if (url is None) == (transport is None):
            raise ValueError("Client() requires exactly one of 'url' or 'transport'")
        self.guard = LedgerStateGuard(chain_id)
        if transport is None:
            transport = HttpTransport(url, timeout=cfg["rpc"]["timeout"])
        self.transport: Transport = transport
        self.wait_step = cfg["wait"]["step"] if wait_step is None else wait_step

    @property
    def chain_id(self) -> int:
        return self.guard.chain_id

    def last_response_ledger_state(self) -> LedgerState:
        return self.guard.current()

    def update_last_response_ledger_state(self, state: LedgerState) -> None:
        self.guard.update(state)

    async def _call(self, method: C.Method, *params: Any) -> Any:
        resp = await self.transport.call(method, *params)
        self.guard.validate_and_advance(
            resp.chain_id,
            LedgerState(timestamp_usec=resp.ledger_timestamp_usec, version=resp.ledger_version),
        )
        if resp.error is not None:
            log.debug("%s returned error %s", method, resp.error)
            raise resp.error.to_exception()
        return resp.result

    async def get_currencies(self) -> list[CurrencyInfo]:
        return _currencies.validate_python(await self._call(C.Method.GET_CURRENCIES) or [])

    async def get_metadata(self, version: int | None = None) -> Metadata:
        params = () if version is None else (version,)
        return Metadata.model_validate(await self._call(C.Method.GET_METADATA, *params))

    async def get_account(self, address: str) -> Account | None:
        result = await self._call(C.Method.GET_ACCOUNT, address)
        return None if result is None else Account.model_validate(result)

    async def get_account_transaction(
        self, address: str, sequence_number: int, include_events: bool
    ) -> Transaction | None:
        result = await self._call(C.Method.GET_ACCOUNT_TRANSACTION, address, sequence_number, include_events)
        return None if result is None else Transaction.model_validate(result)

    async def get_account_transactions(
        self, address: str, start: int, limit: int, include_events: bool
    ) -> list[Transaction]:
        result = await self._call(C.Method.GET_ACCOUNT_TRANSACTIONS, address, start, limit, include_events)
        return _transactions.validate_python(result or [])

    async def get_transactions(self, start_version: int, limit: int, include_events: bool) -> list[Transaction]:
        result = await self._call(C.Method.GET_TRANSACTIONS, start_version, limit, include_events)
        return _transactions.validate_python(result or [])

    async def get_events(self, key: str, start: int, limit: int) -> list[Event]:
        return _events.validate_python(await self._call(C.Method.GET_EVENTS, key, start, limit) or [])

    async def submit(self, signed_txn_hex: str) -> None:
        await self._call(C.Method.SUBMIT, signed_txn_hex)

    async def wait_for_transaction(
        self,
        address: str,
        sequence_number: int,
        signature: str,
        expiration_time_secs: int,
        timeout: float | timedelta,
    ) -> Transaction:
        """Block until the (address, sequence number, signature) transaction is executed.

        See libraclient.waiter.wait_for_transaction for the outcomes.
        """
        return await wait_for_transaction(
            self, address, sequence_number, signature, expiration_time_secs, timeout, step=self.wait_step
        )

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.aclose()
