"""In-process stand-ins for the JSON-RPC server."""

from collections import deque
from typing import Any, Callable

from libraclient.jsonrpc import Response, ResponseError

CHAIN_ID = 4
SENDER = "f72589b71ff4f8d139674a3f7369c69b"
SIGNATURE = "abc"


def response(
    result: Any = None,
    *,
    version: int = 1,
    timestamp_usec: int = 1_000,
    chain_id: int = CHAIN_ID,
    error: ResponseError | None = None,
) -> Response:
    return Response(
        id=None,
        chain_id=chain_id,
        ledger_version=version,
        ledger_timestamp_usec=timestamp_usec,
        result=result,
        error=error,
    )


def txn_json(
    *,
    signature: str = SIGNATURE,
    vm_status: str = "executed",
    sequence_number: int = 3,
    version: int = 10,
) -> dict:
    return {
        "version": version,
        "transaction": {
            "type": "user",
            "sender": SENDER,
            "signature_scheme": "Scheme::Ed25519",
            "signature": signature,
            "public_key": "00" * 32,
            "sequence_number": sequence_number,
            "chain_id": CHAIN_ID,
            "max_gas_amount": 1_000_000,
            "gas_unit_price": 0,
            "gas_currency": "LBR",
            "expiration_timestamp_secs": 1000,
            "script_hash": "",
            "script_bytes": "",
        },
        "hash": "e7c6a1b4" * 8,
        "events": [],
        "vm_status": {"type": vm_status},
        "gas_used": 480,
        "some_future_field": True,
    }


class ScriptedTransport:
    """Replays queued responses; an exception in the queue is raised instead.

    When the queue runs dry the `default` factory, if any, supplies the next one.
    """

    def __init__(self, *items: Response | Exception, default: Callable[[], Response] | None = None) -> None:
        self.items: deque = deque(items)
        self.default = default
        self.calls: list[tuple[str, tuple]] = []
        self.closed = False

    def push(self, *items: Response | Exception) -> None:
        self.items.extend(items)

    async def call(self, method, *params) -> Response:
        self.calls.append((str(method), params))
        if self.items:
            item = self.items.popleft()
        elif self.default is not None:
            item = self.default()
        else:
            raise AssertionError(f"unexpected call {method}{params}")
        if isinstance(item, Exception):
            raise item
        return item

    async def aclose(self) -> None:
        self.closed = True
