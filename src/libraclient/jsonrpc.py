"""Minimal JSON-RPC transport.

One request per call: no batching, no retries. Connection pooling is whatever
the underlying httpx.AsyncClient does.
"""

import itertools
import logging
from dataclasses import dataclass
from typing import Any, Protocol

import httpx

import libraclient.constants as C
from libraclient.errors import JsonRpcError, TransportError

log = logging.getLogger("libraclient.jsonrpc")


@dataclass(frozen=True, slots=True)
class ResponseError:
    code: int
    message: str
    data: Any = None

    def to_exception(self) -> JsonRpcError:
        return JsonRpcError(self.code, self.message, self.data)


@dataclass(frozen=True, slots=True)
class Response:
    id: int | None
    chain_id: int
    ledger_version: int
    ledger_timestamp_usec: int
    result: Any = None
    error: ResponseError | None = None

    @classmethod
    def from_json(cls, body: dict) -> "Response":
        """Parse a JSON-RPC response envelope.

        Args:
            body: The decoded response object.

        Returns:
            Response with the libra_* ledger metadata pulled out of the envelope.
        """
        err = body.get("error")
        chain_id = int(body["libra_chain_id"])
        version = int(body["libra_ledger_version"])
        timestamp_usec = int(body["libra_ledger_timestampusec"])
        if min(chain_id, version, timestamp_usec) < 0:
            raise ValueError(
                f"negative ledger metadata: chain_id={chain_id} version={version} timestamp_usec={timestamp_usec}"
            )
        return cls(
            id=body.get("id"),
            chain_id=chain_id,
            ledger_version=version,
            ledger_timestamp_usec=timestamp_usec,
            result=body.get("result"),
            error=ResponseError(int(err["code"]), err.get("message", ""), err.get("data")) if err else None,
        )


class Transport(Protocol):
    async def call(self, method: C.Method, *params: Any) -> Response: ...
    async def aclose(self) -> None: ...


class HttpTransport:
    """JSON-RPC over HTTP POST.

    Pass `http` to control the httpx client (custom transport, limits, proxies);
    a client passed in is not closed by `aclose()`.
    """

    def __init__(self, url: str, *, http: httpx.AsyncClient | None = None, timeout: float = C.RPC_TIMEOUT) -> None:
        self.url = url
        self._owns_http = http is None
        self._http = http if http is not None else httpx.AsyncClient(timeout=timeout)
        self._ids = itertools.count(1)

    async def call(self, method: C.Method, *params: Any) -> Response:
        req_id = next(self._ids)
        payload = {
            "jsonrpc": C.JSONRPC_VERSION,
            "id": req_id,
            "method": str(method),
            "params": list(params),
        }
        log.debug("-> %s id=%s params=%s", method, req_id, params)
        try:
            r = await self._http.post(self.url, json=payload)
            r.raise_for_status()
            body = r.json()
        except httpx.HTTPError as e:
            raise TransportError(f"{method} request failed: {e.__class__.__name__}: {e}") from e
        except ValueError as e:
            raise TransportError(f"{method} response is not JSON: {e}") from e

        if not isinstance(body, dict):
            raise TransportError(f"{method} unexpected response body type: {type(body).__name__}")
        try:
            resp = Response.from_json(body)
        except (KeyError, TypeError, ValueError) as e:
            raise TransportError(f"{method} malformed response envelope: {e!r}") from e
        if resp.id is not None and resp.id != req_id:
            raise TransportError(f"{method} response id {resp.id} does not match request id {req_id}")

        log.debug("<- %s id=%s version=%s error=%s", method, req_id, resp.ledger_version, resp.error)
        return resp

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.aclose()
