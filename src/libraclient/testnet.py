"""Helpers for the public Libra testnet."""

import asyncio
import logging
from typing import Final

import httpx

from libraclient.client import Client
from libraclient.config import cfg
from libraclient.errors import FaucetError

log = logging.getLogger("libraclient.testnet")

URL: Final = cfg["rpc"]["url"]
FAUCET_URL: Final = cfg["faucet"]["url"]
CHAIN_ID: Final = 2

# Account that sends minted coins; the faucet answers with its next sequence number
DESIGNATED_DEALER: Final = "000000000000000000000000000000DD"


def new_client(**kwargs) -> Client:
    return Client(CHAIN_ID, URL, **kwargs)


async def mint(
    auth_key: str,
    amount: int,
    currency_code: str,
    *,
    http: httpx.AsyncClient | None = None,
    faucet_url: str = FAUCET_URL,
) -> int:
    """Ask the faucet to create/fund the account for `auth_key`.

    Returns:
        The designated dealer's next sequence number; wait for it with
        `wait_account_sequence` before using the funds.
    """
    params = {
        "amount": amount,
        "auth_key": auth_key,
        "currency_code": currency_code,
        "return_txns": "false",
    }
    owns_http = http is None
    http = http or httpx.AsyncClient(timeout=30.0)
    try:
        r = await http.post(faucet_url, params=params)
        r.raise_for_status()
        text = r.text.strip()
    except httpx.HTTPError as e:
        raise FaucetError(f"mint {amount} {currency_code} for {auth_key} failed: {e}") from e
    finally:
        if owns_http:
            await http.aclose()

    try:
        seq = int(text)
    except ValueError as e:
        raise FaucetError(f"unexpected faucet response: {text[:200]!r}") from e
    log.info("Minted %s %s for %s, dealer seq=%s", amount, currency_code, auth_key, seq)
    return seq


async def wait_account_sequence(
    client: Client,
    sequence: int,
    *,
    address: str = DESIGNATED_DEALER,
    attempts: int = 100,
    delay: float = 0.1,
) -> None:
    """Poll until `address` has sent `sequence` transactions."""
    for _ in range(attempts):
        account = await client.get_account(address)
        if account is not None and account.sequence_number >= sequence:
            return
        await asyncio.sleep(delay)
    raise FaucetError(f"waiting for {address} to reach sequence {sequence} timed out")
