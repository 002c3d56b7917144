from __future__ import annotations

from unittest import IsolatedAsyncioTestCase

import httpx

from libraclient import Client, FaucetError
from libraclient.config import cfg
from libraclient.testnet import CHAIN_ID, DESIGNATED_DEALER, URL, mint, new_client, wait_account_sequence
from tests import fakes
from tests.fakes import ScriptedTransport, response
from tests.test_client import ACCOUNT


class TestMint(IsolatedAsyncioTestCase):
    async def test_returns_dealer_sequence(self):
        seen: list[httpx.Request] = []

        def handle(request):
            seen.append(request)
            return httpx.Response(200, text="42\n")

        async with httpx.AsyncClient(transport=httpx.MockTransport(handle)) as http:
            seq = await mint("aa" * 32, 1000, "LBR", http=http, faucet_url="http://faucet.local")
        self.assertEqual(seq, 42)
        self.assertEqual(seen[0].method, "POST")
        self.assertEqual(seen[0].url.params["currency_code"], "LBR")
        self.assertEqual(seen[0].url.params["amount"], "1000")

    async def test_faucet_failure(self):
        async with httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(500))) as http:
            with self.assertRaises(FaucetError):
                await mint("aa" * 32, 1000, "LBR", http=http, faucet_url="http://faucet.local")

    async def test_unexpected_body(self):
        async with httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, text="oops"))) as http:
            with self.assertRaises(FaucetError):
                await mint("aa" * 32, 1000, "LBR", http=http, faucet_url="http://faucet.local")


class TestWaitAccountSequence(IsolatedAsyncioTestCase):
    async def test_waits_for_sequence(self):
        behind = dict(ACCOUNT, address=DESIGNATED_DEALER, sequence_number=4)
        caught_up = dict(ACCOUNT, address=DESIGNATED_DEALER, sequence_number=5)
        transport = ScriptedTransport(response(behind), response(caught_up, version=2))
        client = Client(fakes.CHAIN_ID, transport=transport)
        await wait_account_sequence(client, 5, delay=0)
        self.assertEqual(len(transport.calls), 2)
        self.assertEqual(transport.calls[0], ("get_account", (DESIGNATED_DEALER,)))

    async def test_gives_up(self):
        transport = ScriptedTransport(default=lambda: response(None))
        client = Client(fakes.CHAIN_ID, transport=transport)
        with self.assertRaises(FaucetError):
            await wait_account_sequence(client, 5, attempts=3, delay=0)
        self.assertEqual(len(transport.calls), 3)

    async def test_new_client(self):
        async with new_client() as client:
            self.assertEqual(client.chain_id, CHAIN_ID)
            self.assertEqual(client.transport.url, cfg["rpc"]["url"])
        self.assertEqual(URL, cfg["rpc"]["url"])
