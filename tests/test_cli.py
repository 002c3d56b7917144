from __future__ import annotations

from unittest import IsolatedAsyncioTestCase, TestCase
from unittest.mock import patch

from libraclient import Client
from libraclient.__main__ import _dump, main, parse_args, run
from tests.fakes import CHAIN_ID, SENDER, ScriptedTransport, response, txn_json


class TestParseArgs(TestCase):
    def test_wait(self):
        args = parse_args(["-c", "4", "wait", SENDER, "3", "abc", "1000", "--timeout", "2.5"])
        self.assertEqual(args.chain_id, 4)
        self.assertEqual(args.command, "wait")
        self.assertEqual((args.sequence_number, args.expiration_time_secs, args.timeout), (3, 1000, 2.5))

    def test_command_required(self):
        with self.assertRaises(SystemExit):
            parse_args([])


class TestMain(TestCase):
    @patch("libraclient.__main__.setup_logging")
    def test_bad_chain_id_exits_with_error(self, _setup_logging):
        with self.assertLogs("libraclient.cli", level="ERROR") as logs:
            with self.assertRaises(SystemExit) as ctx:
                main(["-c", "300", "metadata"])
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("chain id must fit in a byte", logs.output[0])


class TestRun(IsolatedAsyncioTestCase):
    async def test_txn(self):
        transport = ScriptedTransport(response(txn_json()))
        client = Client(CHAIN_ID, transport=transport)
        result = await run(parse_args(["txn", SENDER, "3", "--events"]), client)
        self.assertEqual(transport.calls, [("get_account_transaction", (SENDER, 3, True))])
        self.assertIn('"signature": "abc"', _dump(result))

    async def test_wait(self):
        transport = ScriptedTransport(response(txn_json()))
        client = Client(CHAIN_ID, transport=transport, wait_step=0)
        result = await run(parse_args(["wait", SENDER, "3", "abc", "1000"]), client)
        self.assertTrue(result.is_executed)

    def test_dump_none(self):
        self.assertEqual(_dump(None), "null")
