import argparse
import asyncio
import json
import logging
import sys

from pydantic import BaseModel

from libraclient.client import Client
from libraclient.config import cfg
from libraclient.errors import LibraClientError
from libraclient.logging_config import setup_logging

log = logging.getLogger("libraclient.cli")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="libraclient")
    parser.add_argument("-u", "--url",
                        default=cfg["rpc"]["url"],
                        help="JSON-RPC endpoint.",
                        )
    parser.add_argument("-c", "--chain-id",
                        type=int,
                        default=cfg["rpc"]["chain_id"],
                        help="Chain id every response must carry.",
                        )
    parser.add_argument("--log-level",
                        default=None,
                        help="Overrides LOG_LEVEL.",
                        )
    sub = parser.add_subparsers(dest="command", required=True)

    metadata = sub.add_parser("metadata", help="Ledger metadata.")
    metadata.add_argument("--version", type=int, default=None)

    account = sub.add_parser("account", help="Account state.")
    account.add_argument("address")

    txn = sub.add_parser("txn", help="Transaction by account and sequence number.")
    txn.add_argument("address")
    txn.add_argument("sequence_number", type=int)
    txn.add_argument("--events", action="store_true")

    wait = sub.add_parser("wait", help="Wait for a submitted transaction.")
    wait.add_argument("address")
    wait.add_argument("sequence_number", type=int)
    wait.add_argument("signature")
    wait.add_argument("expiration_time_secs", type=int)
    wait.add_argument("-t", "--timeout", type=float, default=cfg["wait"]["timeout"])

    return parser.parse_args(argv)


def _dump(result) -> str:
    if isinstance(result, BaseModel):
        return result.model_dump_json(indent=2)
    return json.dumps(result, indent=2)


async def run(args, client: Client):
    match args.command:
        case "metadata":
            return await client.get_metadata(args.version)
        case "account":
            return await client.get_account(args.address)
        case "txn":
            return await client.get_account_transaction(args.address, args.sequence_number, args.events)
        case "wait":
            return await client.wait_for_transaction(
                args.address, args.sequence_number, args.signature, args.expiration_time_secs, args.timeout
            )
    raise ValueError(f"unknown command {args.command}")


async def amain(args) -> int:
    try:
        client = Client(args.chain_id, args.url)
    except ValueError as e:
        log.error("invalid client settings: %s", e)
        return 1
    async with client:
        try:
            result = await run(args, client)
        except LibraClientError as e:
            log.error("%s failed: %s", args.command, e)
            return 1
    print(_dump(result))
    return 0


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level)
    try:
        sys.exit(asyncio.run(amain(args)))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
