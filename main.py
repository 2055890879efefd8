import argparse
import asyncio
import json
import logging
import socket
import ssl
import sys

import aiohttp
import certifi

from dydx_client import Client, DydxApiError, Settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Query the dYdX v3 public API")
    sub = parser.add_subparsers(dest="command", required=True)

    markets = sub.add_parser("markets", help="List markets")
    markets.add_argument("--market", help="Only return this market")

    orderbook = sub.add_parser("orderbook", help="Orderbook of a market")
    orderbook.add_argument("market")

    stats = sub.add_parser("stats", help="Market statistics")
    stats.add_argument("market")
    stats.add_argument("--days", type=int, choices=[1, 7, 30])

    trades = sub.add_parser("trades", help="Trades of a market")
    trades.add_argument("market")
    trades.add_argument("--before", help="ISO 8601 upper bound")

    funding = sub.add_parser("funding", help="Historical funding of a market")
    funding.add_argument("market")
    funding.add_argument("--before", help="ISO 8601 upper bound")

    user = sub.add_parser("user-exists", help="Check a user by Ethereum address")
    user.add_argument("address")

    username = sub.add_parser("username-exists", help="Check a username")
    username.add_argument("username")

    return parser.parse_args(argv)


async def run_command(client: Client, args: argparse.Namespace) -> dict:
    public = client.public
    if args.command == "markets":
        return await public.get_markets(args.market)
    if args.command == "orderbook":
        return await public.get_order_book(args.market)
    if args.command == "stats":
        return await public.get_stats(args.market, days=args.days)
    if args.command == "trades":
        return await public.get_trades(args.market, starting_before_or_at=args.before)
    if args.command == "funding":
        return await public.get_historical_funding(args.market, effective_before_or_at=args.before)
    if args.command == "user-exists":
        return await public.does_user_exist_with_address(args.address)
    if args.command == "username-exists":
        return await public.does_user_exist_with_username(args.username)
    raise ValueError(f"Unknown command: {args.command}")


async def run(args: argparse.Namespace) -> int:
    settings = Settings.from_env()
    connector = aiohttp.TCPConnector(
        family=socket.AF_INET,
        ssl=ssl.create_default_context(cafile=certifi.where()),
    )
    timeout = aiohttp.ClientTimeout(total=settings.timeout)
    async with aiohttp.ClientSession(connector=connector, timeout=timeout) as session:
        client = Client(settings, session=session)
        logging.info("Querying %s (%s)", settings.host, args.command)
        try:
            data = await run_command(client, args)
        except DydxApiError as exc:
            logging.error("Request failed with status %s: %s", exc.status, exc.body)
            return 1
    print(json.dumps(data, indent=2))
    return 0


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
