#!/usr/bin/env python3
"""Net worth snapshot CLI"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from networth.config import settings
from networth.logging_config import setup_logging
from networth.providers import ZapperError, ZapperProvider
from networth.services import aggregate, emit, present

logger = logging.getLogger("networth.cli")

EXAMPLE = "Example:\n  networth --addresses=0xabcdea,0xdeadbeef"

MISSING_ADDRESSES = f"Missing command line argument --addresses\n\n{EXAMPLE}"


def _csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="networth",
        description="Aggregate token and app balances for a set of addresses into a net worth summary",
        epilog=EXAMPLE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "--addresses",
        type=_csv,
        default=[],
        help="Comma-separated wallet addresses (required)",
    )
    parser.add_argument(
        "--balanceThreshold",
        dest="balance_threshold",
        type=float,
        default=settings.balance_threshold,
        help="Ignore balances worth this many USD or less (default: %(default)s)",
    )
    parser.add_argument(
        "--dataFolder",
        dest="data_folder",
        default=settings.data_folder or None,
        help="Write the snapshot into this folder instead of printing it",
    )
    parser.add_argument(
        "--format",
        dest="format_values",
        action="store_true",
        help="Render numbers as display strings",
    )
    parser.add_argument(
        "--only",
        type=_csv,
        default=[],
        help="Comma-separated top-level fields to keep, in order",
    )
    return parser


async def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.addresses:
        print(MISSING_ADDRESSES, file=sys.stderr)
        return 1

    setup_logging()

    provider = ZapperProvider()
    if not await provider.ready():
        raise ZapperError("Zapper provider is disabled")

    portfolio = await provider.get_portfolio(args.addresses)
    net_worth = aggregate(portfolio, args.balance_threshold)
    logger.info(
        "Net worth computed: %.2f USD across %d network(s)",
        net_worth.value,
        len(net_worth.networks),
    )

    result = present(net_worth, format_values=args.format_values, only=args.only)
    emit(result, args.data_folder)
    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
