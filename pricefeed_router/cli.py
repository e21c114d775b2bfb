#!/usr/bin/env python3
"""
Command-line interface for the price feed oracle.

Usage:
    python -m pricefeed_router.cli resolve BTC ETH --decimals 6
    python -m pricefeed_router.cli peek 0x0000...
    python -m pricefeed_router.cli rate BTC ETH --decimals 9
    python -m pricefeed_router.cli info
"""

import argparse
import logging
import sys
from decimal import Decimal
from typing import List, Optional

from pricefeed_router.config import LOG_FORMAT
from pricefeed_router.oracle import DescriptorError, PriceFeedOracle, RouteDescriptor, build_oracle

logger = logging.getLogger(__name__)


def format_rate(rate: int, decimals: int) -> str:
    """Render a fixed-point rate as a decimal string."""
    return str(Decimal(rate).scaleb(-decimals))


def run_resolve(oracle: PriceFeedOracle, args) -> bool:
    found, descriptor = oracle.resolve(args.base, args.quote, args.decimals)
    if found:
        logger.info(f"✅ {args.base}/{args.quote}: {descriptor}")
    else:
        logger.error(f"❌ No route for {args.base}/{args.quote} via {list(oracle.intermediaries)}")
    print(descriptor.to_hex())
    return found


def run_peek(oracle: PriceFeedOracle, args) -> bool:
    try:
        descriptor = RouteDescriptor.from_hex(args.data)
    except DescriptorError as e:
        logger.error(f"❌ {e}")
        return False

    success, rate = oracle.compose(descriptor)
    if not success:
        logger.error(f"❌ Price unavailable for {descriptor}")
        return False
    print(format_rate(rate, descriptor.desired_decimals))
    return True


def run_rate(oracle: PriceFeedOracle, args) -> bool:
    found, descriptor = oracle.resolve(args.base, args.quote, args.decimals)
    if not found:
        logger.error(f"❌ No route for {args.base}/{args.quote}")
        return False

    success, rate = oracle.compose(descriptor)
    if not success:
        logger.error(f"❌ Price unavailable for {args.base}/{args.quote}")
        return False
    logger.info(f"📊 {args.base}/{args.quote} = {rate} ({args.decimals} decimals)")
    print(format_rate(rate, args.decimals))
    return True


def run_info(oracle: PriceFeedOracle, args) -> bool:
    print(f"name: {oracle.name()}")
    print(f"symbol: {oracle.symbol()}")
    print(f"intermediaries: {', '.join(oracle.intermediaries)}")
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve currency pair routes and read rates from the price router",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Find a route and print its cacheable descriptor
  python -m pricefeed_router.cli resolve BTC ETH --decimals 6

  # Read the latest rate for a stored descriptor
  python -m pricefeed_router.cli peek 0x...

  # Resolve and read in one go
  python -m pricefeed_router.cli rate BTC DAI --decimals 15
        """,
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    for command, handler, help_text in (
        ("resolve", run_resolve, "Resolve a pair to a route descriptor"),
        ("rate", run_rate, "Resolve a pair and read its rate"),
    ):
        sub = subparsers.add_parser(command, help=help_text)
        sub.add_argument("base", help="Base asset symbol, e.g. BTC")
        sub.add_argument("quote", help="Quote asset symbol, e.g. USD")
        sub.add_argument("--decimals", type=int, default=6, help="Decimals of the rate (default: 6)")
        sub.set_defaults(handler=handler)

    peek = subparsers.add_parser("peek", help="Read the rate for an encoded descriptor")
    peek.add_argument("data", help="Hex-encoded route descriptor")
    peek.set_defaults(handler=run_peek)

    info = subparsers.add_parser("info", help="Show oracle metadata")
    info.set_defaults(handler=run_info)

    return parser


def main(argv: Optional[List[str]] = None, oracle: Optional[PriceFeedOracle] = None) -> int:
    """Main CLI function. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format=LOG_FORMAT)

    if args.command in ("resolve", "rate") and not 0 <= args.decimals <= 255:
        parser.error("--decimals must be between 0 and 255")

    try:
        oracle = oracle or build_oracle()
        return 0 if args.handler(oracle, args) else 1
    except KeyboardInterrupt:
        logger.info("⏹️  Interrupted by user")
        return 130
    except Exception as e:
        logger.exception(f"💥 Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
