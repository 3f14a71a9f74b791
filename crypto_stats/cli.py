#!/usr/bin/env python3
"""
Crypto Stats CLI — query price statistics from the terminal, or start the API server.

USAGE:
  python -m crypto_stats.cli stats BTC                      # Stats for one currency
  python -m crypto_stats.cli stats BTC eth XRP              # Several currencies
  python -m crypto_stats.cli prices                         # Stats for every currency
  python -m crypto_stats.cli normalized                     # Normalized range ranking
  python -m crypto_stats.cli normalized --day 2022-01-01    # Winner for one day
  python -m crypto_stats.cli prices --dir ./prices --json   # Other folder, JSON output

  python -m crypto_stats.cli serve                          # Start API server
  python -m crypto_stats.cli serve --port 8000
"""
from __future__ import annotations

import argparse
import datetime as dt
import json
import os
import sys

from crypto_stats.config import PRICES_FOLDER
from crypto_stats.analytics.aggregator import PriceAggregator
from crypto_stats.data.schemas import Currency, StatResult, STAT_KEYS
from crypto_stats.data.store import PriceStore
from crypto_stats.errors import InvalidCurrency, PriceFileNotFound
from crypto_stats.logging_config import configure_logging


def _aggregator(args) -> PriceAggregator:
    return PriceAggregator(PriceStore(args.dir or PRICES_FOLDER))


def _fmt(value: float | None) -> str:
    return "—" if value is None else f"{value:,.6g}"


def _print_stats(symbol: str, stats: StatResult) -> None:
    cells = "  ".join(f"{key}={_fmt(stats[key]):<12}" for key in STAT_KEYS)
    print(f"  {symbol:<6}{cells}")


def cmd_stats(args):
    """Print stats for the given symbols."""
    aggregator = _aggregator(args)
    currencies = [Currency.parse(s) for s in args.symbols]
    results = {c.value: aggregator.get_stats(c) for c in currencies}
    if args.json:
        print(json.dumps(results, indent=2))
        return
    for symbol, stats in results.items():
        _print_stats(symbol, stats)


def cmd_prices(args):
    """Print stats for every currency."""
    results = {c.value: s for c, s in _aggregator(args).get_all_stats().items()}
    if args.json:
        print(json.dumps(results, indent=2))
        return
    print(f"\nPRICES ({len(results)} currencies):\n")
    for symbol, stats in results.items():
        _print_stats(symbol, stats)


def cmd_normalized(args):
    """Print the normalized range ranking, or the winner for --day."""
    aggregator = _aggregator(args)

    if args.day:
        winner = aggregator.get_normalized_winner_for_day(args.day)
        if args.json:
            print(json.dumps({"day": args.day.isoformat(), "currency": winner.value if winner else None}))
        elif winner is None:
            print(f"  No data available for {args.day}")
        else:
            print(winner.value)
        return

    ranking = aggregator.get_normalized_ranking()
    if args.json:
        print(json.dumps([{c.value: float(v)} for c, v in ranking], indent=2))
        return
    print("\nNORMALIZED RANGE (max - min) / min:\n")
    for i, (currency, value) in enumerate(ranking, 1):
        print(f"{i:<4}{currency.value:<8}{value}")


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Crypto Stats API on {args.host}:{args.port}...")
    uvicorn.run("crypto_stats.main:app", host=args.host, port=args.port, reload=args.reload,
                timeout_keep_alive=65)


def _iso_day(value: str) -> dt.date:
    try:
        return dt.date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYY-MM-DD")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crypto-stats",
        description="Crypto Stats — price statistics from local CSV files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ... (default from env)")
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # options shared by the query subcommands
    query = argparse.ArgumentParser(add_help=False)
    query.add_argument("--dir", default=None, help=f"Prices directory (default: {PRICES_FOLDER})")
    query.add_argument("--json", action="store_true", help="Print JSON")

    stats_parser = subparsers.add_parser("stats", parents=[query], help="Stats for one or more currencies")
    stats_parser.add_argument("symbols", nargs="+", help="Currency symbol(s), e.g. BTC")
    stats_parser.set_defaults(func=cmd_stats)

    prices_parser = subparsers.add_parser("prices", parents=[query], help="Stats for all currencies")
    prices_parser.set_defaults(func=cmd_prices)

    normalized_parser = subparsers.add_parser("normalized", parents=[query], help="Normalized range ranking")
    normalized_parser.add_argument("--day", type=_iso_day, help="Only this day (YYYY-MM-DD): print the winner")
    normalized_parser.set_defaults(func=cmd_normalized)

    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--host", default="0.0.0.0", help="Host (default 0.0.0.0)")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    # stdout is reserved for command output
    configure_logging(args.log_level, stream=sys.stderr)
    try:
        args.func(args)
    except InvalidCurrency as e:
        print(f"  {e}. Supported: {', '.join(c.value for c in Currency)}", file=sys.stderr)
        return 2
    except PriceFileNotFound as e:
        print(f"  {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
