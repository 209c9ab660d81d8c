"""
CoinMarketCap CLI: query the cryptocurrency endpoints from a shell.

Usage examples:
  python -m scripts.cmc_cli map --symbol BTC,ETH
  python -m scripts.cmc_cli info --slug bitcoin
  python -m scripts.cmc_cli listings --limit 10 --convert USD
"""

from __future__ import annotations

import argparse
import functools
import logging
import sys

from app.bootstrap import build_client
from app.config import ConfigError
from data.models.result import ApiFailure, ApiSuccess


def _print_failure(result: ApiFailure) -> None:
    status = f"HTTP {result.status_code}" if result.status_code is not None else "no response"
    print(f"{result.kind.value} ({status}): {result.error_message}", file=sys.stderr)


def print_map(result: ApiSuccess) -> None:
    for e in result.data:
        print(f"{e.id} {e.symbol} {e.slug} rank={e.rank}")


def print_info(result: ApiSuccess) -> None:
    for key, infos in result.data.items():
        for info in infos:
            site = info.urls.website[0] if info.urls.website else "-"
            print(f"{key}: {info.id} {info.symbol} {info.name} [{info.category}] {site}")


def print_listings(result: ApiSuccess, convert: str) -> None:
    for e in result.data:
        q = e.quote.get(convert)
        price = q.price if q else None
        change = q.percent_change_24h if q else None
        price_str = f"{price:,.4f}" if price is not None else "n/a"
        change_str = f"{change:+.2f}%" if change is not None else "n/a"
        print(f"#{e.cmc_rank} {e.symbol} {convert} {price_str} 24h {change_str}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Query the CoinMarketCap cryptocurrency endpoints")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each request")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_map = sub.add_parser("map", help="Map symbols/slugs to CoinMarketCap ids")
    p_map.add_argument("--symbol", help="Comma-separated symbols, e.g. BTC,ETH")
    p_map.add_argument("--listing-status", help="active, inactive or untracked")
    p_map.add_argument("--start", type=int)
    p_map.add_argument("--limit", type=int)
    p_map.add_argument("--sort", help="id or cmc_rank")

    p_info = sub.add_parser("info", help="Show static metadata")
    p_info.add_argument("--id", help="Comma-separated CoinMarketCap ids")
    p_info.add_argument("--slug", help="Comma-separated slugs, e.g. bitcoin,ethereum")
    p_info.add_argument("--symbol", help="Comma-separated symbols")
    p_info.add_argument("--address", help="Contract address")

    p_list = sub.add_parser("listings", help="Show latest listings with market quotes")
    p_list.add_argument("--start", type=int)
    p_list.add_argument("--limit", type=int, default=10, help="Rows to return (default: 10)")
    p_list.add_argument("--convert", default="USD", help="Quote currency (default: USD)")
    p_list.add_argument("--sort", help="e.g. market_cap, volume_24h, percent_change_24h")
    p_list.add_argument("--sort-dir", choices=["asc", "desc"])

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        client = build_client()
    except ConfigError as e:
        print(str(e), file=sys.stderr)
        return 2

    with client:
        if args.cmd == "map":
            result = client.cryptocurrency.map(
                symbol=args.symbol,
                listing_status=args.listing_status,
                start=args.start,
                limit=args.limit,
                sort=args.sort,
            )
            printer = print_map
        elif args.cmd == "info":
            result = client.cryptocurrency.info(id=args.id, slug=args.slug, symbol=args.symbol, address=args.address)
            printer = print_info
        else:
            result = client.cryptocurrency.listings_latest(
                start=args.start,
                limit=args.limit,
                convert=args.convert,
                sort=args.sort,
                sort_dir=args.sort_dir,
            )
            printer = functools.partial(print_listings, convert=args.convert.upper())

    if isinstance(result, ApiFailure):
        _print_failure(result)
        return 1
    printer(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
