"""Command line access to a Treasury exchange-rate table."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Sequence

from treasury_fx import TreasuryRates
from treasury_fx.data import DEFAULT_RATES_CSV_PATH
from treasury_fx.resolver import Failure, Result
from treasury_fx.utils.logger import set_verbosity

__all__ = ["build_parser", "parse_args", "main"]

EXIT_OK = 0
EXIT_QUERY_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="treasury-fx", description=__doc__)
    parser.add_argument(
        "--data",
        dest="data_path",
        default=str(DEFAULT_RATES_CSV_PATH),
        help="Treasury exchange-rate CSV export",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    rate = commands.add_parser("rate", help="Rate converting FROM into TO")
    rate.add_argument("from_currency", metavar="FROM")
    rate.add_argument("to_currency", metavar="TO")

    convert = commands.add_parser("convert", help="Convert AMOUNT from FROM into TO")
    convert.add_argument("from_currency", metavar="FROM")
    convert.add_argument("to_currency", metavar="TO")
    convert.add_argument("amount", metavar="AMOUNT")

    rates = commands.add_parser("rates", help="Every rate relative to a base currency")
    rates.add_argument("--base", default=None, help="Base currency (default USD)")

    currency = commands.add_parser("currency", help="Stored record for one currency")
    currency.add_argument("code", metavar="CODE")

    batch = commands.add_parser("batch", help="Convert several amounts at one rate")
    batch.add_argument("from_currency", metavar="FROM")
    batch.add_argument("to_currency", metavar="TO")
    batch.add_argument("amounts", metavar="AMOUNT", nargs="+")

    commands.add_parser("currencies", help="List every available currency")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def _coerce_amount(value: str) -> float | str:
    try:
        return float(value)
    except ValueError:
        return value


def _emit(result: Result[Any]) -> int:
    if isinstance(result, Failure):
        print(f"{result.kind.value}: {result.message}", file=sys.stderr)
        return EXIT_QUERY_ERROR
    print(json.dumps(result.value.to_dict(), indent=2))
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    set_verbosity(args.verbose)
    service = TreasuryRates(args.data_path)

    if args.command == "rate":
        return _emit(service.rate(args.from_currency, args.to_currency))
    if args.command == "convert":
        return _emit(service.convert(args.from_currency, args.to_currency, args.amount))
    if args.command == "rates":
        return _emit(service.rates(args.base))
    if args.command == "currency":
        return _emit(service.currency(args.code))
    if args.command == "batch":
        amounts = [_coerce_amount(value) for value in args.amounts]
        return _emit(service.batch_convert(args.from_currency, args.to_currency, amounts))

    frame = service.table.to_frame()
    print(frame[["code", "name"]].to_string(index=False))
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
