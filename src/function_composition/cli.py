"""
Command-line interface for the function_composition playground.
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path

from omegaconf.errors import OmegaConfBaseException

from .config import SAMPLE_CSV, load_config
from .examples.company import make_company_resolver
from .examples.csv_rows import make_csv_processor
from .examples.work_hours import make_work_hour_check


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="function-composition",
        description="Function composition playground - run the example pipelines"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print the value after every step"
    )

    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Configuration override, e.g. csv.row_length=2 (repeatable)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    csv_parser = subparsers.add_parser("csv", help="Keep the CSV rows with the expected number of values")
    csv_parser.add_argument("text", nargs="?", default=None, help="CSV text (defaults to the sample)")
    csv_parser.add_argument("--file", type=str, default=None, help="Read CSV text from a file")

    company_parser = subparsers.add_parser("company", help="Resolve a stock symbol to page text")
    company_parser.add_argument("symbol", help="Stock symbol, e.g. AAPL")

    hour_parser = subparsers.add_parser("work-hour", help="Check whether a moment is within work hours")
    hour_parser.add_argument("--at", type=datetime.fromisoformat, default=None, help="ISO datetime (defaults to now)")

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.overrides)
    except (ValueError, OmegaConfBaseException) as exc:
        parser.error(str(exc))
    verbose = args.verbose or config.verbose

    if args.command == "csv":
        if args.file is not None:
            text = Path(args.file).read_text(encoding="utf-8")
        elif args.text is not None:
            text = args.text
        else:
            text = SAMPLE_CSV
        processor = make_csv_processor(config.csv, verbose=verbose)
        for row in processor(text):
            print(config.csv.separator.join(row))
        return 0

    if args.command == "company":
        resolve = make_company_resolver(
            companies=config.company.companies,
            pages=config.company.pages,
            verbose=verbose,
        )
        text = resolve(args.symbol)
        if text is None:
            print(f"No content for {args.symbol}")
            return 1
        print(text)
        return 0

    if args.command == "work-hour":
        moment = args.at or datetime.now()
        check = make_work_hour_check(config.work_hours.start_hour, config.work_hours.end_hour)
        at_work = check(moment)
        print(f"{moment.isoformat(timespec='minutes')}: {'work hour' if at_work else 'off hours'}")
        return 0

    raise ValueError(f"Unknown command: {args.command}")


if __name__ == "__main__":
    sys.exit(main())
