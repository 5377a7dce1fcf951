"""
Command line for the ranking pipeline.

    python -m rank_snapshots convert [--source rank_full-UTF-8.txt] [--dest rank.csv]
    python -m rank_snapshots summary [--csv rank.csv] [--top 10] [--country ESP]
    python -m rank_snapshots compare rank.csv Ranking-Male-11-09-2023.csv [--label 2023-09-11]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from . import pipeline
from .config import load_settings
from .countries import records_for_country
from .errors import RankingError
from .history import format_delta
from .logging_utils import configure_logging


def build_parser(settings) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="rank_snapshots", description=__doc__.strip().splitlines()[0])
    sub = ap.add_subparsers(dest="command", required=True)

    convert = sub.add_parser("convert", help="Normalize pdftotext output into the canonical CSV")
    convert.add_argument("--source", type=Path, default=settings.source_path)
    convert.add_argument("--dest", type=Path, default=settings.csv_path)
    convert.add_argument("--separator-width", type=int, default=settings.separator_width)

    summary = sub.add_parser("summary", help="Print country aggregates for a snapshot")
    summary.add_argument("--csv", type=Path, default=settings.csv_path)
    summary.add_argument("--top", type=int, default=settings.top_countries)
    summary.add_argument("--country", default=None, help="Also list the records of this country")

    compare = sub.add_parser("compare", help="Print rank changes against a prior snapshot")
    compare.add_argument("current", type=Path)
    compare.add_argument("prior", type=Path)
    compare.add_argument("--label", default=None)

    return ap


def _cmd_convert(args) -> None:
    written = pipeline.convert_file(args.source, args.dest, separator_width=args.separator_width)
    print(f"{'Wrote' if written else 'Kept existing'} {args.dest}")


def _cmd_summary(args) -> None:
    records = pipeline.load_snapshot(args.csv)
    print(f"Records: {len(records)}")
    print("Top countries: " + ", ".join(pipeline.top_countries(records, args.top)))
    print("All countries: " + ", ".join(c or "-" for c in pipeline.distinct_countries(records)))
    if args.country is not None:
        selected = records_for_country(records, args.country)
        print(f"Records for {args.country or '-'}: {len(selected)}")
        for record in selected:
            print(f"{record.position:>5}  {record.name:<40} {record.points:>6}")


def _cmd_compare(args) -> None:
    records = pipeline.load_snapshot(args.current)
    matched = pipeline.merge_history(records, args.prior, args.label)
    print(f"Matched {matched} of {len(records)} records")
    for record in records:
        print(
            f"{record.position:>5}  {record.name:<40} {record.country:<4} {record.points:>6}"
            f"  {format_delta(record.points_delta):>6}  {format_delta(record.position_delta):>5}"
        )


COMMANDS = {
    "convert": _cmd_convert,
    "summary": _cmd_summary,
    "compare": _cmd_compare,
}


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()
    configure_logging(settings.log_level)
    args = build_parser(settings).parse_args(argv)
    try:
        COMMANDS[args.command](args)
    except RankingError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
