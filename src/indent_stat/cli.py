from __future__ import annotations

import argparse
import logging
from typing import Iterable

from . import __version__
from .config import ConfigError, RunConfig, load_config
from .core import analyze_paths
from .report import format_file, format_totals

LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def run(paths: Iterable[str], config: RunConfig) -> list[str]:
    results, totals = analyze_paths(paths, max_depth=config.max_depth)
    lines: list[str] = []
    if not config.totals_only:
        for result in results:
            lines.extend(format_file(result, inline=config.inline))
    lines.extend(format_totals(totals, inline=config.inline))
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="indent-stat",
        description=(
            "Display indentation statistics for files: how many lines start at "
            "each indent width, and which indentation unit (2, 3, 4 or 5 columns) "
            "each width is a multiple of. Results are shown per file and as totals."
        ),
        epilog="Tabs expand to 8-column stops, so tab-indented code counts as multiples of 4.",
    )
    parser.add_argument("paths", nargs="+", metavar="FILE", help="Files to inspect, in order.")
    parser.add_argument(
        "-d",
        "--max-depth",
        type=int,
        default=None,
        help="Largest indent width classified into a level bucket (default 24 or $INDENT_STAT_MAX_DEPTH).",
    )
    parser.add_argument("--inline", action="store_true", help="Print each mapping on a single line.")
    parser.add_argument("--totals-only", action="store_true", help="Only print the totals over all files.")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log output. Repeat for more.")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = LOG_LEVELS[min(args.verbose, len(LOG_LEVELS) - 1)]
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    try:
        config = load_config(args.max_depth, inline=args.inline, totals_only=args.totals_only)
    except ConfigError as exc:
        parser.error(str(exc))

    for line in run(args.paths, config):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
