from __future__ import annotations

import logging
import re
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)

TAB_WIDTH = 8
# Six levels of 4-column indentation.
DEFAULT_MAX_DEPTH = 24
# Tried in this order, first match wins. 8-column indents end up under 4.
DIVISORS = (3, 4, 5)

_WHITESPACE_RE = re.compile(r"^(\s+)")


@dataclass
class IndentStats:
    path: Optional[Path] = None
    widths: Counter = field(default_factory=Counter)
    divisors: Counter = field(default_factory=Counter)
    lines: int = 0

    def record(self, width: int, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        """Count one line whose leading whitespace spans ``width`` columns."""
        if width == 0:
            return
        self.widths[width] += 1
        divisor = classify(width, max_depth)
        if divisor is not None:
            self.divisors[divisor] += 1

    def merge(self, other: "IndentStats") -> None:
        self.widths.update(other.widths)
        self.divisors.update(other.divisors)
        self.lines += other.lines

    def sorted_widths(self) -> List[Tuple[int, int]]:
        return sorted(self.widths.items())

    def sorted_divisors(self) -> List[Tuple[int, int]]:
        return sorted(self.divisors.items())

    @property
    def indented_lines(self) -> int:
        return sum(self.widths.values())


def expand_width(whitespace: str) -> int:
    """Return the visual column reached by ``whitespace`` with tab stops every 8 columns."""
    position = 0
    for char in whitespace:
        if char == "\t":
            position += TAB_WIDTH - position % TAB_WIDTH
        else:
            position += 1
    return position


def leading_whitespace(line: str) -> str:
    match = _WHITESPACE_RE.match(line)
    return match.group(1) if match else ""


def classify(width: int, max_depth: int = DEFAULT_MAX_DEPTH) -> Optional[int]:
    """Pick the divisor bucket for an indent width, or None when no bucket applies.

    Width 2 always goes to bucket 2. Wider indents up to ``max_depth`` go to the
    first of 3, 4, 5 that divides them evenly. Anything else is left unclassified.
    """
    if width == 2:
        return 2
    if 2 < width <= max_depth:
        for divisor in DIVISORS:
            if width % divisor == 0:
                return divisor
    return None


def record_width(
    width: int,
    file_stats: IndentStats,
    totals: IndentStats,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> None:
    """Apply one line's width to the per-file stats and the run totals."""
    file_stats.record(width, max_depth)
    totals.record(width, max_depth)


def analyze_lines(
    lines: Iterable[str],
    totals: Optional[IndentStats] = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
    path: Optional[Path] = None,
) -> IndentStats:
    """Collect indentation statistics from a stream of lines.

    Lines are consumed one at a time. When ``totals`` is given it is updated
    alongside the returned per-file stats.
    """
    stats = IndentStats(path=path)
    for line in lines:
        stats.lines += 1
        if totals is not None:
            totals.lines += 1
        prefix = leading_whitespace(line.rstrip("\r\n"))
        if not prefix:
            continue
        width = expand_width(prefix)
        if totals is not None:
            record_width(width, stats, totals, max_depth)
        else:
            stats.record(width, max_depth)
    return stats


def analyze_file(
    path: Path,
    totals: Optional[IndentStats] = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> IndentStats | None:
    """Inspect a single file. Returns None when the file cannot be read.

    Undecodable bytes become U+FFFD, which is not whitespace, so they end the
    leading run instead of vanishing from it.
    """
    try:
        with path.open("r", encoding="utf-8", errors="replace") as handle:
            stats = analyze_lines(handle, totals=totals, max_depth=max_depth, path=path)
    except (OSError, UnicodeError) as exc:
        logger.warning("Skipping %s: %s", path, exc)
        return None
    logger.info("%s: %d lines, %d indented", path, stats.lines, stats.indented_lines)
    return stats


def analyze_paths(
    paths: Iterable[str],
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Tuple[List[IndentStats], IndentStats]:
    """Analyze files in the order given and return per-file results plus totals."""
    results: List[IndentStats] = []
    totals = IndentStats()
    for raw in paths:
        path = Path(raw).expanduser()
        logger.debug("Reading %s", path)
        result = analyze_file(path, totals=totals, max_depth=max_depth)
        if result is not None:
            results.append(result)
    return results, totals
