from __future__ import annotations

from typing import Dict, Iterator, List, Mapping, Optional, Union

from .core import IndentStats

WIDTH_TOPIC = "BY INDENT"
DIVISOR_TOPIC = "BY INDENTATION LEVEL (multiples of)"


def format_mapping(
    mapping: Mapping[int, int],
    topic: Optional[str] = None,
    inline: bool = False,
) -> List[str]:
    """Render a bucket mapping with keys in ascending order."""
    items = sorted(mapping.items())
    if inline:
        body = " ".join(f"{key}:{count}" for key, count in items)
        if topic:
            return [f"{topic}: {body}".rstrip()]
        return [body]

    lines: List[str] = []
    if topic:
        lines.append(topic)
    lines.extend(f"{key} {count}" for key, count in items)
    return lines


def _sections(stats: IndentStats, label: str, inline: bool) -> List[str]:
    lines = format_mapping(stats.widths, f"{label} {WIDTH_TOPIC}", inline)
    lines += format_mapping(stats.divisors, f"{label} {DIVISOR_TOPIC}", inline)
    return lines


def format_file(stats: IndentStats, inline: bool = False) -> List[str]:
    return _sections(stats, str(stats.path), inline)


def format_totals(stats: IndentStats, inline: bool = False) -> List[str]:
    return _sections(stats, "Totals", inline)


def to_rows(stats: IndentStats, scope: Optional[str] = None) -> Iterator[Dict[str, Union[str, int]]]:
    """Flatten stats into table rows, widths first, each kind in ascending key order."""
    label = scope or str(stats.path)
    for key, count in stats.sorted_widths():
        yield {"scope": label, "kind": "width", "key": key, "count": count}
    for key, count in stats.sorted_divisors():
        yield {"scope": label, "kind": "multiple of", "key": key, "count": count}
