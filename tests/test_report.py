from pathlib import Path

from indent_stat.core import analyze_lines
from indent_stat.report import format_file, format_mapping, format_totals, to_rows


def test_format_mapping_sorts_keys():
    assert format_mapping({8: 1, 2: 3, 4: 2}, "Totals BY INDENT") == [
        "Totals BY INDENT",
        "2 3",
        "4 2",
        "8 1",
    ]


def test_format_mapping_inline():
    assert format_mapping({4: 2, 2: 1}, "x.py BY INDENT", inline=True) == ["x.py BY INDENT: 2:1 4:2"]


def test_format_mapping_empty_keeps_topic():
    assert format_mapping({}, "Totals BY INDENT") == ["Totals BY INDENT"]


def test_format_file_sections():
    stats = analyze_lines(["    a", "\ta", "  a"], path=Path("demo.py"))
    assert format_file(stats) == [
        "demo.py BY INDENT",
        "2 1",
        "4 1",
        "8 1",
        "demo.py BY INDENTATION LEVEL (multiples of)",
        "2 1",
        "4 2",
    ]


def test_format_totals_inline():
    stats = analyze_lines(["   a", "     b"])
    assert format_totals(stats, inline=True) == [
        "Totals BY INDENT: 3:1 5:1",
        "Totals BY INDENTATION LEVEL (multiples of): 3:1 5:1",
    ]


def test_to_rows():
    stats = analyze_lines(["    a", "       b"], path=Path("demo.py"))
    rows = list(to_rows(stats))
    assert rows == [
        {"scope": "demo.py", "kind": "width", "key": 4, "count": 1},
        {"scope": "demo.py", "kind": "width", "key": 7, "count": 1},
        {"scope": "demo.py", "kind": "multiple of", "key": 4, "count": 1},
    ]
