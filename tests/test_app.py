from pathlib import Path

import app
from app import parse_inputs, summary_rows
from indent_stat.core import DEFAULT_MAX_DEPTH, analyze_lines


def test_parse_inputs_splits_commas_and_lines():
    raw = "src/a.py, src/b.py\n\n  README.md  ,"
    assert parse_inputs(raw) == ["src/a.py", "src/b.py", "README.md"]


def test_summary_rows():
    stats = analyze_lines(["x", "  y", "\tz"], path=Path("demo.py"))
    rows = list(summary_rows([stats]))
    assert rows == [
        {
            "path": "demo.py",
            "lines": 3,
            "indented_lines": 2,
            "multiples_of_2": 1,
            "multiples_of_3": 0,
            "multiples_of_4": 1,
            "multiples_of_5": 0,
        }
    ]


def test_depth_fallback_matches_core_default():
    assert app.DEFAULT_MAX_DEPTH == DEFAULT_MAX_DEPTH == 24
