"""
Streamlit UI for indent-stat.

Run from repo root:
  PYTHONPATH=src streamlit run app.py
"""

from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd
import streamlit as st

# Ensure the package is importable whether run via `streamlit run app.py`
# or without installing the project first.
ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))

from indent_stat.config import ConfigError, load_config
from indent_stat.core import DEFAULT_MAX_DEPTH, analyze_paths
from indent_stat.report import to_rows

ROW_COLUMNS = ["scope", "kind", "key", "count"]


def parse_inputs(raw: str) -> list[str]:
    parts = []
    for line in raw.splitlines():
        for piece in line.split(","):
            cleaned = piece.strip()
            if cleaned:
                parts.append(cleaned)
    return parts


def summary_rows(results):
    for res in results:
        yield {
            "path": str(res.path),
            "lines": res.lines,
            "indented_lines": res.indented_lines,
            "multiples_of_2": res.divisors.get(2, 0),
            "multiples_of_3": res.divisors.get(3, 0),
            "multiples_of_4": res.divisors.get(4, 0),
            "multiples_of_5": res.divisors.get(5, 0),
        }


def main() -> None:
    st.set_page_config(page_title="Indent Stat", layout="wide")
    st.title("Indent Stat")
    st.write("Count indent widths and indentation levels across files.")
    st.caption("Tabs expand to 8 columns, so tab-indented lines are counted as multiples of 4.")

    raw = st.text_area(
        "Files (comma or newline separated)",
        value="",
        placeholder="e.g. src/indent_stat/core.py, app.py",
        height=120,
    )
    try:
        default_depth = load_config().max_depth
    except ConfigError as exc:
        st.warning(str(exc))
        default_depth = DEFAULT_MAX_DEPTH
    max_depth = st.number_input("Max examined depth", min_value=0, value=default_depth, step=1)

    if st.button("Analyze", type="primary"):
        paths = parse_inputs(raw)
        if not paths:
            st.warning("Enter at least one file path.")
            return

        with st.spinner("Scanning..."):
            results, totals = analyze_paths(paths, max_depth=int(max_depth))

        if not results:
            st.info("None of the provided paths could be read.")
            return

        st.success(f"Analyzed {len(results)} file(s), {totals.lines} line(s).")
        st.markdown("### Per file")
        st.dataframe(pd.DataFrame(summary_rows(results)), use_container_width=True)

        totals_df = pd.DataFrame(list(to_rows(totals, scope="Totals")), columns=ROW_COLUMNS)
        col1, col2 = st.columns(2)
        col1.markdown("#### Totals by indent")
        col1.dataframe(totals_df[totals_df["kind"] == "width"], use_container_width=True)
        col2.markdown("#### Totals by indentation level (multiples of)")
        col2.dataframe(totals_df[totals_df["kind"] == "multiple of"], use_container_width=True)

        with st.expander("Detail by file"):
            detail = [row for res in results for row in to_rows(res)]
            st.dataframe(pd.DataFrame(detail, columns=ROW_COLUMNS), use_container_width=True)


if __name__ == "__main__":
    main()
