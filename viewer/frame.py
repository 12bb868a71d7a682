from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

import pandas as pd

from viewer.columns import column_keys, display_label
from viewer.inspector import format_cell_value


def rows_to_frame(rows: Sequence[Mapping[str, Any]], columns: Optional[List[str]] = None) -> pd.DataFrame:
    """Rows as a DataFrame restricted to the first row's keys, in their order."""
    columns = column_keys(rows) if columns is None else columns
    if not rows:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame.from_records([{c: row.get(c) for c in columns} for row in rows], columns=columns)


def display_frame(rows: Sequence[Mapping[str, Any]], columns: Optional[List[str]] = None) -> pd.DataFrame:
    df = rows_to_frame(rows, columns)
    formatted = df.copy()
    for c in formatted.columns:
        formatted[c] = df[c].apply(lambda v: format_cell_value(None if _is_missing(v) else v))
    return formatted.rename(columns={c: display_label(c) for c in formatted.columns})


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (list, dict)):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def export_csv(rows: Sequence[Mapping[str, Any]]) -> bytes:
    return rows_to_frame(rows).to_csv(index=False).encode("utf-8")


def column_summary(rows: Sequence[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """Per-column non-empty counts and inferred dtype, for the dataset card."""
    df = rows_to_frame(rows)
    out: List[Dict[str, Any]] = []
    for c in df.columns:
        series = df[c]
        non_empty = series.replace({"": pd.NA}).dropna()
        try:
            is_numeric = bool(len(non_empty)) and bool(pd.to_numeric(non_empty, errors="coerce").notna().all())
        except (TypeError, ValueError):
            is_numeric = False
        out.append({
            "column": c,
            "label": display_label(c),
            "non_empty": int(len(non_empty)),
            "numeric": is_numeric,
        })
    return out
