from __future__ import annotations

import re
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

MIN_COLUMN_WIDTH = 50
FALLBACK_COLUMN_WIDTH = 120

WIDE_COLUMN_HINTS = ("review", "text", "description")
MEDIUM_COLUMN_HINTS = ("name", "location")


def column_keys(rows: Sequence[Mapping[str, object]]) -> List[str]:
    if not rows:
        return []
    return list(rows[0].keys())


def display_label(key: str) -> str:
    """`purchase_date` -> "Purchase date", `customerId` -> "Customer Id"."""
    spaced = re.sub(r"([A-Z])", r" \1", key)
    if spaced:
        spaced = spaced[0].upper() + spaced[1:]
    return spaced.replace("_", " ")


def default_width(key: str) -> int:
    lowered = key.lower()
    if any(hint in lowered for hint in WIDE_COLUMN_HINTS):
        return 300
    if any(hint in lowered for hint in MEDIUM_COLUMN_HINTS):
        return 150
    return max(len(key) * 8, FALLBACK_COLUMN_WIDTH)


class ColumnWidths:
    """Pixel widths per column key.

    Keys are seeded once, the first time they are seen, and never recomputed
    afterwards, even when the rows are replaced by a new upload. `reset()` forgets
    every key; callers use it when the dataset being viewed changes.
    """

    def __init__(self, widths: Optional[Mapping[str, int]] = None):
        self._widths: Dict[str, int] = dict(widths or {})

    def seed(self, columns: Iterable[str]) -> bool:
        added = False
        for column in columns:
            if column not in self._widths:
                self._widths[column] = default_width(column)
                added = True
        return added

    def get(self, column: str, default: int = FALLBACK_COLUMN_WIDTH) -> int:
        return self._widths.get(column, default)

    def set(self, column: str, width: int) -> int:
        width = max(MIN_COLUMN_WIDTH, int(width))
        self._widths[column] = width
        return width

    def reset(self) -> None:
        self._widths.clear()

    def as_dict(self) -> Dict[str, int]:
        return dict(self._widths)

    def __contains__(self, column: object) -> bool:
        return column in self._widths

    def __len__(self) -> int:
        return len(self._widths)
