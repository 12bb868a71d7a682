from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

from viewer.columns import display_label

PREVIEW_CHARS = 100


def stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def format_cell_value(value: Any) -> str:
    """Table preview of a cell: long strings are cut to 100 chars plus an ellipsis."""
    if value is None:
        return ""
    if isinstance(value, str) and len(value) > PREVIEW_CHARS:
        return f"{value[:PREVIEW_CHARS]}..."
    return stringify(value)


@dataclass(frozen=True)
class SelectedCell:
    row: Dict[str, Any]
    column: str
    value: Any


@dataclass(frozen=True)
class CellView:
    title: str
    content: str
    char_count: int


class CellInspector:
    def __init__(self) -> None:
        self.selected: Optional[SelectedCell] = None

    @property
    def is_open(self) -> bool:
        return self.selected is not None

    @property
    def listens_for_keys(self) -> bool:
        return self.is_open

    def open(self, row: Dict[str, Any], column: str, value: Any) -> CellView:
        self.selected = SelectedCell(row=row, column=column, value=value)
        return self.view()

    def close(self) -> None:
        self.selected = None

    def handle_key(self, key: str) -> bool:
        """Returns True when the key closed the dialog."""
        if self.is_open and key == "Escape":
            self.close()
            return True
        return False

    def view(self) -> Optional[CellView]:
        if self.selected is None:
            return None
        content = stringify(self.selected.value)
        return CellView(
            title=display_label(self.selected.column),
            content=content,
            char_count=len(content),
        )
