from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from viewer.columns import FALLBACK_COLUMN_WIDTH, MIN_COLUMN_WIDTH, ColumnWidths


@dataclass(frozen=True)
class ResizeState:
    column: str
    anchor_x: float
    anchor_width: int


class ResizeController:
    """Drag-to-resize for table columns.

    Idle is `state is None`. A pointer-down on a column handle moves to Resizing;
    pointer moves update only that column, and a pointer-up anywhere returns to
    Idle. While resizing, the document-wide style and the global listeners are
    active; both are dropped on the way back to Idle.
    """

    def __init__(self, widths: ColumnWidths):
        self.widths = widths
        self.state: Optional[ResizeState] = None
        self.document_style: Dict[str, str] = {"cursor": "", "user-select": ""}
        self.listeners_attached = False

    @property
    def is_resizing(self) -> bool:
        return self.state is not None

    @property
    def active_column(self) -> Optional[str]:
        return self.state.column if self.state else None

    def pointer_down(self, column: str, x: float) -> None:
        self.state = ResizeState(
            column=column,
            anchor_x=x,
            anchor_width=self.widths.get(column, FALLBACK_COLUMN_WIDTH),
        )
        self.document_style = {"cursor": "col-resize", "user-select": "none"}
        self.listeners_attached = True

    def pointer_move(self, x: float) -> Optional[int]:
        if self.state is None:
            return None
        width = max(MIN_COLUMN_WIDTH, int(round(self.state.anchor_width + (x - self.state.anchor_x))))
        return self.widths.set(self.state.column, width)

    def pointer_up(self) -> None:
        self.state = None
        self.document_style = {"cursor": "", "user-select": ""}
        self.listeners_attached = False

    def drag(self, column: str, start_x: float, end_x: float) -> int:
        """One full gesture: down at start_x, move to end_x, release."""
        self.pointer_down(column, start_x)
        try:
            width = self.pointer_move(end_x)
        finally:
            self.pointer_up()
        return width if width is not None else self.widths.get(column)
