from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional

from viewer import config
from viewer.columns import ColumnWidths, column_keys, display_label
from viewer.errors import EmptyUpload, UnsupportedFileType, ViewerError
from viewer.inspector import CellInspector, CellView, format_cell_value
from viewer.pagination import (
    PageRange,
    PageToken,
    clamp_page,
    has_next,
    has_previous,
    next_page,
    page_numbers,
    page_range,
    page_slice,
    previous_page,
    total_pages,
)
from viewer.parsers import Row, file_extension, parse_upload
from viewer.resize import ResizeController
from viewer.store import Dataset, DatasetRepository

logger = logging.getLogger(__name__)

Variant = Literal["default", "destructive"]


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    variant: Variant = "default"
    reason: str = ""
    row_count: Optional[int] = None

    @property
    def is_error(self) -> bool:
        return self.variant == "destructive"


class ViewerSession:
    """Transient state of the table viewer for one dataset.

    The rows shown are a working copy: an upload replaces them immediately and
    persistence is best-effort, so a failed store write still leaves the new rows
    on screen.
    """

    def __init__(
        self,
        repository: DatasetRepository,
        dataset_id: int,
        *,
        page_size: Optional[int] = None,
        delete_delay: Optional[float] = None,
    ):
        self.repository = repository
        self.page_size = page_size or config.page_size()
        self.delete_delay = config.delete_delay() if delete_delay is None else delete_delay
        self.widths = ColumnWidths()
        self.resize = ResizeController(self.widths)
        self.inspector = CellInspector()
        self.dataset: Dataset = repository.get_dataset(dataset_id)
        self.rows: List[Row] = list(self.dataset.actual_data)
        self.current_page = 1
        self.is_uploading = False
        self.is_deleting = False
        self.widths.seed(self.columns)

    def switch_dataset(self, dataset_id: int) -> None:
        if int(dataset_id) == self.dataset.id:
            return
        self.dataset = self.repository.get_dataset(dataset_id)
        self.rows = list(self.dataset.actual_data)
        self.current_page = 1
        self.resize.pointer_up()
        self.inspector.close()
        self.widths.reset()
        self.widths.seed(self.columns)

    # ---- table state ----
    @property
    def columns(self) -> List[str]:
        return column_keys(self.rows)

    @property
    def total_pages(self) -> int:
        return total_pages(len(self.rows), self.page_size)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def visible_rows(self) -> List[Row]:
        return page_slice(self.rows, self.current_page, self.page_size)

    @property
    def page_buttons(self) -> List[PageToken]:
        return page_numbers(self.current_page, self.total_pages)

    @property
    def page_range(self) -> PageRange:
        return page_range(len(self.rows), self.current_page, self.page_size)

    @property
    def can_go_previous(self) -> bool:
        return has_previous(self.current_page)

    @property
    def can_go_next(self) -> bool:
        return has_next(self.current_page, self.total_pages)

    def go_to(self, page: int) -> int:
        self.current_page = clamp_page(page, self.total_pages)
        return self.current_page

    def next_page(self) -> int:
        self.current_page = next_page(self.current_page, self.total_pages)
        return self.current_page

    def previous_page(self) -> int:
        self.current_page = previous_page(self.current_page, self.total_pages)
        return self.current_page

    def column_headers(self) -> List[Dict[str, Any]]:
        return [
            {"key": c, "label": display_label(c), "width": self.widths.get(c)}
            for c in self.columns
        ]

    def table_cells(self) -> List[List[str]]:
        cols = self.columns
        return [[format_cell_value(row.get(c)) for c in cols] for row in self.visible_rows]

    def inspect(self, row: Row, column: str) -> CellView:
        return self.inspector.open(row, column, row.get(column))

    def find_row(self, row_id: Any) -> Optional[Row]:
        for row in self.rows:
            if str(row.get("id")) == str(row_id):
                return row
        return None

    # ---- content changes ----
    def upload(self, filename: str, text: str) -> Notification:
        try:
            rows = parse_upload(filename, text)
        except UnsupportedFileType:
            logger.info("Rejected upload %r: unsupported extension", filename)
            return Notification(
                "Invalid File Format", "Please upload a CSV or JSONL file.", "destructive", reason="unsupported_type"
            )

        self.is_uploading = True
        try:
            if not rows:
                raise EmptyUpload(filename)
            self.rows = rows
            self.current_page = 1
            self.widths.seed(self.columns)
            try:
                self.dataset = self.repository.save_dataset_content(self.dataset.id, rows)
            except ViewerError:
                logger.exception("Could not persist %d rows for dataset %s", len(rows), self.dataset.id)
                return Notification(
                    "Upload Error",
                    f"Loaded {len(rows)} records from {filename}, but they could not be saved.",
                    "destructive",
                    reason="not_saved",
                    row_count=len(rows),
                )
        except EmptyUpload:
            logger.info("Upload %r produced no rows", filename)
            return Notification(
                "Empty File", "The uploaded file appears to be empty or invalid.", "destructive", reason="empty"
            )
        finally:
            self.is_uploading = False

        logger.info("Loaded %d records from %s into dataset %s", len(rows), filename, self.dataset.id)
        return Notification(
            "File Uploaded Successfully", f"Loaded {len(rows)} records from {filename}", row_count=len(rows)
        )

    def upload_bytes(self, filename: str, payload: bytes) -> Notification:
        if file_extension(filename) not in config.ALLOWED_EXTENSIONS:
            return self.upload(filename, "")
        try:
            text = payload.decode("utf-8-sig")
        except UnicodeDecodeError:
            logger.warning("Upload %r is not valid UTF-8", filename)
            return Notification(
                "Upload Error",
                "Failed to process the uploaded file. Please check the format and try again.",
                "destructive",
                reason="undecodable",
            )
        return self.upload(filename, text)

    def delete_content(self) -> Notification:
        self.is_deleting = True
        try:
            self.dataset = self.repository.clear_dataset_content(self.dataset.id)
            if self.delete_delay:
                time.sleep(self.delete_delay)
        except ViewerError:
            logger.exception("Could not clear content of dataset %s", self.dataset.id)
            return Notification(
                "Error", "Failed to delete dataset content. Please try again.", "destructive", reason="not_saved"
            )
        finally:
            self.is_deleting = False

        self.rows = []
        self.current_page = 1
        self.inspector.close()
        return Notification(
            "Dataset Content Deleted",
            f"The content for {self.dataset.name} has been successfully deleted.",
        )
