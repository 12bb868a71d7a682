from __future__ import annotations

import json
import logging
from typing import Any, Dict, List

from viewer.config import ALLOWED_EXTENSIONS
from viewer.errors import UnsupportedFileType

Row = Dict[str, Any]

logger = logging.getLogger(__name__)


def _non_blank_lines(text: str) -> List[str]:
    return [line for line in text.split("\n") if line.strip()]


def _clean_field(value: str) -> str:
    return value.strip().strip('"')


def parse_csv(text: str) -> List[Row]:
    """Naive comma split: quoted commas and embedded newlines are not supported."""
    lines = _non_blank_lines(text)
    if not lines:
        return []

    headers = [_clean_field(h) for h in lines[0].split(",")]
    rows: List[Row] = []
    for index, line in enumerate(lines[1:], start=1):
        values = [_clean_field(v) for v in line.split(",")]
        row: Row = {"id": index}
        for i, header in enumerate(headers):
            row[header] = values[i] if i < len(values) else ""
        rows.append(row)
    return rows


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_jsonl(text: str) -> List[Row]:
    rows: List[Row] = []
    for index, line in enumerate(_non_blank_lines(text), start=1):
        try:
            parsed = json.loads(line, parse_constant=_reject_constant)
        except ValueError:
            logger.debug("Line %d is not valid JSON, keeping raw text", index)
            rows.append({"id": index, "data": line})
            continue
        if isinstance(parsed, dict):
            # literal fields win over the synthetic id
            rows.append({"id": index, **parsed})
        else:
            rows.append({"id": index, "data": parsed})
    return rows


def file_extension(filename: str) -> str:
    _, dot, ext = (filename or "").rpartition(".")
    return ext.lower() if dot else ""


def parse_upload(filename: str, text: str) -> List[Row]:
    ext = file_extension(filename)
    if ext not in ALLOWED_EXTENSIONS:
        raise UnsupportedFileType(filename)
    if ext == "csv":
        return parse_csv(text)
    return parse_jsonl(text)
