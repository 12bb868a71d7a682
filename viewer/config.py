from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional


DATA_DIR = Path(__file__).resolve().parents[1]

STORE_PATH = Path(os.environ.get("DATASET_VIEWER_STORE_PATH", DATA_DIR / "datasets.json"))
STORE_KEY = "datasets"

PAGE_SIZE_DEFAULT = 20
DELETE_DELAY_DEFAULT = 0.5
# Roughly what browsers grant to localStorage per origin.
STORE_QUOTA_DEFAULT = 5 * 1024 * 1024

ALLOWED_EXTENSIONS = ("csv", "jsonl")


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logging.getLogger(__name__).warning("Ignoring non-integer %s=%r", name, raw)
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logging.getLogger(__name__).warning("Ignoring non-numeric %s=%r", name, raw)
        return default


def page_size() -> int:
    return max(1, _env_int("DATASET_VIEWER_PAGE_SIZE", PAGE_SIZE_DEFAULT))


def delete_delay() -> float:
    return max(0.0, _env_float("DATASET_VIEWER_DELETE_DELAY", DELETE_DELAY_DEFAULT))


def store_quota() -> Optional[int]:
    """Quota in bytes for the file store; 0 or negative disables the check."""
    quota = _env_int("DATASET_VIEWER_STORE_QUOTA", STORE_QUOTA_DEFAULT)
    return quota if quota > 0 else None


def cors_origins() -> List[str]:
    raw = os.environ.get("DATASET_VIEWER_CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
    return [o.strip() for o in raw.split(",") if o.strip()]


def configure_logging(level: Optional[str] = None) -> None:
    level = (level or os.environ.get("DATASET_VIEWER_LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
