"""Dataset records over a key/value store.

The store mirrors browser local storage: string keys, string (JSON) values, and a
whole-value write. `DatasetRepository` is the only thing the viewer talks to.
"""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import asdict, dataclass, field, replace
from datetime import date
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Protocol

from viewer.config import STORE_KEY
from viewer.errors import DatasetNotFound, StorageQuotaExceeded, StoreError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dataset:
    id: int
    name: str
    description: str = ""
    updated: str = ""
    size: str = ""
    format: str = ""
    price: float = 0
    domain: List[str] = field(default_factory=list)
    language: List[str] = field(default_factory=list)
    license: str = ""
    quality: str = ""
    version: str = "1.0"
    actual_data: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Dataset":
        known = {k: v for k, v in raw.items() if k in cls.__dataclass_fields__}
        if "actual_data" not in known and "actualData" in raw:
            known["actual_data"] = raw["actualData"]
        known["actual_data"] = list(known.get("actual_data") or [])
        return cls(**known)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def format_updated(day: date) -> str:
    """`Jan 5, 2024` style display date."""
    return f"{day:%b} {day.day}, {day.year}"


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class InMemoryKeyValueStore:
    def __init__(self, initial: Optional[Dict[str, str]] = None, quota_bytes: Optional[int] = None):
        self._data: Dict[str, str] = dict(initial or {})
        self.quota_bytes = quota_bytes

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        _check_quota(self._data, key, value, self.quota_bytes)
        self._data[key] = value


class JsonFileKeyValueStore:
    """All keys live in one JSON object on disk, rewritten on every set."""

    def __init__(self, path: Path, quota_bytes: Optional[int] = None):
        self.path = Path(path)
        self.quota_bytes = quota_bytes
        self._lock = threading.Lock()

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, json.JSONDecodeError) as exc:
            raise StoreError(f"Could not read store at {self.path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise StoreError(f"Store at {self.path} is not a JSON object")
        return {str(k): v for k, v in raw.items()}

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read_all()
            _check_quota(data, key, value, self.quota_bytes)
            data[key] = value
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                tmp.write_text(json.dumps(data), encoding="utf-8")
                tmp.replace(self.path)
            except OSError as exc:
                raise StoreError(f"Could not write store at {self.path}: {exc}") from exc


def _check_quota(data: Dict[str, str], key: str, value: str, quota: Optional[int]) -> None:
    if quota is None:
        return
    needed = sum(len(k) + len(v) for k, v in data.items() if k != key) + len(key) + len(value)
    if needed > quota:
        raise StorageQuotaExceeded(needed, quota)


class DatasetRepository:
    def __init__(
        self,
        store: KeyValueStore,
        *,
        defaults: Optional[Callable[[], List[Dataset]]] = None,
        today: Callable[[], date] = date.today,
        key: str = STORE_KEY,
    ):
        self.store = store
        self.key = key
        self.today = today
        if defaults is None:
            from viewer.seed import default_datasets

            defaults = default_datasets
        self._defaults = defaults

    def list_datasets(self) -> List[Dataset]:
        stored = self.store.get(self.key)
        if stored:
            try:
                records = json.loads(stored)
            except json.JSONDecodeError as exc:
                raise StoreError(f"Stored {self.key!r} is not valid JSON") from exc
            return [Dataset.from_dict(r) for r in records]

        datasets = self._defaults()
        self._write(datasets)
        logger.info("Seeded store with %d default datasets", len(datasets))
        return datasets

    def get_dataset(self, dataset_id: int) -> Dataset:
        for dataset in self.list_datasets():
            if dataset.id == int(dataset_id):
                return dataset
        raise DatasetNotFound(int(dataset_id))

    def save_dataset_content(self, dataset_id: int, rows: List[Dict[str, Any]]) -> Dataset:
        return self._replace_content(dataset_id, rows, touch=True)

    def clear_dataset_content(self, dataset_id: int) -> Dataset:
        return self._replace_content(dataset_id, [], touch=False)

    def _replace_content(self, dataset_id: int, rows: List[Dict[str, Any]], *, touch: bool) -> Dataset:
        # re-read right before writing so concurrent edits to other records survive
        datasets = self.list_datasets()
        updated: Optional[Dataset] = None
        out: List[Dataset] = []
        for dataset in datasets:
            if dataset.id == int(dataset_id):
                changes: Dict[str, Any] = {"actual_data": list(rows)}
                if touch:
                    changes["updated"] = format_updated(self.today())
                dataset = replace(dataset, **changes)
                updated = dataset
            out.append(dataset)
        if updated is None:
            raise DatasetNotFound(int(dataset_id))
        self._write(out)
        logger.info("Wrote %d rows for dataset %s", len(rows), dataset_id)
        return updated

    def _write(self, datasets: List[Dataset]) -> None:
        try:
            payload = json.dumps([d.to_dict() for d in datasets], allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise StoreError(f"Dataset content is not serializable as JSON: {exc}") from exc
        self.store.set(self.key, payload)
