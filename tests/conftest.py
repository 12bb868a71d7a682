from __future__ import annotations

from datetime import date
from typing import List

import pytest

from viewer.errors import StoreError
from viewer.session import ViewerSession
from viewer.store import Dataset, DatasetRepository, InMemoryKeyValueStore


def make_datasets() -> List[Dataset]:
    reviews = [
        {"id": i, "title": f"Movie {i}", "review_text": f"Review number {i}", "rating": i % 10}
        for i in range(1, 26)
    ]
    return [
        Dataset(
            id=1,
            name="Movie Reviews",
            description="Short movie reviews for sentiment analysis",
            updated="Jan 15, 2024",
            size="Medium",
            format="CSV",
            price=0,
            domain=["NLP"],
            language=["English"],
            license="MIT",
            quality="Very High",
            actual_data=reviews,
        ),
        Dataset(
            id=2,
            name="Sensor Readings",
            description="Hourly temperature readings",
            updated="Feb 1, 2024",
            size="Large",
            format="JSONL",
            price=250,
            domain=["IoT"],
            language=["Multilingual"],
            license="Apache 2.0",
            quality="Medium",
            actual_data=[],
        ),
    ]


class FlakyStore(InMemoryKeyValueStore):
    """Accepts writes until `fail` is switched on."""

    def __init__(self):
        super().__init__()
        self.fail = False
        self.writes = 0

    def set(self, key: str, value: str) -> None:
        if self.fail:
            raise StoreError("disk full")
        self.writes += 1
        super().set(key, value)


@pytest.fixture
def store() -> FlakyStore:
    return FlakyStore()


@pytest.fixture
def repo(store) -> DatasetRepository:
    repository = DatasetRepository(store, defaults=make_datasets, today=lambda: date(2024, 3, 5))
    repository.list_datasets()
    return repository


@pytest.fixture
def session(repo) -> ViewerSession:
    return ViewerSession(repo, 1, page_size=20, delete_delay=0)
