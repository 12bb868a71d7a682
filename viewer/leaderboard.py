"""Evaluation leaderboard for a dataset.

Scores come from a `ScoreProvider`; the bundled `RandomScoreProvider` is a mock
that draws uniform scores, so nothing here measures real model quality.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol

import altair as alt
import pandas as pd

from viewer.store import Dataset

alt.data_transformers.disable_max_rows()

SCORE_MIN = 60.0
SCORE_MAX = 99.9
EVALUATION_WINDOW_DAYS = 30


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    description: str = ""
    license: str = ""
    price: float = 0
    intelligence: str = ""
    speed: str = ""
    input: List[str] = field(default_factory=list)
    output: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Evaluation:
    score: float
    evaluated_at: datetime


@dataclass(frozen=True)
class LeaderboardEntry:
    rank: int
    product: Product
    score: float
    evaluated_at: datetime

    @property
    def evaluation_date(self) -> str:
        hour = self.evaluated_at.hour % 12 or 12
        ampm = "AM" if self.evaluated_at.hour < 12 else "PM"
        d = self.evaluated_at
        return f"{d:%b} {d.day}, {d.year}, {hour}:{d:%M} {ampm}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rank": self.rank,
            "product_id": self.product.id,
            "product": self.product.name,
            "score": self.score,
            "evaluation_date": self.evaluation_date,
        }


class ScoreProvider(Protocol):
    def evaluate(self, product: Product, dataset: Dataset) -> Evaluation:
        ...


class RandomScoreProvider:
    def __init__(self, seed: Optional[int] = None, now: Callable[[], datetime] = datetime.now):
        self._rng = random.Random(seed)
        self._now = now

    def evaluate(self, product: Product, dataset: Dataset) -> Evaluation:
        score = round(self._rng.uniform(SCORE_MIN, SCORE_MAX), 1)
        ago = timedelta(seconds=self._rng.uniform(0, EVALUATION_WINDOW_DAYS * 24 * 3600))
        return Evaluation(score=score, evaluated_at=self._now() - ago)


def build_leaderboard(products: Iterable[Product], dataset: Dataset, provider: ScoreProvider) -> List[LeaderboardEntry]:
    scored = [(product, provider.evaluate(product, dataset)) for product in products]
    scored.sort(key=lambda pair: pair[1].score, reverse=True)
    return [
        LeaderboardEntry(rank=i, product=product, score=evaluation.score, evaluated_at=evaluation.evaluated_at)
        for i, (product, evaluation) in enumerate(scored, start=1)
    ]


def leaderboard_frame(entries: List[LeaderboardEntry]) -> pd.DataFrame:
    return pd.DataFrame(
        [e.to_dict() for e in entries],
        columns=["rank", "product_id", "product", "score", "evaluation_date"],
    )


def leaderboard_chart(entries: List[LeaderboardEntry]) -> alt.Chart:
    df = leaderboard_frame(entries)
    return (
        alt.Chart(df)
        .mark_bar()
        .encode(
            x=alt.X("score:Q", title="Score", scale=alt.Scale(domain=[0, 100])),
            y=alt.Y("product:N", title="Product", sort="-x"),
            tooltip=["rank", "product", alt.Tooltip("score:Q", format=".1f"), "evaluation_date"],
        )
    )


def to_vega_spec(chart: alt.Chart) -> Dict[str, Any]:
    """Convert an Altair chart into a Vega-Lite spec dict (JSON-serializable)."""
    return chart.to_dict()
