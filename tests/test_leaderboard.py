from datetime import datetime

from viewer.leaderboard import (
    Evaluation,
    LeaderboardEntry,
    Product,
    RandomScoreProvider,
    build_leaderboard,
    leaderboard_chart,
    leaderboard_frame,
    to_vega_spec,
)
from viewer.seed import default_products

from conftest import make_datasets

NOW = datetime(2024, 3, 5, 12, 0)


class FixedScores:
    def __init__(self, scores):
        self.scores = scores

    def evaluate(self, product, dataset):
        return Evaluation(score=self.scores[product.name], evaluated_at=NOW)


def test_entries_are_ranked_by_score_descending():
    products = [Product(1, "a"), Product(2, "b"), Product(3, "c")]
    entries = build_leaderboard(products, make_datasets()[0], FixedScores({"a": 70.0, "b": 95.5, "c": 82.1}))
    assert [(e.rank, e.product.name) for e in entries] == [(1, "b"), (2, "c"), (3, "a")]


def test_random_scores_are_bounded_and_reproducible():
    dataset = make_datasets()[0]
    first = build_leaderboard(default_products(), dataset, RandomScoreProvider(7, now=lambda: NOW))
    again = build_leaderboard(default_products(), dataset, RandomScoreProvider(7, now=lambda: NOW))
    assert [e.to_dict() for e in first] == [e.to_dict() for e in again]
    for entry in first:
        assert 60.0 <= entry.score <= 99.9
        assert round(entry.score, 1) == entry.score
        assert (NOW - entry.evaluated_at).days <= 30


def test_evaluation_date_format():
    entry = LeaderboardEntry(rank=1, product=Product(1, "a"), score=90.0, evaluated_at=datetime(2024, 1, 5, 15, 4))
    assert entry.evaluation_date == "Jan 5, 2024, 3:04 PM"
    midnight = LeaderboardEntry(rank=1, product=Product(1, "a"), score=90.0, evaluated_at=datetime(2024, 1, 5, 0, 30))
    assert midnight.evaluation_date == "Jan 5, 2024, 12:30 AM"


def test_chart_spec_is_plain_dict():
    entries = build_leaderboard(default_products(), make_datasets()[0], RandomScoreProvider(1))
    assert list(leaderboard_frame(entries)["rank"]) == [1, 2, 3, 4, 5]
    spec = to_vega_spec(leaderboard_chart(entries))
    assert spec["mark"] in ("bar", {"type": "bar"})
    assert spec["encoding"]["x"]["field"] == "score"
