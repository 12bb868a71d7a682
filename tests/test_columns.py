import pytest

from viewer.columns import ColumnWidths, column_keys, default_width, display_label


def test_column_keys_use_first_row_order():
    rows = [{"b": 1, "a": 2}, {"a": 3, "c": 4}]
    assert column_keys(rows) == ["b", "a"]
    assert column_keys([]) == []


@pytest.mark.parametrize(
    "key, label",
    [
        ("name", "Name"),
        ("sepal_length", "Sepal length"),
        ("customerId", "Customer Id"),
        ("purchase_date", "Purchase date"),
        ("", ""),
    ],
)
def test_display_label(key, label):
    assert display_label(key) == label


@pytest.mark.parametrize(
    "key, width",
    [
        ("review", 300),
        ("Product_Description", 300),
        ("context", 300),
        ("customer_name", 150),
        ("Location", 150),
        ("id", 120),
        ("abcdefghijklmnopq", 136),
    ],
)
def test_default_width(key, width):
    assert default_width(key) == width


def test_seed_is_idempotent():
    widths = ColumnWidths()
    assert widths.seed(["id", "review"]) is True
    first = widths.as_dict()
    assert widths.seed(["id", "review"]) is False
    assert widths.as_dict() == first


def test_seed_never_overwrites_existing_width():
    widths = ColumnWidths()
    widths.seed(["name"])
    widths.set("name", 420)
    widths.seed(["name", "score"])
    assert widths.get("name") == 420
    assert widths.get("score") == 120


def test_set_applies_floor_and_reset_forgets():
    widths = ColumnWidths()
    assert widths.set("a", 10) == 50
    widths.reset()
    assert "a" not in widths
    assert len(widths) == 0
