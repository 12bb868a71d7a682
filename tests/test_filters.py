from dataclasses import replace

from viewer.filters import (
    DatasetFilters,
    ProductFilters,
    filter_count,
    filter_datasets,
    filter_products,
    normalize_filters,
    normalize_product_filters,
    product_filter_count,
)
from viewer.seed import default_products

from conftest import make_datasets


def names(datasets):
    return [d.name for d in datasets]


def test_default_filters_keep_everything():
    assert names(filter_datasets(make_datasets(), DatasetFilters())) == ["Movie Reviews", "Sensor Readings"]
    assert filter_count(DatasetFilters()) == 0


def test_search_matches_name_or_description_case_insensitive():
    f = normalize_filters({"search_term": "  TEMPERATURE "})
    assert names(filter_datasets(make_datasets(), f)) == ["Sensor Readings"]


def test_contains_filters_are_substring_matches():
    f = normalize_filters({"quality": ["high"]})
    assert names(filter_datasets(make_datasets(), f)) == ["Movie Reviews"]
    f = normalize_filters({"format": ["json"], "license": ["apache"]})
    assert names(filter_datasets(make_datasets(), f)) == ["Sensor Readings"]


def test_membership_filters_are_exact():
    assert names(filter_datasets(make_datasets(), normalize_filters({"domain": ["NLP"]}))) == ["Movie Reviews"]
    assert filter_datasets(make_datasets(), normalize_filters({"domain": ["nlp"]})) == []


def test_price_range_is_inclusive():
    f = normalize_filters({"price_range": [250, 100]})
    assert f.price_range == (100.0, 250.0)
    assert names(filter_datasets(make_datasets(), f)) == ["Sensor Readings"]


def test_filter_count():
    f = normalize_filters({
        "size": ["Large", "Medium"],
        "language": ["English"],
        "price_range": [0, 100],
        "search_term": "x",
    })
    assert filter_count(f) == 5


def test_normalize_drops_junk():
    f = normalize_filters({"size": "Small", "format": [None, " ", "CSV"], "price_range": "bad"})
    assert f.size == ["Small"]
    assert f.format == ["CSV"]
    assert f.price_range == (0.0, 500.0)


def test_price_range_is_not_capped():
    f = normalize_filters({"price_range": [5000, 900]})
    assert f.price_range == (900.0, 5000.0)
    pricey = replace(make_datasets()[1], price=2500)
    assert filter_datasets([pricey], f) == [pricey]


def product_names(products):
    return [p.name for p in products]


def test_default_product_filters_keep_everything():
    assert len(filter_products(default_products(), ProductFilters())) == 5
    assert product_filter_count(ProductFilters()) == 0


def test_product_level_filters_are_substring_matches():
    f = normalize_product_filters({"speed": ["very"]})
    assert product_names(filter_products(default_products(), f)) == ["Nimbus Chat", "Sparrow 7B"]
    f = normalize_product_filters({"intelligence": ["HIGH"]})
    assert product_names(filter_products(default_products(), f)) == ["Atlas LM", "Nimbus Chat"]


def test_product_modalities_are_exact_membership():
    f = normalize_product_filters({"input": ["image", "audio"]})
    assert product_names(filter_products(default_products(), f)) == ["Atlas LM", "Nimbus Chat"]
    assert filter_products(default_products(), normalize_product_filters({"output": ["Audio"]})) == []


def test_product_search_price_and_license():
    f = normalize_product_filters({"search_term": " open ", "license": ["apache"], "price_range": [0, 0]})
    assert product_names(filter_products(default_products(), f)) == ["Sparrow 7B"]
    assert product_filter_count(f) == 3
