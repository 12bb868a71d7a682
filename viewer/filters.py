from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from viewer.leaderboard import Product
from viewer.store import Dataset

DEFAULT_PRICE_RANGE: Tuple[float, float] = (0.0, 500.0)
MAX_PRICE = 1000.0


@dataclass(frozen=True)
class DatasetFilters:
    size: List[str] = field(default_factory=list)
    format: List[str] = field(default_factory=list)
    price_range: Tuple[float, float] = DEFAULT_PRICE_RANGE
    domain: List[str] = field(default_factory=list)
    language: List[str] = field(default_factory=list)
    license: List[str] = field(default_factory=list)
    quality: List[str] = field(default_factory=list)
    search_term: str = ""


def _as_str_list(values: Optional[Iterable[object]]) -> List[str]:
    if not values:
        return []
    if isinstance(values, str):
        values = [values]
    return [str(v) for v in values if v is not None and str(v).strip()]


def _as_price_range(raw: object) -> Tuple[float, float]:
    if not raw:
        return DEFAULT_PRICE_RANGE
    try:
        low, high = (float(x) for x in raw)  # type: ignore[union-attr]
    except Exception:
        return DEFAULT_PRICE_RANGE
    if low > high:
        low, high = high, low
    return low, high


def _search_term(raw: dict) -> str:
    return (raw.get("search_term") or "").strip()


def normalize_filters(raw: dict) -> DatasetFilters:
    return DatasetFilters(
        size=_as_str_list(raw.get("size")),
        format=_as_str_list(raw.get("format")),
        price_range=_as_price_range(raw.get("price_range")),
        domain=_as_str_list(raw.get("domain")),
        language=_as_str_list(raw.get("language")),
        license=_as_str_list(raw.get("license")),
        quality=_as_str_list(raw.get("quality")),
        search_term=_search_term(raw),
    )


def _matches_search(name: str, description: str, term: str) -> bool:
    term = term.lower()
    return not term or term in name.lower() or term in description.lower()


def _contains_any(value: str, wanted: List[str]) -> bool:
    lowered = value.lower()
    return any(w.lower() in lowered for w in wanted)


def matches(dataset: Dataset, filters: DatasetFilters) -> bool:
    if not _matches_search(dataset.name, dataset.description, filters.search_term):
        return False
    if filters.size and not _contains_any(dataset.size, filters.size):
        return False
    if filters.format and not _contains_any(dataset.format, filters.format):
        return False
    low, high = filters.price_range
    if dataset.price < low or dataset.price > high:
        return False
    if filters.domain and not any(d in dataset.domain for d in filters.domain):
        return False
    if filters.language and not any(lang in dataset.language for lang in filters.language):
        return False
    if filters.license and not _contains_any(dataset.license, filters.license):
        return False
    if filters.quality and not _contains_any(dataset.quality, filters.quality):
        return False
    return True


def filter_datasets(datasets: Iterable[Dataset], filters: DatasetFilters) -> List[Dataset]:
    return [d for d in datasets if matches(d, filters)]


def filter_count(filters: DatasetFilters) -> int:
    """Number of active filters, as shown on the filter button badge."""
    count = sum(
        len(values)
        for values in (filters.size, filters.format, filters.domain, filters.language, filters.license, filters.quality)
    )
    if tuple(filters.price_range) != DEFAULT_PRICE_RANGE:
        count += 1
    if filters.search_term:
        count += 1
    return count


@dataclass(frozen=True)
class ProductFilters:
    intelligence: List[str] = field(default_factory=list)
    speed: List[str] = field(default_factory=list)
    price_range: Tuple[float, float] = DEFAULT_PRICE_RANGE
    input: List[str] = field(default_factory=list)
    output: List[str] = field(default_factory=list)
    license: List[str] = field(default_factory=list)
    search_term: str = ""


def normalize_product_filters(raw: dict) -> ProductFilters:
    return ProductFilters(
        intelligence=_as_str_list(raw.get("intelligence")),
        speed=_as_str_list(raw.get("speed")),
        price_range=_as_price_range(raw.get("price_range")),
        input=_as_str_list(raw.get("input")),
        output=_as_str_list(raw.get("output")),
        license=_as_str_list(raw.get("license")),
        search_term=_search_term(raw),
    )


def product_matches(product: Product, filters: ProductFilters) -> bool:
    if not _matches_search(product.name, product.description, filters.search_term):
        return False
    if filters.intelligence and not _contains_any(product.intelligence, filters.intelligence):
        return False
    if filters.speed and not _contains_any(product.speed, filters.speed):
        return False
    low, high = filters.price_range
    if product.price < low or product.price > high:
        return False
    if filters.input and not any(i in product.input for i in filters.input):
        return False
    if filters.output and not any(o in product.output for o in filters.output):
        return False
    if filters.license and not _contains_any(product.license, filters.license):
        return False
    return True


def filter_products(products: Iterable[Product], filters: ProductFilters) -> List[Product]:
    return [p for p in products if product_matches(p, filters)]


def product_filter_count(filters: ProductFilters) -> int:
    count = sum(
        len(values)
        for values in (filters.intelligence, filters.speed, filters.input, filters.output, filters.license)
    )
    if tuple(filters.price_range) != DEFAULT_PRICE_RANGE:
        count += 1
    if filters.search_term:
        count += 1
    return count
