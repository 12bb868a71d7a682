from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, Field


class DatasetFiltersModel(BaseModel):
    size: List[str] = Field(default_factory=list)
    format: List[str] = Field(default_factory=list)
    price_range: Tuple[float, float] = (0.0, 500.0)
    domain: List[str] = Field(default_factory=list)
    language: List[str] = Field(default_factory=list)
    license: List[str] = Field(default_factory=list)
    quality: List[str] = Field(default_factory=list)
    search_term: str = ""


class ProductFiltersModel(BaseModel):
    intelligence: List[str] = Field(default_factory=list)
    speed: List[str] = Field(default_factory=list)
    price_range: Tuple[float, float] = (0.0, 500.0)
    input: List[str] = Field(default_factory=list)
    output: List[str] = Field(default_factory=list)
    license: List[str] = Field(default_factory=list)
    search_term: str = ""


class ProductModel(BaseModel):
    id: int
    name: str
    description: str = ""
    license: str = ""
    price: float = 0
    intelligence: str = ""
    speed: str = ""
    input: List[str] = Field(default_factory=list)
    output: List[str] = Field(default_factory=list)


class DatasetSummaryModel(BaseModel):
    id: int
    name: str
    description: str = ""
    updated: str = ""
    size: str = ""
    format: str = ""
    price: float = 0
    domain: List[str] = Field(default_factory=list)
    language: List[str] = Field(default_factory=list)
    license: str = ""
    quality: str = ""
    version: str = ""
    row_count: int = 0


class ColumnModel(BaseModel):
    key: str
    label: str
    width: int


class ContentPageResponse(BaseModel):
    dataset_id: int
    columns: List[ColumnModel]
    rows: List[Dict[str, Any]]
    cells: List[List[str]]
    page: int
    total_pages: int
    page_numbers: List[Union[int, str]]
    showing: str
    has_previous: bool
    has_next: bool


class CellResponse(BaseModel):
    title: str
    content: str
    char_count: int


class NotificationModel(BaseModel):
    title: str
    description: str
    variant: str = "default"
    row_count: Optional[int] = None
