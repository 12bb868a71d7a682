from __future__ import annotations

import logging
import math
from dataclasses import asdict
from functools import lru_cache
from typing import Optional

import numpy as np
import pandas as pd
from fastapi import Depends, FastAPI, File, Query, UploadFile
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from api.schemas import (
    CellResponse,
    ColumnModel,
    ContentPageResponse,
    DatasetFiltersModel,
    DatasetSummaryModel,
    NotificationModel,
    ProductFiltersModel,
    ProductModel,
)
from viewer import config
from viewer.errors import DatasetNotFound
from viewer.filters import (
    filter_count,
    filter_datasets,
    filter_products,
    normalize_filters,
    normalize_product_filters,
    product_filter_count,
)
from viewer.frame import column_summary, export_csv
from viewer.leaderboard import RandomScoreProvider, build_leaderboard, leaderboard_chart, to_vega_spec
from viewer.seed import default_products
from viewer.session import Notification, ViewerSession
from viewer.store import Dataset, DatasetRepository, JsonFileKeyValueStore


app = FastAPI(title="Dataset Viewer API", version="0.1.0")
logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_repository() -> DatasetRepository:
    store = JsonFileKeyValueStore(config.STORE_PATH, quota_bytes=config.store_quota())
    logger.info("Using dataset store at %s", config.STORE_PATH)
    return DatasetRepository(store)


def _json(data: object, status_code: int = 200) -> JSONResponse:
    """Return JSON with safe encoding for pandas/numpy objects."""

    def _safe_float(value: object) -> float | None:
        try:
            out = float(value)  # type: ignore[arg-type]
        except Exception:
            return None
        if math.isnan(out) or math.isinf(out):
            return None
        return out

    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(
            data,
            custom_encoder={
                type(pd.NA): lambda _: None,
                np.integer: int,
                float: _safe_float,
                np.floating: _safe_float,
                np.bool_: bool,
                pd.Timestamp: lambda ts: ts.isoformat(),
            },
        ),
    )


def _error(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": str(exc), "type": type(exc).__name__})


_NOTIFICATION_STATUS = {
    "unsupported_type": 415,
    "undecodable": 400,
    "empty": 422,
    "not_saved": 507,
}


def _notification(note: Notification) -> JSONResponse:
    payload = NotificationModel(
        title=note.title,
        description=note.description,
        variant=note.variant,
        row_count=note.row_count,
    )
    return _json(payload, status_code=_NOTIFICATION_STATUS.get(note.reason, 200))


def _summary(dataset: Dataset) -> DatasetSummaryModel:
    raw = dataset.to_dict()
    raw.pop("actual_data", None)
    return DatasetSummaryModel(**raw, row_count=len(dataset.actual_data))


@app.exception_handler(DatasetNotFound)
def dataset_not_found(_request, exc: DatasetNotFound):
    return _error(404, exc)


@app.get("/datasets")
def list_datasets(repo: DatasetRepository = Depends(get_repository)):
    try:
        return _json({"datasets": [_summary(d) for d in repo.list_datasets()]})
    except Exception as exc:
        logger.exception("list_datasets failed")
        return _error(500, exc)


@app.post("/datasets/search")
def search_datasets(filters: DatasetFiltersModel, repo: DatasetRepository = Depends(get_repository)):
    try:
        f = normalize_filters(filters.model_dump())
        matched = filter_datasets(repo.list_datasets(), f)
        return _json({"datasets": [_summary(d) for d in matched], "active_filters": filter_count(f)})
    except Exception as exc:
        logger.exception("search_datasets failed")
        return _error(500, exc)


@app.post("/products/search")
def search_products(filters: ProductFiltersModel):
    try:
        f = normalize_product_filters(filters.model_dump())
        matched = filter_products(default_products(), f)
        return _json({
            "products": [ProductModel(**asdict(p)) for p in matched],
            "active_filters": product_filter_count(f),
        })
    except Exception as exc:
        logger.exception("search_products failed")
        return _error(500, exc)


@app.get("/datasets/{dataset_id}")
def get_dataset(dataset_id: int, repo: DatasetRepository = Depends(get_repository)):
    dataset = repo.get_dataset(dataset_id)
    try:
        return _json({"dataset": _summary(dataset), "columns": column_summary(dataset.actual_data)})
    except Exception as exc:
        logger.exception("get_dataset failed")
        return _error(500, exc)


@app.get("/datasets/{dataset_id}/content")
def dataset_content(
    dataset_id: int,
    page: int = Query(default=1),
    page_size: Optional[int] = Query(default=None, ge=1, le=500),
    repo: DatasetRepository = Depends(get_repository),
):
    session = ViewerSession(repo, dataset_id, page_size=page_size)
    try:
        session.go_to(page)
        payload = ContentPageResponse(
            dataset_id=dataset_id,
            columns=[ColumnModel(**c) for c in session.column_headers()],
            rows=session.visible_rows,
            cells=session.table_cells(),
            page=session.current_page,
            total_pages=session.total_pages,
            page_numbers=session.page_buttons,
            showing=session.page_range.label(),
            has_previous=session.can_go_previous,
            has_next=session.can_go_next,
        )
        return _json(payload)
    except Exception as exc:
        logger.exception("dataset_content failed")
        return _error(500, exc)


@app.get("/datasets/{dataset_id}/content/{row_id}/{column}")
def inspect_cell(dataset_id: int, row_id: str, column: str, repo: DatasetRepository = Depends(get_repository)):
    session = ViewerSession(repo, dataset_id)
    row = session.find_row(row_id)
    if row is None or column not in session.columns:
        return JSONResponse(status_code=404, content={"error": f"No cell {row_id}/{column}", "type": "CellNotFound"})
    view = session.inspect(row, column)
    return _json(CellResponse(title=view.title, content=view.content, char_count=view.char_count))


@app.post("/datasets/{dataset_id}/content")
def upload_content(
    dataset_id: int,
    file: UploadFile = File(...),
    repo: DatasetRepository = Depends(get_repository),
):
    session = ViewerSession(repo, dataset_id)
    note = session.upload_bytes(file.filename or "", file.file.read())
    return _notification(note)


@app.delete("/datasets/{dataset_id}/content")
def delete_content(dataset_id: int, repo: DatasetRepository = Depends(get_repository)):
    session = ViewerSession(repo, dataset_id)
    return _notification(session.delete_content())


@app.get("/datasets/{dataset_id}/export")
def export_dataset(dataset_id: int, repo: DatasetRepository = Depends(get_repository)):
    dataset = repo.get_dataset(dataset_id)
    filename = f"dataset-{dataset.id}.csv"
    return Response(
        content=export_csv(dataset.actual_data),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@app.get("/datasets/{dataset_id}/leaderboard")
def dataset_leaderboard(
    dataset_id: int,
    seed: Optional[int] = Query(default=None),
    repo: DatasetRepository = Depends(get_repository),
):
    dataset = repo.get_dataset(dataset_id)
    try:
        entries = build_leaderboard(default_products(), dataset, RandomScoreProvider(seed))
        return _json({
            "dataset_id": dataset.id,
            "entries": [e.to_dict() for e in entries],
            "chart": to_vega_spec(leaderboard_chart(entries)),
        })
    except Exception as exc:
        logger.exception("dataset_leaderboard failed")
        return _error(500, exc)
