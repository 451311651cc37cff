from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any

import pandas as pd
from pydantic import BaseModel, ValidationError

from .models import MenuItem, Vendor

logger = logging.getLogger(__name__)

MENU_COLUMNS = ["id", "title", "description", "avail_time", "rating", "vendor_id", "price"]
MENU_TEXT_COLUMNS = ["id", "title", "description", "avail_time", "vendor_id"]
VENDOR_COLUMNS = ["id", "name", "latitude", "longitude", "address", "phone", "category"]
VENDOR_TEXT_COLUMNS = ["id", "name", "address", "phone", "category"]


class CatalogUnavailableError(RuntimeError):
    """The menu catalog or vendor directory could not be read."""


def _read_csv(path: Path, columns: list[str], text_columns: list[str]) -> pd.DataFrame:
    try:
        dtypes = {c: (str if c in text_columns else float) for c in columns}
        df = pd.read_csv(path, dtype=dtypes)
    except (OSError, ValueError) as exc:
        raise CatalogUnavailableError(f"Cannot read {path}") from exc

    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise CatalogUnavailableError(f"{path} is missing columns: {', '.join(missing)}")

    # NaN -> None so optional pydantic fields stay empty
    df = df[columns].astype(object)
    return df.where(pd.notna(df), None)


def _records(df: pd.DataFrame) -> list[dict[str, Any]]:
    return df.to_dict(orient="records")


def _build(model: type[BaseModel], df: pd.DataFrame, path: Path) -> list[Any]:
    try:
        return [model(**row) for row in _records(df)]
    except ValidationError as exc:
        raise CatalogUnavailableError(f"{path} has an invalid row: {exc}") from exc


class CsvMenuCatalog:
    """Read-only menu catalog backed by a CSV file, loaded on first use."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._items: list[MenuItem] | None = None
        self._lock = threading.Lock()

    def list_menu_items(self) -> list[MenuItem]:
        with self._lock:
            if self._items is None:
                df = _read_csv(self._path, MENU_COLUMNS, MENU_TEXT_COLUMNS)
                self._items = _build(MenuItem, df, self._path)
                logger.info("Loaded %d menu items from %s", len(self._items), self._path)
            return list(self._items)


class CsvVendorDirectory:
    """Read-only vendor directory backed by a CSV file."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._vendors: dict[str, Vendor] | None = None
        self._lock = threading.Lock()

    def _load(self) -> dict[str, Vendor]:
        with self._lock:
            if self._vendors is None:
                df = _read_csv(self._path, VENDOR_COLUMNS, VENDOR_TEXT_COLUMNS)
                vendors = _build(Vendor, df, self._path)
                self._vendors = {v.id: v for v in vendors}
                logger.info("Loaded %d vendors from %s", len(self._vendors), self._path)
            return self._vendors

    def get_vendor(self, vendor_id: str) -> Vendor | None:
        return self._load().get(vendor_id)

    def list_vendors(self) -> list[Vendor]:
        return list(self._load().values())
