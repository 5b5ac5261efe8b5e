"""JSON document storage for the inventory dataset."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Iterable, TypeVar

from inventory_tracker.domain.models import Dataset
from inventory_tracker.logging_config import get_logger
from inventory_tracker.repositories.mappers import (
    product_from_record,
    product_to_record,
    rental_from_record,
    rental_to_record,
)

T = TypeVar("T")


class InventoryStore:
    """Loads and persists the whole dataset as one JSON document.

    Every call goes to disk; there is no in-memory cache and no locking, so
    two callers interleaving load and save will lose one of the writes.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._logger = get_logger(self.__class__.__name__)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Dataset:
        """Read the dataset, falling back to an empty one on any read failure."""
        if not self._path.exists():
            return Dataset()
        try:
            text = self._path.read_text(encoding="utf-8")
            data = json.loads(text) if text.strip() else {}
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            self._logger.warning(
                "Unreadable inventory file %s, using an empty dataset",
                self._path,
                exc_info=True,
            )
            return Dataset()

        if isinstance(data, list):
            # Legacy layout: the document is just the product list.
            return Dataset(
                products=self._map_records(data, product_from_record, "product"),
                rentals=[],
            )
        if not isinstance(data, dict):
            self._logger.warning(
                "Unexpected inventory document type %s in %s, using an empty dataset",
                type(data).__name__,
                self._path,
            )
            return Dataset()
        return Dataset(
            products=self._map_records(
                data.get("products") or [], product_from_record, "product"
            ),
            rentals=self._map_records(
                data.get("rentals") or [], rental_from_record, "rental"
            ),
        )

    def save(self, dataset: Dataset) -> bool:
        """Overwrite the document with the complete dataset."""
        payload = {
            "products": [product_to_record(product) for product in dataset.products],
            "rentals": [rental_to_record(rental) for rental in dataset.rentals],
        }
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            text = json.dumps(payload, ensure_ascii=False, indent=2, allow_nan=False)
            self._path.write_text(text, encoding="utf-8")
        except (OSError, TypeError, ValueError):
            self._logger.exception("Failed to write inventory file %s", self._path)
            return False
        return True

    def _map_records(
        self,
        records: Iterable[Any],
        mapper: Callable[[Any], T],
        label: str,
    ) -> list[T]:
        if not isinstance(records, list):
            self._logger.warning("Ignoring non-list %s collection", label)
            return []
        mapped: list[T] = []
        for record in records:
            try:
                mapped.append(mapper(record))
            except (KeyError, TypeError, ValueError, OverflowError):
                self._logger.warning("Skipping malformed %s record: %r", label, record)
        return mapped
