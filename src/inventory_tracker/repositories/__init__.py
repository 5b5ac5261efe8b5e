"""Repositories for data access."""

from inventory_tracker.repositories.inventory_store import InventoryStore
from inventory_tracker.repositories.mappers import (
    product_from_record,
    product_to_record,
    rental_from_record,
    rental_to_record,
)

__all__ = [
    "InventoryStore",
    "product_from_record",
    "product_to_record",
    "rental_from_record",
    "rental_to_record",
]
