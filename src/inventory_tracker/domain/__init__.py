"""Domain models for InventoryTracker."""

from inventory_tracker.domain.models import (
    Dataset,
    Product,
    Rental,
    RentalStatus,
)

__all__ = [
    "Dataset",
    "Product",
    "Rental",
    "RentalStatus",
]
