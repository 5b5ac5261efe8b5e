"""Ledger services for products and rentals."""

from inventory_tracker.services.product_service import ProductService
from inventory_tracker.services.rental_service import RentalService
from inventory_tracker.services.results import OperationResult

__all__ = ["OperationResult", "ProductService", "RentalService"]
