"""Result records returned by the ledger services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from inventory_tracker.domain.models import Product, Rental
from inventory_tracker.repositories.mappers import product_to_record, rental_to_record
from inventory_tracker.services.errors import (
    ErrorCode,
    InsufficientStockError,
    ServiceError,
)


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a ledger operation: a success flag plus message or payload."""

    success: bool
    message: Optional[str] = None
    error: Optional[str] = None
    error_code: Optional[ErrorCode] = None
    product: Optional[Product] = None
    products: Optional[list[Product]] = None
    rental: Optional[Rental] = None
    rentals: Optional[list[Rental]] = None
    quantity_remaining: Optional[int] = None
    available: Optional[int] = None

    @classmethod
    def ok(cls, message: Optional[str] = None, **payload: Any) -> "OperationResult":
        return cls(success=True, message=message, **payload)

    @classmethod
    def from_error(cls, exc: ServiceError) -> "OperationResult":
        available = exc.available if isinstance(exc, InsufficientStockError) else None
        return cls(
            success=False,
            error=str(exc),
            error_code=exc.code,
            available=available,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Render the result as a JSON-ready mapping."""
        data: Dict[str, Any] = {"success": self.success}
        if self.message is not None:
            data["message"] = self.message
        if self.error is not None:
            data["error"] = self.error
        if self.error_code is not None:
            data["code"] = self.error_code.value
        if self.product is not None:
            data["product"] = product_to_record(self.product)
        if self.products is not None:
            data["products"] = [product_to_record(item) for item in self.products]
        if self.rental is not None:
            data["rental"] = rental_to_record(self.rental)
        if self.rentals is not None:
            data["rentals"] = [rental_to_record(item) for item in self.rentals]
        if self.quantity_remaining is not None:
            data["quantity_remaining"] = self.quantity_remaining
        if self.available is not None:
            data["available"] = self.available
        return data
