"""Rental ledger: check-out and return of single product units."""

from __future__ import annotations

import math
import time
from datetime import date

from inventory_tracker.domain.models import Dataset, Rental, RentalStatus
from inventory_tracker.services.base import LedgerService
from inventory_tracker.services.errors import (
    NotFoundError,
    OutOfStockError,
    ServiceError,
    ValidationError,
)
from inventory_tracker.services.results import OperationResult


def _next_rental_id(dataset: Dataset) -> int:
    candidate = time.time_ns() // 1_000_000
    if dataset.rentals:
        highest = max(rental.rental_id for rental in dataset.rentals)
        if candidate <= highest:
            candidate = highest + 1
    return candidate


class RentalService(LedgerService):
    """Service for rental business rules."""

    def create(
        self,
        product_id: int,
        renter_name: str,
        return_date: str,
        phone_number: str,
        address: str,
        amount_paid: float,
    ) -> OperationResult:
        try:
            dataset = self._store.load()
            product = dataset.find_product(product_id)
            if product is None:
                raise NotFoundError(f"Product {product_id} not found")
            if not math.isfinite(amount_paid) or amount_paid < 0:
                raise ValidationError("Amount paid must be a non-negative number")
            if product.quantity <= 0:
                raise OutOfStockError(f"Product {product_id} not available for rent")

            product.quantity -= 1
            rental = Rental(
                rental_id=_next_rental_id(dataset),
                product_id=product.id,
                product_name=product.name,
                renter_name=renter_name.strip(),
                rent_date=date.today().isoformat(),
                return_date=return_date,
                phone_number=phone_number.strip(),
                address=address.strip(),
                amount_paid=float(amount_paid),
                status=RentalStatus.ACTIVE,
            )
            dataset.rentals.append(rental)
            self._commit(dataset, "Failed to save rental")
        except ServiceError as exc:
            return self._fail("record rental", exc)
        self._logger.info(
            "Recorded rental id=%s for product id=%s", rental.rental_id, product_id
        )
        return OperationResult.ok("Rental recorded", rental=rental)

    def mark_returned(self, rental_id: int) -> OperationResult:
        try:
            dataset = self._store.load()
            rental = dataset.find_rental(rental_id)
            if rental is None:
                raise NotFoundError(f"Rental {rental_id} not found")
            if rental.status == RentalStatus.RETURNED:
                return OperationResult.ok("Rental already returned", rental=rental)

            rental.status = RentalStatus.RETURNED
            rental.returned_date = date.today().isoformat()
            product = dataset.find_product(rental.product_id)
            if product is not None:
                product.quantity += 1
            else:
                self._logger.warning(
                    "Rental id=%s returned for deleted product id=%s",
                    rental_id,
                    rental.product_id,
                )
            self._commit(dataset, "Failed to update rental")
        except ServiceError as exc:
            return self._fail("return rental", exc)
        self._logger.info("Marked rental id=%s as returned", rental_id)
        return OperationResult.ok("Rental marked as returned", rental=rental)

    def list_all(self) -> OperationResult:
        return OperationResult.ok(rentals=self._store.load().rentals)

